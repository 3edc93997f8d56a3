"""Exceptions raised while hydrating or serializing entities."""

from __future__ import annotations

from collections.abc import Sequence


class EntityError(Exception):
    """Base class for all entity layer errors."""


class HydrationError(EntityError):
    """Raised when an entity cannot be built from a wire document."""


class MalformedDocumentError(HydrationError, ValueError):
    """The document is not valid JSON or does not have the expected shape."""


class MissingFieldError(HydrationError):
    """One or more mapped wire keys are absent from the document."""

    def __init__(self, entity: str, missing: Sequence[str]):
        self.entity = entity
        self.missing = tuple(missing)
        super().__init__(
            f"{entity} document is missing required keys: {', '.join(self.missing)}"
        )


class UnexpectedFieldError(HydrationError):
    """The document carries wire keys the entity does not map (strict mode)."""

    def __init__(self, entity: str, unexpected: Sequence[str]):
        self.entity = entity
        self.unexpected = tuple(unexpected)
        super().__init__(
            f"{entity} document has unmapped keys: {', '.join(self.unexpected)}"
        )


class FieldTypeError(EntityError, TypeError):
    """A value cannot be coerced to the declared type of its field."""

    def __init__(self, entity: str, wire_key: str, value: object):
        self.entity = entity
        self.wire_key = wire_key
        self.value = value
        super().__init__(f"{entity}.{wire_key}: cannot coerce {value!r}")


class SerializationError(EntityError):
    """The entity is not in a state that can be serialized."""
