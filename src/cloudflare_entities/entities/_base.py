"""Field map and the hydrate/serialize contract shared by every entity."""

import json
from collections.abc import Callable, Iterator, Mapping
from typing import Any, ClassVar, NamedTuple, Self

from loguru import logger
from pydantic import BaseModel, ConfigDict

from cloudflare_entities.core.codecs import Codec, utc_now
from cloudflare_entities.core.exceptions import (
    EntityError,
    FieldTypeError,
    MalformedDocumentError,
    MissingFieldError,
    UnexpectedFieldError,
)
from cloudflare_entities.runtime.settings import get_settings


class WireField(NamedTuple):
    """One row of a field map: a wire key bound to an entity field.

    ``getter`` and ``setter`` are the entity's own accessor functions, captured
    when the entity class is defined.
    """

    wire_key: str
    field_name: str
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], Any]
    codec: Codec = Codec()


class FieldMap:
    """Ordered, immutable table of :class:`WireField` rows.

    Serialization and hydration both walk this table, in this order, so the
    two operations mirror each other.
    """

    def __init__(self, *fields: WireField):
        self._fields = tuple(fields)
        self._by_wire_key = {f.wire_key: f for f in self._fields}
        self._by_field_name = {f.field_name: f for f in self._fields}

    def __iter__(self) -> Iterator[WireField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, wire_key: object) -> bool:
        return wire_key in self._by_wire_key

    def __repr__(self) -> str:
        return f"FieldMap({', '.join(self.wire_keys())})"

    def pairs(self) -> list[tuple[str, str]]:
        """Return ``(wire_key, field_name)`` pairs in map order."""
        return [(f.wire_key, f.field_name) for f in self._fields]

    def wire_keys(self) -> list[str]:
        return [f.wire_key for f in self._fields]

    def field_names(self) -> list[str]:
        return [f.field_name for f in self._fields]

    def by_wire_key(self, wire_key: str) -> WireField:
        return self._by_wire_key[wire_key]

    def by_field_name(self, field_name: str) -> WireField:
        return self._by_field_name[field_name]

    def check(self, entity_cls: "type[Entity]") -> None:
        """Verify the map covers every model field of ``entity_cls`` exactly once.

        Raises:
            TypeError: If a wire key or field name is duplicated, a field is
                not mapped, or the map names something that is not a field.
        """
        name = entity_cls.__name__
        if len(self._by_wire_key) != len(self._fields):
            raise TypeError(f"{name} field map has duplicate wire keys")
        if len(self._by_field_name) != len(self._fields):
            raise TypeError(f"{name} field map has duplicate field names")

        model_fields = set(entity_cls.model_fields)
        mapped = set(self._by_field_name)
        if unmapped := model_fields - mapped:
            raise TypeError(f"{name} fields missing from field map: {sorted(unmapped)}")
        if unknown := mapped - model_fields:
            raise TypeError(f"{name} field map names unknown fields: {sorted(unknown)}")
        if stray := set(entity_cls.default_now_fields) - model_fields:
            raise TypeError(f"{name} default_now_fields names unknown fields: {sorted(stray)}")


def _decode(document: str | bytes, entity: str) -> Any:
    try:
        return json.loads(document)
    except json.JSONDecodeError as exc:
        logger.debug(f"Rejecting malformed {entity} document: {exc}")
        raise MalformedDocumentError(f"{entity} document is not valid JSON: {exc}") from exc


class Entity(BaseModel):
    """Base entity: a record of typed fields mapped to a JSON wire shape.

    Subclasses declare their pydantic fields, a fluent getter/setter pair per
    field, and a ``field_map`` built from those accessors. The bare
    constructor leaves every field unset (``None``); use :meth:`with_defaults`
    to stamp the timestamp fields with the current time.
    """

    model_config = ConfigDict(validate_assignment=True, coerce_numbers_to_str=True)

    field_map: ClassVar[FieldMap] = FieldMap()
    default_now_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.field_map.check(cls)

    @classmethod
    def with_defaults(cls) -> Self:
        """Create an empty entity whose ``default_now_fields`` are set to now (UTC)."""
        entity = cls()
        now = utc_now()
        for field_name in cls.default_now_fields:
            cls.field_map.by_field_name(field_name).setter(entity, now)
        return entity

    def serialize(self) -> dict[str, Any]:
        """Produce the wire representation, keyed and ordered by the field map.

        Every mapped key is emitted; unset fields are emitted as ``None``.

        Raises:
            FieldTypeError: If a stored value cannot be coerced to its wire type.
            SerializationError: If a required nested entity is unset.
        """
        name = type(self).__name__
        wire: dict[str, Any] = {}
        for field in self.field_map:
            value = field.getter(self)
            try:
                wire[field.wire_key] = field.codec.dump(value)
            except EntityError:
                logger.debug(f"Cannot serialize {name}.{field.wire_key}")
                raise
            except (ValueError, TypeError) as exc:
                raise FieldTypeError(name, field.wire_key, value) from exc
        return wire

    def to_json(self, **kwargs: Any) -> str:
        """Serialize and encode as a JSON string. ``kwargs`` go to ``json.dumps``."""
        return json.dumps(self.serialize(), **kwargs)

    @classmethod
    def hydrate(cls, document: str | bytes, *, strict: bool | None = None) -> Self:
        """Build an entity from a JSON object document.

        Args:
            document: JSON text holding one object in this entity's wire shape.
            strict: Reject wire keys absent from the field map. Defaults to the
                ``strict_wire_keys`` setting.

        Raises:
            MalformedDocumentError: If the document is not a JSON object.
            MissingFieldError: If any mapped wire key is absent.
            UnexpectedFieldError: In strict mode, if unmapped keys are present.
            FieldTypeError: If a value cannot be coerced to its field's type.
        """
        data = _decode(document, cls.__name__)
        if not isinstance(data, dict):
            raise MalformedDocumentError(
                f"{cls.__name__} document must be a JSON object, got {type(data).__name__}"
            )
        return cls.from_wire(data, strict=strict)

    @classmethod
    def hydrate_many(cls, document: str | bytes, *, strict: bool | None = None) -> list[Self]:
        """Build a list of entities from a JSON array of objects."""
        data = _decode(document, cls.__name__)
        if not isinstance(data, list):
            raise MalformedDocumentError(
                f"{cls.__name__} list document must be a JSON array, got {type(data).__name__}"
            )
        entities = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise MalformedDocumentError(
                    f"{cls.__name__} list item {index} must be a JSON object"
                )
            entities.append(cls.from_wire(item, strict=strict))
        return entities

    @classmethod
    def from_wire(cls, data: Mapping[str, Any], *, strict: bool | None = None) -> Self:
        """Build an entity from an already decoded wire mapping.

        The resolved ``strict`` flag also applies to nested entities.
        """
        name = cls.__name__
        if strict is None:
            strict = get_settings().strict_wire_keys
        logger.debug(f"Hydrating {name} from {len(data)} wire keys (strict={strict})")

        # Presence is checked for the whole map before any mutator runs.
        missing = [key for key in cls.field_map.wire_keys() if key not in data]
        if missing:
            logger.debug(f"{name} document is missing {missing}")
            raise MissingFieldError(name, missing)
        if strict:
            unexpected = [key for key in data if key not in cls.field_map]
            if unexpected:
                logger.debug(f"{name} document has unmapped keys {unexpected}")
                raise UnexpectedFieldError(name, unexpected)

        entity = cls()
        for field in cls.field_map:
            raw = data[field.wire_key]
            try:
                field.setter(entity, field.codec.load(raw, strict=strict))
            except EntityError:
                raise
            except (ValueError, TypeError) as exc:
                logger.debug(f"Cannot coerce {name}.{field.wire_key}={raw!r}: {exc}")
                raise FieldTypeError(name, field.wire_key, raw) from exc
        return entity
