"""Wire <-> entity value conversions.

A codec converts one field between its JSON wire representation and the
value stored on the entity. ``load`` runs during hydration, ``dump`` during
serialization. Every codec passes ``None`` through unchanged so that unset
fields are still emitted at their wire key.

Numeric, boolean and date-time coercion is delegated to pydantic's lax
validation, which is the same validation the entity models run on
assignment.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import AfterValidator, Field, TypeAdapter

from cloudflare_entities.core.exceptions import SerializationError

if TYPE_CHECKING:
    from cloudflare_entities.entities._base import Entity

# 2014-01-01T05:20:00Z
WHOLE_SECONDS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
# 2014-03-01T12:21:02.000000Z
FRACTIONAL_SECONDS_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to an aware UTC instant. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def utc_now() -> datetime:
    return datetime.now(UTC)


UtcDateTime = Annotated[datetime, AfterValidator(ensure_utc)]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]

_DATETIME = TypeAdapter(UtcDateTime)
_FLOAT = TypeAdapter(FiniteFloat)
_INT = TypeAdapter(int)
_BOOL = TypeAdapter(bool)


class Codec:
    """Identity conversion, used for plain string fields.

    ``strict`` is the hydration mode of the enclosing entity; only codecs that
    build nested entities use it.
    """

    def load(self, value: Any, *, strict: bool | None = None) -> Any:
        return value

    def dump(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return type(self).__name__


class DateTimeCodec(Codec):
    """Parses ISO-8601 strings into UTC instants and formats them with ``fmt``."""

    def __init__(self, fmt: str):
        self.fmt = fmt

    def load(self, value: Any, *, strict: bool | None = None) -> datetime | None:
        if value is None:
            return None
        return _DATETIME.validate_python(value)

    def dump(self, value: Any) -> str | None:
        if value is None:
            return None
        instant = _DATETIME.validate_python(value)
        # %Y is not zero-padded below year 1000 on every platform.
        return instant.strftime(self.fmt.replace("%Y", f"{instant.year:04d}"))

    def __repr__(self) -> str:
        return f"DateTimeCodec({self.fmt!r})"


class _AdapterCodec(Codec):
    adapter: TypeAdapter[Any]

    def load(self, value: Any, *, strict: bool | None = None) -> Any:
        if value is None:
            return None
        return self.adapter.validate_python(value)

    def dump(self, value: Any) -> Any:
        if value is None:
            return None
        return self.adapter.validate_python(value)


class FloatCodec(_AdapterCodec):
    """Finite floats only; ``NaN`` and infinities have no JSON encoding."""

    adapter = _FLOAT


class IntCodec(_AdapterCodec):
    adapter = _INT


class BoolCodec(_AdapterCodec):
    adapter = _BOOL


class NestedCodec(Codec):
    """Delegates to another entity's own hydrate/serialize contract."""

    def __init__(self, entity_cls: type[Entity], required: bool = True):
        self.entity_cls = entity_cls
        self.required = required

    def load(self, value: Any, *, strict: bool | None = None) -> Entity | None:
        if value is None or isinstance(value, self.entity_cls):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(
                f"expected a JSON object for {self.entity_cls.__name__}, "
                f"got {type(value).__name__}"
            )
        return self.entity_cls.from_wire(value, strict=strict)

    def dump(self, value: Any) -> dict[str, Any] | None:
        if value is None:
            if self.required:
                raise SerializationError(
                    f"{self.entity_cls.__name__} reference must be set before serialization"
                )
            return None
        if not isinstance(value, self.entity_cls):
            raise TypeError(
                f"expected a {self.entity_cls.__name__} instance, got {type(value).__name__}"
            )
        return value.serialize()

    def __repr__(self) -> str:
        return f"NestedCodec({self.entity_cls.__name__})"
