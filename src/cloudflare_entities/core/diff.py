"""Field-by-field comparison of two entities of the same type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cloudflare_entities.entities._base import Entity


@dataclass(frozen=True)
class FieldChange:
    """A field whose wire value differs between two entities."""

    wire_key: str
    field_name: str
    left: Any
    right: Any


def diff_entities(left: Entity, right: Entity) -> list[FieldChange]:
    """Compare two entities through their field map.

    Values are compared in their serialized (wire) form, so two instants in
    different timezones that format identically are equal. Changes are
    returned in field map order.

    Raises:
        TypeError: If the entities are not of the same class.
    """
    if type(left) is not type(right):
        raise TypeError(
            f"cannot diff {type(left).__name__} against {type(right).__name__}"
        )

    left_wire = left.serialize()
    right_wire = right.serialize()
    return [
        FieldChange(wire_key, field_name, left_wire[wire_key], right_wire[wire_key])
        for wire_key, field_name in left.field_map.pairs()
        if left_wire[wire_key] != right_wire[wire_key]
    ]
