"""Entities module with one package per resource.

Each entity package holds an ``entity.py`` with the record type, its fluent
accessors and its field map. ``ENTITY_TYPES`` lets generic tooling look an
entity up by its public name.
"""

from ._base import Entity, FieldMap, WireField
from .billing_history import BillingHistory
from .billing_profile import BillingProfile
from .user import User
from .zone import Zone

ENTITY_TYPES: dict[str, type[Entity]] = {
    "user": User,
    "billing-profile": BillingProfile,
    "billing-history": BillingHistory,
    "zone": Zone,
}

__all__ = [
    "ENTITY_TYPES",
    "BillingHistory",
    "BillingProfile",
    "Entity",
    "FieldMap",
    "User",
    "WireField",
    "Zone",
]
