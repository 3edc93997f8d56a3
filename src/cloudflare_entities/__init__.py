"""Data-transfer entities for the account API: users and billing resources."""

from cloudflare_entities.core.exceptions import (
    EntityError,
    FieldTypeError,
    HydrationError,
    MalformedDocumentError,
    MissingFieldError,
    SerializationError,
    UnexpectedFieldError,
)
from cloudflare_entities.entities import (
    ENTITY_TYPES,
    BillingHistory,
    BillingProfile,
    Entity,
    FieldMap,
    User,
    WireField,
    Zone,
)

__all__ = [
    "ENTITY_TYPES",
    "BillingHistory",
    "BillingProfile",
    "Entity",
    "EntityError",
    "FieldMap",
    "FieldTypeError",
    "HydrationError",
    "MalformedDocumentError",
    "MissingFieldError",
    "SerializationError",
    "UnexpectedFieldError",
    "User",
    "WireField",
    "Zone",
]
