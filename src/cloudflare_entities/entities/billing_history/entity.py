"""Billing history domain entity."""

from datetime import datetime
from typing import ClassVar, Self

from pydantic import Field

from cloudflare_entities.core.codecs import (
    FRACTIONAL_SECONDS_FORMAT,
    DateTimeCodec,
    FiniteFloat,
    FloatCodec,
    NestedCodec,
    UtcDateTime,
)
from cloudflare_entities.entities._base import Entity, FieldMap, WireField
from cloudflare_entities.entities.zone import Zone

DATE_FORMAT = FRACTIONAL_SECONDS_FORMAT


class BillingHistory(Entity):
    """One item of a user's billing history.

    Wire shape::

        {
            "id": "b69a9f3492637782896352daae219e7d",
            "type": "charge",
            "action": "subscription",
            "description": "The billing item description",
            "occurred_at": "2014-03-01T12:21:59.3456Z",
            "amount": 20.99,
            "currency": "USD",
            "zone": {"name": "example.com"}
        }

    The zone reference must be set before the item can be serialized.
    """

    id: str | None = Field(default=None, description="Billing item identifier tag")
    type: str | None = Field(default=None, description="The billing item type")
    action: str | None = Field(default=None, description="The billing item action")
    description: str | None = Field(default=None)
    occurred_at: UtcDateTime | None = Field(
        default=None, description="When the billing item was created"
    )
    amount: FiniteFloat | None = Field(default=None)
    currency: str | None = Field(
        default=None, description="Monetary unit in which pricing is displayed"
    )
    zone: Zone | None = Field(default=None)

    def get_id(self) -> str | None:
        return self.id

    def set_id(self, id: str | None) -> Self:
        self.id = id
        return self

    def get_type(self) -> str | None:
        return self.type

    def set_type(self, type: str | None) -> Self:
        self.type = type
        return self

    def get_action(self) -> str | None:
        return self.action

    def set_action(self, action: str | None) -> Self:
        self.action = action
        return self

    def get_description(self) -> str | None:
        return self.description

    def set_description(self, description: str | None) -> Self:
        self.description = description
        return self

    def get_occurred_at(self) -> datetime | None:
        return self.occurred_at

    def set_occurred_at(self, occurred_at: datetime | None) -> Self:
        self.occurred_at = occurred_at
        return self

    def get_amount(self) -> float | None:
        """Get the amount associated with this billing item."""
        return self.amount

    def set_amount(self, amount: float | None) -> Self:
        self.amount = amount
        return self

    def get_currency(self) -> str | None:
        return self.currency

    def set_currency(self, currency: str | None) -> Self:
        self.currency = currency
        return self

    def get_zone(self) -> Zone | None:
        """Get the zone the billing item applies to."""
        return self.zone

    def set_zone(self, zone: Zone | None) -> Self:
        self.zone = zone
        return self

    field_map: ClassVar[FieldMap] = FieldMap(
        WireField("id", "id", get_id, set_id),
        WireField("type", "type", get_type, set_type),
        WireField("action", "action", get_action, set_action),
        WireField("description", "description", get_description, set_description),
        WireField(
            "occurred_at", "occurred_at", get_occurred_at, set_occurred_at,
            DateTimeCodec(DATE_FORMAT),
        ),
        WireField("amount", "amount", get_amount, set_amount, FloatCodec()),
        WireField("currency", "currency", get_currency, set_currency),
        WireField("zone", "zone", get_zone, set_zone, NestedCodec(Zone)),
    )
