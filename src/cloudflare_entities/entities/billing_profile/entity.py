"""Billing profile domain entity."""

from datetime import datetime
from typing import ClassVar, Self

from pydantic import Field

from cloudflare_entities.core.codecs import (
    FRACTIONAL_SECONDS_FORMAT,
    DateTimeCodec,
    IntCodec,
    UtcDateTime,
)
from cloudflare_entities.entities._base import Entity, FieldMap, WireField

DATE_FORMAT = FRACTIONAL_SECONDS_FORMAT


class BillingProfile(Entity):
    """A user billing profile.

    Wire shape::

        {
            "id": "0020c268dbf54e975e7fe8563df49d52",
            "first_name": "Bob",
            "last_name": "Smith",
            "address": "123 3rd St.",
            "address2": "Apt 123",
            "company": "CloudFlare",
            "city": "San Francisco",
            "state": "CA",
            "zipcode": "12345",
            "country": "US",
            "telephone": "+1 111-867-5309",
            "card_number": "xxxx-xxxx-xxxx-1234",
            "card_expiry_year": 2015,
            "card_expiry_month": 4,
            "vat": "aaa-123-987",
            "edited_on": "2014-03-01T12:21:02.0000Z",
            "created_on": "2014-03-01T12:21:02.0000Z"
        }

    The API names the modification timestamp ``edited_on`` rather than
    ``modified_on`` as on :class:`User`, and uses fractional seconds.
    """

    id: str | None = Field(default=None, description="Billing profile identifier tag")
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    address: str | None = Field(default=None, description="Street address")
    address2: str | None = Field(default=None, description="Apartment, suite, etc")
    company: str | None = Field(default=None)
    city: str | None = Field(default=None)
    state: str | None = Field(default=None, description="State or province")
    zipcode: str | None = Field(default=None)
    country: str | None = Field(default=None)
    telephone: str | None = Field(default=None)
    card_number: str | None = Field(
        default=None, description="Masked number of the credit card on file"
    )
    card_expiry_year: int | None = Field(default=None)
    card_expiry_month: int | None = Field(default=None)
    vat: str | None = Field(default=None, description="Value Added Tax ID")
    edited_on: UtcDateTime | None = Field(default=None)
    created_on: UtcDateTime | None = Field(default=None)

    default_now_fields: ClassVar[tuple[str, ...]] = ("edited_on", "created_on")

    def get_id(self) -> str | None:
        return self.id

    def set_id(self, id: str | None) -> Self:
        self.id = id
        return self

    def get_first_name(self) -> str | None:
        """Get the first name on the billing profile."""
        return self.first_name

    def set_first_name(self, first_name: str | None) -> Self:
        self.first_name = first_name
        return self

    def get_last_name(self) -> str | None:
        """Get the last name on the billing profile."""
        return self.last_name

    def set_last_name(self, last_name: str | None) -> Self:
        self.last_name = last_name
        return self

    def get_address(self) -> str | None:
        return self.address

    def set_address(self, address: str | None) -> Self:
        self.address = address
        return self

    def get_address2(self) -> str | None:
        return self.address2

    def set_address2(self, address2: str | None) -> Self:
        self.address2 = address2
        return self

    def get_company(self) -> str | None:
        return self.company

    def set_company(self, company: str | None) -> Self:
        self.company = company
        return self

    def get_city(self) -> str | None:
        return self.city

    def set_city(self, city: str | None) -> Self:
        self.city = city
        return self

    def get_state(self) -> str | None:
        return self.state

    def set_state(self, state: str | None) -> Self:
        self.state = state
        return self

    def get_zipcode(self) -> str | None:
        return self.zipcode

    def set_zipcode(self, zipcode: str | None) -> Self:
        self.zipcode = zipcode
        return self

    def get_country(self) -> str | None:
        return self.country

    def set_country(self, country: str | None) -> Self:
        self.country = country
        return self

    def get_telephone(self) -> str | None:
        return self.telephone

    def set_telephone(self, telephone: str | None) -> Self:
        self.telephone = telephone
        return self

    def get_card_number(self) -> str | None:
        """Get the masked number of the credit card on file."""
        return self.card_number

    def set_card_number(self, card_number: str | None) -> Self:
        self.card_number = card_number
        return self

    def get_card_expiry_year(self) -> int | None:
        """Get the year when the credit card on file expires."""
        return self.card_expiry_year

    def set_card_expiry_year(self, card_expiry_year: int | None) -> Self:
        self.card_expiry_year = card_expiry_year
        return self

    def get_card_expiry_month(self) -> int | None:
        """Get the month number of when the credit card on file expires."""
        return self.card_expiry_month

    def set_card_expiry_month(self, card_expiry_month: int | None) -> Self:
        self.card_expiry_month = card_expiry_month
        return self

    def get_vat(self) -> str | None:
        return self.vat

    def set_vat(self, vat: str | None) -> Self:
        self.vat = vat
        return self

    def get_edited_on(self) -> datetime | None:
        """Get when the profile was last modified."""
        return self.edited_on

    def set_edited_on(self, edited_on: datetime | None) -> Self:
        self.edited_on = edited_on
        return self

    def get_created_on(self) -> datetime | None:
        """Get when the profile was created."""
        return self.created_on

    def set_created_on(self, created_on: datetime | None) -> Self:
        self.created_on = created_on
        return self

    field_map: ClassVar[FieldMap] = FieldMap(
        WireField("id", "id", get_id, set_id),
        WireField("first_name", "first_name", get_first_name, set_first_name),
        WireField("last_name", "last_name", get_last_name, set_last_name),
        WireField("address", "address", get_address, set_address),
        WireField("address2", "address2", get_address2, set_address2),
        WireField("company", "company", get_company, set_company),
        WireField("city", "city", get_city, set_city),
        WireField("state", "state", get_state, set_state),
        WireField("zipcode", "zipcode", get_zipcode, set_zipcode),
        WireField("country", "country", get_country, set_country),
        WireField("telephone", "telephone", get_telephone, set_telephone),
        WireField("card_number", "card_number", get_card_number, set_card_number),
        WireField(
            "card_expiry_year", "card_expiry_year",
            get_card_expiry_year, set_card_expiry_year, IntCodec(),
        ),
        WireField(
            "card_expiry_month", "card_expiry_month",
            get_card_expiry_month, set_card_expiry_month, IntCodec(),
        ),
        WireField("vat", "vat", get_vat, set_vat),
        WireField(
            "edited_on", "edited_on", get_edited_on, set_edited_on,
            DateTimeCodec(DATE_FORMAT),
        ),
        WireField(
            "created_on", "created_on", get_created_on, set_created_on,
            DateTimeCodec(DATE_FORMAT),
        ),
    )
