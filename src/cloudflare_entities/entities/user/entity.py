"""User domain entity."""

from datetime import datetime
from typing import ClassVar, Self

from pydantic import Field

from cloudflare_entities.core.codecs import (
    WHOLE_SECONDS_FORMAT,
    BoolCodec,
    DateTimeCodec,
    UtcDateTime,
)
from cloudflare_entities.entities._base import Entity, FieldMap, WireField

DATE_FORMAT = WHOLE_SECONDS_FORMAT


class User(Entity):
    """The currently logged in/authenticated user.

    Wire shape::

        {
            "id": "7c5dae5552338874e5053f2534d2767a",
            "email": "user@example.com",
            "first_name": "John",
            "last_name": "Appleseed",
            "username": "cfuser12345",
            "telephone": "+1 123-123-1234",
            "country": "US",
            "zipcode": "12345",
            "created_on": "2014-01-01T05:20:00Z",
            "modified_on": "2014-01-01T05:20:00Z",
            "two_factor_authentication_enabled": false
        }

    Timestamps are emitted without fractional seconds.
    """

    id: str | None = Field(default=None, description="User identifier tag")
    email: str | None = Field(default=None, description="Contact email address")
    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    username: str | None = Field(
        default=None,
        description="Username used to access other services, like support",
    )
    telephone: str | None = Field(default=None, description="User's telephone number")
    country: str | None = Field(default=None, description="Country the user lives in")
    zipcode: str | None = Field(default=None, description="Zip or postal code")
    created_on: UtcDateTime | None = Field(default=None, description="When the user signed up")
    modified_on: UtcDateTime | None = Field(
        default=None, description="Last time the user was modified"
    )
    two_factor_authentication_enabled: bool | None = Field(
        default=None, description="Whether two-factor authentication is enabled"
    )

    default_now_fields: ClassVar[tuple[str, ...]] = ("created_on", "modified_on")

    def get_id(self) -> str | None:
        """Get the user identifier tag."""
        return self.id

    def set_id(self, id: str | None) -> Self:
        """Set the user identifier tag."""
        self.id = id
        return self

    def get_email(self) -> str | None:
        """Get the contact email address."""
        return self.email

    def set_email(self, email: str | None) -> Self:
        """Set the contact email address."""
        self.email = email
        return self

    def get_first_name(self) -> str | None:
        """Get the user's first name."""
        return self.first_name

    def set_first_name(self, first_name: str | None) -> Self:
        """Set the user's first name."""
        self.first_name = first_name
        return self

    def get_last_name(self) -> str | None:
        """Get the user's last name."""
        return self.last_name

    def set_last_name(self, last_name: str | None) -> Self:
        """Set the user's last name."""
        self.last_name = last_name
        return self

    def get_username(self) -> str | None:
        """Get the username used to access other services, like support."""
        return self.username

    def set_username(self, username: str | None) -> Self:
        """Set the username used to access other services, like support."""
        self.username = username
        return self

    def get_telephone(self) -> str | None:
        """Get the user's telephone number."""
        return self.telephone

    def set_telephone(self, telephone: str | None) -> Self:
        """Set the user's telephone number."""
        self.telephone = telephone
        return self

    def get_country(self) -> str | None:
        """Get the country in which the user lives."""
        return self.country

    def set_country(self, country: str | None) -> Self:
        """Set the country in which the user lives."""
        self.country = country
        return self

    def get_zipcode(self) -> str | None:
        """Get the zip or postal code where the user lives."""
        return self.zipcode

    def set_zipcode(self, zipcode: str | None) -> Self:
        """Set the zip or postal code where the user lives."""
        self.zipcode = zipcode
        return self

    def get_created_on(self) -> datetime | None:
        """Get when the user signed up."""
        return self.created_on

    def set_created_on(self, created_on: datetime | None) -> Self:
        """Set when the user signed up. Stored normalized to UTC."""
        self.created_on = created_on
        return self

    def get_modified_on(self) -> datetime | None:
        """Get the last time the user was modified."""
        return self.modified_on

    def set_modified_on(self, modified_on: datetime | None) -> Self:
        """Set the last time the user was modified. Stored normalized to UTC."""
        self.modified_on = modified_on
        return self

    def get_two_factor_authentication_enabled(self) -> bool | None:
        """Get whether two-factor authentication is enabled for the account."""
        return self.two_factor_authentication_enabled

    def set_two_factor_authentication_enabled(self, enabled: bool | None) -> Self:
        """Set whether two-factor authentication is enabled for the account."""
        self.two_factor_authentication_enabled = enabled
        return self

    field_map: ClassVar[FieldMap] = FieldMap(
        WireField("id", "id", get_id, set_id),
        WireField("email", "email", get_email, set_email),
        WireField("first_name", "first_name", get_first_name, set_first_name),
        WireField("last_name", "last_name", get_last_name, set_last_name),
        WireField("username", "username", get_username, set_username),
        WireField("telephone", "telephone", get_telephone, set_telephone),
        WireField("country", "country", get_country, set_country),
        WireField("zipcode", "zipcode", get_zipcode, set_zipcode),
        WireField(
            "created_on", "created_on", get_created_on, set_created_on,
            DateTimeCodec(DATE_FORMAT),
        ),
        WireField(
            "modified_on", "modified_on", get_modified_on, set_modified_on,
            DateTimeCodec(DATE_FORMAT),
        ),
        WireField(
            "two_factor_authentication_enabled",
            "two_factor_authentication_enabled",
            get_two_factor_authentication_enabled,
            set_two_factor_authentication_enabled,
            BoolCodec(),
        ),
    )
