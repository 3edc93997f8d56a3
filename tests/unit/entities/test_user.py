"""Unit tests for the User entity."""

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from cloudflare_entities import FieldTypeError, MissingFieldError, User

GET_SET_DATA = [
    ("id", "7c5dae5552338874e5053f2534d2767a"),
    ("email", "user@example.com"),
    ("first_name", "John"),
    ("last_name", "Appleseed"),
    ("username", "cfuser12345"),
    ("telephone", "+1 123-123-1234"),
    ("country", "US"),
    ("zipcode", "12345"),
    ("created_on", datetime.now(UTC) - timedelta(days=730)),
    ("modified_on", datetime.now(UTC) - timedelta(days=730)),
    ("two_factor_authentication_enabled", False),
]


class TestUserAccessors:
    """Test the fluent getter/setter pairs."""

    @pytest.mark.parametrize(("field_name", "value"), GET_SET_DATA)
    def test_get_set(self, field_name, value):
        """Mutators should be fluent and accessors give back exactly what was set."""
        user = User()
        field = User.field_map.by_field_name(field_name)

        assert field.setter(user, value) is user
        assert field.getter(user) == value

    def test_chained_mutators(self):
        """Mutator calls should compose into a single chain."""
        user = (
            User()
            .set_first_name("John")
            .set_last_name("Appleseed")
            .set_two_factor_authentication_enabled(True)
        )

        assert user.get_first_name() == "John"
        assert user.get_last_name() == "Appleseed"
        assert user.get_two_factor_authentication_enabled() is True

    def test_datetime_stored_in_utc(self):
        """Aware datetimes in other zones should be stored as UTC instants."""
        eastern = timezone(timedelta(hours=-4))
        user = User().set_created_on(datetime(2011, 7, 28, 13, 19, tzinfo=eastern))

        assert user.get_created_on() == datetime(2011, 7, 28, 17, 19, tzinfo=UTC)
        assert user.get_created_on().utcoffset() == timedelta(0)

    def test_naive_datetime_taken_as_utc(self):
        """Naive datetimes should be interpreted as UTC."""
        user = User().set_modified_on(datetime(2011, 7, 28, 17, 19))

        assert user.get_modified_on() == datetime(2011, 7, 28, 17, 19, tzinfo=UTC)

    def test_setter_rejects_wrong_type(self):
        """Setters only enforce the declared type."""
        with pytest.raises(ValidationError):
            User().set_email(["user@example.com"])

    def test_no_business_validation(self):
        """Any string is accepted as an email."""
        user = User().set_email("not-a-valid-email")
        assert user.get_email() == "not-a-valid-email"


class TestUserDefaults:
    """Test empty construction versus the explicit defaults factory."""

    def test_bare_constructor_leaves_fields_unset(self):
        """Should leave every field None, timestamps included."""
        user = User()

        assert user.get_created_on() is None
        assert user.get_modified_on() is None
        assert user.get_id() is None

    def test_with_defaults_stamps_now(self):
        """with_defaults should set created_on and modified_on to now in UTC."""
        before = datetime.now(UTC)
        user = User.with_defaults()
        after = datetime.now(UTC)

        assert before <= user.get_created_on() <= after
        assert before <= user.get_modified_on() <= after
        assert user.get_created_on().tzinfo is not None
        assert user.get_email() is None


class TestUserSerialization:
    """Test the User wire contract."""

    def test_whole_second_date_format(self):
        """User timestamps are emitted without fractional seconds."""
        user = (
            User()
            .set_created_on(datetime(2011, 7, 28, 17, 19, 0, tzinfo=UTC))
            .set_modified_on(datetime(2011, 7, 28, 17, 19, 1, tzinfo=UTC))
        )

        wire = user.serialize()

        assert wire["created_on"] == "2011-07-28T17:19:00Z"
        assert wire["modified_on"] == "2011-07-28T17:19:01Z"

    def test_unset_fields_are_emitted(self):
        """Serialization never omits keys."""
        wire = User().serialize()

        assert list(wire) == User.field_map.wire_keys()
        assert all(value is None for value in wire.values())

    def test_sample_document_round_trip(self, user_document):
        """Hydrating then serializing should reproduce the sample document."""
        user = User.hydrate(json.dumps(user_document))
        wire = user.serialize()

        assert wire == user_document
        assert list(wire) == list(user_document)
        assert wire["two_factor_authentication_enabled"] is False

    def test_hydrate_is_idempotent_through_serialize(self, user_document):
        """Should hydrate its own JSON output to an equal entity."""
        first = User.hydrate(json.dumps(user_document))
        second = User.hydrate(first.to_json())

        assert second == first

    def test_hydration_overwrites_timestamps(self, user_document):
        """Timestamps come from the document, not from now."""
        user = User.hydrate(json.dumps(user_document))

        assert user.get_created_on() == datetime(2014, 1, 1, 5, 20, tzinfo=UTC)

    def test_two_factor_flag_coerced_to_bool(self, user_document):
        """The two-factor flag is a boolean whatever the source encoding."""
        user_document["two_factor_authentication_enabled"] = 0
        user = User.hydrate(json.dumps(user_document))

        assert user.serialize()["two_factor_authentication_enabled"] is False

        user_document["two_factor_authentication_enabled"] = "true"
        user = User.hydrate(json.dumps(user_document))

        assert user.serialize()["two_factor_authentication_enabled"] is True

    def test_offset_timestamps_normalized(self, user_document):
        """Should emit an offset timestamp as the same instant in Z form."""
        user_document["created_on"] = "2014-01-01T07:20:00+02:00"
        user = User.hydrate(json.dumps(user_document))

        assert user.serialize()["created_on"] == "2014-01-01T05:20:00Z"

    def test_numeric_zipcode_becomes_string(self, user_document):
        """Numbers on the wire are stored as strings in string fields."""
        user_document["zipcode"] = 12345
        user = User.hydrate(json.dumps(user_document))

        assert user.get_zipcode() == "12345"

    def test_missing_field_fails(self, user_document):
        """A document missing a mapped key must fail, not default."""
        del user_document["zipcode"]
        del user_document["email"]

        with pytest.raises(MissingFieldError) as exc_info:
            User.hydrate(json.dumps(user_document))

        assert exc_info.value.missing == ("email", "zipcode")
        assert exc_info.value.entity == "User"

    def test_uncoercible_timestamp_fails(self, user_document):
        """Should chain the pydantic ValidationError as the cause."""
        user_document["modified_on"] = "last tuesday"

        with pytest.raises(FieldTypeError) as exc_info:
            User.hydrate(json.dumps(user_document))

        assert exc_info.value.wire_key == "modified_on"
        assert isinstance(exc_info.value.__cause__, ValidationError)
