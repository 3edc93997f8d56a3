"""Shared fixtures: sample wire documents for every entity."""

import copy

import pytest

from cloudflare_entities.runtime.settings import reset_settings

USER_DOCUMENT = {
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
    "two_factor_authentication_enabled": False,
}

BILLING_PROFILE_DOCUMENT = {
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
    "created_on": "2014-03-01T12:21:02.0000Z",
}

BILLING_HISTORY_DOCUMENT = {
    "id": "b69a9f3492637782896352daae219e7d",
    "type": "charge",
    "action": "subscription",
    "description": "The billing item description",
    "occurred_at": "2014-03-01T12:21:59.3456Z",
    "amount": 20.99,
    "currency": "USD",
    "zone": {"name": "example.com"},
}


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def user_document() -> dict:
    return copy.deepcopy(USER_DOCUMENT)


@pytest.fixture
def billing_profile_document() -> dict:
    return copy.deepcopy(BILLING_PROFILE_DOCUMENT)


@pytest.fixture
def billing_history_document() -> dict:
    return copy.deepcopy(BILLING_HISTORY_DOCUMENT)
