"""Shared fixtures for enummapper tests."""

import pytest

from enummapper import PlainCase, ValuedCase


@pytest.fixture
def plain_cases():
    return [PlainCase("CreditCard"), PlainCase("PayPal")]


@pytest.fixture
def valued_cases():
    return [
        ValuedCase("Active", "active"),
        ValuedCase("Inactive", "inactive"),
        ValuedCase("Pending", "pending"),
    ]
