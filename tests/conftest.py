"""
Pytest configuration and shared fixtures for fast-annotations tests.
"""

import pytest
from faker import Faker

from fast_annotations import ValidationContext

fake = Faker()


class ToBeTested:
    property_to_be_tested = "property_to_be_tested"


@pytest.fixture
def display_name():
    """A random, human-looking member display name."""
    return fake.word().capitalize() + " " + fake.word()


@pytest.fixture
def validation_context():
    """Context for a plain object, no member name."""
    return ValidationContext(object())


@pytest.fixture
def member_context():
    """Context pointing at `ToBeTested.property_to_be_tested`."""
    return ValidationContext(ToBeTested(), member_name="property_to_be_tested")
