import pytest

from apps.bookings.repositories import DjangoInventoryStore
from apps.bookings.tests.scenario import build_london_inventory


@pytest.fixture
def london(db):
    return build_london_inventory()


@pytest.fixture
def store():
    return DjangoInventoryStore()
