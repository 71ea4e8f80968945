"""Shared test configuration and fixtures."""

import pytest

from flatxml.config import get_settings
from flatxml.records import DeviceRecord, Dollars, Power, ProductRecord


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def device():
    return DeviceRecord(name="MyDevice", control=Power(3.5))


@pytest.fixture
def product():
    return ProductRecord(name="Scrub Daddy", price=Dollars(6.0), discount=25.5)


@pytest.fixture
def product_without_discount():
    return ProductRecord(name="F-22 Raptor", price=Dollars(350000000.0))
