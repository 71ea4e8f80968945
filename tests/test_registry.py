"""Tests for the variant tag registry."""

import pytest

from flatxml.exceptions import RegistryError
from flatxml.records import CONTROL_TAGS, PRICE_TAGS, Dollars, Euros, Power, Voltage
from flatxml.registry import VariantRegistry
from flatxml.types import Variant


class Amps(Variant):
    """Test variant."""


def test_resolve_registered_tags():
    """Test lookup of each registered tag."""
    assert CONTROL_TAGS.resolve("Voltage") is Voltage
    assert CONTROL_TAGS.resolve("Power") is Power
    assert PRICE_TAGS.resolve("Dollars") is Dollars
    assert PRICE_TAGS.resolve("Euros") is Euros


def test_resolve_is_case_sensitive():
    """Test that only exact tag matches resolve."""
    assert CONTROL_TAGS.resolve("voltage") is None
    assert CONTROL_TAGS.resolve("POWER") is None
    assert CONTROL_TAGS.resolve("Wattage") is None


def test_tags_keep_declaration_order():
    """Test that tags are reported in declaration order."""
    assert CONTROL_TAGS.tags == ("Voltage", "Power")
    assert PRICE_TAGS.tags == ("Dollars", "Euros")


def test_registry_is_inspectable():
    """Test container protocol on a registry."""
    assert len(CONTROL_TAGS) == 2
    assert "Voltage" in CONTROL_TAGS
    assert "Dollars" not in CONTROL_TAGS
    assert list(CONTROL_TAGS) == [("Voltage", Voltage), ("Power", Power)]
    assert "ControlKind" in repr(CONTROL_TAGS)


def test_tag_of_variant():
    """Test reverse lookup from a variant instance."""
    assert CONTROL_TAGS.tag_of(Voltage(1.0)) == "Voltage"
    assert PRICE_TAGS.tag_of(Euros(2.0)) == "Euros"


def test_tag_of_unregistered_variant():
    """Test that a variant from another union raises TypeError."""
    with pytest.raises(TypeError, match="Dollars is not a variant of ControlKind"):
        CONTROL_TAGS.tag_of(Dollars(1.0))


def test_duplicate_tag_rejected():
    """Test that two entries with the same tag are rejected."""
    with pytest.raises(RegistryError, match="duplicate tag <Voltage>"):
        VariantRegistry("Bad", [("Voltage", Voltage), ("Voltage", Power)])


def test_class_under_two_tags_rejected():
    """Test that one class registered under two tags is rejected."""
    with pytest.raises(RegistryError, match="both <Voltage> and <Volts>"):
        VariantRegistry("Bad", [("Voltage", Voltage), ("Volts", Voltage)])


def test_empty_registry_rejected():
    """Test that a registry needs at least one variant."""
    with pytest.raises(RegistryError, match="no variants"):
        VariantRegistry("Empty", [])


@pytest.mark.parametrize("tag", ["", None, 5])
def test_invalid_tag_rejected(tag):
    """Test that empty or non-string tags are rejected."""
    with pytest.raises(RegistryError):
        VariantRegistry("Bad", [(tag, Amps)])


def test_non_variant_rejected():
    """Test that constructors must be Variant subclasses."""
    with pytest.raises(RegistryError, match="not a Variant subclass"):
        VariantRegistry("Bad", [("Amps", float)])


def test_custom_registry():
    """Test a registry declared outside the library."""
    tags = VariantRegistry("Current", [("Amps", Amps)])
    assert tags.resolve("Amps") is Amps
    assert tags.tag_of(Amps(0.5)) == "Amps"
