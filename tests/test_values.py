"""Tests for leaf number parsing and formatting."""

import pytest
from pydantic import TypeAdapter, ValidationError

from flatxml.exceptions import InvalidNumber
from flatxml.values import F32, format_leaf, parse_leaf, to_f32


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.5", 2.5),
        ("-1e3", -1000.0),
        ("+.5", 0.5),
        ("3.", 3.0),
        ("0", 0.0),
        ("350000000", 350000000.0),
        ("2.5E-1", 0.25),
    ],
)
def test_parse_leaf_accepts_float_literals(text, expected):
    """Test standard decimal float literals."""
    assert parse_leaf(text) == expected


def test_parse_leaf_rounds_to_single_precision():
    """Test that parsed values are held at 32-bit precision."""
    value = parse_leaf("0.1")
    assert value == to_f32(0.1)
    assert value != 0.1


@pytest.mark.parametrize("text", ["abc", "", "1.2.3", "1_000", "inf", "nan", "0x10", "1e", " 2.5"])
def test_parse_leaf_rejects_non_numbers(text):
    """Test that anything but a finite decimal literal is rejected."""
    with pytest.raises(InvalidNumber) as exc_info:
        parse_leaf(text, field="Voltage")

    assert exc_info.value.field == "Voltage"
    assert exc_info.value.text == text


def test_parse_leaf_rejects_out_of_range():
    """Test that values too large for a 32-bit float are rejected."""
    with pytest.raises(InvalidNumber):
        parse_leaf("1e39")


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.5, "3.5"),
        (6.0, "6.0"),
        (-2.0, "-2.0"),
        (25.5, "25.5"),
        (350000000.0, "350000000.0"),
        (0.1, "0.1"),
        (1e-7, "1e-07"),
    ],
)
def test_format_leaf_shortest(value, expected):
    """Test that formatting uses the shortest text for the 32-bit value."""
    assert format_leaf(value) == expected


@pytest.mark.parametrize(
    "value",
    [0.0, -0.0, 1.0, 2.5, 3.14159, 1e-7, 123456.789, 3.4e38, 1e-38, -98765.4321, 350000000.0],
)
def test_format_then_parse_is_identity(value):
    """Test that formatted values parse back to the same 32-bit value."""
    single = to_f32(value)
    assert parse_leaf(format_leaf(single)) == single


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_format_leaf_rejects_non_finite(value):
    """Test that non-finite values cannot be encoded."""
    with pytest.raises(ValueError):
        format_leaf(value)


def test_f32_type_rounds():
    """Test the F32 annotated type rounds on validation."""
    adapter = TypeAdapter(F32)
    assert adapter.validate_python(0.1) == to_f32(0.1)
    assert adapter.validate_python("2.5") == 2.5


@pytest.mark.parametrize("value", [float("inf"), float("nan"), 1e39])
def test_f32_type_rejects_unrepresentable(value):
    """Test the F32 annotated type rejects values a 32-bit float can't hold."""
    with pytest.raises(ValidationError):
        TypeAdapter(F32).validate_python(value)
