"""Convert leaf text to and from 32-bit floating-point numbers."""

import math
import re
import struct
from typing import Annotated

from pydantic import AfterValidator, FiniteFloat

from flatxml.exceptions import InvalidNumber


# Decimal float literal: optional sign, digits with optional fraction, optional exponent.
_FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Enough significant digits to round-trip any single-precision value.
_MAX_F32_DIGITS = 9


def to_f32(value: float) -> float:
    """Round a Python float to the nearest IEEE-754 single-precision value.

    Raises:
        OverflowError: If the value is finite but outside the single-precision range
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _validate_f32(value: float) -> float:
    try:
        return to_f32(value)
    except OverflowError as e:
        raise ValueError(f"{value!r} is out of range for a 32-bit float") from e


F32 = Annotated[FiniteFloat, AfterValidator(_validate_f32)]
"""A finite float held at single precision."""


def parse_leaf(text: str, field: str | None = None) -> float:
    """Parse leaf text into a single-precision float.

    Args:
        text: Text content of the leaf element, already stripped
        field: Element name, used in the error message

    Returns:
        The parsed value rounded to single precision

    Raises:
        InvalidNumber: If the text is not a decimal float literal or
            does not fit in a 32-bit float

    Example:
        >>> parse_leaf("2.5")
        2.5
        >>> parse_leaf("-1e3")
        -1000.0
    """
    if not _FLOAT_LITERAL.fullmatch(text):
        raise InvalidNumber(field, text)
    try:
        return to_f32(float(text))
    except OverflowError as e:
        raise InvalidNumber(field, text) from e


def format_leaf(value: float) -> str:
    """Render a single-precision value as the shortest text that parses back to it.

    Example:
        >>> format_leaf(3.5)
        '3.5'
        >>> format_leaf(to_f32(0.1))
        '0.1'
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite value {value!r}")

    single = to_f32(value)
    for precision in range(1, _MAX_F32_DIGITS + 1):
        text = f"{single:.{precision}g}"
        if to_f32(float(text)) == single:
            break
    # repr() normalizes "3.5e+08" to "350000000.0" without adding digits
    return repr(float(text))
