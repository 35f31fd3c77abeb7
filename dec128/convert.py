"""Conversions between decimals and Python ints and single-precision floats."""

from __future__ import annotations

import math
import struct
from fractions import Fraction

from .value import ConversionError, Decimal
from .wide import WideDecimal

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
MAX_FLOAT = 79228162514264337593543950335.0
MIN_FLOAT = 1e-28
_FLOAT32_LIMIT = 3.4028235677973366e38


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def from_int(value: int) -> Decimal:
    """A decimal equal to a 32-bit signed integer."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise ConversionError(f"integer out of 32-bit range: {value}")
    return Decimal.from_parts(abs(value), 0, value < 0)


def to_int(value: Decimal) -> int:
    """The value truncated toward zero, as a 32-bit signed integer."""
    value.require_valid()
    whole = value.mantissa // 10**value.scale
    limit = -INT32_MIN if value.negative else INT32_MAX
    if whole > limit:
        raise ConversionError(f"{value} does not fit in a 32-bit integer")
    return -whole if value.negative else whole


def _significant_digits(number: float) -> tuple[int, int]:
    """Seven significant digits of a positive number, and their scale."""
    if number == 0:
        return 0, 0
    scale = min(6 - math.floor(math.log10(number)), 28)
    scaled = Fraction(number) * Fraction(10) ** scale
    digits = int(scaled)
    if scaled - digits >= Fraction(1, 2):
        digits += 1
    return digits, scale


def from_float(value: float) -> Decimal:
    """A decimal holding the single-precision value to seven significant digits."""
    if math.isinf(value) or math.isnan(value) or abs(value) > _FLOAT32_LIMIT:
        raise ConversionError(f"cannot convert {value!r} to a decimal")
    number = _f32(value)
    magnitude = abs(number)
    if magnitude > MAX_FLOAT or 0 < magnitude < MIN_FLOAT:
        raise ConversionError(f"{value!r} is out of the decimal range")

    negative = number < 0
    digits, scale = _significant_digits(magnitude)
    if scale > 0:
        while digits % 10 == 0 and scale:
            digits //= 10
            scale -= 1
    elif scale < 0:
        wide = WideDecimal(digits)
        wide.multiply(10, -scale)
        digits, scale = wide.to_decimal().mantissa, 0
    return Decimal.from_parts(digits, scale, negative)


def to_float(value: Decimal) -> float:
    """The value as the nearest single-precision float."""
    value.require_valid()
    whole = _f32(
        _f32(value.high) * 2.0**64 + _f32(value.mid) * 2.0**32 + _f32(value.low)
    )
    result = _f32(whole / math.pow(10, value.scale))
    return -result if value.negative else result