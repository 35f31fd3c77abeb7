"""Sign change and rounding of decimals to whole numbers."""

from __future__ import annotations

from .value import Decimal


def negate(value: Decimal) -> Decimal:
    """The value with its sign flipped; the scale is kept."""
    value.require_valid()
    return value.with_sign(not value.negative)


def truncate(value: Decimal) -> Decimal:
    """Drop the fractional digits, rounding toward zero; the sign is kept."""
    value.require_valid()
    return Decimal.from_parts(value.mantissa // 10**value.scale, 0, value.negative)


def round_decimal(value: Decimal) -> Decimal:
    """Round to the nearest whole number, halves away from zero."""
    value.require_valid()
    if not value.scale:
        return value
    quotient, digit = divmod(value.mantissa // 10 ** (value.scale - 1), 10)
    if digit >= 5:
        quotient += 1
    return Decimal.from_parts(quotient, 0, value.negative)


def floor(value: Decimal) -> Decimal:
    """Round toward negative infinity."""
    value.require_valid()
    quotient, remainder = divmod(value.mantissa, 10**value.scale)
    if value.negative and remainder:
        quotient += 1
    return Decimal.from_parts(quotient, 0, value.negative)