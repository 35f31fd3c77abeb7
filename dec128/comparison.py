"""Ordering and equality of decimals, independent of their scales."""

from __future__ import annotations

from .value import Decimal
from .wide import mantissa_equal, mantissa_greater, normalize


def _order(first: Decimal, second: Decimal) -> int:
    """Return -1, 0 or 1 as first is less than, equal to or greater than second."""
    first.require_valid()
    second.require_valid()
    wide_first, wide_second = normalize(first, second)
    same_sign = wide_first.negative == wide_second.negative
    if same_sign and mantissa_equal(wide_first, wide_second):
        return 0
    if same_sign:
        return 1 if mantissa_greater(wide_first, wide_second) else -1
    return -1 if wide_first.negative else 1


def is_equal(first: Decimal, second: Decimal) -> bool:
    """Whether the two values are numerically equal; all zeros are equal."""
    return _order(first, second) == 0


def is_greater(first: Decimal, second: Decimal) -> bool:
    """Whether first is strictly greater than second."""
    return _order(first, second) > 0


def is_less(first: Decimal, second: Decimal) -> bool:
    """Whether first is strictly less than second."""
    return _order(first, second) < 0


def is_less_or_equal(first: Decimal, second: Decimal) -> bool:
    """Whether first is less than or equal to second."""
    return _order(first, second) <= 0


def is_greater_or_equal(first: Decimal, second: Decimal) -> bool:
    """Whether first is greater than or equal to second."""
    return _order(first, second) >= 0


def is_not_equal(first: Decimal, second: Decimal) -> bool:
    """Whether the two values differ numerically."""
    return _order(first, second) != 0