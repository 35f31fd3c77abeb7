"""Addition, subtraction, multiplication and division of decimals."""

from __future__ import annotations

from .comparison import is_equal, is_greater
from .value import WORD_MASK, Decimal, DivisionByZeroError
from .wide import WideDecimal, normalize

_TOP_WORD_SHIFT = 192
_ZERO = Decimal()


def _require_valid(first: Decimal, second: Decimal) -> None:
    first.require_valid()
    second.require_valid()


def _difference(minuend: WideDecimal, subtrahend: WideDecimal) -> WideDecimal:
    result = WideDecimal(minuend.mantissa)
    result.subtract(subtrahend)
    return result


def add(first: Decimal, second: Decimal) -> Decimal:
    """The sum of two decimals, rounded to fit."""
    _require_valid(first, second)
    wide_first, wide_second = normalize(first, second)
    sign_first, sign_second = wide_first.negative, wide_second.negative
    abs_first, abs_second = first.with_sign(False), second.with_sign(False)

    if sign_first == sign_second:
        result = WideDecimal(wide_first.mantissa)
        result.add(wide_second)
        result.negative = sign_first
    elif is_greater(abs_first, abs_second):
        result = _difference(wide_first, wide_second)
        result.negative = sign_first
    else:
        result = _difference(wide_second, wide_first)
        result.negative = sign_second

    result.scale = max(first.scale, second.scale)
    return result.to_decimal()


def sub(first: Decimal, second: Decimal) -> Decimal:
    """The difference first - second, rounded to fit."""
    _require_valid(first, second)
    sign_first, sign_second = first.negative, second.negative
    abs_first, abs_second = first.with_sign(False), second.with_sign(False)
    wide_first, wide_second = normalize(abs_first, abs_second)

    if sign_first != sign_second:
        result = WideDecimal(wide_first.mantissa)
        result.add(wide_second)
        result.negative = sign_first
    elif is_greater(abs_first, abs_second):
        result = _difference(wide_first, wide_second)
        result.negative = sign_first
    else:
        result = _difference(wide_second, wide_first)
        result.negative = not sign_first

    result.scale = max(first.scale, second.scale)
    return result.to_decimal()


def mul(first: Decimal, second: Decimal) -> Decimal:
    """The product of two decimals, rounded to fit."""
    _require_valid(first, second)
    wide_first, wide_second = normalize(first, second)
    result = WideDecimal(
        0,
        wide_first.scale + wide_second.scale,
        wide_first.negative or wide_second.negative,
    )

    while wide_first.mantissa & WORD_MASK:
        if wide_first.divide(2):
            result.add(wide_second)
        wide_second.multiply(2)
        if result.mantissa >> _TOP_WORD_SHIFT:
            wide_second.divide(10)
            result.divide(10)
            result.scale -= 1

    return result.to_decimal()


def div(first: Decimal, second: Decimal) -> Decimal:
    """The quotient first / second, rounded to fit."""
    _require_valid(first, second)
    if is_equal(second, _ZERO):
        raise DivisionByZeroError("division by zero")

    dividend, divisor = normalize(first, second)
    dividend.negative = divisor.negative = False
    original_divisor = divisor.mantissa
    result = WideDecimal()
    delta = 0

    if dividend.mantissa:
        while not dividend.mantissa >> _TOP_WORD_SHIFT:
            dividend.multiply(10)
            delta += 1
    while not divisor.mantissa >> _TOP_WORD_SHIFT:
        divisor.multiply(10)
        delta -= 1

    while True:
        while dividend.mantissa > divisor.mantissa:
            dividend.subtract(divisor)
            low = (result.mantissa + 1) & WORD_MASK
            result.mantissa = (result.mantissa & ~WORD_MASK) | low
        done = divisor.mantissa == original_divisor or dividend.mantissa == 0
        if not done:
            result.multiply(10)
            delta += 1
        divisor.divide(10)
        if done:
            break

    result.scale = result.scale + max(dividend.scale - divisor.scale, 0) + delta
    result.negative = first.negative != second.negative
    return result.to_decimal()