"""A 224-bit working register used to carry out decimal arithmetic without loss."""

from __future__ import annotations

from copy import copy

from .value import MAX_MANTISSA, MAX_SCALE, Decimal, TooLargeError, TooSmallError

WIDE_BITS = 224
WIDE_MASK = (1 << WIDE_BITS) - 1
SCALE_MASK = 0xFF


class WideDecimal:
    """Mutable wide decimal: a 224-bit mantissa, an 8-bit scale and a sign.

    The mantissa wraps modulo 2**224 and the scale modulo 256, like the
    fixed-width fields they model.
    """

    __slots__ = ("_mantissa", "_scale", "negative")

    def __init__(self, mantissa: int = 0, scale: int = 0, negative: bool = False) -> None:
        self.mantissa = mantissa
        self.scale = scale
        self.negative = bool(negative)

    @property
    def mantissa(self) -> int:
        return self._mantissa

    @mantissa.setter
    def mantissa(self, value: int) -> None:
        self._mantissa = value & WIDE_MASK

    @property
    def scale(self) -> int:
        return self._scale

    @scale.setter
    def scale(self, value: int) -> None:
        self._scale = value & SCALE_MASK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WideDecimal):
            return NotImplemented
        return (self._mantissa, self._scale, self.negative) == (
            other._mantissa,
            other._scale,
            other.negative,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WideDecimal(mantissa={self._mantissa}, scale={self._scale}, negative={self.negative})"

    def __copy__(self) -> WideDecimal:
        return WideDecimal(self._mantissa, self._scale, self.negative)

    def multiply(self, factor: int, times: int = 1) -> int:
        """Multiply the mantissa by factor, times times; return the last carry.

        The carry out of the top bits is fed into the next round.
        """
        if factor < 0 or times < 0:
            raise ValueError("factor and times must not be negative")
        carry = 0
        for _ in range(times):
            product = self._mantissa * factor + carry
            self._mantissa = product & WIDE_MASK
            carry = product >> WIDE_BITS
        return carry

    def divide(self, divisor: int, times: int = 1) -> int:
        """Divide the mantissa by divisor, times times; return the last remainder.

        The remainder of one round is carried above the top bits of the next.
        """
        if divisor <= 0:
            raise ValueError("divisor must be positive")
        if times < 0:
            raise ValueError("times must not be negative")
        remainder = 0
        for _ in range(times):
            numerator = (remainder << WIDE_BITS) | self._mantissa
            self._mantissa, remainder = divmod(numerator, divisor)
        return remainder

    def add(self, other: WideDecimal) -> None:
        """Add the other mantissa to this one; scale and sign are untouched."""
        self.mantissa = self._mantissa + other._mantissa

    def subtract(self, other: WideDecimal) -> None:
        """Subtract the other mantissa from this one, wrapping below zero."""
        self.mantissa = self._mantissa - other._mantissa

    def increment(self) -> None:
        """Add one to the mantissa."""
        self.mantissa = self._mantissa + 1

    def bank_round(self, last_remainder: int = 0) -> int:
        """Drop the last decimal digit, rounding; return the new last remainder.

        A value with scale zero is left alone and last_remainder is returned.
        """
        if self._scale == 0:
            return last_remainder
        remainder = self.divide(10)
        self.scale = self._scale - 1
        if remainder > 5:
            self.increment()
        elif remainder == 5 and 0 < last_remainder < 5:
            self.increment()
        elif last_remainder == 0 and remainder == 5 and self._mantissa & 1:
            self.increment()
        return remainder

    def strip_zeros(self) -> None:
        """Remove trailing zero digits while the scale allows."""
        while self._scale and self._mantissa % 10 == 0:
            self._mantissa //= 10
            self._scale -= 1

    def to_decimal(self) -> Decimal:
        """Round into a 96-bit decimal, raising TooLargeError or TooSmallError."""
        work = copy(self)
        last_remainder = 0
        while work.mantissa > MAX_MANTISSA and work.scale:
            last_remainder = work.bank_round(last_remainder)
        work.strip_zeros()

        if work.mantissa > MAX_MANTISSA:
            if work.negative:
                raise TooSmallError("result is below the smallest decimal")
            raise TooLargeError("result is above the largest decimal")
        if work.scale > MAX_SCALE:
            while work.mantissa and work.scale > MAX_SCALE:
                last_remainder = work.bank_round(last_remainder)
            if work.scale > MAX_SCALE:
                raise TooSmallError("result is too close to zero")

        return Decimal.from_parts(work.mantissa, work.scale, work.negative)


def widen(value: Decimal) -> WideDecimal:
    """Copy a decimal's mantissa, scale and sign into a wide register."""
    return WideDecimal(value.mantissa, value.scale, value.negative)


def _align(reference: WideDecimal, other: WideDecimal) -> None:
    delta = reference.scale - other.scale
    other.multiply(10, delta)
    other.scale += delta


def normalize(first: Decimal, second: Decimal) -> tuple[WideDecimal, WideDecimal]:
    """Widen both values and bring them to the larger of the two scales.

    A zero operand ends with scale zero and a positive sign.
    """
    wide_first, wide_second = widen(first), widen(second)
    if first.scale > second.scale:
        _align(wide_first, wide_second)
    elif first.scale < second.scale:
        _align(wide_second, wide_first)

    for original, wide in ((first, wide_first), (second, wide_second)):
        if original.mantissa == 0:
            wide.scale = 0
            wide.negative = False
    return wide_first, wide_second


def mantissa_equal(first: WideDecimal, second: WideDecimal) -> bool:
    """Whether the two mantissas are equal, ignoring scale and sign."""
    return first.mantissa == second.mantissa


def mantissa_greater(first: WideDecimal, second: WideDecimal) -> bool:
    """Compare mantissas; when first is negative the order is reversed."""
    if first.mantissa == second.mantissa:
        return False
    if first.negative:
        return first.mantissa < second.mantissa
    return first.mantissa > second.mantissa