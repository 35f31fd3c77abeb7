"""A 128-bit decimal: a 96-bit unsigned mantissa, a power-of-ten scale and a sign."""

from __future__ import annotations

from dataclasses import dataclass, replace

WORD_MASK = 0xFFFFFFFF
MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 28

_SCALE_SHIFT = 16
_SCALE_FIELD = 0xFF << _SCALE_SHIFT
_LOW_RESERVED = 0xFFFF
_HIGH_RESERVED = 0x7F << 24
_SIGN_BIT = 1 << 31


class DecimalError(Exception):
    """Base class for every error raised on decimals."""


class InvalidDecimalError(DecimalError, ValueError):
    """The flags word has reserved bits set or a scale above 28."""


class TooLargeError(DecimalError, OverflowError):
    """The result is too large to fit, or positive infinity."""


class TooSmallError(DecimalError, OverflowError):
    """The result is too small to fit, or negative infinity."""


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """The divisor is zero."""


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""


@dataclass(frozen=True)
class Decimal:
    """Four 32-bit words: low, middle and high mantissa words and the flags word.

    The flags word holds the scale in bits 16-23 and the sign in bit 31;
    every other bit must be zero for the value to be valid.
    """

    low: int = 0
    mid: int = 0
    high: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        for name in ("low", "mid", "high", "flags"):
            word = getattr(self, name)
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                raise ValueError(f"{name} word out of range: {word!r}")

    @property
    def mantissa(self) -> int:
        """The 96-bit unsigned integer coefficient."""
        return self.low | (self.mid << 32) | (self.high << 64)

    @property
    def scale(self) -> int:
        """The power of ten the mantissa is divided by."""
        return (self.flags & _SCALE_FIELD) >> _SCALE_SHIFT

    @property
    def negative(self) -> bool:
        """Whether the sign bit is set."""
        return bool(self.flags & _SIGN_BIT)

    @property
    def bits(self) -> tuple[int, int, int, int]:
        """The four words in memory order."""
        return (self.low, self.mid, self.high, self.flags)

    def is_valid(self) -> bool:
        """True when no reserved bit is set and the scale is at most 28."""
        return (
            not self.flags & _LOW_RESERVED
            and not self.flags & _HIGH_RESERVED
            and self.scale <= MAX_SCALE
        )

    def require_valid(self) -> Decimal:
        """Return self, or raise InvalidDecimalError if the value is malformed."""
        if not self.is_valid():
            raise InvalidDecimalError(f"malformed decimal flags: {self.flags:#010x}")
        return self

    def with_sign(self, negative: bool) -> Decimal:
        """A copy with the sign bit set or cleared; other bits are kept."""
        flags = self.flags | _SIGN_BIT if negative else self.flags & ~_SIGN_BIT
        return replace(self, flags=flags)

    @staticmethod
    def from_parts(mantissa: int, scale: int, negative: bool = False) -> Decimal:
        """Build a decimal from its coefficient, scale and sign."""
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa does not fit in 96 bits: {mantissa}")
        if not 0 <= scale <= 0xFF:
            raise ValueError(f"scale does not fit in 8 bits: {scale}")
        flags = (scale << _SCALE_SHIFT) | (_SIGN_BIT if negative else 0)
        return Decimal(
            mantissa & WORD_MASK,
            (mantissa >> 32) & WORD_MASK,
            (mantissa >> 64) & WORD_MASK,
            flags,
        )

    def __str__(self) -> str:
        digits = str(self.mantissa)
        scale = self.scale
        if scale:
            digits = digits.rjust(scale + 1, "0")
            digits = f"{digits[:-scale]}.{digits[-scale:]}"
        return f"-{digits}" if self.negative else digits