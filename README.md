# dec128

A decimal number type made of a 96-bit unsigned mantissa, a scale from 0 to 28
and a sign bit, packed into four 32-bit words. The package has arithmetic with
banker's rounding, comparison, rounding to whole numbers, and conversion to
and from 32-bit integers and single-precision floats. It needs nothing outside
the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Values

`dec128.value.Decimal` is a frozen dataclass with four 32-bit words: `low`,
`mid`, `high` and `flags`. The flags word holds the scale in bits 16-23 and the
sign in bit 31. The value it stands for is
`(-1)**negative * mantissa / 10**scale`.

```python
from dec128.value import Decimal

price = Decimal.from_parts(1999, 2)          # 19.99
price.mantissa, price.scale, price.negative  # (1999, 2, False)
price.bits                                   # (1999, 0, 0, 131072)
str(price)                                   # '19.99'
str(price.with_sign(True))                   # '-19.99'

Decimal(0x19, 0, 0, 0x00010000)              # 2.5, built from raw words
```

Each word must lie between 0 and `0xFFFFFFFF`. Otherwise the constructor raises
`ValueError`. `from_parts` raises `ValueError` when the mantissa needs more than
96 bits or the scale more than 8 bits.

A decimal is *valid* when no reserved bit of the flags word is set and its scale
is at most 28. `is_valid()` reports this. `require_valid()` returns the value or
raises `InvalidDecimalError`. Every operation below checks its operands in this
way.

Zero can carry a sign. `-0.00` and `0` compare equal.

## Errors

All errors raised on decimals derive from `dec128.value.DecimalError`:

* `InvalidDecimalError` (also a `ValueError`): an operand is malformed.
* `TooLargeError` (also an `OverflowError`): a positive result is too large.
* `TooSmallError` (also an `OverflowError`): a negative result is too large in
  magnitude, or a result is too close to zero to be represented.
* `DivisionByZeroError` (also a `ZeroDivisionError`): the divisor is zero.
* `ConversionError` (also a `ValueError`): a value cannot be converted.

## Arithmetic

`dec128.arithmetic` has `add`, `sub`, `mul` and `div`. Each takes two decimals
and returns a new one.

```python
from dec128.arithmetic import add, sub, div
from dec128.value import Decimal

a = Decimal.from_parts(25, 1)    # 2.5
b = Decimal.from_parts(100, 0)   # 100

str(add(a, b))   # '102.5'
str(sub(a, b))   # '-97.5'
str(div(Decimal.from_parts(3, 0), Decimal.from_parts(2, 0)))   # '1.5'
```

The work is done in a wider register. Results that need more than 96 bits or a
scale above 28 are rounded with banker's rounding. Trailing zeros after the
decimal point are then removed. `mul` marks its result negative when either
operand is negative.

## Comparison

`dec128.comparison` has `is_less`, `is_less_or_equal`, `is_greater`,
`is_greater_or_equal`, `is_equal` and `is_not_equal`. Each takes two decimals
and returns a `bool`. Values are compared by what they stand for, so `1.0`
equals `1.00`.

## Rounding

`dec128.rounding` provides:

* `negate(value)` flips the sign and keeps the scale.
* `truncate(value)` drops the fractional digits, rounding toward zero.
* `round_decimal(value)` rounds to the nearest whole number, with halves going
  away from zero.
* `floor(value)` rounds toward negative infinity.

Every result except `negate`'s has scale 0 and keeps the sign of the input.

## Conversion

`dec128.convert` provides:

* `from_int(value)` accepts an integer in the 32-bit signed range.
* `to_int(value)` truncates toward zero and returns an `int` in the 32-bit
  signed range.
* `from_float(value)` takes the single-precision value and keeps seven
  significant digits, at a scale of at most 28.
* `to_float(value)` returns the value rounded to single precision.

They raise `ConversionError` when a value falls outside those ranges.
`from_float` also raises it for infinities and NaN, and for magnitudes above
79228162514264337593543950335 or below 1e-28 (zero excepted).

## The wide register

`dec128.wide` holds `WideDecimal`, a mutable 224-bit working register that the
arithmetic is built on. It also has `widen`, `normalize`, `mantissa_equal` and
`mantissa_greater`. `WideDecimal.to_decimal()` performs the final banker's
rounding into a `Decimal`. Most users will not need this module directly.

## What it does not do

`Decimal` does not overload Python's arithmetic or comparison operators. Use
the functions above instead. There is no parser for decimal text; values are
built from words or from `from_parts`, `from_int` and `from_float`. The
package is a library only and installs no command.