import pytest

from dec128.arithmetic import add, div, mul, sub
from dec128.comparison import is_equal
from dec128.value import (
    Decimal,
    DivisionByZeroError,
    InvalidDecimalError,
    TooLargeError,
    TooSmallError,
)

M = 0xFFFFFFFF


def d(low, mid, high, flags):
    return Decimal(low, mid, high, flags)


ADD_CASES = [
    (d(0, 0, 0, 0), d(0, 0, 0, 0), d(0, 0, 0, 0)),
    (d(0, 0, 0, 0x80010000), d(0, 0, 0, 0), d(0, 0, 0, 0x80010000)),
    (d(1, 0, 0, 0x800E0000), d(6, 0, 0, 0x000F0000), d(4, 0, 0, 0x800F0000)),
    (d(0x19, 0, 0, 0x00010000), d(0x64, 0, 0, 0), d(0x401, 0, 0, 0x00010000)),
    (d(0x183, 0, 0, 0x00020000), d(0x4DA6, 0, 0, 0x00020000), d(0x4F29, 0, 0, 0x00020000)),
    (
        d(0x14490831, 0x00048E23, 0, 0x00070000),
        d(0x164214B7, 0x28, 0, 0x00040000),
        d(0x0669F309, 0x00052ABA, 0, 0x00070000),
    ),
    (d(1, 0, 0, 0), d(0x19, 0, 0, 0x00010000), d(0x23, 0, 0, 0x00010000)),
    (d(1, 0, 0, 0x001C0000), d(1, 0, 0, 0x001C0000), d(2, 0, 0, 0x001C0000)),
    (d(0x0001869F, 0, 0, 0x00050000), d(1, 0, 0, 0x00050000), d(0x000186A0, 0, 0, 0x00050000)),
    (d(0x0098967E, 0, 0, 0x80060000), d(2, 0, 0, 0x80060000), d(0x00989680, 0, 0, 0x80060000)),
    (
        d(0x79353447, 4, 0, 0x00010000),
        d(0xD927FFFF, 0xE1003B28, 4, 0x00140000),
        d(0x9F400000, 0x563581D8, 0x3E14F385, 0x00130000),
    ),
    (d(0xFFFFFFFD, M, M, 0), d(5, 0, 0, 0x00010000), d(0xFFFFFFFE, M, M, 0)),
    (d(0xFFFFFFFD, M, M, 0), d(0x33, 0, 0, 0x00020000), d(0xFFFFFFFE, M, M, 0)),
    (d(0xFFFFFFFD, M, M, 0), d(0x31, 0, 0, 0x00020000), d(0xFFFFFFFD, M, M, 0)),
    (d(0xFFFFFFFE, M, M, 0), d(5, 0, 0, 0x00010000), d(0xFFFFFFFE, M, M, 0)),
    (d(0xFFFFFFFE, M, M, 0), d(0x33, 0, 0, 0x00020000), d(M, M, M, 0)),
    (d(0xFFFFFFFE, M, M, 0), d(0x31, 0, 0, 0x00020000), d(0xFFFFFFFE, M, M, 0)),
]


@pytest.mark.parametrize("first, second, expected", ADD_CASES)
def test_add(first, second, expected):
    assert is_equal(add(first, second), expected)


@pytest.mark.parametrize(
    "first, second, error",
    [
        (d(8, 0, 0, 0x002D0000), d(0, 0, 0, 0), InvalidDecimalError),
        (d(0, 0, 0, 0), d(8, 0, 0, M), InvalidDecimalError),
        (d(M, M, M, 0), d(6, 0, 0, 0x00010000), TooLargeError),
        (d(M, M, M, 0), d(1, 0, 0, 0), TooLargeError),
        (d(M, M, M, 0x80000000), d(7, 0, 0, 0x80010000), TooSmallError),
        (d(M, M, M, 0x80000000), d(0xA, 0, 0, 0x80010000), TooSmallError),
    ],
)
def test_add_errors(first, second, error):
    with pytest.raises(error):
        add(first, second)


SUB_CASES = [
    (d(0x19, 0, 0, 0x00010000), d(0x19, 0, 0, 0x00010000), d(0, 0, 0, 0x00010000)),
    (d(0, 0, 0, 0), d(0, 0, 0, 0), d(0, 0, 0, 0)),
    (d(1, 0, 0, 0x800E0000), d(6, 0, 0, 0x000F0000), d(0x10, 0, 0, 0x800F0000)),
    (d(0x19, 0, 0, 0x00010000), d(0x64, 0, 0, 0), d(0x3CF, 0, 0, 0x80010000)),
    (d(0x183, 0, 0, 0x00020000), d(0x4DA6, 0, 0, 0x00020000), d(0x4C23, 0, 0, 0x80020000)),
    (d(1, 0, 0, 0), d(0x19, 0, 0, 0x00010000), d(0xF, 0, 0, 0x80010000)),
    (d(1, 0, 0, 0x001C0000), d(1, 0, 0, 0x001C0000), d(0, 0, 0, 0x001C0000)),
    (d(0x0001869F, 0, 0, 0x00050000), d(1, 0, 0, 0x00050000), d(0x0001869E, 0, 0, 0x00050000)),
    (d(0x0098967E, 0, 0, 0x80060000), d(2, 0, 0, 0x80060000), d(0x0098967C, 0, 0, 0x80060000)),
    (d(0xFFFFFFFD, M, M, 0x80000000), d(5, 0, 0, 0x00010000), d(0xFFFFFFFE, M, M, 0x80000000)),
    (d(0xFFFFFFFD, M, M, 0x80000000), d(0x33, 0, 0, 0x00020000), d(0xFFFFFFFE, M, M, 0x80000000)),
    (d(0xFFFFFFFD, M, M, 0x80000000), d(0x31, 0, 0, 0x00020000), d(0xFFFFFFFD, M, M, 0x80000000)),
    (d(0xFFFFFFFE, M, M, 0x80000000), d(5, 0, 0, 0x00010000), d(0xFFFFFFFE, M, M, 0x80000000)),
    (d(0xFFFFFFFE, M, M, 0x80000000), d(0x33, 0, 0, 0x00020000), d(M, M, M, 0x80000000)),
    (d(0xFFFFFFFE, M, M, 0x80000000), d(0x31, 0, 0, 0x00020000), d(0xFFFFFFFE, M, M, 0x80000000)),
    (d(0x190, 0, 0, 0x80000000), d(0x190, 0, 0, 0x80000000), d(0, 0, 0, 0x80000000)),
]


@pytest.mark.parametrize("first, second, expected", SUB_CASES)
def test_sub(first, second, expected):
    assert is_equal(sub(first, second), expected)


@pytest.mark.parametrize(
    "first, second, error",
    [
        (d(8, 0, 0, 0x81000100), d(0, 0, 0, 0), InvalidDecimalError),
        (d(0, 0, 0, 0), d(8, 0, 0, M), InvalidDecimalError),
        (d(6, 0, 0, 0x80010000), d(M, M, M, 0), TooSmallError),
        (d(1, 0, 0, 0x80000000), d(M, M, M, 0), TooSmallError),
        (d(1, 0, 0, 0), d(M, M, M, 0x80000000), TooLargeError),
        (d(0xA, 0, 0, 0), d(M, M, M, 0x80000000), TooLargeError),
    ],
)
def test_sub_errors(first, second, error):
    with pytest.raises(error):
        sub(first, second)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (d(0, 0, 0, 0), d(0, 0, 0, 0), d(0, 0, 0, 0)),
        (d(1, 0, 0, 0), d(0, 0, 0, 0), d(0, 0, 0, 0)),
        (d(0, 0, 0, 0), d(1, 0, 0, 0), d(0, 0, 0, 0)),
        (d(1, 0, 0, 0), d(1, 0, 0, 0), d(1, 0, 0, 0)),
        (d(1, 0, 0, 0x80000000), d(1, 0, 0, 0), d(1, 0, 0, 0x80000000)),
        (d(1, 0, 0, 0), d(1, 0, 0, 0x80000000), d(1, 0, 0, 0x80000000)),
    ],
)
def test_mul(first, second, expected):
    result = mul(first, second)
    assert is_equal(result, expected)


@pytest.mark.parametrize(
    "first, second, error",
    [
        (d(8, 0, 0, 0x81000000), d(0, 0, 0, 0), InvalidDecimalError),
        (d(0, 0, 0, 0), d(8, 0, 0, M), InvalidDecimalError),
        (d(M, M, M, 0), d(2, 0, 0, 0), TooLargeError),
        (d(M, M, M, 0), d(M, M, M, 0), TooLargeError),
        (d(M, M, M, 0x80080000), d(0xFF642CF2, M, M, 0), TooSmallError),
    ],
)
def test_mul_errors(first, second, error):
    with pytest.raises(error):
        mul(first, second)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (d(0xA, 0, 0, 0), d(5, 0, 0, 0), d(2, 0, 0, 0)),
        (d(0, 0, 0, 0), d(0xA, 0, 0, 0), d(0, 0, 0, 0)),
        (d(0x0098967F, 0, 0, 0x00070000), d(1, 0, 0, 0), d(0x0098967F, 0, 0, 0x00070000)),
        (d(0x000186A0, 0, 0, 0x00030000), d(5, 0, 0, 0), d(0x14, 0, 0, 0)),
        (d(0x007FEBFE, 0, 0, 0x00020000), d(2, 0, 0, 0), d(0x003FF5FF, 0, 0, 0x00020000)),
        (d(0x15C0748C, 0, 0, 0), d(0xD8B6, 0, 0, 0), d(0x19B2, 0, 0, 0)),
        (d(0x15C0748C, 0, 0, 0x80000000), d(0x19B2, 0, 0, 0x80000000), d(0xD8B6, 0, 0, 0)),
        (d(1, 0, 0, 0), d(2, 0, 0, 0), d(5, 0, 0, 0x00010000)),
        (d(3, 0, 0, 0), d(2, 0, 0, 0), d(0xF, 0, 0, 0x00010000)),
    ],
)
def test_div(first, second, expected):
    assert is_equal(div(first, second), expected)


@pytest.mark.parametrize(
    "first, second, error",
    [
        (d(2, 0, 0, 0x50), d(2, 0, 0, 0), InvalidDecimalError),
        (d(3, 0, 0, 0), d(3, 0, 0, 0x04000000), InvalidDecimalError),
        (d(M, M, M, 0), d(0x312, 0, 0, 0x00090000), TooLargeError),
        (d(0x204479BE, 0x6F, 0, 0x00040000), d(0, 0, 0, 0), DivisionByZeroError),
        (d(0xFA01F028, 1, 0, 0x80020000), d(0, 0, 0, 0x80080000), DivisionByZeroError),
        (d(0, 0, 0, 0x00040000), d(0, 0, 0, 0), DivisionByZeroError),
    ],
)
def test_div_errors(first, second, error):
    with pytest.raises(error):
        div(first, second)