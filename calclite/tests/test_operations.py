from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from calclite.constants import BUILTIN_OPERATIONS, DIVISION_SCALE
from calclite.core.operations import (
    Builtins,
    DivisionByZeroError,
    InvalidOperandError,
    OperationKind,
    op_add,
    op_divide,
    op_multiply,
    op_subtract,
    to_decimal,
)


def test_every_kind_has_a_builtin():
    assert set(Builtins) == set(OperationKind)
    assert [k.value for k in OperationKind] == BUILTIN_OPERATIONS


def test_add_subtract_are_float():
    assert op_add(2, 3) == 5.0
    assert isinstance(op_add(2, 3), float)
    assert op_subtract(3, 2) == 1.0
    assert op_subtract(Decimal("1.5"), 0.5) == 1.0


def test_multiply_is_exact_decimal():
    assert op_multiply(2, 3) == 6
    assert op_multiply(0.1, 0.2) == Decimal("0.02")
    x, y = "1234567890.123456789", "9876543210.987654321"
    product = op_multiply(Decimal(x), Decimal(y))
    assert Fraction(product) == Fraction(x) * Fraction(y)


@pytest.mark.parametrize("a,b,expected", [
    (6, 3, Decimal("2.00000")),
    (1, 3, Decimal("0.33333")),
    (2, 3, Decimal("0.66667")),
    (-2, 3, Decimal("-0.66667")),
    (1, 8, Decimal("0.12500")),
    (0.000015, 1, Decimal("0.00002")),
    (-0.000015, 1, Decimal("-0.00002")),
])
def test_divide_rounds_half_up(a, b, expected):
    result = op_divide(a, b)
    assert result == expected
    assert result.as_tuple().exponent == -DIVISION_SCALE


@pytest.mark.parametrize("zero", [0, 0.0, Decimal("0"), -0.0])
def test_divide_by_zero(zero):
    with pytest.raises(DivisionByZeroError):
        op_divide(6, zero)


def test_division_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        op_divide(1, 0)


@pytest.mark.parametrize("bad", ["1", None, True, float("nan"), float("inf"), Decimal("NaN")])
def test_invalid_operands(bad):
    with pytest.raises(InvalidOperandError):
        op_add(1, bad)
    with pytest.raises(InvalidOperandError):
        op_multiply(bad, 1)


def test_numpy_and_fraction_operands():
    assert op_add(np.int64(2), np.float64(0.5)) == 2.5
    assert op_multiply(np.int32(4), 2) == 8
    assert to_decimal(Fraction(1, 4)) == Decimal("0.25")


def test_operation_kind_symbol():
    assert OperationKind.DIVIDE.symbol == "/"


def test_add_rejects_int_beyond_float_range():
    with pytest.raises(InvalidOperandError):
        op_add(10 ** 400, 1)
    with pytest.raises(InvalidOperandError):
        op_subtract(1, -(10 ** 400))


def test_add_rejects_decimal_beyond_float_range():
    huge = op_multiply(10 ** 200, 10 ** 200)
    assert huge.is_finite()
    with pytest.raises(InvalidOperandError):
        op_add(huge, 1)


def test_add_rejects_overflowing_result():
    with pytest.raises(InvalidOperandError):
        op_add(1e308, 1e308)


@pytest.mark.parametrize("value,expected", [
    (Fraction(3, 8), Decimal("0.375")),
    (Fraction(-1, 20), Decimal("-0.05")),
    (Fraction(7, 1), Decimal("7")),
])
def test_terminating_fractions_are_exact(value, expected):
    assert to_decimal(value) == expected
    assert op_multiply(value, 8) == expected * 8


def test_non_terminating_fraction_rejected():
    with pytest.raises(InvalidOperandError):
        op_multiply(Fraction(1, 3), 3)
    # float path still accepts it
    assert op_add(Fraction(1, 3), 0) == pytest.approx(1 / 3)
