"""Built-in arithmetic operations (pure) + numeric policy.

Each operation is a function(a, b) -> number.

Numeric policy:
 - ADD / SUBTRACT work in binary floating point and return ``float``.
   Operands or results beyond float range raise InvalidOperandError.
 - MULTIPLY works in ``decimal.Decimal`` and is exact for decimal inputs.
   Fractions are accepted only when they have a terminating decimal form.
 - DIVIDE works in ``decimal.Decimal`` and rounds the quotient to
   ``DIVISION_SCALE`` fractional digits using ``ROUNDING`` (half up).

The policy is the same whether an operation is applied directly or as a
chain step.
"""
from __future__ import annotations

import enum
import math
import numbers
from decimal import ROUND_DOWN, Decimal, localcontext
from fractions import Fraction
from typing import Any, Callable, Dict

import numpy as np

from ..constants import DIVISION_SCALE, OPERATION_SYMBOLS, ROUNDING

BinaryFunction = Callable[[Any, Any], Any]


class CalculatorError(Exception):
    """Base class for every calculator failure."""


class InvalidOperandError(CalculatorError, ValueError):
    """Raised when an operand is not a finite real number."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised by DIVIDE when the divisor is exactly zero."""


class OperationKind(enum.Enum):
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    @property
    def symbol(self) -> str:
        return OPERATION_SYMBOLS[self.value]


Builtins: Dict[OperationKind, BinaryFunction] = {}


def register(kind: OperationKind):
    def deco(fn: BinaryFunction):
        Builtins[kind] = fn
        return fn
    return deco


def check_operand(value: Any):
    """Return *value* as a plain Python number or raise InvalidOperandError.

    numpy scalars are unwrapped; ``bool`` is rejected even though it is an
    ``int`` subclass.
    """
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidOperandError(f"Operand must be a real number, got {value!r}")
    if isinstance(value, Decimal):
        finite = value.is_finite()
    elif isinstance(value, float):
        finite = math.isfinite(value)
    else:
        finite = True
    if not finite:
        raise InvalidOperandError(f"Operand must be finite, got {value!r}")
    return value


def to_float(value: Any) -> float:
    value = check_operand(value)
    try:
        result = float(value)
    except OverflowError as exc:
        raise InvalidOperandError(f"Operand out of float range: {value!r}") from exc
    if not math.isfinite(result):
        raise InvalidOperandError(f"Operand out of float range: {value!r}")
    return result


def _fraction_to_decimal(value: Fraction) -> Decimal:
    # Exact only when the denominator is of the form 2**i * 5**j
    rest, scale = value.denominator, 0
    for p in (2, 5):
        n = 0
        while rest % p == 0:
            rest //= p
            n += 1
        scale = max(scale, n)
    if rest != 1:
        raise InvalidOperandError(f"Operand has no exact decimal form: {value!r}")
    coefficient = value.numerator * (10 ** scale // value.denominator)
    return Decimal(f"{coefficient}E-{scale}")


def to_decimal(value: Any) -> Decimal:
    value = check_operand(value)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        return _fraction_to_decimal(value)
    if isinstance(value, float):
        # repr keeps the shortest decimal form, so 0.1 stays 0.1
        return Decimal(repr(value))
    return Decimal(value)


def check_result(result: float) -> float:
    if not math.isfinite(result):
        raise InvalidOperandError("Result out of float range")
    return result


def _digits(d: Decimal) -> int:
    return len(d.as_tuple().digits)


@register(OperationKind.ADD)
def op_add(a, b) -> float:
    return check_result(to_float(a) + to_float(b))


@register(OperationKind.SUBTRACT)
def op_subtract(a, b) -> float:
    return check_result(to_float(a) - to_float(b))


@register(OperationKind.MULTIPLY)
def op_multiply(a, b) -> Decimal:
    x, y = to_decimal(a), to_decimal(b)
    with localcontext() as ctx:
        # coefficient of the product never exceeds the sum of both lengths
        ctx.prec = max(ctx.prec, _digits(x) + _digits(y))
        return x * y


@register(OperationKind.DIVIDE)
def op_divide(a, b) -> Decimal:
    x, y = to_decimal(a), to_decimal(b)
    if y == 0:
        raise DivisionByZeroError("Division by zero")
    with localcontext() as ctx:
        # Truncate with at least one guard digit past the scale, then round
        # once; truncation cannot manufacture a false tie.
        ctx.prec = max(ctx.prec, x.adjusted() - y.adjusted() + DIVISION_SCALE + 3)
        ctx.rounding = ROUND_DOWN
        quotient = x / y
        return quotient.quantize(Decimal(1).scaleb(-DIVISION_SCALE), rounding=ROUNDING)


def apply_builtin(kind: OperationKind, a, b):
    return Builtins[kind](a, b)


__all__ = [
    "BinaryFunction",
    "Builtins",
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidOperandError",
    "OperationKind",
    "apply_builtin",
    "check_operand",
    "check_result",
    "op_add",
    "op_divide",
    "op_multiply",
    "op_subtract",
    "to_decimal",
    "to_float",
]
