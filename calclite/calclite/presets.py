"""Custom operations the UI offers for registration.

Each preset is ``name -> (description, fn)``. Preset functions report
failures as CalculatorError subclasses like the built-ins do.
"""
from typing import Callable, Dict, Tuple

from .core.calculator import Calculator
from .core.operations import (
    DivisionByZeroError,
    InvalidOperandError,
    check_result,
    to_float,
)


def _power(a, b) -> float:
    x, y = to_float(a), to_float(b)
    if x == 0 and y < 0:
        raise DivisionByZeroError("Zero cannot be raised to a negative power")
    try:
        result = x ** y
    except OverflowError as exc:
        raise InvalidOperandError("Result out of float range") from exc
    if isinstance(result, complex):
        raise InvalidOperandError("Result is not a real number")
    return check_result(result)


def _modulo(a, b) -> float:
    x, y = to_float(a), to_float(b)
    if y == 0:
        raise DivisionByZeroError("Modulo by zero")
    # sign follows the divisor
    return x % y


def _average(a, b) -> float:
    return to_float(a) / 2 + to_float(b) / 2


def _double_second(a, b) -> float:
    return check_result(to_float(a) + 2 * to_float(b))


PRESETS: Dict[str, Tuple[str, Callable]] = {
    "POWER": ("a ** b", _power),
    "MODULO": ("a mod b", _modulo),
    "AVERAGE": ("(a + b) / 2", _average),
    "CUSTOM": ("a + 2 * b", _double_second),
}


def register_preset(calculator: Calculator, name: str):
    return calculator.register(name, PRESETS[name][1])


__all__ = ["PRESETS", "register_preset"]
