from decimal import Decimal

import pandas as pd
import pytest

from calclite import Calculator, DivisionByZeroError
from calclite.data import apply_columns, chain_column, list_numeric_columns


def test_list_numeric_columns():
    df = pd.DataFrame({"x": [1, 2], "label": ["a", "b"], "y": [0.5, 1.5]})
    assert list_numeric_columns(df) == ["x", "y"]


def test_apply_columns_default_name():
    df = pd.DataFrame({"x": [1, 2, 3], "y": [4, 5, 6]})
    out = apply_columns(df, "add", "x", "y")
    assert list(out["x_add_y"]) == [5.0, 7.0, 9.0]
    assert "x_add_y" not in df.columns


def test_apply_columns_with_custom_operation():
    calc = Calculator()
    calc.register("custom", lambda x, y: x + 2 * y)
    df = pd.DataFrame({"a": [1, 0], "b": [2, 3]})
    out = apply_columns(df, "custom", "a", "b", out_col="c", calculator=calc)
    assert list(out["c"]) == [5, 6]


def test_apply_columns_division_by_zero():
    df = pd.DataFrame({"x": [1, 2], "y": [1, 0]})
    with pytest.raises(DivisionByZeroError):
        apply_columns(df, "divide", "x", "y")


def test_chain_column():
    df = pd.DataFrame({"x": [5, 0, 1]})
    out = chain_column(df, "x", ["add", "multiply"], [3, 5])
    assert list(out["x_chain"]) == [40, 15, 20]


def test_chain_column_divide_is_decimal():
    df = pd.DataFrame({"x": [1, 2]})
    out = chain_column(df, "x", ["divide"], [3], out_col="third")
    assert list(out["third"]) == [Decimal("0.33333"), Decimal("0.66667")]
