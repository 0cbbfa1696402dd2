from typing import Any, List, Optional, Sequence
import pandas as pd
from .core.calculator import Calculator
from .core.registry import OperationRef, normalize_name


def list_numeric_columns(df: pd.DataFrame) -> List[str]:
    return [c for c in df.columns if pd.api.types.is_numeric_dtype(df[c])]


def apply_columns(
    df: pd.DataFrame,
    op: OperationRef,
    left: str,
    right: str,
    out_col: Optional[str] = None,
    calculator: Optional[Calculator] = None,
) -> pd.DataFrame:
    """Apply *op* row-wise to ``df[left]`` and ``df[right]`` into *out_col*."""
    calculator = calculator or Calculator()
    out_col = out_col or f"{left}_{normalize_name(op).lower()}_{right}"
    out = df.copy()
    out[out_col] = [
        calculator.apply(op, a, b) for a, b in zip(out[left], out[right])
    ]
    return out


def chain_column(
    df: pd.DataFrame,
    column: str,
    operations: Sequence[OperationRef],
    operands: Sequence[Any],
    out_col: Optional[str] = None,
    calculator: Optional[Calculator] = None,
) -> pd.DataFrame:
    """Run every value of ``df[column]`` through the same chain."""
    calculator = calculator or Calculator()
    out_col = out_col or f"{column}_chain"
    out = df.copy()
    out[out_col] = out[column].map(
        lambda v: calculator.chain(v, operations, operands)
    )
    return out


__all__ = [
    "list_numeric_columns",
    "apply_columns",
    "chain_column",
]
