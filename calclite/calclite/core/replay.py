"""Operation replay utilities.

Recompute a recorded operation log (as produced by
``CalculatorSession.history``) or a list of chain steps against a
calculator. Custom operations must already be registered on that
calculator.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List
from .calculator import Calculator
from .registry import normalize_name

logger = logging.getLogger(__name__)


def replay_operations(calculator: Calculator, operation_log: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Apply every logged calculation again and return fresh records.

    Records missing ``op``, ``a`` or ``b`` are skipped with a warning.
    Calculation errors propagate.
    """
    out: List[Dict[str, Any]] = []
    for i, rec in enumerate(operation_log):
        if any(rec.get(k) is None for k in ("op", "a", "b")):
            logger.warning("Skipping incomplete record %d: %r", i, rec)
            continue
        result = calculator.apply(rec["op"], rec["a"], rec["b"])
        out.append({
            "op": normalize_name(rec["op"]),
            "a": rec["a"],
            "b": rec["b"],
            "result": result,
        })
    return out


def replay_chain(calculator: Calculator, initial, steps: List[Dict[str, Any]]):
    """Fold ``[{"op": ..., "operand": ...}, ...]`` starting at *initial*."""
    operations = [s["op"] for s in steps]
    operands = [s["operand"] for s in steps]
    return calculator.chain(initial, operations, operands)


__all__ = ["replay_operations", "replay_chain"]
