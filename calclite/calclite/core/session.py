"""Calculator session abstraction.

The CalculatorSession wraps a Calculator adding:
 - Operation log (one record per successful calculation)
 - Chain tracing (every intermediate value of a fold)
 - pandas views of the log and of traces for display / charting
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence
import pandas as pd

from .calculator import Calculator, MismatchedLengthsError
from .registry import OperationRef, normalize_name

OperationRecord = Dict[str, Any]

HISTORY_COLUMNS = ["op", "a", "b", "result", "timestamp"]
TRACE_COLUMNS = ["step", "op", "operand", "before", "result"]


@dataclass
class CalculatorSession:
    calculator: Calculator = field(default_factory=Calculator)
    history: List[OperationRecord] = field(default_factory=list)

    def log(self, op: OperationRef, a, b, result):
        rec: OperationRecord = {
            "op": normalize_name(op),
            "a": a,
            "b": b,
            "result": result,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self.history.append(rec)
        return rec

    def calculate(self, op: OperationRef, a, b):
        result = self.calculator.apply(op, a, b)
        self.log(op, a, b, result)
        return result

    def chain(self, initial, operations: Sequence[OperationRef], operands: Sequence[Any]):
        # Trace first so a failing step leaves the history untouched
        trace = self.trace_chain(initial, operations, operands)
        self.log_trace(trace)
        return trace[-1]["result"] if trace else initial

    def log_trace(self, trace: List[OperationRecord]):
        """Record an already computed trace without folding it again."""
        for rec in trace:
            self.log(rec["op"], rec["before"], rec["operand"], rec["result"])
        return self

    def trace_chain(
        self,
        initial,
        operations: Sequence[OperationRef],
        operands: Sequence[Any],
    ) -> List[OperationRecord]:
        operations = list(operations)
        operands = list(operands)
        if len(operations) != len(operands):
            raise MismatchedLengthsError(
                f"Operations and operands do not match: "
                f"{len(operations)} operations, {len(operands)} operands"
            )
        trace: List[OperationRecord] = []
        value = initial
        for i, (op, operand) in enumerate(zip(operations, operands), start=1):
            result = self.calculator.chain(value, [op], [operand])
            trace.append({
                "step": i,
                "op": normalize_name(op),
                "operand": operand,
                "before": value,
                "result": result,
            })
            value = result
        return trace

    def clear(self):
        self.history.clear()
        return self

    # --- pandas views ---
    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.history, columns=HISTORY_COLUMNS)

    @staticmethod
    def trace_frame(trace: List[OperationRecord]) -> pd.DataFrame:
        frame = pd.DataFrame(trace, columns=TRACE_COLUMNS)
        # Decimal results come back as object dtype; plot-friendly floats
        frame["value"] = frame["result"].astype(float)
        return frame


__all__ = [
    "CalculatorSession",
    "OperationRecord",
    "HISTORY_COLUMNS",
    "TRACE_COLUMNS",
]
