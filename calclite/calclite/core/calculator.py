"""Calculator: single-shot dispatch + chaining.

``Calculator.chain`` is a pure left fold and holds no state, so it can be
called repeatedly (and from several threads) on one instance.
``ChainBuilder`` is the stateful convenience wrapper::

    calc.builder().set_state(5).chain_operations("add", 3).get_chaining_result()

Each builder guards its own state with a reentrant lock; share a builder between
threads only if every caller goes through its methods.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional, Sequence, Tuple

from .operations import BinaryFunction, CalculatorError
from .registry import OperationRef, OperationRegistry

logger = logging.getLogger(__name__)


class MismatchedLengthsError(CalculatorError, ValueError):
    """Raised when a chain gets a different number of operations and operands."""


class UninitializedChainStateError(CalculatorError, RuntimeError):
    """Raised when a chain is used before its initial state was set."""


class ChainStateAlreadySetError(UninitializedChainStateError):
    """Raised when the initial chain state is set a second time."""


def _op_label(operation: OperationRef) -> str:
    return getattr(operation, "value", operation)


class Calculator:
    def __init__(self, registry: Optional[OperationRegistry] = None):
        self.registry = registry if registry is not None else OperationRegistry()

    # --- Registry delegation ---
    def register(self, name: str, fn: BinaryFunction) -> BinaryFunction:
        return self.registry.register(name, fn)

    def register_operation(self, name: Optional[str] = None):
        return self.registry.register_operation(name)

    def is_builtin(self, name: OperationRef) -> bool:
        return self.registry.is_builtin(name)

    def resolve(self, name: OperationRef) -> BinaryFunction:
        return self.registry.resolve(name)

    def operations(self) -> List[str]:
        return self.registry.names()

    # --- Calculation ---
    def apply(self, operation: OperationRef, a, b):
        """Resolve *operation* and apply it to ``(a, b)``.

        Raises UnsupportedOperationError for unknown names; failures of the
        operation itself (e.g. DivisionByZeroError) propagate unchanged.
        """
        fn = self.registry.resolve(operation)
        result = fn(a, b)
        logger.debug("%s(%r, %r) -> %r", _op_label(operation), a, b, result)
        return result

    def chain(
        self,
        initial,
        operations: Sequence[OperationRef],
        operands: Sequence[Any],
    ):
        """Fold ``operations``/``operands`` left to right starting at *initial*.

        ``chain(5, ["ADD", "MULTIPLY"], [3, 5])`` computes ``(5 + 3) * 5``.
        """
        operations = list(operations)
        operands = list(operands)
        if len(operations) != len(operands):
            raise MismatchedLengthsError(
                f"Operations and operands do not match: "
                f"{len(operations)} operations, {len(operands)} operands"
            )
        result = initial
        for operation, operand in zip(operations, operands):
            result = self.apply(operation, result, operand)
        return result

    def builder(self) -> "ChainBuilder":
        return ChainBuilder(self)


class ChainBuilder:
    """Stateful chain over a :class:`Calculator`.

    UNSET --set_state--> SET; SET --chain_operations--> SET.
    """

    def __init__(self, calculator: Optional[Calculator] = None):
        self.calculator = calculator if calculator is not None else Calculator()
        self._value = None
        self._is_set = False
        self._steps: List[Tuple[OperationRef, Any]] = []
        # custom operations may read this builder mid-step
        self._lock = threading.RLock()

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def steps(self) -> List[Tuple[OperationRef, Any]]:
        return list(self._steps)

    def set_state(self, initial) -> "ChainBuilder":
        with self._lock:
            if self._is_set:
                raise ChainStateAlreadySetError("Initial state already set")
            self._value = initial
            self._is_set = True
        return self

    def chain_operations(self, operation: OperationRef, operand) -> "ChainBuilder":
        with self._lock:
            if not self._is_set:
                raise UninitializedChainStateError(
                    "No initial state; call set_state first"
                )
            # one-step fold keeps the numeric policy identical to chain()
            self._value = self.calculator.chain(self._value, [operation], [operand])
            self._steps.append((operation, operand))
        return self

    def get_chaining_result(self):
        with self._lock:
            if not self._is_set:
                raise UninitializedChainStateError(
                    "No initial state; call set_state first"
                )
            return self._value


__all__ = [
    "Calculator",
    "ChainBuilder",
    "ChainStateAlreadySetError",
    "MismatchedLengthsError",
    "UninitializedChainStateError",
]
