"""CalcLite package root.

Exposes high-level API surface for convenience.
"""
import logging

from .core import (  # noqa: F401
    Calculator,
    CalculatorError,
    CalculatorSession,
    ChainBuilder,
    ChainStateAlreadySetError,
    DivisionByZeroError,
    DuplicateOperationError,
    InvalidOperandError,
    MismatchedLengthsError,
    OperationKind,
    OperationRegistry,
    UninitializedChainStateError,
    UnsupportedOperationError,
    replay_chain,
    replay_operations,
)
from .log import setup_logging  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
