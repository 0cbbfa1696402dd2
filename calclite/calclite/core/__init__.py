from .operations import (  # noqa: F401
    CalculatorError,
    DivisionByZeroError,
    InvalidOperandError,
    OperationKind,
)
from .registry import (  # noqa: F401
    DuplicateOperationError,
    OperationRegistry,
    UnsupportedOperationError,
)
from .calculator import (  # noqa: F401
    Calculator,
    ChainBuilder,
    ChainStateAlreadySetError,
    MismatchedLengthsError,
    UninitializedChainStateError,
)
from .session import CalculatorSession  # noqa: F401
from .replay import replay_chain, replay_operations  # noqa: F401
