"""Operation registry: built-in names + runtime custom operations.

Names are case-insensitive and stored upper-cased. Custom operations are
looked up before built-ins, but a custom name may never shadow a built-in.

Writers copy the custom mapping, add to the copy and swap the reference
under a lock; readers use whatever snapshot they grabbed and never lock.
"""
from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Union

from ..constants import BUILTIN_OPERATIONS
from .operations import BinaryFunction, Builtins, CalculatorError, OperationKind

logger = logging.getLogger(__name__)

OperationRef = Union[str, OperationKind]


class UnsupportedOperationError(CalculatorError, LookupError):
    """Raised when a name matches neither a built-in nor a custom operation."""


class DuplicateOperationError(CalculatorError, ValueError):
    """Raised when registering a name that already exists."""


def normalize_name(name: OperationRef) -> str:
    if isinstance(name, OperationKind):
        return name.value
    if not isinstance(name, str):
        raise TypeError(f"Operation name must be a string, got {type(name).__name__}")
    key = name.strip().upper()
    if not key:
        raise ValueError("Operation name must not be empty")
    return key


class OperationRegistry:
    def __init__(self):
        self._custom: Mapping[str, BinaryFunction] = MappingProxyType({})
        self._lock = threading.Lock()

    def __contains__(self, name) -> bool:
        try:
            key = normalize_name(name)
        except (TypeError, ValueError):
            return False
        return key in self._custom or key in BUILTIN_OPERATIONS

    def __len__(self) -> int:
        return len(self._custom)

    @staticmethod
    def is_builtin(name: OperationRef) -> bool:
        if isinstance(name, OperationKind):
            return True
        return isinstance(name, str) and name.strip().upper() in BUILTIN_OPERATIONS

    def register(self, name: str, fn: BinaryFunction) -> BinaryFunction:
        if not callable(fn):
            raise TypeError(f"Operation {name!r} must be callable")
        key = normalize_name(name)
        with self._lock:
            if key in BUILTIN_OPERATIONS or key in self._custom:
                raise DuplicateOperationError(f"Operation {key} already exists")
            updated: Dict[str, BinaryFunction] = dict(self._custom)
            updated[key] = fn
            self._custom = MappingProxyType(updated)
        logger.info("Registered custom operation %s", key)
        return fn

    def register_operation(self, name: Optional[str] = None):
        """Decorator form of :meth:`register`; defaults to the function name."""
        def deco(fn: Callable):
            self.register(name or fn.__name__, fn)
            return fn
        return deco

    def resolve(self, name: OperationRef) -> BinaryFunction:
        if isinstance(name, OperationKind):
            return Builtins[name]
        if not isinstance(name, str):
            raise UnsupportedOperationError(f"Operation not supported: {name!r}")
        key = name.strip().upper()
        custom = self._custom
        if key in custom:
            return custom[key]
        if key in BUILTIN_OPERATIONS:
            return Builtins[OperationKind(key)]
        raise UnsupportedOperationError(f"Operation not supported: {name}")

    def custom_names(self) -> List[str]:
        return sorted(self._custom)

    def names(self) -> List[str]:
        return sorted(set(BUILTIN_OPERATIONS) | set(self._custom))


__all__ = [
    "DuplicateOperationError",
    "OperationRef",
    "OperationRegistry",
    "UnsupportedOperationError",
    "normalize_name",
]
