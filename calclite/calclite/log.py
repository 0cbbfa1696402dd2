"""Logging setup for host applications.

Library modules only create loggers; nothing is printed until a host
calls :func:`setup_logging`.
"""
import logging

from .constants import LOG_DATEFMT, LOG_FORMAT

logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO) -> logging.Logger:
    """Attach a console handler to the ``calclite`` logger (idempotent)."""
    root = logging.getLogger("calclite")
    root.setLevel(level)
    if not any(getattr(h, "_calclite_console", False) for h in root.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        ch._calclite_console = True
        root.addHandler(ch)
    for h in root.handlers:
        h.setLevel(level)
    logger.debug("Logging configured at %s", logging.getLevelName(level))
    return root


__all__ = ["setup_logging"]
