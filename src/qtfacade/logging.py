"""
Package logging for qtfacade.

Everything logs through the "qtfacade" logger. The package owns exactly
one stream handler on it; reconfiguring swaps that handler and leaves
handlers added by applications (or test capture) alone.
"""

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger("qtfacade")

DEFAULT_LEVEL = logging.WARNING
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int = DEFAULT_LEVEL,
    stream: Optional[TextIO] = None,
    format_str: Optional[str] = None,
) -> logging.Handler:
    """
    Route facade log records to a stream.

    Args:
        level: Threshold for the facade logger
        stream: Destination; sys.stderr if None
        format_str: Record format; DEFAULT_FORMAT if None

    Returns:
        The handler now attached to the facade logger
    """
    global _handler

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_str or DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = handler
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler


def reset_logging() -> None:
    """Restore the import-time configuration: warnings to stderr."""
    configure_logging(DEFAULT_LEVEL)


def set_debug_enabled(enabled: bool) -> None:
    """Switch the facade logger between DEBUG and the default level."""
    logger.setLevel(logging.DEBUG if enabled else DEFAULT_LEVEL)


def is_debug_enabled() -> bool:
    return logger.isEnabledFor(logging.DEBUG)


configure_logging()
