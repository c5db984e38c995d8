"""
Logging configuration for smps-tools.

Library modules log through ``logging.getLogger(__name__)``; nothing is
printed until :func:`enable_verbose` attaches a console handler.
"""

from __future__ import annotations

import logging
from typing import TextIO

_logger = logging.getLogger("smps_tools")
_logger.addHandler(logging.NullHandler())  # Default: no output

DEFAULT_FORMAT = "[%(levelname)s] %(message)s"


def level_for_verbosity(verbose: int = 0, quiet: bool = False) -> int:
    """Map CLI ``-v`` counts and ``--quiet`` to a logging level."""
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def enable_verbose(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a console handler to the package logger.

    Any handler added by an earlier call is replaced.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or number
        format: Optional custom format string
        stream: Output stream (default: stderr)

    Returns:
        The installed handler

    Example:
        enable_verbose("DEBUG")
        compute_summary(params)  # Logs the inputs being evaluated
        disable_verbose()
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    disable_verbose()
    _logger.setLevel(level)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    _logger.addHandler(handler)
    return handler


def disable_verbose() -> None:
    """Remove console handlers and fall back to warnings only."""
    _logger.setLevel(logging.WARNING)
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)
