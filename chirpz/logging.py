"""Logging utilities for chirpz.

Every module logs through ``get_logger(__name__)``. Loggers live under the
``chirpz`` namespace, write to stderr and do not propagate, so planner and
provider DEBUG lines stay out of the host application's root logger until
:func:`configure_logging` asks for them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_PACKAGE = "chirpz"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level: int = logging.WARNING
_formatter = logging.Formatter(_DEFAULT_FORMAT)
_stream: TextIO = sys.stderr

_loggers: dict[str, logging.Logger] = {}


def _attach_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(_stream)
    handler.setLevel(_level)
    handler.setFormatter(_formatter)
    logger.addHandler(handler)
    logger.setLevel(_level)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``chirpz`` logger for a module.

    Args:
        name: Usually ``__name__``. Names outside the package are prefixed
            with ``chirpz.``; None gives the package logger.

    Example:
        >>> from chirpz.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("FFT plan cache miss: L=%d", 64)
    """
    if name is None:
        name = _PACKAGE
    if name != _PACKAGE and not name.startswith(_PACKAGE + "."):
        name = f"{_PACKAGE}.{name}"

    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        _attach_handler(logger)
        _loggers[name] = logger
    return logger


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Set level, format and output stream for all chirpz loggers.

    Applies to loggers already handed out and to those created later.

    Args:
        level: Logging level or its name ("DEBUG", "info", ...).
        format_string: Record format (default: ``[LEVEL] name: message``).
        stream: Destination (default: sys.stderr).

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    global _level, _formatter, _stream

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        level = resolved

    _level = level
    _formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)
    _stream = stream if stream is not None else sys.stderr

    for logger in _loggers.values():
        _attach_handler(logger)
