"""Debug mode switch for the transform engines.

While enabled, engines refuse non-finite input samples before touching the
caller's buffer and check that every output sample is finite. The initial
state comes from the ``CHIRPZ_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "CHIRPZ_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return True while engine finiteness checks are active."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn engine finiteness checks on or off for the whole process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch debug mode for the duration of a ``with`` block.

    The previous state is restored on exit, including when the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     engine.process(buffer)  # raises ValueError on NaN/inf samples
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
