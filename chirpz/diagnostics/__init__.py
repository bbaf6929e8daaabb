"""Diagnostics and debugging utilities for chirpz."""

from .core import assert_components_close, assert_finite, max_component_error
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "max_component_error",
    "assert_components_close",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
