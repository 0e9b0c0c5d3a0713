"""Diagnostics and debugging utilities for dipaths."""

from .core import (
    assert_no_negative_cycle,
    assert_non_negative_weights,
    has_negative_diagonal,
    negative_arcs,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "negative_arcs",
    "assert_non_negative_weights",
    "has_negative_diagonal",
    "assert_no_negative_cycle",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
