"""Process-wide switch for the engines' precondition checks.

Dijkstra and Floyd-Warshall trust their callers: negative arc weights make
Dijkstra return non-minimal distances, and a negative cycle leaves the
Floyd-Warshall matrix meaningless. Neither is detected by default. With debug
mode on, both engines verify the precondition first and raise ``ValueError``
instead:

- Dijkstra (class and low-level functions) scans every arc via
  :func:`dipaths.diagnostics.assert_non_negative_weights`, an O(E) pass.
- Floyd-Warshall inspects the diagonal of the relaxed matrix via
  :func:`dipaths.diagnostics.assert_no_negative_cycle`, an O(V) pass.

The initial state comes from the ``DIPATHS_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "DIPATHS_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """
    Return whether the precondition checks are currently active.

    Returns
    -------
    bool
        True if Dijkstra validates arc weights and Floyd-Warshall validates
        its diagonal on this call.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the precondition checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        True to make Dijkstra reject negative weights and Floyd-Warshall
        reject negative cycles.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Scope the precondition checks to a block, restoring the previous state
    on exit (including exit by exception).

    Parameters
    ----------
    enabled:
        Whether the checks run inside the block.

    Example
    -------
    >>> digraph = AdjacencyListWeighted.from_arcs(2, [(0, 1, -1)])
    >>> with debug_context(True):
    ...     dijkstra(digraph, 0)
    Traceback (most recent call last):
    ...
    ValueError: Dijkstra requires non-negative weights. Found negative weight -1 on arc (0, 1)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
