"""
Weight domains, infinity sentinels and saturating arithmetic.

Two accumulation domains are used. BFS and Dijkstra accumulate in the
unsigned 64-bit range and use its maximum as "unreachable". Bellman-Ford-Moore
and Floyd-Warshall accumulate in the signed 64-bit range and use the signed
maximum. Every addition that may involve a sentinel goes through
``saturating_add`` so that the result is clamped to the domain instead of
leaving it.
"""

import numpy as np

UNSIGNED_INFINITY: int = int(np.iinfo(np.uint64).max)
SIGNED_INFINITY: int = int(np.iinfo(np.int64).max)
SIGNED_MIN: int = int(np.iinfo(np.int64).min)

UNSIGNED_DTYPE = np.uint64
SIGNED_DTYPE = np.int64


def saturating_add(a: int, b: int, signed: bool = True) -> int:
    """
    Add two weights, clamping the result to the accumulation domain.

    Args:
        a: Accumulated weight (may be the sentinel).
        b: Arc weight.
        signed: Clamp to the int64 range if True, to the uint64 range otherwise.

    Returns:
        ``a + b`` clamped to ``[SIGNED_MIN, SIGNED_INFINITY]`` or
        ``[0, UNSIGNED_INFINITY]``.

    Example:
        >>> saturating_add(SIGNED_INFINITY, 5) == SIGNED_INFINITY
        True
        >>> saturating_add(3, -5)
        -2
        >>> saturating_add(UNSIGNED_INFINITY, 1, signed=False) == UNSIGNED_INFINITY
        True
    """
    if signed:
        lo, hi = SIGNED_MIN, SIGNED_INFINITY
    else:
        lo, hi = 0, UNSIGNED_INFINITY

    total = int(a) + int(b)
    if total > hi:
        return hi
    if total < lo:
        return lo
    return total


def unsigned_add(acc: int, w: int) -> int:
    """Default Dijkstra step: saturating unsigned addition."""
    return saturating_add(acc, w, signed=False)


def unit_step(acc: int) -> int:
    """Default BFS step: one more hop."""
    return saturating_add(acc, 1, signed=False)
