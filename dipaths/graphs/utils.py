"""
Utility functions for graph algorithms.

Provides bounds checking for vertex indices and the seeding of distance
vectors and priority queues from one or more sources.
"""

import heapq
from typing import Iterable, List, Tuple


def check_vertex(order: int, v: int, name: str = "s") -> None:
    """
    Fail fast on a vertex index outside ``0..order``.

    Negative indices are rejected too, since Python would otherwise silently
    wrap them around to the end of the distance vector.

    Args:
        order: Number of vertices in the digraph.
        v: Vertex index to check.
        name: Name used in the error message.

    Raises:
        IndexError: If ``v`` is not in ``0..order``.

    Example:
        >>> check_vertex(3, 2)
        >>> check_vertex(3, 3)
        Traceback (most recent call last):
        ...
        IndexError: s = 3 is out of bounds.
    """
    if not 0 <= v < order:
        raise IndexError(f"{name} = {v} is out of bounds.")


def seed_sources(
    order: int, sources: Iterable[int], infinity: int
) -> Tuple[List[int], List[Tuple[int, int]]]:
    """
    Build a distance vector and a heap with every source at distance 0.

    Args:
        order: Number of vertices.
        sources: Source vertices; duplicates are collapsed.
        infinity: Sentinel for vertices without a known distance.

    Returns:
        Tuple of (dist, heap) where ``heap`` already satisfies the heap
        invariant.

    Raises:
        IndexError: If a source is out of bounds. Nothing is allocated in
            that case.
    """
    sources = list(dict.fromkeys(sources))
    for s in sources:
        check_vertex(order, s)

    dist = [infinity] * order
    heap: List[Tuple[int, int]] = []

    for s in sources:
        dist[s] = 0
        heap.append((0, s))

    heapq.heapify(heap)
    return dist, heap
