"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest distances between all pairs of vertices of a weighted
digraph. Negative arc weights are fine; a negative cycle is not detected and
leaves the result unspecified (debug mode turns it into a ValueError).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import List

from ..diagnostics import assert_no_negative_cycle, is_debug_enabled
from ..logging import get_logger
from .core import WeightedDigraph
from .distance_matrix import DistanceMatrix
from .weights import SIGNED_INFINITY, saturating_add

logger = get_logger(__name__)


def _relax_all_pairs(dist: List[List[int]]) -> None:
    inf = SIGNED_INFINITY
    n = len(dist)
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            row_i = dist[i]
            d_ik = row_i[k]
            if d_ik == inf:
                continue
            for j in range(n):
                d_kj = row_k[j]
                if d_kj == inf:
                    continue
                candidate = saturating_add(d_ik, d_kj)
                if candidate < row_i[j]:
                    row_i[j] = candidate


def floyd_warshall(digraph: WeightedDigraph) -> DistanceMatrix:
    """
    Floyd-Warshall algorithm for all-pairs shortest distances.

    Args:
        digraph: Weighted digraph without negative cycles.

    Returns:
        DistanceMatrix whose row ``i`` holds the distances from ``i``;
        ``SIGNED_INFINITY`` marks pairs without a path.

    Raises:
        ValueError: If the digraph has no vertices, or if debug mode is on
            and the digraph has a negative cycle.

    Complexity: O(n^3) time, O(n^2) space, where n is the order.

    Example:
        >>> digraph = AdjacencyListWeighted.from_arcs(
        ...     4, [(0, 2, -2), (1, 0, 4), (1, 2, 3), (2, 3, 2), (3, 1, -1)]
        ... )
        >>> floyd_warshall(digraph).tolist()
        [[0, -1, -2, 0], [4, 0, 2, 4], [5, 1, 0, 2], [3, -1, 1, 0]]
    """
    n = digraph.order()
    if n == 0:
        raise ValueError("a distance matrix has at least one vertex")

    inf = SIGNED_INFINITY
    dist = [[inf] * n for _ in range(n)]

    # Parallel arcs keep the lightest weight
    for u, v, w in digraph.arcs_weighted():
        if w < dist[u][v]:
            dist[u][v] = w

    for i in range(n):
        dist[i][i] = 0

    _relax_all_pairs(dist)

    matrix = DistanceMatrix(n)
    matrix.dist[...] = dist

    if is_debug_enabled():
        assert_no_negative_cycle(matrix.dist)

    logger.debug("floyd-warshall: %d vertices relaxed", n)
    return matrix


class FloydWarshall:
    """
    All-pairs Floyd-Warshall engine.

    Args:
        digraph: Weighted digraph without negative cycles.
    """

    def __init__(self, digraph: WeightedDigraph):
        self.digraph = digraph

    def distances(self) -> DistanceMatrix:
        """Fully relaxed distance matrix; see :func:`floyd_warshall`."""
        return floyd_warshall(self.digraph)

