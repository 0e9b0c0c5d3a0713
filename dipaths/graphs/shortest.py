"""
Shortest path algorithms: Dijkstra and Bellman-Ford-Moore.

Dijkstra's algorithm for non-negative arc weights, multi-source, with a
lazy-deletion binary heap.
Bellman-Ford-Moore for arbitrary arc weights, single-source, reporting a
reachable negative cycle as a None result.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
    - Moore, E. F. "The shortest path through a maze" (1959).
"""

from typing import Callable, Iterable, Iterator, List, MutableSequence, Optional, Tuple

import numpy as np

from ..diagnostics import assert_non_negative_weights, is_debug_enabled
from ..logging import get_logger
from .core import WeightedDigraph
from .predecessor_tree import PredecessorTree
from .relax import Step, drain, path_to_root, record, settle
from .utils import check_vertex, seed_sources
from .weights import (
    SIGNED_DTYPE,
    SIGNED_INFINITY,
    UNSIGNED_DTYPE,
    UNSIGNED_INFINITY,
    saturating_add,
    unsigned_add,
)

logger = get_logger(__name__)

WeightStep = Callable[[int, int], int]


def _expand(digraph: WeightedDigraph, step: WeightStep):
    def expand(u: int, acc: int) -> Iterator[Tuple[int, int]]:
        for v, w in digraph.out_neighbors_weighted(u):
            yield v, step(acc, w)

    return expand


def distances(
    digraph: WeightedDigraph,
    step: WeightStep,
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
) -> None:
    """
    Relax caller-owned Dijkstra state until the heap is empty.

    Arc weights are assumed non-negative; this is not checked unless debug
    mode is on. With a negative weight the result is silently non-minimal.

    Args:
        digraph: Weighted digraph.
        step: ``step(acc, w)`` combines an accumulated distance with an arc
            weight, e.g. ``unsigned_add``.
        dist: Distance vector of length ``digraph.order()``, updated in place.
        heap: ``heapq`` heap of ``(distance, vertex)`` entries.

    Complexity: O((V + E) log V).

    Example:
        >>> digraph = AdjacencyListWeighted.from_arcs(3, [(0, 1, 4), (1, 2, 1), (0, 2, 9)])
        >>> dist = [0, UNSIGNED_INFINITY, UNSIGNED_INFINITY]
        >>> distances(digraph, unsigned_add, dist, [(0, 0)])
        >>> dist
        [0, 4, 5]
    """
    if is_debug_enabled():
        assert_non_negative_weights(digraph)

    drain(settle(_expand(digraph, step), dist, heap))


def predecessors(
    digraph: WeightedDigraph,
    step: WeightStep,
    pred: MutableSequence[Optional[int]],
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
) -> None:
    """
    Like :func:`distances`, additionally recording ``pred[v] = u`` whenever
    ``v`` is relaxed through ``u``.
    """
    if is_debug_enabled():
        assert_non_negative_weights(digraph)

    drain(settle(_expand(digraph, step), dist, heap, pred))


def shortest_path(
    digraph: WeightedDigraph,
    step: WeightStep,
    is_target: Callable[[int, int], bool],
    pred: MutableSequence[Optional[int]],
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
) -> Optional[List[int]]:
    """
    Search until a settled vertex satisfies ``is_target(vertex, distance)``.

    The search stops as soon as the target settles, so ``dist`` and ``pred``
    are only complete for the vertices settled before it.

    Returns:
        The path from the nearest source to the first matching vertex, or
        None if the search exhausts the heap without a match.
    """
    if is_debug_enabled():
        assert_non_negative_weights(digraph)

    for s in settle(_expand(digraph, step), dist, heap, pred):
        if is_target(s.u, s.dist):
            return path_to_root(pred, s.u)
    return None


class Dijkstra:
    """
    Multi-source Dijkstra distance engine.

    Distances are the minimum over all sources at once. The instance owns its
    distance vector, heap and predecessor list; the digraph is only read.
    Iterating the instance yields a ``Step`` each time a vertex settles at its
    final distance, in non-decreasing distance order.

    Args:
        digraph: Weighted digraph with non-negative weights.
        sources: Source vertices.
        step: Accumulation function, saturating unsigned addition by default.

    Raises:
        IndexError: If a source is out of bounds.
        ValueError: If debug mode is on and an arc weight is negative.

    Example:
        >>> digraph = AdjacencyListWeighted.from_arcs(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
        >>> Dijkstra(digraph, [0]).distances().tolist()
        [0, 1, 3]
    """

    def __init__(
        self,
        digraph: WeightedDigraph,
        sources: Iterable[int],
        step: WeightStep = unsigned_add,
    ):
        order = digraph.order()
        self.dist, self.heap = seed_sources(order, sources, UNSIGNED_INFINITY)

        if is_debug_enabled():
            assert_non_negative_weights(digraph)

        self.digraph = digraph
        self.step = step
        self.pred: List[Optional[int]] = [None] * order
        self.settled: List[Step] = []
        expand = _expand(digraph, step)
        self._steps = record(settle(expand, self.dist, self.heap, self.pred), self.settled)

    def __iter__(self) -> Iterator[Step]:
        return self._steps

    def distances(self) -> np.ndarray:
        """
        Run to completion and return the distances.

        Returns:
            uint64 array of length ``order()``; ``UNSIGNED_INFINITY`` marks
            unreachable vertices.
        """
        drain(self._steps)
        logger.debug(
            "dijkstra settled %d of %d vertices",
            len(self.settled),
            len(self.dist),
        )
        return np.array(self.dist, dtype=UNSIGNED_DTYPE)

    def predecessors(self) -> PredecessorTree:
        """Run to completion and return the shortest-path tree."""
        drain(self._steps)
        return PredecessorTree.from_list(self.pred)

    def shortest_path(self, is_target: Callable[[int, int], bool]) -> Optional[List[int]]:
        """
        Find the first settled vertex for which ``is_target(vertex, distance)``
        holds.

        Vertices settled by earlier calls are checked first, in settle order;
        only then is the search resumed.

        Returns:
            Path from the nearest source to the matching vertex, or None.
        """
        for s in self.settled:
            if is_target(s.u, s.dist):
                return path_to_root(self.pred, s.u)

        for s in self._steps:
            if is_target(s.u, s.dist):
                return path_to_root(self.pred, s.u)
        return None


def dijkstra(digraph: WeightedDigraph, s: int) -> np.ndarray:
    """
    Dijkstra's algorithm for single-source shortest distances.

    Args:
        digraph: Weighted digraph with non-negative weights.
        s: Source vertex.

    Returns:
        uint64 distance array; ``UNSIGNED_INFINITY`` marks unreachable vertices.

    Raises:
        IndexError: If s is out of bounds.

    Complexity: O((V + E) log V) using a binary heap.
    """
    return Dijkstra(digraph, [s]).distances()


def dijkstra_predecessors(digraph: WeightedDigraph, s: int) -> PredecessorTree:
    """
    Shortest-path tree rooted at ``s``.

    Raises:
        IndexError: If s is out of bounds.
    """
    return Dijkstra(digraph, [s]).predecessors()


def dijkstra_shortest_path(
    digraph: WeightedDigraph, s: int, t: int
) -> Optional[List[int]]:
    """
    Minimum-weight path from ``s`` to ``t``, or None if ``t`` is unreachable.

    Raises:
        IndexError: If s or t is out of bounds.

    Example:
        >>> digraph = AdjacencyListWeighted.from_arcs(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
        >>> dijkstra_shortest_path(digraph, 0, 2)
        [0, 1, 2]
    """
    check_vertex(digraph.order(), t, "t")
    return Dijkstra(digraph, [s]).shortest_path(lambda v, _: v == t)


def _relax_round(arcs: List[Tuple[int, int, int]], dist: List[int]) -> bool:
    updated = False
    for u, v, w in arcs:
        if dist[u] == SIGNED_INFINITY:
            continue
        candidate = saturating_add(dist[u], w)
        if candidate < dist[v]:
            dist[v] = candidate
            updated = True
    return updated


def _has_improvable_arc(arcs: List[Tuple[int, int, int]], dist: List[int]) -> bool:
    return any(
        dist[u] != SIGNED_INFINITY and saturating_add(dist[u], w) < dist[v]
        for u, v, w in arcs
    )


def bellman_ford_moore(digraph: WeightedDigraph, s: int) -> Optional[np.ndarray]:
    """
    Bellman-Ford-Moore single-source shortest distances.

    Allows negative arc weights. Runs at most ``order() - 1`` relaxation
    rounds over all arcs, stopping early at a fixpoint, then makes one more
    pass: any arc that can still be relaxed proves a negative cycle reachable
    from ``s``.

    Args:
        digraph: Weighted digraph (may have negative weights).
        s: Source vertex.

    Returns:
        int64 distance array (``SIGNED_INFINITY`` for unreachable vertices),
        or None if a negative cycle is reachable from ``s``.

    Raises:
        IndexError: If s is out of bounds.

    Complexity: O(VE) worst case.

    Example:
        >>> digraph = AdjacencyListWeighted.from_arcs(3, [(0, 1, 1), (1, 2, -2)])
        >>> bellman_ford_moore(digraph, 0).tolist()
        [0, 1, -1]
    """
    order = digraph.order()
    check_vertex(order, s)

    arcs = list(digraph.arcs_weighted())
    dist = [SIGNED_INFINITY] * order
    dist[s] = 0

    rounds = 0
    for _ in range(1, order):
        rounds += 1
        if not _relax_round(arcs, dist):
            break

    if _has_improvable_arc(arcs, dist):
        logger.debug("bellman-ford-moore: negative cycle reachable from %d", s)
        return None

    logger.debug(
        "bellman-ford-moore: %d vertices, %d arcs, %d rounds", order, len(arcs), rounds
    )
    return np.array(dist, dtype=SIGNED_DTYPE)


class BellmanFordMoore:
    """
    Single-source Bellman-Ford-Moore engine.

    Args:
        digraph: Weighted digraph (may have negative weights).
        s: Source vertex.

    Raises:
        IndexError: If s is out of bounds.
    """

    def __init__(self, digraph: WeightedDigraph, s: int):
        check_vertex(digraph.order(), s)
        self.digraph = digraph
        self.s = s

    def distances(self) -> Optional[np.ndarray]:
        """Distances from the source, or None on a reachable negative cycle."""
        return bellman_ford_moore(self.digraph, self.s)
