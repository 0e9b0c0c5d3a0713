"""
Breadth-first distances as Dijkstra with a unit step.

Every arc costs one hop, so the priority order of the shared lazy-deletion
loop coincides with BFS layering. Distances accumulate in the unsigned domain
and unreachable vertices keep ``UNSIGNED_INFINITY``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
"""

from typing import Callable, Iterable, Iterator, List, MutableSequence, Optional, Tuple

import numpy as np

from ..logging import get_logger
from .core import Digraph
from .predecessor_tree import PredecessorTree
from .relax import Step, drain, path_to_root, record, settle
from .utils import check_vertex, seed_sources
from .weights import UNSIGNED_DTYPE, UNSIGNED_INFINITY, unit_step

logger = get_logger(__name__)

UnitStep = Callable[[int], int]


def _expand(digraph: Digraph, step: UnitStep):
    def expand(u: int, acc: int) -> Iterator[Tuple[int, int]]:
        w = step(acc)
        for v in digraph.out_neighbors(u):
            yield v, w

    return expand


def distances(
    digraph: Digraph,
    step: UnitStep,
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
) -> None:
    """
    Relax caller-owned BFS state until the heap is empty.

    The caller seeds ``dist`` and ``heap``; this makes multi-phase use
    possible, e.g. pushing extra sources and calling again.

    Args:
        digraph: Unweighted digraph.
        step: Maps an accumulated distance to the distance one hop further.
        dist: Distance vector of length ``digraph.order()``, updated in place.
        heap: ``heapq`` heap of ``(distance, vertex)`` entries.

    Complexity: O((V + E) log V).

    Example:
        >>> digraph = AdjacencyList.from_arcs(3, [(0, 1), (1, 2)])
        >>> dist = [0, UNSIGNED_INFINITY, UNSIGNED_INFINITY]
        >>> distances(digraph, unit_step, dist, [(0, 0)])
        >>> dist
        [0, 1, 2]
    """
    drain(settle(_expand(digraph, step), dist, heap))


def predecessors(
    digraph: Digraph,
    step: UnitStep,
    pred: MutableSequence[Optional[int]],
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
) -> None:
    """
    Like :func:`distances`, additionally recording ``pred[v] = u`` whenever
    ``v`` is relaxed through ``u``.
    """
    drain(settle(_expand(digraph, step), dist, heap, pred))


def shortest_path(
    digraph: Digraph,
    step: UnitStep,
    is_target: Callable[[int, int], bool],
    pred: MutableSequence[Optional[int]],
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
) -> Optional[List[int]]:
    """
    Search until a settled vertex satisfies ``is_target(vertex, distance)``.

    Returns:
        The path from the nearest source to the first matching vertex, or
        None if the search exhausts the heap without a match.
    """
    for s in settle(_expand(digraph, step), dist, heap, pred):
        if is_target(s.u, s.dist):
            return path_to_root(pred, s.u)
    return None


class Bfs:
    """
    Multi-source breadth-first distance engine.

    The instance owns its distance vector, heap and predecessor list; the
    digraph is only read. Iterating the instance yields a ``Step`` for every
    vertex as it is reached, in non-decreasing distance order.

    Args:
        digraph: Unweighted digraph.
        sources: Source vertices. Distances are to the nearest source.

    Raises:
        IndexError: If a source is out of bounds.

    Example:
        >>> digraph = AdjacencyList.from_arcs(4, [(0, 1), (1, 2)])
        >>> Bfs(digraph, [0]).distances().tolist()[:3]
        [0, 1, 2]
    """

    def __init__(self, digraph: Digraph, sources: Iterable[int]):
        self.digraph = digraph
        order = digraph.order()
        self.dist, self.heap = seed_sources(order, sources, UNSIGNED_INFINITY)
        self.pred: List[Optional[int]] = [None] * order
        self.settled: List[Step] = []
        expand = _expand(digraph, unit_step)
        self._steps = record(settle(expand, self.dist, self.heap, self.pred), self.settled)

    def __iter__(self) -> Iterator[Step]:
        return self._steps

    def distances(self) -> np.ndarray:
        """
        Run to completion and return the hop counts.

        Returns:
            uint64 array of length ``order()``; ``UNSIGNED_INFINITY`` marks
            unreachable vertices.
        """
        drain(self._steps)
        logger.debug(
            "bfs settled %d of %d vertices",
            len(self.settled),
            len(self.dist),
        )
        return np.array(self.dist, dtype=UNSIGNED_DTYPE)

    def predecessors(self) -> PredecessorTree:
        """Run to completion and return the BFS tree."""
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


def bfs_distances(digraph: Digraph, s: int) -> np.ndarray:
    """
    Hop counts from ``s`` to every vertex.

    Raises:
        IndexError: If s is out of bounds.
    """
    return Bfs(digraph, [s]).distances()


def bfs_predecessors(digraph: Digraph, s: int) -> PredecessorTree:
    """
    BFS tree rooted at ``s``.

    Raises:
        IndexError: If s is out of bounds.
    """
    return Bfs(digraph, [s]).predecessors()


def bfs_shortest_path(digraph: Digraph, s: int, t: int) -> Optional[List[int]]:
    """
    Fewest-hops path from ``s`` to ``t``, or None if ``t`` is unreachable.

    Raises:
        IndexError: If s or t is out of bounds.
    """
    check_vertex(digraph.order(), t, "t")
    return Bfs(digraph, [s]).shortest_path(lambda v, _: v == t)
