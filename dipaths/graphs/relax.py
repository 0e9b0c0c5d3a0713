"""
Lazy-deletion relaxation loop shared by BFS and Dijkstra.

The heap holds ``(weight, vertex)`` entries ordered by ``heapq``. Improving a
vertex's distance pushes a new entry rather than decreasing the key of the old
one, so several entries for one vertex may coexist. An entry whose weight is
greater than the vertex's recorded distance is stale and is dropped when
popped. An indexed heap with decrease-key would give the same results.
"""

import heapq
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, MutableSequence, Optional, Tuple

from .predecessor_tree import PredecessorTree

Expand = Callable[[int, int], Iterable[Tuple[int, int]]]


@dataclass(frozen=True)
class Step:
    """A vertex settled at its final distance."""

    u: int
    dist: int


def settle(
    expand: Expand,
    dist: MutableSequence[int],
    heap: List[Tuple[int, int]],
    pred: Optional[MutableSequence[Optional[int]]] = None,
) -> Iterator[Step]:
    """
    Drain the heap, yielding each vertex as it is settled.

    ``Step(u, d)`` is yielded before the out-arcs of ``u`` are relaxed, so a
    consumer looking for a target can stop as soon as the target settles
    without paying for its expansion.

    Args:
        expand: ``expand(u, acc)`` yields ``(v, candidate)`` pairs, the
            candidate distance of each out-neighbour ``v`` of ``u`` reached
            with accumulated weight ``acc``.
        dist: Caller-owned distance vector, updated in place. Entries only
            ever decrease.
        heap: Caller-owned heap of ``(weight, vertex)`` entries.
        pred: Optional caller-owned predecessor vector, updated alongside
            ``dist``.

    Yields:
        Step for every non-stale entry popped from the heap.
    """
    while heap:
        acc, u = heapq.heappop(heap)

        if acc > dist[u]:
            continue

        yield Step(u, acc)

        for v, w in expand(u, acc):
            if w >= dist[v]:
                continue

            dist[v] = w
            if pred is not None:
                pred[v] = u
            heapq.heappush(heap, (w, v))


def record(steps: Iterator[Step], settled: List[Step]) -> Iterator[Step]:
    """Pass steps through unchanged, appending each one to ``settled``."""
    for step in steps:
        settled.append(step)
        yield step


def drain(steps: Iterator[Step]) -> None:
    """Run a settle loop to completion, discarding the steps."""
    for _ in steps:
        pass


def path_to_root(pred: MutableSequence[Optional[int]], t: int) -> Optional[List[int]]:
    """
    Walk predecessor links from ``t`` back to a root and return root-first.

    Used when a search settles its target: the walk ends at the first vertex
    without a predecessor, which is one of the sources.
    """
    path = PredecessorTree.from_list(pred).search_by(t, lambda _, p: p is None)
    if path is None:
        return None
    path.reverse()
    return path
