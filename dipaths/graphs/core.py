"""
Digraph capability protocols and reference adjacency-list representations.

The algorithms only ever talk to a digraph through the ``Digraph`` and
``WeightedDigraph`` protocols below. Vertices are the contiguous integers
``0..order()``. Any object providing the relevant methods can be passed in;
``AdjacencyList`` and ``AdjacencyListWeighted`` are the minimal concrete
representations shipped with the package.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Protocol, Tuple, runtime_checkable

from .utils import check_vertex


@runtime_checkable
class Digraph(Protocol):
    """Unweighted digraph capability: order and out-neighbours."""

    def order(self) -> int:
        ...

    def out_neighbors(self, u: int) -> Iterable[int]:
        ...

    def arcs(self) -> Iterable[Tuple[int, int]]:
        ...


@runtime_checkable
class WeightedDigraph(Protocol):
    """Weighted digraph capability: order, weighted out-neighbours and arcs."""

    def order(self) -> int:
        ...

    def out_neighbors_weighted(self, u: int) -> Iterable[Tuple[int, int]]:
        ...

    def arcs_weighted(self) -> Iterable[Tuple[int, int, int]]:
        ...


@dataclass
class AdjacencyList:
    """
    Unweighted digraph with adjacency-list representation.

    Out-neighbours are kept in insertion order; adding an existing arc is a
    no-op.

    Attributes:
        adj: List mapping vertex -> list of out-neighbours.

    Complexity:
        - add_arc: O(deg(u))
        - out_neighbors: O(1) to obtain, O(deg(u)) to iterate
        - arcs: O(V + E)
    """

    adj: List[List[int]] = field(default_factory=list)

    def __init__(self, order: int = 0):
        """
        Initialize a digraph with ``order`` vertices and no arcs.

        Args:
            order: Number of vertices.
        """
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        self.adj = [[] for _ in range(order)]

    @classmethod
    def from_arcs(cls, order: int, arcs: Iterable[Tuple[int, int]]) -> "AdjacencyList":
        """
        Build a digraph from an iterable of ``(u, v)`` arcs.

        Example:
            >>> digraph = AdjacencyList.from_arcs(3, [(0, 1), (1, 2)])
            >>> list(digraph.out_neighbors(0))
            [1]
        """
        digraph = cls(order)
        for u, v in arcs:
            digraph.add_arc(u, v)
        return digraph

    def order(self) -> int:
        return len(self.adj)

    def add_arc(self, u: int, v: int) -> None:
        """
        Add an arc from u to v.

        Raises:
            IndexError: If u or v is out of bounds.
        """
        check_vertex(self.order(), u, "u")
        check_vertex(self.order(), v, "v")

        if v not in self.adj[u]:
            self.adj[u].append(v)

    def out_neighbors(self, u: int) -> Iterator[int]:
        return iter(self.adj[u])

    def arcs(self) -> Iterator[Tuple[int, int]]:
        for u, heads in enumerate(self.adj):
            for v in heads:
                yield u, v


@dataclass
class AdjacencyListWeighted:
    """
    Weighted digraph with adjacency-list representation.

    Each vertex maps its out-neighbours to integer arc weights. Re-adding an
    arc overwrites its weight.

    Attributes:
        adj: List mapping vertex -> {head: weight}.

    Complexity:
        - add_arc_weighted: O(1) amortized
        - out_neighbors_weighted: O(deg(u)) to iterate
        - arcs_weighted: O(V + E)
    """

    adj: List[Dict[int, int]] = field(default_factory=list)

    def __init__(self, order: int = 0):
        """
        Initialize a weighted digraph with ``order`` vertices and no arcs.

        Args:
            order: Number of vertices.
        """
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        self.adj = [{} for _ in range(order)]

    @classmethod
    def from_arcs(
        cls, order: int, arcs: Iterable[Tuple[int, int, int]]
    ) -> "AdjacencyListWeighted":
        """
        Build a weighted digraph from an iterable of ``(u, v, w)`` arcs.

        Example:
            >>> digraph = AdjacencyListWeighted.from_arcs(2, [(0, 1, 5)])
            >>> list(digraph.arcs_weighted())
            [(0, 1, 5)]
        """
        digraph = cls(order)
        for u, v, w in arcs:
            digraph.add_arc_weighted(u, v, w)
        return digraph

    def order(self) -> int:
        return len(self.adj)

    def add_arc_weighted(self, u: int, v: int, w: int) -> None:
        """
        Add an arc from u to v with weight w.

        Raises:
            IndexError: If u or v is out of bounds.
        """
        check_vertex(self.order(), u, "u")
        check_vertex(self.order(), v, "v")
        self.adj[u][v] = w

    def out_neighbors_weighted(self, u: int) -> Iterator[Tuple[int, int]]:
        return iter(self.adj[u].items())

    def arcs_weighted(self) -> Iterator[Tuple[int, int, int]]:
        for u, heads in enumerate(self.adj):
            for v, w in heads.items():
                yield u, v, w
