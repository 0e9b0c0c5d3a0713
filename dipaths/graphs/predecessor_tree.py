"""
Predecessor tree: per-vertex parent pointers on a shortest-path tree.

``pred[v]`` is the vertex from which ``v`` was last relaxed during a BFS or
Dijkstra run, or None for a source or an unreached vertex.
"""

from typing import Callable, Iterator, List, Optional, Sequence

from .utils import check_vertex


class PredecessorTree:
    """
    Parent pointers recorded during a traversal.

    Args:
        order: Number of vertices. Must be at least 1.

    Raises:
        ValueError: If order is less than 1.

    Example:
        >>> pred = PredecessorTree.from_list([1, 2, 3, None])
        >>> pred.search(0, 3)
        [0, 1, 2, 3]
    """

    __slots__ = ("pred",)

    def __init__(self, order: int):
        if order < 1:
            raise ValueError("a predecessor tree has at least one vertex")
        self.pred: List[Optional[int]] = [None] * order

    @classmethod
    def from_list(cls, pred: Sequence[Optional[int]]) -> "PredecessorTree":
        """Wrap an existing predecessor list (copied) without validation."""
        tree = cls.__new__(cls)
        tree.pred = list(pred)
        return tree

    def __getitem__(self, v: int) -> Optional[int]:
        check_vertex(len(self.pred), v, "v")
        return self.pred[v]

    def __setitem__(self, v: int, u: Optional[int]) -> None:
        check_vertex(len(self.pred), v, "v")
        self.pred[v] = u

    def __len__(self) -> int:
        return len(self.pred)

    def __iter__(self) -> Iterator[Optional[int]]:
        return iter(self.pred)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PredecessorTree):
            return self.pred == other.pred
        return NotImplemented

    def __repr__(self) -> str:
        return f"PredecessorTree({self.pred!r})"

    def search(self, s: int, t: int) -> Optional[List[int]]:
        """
        Follow predecessor links from ``s`` until ``t`` is reached.

        Args:
            s: Vertex to start walking from.
            t: Vertex to stop at.

        Returns:
            The walk ``[s, ..., t]``, or None if the links end (or loop)
            before reaching ``t``.

        Raises:
            IndexError: If s is out of bounds.
        """
        return self.search_by(s, lambda v, _: v == t)

    def search_by(
        self, s: int, is_target: Callable[[int, Optional[int]], bool]
    ) -> Optional[List[int]]:
        """
        Follow predecessor links from ``s`` until ``is_target`` holds.

        ``is_target`` is called with each visited vertex and its predecessor.
        A visited array guards the walk, so a cyclic predecessor list yields
        None instead of looping forever.

        Args:
            s: Vertex to start walking from.
            is_target: Predicate over ``(vertex, predecessor)``.

        Returns:
            The walk from ``s`` to the first vertex matching ``is_target``,
            or None if no such vertex is reached.

        Raises:
            IndexError: If s is out of bounds.

        Example:
            >>> pred = PredecessorTree.from_list([None, 0, 1])
            >>> pred.search_by(2, lambda _, p: p is None)
            [2, 1, 0]
        """
        order = len(self.pred)
        check_vertex(order, s)

        visited = [False] * order
        path = [s]

        while 0 <= s < order:
            v = self.pred[s]

            if is_target(s, v):
                return path

            if v is None or not 0 <= v < order or visited[v]:
                break

            visited[v] = True

            if v != s:
                path.append(v)

            s = v

        return None


BfsTree = PredecessorTree
