"""Precondition checks for the shortest-path engines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..graphs.core import WeightedDigraph


def negative_arcs(digraph: "WeightedDigraph") -> list[tuple[int, int, int]]:
    """
    Return every arc of the digraph that carries a negative weight.

    Parameters
    ----------
    digraph:
        Weighted digraph.

    Returns
    -------
    list of (tail, head, weight)
        Negative arcs in the digraph's own arc order.
    """
    return [(u, v, w) for u, v, w in digraph.arcs_weighted() if w < 0]


def assert_non_negative_weights(digraph: "WeightedDigraph") -> None:
    """
    Assert that every arc weight is non-negative.

    Raises
    ------
    ValueError
        On the first negative arc found.
    """
    for u, v, w in digraph.arcs_weighted():
        if w < 0:
            raise ValueError(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {w} on arc ({u}, {v})"
            )


def has_negative_diagonal(matrix: np.ndarray) -> bool:
    """
    Return True if a relaxed all-pairs matrix has a negative diagonal entry.

    After Floyd-Warshall, ``matrix[v, v] < 0`` holds exactly when ``v`` lies
    on a negative cycle.
    """
    if matrix.size == 0:
        return False
    return bool((np.diagonal(matrix) < 0).any())


def assert_no_negative_cycle(matrix: np.ndarray) -> None:
    """
    Assert that a relaxed all-pairs matrix shows no negative cycle.

    Raises
    ------
    ValueError
        If any vertex lies on a negative cycle.
    """
    if has_negative_diagonal(matrix):
        vertices = np.flatnonzero(np.diagonal(matrix) < 0).tolist()
        raise ValueError(
            f"Floyd-Warshall requires a digraph without negative cycles. "
            f"Vertices {vertices} lie on a negative cycle"
        )
