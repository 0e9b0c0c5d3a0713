"""Pytest configuration and shared fixtures for dipaths tests.

This module provides:
- A deterministic numpy RNG fixture for randomized digraphs
- Debug mode pinned off unless a test turns it on
- Small reference digraphs with known shortest distances
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from dipaths.diagnostics import debug_context
from dipaths.graphs import AdjacencyList, AdjacencyListWeighted


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_off() -> Iterator[None]:
    """Run every test with precondition checks disabled unless it opts in."""
    with debug_context(False):
        yield


@pytest.fixture
def bang_jensen_94() -> AdjacencyList:
    """Unweighted 7-vertex digraph; BFS from 0 gives [0, 1, 1, 2, 2, 2, 3]."""
    return AdjacencyList.from_arcs(
        7,
        [(0, 1), (0, 2), (1, 3), (2, 1), (2, 3), (2, 4), (2, 5), (3, 5), (4, 6)],
    )


@pytest.fixture
def bang_jensen_96() -> AdjacencyListWeighted:
    """Non-negative weights; Dijkstra from 0 gives [0, 5, 3, 6, 4, 7]."""
    return AdjacencyListWeighted.from_arcs(
        6,
        [
            (0, 1, 9),
            (0, 2, 3),
            (1, 2, 6),
            (1, 3, 2),
            (2, 1, 2),
            (2, 4, 1),
            (3, 5, 1),
            (4, 2, 2),
            (4, 3, 2),
            (4, 5, 7),
            (5, 3, 2),
        ],
    )


@pytest.fixture
def bang_jensen_99() -> AdjacencyListWeighted:
    """Negative weights, no negative cycle; from 0 gives [0, 8, 3, 1, -4, -1]."""
    return AdjacencyListWeighted.from_arcs(
        6,
        [
            (0, 1, 8),
            (0, 2, 4),
            (1, 2, -5),
            (2, 3, -2),
            (2, 4, 4),
            (3, 5, -2),
            (4, 3, 10),
            (4, 5, 9),
            (5, 3, 5),
            (5, 4, -3),
        ],
    )


@pytest.fixture
def cross_country() -> AdjacencyListWeighted:
    """Complete 4-vertex digraph; from 0 gives [0, 1, 3, 10]."""
    return AdjacencyListWeighted.from_arcs(
        4,
        [
            (0, 1, 1),
            (0, 2, 3),
            (0, 3, 14),
            (1, 0, 2),
            (1, 2, 4),
            (1, 3, 22),
            (2, 0, 3),
            (2, 1, 10),
            (2, 3, 7),
            (3, 0, 13),
            (3, 1, 8),
            (3, 2, 2),
        ],
    )


@pytest.fixture
def bryr_2() -> AdjacencyListWeighted:
    """Symmetric unit-weight digraph; from 0 gives [0, 1, 2, 1, 2, 3]."""
    digraph = AdjacencyListWeighted(6)
    for u, v in [(0, 3), (1, 0), (1, 2), (3, 2), (4, 3), (4, 5)]:
        digraph.add_arc_weighted(u, v, 1)
        digraph.add_arc_weighted(v, u, 1)
    return digraph


@pytest.fixture
def shortest_path_1() -> AdjacencyListWeighted:
    """Vertex 3 is unreachable from 0; from 0 gives [0, 2, 4, inf]."""
    return AdjacencyListWeighted.from_arcs(4, [(0, 1, 2), (1, 2, 2), (3, 0, 2)])


@pytest.fixture
def shortest_path_3() -> AdjacencyListWeighted:
    """Negative cycle 1 -> 2 -> 1 of weight -1, reachable from 0."""
    return AdjacencyListWeighted.from_arcs(
        5, [(0, 1, 999), (0, 3, 2), (1, 2, -2), (2, 1, 1)]
    )


@pytest.fixture
def cycle_4() -> AdjacencyListWeighted:
    """Directed 4-cycle with costs 1, 3, 7, 13."""
    return AdjacencyListWeighted.from_arcs(
        4, [(0, 1, 1), (1, 2, 3), (2, 3, 7), (3, 0, 13)]
    )


@pytest.fixture
def random_digraph(rng: np.random.Generator) -> Callable[..., AdjacencyListWeighted]:
    """Factory for Erdos-Renyi style digraphs with weights drawn from [low, high)."""

    def build(order: int, p: float = 0.3, low: int = 0, high: int = 20) -> AdjacencyListWeighted:
        digraph = AdjacencyListWeighted(order)
        for u in range(order):
            for v in range(order):
                if u != v and rng.random() < p:
                    digraph.add_arc_weighted(u, v, int(rng.integers(low, high)))
        return digraph

    return build
