"""
Shortest-path algorithms over abstract digraphs.

This package provides:
- Digraph capability protocols (Digraph, WeightedDigraph) and reference
  adjacency-list representations
- Breadth-first hop distances (Bfs)
- Dijkstra's algorithm for non-negative weights (Dijkstra)
- Bellman-Ford-Moore with negative-cycle detection (BellmanFordMoore)
- All-pairs Floyd-Warshall (FloydWarshall) and DistanceMatrix queries
- Predecessor trees with path reconstruction

Vertices are the integers 0..order(). Unreachable vertices carry the
type-maximum sentinel of their weight domain (UNSIGNED_INFINITY or
SIGNED_INFINITY).
"""

from .allpairs import FloydWarshall, floyd_warshall
from .core import AdjacencyList, AdjacencyListWeighted, Digraph, WeightedDigraph
from .distance_matrix import DistanceMatrix
from .predecessor_tree import BfsTree, PredecessorTree
from .relax import Step
from .shortest import (
    BellmanFordMoore,
    Dijkstra,
    bellman_ford_moore,
    dijkstra,
    dijkstra_predecessors,
    dijkstra_shortest_path,
)
from .traversal import Bfs, bfs_distances, bfs_predecessors, bfs_shortest_path
from .utils import check_vertex
from .weights import (
    SIGNED_INFINITY,
    SIGNED_MIN,
    UNSIGNED_INFINITY,
    saturating_add,
    unit_step,
    unsigned_add,
)

__all__ = [
    "Digraph",
    "WeightedDigraph",
    "AdjacencyList",
    "AdjacencyListWeighted",
    "Bfs",
    "bfs_distances",
    "bfs_predecessors",
    "bfs_shortest_path",
    "Dijkstra",
    "dijkstra",
    "dijkstra_predecessors",
    "dijkstra_shortest_path",
    "BellmanFordMoore",
    "bellman_ford_moore",
    "FloydWarshall",
    "floyd_warshall",
    "DistanceMatrix",
    "PredecessorTree",
    "BfsTree",
    "Step",
    "check_vertex",
    "SIGNED_INFINITY",
    "SIGNED_MIN",
    "UNSIGNED_INFINITY",
    "saturating_add",
    "unit_step",
    "unsigned_add",
]

# Example usage:
# from dipaths.graphs import AdjacencyListWeighted, Dijkstra
#
# digraph = AdjacencyListWeighted.from_arcs(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
# engine = Dijkstra(digraph, [0])
# engine.distances()                         # array([0, 1, 3], dtype=uint64)
# engine.predecessors().search_by(2, lambda _, p: p is None)  # [2, 1, 0]
