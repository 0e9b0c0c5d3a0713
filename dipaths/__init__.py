"""dipaths - shortest-path algorithms over abstract directed graphs."""

__version__ = "0.1.0"

# Diagnostics and debug mode
from .diagnostics import (
    assert_no_negative_cycle,
    assert_non_negative_weights,
    debug_context,
    has_negative_diagonal,
    is_debug_enabled,
    negative_arcs,
    set_debug_enabled,
)

# Shortest-path engines
from .graphs import (
    SIGNED_INFINITY,
    SIGNED_MIN,
    UNSIGNED_INFINITY,
    AdjacencyList,
    AdjacencyListWeighted,
    BellmanFordMoore,
    Bfs,
    BfsTree,
    Digraph,
    Dijkstra,
    DistanceMatrix,
    FloydWarshall,
    PredecessorTree,
    Step,
    WeightedDigraph,
    bellman_ford_moore,
    bfs_distances,
    bfs_predecessors,
    bfs_shortest_path,
    check_vertex,
    dijkstra,
    dijkstra_predecessors,
    dijkstra_shortest_path,
    floyd_warshall,
    saturating_add,
    unit_step,
    unsigned_add,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
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
    # Diagnostics
    "negative_arcs",
    "assert_non_negative_weights",
    "has_negative_diagonal",
    "assert_no_negative_cycle",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
