"""Integration tests for the public package surface."""

import dipaths
from dipaths import graphs


def test_top_level_exports():
    """Test that the engines are reachable from the package root."""
    for name in [
        "Bfs",
        "Dijkstra",
        "BellmanFordMoore",
        "FloydWarshall",
        "DistanceMatrix",
        "PredecessorTree",
        "AdjacencyList",
        "AdjacencyListWeighted",
        "debug_context",
        "get_logger",
    ]:
        assert hasattr(dipaths, name), name


def test_all_names_resolve():
    """Test that every name in __all__ exists."""
    for name in dipaths.__all__:
        assert hasattr(dipaths, name), name
    for name in graphs.__all__:
        assert hasattr(graphs, name), name


def test_version():
    """Test the version string."""
    assert dipaths.__version__ == "0.1.0"


def test_end_to_end_route():
    """Test a small road network through every engine."""
    roads = dipaths.AdjacencyListWeighted.from_arcs(
        5,
        [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 5), (3, 4, 3)],
    )
    hops = dipaths.AdjacencyList.from_arcs(5, [(u, v) for u, v, _ in roads.arcs_weighted()])

    assert dipaths.bfs_distances(hops, 0).tolist() == [0, 1, 1, 2, 3]
    assert dipaths.dijkstra(roads, 0).tolist() == [0, 3, 1, 4, 7]
    assert dipaths.bellman_ford_moore(roads, 0).tolist() == [0, 3, 1, 4, 7]
    assert dipaths.floyd_warshall(roads)[0].tolist() == [0, 3, 1, 4, 7]
    assert dipaths.dijkstra_shortest_path(roads, 0, 4) == [0, 2, 1, 3, 4]
    assert dipaths.bfs_shortest_path(hops, 0, 4) == [0, 1, 3, 4]
