"""
Example: Shortest Paths in dipaths

This example runs every engine in the package on a small road network: hop
counts with BFS, travel times with Dijkstra, toll balances with
Bellman-Ford-Moore (negative arcs are rebates), and the all-pairs table with
Floyd-Warshall, followed by eccentricity queries on the table.
"""

from dipaths import (
    UNSIGNED_INFINITY,
    AdjacencyList,
    AdjacencyListWeighted,
    Dijkstra,
    bellman_ford_moore,
    bfs_distances,
    floyd_warshall,
)

TOWNS = ["Ash", "Birch", "Cedar", "Elm", "Fir"]

ROADS = [
    (0, 1, 4),
    (0, 2, 1),
    (2, 1, 2),
    (1, 3, 1),
    (2, 3, 5),
    (3, 4, 3),
    (4, 0, 6),
]


def _fmt(dist, infinity=UNSIGNED_INFINITY):
    return ", ".join(
        f"{town}={'-' if int(d) == infinity else int(d)}" for town, d in zip(TOWNS, dist)
    )


def example_bfs():
    """Example: Fewest roads from Ash."""
    print("=" * 60)
    print("Example 1: Breadth-First Search - Hop Counts")
    print("=" * 60)

    hops = AdjacencyList.from_arcs(len(TOWNS), [(u, v) for u, v, _ in ROADS])
    print(f"Hops from Ash: {_fmt(bfs_distances(hops, 0))}")
    print()


def example_dijkstra():
    """Example: Quickest route from Ash to Fir."""
    print("=" * 60)
    print("Example 2: Dijkstra - Travel Times")
    print("=" * 60)

    roads = AdjacencyListWeighted.from_arcs(len(TOWNS), ROADS)
    engine = Dijkstra(roads, [0])
    for step in engine:
        print(f"Settled {TOWNS[step.u]} at {step.dist}")

    path = Dijkstra(roads, [0]).shortest_path(lambda v, _: v == 4)
    print(f"Route Ash -> Fir: {' -> '.join(TOWNS[v] for v in path)}")
    print()


def example_bellman_ford_moore():
    """Example: Tolls with rebates, then a rebate loop."""
    print("=" * 60)
    print("Example 3: Bellman-Ford-Moore - Negative Weights")
    print("=" * 60)

    tolls = AdjacencyListWeighted.from_arcs(
        len(TOWNS), [(0, 1, 3), (1, 2, -2), (0, 2, 4), (2, 3, 2), (3, 4, -1)]
    )
    dist = bellman_ford_moore(tolls, 0)
    print(f"Tolls from Ash: {_fmt(dist, infinity=None)}")

    # A rebate loop between Birch and Cedar
    tolls.add_arc_weighted(2, 1, 1)
    result = bellman_ford_moore(tolls, 0)
    print(f"Negative cycle detected: {result is None}")
    print()


def example_floyd_warshall():
    """Example: All-pairs travel times and network centre."""
    print("=" * 60)
    print("Example 4: Floyd-Warshall - All Pairs")
    print("=" * 60)

    roads = AdjacencyListWeighted.from_arcs(len(TOWNS), ROADS)
    table = floyd_warshall(roads)
    for town, row in zip(TOWNS, table.tolist()):
        print(f"{town:>6}: {row}")

    print(f"Eccentricities: {table.eccentricities().tolist()}")
    print(f"Diameter: {table.diameter()}")
    print(f"Centre: {[TOWNS[v] for v in table.center()]}")
    print(f"Strongly connected: {table.is_connected()}")
    print()


if __name__ == "__main__":
    example_bfs()
    example_dijkstra()
    example_bellman_ford_moore()
    example_floyd_warshall()
