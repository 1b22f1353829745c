"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import math
import random
from pathlib import Path

import pytest

from graphsearch.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def weighted_graph() -> Graph:
    """Undirected five-vertex graph with known shortest distances from A."""
    return Graph.from_edges(
        [
            ("A", "B", 4),
            ("A", "C", 2),
            ("B", "C", 1),
            ("B", "D", 5),
            ("C", "D", 8),
            ("C", "E", 10),
            ("D", "E", 2),
        ],
        directed=False,
    )


@pytest.fixture
def expected_distances() -> dict[str, float]:
    """Shortest distances from A in weighted_graph."""
    return {"A": 0, "B": 3, "C": 2, "D": 8, "E": 10}


@pytest.fixture
def triangle() -> Graph:
    """Directed A->B, B->C, A->C: a direct edge and a two-hop detour."""
    return Graph.from_edges([("A", "B"), ("B", "C"), ("A", "C")], directed=True)


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two components: {A, B, C} and {X, Y}."""
    graph = Graph.from_edges(
        [("A", "B", 1), ("B", "C", 2), ("X", "Y", 1)],
        directed=False,
    )
    graph.add_vertex("Lonely")
    return graph


@pytest.fixture
def random_graphs() -> list[Graph]:
    """Small seeded random graphs (<= 8 vertices) for brute-force checks."""
    rng = random.Random(1234)
    graphs = []
    for i in range(25):
        directed = i % 2 == 0
        n = rng.randint(2, 8)
        graph = Graph(directed=directed)
        for v in range(n):
            graph.add_vertex(v)
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < 0.3:
                    graph.add_edge(u, v, rng.randint(0, 9))
        graphs.append(graph)
    return graphs


def brute_force_paths(graph: Graph, start, goal) -> list[list]:
    """Every simple path from start to goal (exponential, small graphs only)."""
    paths = []

    def extend(path: list) -> None:
        current = path[-1]
        if current == goal:
            paths.append(list(path))
            return
        for neighbor, _ in graph.neighbors(current):
            if neighbor not in path:
                path.append(neighbor)
                extend(path)
                path.pop()

    extend([start])
    return paths


def bellman_ford(graph: Graph, start) -> dict:
    """Reference shortest distances (no negative cycles assumed)."""
    distances = {v: math.inf for v in graph.vertices()}
    distances[start] = 0
    for _ in range(len(graph) - 1):
        for u, v, w in graph.edges():
            if distances[u] + w < distances[v]:
                distances[v] = distances[u] + w
    return distances


@pytest.fixture
def all_paths():
    """Return the brute-force path enumerator."""
    return brute_force_paths


@pytest.fixture
def reference_distances():
    """Return the Bellman-Ford reference implementation."""
    return bellman_ford
