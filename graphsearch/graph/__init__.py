"""
Graph algorithms module.

Provides the weighted graph and the search algorithms that run on it:
- BFS: Fewest-hops path
- DFS: Any path (iterative and recursive)
- Dijkstra: Single-source shortest paths
- A*: Heuristic-guided shortest path
"""

from graphsearch.graph.astar import astar
from graphsearch.graph.bfs import bfs, bfs_order, reachable
from graphsearch.graph.builders import grid_graph
from graphsearch.graph.core import Graph
from graphsearch.graph.dfs import dfs, dfs_order, dfs_recursive
from graphsearch.graph.dijkstra import dijkstra, get_shortest_path, shortest_path
from graphsearch.graph.errors import (
    GraphError,
    GraphFormatError,
    InvalidWeightError,
    NegativeWeightError,
    UnknownEdgeError,
    UnknownVertexError,
)
from graphsearch.graph.result import (
    FailureReason,
    Path,
    PathFailure,
    SearchResult,
    ShortestPaths,
)

__all__ = [
    "Graph",
    "grid_graph",
    "bfs",
    "bfs_order",
    "reachable",
    "dfs",
    "dfs_order",
    "dfs_recursive",
    "dijkstra",
    "shortest_path",
    "get_shortest_path",
    "astar",
    "FailureReason",
    "Path",
    "PathFailure",
    "SearchResult",
    "ShortestPaths",
    "GraphError",
    "GraphFormatError",
    "InvalidWeightError",
    "NegativeWeightError",
    "UnknownEdgeError",
    "UnknownVertexError",
]
