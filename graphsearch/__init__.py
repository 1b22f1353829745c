"""
Graph Search Teaching Library.

An in-memory weighted graph with the classic search algorithms:
BFS, DFS, Dijkstra's shortest paths, and A* heuristic pathfinding.
"""

__version__ = "0.1.0"
