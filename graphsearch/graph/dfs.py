"""
Depth-first search.

Returns *a* path, not a shortest one. dfs() uses an explicit stack and is the
one to use on large or deep graphs. dfs_recursive() is the textbook version;
it is bounded by the interpreter recursion limit (sys.getrecursionlimit()) and
raises RecursionError on paths deeper than that.

Both visit neighbors in insertion order, so they return the same path.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable, Iterator

from graphsearch.graph.result import (
    FailureReason,
    PathFailure,
    SearchResult,
    make_path,
    reconstruct_path,
)

if TYPE_CHECKING:
    from graphsearch.graph.core import Graph

logger = logging.getLogger(__name__)


def _check_endpoints(graph: Graph, start: Hashable, goal: Hashable) -> PathFailure | None:
    for vertex in (start, goal):
        if vertex not in graph:
            logger.warning(f"DFS: {vertex!r} not in graph")
            return PathFailure(
                FailureReason.UNKNOWN_VERTEX, f"{vertex!r} is not in the graph"
            )
    return None


def _no_path(start: Hashable, goal: Hashable) -> PathFailure:
    return PathFailure(
        FailureReason.NO_PATH_EXISTS, f"{goal!r} is not reachable from {start!r}"
    )


def dfs(graph: Graph, start: Hashable, goal: Hashable) -> SearchResult:
    """
    Find any path from start to goal with an iterative DFS.

    The stack holds (vertex, parent) pairs and a vertex is marked visited
    when popped. Neighbors are pushed in reverse so the first-inserted
    neighbor is explored first, matching dfs_recursive().
    """
    failure = _check_endpoints(graph, start, goal)
    if failure is not None:
        return failure

    stack: list[tuple[Hashable, Hashable | None]] = [(start, None)]
    parents: dict[Hashable, Hashable | None] = {}

    while stack:
        current, parent = stack.pop()
        if current in parents:
            continue
        parents[current] = parent

        if current == goal:
            path = make_path(graph, reconstruct_path(parents, current))
            logger.debug(f"DFS found path ({path.hops} hops): {path}")
            return path

        neighbors = [n for n, _ in graph.neighbors(current) if n not in parents]
        for neighbor in reversed(neighbors):
            stack.append((neighbor, current))

    return _no_path(start, goal)


def dfs_recursive(graph: Graph, start: Hashable, goal: Hashable) -> SearchResult:
    """
    Find any path from start to goal with a recursive DFS.

    The visited set is created per call.

    Raises:
        RecursionError: If the search goes deeper than the recursion limit
    """
    failure = _check_endpoints(graph, start, goal)
    if failure is not None:
        return failure

    visited: set[Hashable] = set()
    trail: list[Hashable] = []

    def visit(vertex: Hashable) -> bool:
        visited.add(vertex)
        trail.append(vertex)
        if vertex == goal:
            return True
        for neighbor, _ in graph.neighbors(vertex):
            if neighbor not in visited and visit(neighbor):
                return True
        trail.pop()
        return False

    if visit(start):
        path = make_path(graph, trail)
        logger.debug(f"Recursive DFS found path ({path.hops} hops): {path}")
        return path
    return _no_path(start, goal)


def dfs_order(graph: Graph, start: Hashable) -> Iterator[Hashable]:
    """
    Yield vertices reachable from start in DFS preorder.

    Raises:
        UnknownVertexError: If start is not in the graph (on first next())
    """
    graph.neighbors(start)
    stack = [start]
    seen: set[Hashable] = set()
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        yield current
        neighbors = [n for n, _ in graph.neighbors(current) if n not in seen]
        stack.extend(reversed(neighbors))
