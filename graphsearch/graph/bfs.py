"""
Breadth-first search.

Finds the path with the fewest edges, ignoring weights. Neighbors are
expanded in insertion order, so among several equally short paths the one
through earlier-inserted edges wins.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Hashable, Iterator

from graphsearch.config import BFS_MAX_DEPTH
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


def bfs(
    graph: Graph,
    start: Hashable,
    goal: Hashable | None = None,
    max_depth: int | None = BFS_MAX_DEPTH,
) -> SearchResult:
    """
    Find a minimum-hop path using BFS.

    A vertex is marked visited when it is enqueued, so it enters the queue
    at most once. The goal test happens on dequeue.

    Args:
        graph: Graph to search
        start: Starting vertex
        goal: Target vertex. If None, the whole component is explored and the
            path to the last vertex dequeued (one of the farthest in hops)
            is returned.
        max_depth: Do not expand vertices at this many hops or more

    Returns:
        Path on success, otherwise PathFailure with NO_PATH_EXISTS,
        UNKNOWN_VERTEX, or SEARCH_LIMIT (goal not found and max_depth
        stopped the search early)
    """
    if start not in graph:
        logger.warning(f"BFS: start {start!r} not in graph")
        return PathFailure(FailureReason.UNKNOWN_VERTEX, f"{start!r} is not in the graph")
    if goal is not None and goal not in graph:
        logger.warning(f"BFS: goal {goal!r} not in graph")
        return PathFailure(FailureReason.UNKNOWN_VERTEX, f"{goal!r} is not in the graph")

    # BFS with parent tracking
    queue = deque([(start, 0)])
    parents: dict[Hashable, Hashable | None] = {start: None}
    last = start
    truncated = False

    while queue:
        current, depth = queue.popleft()
        last = current

        if current == goal:
            path = make_path(graph, reconstruct_path(parents, current))
            logger.debug(f"BFS found path ({path.hops} hops): {path}")
            return path

        if max_depth is not None and depth >= max_depth:
            truncated = truncated or any(
                neighbor not in parents for neighbor, _ in graph.neighbors(current)
            )
            continue

        for neighbor, _ in graph.neighbors(current):
            if neighbor in parents:
                continue
            parents[neighbor] = current
            queue.append((neighbor, depth + 1))

    if goal is None:
        return make_path(graph, reconstruct_path(parents, last))

    if truncated:
        return PathFailure(
            FailureReason.SEARCH_LIMIT,
            f"{goal!r} not found within {max_depth} hops of {start!r}",
        )
    return PathFailure(
        FailureReason.NO_PATH_EXISTS, f"{goal!r} is not reachable from {start!r}"
    )


def bfs_order(graph: Graph, start: Hashable) -> Iterator[Hashable]:
    """
    Yield vertices reachable from start in BFS discovery order.

    Raises:
        UnknownVertexError: If start is not in the graph (on first next())
    """
    graph.neighbors(start)
    queue = deque([start])
    seen = {start}
    while queue:
        current = queue.popleft()
        yield current
        for neighbor, _ in graph.neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)


def reachable(graph: Graph, start: Hashable) -> set[Hashable]:
    """All vertices reachable from start, including start."""
    return set(bfs_order(graph, start))
