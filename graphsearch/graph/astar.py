"""
A* heuristic pathfinding.

f(n) = g(n) + weight * h(n, goal)

With weight=1 and an admissible heuristic (one that never overestimates the
remaining cost) the returned path is optimal. Admissibility is the caller's
responsibility and is not checked. With the zero heuristic A* expands
vertices in the same order as Dijkstra.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING, Callable, Hashable

from graphsearch.config import ASTAR_MAX_EXPANSIONS, ASTAR_WEIGHT
from graphsearch.graph.result import (
    FailureReason,
    Path,
    PathFailure,
    SearchResult,
    reconstruct_path,
)
from graphsearch.heuristics import zero

if TYPE_CHECKING:
    from graphsearch.graph.core import Graph

logger = logging.getLogger(__name__)

Heuristic = Callable[[Hashable, Hashable], float]


def astar(
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    heuristic: Heuristic = zero,
    weight: float = ASTAR_WEIGHT,
    max_expansions: int | None = ASTAR_MAX_EXPANSIONS,
) -> SearchResult:
    """
    Find a path from start to goal with A*.

    The open set is a heap of (f, sequence, g, vertex); the sequence number
    breaks f ties in push order. An entry whose g is worse than the best
    known g for its vertex is stale and skipped. A vertex is expanded again
    if a cheaper route to it turns up later, so admissible heuristics that
    are not consistent still give optimal paths.

    Heuristic values are cached for the duration of this call only.

    Args:
        graph: Graph to search
        start: Starting vertex
        goal: Target vertex
        heuristic: Estimate of the remaining cost, called as heuristic(v, goal)
        weight: Multiplier on the heuristic (weighted A*). Values above 1
            usually expand fewer vertices but may return suboptimal paths.
        max_expansions: Give up after this many vertex expansions

    Returns:
        Path with its cost, or PathFailure: NO_PATH_EXISTS, UNKNOWN_VERTEX,
        SEARCH_LIMIT when max_expansions was hit, or NEGATIVE_WEIGHT as soon
        as a negative edge is reached
    """
    for vertex in (start, goal):
        if vertex not in graph:
            logger.warning(f"A*: {vertex!r} not in graph")
            return PathFailure(
                FailureReason.UNKNOWN_VERTEX, f"{vertex!r} is not in the graph"
            )

    h_cache: dict[Hashable, float] = {}

    def estimate(vertex: Hashable) -> float:
        if vertex not in h_cache:
            h_cache[vertex] = weight * heuristic(vertex, goal)
        return h_cache[vertex]

    g_score: dict[Hashable, float] = {start: 0}
    came_from: dict[Hashable, Hashable | None] = {start: None}

    counter = itertools.count()
    open_heap = [(estimate(start), next(counter), 0, start)]
    expansions = 0

    while open_heap:
        _, _, g, current = heapq.heappop(open_heap)
        if g > g_score[current]:
            continue

        if current == goal:
            path = Path(vertices=tuple(reconstruct_path(came_from, current)), cost=g)
            logger.debug(
                f"A* found path (cost {g}, {expansions} expansions): {path}"
            )
            return path

        if max_expansions is not None and expansions >= max_expansions:
            return PathFailure(
                FailureReason.SEARCH_LIMIT,
                f"gave up after {expansions} expansions",
            )
        expansions += 1

        for neighbor, edge_weight in graph.neighbors(current):
            if edge_weight < 0:
                logger.warning(
                    f"A*: negative edge {current!r} -> {neighbor!r} ({edge_weight})"
                )
                return PathFailure(
                    FailureReason.NEGATIVE_WEIGHT,
                    f"negative edge weight {edge_weight} on {current!r} -> {neighbor!r}",
                )
            tentative = g + edge_weight
            if tentative < g_score.get(neighbor, float("inf")):
                g_score[neighbor] = tentative
                came_from[neighbor] = current
                heapq.heappush(
                    open_heap,
                    (tentative + estimate(neighbor), next(counter), tentative, neighbor),
                )

    return PathFailure(
        FailureReason.NO_PATH_EXISTS, f"{goal!r} is not reachable from {start!r}"
    )
