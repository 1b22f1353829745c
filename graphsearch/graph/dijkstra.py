"""
Dijkstra's single-source shortest paths.

Label-setting relaxation over a binary heap: O((V + E) log V).
Requires non-negative weights on every edge reachable from the start;
a negative edge raises NegativeWeightError as soon as it is reached.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import TYPE_CHECKING, Hashable

from graphsearch.graph.errors import NegativeWeightError, UnknownVertexError
from graphsearch.graph.result import (
    FailureReason,
    Path,
    PathFailure,
    SearchResult,
    ShortestPaths,
    make_path,
    reconstruct_path,
)

if TYPE_CHECKING:
    from graphsearch.graph.core import Graph

logger = logging.getLogger(__name__)


def dijkstra(
    graph: Graph,
    start: Hashable,
    target: Hashable | None = None,
) -> ShortestPaths:
    """
    Compute shortest distances from start to every vertex.

    Heap entries are (distance, sequence, vertex). The sequence number breaks
    ties between equal distances in push order (FIFO), which keeps results
    reproducible for a fixed insertion order. Stale entries for already
    settled vertices are skipped when popped.

    Args:
        graph: Graph to search
        start: Source vertex
        target: If given, stop as soon as this vertex is settled. Distances
            of vertices not yet settled are then upper bounds.

    Returns:
        ShortestPaths(distances, predecessors). distances holds every vertex
        (math.inf when unreachable); predecessors holds every reached vertex,
        with None for start.

    Raises:
        UnknownVertexError: If start is not in the graph
        NegativeWeightError: If a negative edge is reachable from start
    """
    if start not in graph:
        raise UnknownVertexError(start)

    distances: dict[Hashable, float] = {vertex: math.inf for vertex in graph.vertices()}
    distances[start] = 0
    predecessors: dict[Hashable, Hashable | None] = {start: None}
    settled: set[Hashable] = set()

    counter = itertools.count()
    heap = [(0, next(counter), start)]

    while heap:
        distance, _, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)

        if current == target:
            break

        for neighbor, weight in graph.neighbors(current):
            if weight < 0:
                raise NegativeWeightError(current, neighbor, weight)
            if neighbor in settled:
                continue
            candidate = distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = current
                heapq.heappush(heap, (candidate, next(counter), neighbor))

    logger.debug(
        f"Dijkstra from {start!r}: settled {len(settled)}/{len(distances)} vertices"
    )
    return ShortestPaths(distances=distances, predecessors=predecessors)


def shortest_path(
    predecessors: dict[Hashable, Hashable | None],
    start: Hashable,
    end: Hashable,
    graph: Graph | None = None,
) -> SearchResult:
    """
    Rebuild the start -> end path from a Dijkstra predecessor map.

    The predecessor map carries no weights, so the Path cost is only
    filled in when graph is given. ShortestPaths.path_to() does the same
    using the computed distances.

    Returns:
        Path, or PathFailure: UNKNOWN_VERTEX if graph is given and lacks
        start or end, NO_PATH_EXISTS if end was never reached
    """
    if graph is not None:
        for vertex in (start, end):
            if vertex not in graph:
                return PathFailure(
                    FailureReason.UNKNOWN_VERTEX, f"{vertex!r} is not in the graph"
                )
    if end not in predecessors:
        return PathFailure(
            FailureReason.NO_PATH_EXISTS, f"{end!r} is not reachable from {start!r}"
        )
    vertices = reconstruct_path(predecessors, end)
    if vertices[0] != start:
        return PathFailure(
            FailureReason.NO_PATH_EXISTS,
            f"predecessor chain for {end!r} does not lead back to {start!r}",
        )
    if graph is not None:
        return make_path(graph, vertices)
    return Path(vertices=tuple(vertices))


# Name used in most textbook presentations
get_shortest_path = shortest_path
