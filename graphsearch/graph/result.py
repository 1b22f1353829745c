"""
Result types returned by the search algorithms.

Every search returns either a Path (success) or a PathFailure (a normal
negative outcome). PathFailure is falsy, so callers can write:

    result = bfs(graph, "A", "E")
    if result:
        print(result.vertices)
    else:
        print(result.reason)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Hashable, Iterator, NamedTuple, Union

if TYPE_CHECKING:
    from graphsearch.graph.core import Graph


class FailureReason(str, Enum):
    """Why a search did not produce a path."""

    NO_PATH_EXISTS = "no_path_exists"
    UNKNOWN_VERTEX = "unknown_vertex"
    SEARCH_LIMIT = "search_limit"
    NEGATIVE_WEIGHT = "negative_weight"


@dataclass(frozen=True)
class Path:
    """
    A path found by a search.

    Attributes:
        vertices: Vertices from start to goal, both inclusive
        cost: Sum of the stored edge weights along the path
    """

    vertices: tuple[Hashable, ...]
    cost: float = 0

    @property
    def start(self) -> Hashable:
        return self.vertices[0]

    @property
    def goal(self) -> Hashable:
        return self.vertices[-1]

    @property
    def hops(self) -> int:
        """Number of edges on the path (len(vertices) - 1)."""
        return len(self.vertices) - 1

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return " -> ".join(str(v) for v in self.vertices)


@dataclass(frozen=True)
class PathFailure:
    """
    A search finished without producing a path.

    Attributes:
        reason: Machine-readable failure category
        detail: Human-readable explanation
    """

    reason: FailureReason
    detail: str = ""

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason.value}: {self.detail}"
        return self.reason.value


SearchResult = Union[Path, PathFailure]


def reconstruct_path(
    predecessors: dict[Hashable, Hashable | None],
    end: Hashable,
) -> list[Hashable]:
    """
    Walk predecessor links back from end and return the vertices in order.

    The chain must terminate at a vertex whose predecessor is None (the start).
    """
    path = []
    current: Hashable | None = end
    while current is not None:
        path.append(current)
        current = predecessors[current]
    path.reverse()
    return path


def path_cost(graph: Graph, vertices: list[Hashable] | tuple[Hashable, ...]) -> float:
    """Sum of the stored edge weights along consecutive vertices."""
    return sum(
        graph.weight(u, v) for u, v in zip(vertices, vertices[1:])
    )


def make_path(graph: Graph, vertices: list[Hashable]) -> Path:
    """Build a Path and fill in its cost from the graph."""
    return Path(vertices=tuple(vertices), cost=path_cost(graph, vertices))


class ShortestPaths(NamedTuple):
    """
    Output of Dijkstra's algorithm.

    Unpacks as ``distances, predecessors = dijkstra(graph, start)``.

    Attributes:
        distances: Every vertex to its shortest distance (math.inf if unreachable)
        predecessors: Every reached vertex to the vertex that settled it
            (None for the start)
    """

    distances: dict[Hashable, float]
    predecessors: dict[Hashable, Hashable | None]

    @property
    def start(self) -> Hashable:
        """The source vertex, always the first key of predecessors."""
        return next(iter(self.predecessors))

    def path_to(self, end: Hashable) -> SearchResult:
        """Path from the start to end, with its cost taken from distances."""
        if end not in self.predecessors:
            if end not in self.distances:
                return PathFailure(
                    FailureReason.UNKNOWN_VERTEX, f"{end!r} is not in the graph"
                )
            return PathFailure(
                FailureReason.NO_PATH_EXISTS,
                f"{end!r} is not reachable from {self.start!r}",
            )
        vertices = reconstruct_path(self.predecessors, end)
        return Path(vertices=tuple(vertices), cost=self.distances[end])
