"""
In-memory weighted graph used by every search algorithm.

Usage:
    from graphsearch.graph import Graph

    graph = Graph(directed=False)
    graph.add_edge("A", "B", 4)
    graph.add_edge("A", "C")          # weight defaults to 1
    list(graph.neighbors("A"))        # [("B", 4), ("C", 1)]
"""

from __future__ import annotations

import math
from collections.abc import ItemsView
from numbers import Real
from typing import Hashable, Iterable, Iterator

from graphsearch.config import DEFAULT_EDGE_WEIGHT
from graphsearch.graph.errors import (
    InvalidWeightError,
    UnknownEdgeError,
    UnknownVertexError,
)


def _check_weight(weight: float) -> float:
    """Reject weights that are not finite real numbers."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(f"Edge weight must be a number, got {weight!r}")
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidWeightError(f"Edge weight must be finite, got {weight!r}")
    return weight


class Graph:
    """
    Directed or undirected weighted graph backed by an adjacency mapping.

    Each vertex maps to an insertion-ordered dict of {neighbor: weight}.
    Search algorithms expand neighbors in that order, which is what makes
    their tie-breaking deterministic.

    Write operations (add_edge) register unknown vertices automatically.
    Read operations (neighbors, weight) raise UnknownVertexError instead.

    Vertices may be any hashable value except None, which the searches use
    as the "no predecessor" marker.

    Attributes:
        directed: Fixed at construction. When False every edge is stored
            twice, once in each direction, as independent entries.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: dict[Hashable, dict[Hashable, float]] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple],
        directed: bool = False,
    ) -> Graph:
        """
        Build a graph from (source, target) or (source, target, weight) tuples.

        Raises:
            ValueError: If a tuple has neither 2 nor 3 items
        """
        graph = cls(directed=directed)
        for edge in edges:
            if len(edge) == 2:
                graph.add_edge(edge[0], edge[1])
            elif len(edge) == 3:
                graph.add_edge(edge[0], edge[1], edge[2])
            else:
                raise ValueError(f"Edge must have 2 or 3 items, got {edge!r}")
        return graph

    @property
    def directed(self) -> bool:
        return self._directed

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, vertex: Hashable) -> None:
        """Insert vertex with no edges. No-op if it already exists."""
        if vertex is None:
            raise ValueError("None cannot be used as a vertex")
        if vertex not in self._adjacency:
            self._adjacency[vertex] = {}

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        weight: float = DEFAULT_EDGE_WEIGHT,
    ) -> None:
        """
        Insert an edge, registering either endpoint if it is new.

        Re-adding an existing edge overwrites its weight. Undirected graphs
        also store the mirror edge (target -> source).

        Raises:
            InvalidWeightError: If weight is NaN, infinite, or not a number
        """
        _check_weight(weight)
        self.add_vertex(source)
        self.add_vertex(target)
        self._adjacency[source][target] = weight
        if not self._directed:
            self._adjacency[target][source] = weight

    def remove_edge(self, source: Hashable, target: Hashable) -> bool:
        """
        Remove the edge source -> target (and its mirror when undirected).

        Returns:
            True if an edge was removed, False if there was none

        Raises:
            UnknownVertexError: If either endpoint is not in the graph
        """
        self._require(source)
        self._require(target)
        removed = self._adjacency[source].pop(target, None) is not None
        if not self._directed:
            self._adjacency[target].pop(source, None)
        return removed

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex and every edge that starts or ends at it.

        Raises:
            UnknownVertexError: If vertex is not in the graph
        """
        self._require(vertex)
        del self._adjacency[vertex]
        for neighbors in self._adjacency.values():
            neighbors.pop(vertex, None)

    # =========================================================================
    # Queries
    # =========================================================================

    def neighbors(self, vertex: Hashable) -> ItemsView:
        """
        Outgoing (neighbor, weight) pairs of vertex, in insertion order.

        The returned view is lazy and can be iterated any number of times.
        It reflects later mutations, so do not modify the graph while
        iterating over it.

        Raises:
            UnknownVertexError: If vertex was never added
        """
        self._require(vertex)
        return self._adjacency[vertex].items()

    def weight(self, source: Hashable, target: Hashable) -> float:
        """
        Weight of the edge source -> target.

        Raises:
            UnknownVertexError: If source is not in the graph
            UnknownEdgeError: If there is no such edge
        """
        self._require(source)
        try:
            return self._adjacency[source][target]
        except KeyError:
            raise UnknownEdgeError(source, target) from None

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return target in self._adjacency.get(source, {})

    def vertices(self) -> Iterator[Hashable]:
        """All vertices in insertion order."""
        return iter(self._adjacency)

    def edges(self) -> Iterator[tuple[Hashable, Hashable, float]]:
        """
        All stored (source, target, weight) entries.

        Undirected graphs yield each edge twice, once per direction,
        since the mirrored entries are stored independently.
        """
        for source, neighbors in self._adjacency.items():
            for target, weight in neighbors.items():
                yield source, target, weight

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of edges, counting an undirected edge once."""
        total = sum(len(neighbors) for neighbors in self._adjacency.values())
        if self._directed:
            return total
        loops = sum(1 for v, neighbors in self._adjacency.items() if v in neighbors)
        return (total - loops) // 2 + loops

    def has_negative_weights(self) -> bool:
        return any(weight < 0 for _, _, weight in self.edges())

    def copy(self) -> Graph:
        """Independent copy (vertex labels themselves are shared)."""
        clone = Graph(directed=self._directed)
        clone._adjacency = {
            vertex: dict(neighbors) for vertex, neighbors in self._adjacency.items()
        }
        return clone

    def _require(self, vertex: Hashable) -> None:
        if vertex not in self._adjacency:
            raise UnknownVertexError(vertex)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"{self.__class__.__name__}({kind}, "
            f"vertices={self.vertex_count}, edges={self.edge_count})"
        )
