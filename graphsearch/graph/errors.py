"""
Exceptions raised by the graph engine.

Only programming errors are raised. A missing path is an ordinary outcome
and is reported as a PathFailure value (see graphsearch.graph.result).
"""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for all graph engine errors."""


class UnknownVertexError(GraphError, KeyError):
    """A read operation referenced a vertex that was never added."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"Unknown vertex: {vertex!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class UnknownEdgeError(GraphError, KeyError):
    """No edge exists between the given ordered pair."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No edge {source!r} -> {target!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is not a finite number."""


class NegativeWeightError(GraphError, ValueError):
    """
    Dijkstra reached a negative-weight edge.

    Settled distances would be wrong past a negative edge. A* reports the
    same condition as PathFailure(NEGATIVE_WEIGHT).
    """

    def __init__(self, source: Hashable, target: Hashable, weight: float) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Negative edge weight {weight} on {source!r} -> {target!r}"
        )


class GraphFormatError(GraphError, ValueError):
    """A graph file could not be parsed."""
