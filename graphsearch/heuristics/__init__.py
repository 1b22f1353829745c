"""
Heuristics module.

Provides heuristic functions for guiding A* search. Every heuristic is a
callable h(vertex, goal) -> float:
- zero: Always 0 (A* degenerates to Dijkstra)
- manhattan / euclidean / chebyshev: Distances between coordinate tuples
- PositionHeuristic: Coordinate lookup for labelled vertices
- scaled / max_of: Combinators
"""

from graphsearch.heuristics.combinators import max_of, scaled
from graphsearch.heuristics.distance import (
    METRICS,
    PositionHeuristic,
    chebyshev,
    euclidean,
    manhattan,
    zero,
)

__all__ = [
    "METRICS",
    "PositionHeuristic",
    "chebyshev",
    "euclidean",
    "get_heuristic",
    "manhattan",
    "max_of",
    "scaled",
    "zero",
]


def get_heuristic(name: str):
    """
    Get a heuristic by name.

    Args:
        name: Heuristic identifier (zero, manhattan, euclidean, chebyshev)

    Returns:
        The heuristic callable

    Raises:
        ValueError: If heuristic name is unknown
    """
    if name not in METRICS:
        available = ", ".join(METRICS.keys())
        raise ValueError(f"Unknown heuristic '{name}'. Available: {available}")
    return METRICS[name]
