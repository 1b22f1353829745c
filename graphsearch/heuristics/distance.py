"""
Distance heuristics over vertex coordinates.

The plain functions expect vertices that *are* coordinates, such as the
(x, y) tuples produced by grid_graph(). PositionHeuristic looks coordinates
up in a table, for graphs whose vertices are labels.

Which distance is admissible depends on the graph:
- manhattan: 4-connected grids with unit step cost
- chebyshev: 8-connected grids where a diagonal step also costs 1
- euclidean: any graph embedded in space where each edge weight is at
  least the straight-line length of the edge
"""

from __future__ import annotations

import logging
from typing import Hashable, Mapping, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def _as_vector(point: Sequence[float]) -> np.ndarray:
    return np.asarray(point, dtype=np.float64)


def zero(vertex: Hashable, goal: Hashable) -> float:
    """Trivially admissible heuristic."""
    return 0.0


def manhattan(vertex: Sequence[float], goal: Sequence[float]) -> float:
    """Sum of absolute coordinate differences (L1)."""
    return float(np.abs(_as_vector(vertex) - _as_vector(goal)).sum())


def euclidean(vertex: Sequence[float], goal: Sequence[float]) -> float:
    """Straight-line distance (L2)."""
    return float(np.linalg.norm(_as_vector(vertex) - _as_vector(goal)))


def chebyshev(vertex: Sequence[float], goal: Sequence[float]) -> float:
    """Largest absolute coordinate difference (L-infinity)."""
    diff = np.abs(_as_vector(vertex) - _as_vector(goal))
    if diff.size == 0:
        return 0.0
    return float(diff.max())


METRICS = {
    "zero": zero,
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
}


class PositionHeuristic:
    """
    Distance heuristic for labelled vertices with known coordinates.

    Coordinates are stacked into a single float64 matrix up front, so each
    call is one row lookup plus a vectorised distance.

    Vertices without a position estimate 0, which keeps the heuristic
    admissible for them.

    Attributes:
        metric: Name of the distance function (manhattan, euclidean, chebyshev)
        scale: Multiplier applied to the raw distance, e.g. the minimum cost
            per unit of distance
    """

    def __init__(
        self,
        positions: Mapping[Hashable, Sequence[float]],
        metric: str = "euclidean",
        scale: float = 1.0,
    ) -> None:
        """
        Initialize from a {vertex: coordinates} mapping.

        Raises:
            ValueError: If metric is unknown or coordinates differ in length
        """
        if metric not in ("manhattan", "euclidean", "chebyshev"):
            raise ValueError(f"Unknown metric '{metric}'")
        self.metric = metric
        self.scale = scale
        self._index = {vertex: i for i, vertex in enumerate(positions)}
        try:
            self._coords = np.array(
                [list(p) for p in positions.values()], dtype=np.float64
            )
        except ValueError as e:
            raise ValueError(f"Positions must all have the same dimension: {e}") from e
        logger.debug(
            f"PositionHeuristic: {len(self._index)} positions, metric={metric}"
        )

    def __call__(self, vertex: Hashable, goal: Hashable) -> float:
        i = self._index.get(vertex)
        j = self._index.get(goal)
        if i is None or j is None:
            return 0.0

        diff = np.abs(self._coords[i] - self._coords[j])
        if self.metric == "manhattan":
            distance = diff.sum()
        elif self.metric == "chebyshev":
            distance = diff.max() if diff.size else 0.0
        else:
            distance = np.sqrt(np.dot(diff, diff))
        return float(distance) * self.scale

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(positions={len(self._index)}, "
            f"metric={self.metric!r}, scale={self.scale})"
        )
