"""
Graph builders for common shapes.
"""

from __future__ import annotations

import math
from typing import Iterable

from graphsearch.graph.core import Graph

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def grid_graph(
    width: int,
    height: int,
    blocked: Iterable[tuple[int, int]] = (),
    diagonal: bool = False,
    diagonal_cost: float = math.sqrt(2),
) -> Graph:
    """
    Build an undirected grid graph with (x, y) tuple vertices.

    Orthogonal steps cost 1, so manhattan() is an admissible heuristic on a
    4-connected grid. With diagonal=True each cell also connects to its four
    diagonal neighbours at diagonal_cost; euclidean() stays admissible as long
    as diagonal_cost >= sqrt(2).

    Args:
        width: Number of columns (x in 0..width-1)
        height: Number of rows (y in 0..height-1)
        blocked: Cells to leave out entirely
        diagonal: Also connect diagonal neighbours
        diagonal_cost: Weight of a diagonal step

    Raises:
        ValueError: If width or height is negative
    """
    if width < 0 or height < 0:
        raise ValueError(f"Grid size must be non-negative, got {width}x{height}")

    walls = set(blocked)
    steps = _ORTHOGONAL + _DIAGONAL if diagonal else _ORTHOGONAL
    graph = Graph(directed=False)

    for y in range(height):
        for x in range(width):
            if (x, y) in walls:
                continue
            graph.add_vertex((x, y))
            for dx, dy in steps:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height) or (nx, ny) in walls:
                    continue
                cost = 1 if dx == 0 or dy == 0 else diagonal_cost
                graph.add_edge((x, y), (nx, ny), cost)

    return graph
