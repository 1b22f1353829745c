"""
Helpers that build new heuristics out of existing ones.
"""

from __future__ import annotations

from typing import Callable, Hashable

Heuristic = Callable[[Hashable, Hashable], float]


def scaled(heuristic: Heuristic, factor: float) -> Heuristic:
    """
    Multiply a heuristic by a constant.

    A factor <= 1 keeps an admissible heuristic admissible.
    """

    def h(vertex: Hashable, goal: Hashable) -> float:
        return factor * heuristic(vertex, goal)

    return h


def max_of(*heuristics: Heuristic) -> Heuristic:
    """
    Pointwise maximum of several heuristics.

    The maximum of admissible heuristics is itself admissible and at least
    as informed as each of them.

    Raises:
        ValueError: If no heuristics are given
    """
    if not heuristics:
        raise ValueError("max_of() needs at least one heuristic")

    def h(vertex: Hashable, goal: Hashable) -> float:
        return max(heuristic(vertex, goal) for heuristic in heuristics)

    return h
