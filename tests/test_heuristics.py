"""
Unit tests for the heuristic functions.
"""

import numpy as np
import pytest

from graphsearch.heuristics import (
    PositionHeuristic,
    chebyshev,
    euclidean,
    get_heuristic,
    manhattan,
    max_of,
    scaled,
    zero,
)


class TestDistanceFunctions:
    """Test the coordinate distance functions."""

    def test_zero(self):
        """zero() ignores its arguments."""
        assert zero("anything", "else") == 0.0

    def test_manhattan(self):
        """L1 distance."""
        assert manhattan((0, 0), (3, 4)) == 7.0

    def test_euclidean(self):
        """L2 distance."""
        assert euclidean((0, 0), (3, 4)) == 5.0

    def test_chebyshev(self):
        """L-infinity distance."""
        assert chebyshev((0, 0), (3, 4)) == 4.0

    def test_three_dimensions(self):
        """Coordinates of any dimension work."""
        assert euclidean((1, 2, 2), (0, 0, 0)) == 3.0
        assert manhattan((1, -2, 2), (0, 0, 0)) == 5.0

    def test_returns_python_float(self):
        """Results are plain floats, not numpy scalars."""
        assert type(euclidean((0, 0), (1, 1))) is float
        assert type(manhattan(np.array([0, 0]), np.array([1, 1]))) is float

    def test_same_point(self):
        """Distance to itself is zero."""
        for metric in (manhattan, euclidean, chebyshev):
            assert metric((2, 5), (2, 5)) == 0.0

    def test_ordering(self):
        """chebyshev <= euclidean <= manhattan for the same pair."""
        a, b = (1, 7), (4, 3)
        assert chebyshev(a, b) <= euclidean(a, b) <= manhattan(a, b)


class TestPositionHeuristic:
    """Test coordinate lookup heuristics."""

    @pytest.fixture
    def positions(self):
        return {"A": (0, 0), "B": (3, 4), "C": (6, 8)}

    def test_euclidean_default(self, positions):
        """Default metric is euclidean."""
        h = PositionHeuristic(positions)
        assert h("A", "B") == pytest.approx(5.0)
        assert h("A", "C") == pytest.approx(10.0)

    def test_manhattan_metric(self, positions):
        """Manhattan metric sums coordinate differences."""
        assert PositionHeuristic(positions, metric="manhattan")("A", "B") == 7.0

    def test_chebyshev_metric(self, positions):
        """Chebyshev metric takes the largest difference."""
        assert PositionHeuristic(positions, metric="chebyshev")("A", "C") == 8.0

    def test_scale(self, positions):
        """scale multiplies the raw distance."""
        assert PositionHeuristic(positions, scale=0.5)("A", "B") == pytest.approx(2.5)

    def test_unknown_vertex_is_zero(self, positions):
        """Vertices without a position estimate 0."""
        h = PositionHeuristic(positions)
        assert h("A", "Z") == 0.0
        assert h("Z", "A") == 0.0

    def test_unknown_metric(self, positions):
        """Unknown metric names are rejected."""
        with pytest.raises(ValueError):
            PositionHeuristic(positions, metric="cosine")

    def test_ragged_positions(self):
        """All coordinates must have the same dimension."""
        with pytest.raises(ValueError):
            PositionHeuristic({"A": (0, 0), "B": (1, 2, 3)})

    def test_repr(self, positions):
        """repr shows the table size and metric."""
        assert "positions=3" in repr(PositionHeuristic(positions))


class TestCombinators:
    """Test scaled and max_of."""

    def test_scaled(self):
        """scaled multiplies by a constant."""
        h = scaled(manhattan, 0.5)
        assert h((0, 0), (2, 2)) == 2.0

    def test_max_of(self):
        """max_of takes the pointwise maximum."""
        h = max_of(chebyshev, euclidean)
        assert h((0, 0), (3, 4)) == 5.0

    def test_max_of_empty(self):
        """At least one heuristic is required."""
        with pytest.raises(ValueError):
            max_of()


class TestRegistry:
    """Test heuristic lookup by name."""

    @pytest.mark.parametrize("name", ["zero", "manhattan", "euclidean", "chebyshev"])
    def test_known(self, name):
        """Every advertised name resolves."""
        assert callable(get_heuristic(name))

    def test_unknown(self):
        """Unknown names list the alternatives."""
        with pytest.raises(ValueError, match="Available"):
            get_heuristic("telepathy")
