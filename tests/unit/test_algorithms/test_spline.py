"""Unit tests for the cubic spline representation."""

import pytest
import numpy as np
from scipy.interpolate import CubicSpline

from pyinterpfunct.algorithms.spline import CubicSplineRepresentation
from pyinterpfunct.core.exceptions import DataOrderError, InsufficientDataError


class TestCubicSplineRepresentation:
    """Test cases for spline construction and evaluation."""

    def test_matches_natural_scipy_spline(self, sine_arrays):
        x, y = sine_arrays
        spline = CubicSplineRepresentation(x, y)
        reference = CubicSpline(x, y, bc_type='natural')
        for xi in np.linspace(0.0, np.pi, 173):
            assert np.isclose(spline.evaluate(xi), reference(xi), rtol=0, atol=1e-13)

    def test_passes_through_knots(self):
        x = np.array([0.0, 0.3, 1.1, 2.0, 2.4])
        y = np.array([1.0, -2.0, 0.5, 3.0, 3.5])
        spline = CubicSplineRepresentation(x, y)
        for xi, yi in zip(x, y):
            assert np.isclose(spline.evaluate(xi), yi, atol=1e-12)

    def test_second_derivative_vanishes_at_ends(self):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        y = x ** 2
        spline = CubicSplineRepresentation(x, y)
        segments = list(spline.segments())
        # For c3*dx**3 + c2*dx**2 + ..., the second derivative at dx = 0 is 2*c2
        assert np.isclose(2 * segments[0][2][1], 0.0)
        x_left, x_right, (c3, c2, _, _) = segments[-1]
        h = x_right - x_left
        assert np.isclose(6 * c3 * h + 2 * c2, 0.0)

    def test_segments_cover_knot_range(self):
        spline = CubicSplineRepresentation([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        segments = list(spline.segments())
        assert [(s[0], s[1]) for s in segments] == [(0.0, 1.0), (1.0, 2.0)]

    def test_rejects_single_point(self):
        with pytest.raises(InsufficientDataError):
            CubicSplineRepresentation([1.0], [2.0])

    def test_rejects_length_mismatch(self):
        with pytest.raises(ValueError, match="length mismatch"):
            CubicSplineRepresentation([0.0, 1.0, 2.0], [0.0, 1.0])

    def test_rejects_unsorted_knots(self):
        with pytest.raises(DataOrderError):
            CubicSplineRepresentation([0.0, 2.0, 1.0], [0.0, 1.0, 2.0])

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError, match="finite"):
            CubicSplineRepresentation([0.0, 1.0, np.inf], [0.0, 1.0, 2.0])

    def test_does_not_alias_input(self):
        y = np.array([0.0, 1.0, 4.0])
        spline = CubicSplineRepresentation(np.array([0.0, 1.0, 2.0]), y)
        y[0] = 100.0
        assert spline.values[0] == 0.0
