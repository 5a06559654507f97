"""Unit tests for symbolic export."""

import numpy as np
import sympy as sp

from pyinterpfunct.algorithms.piecewise_builder import PiecewiseBuilder
from pyinterpfunct.algorithms.spline import CubicSplineRepresentation


class TestPiecewiseBuilder:
    """Test cases for PiecewiseBuilder."""

    def test_build_from_spline_matches_spline(self):
        x = sp.Symbol('x')
        spline = CubicSplineRepresentation([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
        expr = PiecewiseBuilder.build_from_spline(spline, x)
        assert isinstance(expr, sp.Piecewise)
        for xi in np.linspace(0.0, 3.0, 13):
            assert np.isclose(float(expr.subs(x, xi)), spline.evaluate(xi))

    def test_build_from_spline_is_flat_outside(self):
        u = sp.Symbol('u')
        spline = CubicSplineRepresentation([1.0, 2.0, 3.0], [5.0, 6.0, 8.0])
        expr = PiecewiseBuilder.build_from_spline(spline, u)
        assert float(expr.subs(u, -10.0)) == 5.0
        assert float(expr.subs(u, 10.0)) == 8.0
        assert expr.free_symbols == {u}

    def test_branch_count(self):
        x = sp.Symbol('x')
        spline = CubicSplineRepresentation([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
        expr = PiecewiseBuilder.build_from_spline(spline, x)
        # lower constant + three cubics + upper constant
        assert len(expr.args) == 5

    def test_build_unity(self):
        x = sp.Symbol('x')
        expr = PiecewiseBuilder.build_unity(x)
        assert expr.subs(x, 123.0) == 1
