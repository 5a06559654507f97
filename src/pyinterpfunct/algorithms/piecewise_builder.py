import logging

import sympy as sp

from pyinterpfunct.algorithms.spline import CubicSplineRepresentation

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Symbolic piecewise equivalents of interpolated functions."""

    @staticmethod
    def build_from_spline(spline: CubicSplineRepresentation, x: sp.Symbol) -> sp.Piecewise:
        """
        Create a piecewise cubic matching the spline, flat outside the knot range.
        Args:
            spline: Spline to export
            x: Argument symbol of the resulting expression
        Returns:
            sp.Piecewise: One cubic per interval plus constant lower/upper branches
        """
        logger.info("Building piecewise expression from %d-knot spline", spline.num_knots)
        knots = spline.knots
        values = spline.values
        conditions = [(sp.Float(values[0]), x < sp.Float(knots[0]))]
        for x_left, x_right, (c3, c2, c1, c0) in spline.segments():
            dx = x - sp.Float(x_left)
            expr = sp.Float(c3) * dx**3 + sp.Float(c2) * dx**2 + sp.Float(c1) * dx + sp.Float(c0)
            conditions.append((expr, x < sp.Float(x_right)))
        # The last cubic also owns x == x_max
        last_expr = conditions.pop()[0]
        conditions.append((last_expr, x <= sp.Float(knots[-1])))
        conditions.append((sp.Float(values[-1]), True))
        logger.debug("Piecewise expression has %d branches", len(conditions))
        return sp.Piecewise(*conditions)

    @staticmethod
    def build_unity(x: sp.Symbol) -> sp.Expr:
        """Create the constant-one function; SymPy collapses the single always-true branch to 1."""
        logger.debug("Building unity piecewise expression in %s", x)
        return sp.Piecewise((sp.Integer(1), True))
