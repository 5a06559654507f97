"""
Numerical algorithms behind interpolated functions.

This module provides the natural cubic spline representation, ordering of
sample arrays and symbolic export of interpolated functions.
"""

from .interpolation import ensure_ascending_order
from .spline import CubicSplineRepresentation
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "ensure_ascending_order",
    "CubicSplineRepresentation",
    "PiecewiseBuilder"
]
