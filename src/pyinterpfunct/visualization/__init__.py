"""Plotting of interpolated functions."""

from .plotters import FunctionVisualizer

__all__ = [
    "FunctionVisualizer"
]
