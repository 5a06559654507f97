import logging
from typing import Iterator, Tuple

import numpy as np
from scipy.interpolate import CubicSpline

from pyinterpfunct.core.accelerator import IntervalAccelerator
from pyinterpfunct.core.exceptions import DataOrderError, InsufficientDataError
from pyinterpfunct.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


class CubicSplineRepresentation:
    """
    Natural cubic spline through every given sample, with an interval accelerator.

    The spline is C2 continuous and passes exactly through its knots. Evaluation
    outside [x[0], x[-1]] is not defined here; callers clamp the argument first.
    """

    def __init__(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        x_array = np.asarray(x_array, dtype=np.float64)
        y_array = np.asarray(y_array, dtype=np.float64)
        self._validate(x_array, y_array)
        self._spline = CubicSpline(x_array, y_array, bc_type=ProcessingConstants.SPLINE_BOUNDARY_CONDITION)
        # Coefficients are laid out as (cubic, quadratic, linear, constant) x interval
        self._coefficients = self._spline.c
        self._knots = self._spline.x
        self._values = y_array.copy()
        self.accelerator = IntervalAccelerator()
        logger.debug("Built natural cubic spline with %d knots on [%g, %g]",
                     len(self._knots), self._knots[0], self._knots[-1])

    @staticmethod
    def _validate(x_array: np.ndarray, y_array: np.ndarray) -> None:
        if x_array.ndim != 1 or y_array.ndim != 1:
            raise ValueError(f"Sample arrays must be one-dimensional, got shapes {x_array.shape} and {y_array.shape}")
        if len(x_array) != len(y_array):
            raise ValueError(f"Array length mismatch: x_array({len(x_array)}) != y_array({len(y_array)})")
        if len(x_array) < ProcessingConstants.MIN_DATA_POINTS:
            raise InsufficientDataError(ErrorMessages.INSUFFICIENT_DATA_POINTS.format(
                count=len(x_array), min_points=ProcessingConstants.MIN_DATA_POINTS))
        if not (np.all(np.isfinite(x_array)) and np.all(np.isfinite(y_array))):
            raise ValueError("Sample arrays must contain only finite values")
        if not np.all(np.diff(x_array) > 0):
            raise DataOrderError("Knot arguments must be strictly increasing")

    @property
    def knots(self) -> np.ndarray:
        return self._knots

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def num_knots(self) -> int:
        return len(self._knots)

    def evaluate(self, x: float) -> float:
        """Evaluate the local cubic of the interval holding x, for x inside the knot range."""
        i = self.accelerator.find(self._knots, x)
        c = self._coefficients[:, i]
        dx = x - self._knots[i]
        return float(((c[0] * dx + c[1]) * dx + c[2]) * dx + c[3])

    def segments(self) -> Iterator[Tuple[float, float, Tuple[float, float, float, float]]]:
        """Yield (x_left, x_right, (c3, c2, c1, c0)) per interval, coefficients in powers of (x - x_left)."""
        for i in range(len(self._knots) - 1):
            c = self._coefficients[:, i]
            yield (float(self._knots[i]), float(self._knots[i + 1]),
                   (float(c[0]), float(c[1]), float(c[2]), float(c[3])))
