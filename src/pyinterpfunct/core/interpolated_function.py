import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np
import sympy as sp

from pyinterpfunct.algorithms.interpolation import ensure_ascending_order
from pyinterpfunct.algorithms.piecewise_builder import PiecewiseBuilder
from pyinterpfunct.algorithms.spline import CubicSplineRepresentation
from pyinterpfunct.core.exceptions import InterpolationError, UninitializedFunctionError
from pyinterpfunct.data.constants import ErrorMessages, ProcessingConstants
from pyinterpfunct.parsing.io.data_handler import load_two_column_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnityState:
    """f(x) = 1 over a declared domain."""
    x_min: float
    x_max: float


@dataclass(frozen=True)
class SplineState:
    """Spline-backed function with cached boundary values for flat extrapolation."""
    x_min: float
    x_max: float
    spline: CubicSplineRepresentation
    y_at_xmin: float
    y_at_xmax: float


class InterpolatedFunction:
    """
    Scalar function of one real argument, either cubic-spline-interpolated from a
    two-column data file or identically one.

    A new instance is uninitialized: evaluating it or asking for its bounds raises
    UninitializedFunctionError. Each initialize_* call drops the previous state before
    building the new one, so a failed load leaves the instance uninitialized.

    Outside the data range the function is flat: arguments below x_min give the first
    sample's value and arguments above x_max give the last one.

    An instance must be owned by a single thread, since every evaluation updates the
    spline's interval cache.
    """

    def __init__(self) -> None:
        self._state: Optional[Union[UnityState, SplineState]] = None

    def __enter__(self) -> "InterpolatedFunction":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._state is None:
            return "InterpolatedFunction(uninitialized)"
        if isinstance(self._state, UnityState):
            return f"InterpolatedFunction(unity, domain=[{self._state.x_min}, {self._state.x_max}])"
        return (f"InterpolatedFunction(spline, knots={self._state.spline.num_knots}, "
                f"domain=[{self._state.x_min}, {self._state.x_max}])")

    # --- Initialization ---
    def initialize_from_file(self, file_path: Union[str, Path]) -> bool:
        """
        Load (x, y) samples from a two-column file and build a natural cubic spline.

        Descending data is flipped to ascending order. Missing or unreadable files,
        fewer than two complete pairs and non-monotonic arguments are reported by
        returning False; nothing is raised.
        Args:
            file_path: Path to a whitespace-separated two-column text file
        Returns:
            True if the instance is now in spline mode, False if it is uninitialized
        """
        self.release()
        logger.info("Initializing interpolated function from: %s", file_path)
        try:
            x_array, y_array = load_two_column_data(file_path)
            self._state = self._build_spline_state(x_array, y_array)
        except (InterpolationError, ValueError, OSError) as e:
            logger.error("Failed to initialize interpolated function from %s: %s", file_path, e)
            return False
        logger.info("Interpolated function ready: %d knots on [%g, %g]",
                    self._state.spline.num_knots, self._state.x_min, self._state.x_max)
        return True

    def initialize_from_arrays(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        """Build spline mode directly from sample arrays. Raises on invalid samples."""
        self.release()
        self._state = self._build_spline_state(np.asarray(x_array, dtype=np.float64),
                                               np.asarray(y_array, dtype=np.float64))
        logger.debug("Initialized from arrays: %d knots", self._state.spline.num_knots)

    def initialize_as_unity(self, x_min: float, x_max: float) -> None:
        """Make f(x) = 1 with the declared domain bounds. The bounds are not validated."""
        self.release()
        self._state = UnityState(x_min=float(x_min), x_max=float(x_max))
        logger.info("Initialized unity function on [%g, %g]", x_min, x_max)

    def release(self) -> None:
        """Drop the spline or unity state; the instance becomes uninitialized."""
        if self._state is not None:
            logger.debug("Releasing %s", type(self._state).__name__)
        self._state = None

    @staticmethod
    def _build_spline_state(x_array: np.ndarray, y_array: np.ndarray) -> SplineState:
        x_array, y_array = ensure_ascending_order(x_array, y_array)
        spline = CubicSplineRepresentation(x_array, y_array)
        return SplineState(
            x_min=float(x_array[0]),
            x_max=float(x_array[-1]),
            spline=spline,
            y_at_xmin=float(y_array[0]),
            y_at_xmax=float(y_array[-1]),
        )

    # --- State queries ---
    def _require_state(self) -> Union[UnityState, SplineState]:
        if self._state is None:
            raise UninitializedFunctionError(ErrorMessages.UNINITIALIZED)
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def is_unity(self) -> bool:
        return isinstance(self._state, UnityState)

    @property
    def x_min(self) -> float:
        return self._require_state().x_min

    @property
    def x_max(self) -> float:
        return self._require_state().x_max

    @property
    def y_at_xmin(self) -> float:
        state = self._require_state()
        return 1.0 if isinstance(state, UnityState) else state.y_at_xmin

    @property
    def y_at_xmax(self) -> float:
        state = self._require_state()
        return 1.0 if isinstance(state, UnityState) else state.y_at_xmax

    @property
    def knots(self) -> Optional[Tuple[np.ndarray, np.ndarray]]:
        """Copies of the knot arrays in spline mode, None in unity mode."""
        state = self._require_state()
        if isinstance(state, UnityState):
            return None
        return state.spline.knots.copy(), state.spline.values.copy()

    # --- Domain bounds ---
    def domain_lower_bound(self) -> float:
        """x_min scaled by a relative margin of 1e-5, so a bound fed back to evaluate stays well defined."""
        x_min = self._require_state().x_min
        if x_min > 0.0:
            return x_min * ProcessingConstants.BOUND_SHRINK_FACTOR
        return x_min * ProcessingConstants.BOUND_GROW_FACTOR

    def domain_upper_bound(self) -> float:
        """x_max scaled by a relative margin of 1e-5."""
        x_max = self._require_state().x_max
        if x_max > 0.0:
            return x_max * ProcessingConstants.BOUND_GROW_FACTOR
        return x_max * ProcessingConstants.BOUND_SHRINK_FACTOR

    # --- Evaluation ---
    def evaluate(self, x: float) -> float:
        """
        Evaluate the function at x.
        Args:
            x: Any real argument
        Returns:
            1.0 in unity mode; the boundary sample value outside [x_min, x_max];
            the spline value otherwise
        Raises:
            UninitializedFunctionError: If no initialize_* call has succeeded
        """
        state = self._require_state()
        if isinstance(state, UnityState):
            return 1.0
        if x < state.x_min:
            return state.y_at_xmin
        if x > state.x_max:
            return state.y_at_xmax
        return state.spline.evaluate(float(x))

    def __call__(self, x):
        if np.ndim(x) == 0:
            return self.evaluate(x)
        x_array = np.asarray(x, dtype=np.float64)
        return np.array([self.evaluate(xi) for xi in x_array.ravel()]).reshape(x_array.shape)

    def resample(self, num_points: int = ProcessingConstants.DEFAULT_RESAMPLE_POINTS) -> Tuple[np.ndarray, np.ndarray]:
        """
        Sample the function on num_points equally spaced arguments starting at the lower bound.
        Args:
            num_points: Number of samples
        Returns:
            Tuple of (x_array, y_array)
        """
        if num_points < 1:
            raise ValueError(f"num_points must be positive, got {num_points}")
        lower = self.domain_lower_bound()
        upper = self.domain_upper_bound()
        x_array = lower + np.arange(num_points) * (upper - lower) / num_points
        y_array = np.array([self.evaluate(x) for x in x_array])
        logger.debug("Resampled %d points on [%g, %g)", num_points, lower, upper)
        return x_array, y_array

    def to_expression(self, x: Optional[sp.Symbol] = None) -> sp.Expr:
        """Symbolic equivalent of the current state in the symbol x (default 'x')."""
        state = self._require_state()
        x = x if x is not None else sp.Symbol('x')
        if isinstance(state, UnityState):
            return PiecewiseBuilder.build_unity(x)
        return PiecewiseBuilder.build_from_spline(state.spline, x)
