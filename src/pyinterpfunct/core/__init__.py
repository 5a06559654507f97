"""
Core data structures of PyInterpFunct.

This module contains the interpolated function, its state variants, the
interval accelerator and the exception hierarchy.
"""

from .interpolated_function import InterpolatedFunction, SplineState, UnityState
from .accelerator import IntervalAccelerator
from .exceptions import (InterpolationError, DataFileError, InsufficientDataError, DataOrderError,
                         UninitializedFunctionError, ConfigurationError)

__all__ = [
    "InterpolatedFunction",
    "SplineState",
    "UnityState",
    "IntervalAccelerator",
    "InterpolationError",
    "DataFileError",
    "InsufficientDataError",
    "DataOrderError",
    "UninitializedFunctionError",
    "ConfigurationError"
]
