"""
PyInterpFunct - cubic-spline interpolation of tabulated one-dimensional functions.

This library loads a real function of one argument from a two-column text file
and evaluates it anywhere on the real line: cubic spline inside the tabulated
domain, flat outside it. A constant-one function over a declared domain can
stand in where no data is available.

Main Components:
- Core: InterpolatedFunction, its state variants and exceptions
- Algorithms: natural cubic spline, ordering checks, symbolic export
- Parsing: two-column data reader, YAML definitions, public API
- Visualization: plots of functions and their knots
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pyinterpfunct")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"

# Core definitions
from .core.interpolated_function import InterpolatedFunction
from .core.exceptions import (InterpolationError, DataFileError, InsufficientDataError, DataOrderError,
                              UninitializedFunctionError, ConfigurationError)

# Main API functions
from .parsing.api import load_function, create_function, validate_yaml_file, get_function_info
from .parsing.runtime import initialize_or_abort, load_or_abort

# Algorithms
from .algorithms.spline import CubicSplineRepresentation
from .algorithms.piecewise_builder import PiecewiseBuilder

# Visualization
from .visualization.plotters import FunctionVisualizer

__all__ = [
    # Version
    '__version__',

    # Core classes
    'InterpolatedFunction',

    # Exceptions
    'InterpolationError',
    'DataFileError',
    'InsufficientDataError',
    'DataOrderError',
    'UninitializedFunctionError',
    'ConfigurationError',

    # Main API
    'load_function',
    'create_function',
    'validate_yaml_file',
    'get_function_info',
    'initialize_or_abort',
    'load_or_abort',

    # Algorithms
    'CubicSplineRepresentation',
    'PiecewiseBuilder',

    # Visualization
    'FunctionVisualizer'
]

# Package metadata
__author__ = "Rahil Doshi"
__description__ = "Cubic-spline interpolated one-dimensional functions from tabulated data"
