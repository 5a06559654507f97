from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used by the loader, the spline and the bounds policy."""
    # Relative margins applied to reported domain bounds
    BOUND_SHRINK_FACTOR: Final[float] = 0.99999
    BOUND_GROW_FACTOR: Final[float] = 1.00001
    # Data validation
    MIN_DATA_POINTS: Final[int] = 2
    # Spline
    SPLINE_BOUNDARY_CONDITION: Final[str] = 'natural'
    # Resampling
    DEFAULT_RESAMPLE_POINTS: Final[int] = 300
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 1000
    DOMAIN_PADDING_FACTOR: Final[float] = 0.1


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    FILE_NOT_FOUND: Final[str] = "Data file not found: {path}"
    NOT_A_FILE: Final[str] = "Path is not a file: {path}"
    INSUFFICIENT_DATA_POINTS: Final[str] = "Insufficient data points ({count}), minimum required: {min_points}"
    UNINITIALIZED: Final[str] = "InterpolatedFunction is not initialized; call an initialize_* method first"
    ABORT_ON_LOAD: Final[str] = "Can not initialize interpolated function using file {path}!"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    ABORT_EXIT_CODE: Final[int] = 1
    PLOT_DIRECTORY_NAME: Final[str] = "pyinterpfunct_plots"
