"""Custom exceptions for pyinterpfunct."""
import logging

logger = logging.getLogger(__name__)


class InterpolationError(Exception):
    """Base exception for all interpolated-function errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InterpolationError raised: %s", message)


class DataFileError(InterpolationError):
    """Exception raised when a data file is missing or cannot be read."""

    def __init__(self, message, file_path=None):
        self.file_path = file_path
        super().__init__(message)
        logger.error("DataFileError raised: %s", message)


class InsufficientDataError(InterpolationError):
    """Exception raised when a data file holds too few complete (x, y) pairs."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InsufficientDataError raised: %s", message)


class DataOrderError(InterpolationError, ValueError):
    """Exception raised when sample arguments are neither ascending nor descending."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("DataOrderError raised: %s", message)


class UninitializedFunctionError(InterpolationError, RuntimeError):
    """Exception raised when an uninitialized function is evaluated or queried."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("UninitializedFunctionError raised: %s", message)


class ConfigurationError(InterpolationError, ValueError):
    """Exception raised when a YAML function configuration is invalid."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ConfigurationError raised: %s", message)
