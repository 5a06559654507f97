"""Processing and file constants for PyInterpFunct."""

from .processing_constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants"
]
