"""Constants shared across PyInterpFunct."""

from .constants import ProcessingConstants, FileConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "FileConstants",
    "ErrorMessages"
]
