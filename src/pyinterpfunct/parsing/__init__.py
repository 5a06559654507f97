"""
Loading and configuration modules for PyInterpFunct.

The data reader lives in ``parsing.io``; YAML configuration, the public API and the
hard-fail adapter live in ``parsing.config``, ``parsing.api`` and ``parsing.runtime``.
They are imported from their modules directly because they depend on
``pyinterpfunct.core``, which itself uses the reader.
"""

from .io.data_handler import load_two_column_data, data_file_exists

__all__ = [
    'load_two_column_data',
    'data_file_exists'
]
