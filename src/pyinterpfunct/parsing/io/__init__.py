"""Readers for tabulated function data."""

from .data_handler import load_two_column_data, data_file_exists

__all__ = [
    "load_two_column_data",
    "data_file_exists"
]
