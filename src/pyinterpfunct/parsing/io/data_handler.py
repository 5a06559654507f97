import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import pandas as pd

from pyinterpfunct.core.exceptions import DataFileError
from pyinterpfunct.data.constants import ErrorMessages, FileConstants

logger = logging.getLogger(__name__)


def data_file_exists(file_path: Union[str, Path]) -> bool:
    """Return True if file_path names an existing regular file."""
    path = Path(file_path)
    return path.exists() and path.is_file()


def load_two_column_data(file_path: Union[str, Path]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Reads (x, y) samples from a whitespace-separated two-column text file.

    Numbers are read as one token stream and paired in order, so line breaks carry
    no meaning. A dangling final token is dropped. Non-numeric tokens become NaN
    and every pair containing one is dropped.
    Args:
        file_path: Path to the data file
    Returns:
        Tuple of (x_array, y_array) as float64 numpy arrays, in file order
    Raises:
        DataFileError: If the file doesn't exist, is not a regular file or cannot be read
    """
    path = Path(file_path)
    if not path.exists():
        raise DataFileError(ErrorMessages.FILE_NOT_FOUND.format(path=path), file_path=path)
    if not path.is_file():
        raise DataFileError(ErrorMessages.NOT_A_FILE.format(path=path), file_path=path)
    try:
        with open(path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
            tokens = f.read().split()
    except (OSError, UnicodeDecodeError) as e:
        raise DataFileError(f"Error reading file {path}: {str(e)}", file_path=path) from e
    logger.debug("Read %d tokens from %s", len(tokens), path)
    x_array, y_array = _pair_tokens(tokens, str(path))
    x_array, y_array = _drop_incomplete_pairs(x_array, y_array, str(path))
    logger.info("Loaded %d samples from %s", len(x_array), path)
    return x_array, y_array


def _pair_tokens(tokens: list, file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Convert the token stream to numbers and split it into alternating x and y arrays."""
    if len(tokens) % 2 == 1:
        logger.warning("Odd number of values (%d) in %s, dropping dangling trailing value '%s'",
                       len(tokens), file_path, tokens[-1])
        tokens = tokens[:-1]
    numeric = pd.to_numeric(pd.Series(tokens, dtype=object), errors='coerce')
    values = np.asarray(numeric, dtype=np.float64)
    return values[0::2], values[1::2]


def _drop_incomplete_pairs(x_array: np.ndarray, y_array: np.ndarray,
                           file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Remove pairs in which either member failed numeric conversion."""
    nan_mask = np.isnan(x_array) | np.isnan(y_array)
    if np.any(nan_mask):
        nan_count = int(np.sum(nan_mask))
        logger.warning("Found %d pairs with non-numeric values in %s, dropping them", nan_count, file_path)
        x_array = x_array[~nan_mask]
        y_array = y_array[~nan_mask]
    return x_array, y_array
