import logging
import numpy as np
from typing import Tuple

from pyinterpfunct.core.exceptions import DataOrderError

logger = logging.getLogger(__name__)


def ensure_ascending_order(x_array: np.ndarray, *value_arrays: np.ndarray) -> Tuple[np.ndarray, ...]:
    """Ensure argument array is strictly ascending, flipping all provided arrays if it is strictly descending."""
    logger.debug("Checking array order for %d arrays (x + %d value arrays)",
                 len(value_arrays) + 1, len(value_arrays))
    if len(x_array) < 2:
        logger.debug("Array too short for order check: length=%d", len(x_array))
        return (x_array,) + value_arrays
    # Steps are compared with zero; knot spacing has no absolute scale
    diffs = np.diff(x_array)
    ascending_count = int(np.sum(diffs > 0))
    descending_count = int(np.sum(diffs < 0))
    logger.debug("Array differences: %d ascending, %d descending, %d flat",
                 ascending_count, descending_count, len(diffs) - ascending_count - descending_count)
    if ascending_count == len(diffs):
        logger.debug("Array is strictly ascending")
        return (x_array,) + value_arrays
    if descending_count == len(diffs):
        logger.debug("Array is strictly descending, flipping all arrays")
        flipped_x = np.flip(x_array)
        flipped_values = tuple(np.flip(arr) for arr in value_arrays)
        logger.debug("Flipped arrays: x range [%g, %g] -> [%g, %g]",
                     x_array[0], x_array[-1], flipped_x[0], flipped_x[-1])
        return (flipped_x,) + flipped_values
    shown = x_array.tolist() if len(x_array) <= 20 else f"[{x_array[0]}, ..., {x_array[-1]}] (length={len(x_array)})"
    raise DataOrderError(f"Array is not strictly ascending or strictly descending: {shown}")
