"""Process-level adapters for setup-time loading, where a missing input is fatal."""
import logging
import sys
from pathlib import Path
from typing import Union

from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.data.constants import ErrorMessages, FileConstants

logger = logging.getLogger(__name__)


def initialize_or_abort(function: InterpolatedFunction, file_path: Union[str, Path]) -> InterpolatedFunction:
    """
    Initialize function from file_path, terminating the process on failure.

    This is the only place in the package that ends the process. The diagnostic names
    the offending path on stderr before SystemExit is raised.
    Args:
        function: Instance to initialize
        file_path: Path to a two-column data file
    Returns:
        The same instance, now in spline mode
    Raises:
        SystemExit: With FileConstants.ABORT_EXIT_CODE if the file cannot be loaded
    """
    if function.initialize_from_file(file_path):
        return function
    message = ErrorMessages.ABORT_ON_LOAD.format(path=file_path)
    logger.critical(message)
    print(message, file=sys.stderr)
    sys.exit(FileConstants.ABORT_EXIT_CODE)


def load_or_abort(file_path: Union[str, Path]) -> InterpolatedFunction:
    """Create a new function from file_path, terminating the process on failure."""
    return initialize_or_abort(InterpolatedFunction(), file_path)
