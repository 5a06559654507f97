import logging
from pathlib import Path
from typing import Union

from pyinterpfunct.core.exceptions import DataFileError
from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.parsing.config.function_yaml_parser import FunctionYAMLParser
from pyinterpfunct.parsing.io.data_handler import data_file_exists

logger = logging.getLogger(__name__)


def load_function(file_path: Union[str, Path]) -> InterpolatedFunction:
    """
    Create an interpolated function from a two-column data file.

    Unlike InterpolatedFunction.initialize_from_file, which reports failure through its
    return value, this raises so that callers can handle both failure kinds.
    Args:
        file_path: Path to a whitespace-separated two-column text file
    Returns:
        The initialized function in spline mode
    Raises:
        DataFileError: If the file doesn't exist or its samples cannot form a spline
    Examples:
        flux = load_function('Xpol_src_ls_flux-wl.dat')
        flux(532.0)
    """
    logger.info("Loading interpolated function from: %s", file_path)
    if not data_file_exists(file_path):
        raise DataFileError(f"Data file not found: {file_path}", file_path=Path(file_path))
    function = InterpolatedFunction()
    if not function.initialize_from_file(file_path):
        raise DataFileError(f"Could not build an interpolated function from {file_path}",
                            file_path=Path(file_path))
    return function


def create_function(yaml_path: Union[str, Path]) -> InterpolatedFunction:
    """
    Create an interpolated function from a YAML definition.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        The initialized function, in spline or unity mode
    Examples:
        flux = create_function('flux.yaml')
    """
    logger.info("Creating interpolated function from: %s", yaml_path)
    try:
        parser = FunctionYAMLParser(yaml_path)
        function = parser.create_function()
        logger.info("Successfully created function '%s': %r", parser.name, function)
        return function
    except Exception as e:
        logger.error("Failed to create function from %s: %s", yaml_path, e, exc_info=True)
        raise


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML function definition without loading its data.
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    _ = FunctionYAMLParser(yaml_path)
    logger.info("YAML validation successful for: %s", yaml_path)
    return True


def get_function_info(yaml_path: Union[str, Path]) -> dict:
    """
    Get basic information about a function definition without loading its data.
    Example:
        info = get_function_info('flux.yaml')
        print(f"Function: {info['name']} ({info['mode']})")
    """
    parser = FunctionYAMLParser(yaml_path)
    info = {'name': parser.name}
    if parser.is_unity:
        info['mode'] = 'unity'
        info['bounds'] = parser.unity_bounds
    else:
        info['mode'] = 'spline'
        info['file_path'] = str(parser.data_path)
        info['file_exists'] = data_file_exists(parser.data_path)
    return info
