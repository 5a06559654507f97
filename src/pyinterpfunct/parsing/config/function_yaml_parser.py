import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from ruamel.yaml import YAML, constructor, scanner
from ruamel.yaml.error import YAMLError

from pyinterpfunct.core.exceptions import ConfigurationError
from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.parsing.config.yaml_keys import (BOUNDS_KEY, DESCRIPTION_KEY, FILE_PATH_KEY, NAME_KEY,
                                                    UNITY_KEY)

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ConfigurationError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ConfigurationError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except YAMLError as e:
            logger.error("Invalid YAML in file %s: %s", self.config_path, e)
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {str(e)}") from e


class FunctionYAMLParser(YAMLFileParser):
    """
    Parser for interpolated function definitions in YAML format.

    A definition either points at a two-column data file::

        name: source_flux
        file_path: flux.dat

    or declares the unity function over a domain::

        unity:
          bounds: [0.1, 10.0]

    Relative data paths are resolved against the directory of the YAML file.
    """

    VALID_TOP_LEVEL_KEYS = {NAME_KEY, DESCRIPTION_KEY, FILE_PATH_KEY, UNITY_KEY}
    VALID_UNITY_KEYS = {BOUNDS_KEY}

    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        self._validate_config()
        logger.info("FunctionYAMLParser initialized for '%s'", self.name)

    @property
    def name(self) -> str:
        return str(self.config.get(NAME_KEY, self.config_path.stem))

    @property
    def is_unity(self) -> bool:
        return UNITY_KEY in self.config

    @property
    def data_path(self) -> Path:
        """Absolute data file path of a file-backed definition."""
        if self.is_unity:
            raise ConfigurationError(f"'{self.name}' is a unity function and has no '{FILE_PATH_KEY}'")
        path = Path(str(self.config[FILE_PATH_KEY]))
        return path if path.is_absolute() else self.base_dir / path

    @property
    def unity_bounds(self) -> Tuple[float, float]:
        if not self.is_unity:
            raise ConfigurationError(f"'{self.name}' is not a unity function")
        lower, upper = self.config[UNITY_KEY][BOUNDS_KEY]
        return float(lower), float(upper)

    # --- Public API ---
    def create_function(self) -> InterpolatedFunction:
        """
        Create an InterpolatedFunction from the parsed definition.
        Raises:
            FileNotFoundError: If a file-backed definition names a missing file
            ConfigurationError: If the data file cannot be turned into a spline
        """
        function = InterpolatedFunction()
        if self.is_unity:
            lower, upper = self.unity_bounds
            function.initialize_as_unity(lower, upper)
            return function
        data_path = self.data_path
        if not data_path.is_file():
            logger.error("Data file for '%s' not found: %s", self.name, data_path)
            raise FileNotFoundError(f"Data file for '{self.name}' not found: {data_path}")
        if not function.initialize_from_file(data_path):
            raise ConfigurationError(f"Could not build interpolated function '{self.name}' from {data_path}")
        return function

    # --- Validation ---
    def _validate_config(self) -> None:
        if not isinstance(self.config, dict):
            raise ConfigurationError(f"Root of {self.config_path} must be a mapping, "
                                     f"got {type(self.config).__name__}")
        self._check_keys(self.config.keys(), self.VALID_TOP_LEVEL_KEYS, "top-level")
        has_file = FILE_PATH_KEY in self.config
        has_unity = UNITY_KEY in self.config
        if has_file == has_unity:
            raise ConfigurationError(f"Exactly one of '{FILE_PATH_KEY}' or '{UNITY_KEY}' "
                                     f"must be defined in {self.config_path}")
        if has_file:
            self._validate_file_path(self.config[FILE_PATH_KEY])
        else:
            self._validate_unity(self.config[UNITY_KEY])

    def _validate_file_path(self, value: Any) -> None:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"'{FILE_PATH_KEY}' must be a non-empty string, got {value!r}")

    def _validate_unity(self, unity: Any) -> None:
        if not isinstance(unity, dict):
            raise ConfigurationError(f"'{UNITY_KEY}' must be a mapping with '{BOUNDS_KEY}'")
        self._check_keys(unity.keys(), self.VALID_UNITY_KEYS, f"'{UNITY_KEY}'")
        bounds = unity.get(BOUNDS_KEY)
        if not isinstance(bounds, list) or len(bounds) != 2:
            raise ConfigurationError(f"'{UNITY_KEY}.{BOUNDS_KEY}' must be a list of two numbers, got {bounds!r}")
        for bound in bounds:
            if isinstance(bound, bool) or not isinstance(bound, (int, float)):
                raise ConfigurationError(f"'{UNITY_KEY}.{BOUNDS_KEY}' values must be numeric, got {bound!r}")

    @staticmethod
    def _check_keys(keys, valid_keys: set, section: str) -> None:
        for key in keys:
            if key not in valid_keys:
                suggestion = get_close_matches(str(key), list(valid_keys), n=1, cutoff=0.6)
                hint = f" Did you mean '{suggestion[0]}'?" if suggestion else ""
                raise ConfigurationError(f"Unknown {section} key '{key}'. "
                                         f"Valid keys: {', '.join(sorted(valid_keys))}.{hint}")
