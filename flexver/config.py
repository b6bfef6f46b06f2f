"""
Parser configuration module.

Manages flexver settings: log level, whether oversized digit runs use
arbitrary-precision integers, and the default CLI output format.
Configuration can be loaded from a YAML file or environment variables.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from platformdirs import user_config_dir

logger = logging.getLogger("flexver.config")


# ============================================================================
# Constants
# ============================================================================

APP_NAME = "flexver"
APP_AUTHOR = "flexver"
CONFIG_FILENAME = "flexver.yaml"

# Environment variable names
ENV_CONFIG_PATH = "FLEXVER_CONFIG_PATH"
ENV_LOG_LEVEL = "FLEXVER_LOG_LEVEL"
ENV_BIG_INTEGER = "FLEXVER_BIG_INTEGER"
ENV_OUTPUT_FORMAT = "FLEXVER_OUTPUT_FORMAT"

# Default values
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BIG_INTEGER = True
DEFAULT_OUTPUT_FORMAT = "text"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_OUTPUT_FORMATS = ("text", "json")

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


# ============================================================================
# Exceptions
# ============================================================================


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""

    pass


# ============================================================================
# Helper Functions
# ============================================================================


def get_default_config_dir() -> Path:
    """
    Get the default configuration directory for the current platform.

    Returns:
        Path to the platform-appropriate config directory
    """
    return Path(user_config_dir(APP_NAME, APP_AUTHOR))


def get_default_config_path() -> Path:
    """
    Get the default configuration file path.

    Returns:
        Path to the default config file
    """
    return get_default_config_dir() / CONFIG_FILENAME


def parse_bool(value) -> bool:
    """
    Interpret a config or environment value as a boolean.

    Raises:
        ConfigValidationError: If the value is not a recognised boolean
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigValidationError(f"Invalid boolean value: {value!r}")


# ============================================================================
# ParserConfig Class
# ============================================================================


class ParserConfig:
    """
    Parser configuration manager.

    Configuration sources (in priority order):
    1. Environment variables
    2. Configuration file
    3. Default values

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        big_integer: Use arbitrary-precision integers for oversized digit runs
        output_format: Default CLI output format (text or json)
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config_dir: Optional[Path] = None,
    ):
        """
        Initialize parser configuration.

        Args:
            config_path: Explicit path to config file (takes precedence)
            config_dir: Directory containing config file
        """
        if config_path:
            self._config_path = Path(config_path)
            self._config_dir = self._config_path.parent
        elif config_dir:
            self._config_dir = Path(config_dir)
            self._config_path = self._config_dir / CONFIG_FILENAME
        else:
            env_path = os.environ.get(ENV_CONFIG_PATH)
            if env_path:
                self._config_path = Path(env_path)
                self._config_dir = self._config_path.parent
            else:
                self._config_dir = get_default_config_dir()
                self._config_path = self._config_dir / CONFIG_FILENAME

        self._log_level: str = DEFAULT_LOG_LEVEL
        self._big_integer: bool = DEFAULT_BIG_INTEGER
        self._output_format: str = DEFAULT_OUTPUT_FORMAT

        self._load()

    @property
    def config_path(self) -> Path:
        """Get the configuration file path."""
        return self._config_path

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory."""
        return self._config_dir

    # -------------------------------------------------------------------------
    # Configuration Properties
    # -------------------------------------------------------------------------

    @property
    def log_level(self) -> str:
        """Get the log level."""
        return os.environ.get(ENV_LOG_LEVEL, self._log_level).upper()

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._log_level = value

    @property
    def big_integer(self) -> bool:
        """Whether oversized digit runs use arbitrary-precision integers."""
        env_value = os.environ.get(ENV_BIG_INTEGER)
        if env_value is not None:
            return parse_bool(env_value)
        return self._big_integer

    @big_integer.setter
    def big_integer(self, value) -> None:
        self._big_integer = parse_bool(value)

    @property
    def output_format(self) -> str:
        """Get the default CLI output format."""
        return os.environ.get(ENV_OUTPUT_FORMAT, self._output_format).lower()

    @output_format.setter
    def output_format(self, value: str) -> None:
        self._output_format = value

    # -------------------------------------------------------------------------
    # Configuration Management
    # -------------------------------------------------------------------------

    def _load(self) -> None:
        """Load configuration from file."""
        if not self._config_path.exists():
            logger.debug(f"No config file at {self._config_path}, using defaults")
            return

        try:
            with open(self._config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse config file: {e}")

        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file must contain a mapping, got: {type(data).__name__}"
            )

        self._log_level = str(data.get("log_level", DEFAULT_LOG_LEVEL))
        self._big_integer = parse_bool(data.get("big_integer", DEFAULT_BIG_INTEGER))
        self._output_format = str(data.get("output_format", DEFAULT_OUTPUT_FORMAT))
        logger.debug(f"Loaded configuration from {self._config_path}")

    def to_dict(self) -> dict:
        """Get the effective configuration as a dict."""
        return {
            "log_level": self.log_level,
            "big_integer": self.big_integer,
            "output_format": self.output_format,
        }

    def save(self) -> None:
        """Save configuration to file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)

        data = {
            "log_level": self._log_level,
            "big_integer": self._big_integer,
            "output_format": self._output_format,
        }

        with open(self._config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)

    def validate(self) -> None:
        """
        Validate the current configuration.

        Raises:
            ConfigValidationError: If configuration is invalid
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got: {self.log_level}"
            )

        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ConfigValidationError(
                f"output_format must be one of {', '.join(VALID_OUTPUT_FORMATS)}, "
                f"got: {self.output_format}"
            )

        # Reading the property re-validates an environment override
        self.big_integer
