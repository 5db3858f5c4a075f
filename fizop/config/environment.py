"""
Environment variable integration for the Fizop validator.

Centralizes the environment variable names read by the configuration
system and converts their string values to configuration types.
"""

import os
from typing import Any, Dict


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    STRICT = "FIZOP_STRICT"
    LOG_LEVEL = "FIZOP_LOG_LEVEL"
    LOG_FILE = "FIZOP_LOG_FILE"
    UNPKG_BASE_URL = "FIZOP_UNPKG_BASE_URL"
    HTTP_TIMEOUT = "FIZOP_HTTP_TIMEOUT"

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.STRICT: "Run semantic checks after schema validation (true/false)",
            cls.LOG_LEVEL: "Default logging level (debug, info, warning, error)",
            cls.LOG_FILE: "Optional log file path",
            cls.UNPKG_BASE_URL: "CDN base URL used to resolve npm packages (default: https://unpkg.com)",
            cls.HTTP_TIMEOUT: "Timeout in seconds for document downloads",
        }

    @classmethod
    def load(cls) -> Dict[str, Any]:
        """Read configuration overrides from the environment.

        Raises:
            ValueError: If a variable holds a value of the wrong type.
        """
        env_config: Dict[str, Any] = {}

        if cls.STRICT in os.environ:
            env_config['strict'] = parse_bool(cls.STRICT, os.environ[cls.STRICT])

        if cls.LOG_LEVEL in os.environ:
            env_config['log_level'] = os.environ[cls.LOG_LEVEL].lower()

        if cls.LOG_FILE in os.environ:
            env_config['log_file'] = os.environ[cls.LOG_FILE]

        if cls.UNPKG_BASE_URL in os.environ:
            env_config['unpkg_base_url'] = os.environ[cls.UNPKG_BASE_URL]

        if cls.HTTP_TIMEOUT in os.environ:
            try:
                env_config['http_timeout'] = float(os.environ[cls.HTTP_TIMEOUT])
            except ValueError:
                raise ValueError(
                    f"Invalid {cls.HTTP_TIMEOUT}: '{os.environ[cls.HTTP_TIMEOUT]}'. Expected a number of seconds"
                )

        return env_config


def parse_bool(name: str, value: str) -> bool:
    """Convert a true/false style string to bool."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid {name}: '{value}'. Valid options: {', '.join(_TRUE_VALUES + _FALSE_VALUES)}")
