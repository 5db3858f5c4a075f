"""
Configuration schema for the Fizop validator.

Defines the settings that control validation mode, logging and document
retrieval. Values are layered by ConfigurationManager from defaults,
YAML files, environment variables and CLI options.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from fizop.retrieval import DEFAULT_HTTP_TIMEOUT, DEFAULT_UNPKG_BASE_URL


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class FizopConfig:
    """Complete validator configuration.

    Attributes:
        strict: Run semantic checks after the schema pass
        log_level: Logging level (debug, info, warning, error)
        log_file: Optional log file path
        unpkg_base_url: CDN used to resolve npm package names
        http_timeout: Timeout in seconds for URL retrieval
    """
    strict: bool = True
    log_level: str = LogLevel.WARNING.value
    log_file: str = ""
    unpkg_base_url: str = DEFAULT_UNPKG_BASE_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not isinstance(self.log_level, str):
            errors.append(f"log_level must be a string, got {self.log_level!r}")
        else:
            try:
                LogLevel(self.log_level)
            except ValueError:
                valid_levels = [l.value for l in LogLevel]
                errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        if not isinstance(self.strict, bool):
            errors.append(f"strict must be a boolean, got {self.strict!r}")

        if not isinstance(self.log_file, str):
            errors.append(f"log_file must be a string, got {self.log_file!r}")

        if not isinstance(self.unpkg_base_url, str):
            errors.append(f"unpkg_base_url must be a string, got {self.unpkg_base_url!r}")
        elif not self.unpkg_base_url.startswith(("http://", "https://")):
            errors.append(f"unpkg_base_url must be an http(s) URL, got '{self.unpkg_base_url}'")

        # bool is an int subclass; "true" is not a timeout
        if isinstance(self.http_timeout, bool) or not isinstance(self.http_timeout, (int, float)):
            errors.append(f"http_timeout must be a number of seconds, got {self.http_timeout!r}")
        elif self.http_timeout <= 0:
            errors.append("http_timeout must be positive")

        return errors
