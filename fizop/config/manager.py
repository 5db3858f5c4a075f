"""
Configuration Manager for the Fizop validator.

This module handles loading, validation, and merging of configuration from multiple sources:
- System defaults
- User configuration (~/.fizop/config.yaml)
- Project configuration (./.fizop/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .environment import EnvironmentVariables, parse_bool
from .schema import FizopConfig
from .yaml_parser import ConfigurationYAMLParser, YAMLParsingError


logger = logging.getLogger(__name__)


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self):
        self.user_config_path = Path.home() / ".fizop" / "config.yaml"
        self.project_config_path = Path.cwd() / ".fizop" / "config.yaml"
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> FizopConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.fizop/config.yaml)
        5. User config (~/.fizop/config.yaml)
        6. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides; None values are ignored

        Returns:
            FizopConfig: Merged configuration

        Raises:
            ValueError: If configuration files contain invalid YAML or values
        """
        config_dict = asdict(FizopConfig())

        if self.user_config_path.exists():
            config_dict.update(self._load_yaml_file(self.user_config_path))

        if self.project_config_path.exists():
            config_dict.update(self._load_yaml_file(self.project_config_path))

        if config_file:
            config_dict.update(self._load_yaml_file(Path(config_file)))

        config_dict.update(EnvironmentVariables.load())

        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        config_dict = self.substitute_environment_variables(config_dict)
        config_dict = self.coerce_string_values(config_dict)

        config = FizopConfig(**config_dict)
        errors = self.validate_configuration(config)
        if errors:
            raise ValueError("Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors))

        logger.debug(f"Configuration loaded: {config}")
        return config

    def validate_configuration(self, config: FizopConfig) -> List[str]:
        """Validate configuration and return any errors."""
        return config.validate()

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ValueError: If a referenced environment variable without default is missing
        """
        pattern = r'\$\{([^}]+)\}'

        def replace_var(match):
            var_expr = match.group(1)

            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)

            if var_expr not in os.environ:
                raise ValueError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]

        return {
            key: re.sub(pattern, replace_var, value) if isinstance(value, str) else value
            for key, value in config_dict.items()
        }

    def coerce_string_values(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert string values of boolean and numeric settings to their types.

        Substitution always yields strings, so ``strict: ${FIZOP_CI:-false}``
        arrives here as ``"false"``. Strings that do not convert are kept
        unchanged and reported by FizopConfig.validate().
        """
        coerced = dict(config_dict)

        strict = coerced.get('strict')
        if isinstance(strict, str):
            try:
                coerced['strict'] = parse_bool('strict', strict)
            except ValueError:
                pass

        timeout = coerced.get('http_timeout')
        if isinstance(timeout, str):
            try:
                coerced['http_timeout'] = float(timeout)
            except ValueError:
                pass

        return coerced

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            config_dict, validation_errors = self.yaml_parser.validate_and_parse_file(file_path)
        except YAMLParsingError as e:
            raise ValueError(str(e))

        if validation_errors:
            raise ValueError(
                f"Configuration validation errors in {file_path}:\n"
                + "\n".join(f"  - {error}" for error in validation_errors)
            )

        return config_dict
