"""
YAML parser for Fizop validator configuration files.

Parses configuration files with line-aware error reporting and rejects
keys that the configuration schema does not define.
"""

import yaml
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .schema import FizopConfig


class YAMLParsingError(Exception):
    """Custom exception for YAML parsing errors with enhanced context."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        error_parts = [message]

        if file_path:
            error_parts.append(f"File: {file_path}")

        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")

        super().__init__(" | ".join(error_parts))


class ConfigurationYAMLParser:
    """YAML parser for configuration files with validation and error reporting."""

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse YAML configuration file.

        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            line_number = None
            column = None

            if getattr(e, 'problem_mark', None):
                line_number = e.problem_mark.line + 1  # YAML uses 0-based line numbers
                column = e.problem_mark.column + 1

            problem = getattr(e, 'problem', None) or str(e)
            raise YAMLParsingError(f"YAML parsing error: {problem}", file_path, line_number, column)
        except FileNotFoundError:
            raise YAMLParsingError("Configuration file not found", file_path)
        except PermissionError:
            raise YAMLParsingError("Permission denied reading configuration file", file_path)
        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError("Configuration root must be a mapping", file_path)
        return content

    def validate_and_parse_file(self, file_path: Path) -> Tuple[Dict[str, Any], List[str]]:
        """Parse a file and list keys that FizopConfig does not know."""
        config_dict = self.parse_file(file_path)
        known = {f.name for f in fields(FizopConfig)}
        errors = [
            f"Unknown configuration key '{key}'. Valid keys: {sorted(known)}"
            for key in config_dict
            if key not in known
        ]
        return config_dict, errors
