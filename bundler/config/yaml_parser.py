"""
YAML parser with validation for code-bundler configuration files.

Provides YAML parsing with line-numbered error reporting and structure
validation for configuration files.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


class YAMLParsingError(Exception):
    """Custom exception for YAML parsing errors with enhanced context."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        # Build detailed error message
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

    EXPECTED_KEYS = {
        'default_language', 'default_sort', 'excluded_dirs',
        'encoding', 'log_level', 'log_file'
    }

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse YAML configuration file.

        Args:
            file_path: Path to YAML configuration file

        Returns:
            Dictionary containing parsed configuration

        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return self._to_mapping(yaml.safe_load(f), file_path)

        except yaml.YAMLError as e:
            raise self._yaml_error(e, file_path)

        except FileNotFoundError:
            raise YAMLParsingError("Configuration file not found", file_path)

        except PermissionError:
            raise YAMLParsingError("Permission denied reading configuration file", file_path)

        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)

    def validate_configuration_structure(self, config_dict: Dict[str, Any]) -> List[str]:
        """
        Validate configuration dictionary structure against expected schema.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        unknown_keys = set(config_dict.keys()) - self.EXPECTED_KEYS
        if unknown_keys:
            errors.append(f"Unknown configuration keys: {', '.join(sorted(unknown_keys))}")

        for key in ('default_language', 'default_sort', 'encoding', 'log_level'):
            if key in config_dict and not isinstance(config_dict[key], str):
                errors.append(f"{key} must be a string")

        if 'log_file' in config_dict and config_dict['log_file'] is not None \
                and not isinstance(config_dict['log_file'], str):
            errors.append("log_file must be a string")

        if 'excluded_dirs' in config_dict:
            excluded = config_dict['excluded_dirs']
            if not isinstance(excluded, list) or not all(isinstance(d, str) for d in excluded):
                errors.append("excluded_dirs must be a list of strings")

        return errors

    def validate_and_parse_file(self, file_path: Path) -> Tuple[Dict[str, Any], List[str]]:
        """Parse a file and return its content together with validation errors."""
        config_dict = self.parse_file(file_path)
        return config_dict, self.validate_configuration_structure(config_dict)

    def _to_mapping(self, content: Any, file_path: Optional[Path]) -> Dict[str, Any]:
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError("Configuration must be a mapping of keys to values", file_path)
        return content

    def _yaml_error(self, error: yaml.YAMLError, file_path: Optional[Path]) -> YAMLParsingError:
        line_number = None
        column = None

        mark = getattr(error, 'problem_mark', None)
        if mark is not None:
            line_number = mark.line + 1  # YAML uses 0-based line numbers
            column = mark.column + 1

        problem = getattr(error, 'problem', None)
        if problem:
            message = f"YAML parsing error: {problem}"
        else:
            message = f"YAML parsing error: {error}"

        return YAMLParsingError(message, file_path, line_number, column)
