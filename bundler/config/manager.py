"""
Configuration Manager for code-bundler.

This module handles loading, validation, and merging of configuration from multiple sources:
- System defaults
- User configuration (~/.code-bundler/config.yaml)
- Project configuration (./.code-bundler/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .environment import EnvironmentVariables
from .schema import BundlerSettings, LogLevel
from .yaml_parser import ConfigurationYAMLParser, YAMLParsingError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".code-bundler"
CONFIG_FILE_NAME = "config.yaml"


class ConfigurationError(ValueError):
    """Configuration could not be loaded or is invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self, user_config_path: Optional[Path] = None,
                 project_config_path: Optional[Path] = None):
        self.user_config_path = user_config_path or Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        self.project_config_path = project_config_path or Path.cwd() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> BundlerSettings:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.code-bundler/config.yaml)
        5. User config (~/.code-bundler/config.yaml)
        6. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides; None values are ignored

        Returns:
            BundlerSettings: Merged and validated configuration

        Raises:
            ConfigurationError: If configuration files contain invalid YAML or values
        """
        config_dict = self._get_default_config()

        # Layer 1: User configuration
        if self.user_config_path.exists():
            config_dict.update(self._load_yaml_file(self.user_config_path))

        # Layer 2: Project configuration
        if self.project_config_path.exists():
            config_dict.update(self._load_yaml_file(self.project_config_path))

        # Layer 3: Explicit configuration file
        if config_file:
            config_dict.update(self._load_yaml_file(Path(config_file)))

        # Layer 4: Environment variables
        config_dict.update(self._load_environment_variables())

        # Layer 5: CLI overrides (highest precedence)
        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        settings = BundlerSettings(**config_dict)

        errors = self.validate_configuration(settings)
        if errors:
            raise ConfigurationError(
                "Invalid configuration:\n" + "\n".join(f"  - {error}" for error in errors),
                errors=errors,
            )

        logger.debug(f"Configuration loaded: {asdict(settings)}")
        return settings

    def validate_configuration(self, settings: BundlerSettings) -> List[str]:
        """Validate configuration and return any errors."""
        return settings.validate()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get system default configuration values."""
        return asdict(BundlerSettings())

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse a YAML configuration file."""
        try:
            config_dict, validation_errors = self.yaml_parser.validate_and_parse_file(file_path)
        except YAMLParsingError as e:
            raise ConfigurationError(str(e)) from e

        if validation_errors:
            raise ConfigurationError(
                f"Configuration validation errors in {file_path}:\n"
                + "\n".join(f"  - {error}" for error in validation_errors),
                errors=validation_errors,
            )

        logger.debug(f"Loaded configuration file {file_path}")
        return config_dict

    def _load_environment_variables(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}
        env_vars = EnvironmentVariables

        if env_vars.DEFAULT_LANGUAGE in os.environ:
            env_config['default_language'] = os.environ[env_vars.DEFAULT_LANGUAGE]

        if env_vars.DEFAULT_SORT in os.environ:
            env_config['default_sort'] = os.environ[env_vars.DEFAULT_SORT].lower()

        if env_vars.EXCLUDED_DIRS in os.environ:
            env_config['excluded_dirs'] = env_vars.split_list(os.environ[env_vars.EXCLUDED_DIRS])

        if env_vars.ENCODING in os.environ:
            env_config['encoding'] = os.environ[env_vars.ENCODING]

        if env_vars.LOG_LEVEL in os.environ:
            env_config['log_level'] = os.environ[env_vars.LOG_LEVEL].lower()

        if env_vars.LOG_FILE in os.environ:
            env_config['log_file'] = os.environ[env_vars.LOG_FILE]

        if env_config:
            logger.debug(f"Environment overrides: {sorted(env_config)}")
        return env_config


def default_log_level() -> str:
    """Log level from the environment, used before configuration is loaded."""
    value = os.environ.get(EnvironmentVariables.LOG_LEVEL, LogLevel.INFO.value).lower()
    valid_levels = [l.value for l in LogLevel]
    return value if value in valid_levels else LogLevel.INFO.value
