"""
Configuration for code-bundler: settings schema, YAML files and
environment variables.
"""

from bundler.config.manager import ConfigurationError, ConfigurationManager
from bundler.config.schema import BundlerSettings, LogLevel

__all__ = ["ConfigurationError", "ConfigurationManager", "BundlerSettings", "LogLevel"]
