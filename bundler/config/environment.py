"""
Environment variable integration for code-bundler.

Centralizes the environment variable names read by the configuration
manager.
"""

from typing import List


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    DEFAULT_LANGUAGE = "CODE_BUNDLER_DEFAULT_LANGUAGE"
    DEFAULT_SORT = "CODE_BUNDLER_DEFAULT_SORT"
    EXCLUDED_DIRS = "CODE_BUNDLER_EXCLUDED_DIRS"
    ENCODING = "CODE_BUNDLER_ENCODING"
    LOG_LEVEL = "CODE_BUNDLER_LOG_LEVEL"
    LOG_FILE = "CODE_BUNDLER_LOG_FILE"

    @staticmethod
    def split_list(value: str) -> List[str]:
        """Split a comma-separated value, dropping blanks."""
        return [item.strip() for item in value.split(",") if item.strip()]

