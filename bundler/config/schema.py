"""
Configuration schema for code-bundler.

Settings provide defaults for the bundle command and for logging. Values
passed on the command line always win over these defaults.
"""

import codecs
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from bundler.core.models import DEFAULT_EXCLUDED_DIRS, SortMode


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class BundlerSettings:
    """Complete code-bundler configuration."""

    # Bundle defaults
    default_language: str = "all"
    default_sort: str = SortMode.NAME.value
    excluded_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))
    encoding: str = "utf-8"

    # Logging
    log_level: str = LogLevel.INFO.value
    log_file: Optional[str] = None

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not isinstance(self.default_language, str) or not self.default_language.strip():
            errors.append("default_language must be a non-empty string")

        valid_sorts = [s.value for s in SortMode]
        if self.default_sort not in valid_sorts:
            errors.append(f"Invalid default_sort '{self.default_sort}'. Valid options: {valid_sorts}")

        if not isinstance(self.excluded_dirs, list) or not all(
            isinstance(name, str) and name for name in self.excluded_dirs
        ):
            errors.append("excluded_dirs must be a list of directory names")

        if not isinstance(self.encoding, str) or not self.encoding:
            errors.append("encoding must be a non-empty string")
        else:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                errors.append(f"Unknown encoding '{self.encoding}'")

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        return errors
