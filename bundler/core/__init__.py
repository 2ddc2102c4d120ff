"""
Bundling core: language filter, file selection, text processing and the
bundle writer.
"""

from bundler.core.errors import (
    BundleError,
    BundleWriteError,
    InvalidOutputPathError,
    NoFilesToBundleError,
    OutputExistsError,
)
from bundler.core.language import convert_language, file_pattern, resolve_extension
from bundler.core.models import BundleRequest, BundleResult, SortMode
from bundler.core.selection import select_files, sort_files
from bundler.core.text import remove_empty_lines
from bundler.core.writer import BundleWriter

__all__ = [
    "BundleError",
    "BundleWriteError",
    "InvalidOutputPathError",
    "NoFilesToBundleError",
    "OutputExistsError",
    "convert_language",
    "file_pattern",
    "resolve_extension",
    "BundleRequest",
    "BundleResult",
    "SortMode",
    "select_files",
    "sort_files",
    "remove_empty_lines",
    "BundleWriter",
]
