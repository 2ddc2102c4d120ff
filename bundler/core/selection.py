"""
File selection.

Walks a directory tree and collects the files matching a language filter,
skipping build-artifact directories. Exclusion compares directory names,
not raw substrings, so a file like ``bindings.cs`` is still selected.
"""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .language import file_pattern
from .models import DEFAULT_EXCLUDED_DIRS, SortMode

logger = logging.getLogger(__name__)


def select_files(
    language: str,
    root: Optional[Path] = None,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> List[Path]:
    """
    Collect the files to bundle.

    Args:
        language: Language filter ("all" or a language/extension token)
        root: Directory to search; defaults to the current working directory
        excluded_dirs: Directory names to skip at any depth

    Returns:
        Absolute file paths in traversal order (directories and files
        visited alphabetically). Empty when nothing matches.
    """
    root = Path(root or Path.cwd()).resolve()
    pattern = file_pattern(language)
    excluded = {name.lower() for name in excluded_dirs}

    logger.debug(f"Selecting files under {root} matching {pattern}")

    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d.lower() not in excluded)
        for filename in sorted(filenames):
            if fnmatch.fnmatchcase(filename, pattern):
                files.append(Path(dirpath) / filename)

    logger.debug(f"Selected {len(files)} file(s)")
    return files


def sort_files(files: Sequence[Path], sort: SortMode = SortMode.NAME) -> List[Path]:
    """
    Order files for writing.

    ``SortMode.TYPE`` sorts by extension, then file name. Any other mode
    sorts by file name only. Sorting is stable, so equal keys keep their
    traversal order.
    """
    if sort == SortMode.TYPE:
        return sorted(files, key=lambda p: (p.suffix, p.name))
    return sorted(files, key=lambda p: p.name)
