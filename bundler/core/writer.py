"""
BundleWriter - Concatenates selected source files into one bundle file.

This module provides functionality for:
- Output existence check before any source file is read
- File selection, filtering and sorting
- Exclusive creation of the bundle file
- Source code reference header and author line
- Optional empty-line removal per file
- Cleanup of partially written bundles on I/O failure
"""

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, TextIO

import bundler

from .errors import (
    BundleWriteError,
    InvalidOutputPathError,
    NoFilesToBundleError,
    OutputExistsError,
)
from .language import file_pattern
from .models import BundleRequest, BundleResult
from .selection import select_files, sort_files
from .text import remove_empty_lines


logger = logging.getLogger(__name__)

FILE_MARKER = "// File: "
AUTHOR_MARKER = "// Author: "
SOURCE_REFERENCE_MARKER = "// Source code reference: "


def get_source_reference() -> str:
    """Location of the installed bundler package, used in the note header."""
    return str(Path(bundler.__file__).resolve().parent)


class BundleWriter:
    """Writes a bundle for one BundleRequest.

    Example:
        >>> request = BundleRequest(output_path=Path("out.cs"), language="csharp")
        >>> result = BundleWriter(request).bundle()
        >>> result.file_count
        2
    """

    def __init__(self, request: BundleRequest, source_reference: Optional[str] = None):
        """Initialize the BundleWriter.

        Args:
            request: Validated bundle inputs
            source_reference: Path shown in the note header; defaults to the
                location of the bundler package
        """
        self.request = request
        self.source_reference = source_reference or get_source_reference()

    @property
    def output_path(self) -> Path:
        return Path(os.path.abspath(self.request.output_path))

    def bundle(self, root: Optional[Path] = None) -> BundleResult:
        """Select, sort and write files into the bundle.

        Args:
            root: Directory to search; defaults to the current working directory

        Returns:
            BundleResult describing the written bundle

        Raises:
            OutputExistsError: The output file already exists
            NoFilesToBundleError: No file matched the language filter
            InvalidOutputPathError: The output directory does not exist
            BundleWriteError: Any other I/O error while writing
        """
        output_path = self.output_path
        self.ensure_output_available(output_path)

        search_root = Path(root or Path.cwd())
        files = select_files(
            self.request.language,
            root=search_root,
            excluded_dirs=self.request.excluded_dirs,
        )
        if not files:
            raise NoFilesToBundleError(
                "No files to bundle",
                root=str(search_root),
                pattern=file_pattern(self.request.language),
            )

        if len(files) > 1:
            files = sort_files(files, self.request.sort)

        return self.write(files)

    def ensure_output_available(self, output_path: Path) -> None:
        """Raise OutputExistsError when the bundle file already exists."""
        if output_path.exists():
            logger.info(f"Output file already exists: {output_path}")
            raise OutputExistsError(
                "Output file already exist. Please choose a different name.",
                output_path=str(output_path),
            )

    def write(self, files: Sequence[Path]) -> BundleResult:
        """Write the given files, in order, into a newly created bundle.

        Args:
            files: Source files to concatenate

        Returns:
            BundleResult with the written files
        """
        output_path = self.output_path
        result = BundleResult(output_path=output_path)

        try:
            handle = open(output_path, "x", encoding=self.request.encoding, newline="")
        except FileExistsError as e:
            raise OutputExistsError(
                "Output file already exist. Please choose a different name.",
                output_path=str(output_path),
            ) from e
        except (FileNotFoundError, NotADirectoryError) as e:
            logger.error(f"Output directory does not exist: {output_path.parent}")
            raise InvalidOutputPathError(
                "file path invalid",
                output_path=str(output_path),
                original_error=e,
            ) from e
        except OSError as e:
            raise BundleWriteError(
                f"Cannot create {output_path}: {e}",
                output_path=str(output_path),
                original_error=e,
            ) from e

        current: Optional[Path] = None
        try:
            with handle:
                if self.request.include_note:
                    self._write_note(handle)
                    result.note_written = True

                if self.request.has_author:
                    handle.write(f"{AUTHOR_MARKER}{self.request.author}{os.linesep}{os.linesep}")
                    result.author_written = True

                for current in files:
                    self._write_file(handle, current)
                    result.files.append(current)
        except OSError as e:
            self._discard(output_path)
            raise BundleWriteError(
                f"Failed to bundle {current or output_path}: {e}",
                output_path=str(output_path),
                source_path=str(current) if current else None,
                written_files=[str(p) for p in result.files],
                original_error=e,
            ) from e

        logger.info(f"Bundled {result.file_count} file(s) into {output_path}")
        return result

    def _write_note(self, handle: TextIO) -> None:
        handle.write(
            f"{SOURCE_REFERENCE_MARKER}{os.linesep}"
            f"{FILE_MARKER}{self.source_reference}{os.linesep}{os.linesep}"
        )

    def _write_file(self, handle: TextIO, path: Path) -> None:
        logger.debug(f"Adding {path}")
        with open(path, "r", encoding=self.request.encoding, errors="replace", newline="") as source:
            content = source.read()

        if self.request.remove_empty_lines:
            content = remove_empty_lines(content)

        handle.write(f"{FILE_MARKER}{path}{os.linesep}")
        handle.write(f"{content}{os.linesep}")
        handle.write(os.linesep)

    def _discard(self, output_path: Path) -> None:
        """Remove a partially written bundle."""
        try:
            output_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove partial bundle {output_path}: {e}")

