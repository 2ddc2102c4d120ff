"""
Bundler Error Hierarchy

Defines the custom exceptions raised while producing a bundle.
The CLI maps each of them to a console message and an exit code.

Error Categories:
- Soft failures: output already exists, nothing to bundle, invalid output
  directory (reported to the user, command still succeeds)
- Write failures: any other I/O error while the bundle is being written
"""

from typing import List, Optional


class BundleError(Exception):
    """Base exception for all bundler errors.

    All bundler-specific exceptions inherit from this class,
    allowing for broad exception handling when needed.
    """
    pass


class OutputExistsError(BundleError):
    """The requested output file already exists.

    Raised before any source file is read, so the run has no side effects.

    Attributes:
        output_path: Path of the existing file
    """

    def __init__(self, message: str, output_path: Optional[str] = None):
        super().__init__(message)
        self.output_path = output_path


class NoFilesToBundleError(BundleError):
    """The file selection is empty.

    Attributes:
        root: Directory that was searched
        pattern: Glob pattern used for the search ("*" for all files)
    """

    def __init__(
        self,
        message: str,
        root: Optional[str] = None,
        pattern: Optional[str] = None,
    ):
        super().__init__(message)
        self.root = root
        self.pattern = pattern


class InvalidOutputPathError(BundleError):
    """The directory of the output path does not exist.

    Attributes:
        output_path: The rejected output path
        original_error: The underlying OS error
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.output_path = output_path
        self.original_error = original_error


class BundleWriteError(BundleError):
    """An I/O error interrupted the bundle.

    Raised for permission errors, full disks or unreadable source files.
    The partially written output is removed before this is raised.

    Attributes:
        output_path: Bundle that was being written
        source_path: Source file being processed when the error happened
        written_files: Files already copied into the bundle
        original_error: The underlying OS error
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[str] = None,
        source_path: Optional[str] = None,
        written_files: Optional[List[str]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.output_path = output_path
        self.source_path = source_path
        self.written_files = written_files or []
        self.original_error = original_error
