"""
Core data models for a bundle run.

BundleRequest is the validated, immutable set of inputs for one run.
BundleResult reports what a successful run produced.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EXCLUDED_DIRS: Tuple[str, ...] = ("bin", "debug")


class SortMode(str, Enum):
    """Order in which selected files are written to the bundle."""

    NAME = "name"
    TYPE = "type"


class BundleRequest(BaseModel):
    """Inputs for a single bundle run.

    Attributes:
        output_path: Bundle file to create; must not exist yet
        language: Language filter ("all" or a language/extension token)
        include_note: Write the source code reference header
        sort: Sort mode; "type" sorts by extension then name, anything else by name
        remove_empty_lines: Strip blank and whitespace-only lines from each file
        author: Optional author written below the header
        excluded_dirs: Directory names skipped during selection
        encoding: Text encoding for reading sources and writing the bundle
    """

    model_config = ConfigDict(frozen=True)

    output_path: Path = Field(
        ...,
        description="Path of the bundle file to create"
    )
    language: str = Field(
        default="all",
        min_length=1,
        description="Language filter, 'all' selects every file"
    )
    include_note: bool = Field(
        default=False,
        description="Include the source code reference comment"
    )
    sort: SortMode = Field(
        default=SortMode.NAME,
        description="Sort mode applied before writing"
    )
    remove_empty_lines: bool = Field(
        default=False,
        description="Remove empty lines from each file"
    )
    author: Optional[str] = Field(
        default=None,
        description="Author name written in the bundle header"
    )
    excluded_dirs: Tuple[str, ...] = Field(
        default=DEFAULT_EXCLUDED_DIRS,
        description="Directory names excluded from the selection"
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Encoding used for reading and writing text"
    )

    @field_validator("sort", mode="before")
    @classmethod
    def normalize_sort(cls, value: Any) -> SortMode:
        if isinstance(value, SortMode):
            return value
        if isinstance(value, str) and value.strip().lower() == SortMode.TYPE.value:
            return SortMode.TYPE
        return SortMode.NAME

    @field_validator("language")
    @classmethod
    def strip_language(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("language must not be blank")
        return value

    @property
    def has_author(self) -> bool:
        """True when the author is set and not blank."""
        return bool(self.author and self.author.strip())


@dataclass
class BundleResult:
    """Result of a successful bundle run.

    Attributes:
        output_path: Absolute path of the written bundle
        files: Files written, in bundle order
        note_written: Whether the source code reference header was written
        author_written: Whether the author line was written
    """
    output_path: Path
    files: List[Path] = field(default_factory=list)
    note_written: bool = False
    author_written: bool = False

    @property
    def file_count(self) -> int:
        return len(self.files)
