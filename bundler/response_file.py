"""
Response files.

A response file stores a ``bundle`` invocation as one line of
``--flag value`` pairs so it can be replayed with ``bundle @response.rsp``.
This module builds, writes and reads response files, and expands ``@file``
arguments on the command line.
"""

import logging
import shlex
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

RESPONSE_FILE_NAME = "response.rsp"
RESPONSE_FILE_PREFIX = "@"

BOOLEAN_ANSWERS = ("true", "false")

# Flags stored as "--flag true|false" that click only accepts as bare switches.
BOOLEAN_FLAGS = frozenset({"--note", "-n", "--remove-empty-lines", "-r"})


class ResponseFileError(Exception):
    """A response file could not be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ResponseFileAnswers(BaseModel):
    """Answers collected by ``create-rsp``."""

    language: str = Field(default="", description="Language filter")
    output: str = Field(default="", description="Bundle output path")
    note: bool = Field(default=False, description="Include the source code reference")
    sort: str = Field(default="", description="Sort mode (name or type)")
    remove_empty_lines: bool = Field(default=False, description="Remove empty lines")
    author: str = Field(default="", description="Author name")


def is_boolean_answer(value: Optional[str]) -> bool:
    """True when the answer is exactly "true" or "false"."""
    return value in BOOLEAN_ANSWERS


def parse_boolean_answer(value: str) -> bool:
    return value == "true"


def build_response_content(answers: ResponseFileAnswers) -> str:
    """
    Serialize answers as a single line of ``--flag value`` pairs.

    Blank text answers are left out and values are shell-quoted, so the
    line always splits back into the same tokens.
    """
    pairs = [
        ("--language", answers.language),
        ("--output", answers.output),
        ("--note", "true" if answers.note else "false"),
        ("--sort", answers.sort),
        ("--remove-empty-lines", "true" if answers.remove_empty_lines else "false"),
        ("--author", answers.author),
    ]
    return " ".join(
        f"{flag} {shlex.quote(value.strip())}"
        for flag, value in pairs
        if value and value.strip()
    )


def write_response_file(answers: ResponseFileAnswers, directory: Optional[Path] = None) -> Path:
    """Write ``response.rsp``, replacing any existing file."""
    path = Path(directory or Path.cwd()) / RESPONSE_FILE_NAME
    path.write_text(build_response_content(answers), encoding="utf-8")
    logger.info(f"Response file written: {path}")
    return path


def _translate_boolean_flags(tokens: Sequence[str]) -> List[str]:
    result: List[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if token in BOOLEAN_FLAGS and following is not None and following.lower() in BOOLEAN_ANSWERS:
            if following.lower() == "true":
                result.append(token)
            index += 2
            continue
        result.append(token)
        index += 1
    return result


def read_response_file(path: Path) -> List[str]:
    """
    Read a response file into command-line tokens.

    Args:
        path: Response file to read

    Returns:
        Tokens ready to be passed to the ``bundle`` command

    Raises:
        ResponseFileError: If the file is missing or cannot be tokenized
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ResponseFileError(f"Cannot read response file {path}: {e}", path=str(path)) from e

    try:
        tokens = shlex.split(content)
    except ValueError as e:
        raise ResponseFileError(f"Malformed response file {path}: {e}", path=str(path)) from e

    logger.debug(f"Response file {path} expanded to {tokens}")
    return _translate_boolean_flags(tokens)


def expand_response_files(args: Sequence[str]) -> List[str]:
    """Replace every ``@file`` argument with the tokens stored in that file."""
    expanded: List[str] = []
    for arg in args:
        if arg.startswith(RESPONSE_FILE_PREFIX) and len(arg) > 1:
            expanded.extend(read_response_file(Path(arg[1:])))
        else:
            expanded.append(arg)
    return expanded
