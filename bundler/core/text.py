"""Text transformations applied to file content before it is bundled."""

import os


def remove_empty_lines(content: str) -> str:
    """
    Drop every line that has no non-whitespace character.

    Lines made only of spaces or tabs are removed as well. Lines are split on
    "\\n"; a trailing "\\r" is dropped from each kept line and the lines are
    rejoined with the platform line separator.

    Args:
        content: File text

    Returns:
        The text without blank lines and without a trailing line break
    """
    return os.linesep.join(
        line.rstrip("\r") for line in content.split("\n") if line.strip()
    )
