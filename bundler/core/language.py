"""
Language filter.

Maps human-friendly language names to the file extension used to select
source files. Unknown names are used verbatim as the extension.
"""

from typing import Dict, Optional

ALL_LANGUAGES = "all"

# "asembler" is the established alias and is matched literally.
LANGUAGE_EXTENSIONS: Dict[str, str] = {
    "csharp": "cs",
    "cpp": "cpp",
    "html": "html",
    "asembler": "asn",
    "sql": "sql",
    "css": "css",
    "javascript": "js",
}


def is_all_languages(language: str) -> bool:
    """Return True when the filter selects every file."""
    return language.lower() == ALL_LANGUAGES


def convert_language(language: str) -> str:
    """Convert a language name to its file extension token.

    The lookup is case-sensitive; an unmapped name is returned unchanged.
    """
    return LANGUAGE_EXTENSIONS.get(language, language)


def resolve_extension(language: str) -> Optional[str]:
    """Resolve a language filter to an extension, or None for "all"."""
    if is_all_languages(language):
        return None
    return convert_language(language)


def file_pattern(language: str) -> str:
    """Glob pattern matched against file names for a language filter."""
    extension = resolve_extension(language)
    if extension is None:
        return "*"
    return f"*.{extension}"
