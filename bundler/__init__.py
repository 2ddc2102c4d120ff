"""
code-bundler

Concatenates source files from a directory tree into a single bundle file,
with optional language filtering, sorting, provenance notes and empty-line
removal.
"""

__version__ = "1.0.0"
