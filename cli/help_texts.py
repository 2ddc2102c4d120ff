"""
Centralized Help Text Constants

This module provides all CLI help text constants for commands and options,
ensuring consistency across subcommands and enabling easy maintenance.
"""

# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_CONFIGURATION = 3

# Command help texts
ROOT_HELP = "root command for file bundle CLI"
BUNDLE_HELP = "Bundle code files to a single file"
CREATE_RSP_HELP = "Generate a response file with the current command and options."

# Option help texts - Bundle command
BUNDLE_OUTPUT_HELP = "File path and name"
BUNDLE_LANGUAGE_HELP = "Programming language to include, use 'all' for all languages"
BUNDLE_NOTE_HELP = "Include source code reference as comment in the bundle"
BUNDLE_SORT_HELP = "Sort code files alphabetically by 'name' or 'type'. Default is 'name'"
BUNDLE_REMOVE_EMPTY_LINES_HELP = "Remove empty lines from code files before bundling."
BUNDLE_AUTHOR_HELP = "Author name to be included in the bundle file header"
CONFIG_HELP = "Path to configuration file (YAML)"
LOG_LEVEL_HELP = "Logging level (overrides configuration)"

# Console messages
OUTPUT_EXISTS_MESSAGE = "Output file already exist. Please choose a different name."
NO_FILES_MESSAGE = "No files to bundle"
INVALID_PATH_MESSAGE = "file path invalid"
NOTE_ADDED_MESSAGE = "Source code reference added to the bundle"
BUNDLE_SUCCESS_MESSAGE = "Files bundled successfully: {path}"
RSP_SUCCESS_MESSAGE = "Response file '{name}' created successfully."

# Prompts - create-rsp command
PROMPT_LANGUAGE = "Enter value for language"
PROMPT_OUTPUT = "Enter value for output"
PROMPT_NOTE = "Enter value for note (true/false)"
PROMPT_NOTE_AGAIN = "Enter again value for note (true/false)"
PROMPT_SORT = "Enter value for sort"
PROMPT_REMOVE_EMPTY_LINES = "Enter value for remove-empty-lines (true/false)"
PROMPT_REMOVE_EMPTY_LINES_AGAIN = "Enter again value for remove-empty-lines (true/false)"
PROMPT_AUTHOR = "Enter value for author"
