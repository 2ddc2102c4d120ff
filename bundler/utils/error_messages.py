"""
Centralized Error Message Templates

This module provides consistent error message formatting and templates
for the failures the bundler reports to the user beyond its one-line
notices: configuration problems and I/O errors while writing a bundle.
"""

import logging
from enum import Enum
from typing import Dict


class ErrorCategory(Enum):
    """Categories of errors that can occur in the system."""
    CONFIGURATION = "configuration"
    FILE_ACCESS = "file_access"


class ErrorMessages:
    """
    Centralized error message templates with consistent formatting.

    Provides specific error messages for each failure category with
    actionable suggestions.
    """

    CONFIGURATION_TEMPLATES = {
        "invalid_configuration": """
Configuration Error: {error_details}

Suggestions:
  • Check ./.code-bundler/config.yaml and ~/.code-bundler/config.yaml
  • Use --config to specify a different configuration file
  • Check CODE_BUNDLER_* environment variables

Example valid configuration:
  default_language: all
  default_sort: name
  excluded_dirs: [bin, debug, obj]
""",

        "invalid_option": """
Configuration Error: Invalid value for '{field_name}'

{error_details}

Suggestions:
  • Run 'code-bundler bundle --help' to see all available options
""",
    }

    FILE_TEMPLATES = {
        "bundle_write_failed": """
File Error: Cannot write bundle '{file_path}'

{error_details}

Suggestions:
  • Check write permissions for the output directory
  • Ensure sufficient disk space
  • Check that every source file is readable

The partially written bundle was removed.
""",

        "response_file_unreadable": """
File Error: Cannot read response file '{file_path}'

{error_details}

Suggestions:
  • Create the file with 'code-bundler create-rsp'
  • Pass the path after '@' without spaces, e.g. @response.rsp
""",

        "response_file_write_failed": """
File Error: Cannot write response file '{file_path}'

{error_details}

Suggestions:
  • Check write permissions for the current directory
  • Remove or rename a directory named '{file_path}'
""",
    }

    @classmethod
    def format_error(
        cls,
        category: ErrorCategory,
        template_key: str,
        **kwargs
    ) -> str:
        """
        Format an error message using the specified template.

        Args:
            category: The error category
            template_key: The specific template within the category
            **kwargs: Template variables to substitute

        Returns:
            Formatted error message with suggestions
        """
        templates = cls._get_templates_for_category(category)

        if template_key not in templates:
            return cls._format_generic_error(category, template_key, **kwargs)

        try:
            return templates[template_key].format(**kwargs).strip()
        except KeyError as e:
            logging.warning(f"Missing template variable {e} for {category.value}.{template_key}")
            return cls._format_generic_error(category, template_key, **kwargs)

    @classmethod
    def _get_templates_for_category(cls, category: ErrorCategory) -> Dict[str, str]:
        """Get templates for a specific error category."""
        template_map = {
            ErrorCategory.CONFIGURATION: cls.CONFIGURATION_TEMPLATES,
            ErrorCategory.FILE_ACCESS: cls.FILE_TEMPLATES,
        }

        return template_map.get(category, {})

    @classmethod
    def _format_generic_error(
        cls,
        category: ErrorCategory,
        template_key: str,
        **kwargs
    ) -> str:
        """Format a generic error message when specific template is not found."""
        error_details = kwargs.get('error_details', 'Unknown error occurred')

        return f"""
{category.value.replace('_', ' ').title()} Error: {template_key}

{error_details}

General Suggestions:
  • Try running with --log-level debug for additional details
  • Verify your configuration and input parameters

For help: code-bundler --help
""".strip()
