"""
Bundle Subcommand Module

This module implements the bundle subcommand for the code-bundler CLI.
It collects source files from the working directory and writes them into a
single bundle file.

Soft failures (existing output, no matching files, invalid output directory)
are reported on the console and the command still exits normally.
"""

import logging
import sys
import time

import click
from pydantic import ValidationError

from bundler.config.manager import ConfigurationError, ConfigurationManager
from bundler.core.errors import (
    BundleWriteError,
    InvalidOutputPathError,
    NoFilesToBundleError,
    OutputExistsError,
)
from bundler.core.models import BundleRequest
from bundler.core.writer import BundleWriter
from bundler.utils.error_messages import ErrorCategory, ErrorMessages
from bundler.utils.logging_config import logging_config
from .shared_options import (
    output_option, language_option, note_option, sort_option,
    remove_empty_lines_option, author_option, config_option, log_level_option
)
from .help_texts import (
    BUNDLE_HELP, BUNDLE_OUTPUT_HELP, BUNDLE_LANGUAGE_HELP, BUNDLE_NOTE_HELP,
    BUNDLE_SORT_HELP, BUNDLE_REMOVE_EMPTY_LINES_HELP, BUNDLE_AUTHOR_HELP,
    CONFIG_HELP, LOG_LEVEL_HELP, OUTPUT_EXISTS_MESSAGE, NO_FILES_MESSAGE,
    INVALID_PATH_MESSAGE, NOTE_ADDED_MESSAGE, BUNDLE_SUCCESS_MESSAGE, ExitCodes
)


logger = logging.getLogger(__name__)


@click.command(help=BUNDLE_HELP)
@output_option(help=BUNDLE_OUTPUT_HELP)
@language_option(help=BUNDLE_LANGUAGE_HELP)
@note_option(help=BUNDLE_NOTE_HELP)
@sort_option(help=BUNDLE_SORT_HELP)
@remove_empty_lines_option(help=BUNDLE_REMOVE_EMPTY_LINES_HELP)
@author_option(help=BUNDLE_AUTHOR_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def bundle(output, language, note, sort, remove_empty_lines, author, config, log_level):
    """
    Bundle code files from the current directory into a single file.
    """
    # Step 1: Load configuration
    try:
        settings = ConfigurationManager().load_configuration(
            config_file=config,
            cli_overrides={'log_level': log_level.lower() if log_level else None},
        )
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        click.echo(ErrorMessages.format_error(
            ErrorCategory.CONFIGURATION,
            "invalid_configuration",
            error_details=str(e),
        ), err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    logging_config.configure_logging(level=settings.log_level, log_file=settings.log_file)

    # Step 2: Build the request, CLI values win over configured defaults
    try:
        request = BundleRequest(
            output_path=output,
            language=language or settings.default_language,
            include_note=note,
            sort=sort or settings.default_sort,
            remove_empty_lines=remove_empty_lines,
            author=author,
            excluded_dirs=tuple(settings.excluded_dirs),
            encoding=settings.encoding,
        )
    except ValidationError as e:
        field_name = ".".join(str(part) for part in e.errors()[0]["loc"]) if e.errors() else "input"
        click.echo(ErrorMessages.format_error(
            ErrorCategory.CONFIGURATION,
            "invalid_option",
            field_name=field_name,
            error_details=str(e),
        ), err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    if logging_config.is_debug_enabled():
        logging_config.log_configuration_details(request.model_dump())

    # Step 3: Write the bundle
    start_time = time.time()
    try:
        result = BundleWriter(request).bundle()
    except OutputExistsError:
        click.echo(OUTPUT_EXISTS_MESSAGE)
        return
    except NoFilesToBundleError:
        click.echo(NO_FILES_MESSAGE)
        return
    except InvalidOutputPathError:
        click.echo(INVALID_PATH_MESSAGE)
        return
    except BundleWriteError as e:
        logger.error(f"Bundle failed: {e}")
        click.echo(ErrorMessages.format_error(
            ErrorCategory.FILE_ACCESS,
            "bundle_write_failed",
            file_path=e.output_path,
            error_details=str(e),
        ), err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)

    if result.note_written:
        click.echo(NOTE_ADDED_MESSAGE)
    click.echo(BUNDLE_SUCCESS_MESSAGE.format(path=result.output_path))
    logging_config.log_operation_timing("Bundle", time.time() - start_time)
