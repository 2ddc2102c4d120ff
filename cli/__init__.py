"""
CLI Package for code-bundler

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import os
import click
from dotenv import load_dotenv
from bundler import __version__
from bundler.config.manager import default_log_level
from bundler.response_file import ResponseFileError, expand_response_files
from bundler.utils.error_messages import ErrorCategory, ErrorMessages
from bundler.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .bundle import bundle
from .create_rsp import create_rsp
from .help_texts import ROOT_HELP

# Configure logging when CLI package is imported
configure_logging(level=default_log_level())


class ResponseFileGroup(click.Group):
    """Click group that expands ``@file`` arguments before parsing."""

    def parse_args(self, ctx, args):
        try:
            args = expand_response_files(args)
        except ResponseFileError as e:
            raise click.UsageError(
                ErrorMessages.format_error(
                    ErrorCategory.FILE_ACCESS,
                    "response_file_unreadable",
                    file_path=e.path,
                    error_details=str(e),
                ),
                ctx=ctx,
            )
        return super().parse_args(ctx, args)


@click.group(cls=ResponseFileGroup, help=ROOT_HELP)
@click.version_option(version=__version__, prog_name='code-bundler')
def main():
    pass

# Register subcommands
main.add_command(bundle)
main.add_command(create_rsp)

# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the code-bundler command is executed
    from the command line after installation via pip.
    """
    main()
