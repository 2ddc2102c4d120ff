"""
Shared CLI Option Decorators

This module provides reusable Click decorators for common CLI options,
ensuring consistency across subcommands and following DRY principles.
"""

import click


def output_option(help=None):
    """Decorator for the bundle output path option."""
    def decorator(f):
        return click.option(
            '--output', '-o',
            required=True,
            type=click.Path(dir_okay=False),
            help=help or 'Output file path'
        )(f)
    return decorator

def language_option(help=None):
    """Decorator for the language filter option."""
    def decorator(f):
        return click.option(
            '--language', '-l',
            default=None,
            help=help or 'Language filter'
        )(f)
    return decorator

def note_option(help=None):
    """Decorator for the source code reference flag."""
    def decorator(f):
        return click.option(
            '--note', '-n',
            is_flag=True,
            default=False,
            help=help or 'Include source code reference'
        )(f)
    return decorator

def sort_option(help=None):
    """Decorator for the sort mode option."""
    def decorator(f):
        return click.option(
            '--sort', '-s',
            default=None,
            help=help or 'Sort mode'
        )(f)
    return decorator

def remove_empty_lines_option(help=None):
    """Decorator for the empty-line removal flag."""
    def decorator(f):
        return click.option(
            '--remove-empty-lines', '-r',
            is_flag=True,
            default=False,
            help=help or 'Remove empty lines'
        )(f)
    return decorator

def author_option(help=None):
    """Decorator for the author option."""
    def decorator(f):
        return click.option(
            '--author', '-a',
            default=None,
            help=help or 'Author name'
        )(f)
    return decorator

def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or 'Path to configuration file'
        )(f)
    return decorator

def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level'
        )(f)
    return decorator
