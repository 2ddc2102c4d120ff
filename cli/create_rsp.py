"""
Create-RSP Subcommand Module

Interactively collects bundle options and saves them to ``response.rsp``
so the invocation can be replayed with ``code-bundler bundle @response.rsp``.
"""

import logging
import sys

import click

from bundler.response_file import (
    RESPONSE_FILE_NAME,
    ResponseFileAnswers,
    is_boolean_answer,
    parse_boolean_answer,
    write_response_file,
)
from bundler.utils.error_messages import ErrorCategory, ErrorMessages
from .help_texts import (
    CREATE_RSP_HELP, PROMPT_LANGUAGE, PROMPT_OUTPUT, PROMPT_NOTE, PROMPT_NOTE_AGAIN,
    PROMPT_SORT, PROMPT_REMOVE_EMPTY_LINES, PROMPT_REMOVE_EMPTY_LINES_AGAIN,
    PROMPT_AUTHOR, RSP_SUCCESS_MESSAGE, ExitCodes
)


logger = logging.getLogger(__name__)


def _ask(prompt: str) -> str:
    return click.prompt(prompt, default="", show_default=False)


def _ask_boolean(prompt: str, retry_prompt: str) -> bool:
    """Ask until the answer is exactly "true" or "false"."""
    value = _ask(prompt)
    while not is_boolean_answer(value):
        value = _ask(retry_prompt)
    return parse_boolean_answer(value)


@click.command(name="create-rsp", help=CREATE_RSP_HELP)
def create_rsp():
    answers = ResponseFileAnswers(
        language=_ask(PROMPT_LANGUAGE),
        output=_ask(PROMPT_OUTPUT),
        note=_ask_boolean(PROMPT_NOTE, PROMPT_NOTE_AGAIN),
        sort=_ask(PROMPT_SORT),
        remove_empty_lines=_ask_boolean(PROMPT_REMOVE_EMPTY_LINES, PROMPT_REMOVE_EMPTY_LINES_AGAIN),
        author=_ask(PROMPT_AUTHOR),
    )

    try:
        path = write_response_file(answers)
    except OSError as e:
        logger.error(f"Failed to write response file: {e}")
        click.echo(ErrorMessages.format_error(
            ErrorCategory.FILE_ACCESS,
            "response_file_write_failed",
            file_path=RESPONSE_FILE_NAME,
            error_details=str(e),
        ), err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)

    click.echo(RSP_SUCCESS_MESSAGE.format(name=path.name))
