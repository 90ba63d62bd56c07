"""
CLI Error Handling
==================

Maps exceptions escaping the interpreter to diagnostics and exit codes.
Fatal program errors exit with their own category code so that callers
can tell the failures apart; everything else uses ``ExitCode``.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes not tied to a fatal program condition."""
    SUCCESS = 0
    INVALID_ARGS = 2     # Invalid command-line arguments
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching status.

    Fatal interpreter errors are printed as ``<code>: <message>``, with
    the failing line and any hint underneath.

    Args:
        error: The exception that was raised
        verbose: If True, print a traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from tinybasic.errors import FatalError

    if isinstance(error, FatalError):
        click.echo(f"{error.code}: {error}", err=True)
        sys.exit(error.code)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
