"""
tbasic - Tiny BASIC Command-Line Interface
==========================================

Runs a Tiny BASIC program file. PRINT writes to standard output and INPUT
reads from standard input.

Usage Examples
--------------
Run a program:
    $ tbasic hello.bas

Reproducible RND values:
    $ tbasic --seed 42 dice.bas

Show each statement as it runs:
    $ tbasic --trace loop.bas

Exit Codes
----------
0 - Program ran to END (or off the end of its text)
2 - Invalid arguments
3 - Internal error
Any other value is the code of the fatal condition that stopped the
program, e.g. 8 when the source is missing or unreadable, 37 for GOTO to a
missing line.
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from tinybasic import __version__
from tinybasic.cli.errors import ExitCode, handle_cli_exception
from tinybasic.config import InterpreterConfig
from tinybasic.errors import SourceLoadError
from tinybasic.interpreter import Interpreter
from tinybasic.program import Program


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "program_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for RND (default: from TINYBASIC_SEED or the clock)",
)
@click.option(
    "-t", "--trace",
    is_flag=True,
    help="Print each statement as TRACE: <text> before running it",
)
@click.option(
    "--flow-control/--no-flow-control",
    default=None,
    help="Emit XOFF/XON terminal bytes around ':' and INPUT prompts",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging to stderr)",
)
@click.version_option(version=__version__, prog_name="tbasic")
def main(
    program_file: Optional[Path],
    seed: Optional[int],
    trace: bool,
    flow_control: Optional[bool],
    verbose: bool,
) -> None:
    """
    Run a Tiny BASIC program.

    PROGRAM_FILE is the program source: one numbered statement per line.

    \b
    Examples:
        tbasic hello.bas             # Run a program
        tbasic --seed 1 dice.bas     # Repeatable RND
        tbasic --trace loop.bas      # Trace statements
    """
    setup_logging(verbose)

    config = InterpreterConfig.from_env()
    if seed is not None:
        config = replace(config, seed=seed)
    if trace:
        config = replace(config, trace=True)
    if flow_control is not None:
        config = replace(config, flow_control=flow_control)

    try:
        if program_file is None:
            raise SourceLoadError(hint="no program file given")
        program = Program.from_file(program_file)
        logger.debug(f"Config: {config}")
        Interpreter(program, config=config).run()
        sys.stdout.flush()
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
