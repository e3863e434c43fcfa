"""
hackasm Error Reporting
=======================

Maps the failures hackasm can meet to messages on stderr and exit codes.

Two kinds of failure are handled differently:

- **Per-file failures** (bad assembly, undecodable or unreadable input)
  are reported by ``report_file_error``; the run carries on with the next
  input file and exits with the worst code seen.
- **Run-ending failures** (an output file that cannot be written, or an
  unexpected exception) go through ``handle_cli_exception``, which exits
  at once.
"""

import sys
import traceback
from enum import IntEnum
from pathlib import Path
from typing import NoReturn

import click

from hack_asm.errors import HackError


class ExitCode(IntEnum):
    """Exit codes of the hackasm command."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Assembly error in a source program
    INVALID_ARGS = 2     # Bad arguments, unreadable or undecodable input
    INTERNAL_ERROR = 3   # Unexpected internal error
    OUTPUT_ERROR = 4     # An output file could not be written


def report_file_error(path: Path, error: Exception) -> ExitCode:
    """
    Report a failure to assemble one input file.

    Args:
        path: The input file being assembled
        error: The exception raised while reading or assembling it

    Returns:
        The exit code this failure calls for

    Raises:
        The original error if it is not a per-file failure
    """
    if isinstance(error, HackError):
        click.echo(f"Assembly error: {error}", err=True)
        return ExitCode.BUILD_ERROR

    if isinstance(error, UnicodeDecodeError):
        click.echo(
            f"Error: {path}: not valid {error.encoding} text "
            f"(byte 0x{error.object[error.start]:02x} at offset {error.start})",
            err=True,
        )
        return ExitCode.INVALID_ARGS

    if isinstance(error, LookupError):
        # Unknown codec name, e.g. from HACKASM_ENCODING
        click.echo(f"Error: {path}: {error}", err=True)
        return ExitCode.INVALID_ARGS

    if isinstance(error, OSError):
        click.echo(f"Error: cannot read {path}: {error.strerror or error}", err=True)
        return ExitCode.INVALID_ARGS

    raise error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report a failure that ends the run and exit.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, OSError):
        target = error.filename if error.filename is not None else "output"
        click.echo(f"Error: cannot write {target}: {error.strerror or error}", err=True)
        sys.exit(ExitCode.OUTPUT_ERROR)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
