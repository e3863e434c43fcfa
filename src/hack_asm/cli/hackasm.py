"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly (writes Max.hack beside Max.asm):
    $ hackasm Max.asm

Several programs at once:
    $ hackasm Add.asm Max.asm Rect.asm

With output, symbol and listing files:
    $ hackasm Max.asm -o out/Max.hack -s Max.sym -l Max.lst

Verbose mode:
    $ hackasm -v Max.asm
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler, output_path_for
from hack_asm.cli.errors import ExitCode, handle_cli_exception, report_file_error
from hack_asm.config import AssemblerConfig
from hack_asm.errors import HackError


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input with .hack suffix). Single input only.",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file. Single input only.",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file. Single input only.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_files: tuple[Path, ...],
    output: Optional[Path],
    symbols: Optional[Path],
    listing: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly programs into Hack machine code.

    INPUT_FILES are assembly source files (.asm). Each is assembled on its
    own and written to a .hack file in the same directory.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm *.asm                # Assemble several programs
    """
    setup_logging(verbose)

    if len(input_files) > 1 and (output or symbols or listing):
        click.echo(
            "Error: -o/--output, -s/--symbols and -l/--listing need a single input file",
            err=True,
        )
        sys.exit(ExitCode.INVALID_ARGS)

    config = AssemblerConfig.from_env()
    status = ExitCode.SUCCESS

    try:
        for input_file in input_files:
            # Fresh assembler per program: no symbol state carries over
            asm = Assembler(config)
            output_file = output or output_path_for(input_file, config.output_suffix)

            if verbose:
                click.echo(f"Assembling {input_file}...")

            try:
                asm.assemble_file(input_file)
            except (HackError, UnicodeDecodeError, LookupError, OSError) as e:
                status = max(status, report_file_error(input_file, e))
                continue

            asm.write_hack(output_file)
            if verbose:
                click.echo(f"Wrote {len(asm.get_code())} instructions to {output_file}")

            if symbols:
                asm.write_symbols(symbols)
                if verbose:
                    click.echo(f"Wrote symbols to {symbols}")

            if listing:
                asm.write_listing(listing)
                if verbose:
                    click.echo(f"Wrote listing to {listing}")

            if verbose:
                click.echo(
                    f"Defined {len(asm.get_labels())} labels, "
                    f"{len(asm.get_variables())} variables"
                )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if status != ExitCode.SUCCESS:
        sys.exit(status)


if __name__ == "__main__":
    main()
