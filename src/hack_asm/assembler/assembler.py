"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, which is the primary interface
for assembling Hack source code. It classifies the source, runs both code
generator passes over it, and keeps the result for writing out.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
... // Adds R0 and R1 into R2
...     @R0
...     D=M
...     @R1
...     D=D+M
...     @R2
...     M=D
... ''')
>>> asm.get_code()[:2]
['0000000000000000', '1111110000010000']
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm            # writes Add.hack beside Add.asm
    $ hackasm Add.asm -s Add.sym -l Add.lst
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from hack_asm.config import AssemblerConfig
from hack_asm.assembler.parser import parse_lines
from hack_asm.assembler.codegen import CodeGenerator, ListingEntry

logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Every call to one of the assemble methods is an independent
    translation: the symbol table and variable counter start from the
    predefined symbols and address 16 each time, and the previous result
    is discarded before the new translation begins.

    Attributes:
        config: Assembler settings (variable base, output suffix, encoding)
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the assembler.

        Args:
            config: Assembler settings; defaults to AssemblerConfig()
        """
        self.config = config or AssemblerConfig()
        self._codegen = CodeGenerator(variable_base=self.config.variable_base)
        self._codes: list[str] = []
        self._symbols: dict[str, int] = {}
        self._labels: dict[str, int] = {}
        self._variables: dict[str, int] = {}
        self._listing: list[ListingEntry] = []
        self._source_file: Optional[Path] = None

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble a program given as a sequence of lines.

        Args:
            lines: Raw source lines, in order
            filename: Name used in error messages

        Returns:
            One 16-character codeword per instruction, in source order

        Raises:
            AssemblerError: If any line cannot be classified or encoded
        """
        self._reset()

        statements = parse_lines(lines, filename)
        codes, table = self._codegen.generate(statements)

        self._codes = codes
        self._symbols = table.as_dict()
        self._labels = table.labels
        self._variables = table.variables
        self._listing = self._codegen.get_listing()

        logger.info(f"Assembled {filename}: {len(codes)} instructions")
        return list(codes)

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Name used in error messages

        Returns:
            Codewords in source order
        """
        return self.assemble_lines(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Codewords in source order

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        logger.debug(f"Reading {filepath}")

        with open(filepath, encoding=self.config.encoding) as f:
            codes = self.assemble_lines(f, str(filepath))

        self._source_file = filepath
        return codes

    def _reset(self) -> None:
        self._codes = []
        self._symbols = {}
        self._labels = {}
        self._variables = {}
        self._listing = []
        self._source_file = None

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_code(self) -> list[str]:
        """Return the codewords of the last translation."""
        return list(self._codes)

    def get_symbols(self) -> dict[str, int]:
        """Return every symbol of the last translation (predefined included)."""
        return dict(self._symbols)

    def get_labels(self) -> dict[str, int]:
        """Return the labels of the last translation, in declaration order."""
        return dict(self._labels)

    def get_variables(self) -> dict[str, int]:
        """Return the variables of the last translation, in allocation order."""
        return dict(self._variables)

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            Listing with instruction addresses, codewords and source lines,
            followed by the label and variable tables
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("Addr   Code              Line  Source")
        lines.append("-" * 60)
        for entry in self._listing:
            lines.append(
                f"{entry.address:5d}  {entry.code}  {entry.statement.location.line:4d}  "
                f"{entry.statement.content}"
            )
        lines.append("")
        lines.append("Labels")
        lines.append("-" * 30)
        for name, address in self._labels.items():
            lines.append(f"{name:20s} = {address}")
        lines.append("")
        lines.append("Variables")
        lines.append("-" * 30)
        for name, address in self._variables.items():
            lines.append(f"{name:20s} = {address}")
        return "\n".join(lines)

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write codewords to a .hack file, one per line.

        Args:
            filepath: Output file path
        """
        with open(filepath, "w", encoding=self.config.encoding) as f:
            for code in self._codes:
                f.write(code)
                f.write("\n")

        logger.debug(f"Wrote {len(self._codes)} codewords to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address (one per line), labels then variables
        """
        with open(filepath, "w", encoding=self.config.encoding) as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for name, address in self._labels.items():
                f.write(f"{name} {address}\n")
            for name, address in self._variables.items():
                f.write(f"{name} {address}\n")

    def write_listing(self, filepath: str | Path) -> None:
        """Write assembly listing file."""
        with open(filepath, "w", encoding=self.config.encoding) as f:
            f.write(self.get_listing())
            f.write("\n")

    def output_path(self) -> Optional[Path]:
        """Default output path for the last assembled file, if any."""
        if self._source_file is None:
            return None
        return output_path_for(self._source_file, self.config.output_suffix)


# =============================================================================
# Convenience Functions
# =============================================================================

def output_path_for(source: str | Path, suffix: str = ".hack") -> Path:
    """
    Return the default output file for a source file.

    The output goes beside the source with the same stem:
    ``prog/Max.asm`` -> ``prog/Max.hack``.
    """
    return Path(source).with_suffix(suffix)


def assemble(source: str, filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Assembly source code
        filename: Name used in error messages

    Returns:
        Codewords in source order

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)
