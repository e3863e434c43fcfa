"""
Hack Assembler
==============

This package translates programs written in the Hack assembly language
into Hack machine code: one 16-character binary codeword per instruction.

The Hack computer is the 16-bit machine built in "The Elements of
Computing Systems" (Nand2Tetris). Its instruction set has two formats,
the A-instruction (``@value``) and the C-instruction (``dest=comp;jump``).

Main Components
---------------
- **assembler**: Line classifier, symbol table and the two-pass code
  generator (hackasm)
- **cpu**: Bit-field tables and predefined symbol addresses
- **config**: Assembler settings and environment overrides

Quick Start
-----------
Assemble a program:
    >>> from hack_asm import Assembler
    >>> asm = Assembler()
    >>> asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tool:
    $ hackasm Max.asm
"""

__version__ = "1.0.0"

from hack_asm.assembler import Assembler, assemble, assemble_file
from hack_asm.config import AssemblerConfig
from hack_asm.errors import (
    HackError,
    AssemblerError,
    AssemblySyntaxError,
    UnknownMnemonicError,
    UndefinedSymbolError,
    AddressRangeError,
    CodewordLengthError,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "AssemblerConfig",
    "assemble",
    "assemble_file",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "AssemblySyntaxError",
    "UnknownMnemonicError",
    "UndefinedSymbolError",
    "AddressRangeError",
    "CodewordLengthError",
    "SourceLocation",
]
