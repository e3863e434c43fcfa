"""
Hack Assembler
==============

This package translates Hack assembly language into 16-bit Hack machine
code, written as text codewords of '0' and '1'.

Main Components
---------------
- **Assembler**: Orchestrates one translation per call and writes outputs
- **Parser**: Classifies each source line into a statement
- **SymbolTable**: Per-translation symbol-to-address mapping
- **CodeGenerator**: Runs the label-resolution and encoding passes

Assembly Process
----------------
1. **Classification (Parser)**:
   - Strip comments and whitespace
   - Classify every line as blank, comment, label, A- or C-instruction

2. **Code Generation (CodeGenerator)** (two-pass):
   - Pass 1: Bind labels to instruction addresses
   - Pass 2: Allocate variables, encode every instruction

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble_string('''
... (LOOP)
...     @LOOP
...     0;JMP
... ''')
['0000000000000000', '1110101010000111']
"""

from hack_asm.assembler.assembler import (
    Assembler,
    assemble,
    assemble_file,
    output_path_for,
)
from hack_asm.assembler.parser import (
    Statement,
    BlankLine,
    CommentLine,
    LabelDef,
    AInstruction,
    CInstruction,
    classify_line,
    parse_lines,
    parse_source,
)
from hack_asm.assembler.symbols import SymbolName, SymbolTable
from hack_asm.assembler.codegen import CodeGenerator, ListingEntry

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    "output_path_for",
    # Parser
    "Statement",
    "BlankLine",
    "CommentLine",
    "LabelDef",
    "AInstruction",
    "CInstruction",
    "classify_line",
    "parse_lines",
    "parse_source",
    # Symbols
    "SymbolName",
    "SymbolTable",
    # Code generator
    "CodeGenerator",
    "ListingEntry",
]
