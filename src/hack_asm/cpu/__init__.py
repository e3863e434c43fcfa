"""
Hack CPU Package
================

This package contains the Hack instruction-set definitions used by the
assembler and its tests.

Modules:
    hack: Bit-field tables for the C-instruction, predefined symbol
          addresses, and helpers for rendering 16-bit codewords.

Usage:
    from hack_asm.cpu import (
        COMP_TABLE,
        DEST_TABLE,
        JUMP_TABLE,
        PREDEFINED_SYMBOLS,
    )
"""

from hack_asm.cpu.hack import (
    # Word layout
    WORD_BITS,
    MAX_WORD,
    C_INSTRUCTION_PREFIX,
    VARIABLE_BASE,
    # Bit-field tables
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    PREDEFINED_SYMBOLS,
    # Lookup functions
    get_comp_bits,
    get_dest_bits,
    get_jump_bits,
    format_word,
    is_codeword,
)

__all__ = [
    # Word layout
    "WORD_BITS",
    "MAX_WORD",
    "C_INSTRUCTION_PREFIX",
    "VARIABLE_BASE",
    # Bit-field tables
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "PREDEFINED_SYMBOLS",
    # Lookup functions
    "get_comp_bits",
    "get_dest_bits",
    "get_jump_bits",
    "format_word",
    "is_codeword",
]
