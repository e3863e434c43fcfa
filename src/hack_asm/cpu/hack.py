"""
Hack Instruction Set Definition
===============================

This module defines the binary contract of the Hack computer: the bit
fields of the C-instruction and the addresses of the predefined symbols.
Both the encoder and the tests read from these tables, so a transcription
error shows up in exactly one place.

Instruction Formats
-------------------
The Hack CPU has two 16-bit instruction formats:

1. **A-instruction** ``@value``
   - ``0vvv vvvv vvvv vvvv``
   - Loads a constant or address into the A register

2. **C-instruction** ``dest=comp;jump``
   - ``111a cccc ccdd djjj``
   - ``a`` + ``cccccc``: ALU computation (7 bits, COMP_TABLE)
   - ``ddd``: destination registers (3 bits, DEST_TABLE)
   - ``jjj``: jump condition (3 bits, JUMP_TABLE)

The ``a`` bit selects whether the ALU's second operand is A (a=0) or
M, the memory word addressed by A (a=1).

Reference
---------
- Nisan & Schocken, The Elements of Computing Systems, chapters 4 and 6
"""

from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# Word Layout
# =============================================================================

WORD_BITS = 16
MAX_WORD = (1 << WORD_BITS) - 1

# Leading bits of every C-instruction
C_INSTRUCTION_PREFIX = "111"

# First data-memory address handed out to variables
VARIABLE_BASE = 16


# =============================================================================
# Comp Table (a-bit + c1..c6)
# =============================================================================

COMP_TABLE: Mapping[str, str] = MappingProxyType({
    # a=0: second operand is A
    "0":   "0101010",
    "1":   "0111111",
    "-1":  "0111010",
    "D":   "0001100",
    "A":   "0110000",
    "!D":  "0001101",
    "!A":  "0110001",
    "-D":  "0001111",
    "-A":  "0110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "D+A": "0000010",
    "D-A": "0010011",
    "A-D": "0000111",
    "D&A": "0000000",
    "D|A": "0010101",
    # a=1: second operand is M
    "M":   "1110000",
    "!M":  "1110001",
    "-M":  "1110011",
    "M+1": "1110111",
    "M-1": "1110010",
    "D+M": "1000010",
    "D-M": "1010011",
    "M-D": "1000111",
    "D&M": "1000000",
    "D|M": "1010101",
})


# =============================================================================
# Dest and Jump Tables
# =============================================================================
# None is the absent field; both tables encode it as 000.

DEST_TABLE: Mapping[Optional[str], str] = MappingProxyType({
    None:  "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
})

JUMP_TABLE: Mapping[Optional[str], str] = MappingProxyType({
    None:  "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
})


# =============================================================================
# Predefined Symbols
# =============================================================================

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType({
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    **{f"R{n}": n for n in range(16)},
    "SCREEN": 16384,
    "KBD": 24576,
})


# =============================================================================
# Lookup Functions
# =============================================================================

def get_comp_bits(mnemonic: str) -> Optional[str]:
    """
    Look up the 7-bit computation field.

    Args:
        mnemonic: Computation as written in source, already upper-cased
                  and stripped of whitespace (e.g. "D+1")

    Returns:
        The bit string, or None if the computation is not in the table
    """
    return COMP_TABLE.get(mnemonic)


def get_dest_bits(mnemonic: Optional[str]) -> Optional[str]:
    """Look up the 3-bit destination field (None means no destination)."""
    return DEST_TABLE.get(mnemonic)


def get_jump_bits(mnemonic: Optional[str]) -> Optional[str]:
    """Look up the 3-bit jump field (None means no jump)."""
    return JUMP_TABLE.get(mnemonic)


def format_word(value: int) -> str:
    """
    Render a value as a zero-padded 16-character binary string, MSB first.

    Args:
        value: Integer in the range 0 to MAX_WORD

    Returns:
        A 16-character string of '0' and '1'

    Raises:
        ValueError: If the value does not fit in a 16-bit word
    """
    if not 0 <= value <= MAX_WORD:
        raise ValueError(f"value {value} does not fit in {WORD_BITS} bits")
    return format(value, f"0{WORD_BITS}b")


def is_codeword(code: str) -> bool:
    """Return True if code is exactly 16 characters of '0'/'1'."""
    return len(code) == WORD_BITS and set(code) <= {"0", "1"}
