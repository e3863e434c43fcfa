"""
Hack Assembly Language Parser
=============================

This module classifies lines of Hack assembly into statements that the
code generator can process. Hack assembly is strictly one statement per
line, so classification is a single total function over a line of text.

Statement Types
---------------
1. **BlankLine**: empty or whitespace-only line

2. **CommentLine**: line whose first non-blank characters are ``//``

3. **LabelDef**: label declaration
   ```asm
   (LOOP)
   ```

4. **AInstruction**: address instruction
   ```asm
   @21          // literal
   @LOOP        // label
   @i           // variable
   ```

5. **CInstruction**: compute instruction, ``dest=comp;jump``
   ```asm
   D=D+1
   0;JMP
   AM=M-1;JNE
   ```

Trailing ``//`` comments are removed before a line's content is
extracted. A line that matches none of these shapes is a syntax error.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from hack_asm.cpu import MAX_WORD
from hack_asm.errors import (
    AddressRangeError,
    AssemblySyntaxError,
    SourceLocation,
    UndefinedSymbolError,
)
from hack_asm.assembler.symbols import SymbolName, is_valid_symbol

COMMENT_MARKER = "//"

_DECIMAL = re.compile(r"[0-9]+")


# =============================================================================
# Statement Data Classes
# =============================================================================

@dataclass(frozen=True)
class Statement:
    """
    Base class for all classified lines.

    Attributes:
        location: Where the line appears, for error reporting
        source_line: The raw line as read (without line terminator)
        content: The line with trailing comment and surrounding
                 whitespace removed
    """
    location: SourceLocation
    source_line: str
    content: str

    @property
    def is_instruction(self) -> bool:
        """True for lines that emit a codeword."""
        return False


@dataclass(frozen=True)
class BlankLine(Statement):
    """Empty or whitespace-only line."""


@dataclass(frozen=True)
class CommentLine(Statement):
    """Comment-only line."""


@dataclass(frozen=True)
class LabelDef(Statement):
    """
    Label declaration, ``(NAME)``.

    Attributes:
        name: Canonical label name
    """
    name: SymbolName


@dataclass(frozen=True)
class AInstruction(Statement):
    """
    Address instruction, ``@operand``.

    Exactly one of value and symbol is set.

    Attributes:
        value: Literal operand (0-65535)
        symbol: Symbolic operand (label, variable or predefined name)
    """
    value: Optional[int] = None
    symbol: Optional[SymbolName] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.symbol is None):
            raise ValueError("AInstruction needs exactly one of value and symbol")

    @property
    def is_instruction(self) -> bool:
        return True


@dataclass(frozen=True)
class CInstruction(Statement):
    """
    Compute instruction, ``dest=comp;jump``.

    Fields are upper-cased with whitespace removed; an absent field is None.

    Attributes:
        comp: Computation mnemonic (always present)
        dest: Destination mnemonic
        jump: Jump mnemonic
    """
    comp: str = ""
    dest: Optional[str] = None
    jump: Optional[str] = None

    @property
    def is_instruction(self) -> bool:
        return True


# =============================================================================
# Line Classification
# =============================================================================

def strip_comment(text: str) -> str:
    """Remove a trailing // comment and surrounding whitespace."""
    return text.split(COMMENT_MARKER, 1)[0].strip()


def classify_line(text: str, location: SourceLocation) -> Statement:
    """
    Classify one line of source.

    Args:
        text: The raw line (a trailing newline is ignored)
        location: Location of the line; its column is replaced by the
                  column of the first non-blank character

    Returns:
        One of BlankLine, CommentLine, LabelDef, AInstruction, CInstruction

    Raises:
        AssemblySyntaxError: If the line matches no known shape or is malformed
        UndefinedSymbolError: If an @ operand is neither a number nor a symbol
        AddressRangeError: If a numeric @ operand exceeds 16 bits
    """
    source_line = text.rstrip("\r\n")
    stripped = source_line.strip()
    indent = len(source_line) - len(source_line.lstrip())
    location = SourceLocation(location.filename, location.line, indent + 1)

    if not stripped:
        return BlankLine(location, source_line, "")

    if stripped.startswith(COMMENT_MARKER):
        return CommentLine(location, source_line, "")

    content = strip_comment(stripped)

    if content.startswith("(") and content.endswith(")"):
        return _parse_label(content, location, source_line)

    if content.startswith("@"):
        return _parse_a_instruction(content, location, source_line)

    if "=" in content or ";" in content:
        return _parse_c_instruction(content, location, source_line)

    raise AssemblySyntaxError(
        f"cannot parse '{content}'",
        location=location,
        hint="expected a label '(NAME)', an A-instruction '@value' "
             "or a C-instruction 'dest=comp;jump'",
        source_line=source_line,
    )


def _parse_label(content: str, location: SourceLocation, source_line: str) -> LabelDef:
    name = content[1:-1].strip()
    if not name:
        raise AssemblySyntaxError(
            "empty label name",
            location=location,
            source_line=source_line,
        )
    if not is_valid_symbol(name):
        raise AssemblySyntaxError(
            f"invalid label name '{name}'",
            location=location,
            hint="labels use letters, digits, '_', '.', '$' and ':' "
                 "and may not start with a digit",
            source_line=source_line,
        )
    return LabelDef(location, source_line, content, name=SymbolName.of(name))


def _parse_a_instruction(
    content: str, location: SourceLocation, source_line: str
) -> AInstruction:
    operand = content[1:].strip()
    if not operand:
        raise AssemblySyntaxError(
            "missing operand after '@'",
            location=location,
            source_line=source_line,
        )

    if _DECIMAL.fullmatch(operand):
        value = int(operand)
        if value > MAX_WORD:
            raise AddressRangeError(value, location=location, source_line=source_line)
        return AInstruction(location, source_line, content, value=value)

    try:
        symbol = SymbolName.of(operand)
    except ValueError:
        raise UndefinedSymbolError(
            operand, location=location, source_line=source_line
        ) from None
    return AInstruction(location, source_line, content, symbol=symbol)


def _normalize_field(text: str) -> Optional[str]:
    """Remove all whitespace and upper-case; empty becomes None."""
    field = "".join(text.split()).upper()
    return field or None


def _parse_c_instruction(
    content: str, location: SourceLocation, source_line: str
) -> CInstruction:
    # "comp;jump" is read as "=comp;jump" so the split below is uniform
    text = content if "=" in content else "=" + content

    dest_text, rest = text.split("=", 1)
    if "=" in rest:
        raise AssemblySyntaxError(
            "more than one '=' in C-instruction",
            location=location,
            source_line=source_line,
        )

    comp_text, _, jump_text = rest.partition(";")
    if ";" in jump_text:
        raise AssemblySyntaxError(
            "more than one ';' in C-instruction",
            location=location,
            source_line=source_line,
        )

    comp = _normalize_field(comp_text)
    if comp is None:
        raise AssemblySyntaxError(
            "missing computation in C-instruction",
            location=location,
            source_line=source_line,
        )

    return CInstruction(
        location,
        source_line,
        content,
        comp=comp,
        dest=_normalize_field(dest_text),
        jump=_normalize_field(jump_text),
    )


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_lines(lines: Iterable[str], filename: str = "<input>") -> list[Statement]:
    """
    Classify every line of a program.

    Args:
        lines: Raw source lines, in order
        filename: Name used in error locations

    Returns:
        One statement per input line
    """
    return [
        classify_line(line, SourceLocation(filename, number))
        for number, line in enumerate(lines, start=1)
    ]


def parse_source(source: str, filename: str = "<input>") -> list[Statement]:
    """Classify every line of a program held in a string."""
    return parse_lines(source.splitlines(), filename)
