"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the Hack assembler.
All exceptions inherit from HackError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - line matches no known shape, malformed fields
    ├── UnknownMnemonicError - comp/dest/jump field not in its table
    ├── UndefinedSymbolError - operand that is neither a number nor a symbol
    ├── AddressRangeError - value does not fit in a 16-bit word
    └── CodewordLengthError - emitted codeword is not 16 binary digits

Every error aborts translation of the current program. Nothing is
collected or retried: translation is deterministic, so running it again
on the same input can only fail the same way.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack assembler errors.

        try:
            assembler.assemble_file("Prog.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Prog.asm:7:1: error: unknown comp mnemonic 'D+2'
                D=D+2
                ^
            hint: see the comp table for valid computations
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Raised when a line cannot be classified as a comment, label,
    A-instruction or C-instruction, or when the pieces of a recognised
    shape are malformed.

    Examples:
        - A bare word with no '@', '=' or ';' (e.g. "D")
        - An empty label "()"
        - A C-instruction with two '=' signs
        - A C-instruction with no computation ("D=")
    """
    pass


class UnknownMnemonicError(AssemblerError):
    """
    A C-instruction field that is not in its bit-field table.

    Raised during encoding when the computation, destination or jump
    field does not name an entry of the comp, dest or jump table.
    """

    def __init__(
        self,
        field_name: str,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid_mnemonics: Optional[list[str]] = None,
    ):
        self.field_name = field_name
        self.mnemonic = mnemonic
        self.valid_mnemonics = valid_mnemonics or []

        hint = None
        if self.valid_mnemonics:
            hint = f"valid {field_name} mnemonics: {', '.join(self.valid_mnemonics)}"

        super().__init__(
            f"unknown {field_name} mnemonic '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UndefinedSymbolError(AssemblerError):
    """
    An A-instruction operand that cannot name a symbol.

    Any legal symbol resolves (an unknown one becomes a new variable),
    so this is only raised for operands that are neither a decimal number
    nor a legal symbol name, such as "@3rd" or "@a-b".
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol

        if not hint:
            hint = (
                "symbols use letters, digits, '_', '.', '$' and ':' "
                "and may not start with a digit"
            )

        super().__init__(
            f"'{symbol}' is not a number or a valid symbol",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class AddressRangeError(AssemblerError):
    """
    A value that does not fit in a 16-bit word.

    Raised for numeric A-instruction operands above 65535 and when the
    variable allocator runs past the top of data memory.
    """

    def __init__(
        self,
        value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value

        super().__init__(
            f"value {value} does not fit in 16 bits",
            location=location,
            hint="addresses must be in the range 0 to 65535",
            source_line=source_line,
        )


class CodewordLengthError(AssemblerError):
    """
    Internal consistency failure: an emitted codeword is malformed.

    Every instruction must encode to exactly 16 characters of '0'/'1'.
    Seeing this error means a table entry or the encoder is wrong, not
    the source program.
    """

    def __init__(
        self,
        code: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.code = code

        super().__init__(
            f"internal error: codeword '{code}' is not 16 binary digits "
            f"(length {len(code)})",
            location=location,
            source_line=source_line,
        )
