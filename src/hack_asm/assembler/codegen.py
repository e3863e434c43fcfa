"""
Hack Code Generator
===================

This module generates Hack machine code from classified statements.
It implements a two-pass assembly process:

Pass 1 (Label Resolution)
-------------------------
- Scan all statements in source order
- Count instructions to track the instruction address
- Bind each label to the address of the next instruction
- Labels, blank lines and comments take up no address

Pass 2 (Encoding)
-----------------
- Skip labels, blank lines and comments
- Resolve symbolic A-instruction operands, allocating variables from
  address 16 in order of first use
- Encode every instruction as a 16-character binary codeword

Pass 2 may only start once pass 1 has seen every line, because an
instruction may reference a label declared further down the file.

Codeword Layout
---------------
```
A-instruction:  0vvv vvvv vvvv vvvv     (value, MSB first)
C-instruction:  111a cccc ccdd djjj     (comp, dest, jump)
```
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from hack_asm.cpu import (
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    C_INSTRUCTION_PREFIX,
    VARIABLE_BASE,
    format_word,
    get_comp_bits,
    get_dest_bits,
    get_jump_bits,
    is_codeword,
)
from hack_asm.errors import (
    AddressRangeError,
    AssemblerError,
    CodewordLengthError,
    UnknownMnemonicError,
)
from hack_asm.assembler.parser import (
    AInstruction,
    BlankLine,
    CInstruction,
    CommentLine,
    LabelDef,
    Statement,
)
from hack_asm.assembler.symbols import SymbolTable

logger = logging.getLogger(__name__)


# =============================================================================
# Listing Entry
# =============================================================================

@dataclass
class ListingEntry:
    """
    One emitted instruction, for the listing file.

    Attributes:
        address: Instruction-memory address of the codeword
        code: The 16-character codeword
        statement: The statement that produced it
    """
    address: int
    code: str
    statement: Statement


# =============================================================================
# Code Generator
# =============================================================================

class CodeGenerator:
    """
    Generates Hack codewords from classified statements.

    The generator itself holds no address state: the symbol table is
    created per program by generate(), or handed in by the caller when
    running the passes separately.

    Usage:
        codegen = CodeGenerator()
        codes = codegen.generate(statements)

        # or, pass by pass
        table = codegen.resolve_labels(statements, SymbolTable())
        codes = codegen.encode(statements, table)
    """

    def __init__(self, variable_base: int = VARIABLE_BASE):
        """
        Initialize the code generator.

        Args:
            variable_base: First data-memory address for variables
        """
        self._variable_base = variable_base
        self._listing: list[ListingEntry] = []

    # =========================================================================
    # Public Interface
    # =========================================================================

    def new_symbol_table(self) -> SymbolTable:
        """Return a table holding only the predefined symbols."""
        return SymbolTable(variable_base=self._variable_base)

    def generate(self, statements: list[Statement]) -> tuple[list[str], SymbolTable]:
        """
        Translate one program.

        Args:
            statements: Every classified line of the program

        Returns:
            (codewords in source order, the final symbol table)

        Raises:
            AssemblerError: If any instruction cannot be encoded
        """
        table = self.resolve_labels(statements, self.new_symbol_table())
        codes = self.encode(statements, table)
        logger.debug(
            f"Encoded {len(codes)} instructions, {len(table.labels)} labels, "
            f"{len(table.variables)} variables"
        )
        return codes, table

    def get_listing(self) -> list[ListingEntry]:
        """Return the entries recorded by the last encode()."""
        return list(self._listing)

    # =========================================================================
    # Pass 1: Label Resolution
    # =========================================================================

    def resolve_labels(self, statements: Iterable[Statement], table: SymbolTable) -> SymbolTable:
        """
        First pass: bind every label to its instruction address.

        Args:
            statements: Every classified line of the program
            table: Table to extend with label bindings

        Returns:
            The same table, now holding every label
        """
        address = 0

        for stmt in statements:
            if isinstance(stmt, LabelDef):
                if not table.define_label(stmt.name, address):
                    logger.warning(
                        f"{stmt.location}: label '{stmt.name}' already defined "
                        f"at address {table.get(stmt.name)}; ignoring redefinition"
                    )
            elif stmt.is_instruction:
                address += 1

        return table

    # =========================================================================
    # Pass 2: Encoding
    # =========================================================================

    def encode(self, statements: Iterable[Statement], table: SymbolTable) -> list[str]:
        """
        Second pass: encode every instruction.

        Args:
            statements: Every classified line of the program
            table: Table produced by resolve_labels(); variables are added
                   to it as they are first referenced

        Returns:
            One codeword per instruction, in source order

        Raises:
            AssemblerError: On the first instruction that cannot be encoded
        """
        codes: list[str] = []
        self._listing = []

        for stmt in statements:
            if isinstance(stmt, (BlankLine, CommentLine, LabelDef)):
                continue
            elif isinstance(stmt, AInstruction):
                code = self._encode_a(stmt, table)
            elif isinstance(stmt, CInstruction):
                code = self._encode_c(stmt)
            else:
                raise AssemblerError(
                    f"internal error: unhandled statement {type(stmt).__name__}",
                    location=stmt.location,
                    source_line=stmt.source_line,
                )

            if not is_codeword(code):
                raise CodewordLengthError(
                    code, location=stmt.location, source_line=stmt.source_line
                )

            self._listing.append(ListingEntry(len(codes), code, stmt))
            codes.append(code)

        return codes

    def _encode_a(self, inst: AInstruction, table: SymbolTable) -> str:
        """Encode @value, resolving or allocating its symbol."""
        if inst.symbol is None:
            value = inst.value
        else:
            try:
                value = table.resolve(inst.symbol)
            except OverflowError:
                raise AddressRangeError(
                    table.next_variable_address,
                    location=inst.location,
                    source_line=inst.source_line,
                ) from None

        try:
            return format_word(value)
        except ValueError:
            raise AddressRangeError(
                value, location=inst.location, source_line=inst.source_line
            ) from None

    def _encode_c(self, inst: CInstruction) -> str:
        """Encode dest=comp;jump from the bit-field tables."""
        comp = get_comp_bits(inst.comp)
        if comp is None:
            raise self._unknown("comp", inst.comp, inst, COMP_TABLE)

        dest = get_dest_bits(inst.dest)
        if dest is None:
            raise self._unknown("dest", inst.dest, inst, DEST_TABLE)

        jump = get_jump_bits(inst.jump)
        if jump is None:
            raise self._unknown("jump", inst.jump, inst, JUMP_TABLE)

        return C_INSTRUCTION_PREFIX + comp + dest + jump

    @staticmethod
    def _unknown(
        field_name: str,
        mnemonic: Optional[str],
        inst: CInstruction,
        table,
    ) -> UnknownMnemonicError:
        return UnknownMnemonicError(
            field_name,
            mnemonic or "",
            location=inst.location,
            source_line=inst.source_line,
            valid_mnemonics=[key for key in table if key is not None],
        )
