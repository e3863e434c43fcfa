"""
Hack Symbol Table
=================

Symbols in Hack assembly are case-insensitive. A name is upper-cased once,
when its line is classified, into a SymbolName; the symbol table is keyed
by SymbolName so lookups never re-normalize.

A SymbolTable holds all address state of one translation:

- the 23 predefined symbols (SP, LCL, ..., R0-R15, SCREEN, KBD)
- labels bound by the resolution pass
- variables allocated by the encoding pass, from address 16 upwards

Each translation creates its own table, so nothing assigned while
assembling one program is visible while assembling another.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from hack_asm.cpu import MAX_WORD, PREDEFINED_SYMBOLS, VARIABLE_BASE

logger = logging.getLogger(__name__)

# Letters, digits, '_', '.', '$', ':'; no leading digit
_SYMBOL_PATTERN = re.compile(r"[A-Za-z_.$:][A-Za-z0-9_.$:]*")


def is_valid_symbol(text: str) -> bool:
    """Return True if text is a legal Hack symbol name."""
    return _SYMBOL_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True)
class SymbolName:
    """
    Canonical (upper-case) symbol name.

    Build instances with SymbolName.of() so the name is validated and
    normalized in one place.
    """
    canonical: str

    @classmethod
    def of(cls, text: str) -> "SymbolName":
        """
        Normalize a symbol as written in source.

        Raises:
            ValueError: If text is not a legal symbol name
        """
        if not is_valid_symbol(text):
            raise ValueError(f"invalid symbol name: {text!r}")
        return cls(text.upper())

    def __str__(self) -> str:
        return self.canonical


class SymbolTable:
    """
    Symbol-to-address mapping for one translation.

    Usage:
        table = SymbolTable()
        table.define_label(SymbolName.of("LOOP"), 4)
        table.resolve(SymbolName.of("i"))   # -> 16, a new variable
    """

    def __init__(self, variable_base: int = VARIABLE_BASE):
        self._addresses: dict[SymbolName, int] = {
            SymbolName(name): address for name, address in PREDEFINED_SYMBOLS.items()
        }
        self._labels: list[SymbolName] = []
        self._variables: list[SymbolName] = []
        self._next_variable = variable_base

    def __contains__(self, name: SymbolName) -> bool:
        return name in self._addresses

    def __len__(self) -> int:
        return len(self._addresses)

    def __iter__(self) -> Iterator[SymbolName]:
        return iter(self._addresses)

    @property
    def next_variable_address(self) -> int:
        """Address the next new variable will receive."""
        return self._next_variable

    @property
    def labels(self) -> dict[str, int]:
        """Labels bound so far, in declaration order."""
        return {str(name): self._addresses[name] for name in self._labels}

    @property
    def variables(self) -> dict[str, int]:
        """Variables allocated so far, in allocation order."""
        return {str(name): self._addresses[name] for name in self._variables}

    def get(self, name: SymbolName) -> Optional[int]:
        """Return the address bound to name, or None."""
        return self._addresses.get(name)

    def is_predefined(self, name: SymbolName) -> bool:
        return name.canonical in PREDEFINED_SYMBOLS

    def define_label(self, name: SymbolName, address: int) -> bool:
        """
        Bind a label to an instruction address.

        The first binding of a name wins. Re-declaring a label (or
        declaring one that shadows a predefined symbol) leaves the table
        unchanged.

        Returns:
            True if the label was bound, False if the name was already bound
        """
        if name in self._addresses:
            return False
        self._addresses[name] = address
        self._labels.append(name)
        logger.debug(f"Label {name} = {address}")
        return True

    def resolve(self, name: SymbolName) -> int:
        """
        Return the address of name, allocating a variable if it is unbound.

        Raises:
            OverflowError: If the variable allocator has run past 16 bits
        """
        address = self._addresses.get(name)
        if address is not None:
            return address

        address = self._next_variable
        if address > MAX_WORD:
            raise OverflowError(f"no 16-bit address left for variable {name}")
        self._addresses[name] = address
        self._variables.append(name)
        self._next_variable += 1
        logger.debug(f"Variable {name} = {address}")
        return address

    def as_dict(self) -> dict[str, int]:
        """Return every binding keyed by canonical name."""
        return {str(name): address for name, address in self._addresses.items()}
