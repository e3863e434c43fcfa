# =============================================================================
# test_symbols.py - Symbol Table Tests
# =============================================================================
# Tests for symbol names and the per-translation symbol table.
#
# Test coverage includes:
#   - Symbol name validation and canonical case
#   - Predefined entries at creation
#   - Label binding (first declaration wins)
#   - Variable allocation order
#   - Independence of separate tables
# =============================================================================

import pytest

from hack_asm.assembler.symbols import SymbolName, SymbolTable, is_valid_symbol
from hack_asm.cpu import PREDEFINED_SYMBOLS


# =============================================================================
# Symbol Names
# =============================================================================

class TestSymbolName:
    """Canonical symbol names."""

    def test_upper_cases(self):
        assert SymbolName.of("loop").canonical == "LOOP"
        assert str(SymbolName.of("Loop")) == "LOOP"

    def test_equal_regardless_of_case(self):
        assert SymbolName.of("sum") == SymbolName.of("SUM")
        assert hash(SymbolName.of("sum")) == hash(SymbolName.of("Sum"))

    @pytest.mark.parametrize("text", ["i", "_tmp", "Main.loop", "$x", ":a1", "R15"])
    def test_valid(self, text):
        assert is_valid_symbol(text)

    @pytest.mark.parametrize("text", ["", "1abc", "a b", "a-b", "@x"])
    def test_invalid(self, text):
        assert not is_valid_symbol(text)
        with pytest.raises(ValueError):
            SymbolName.of(text)


# =============================================================================
# Symbol Table
# =============================================================================

class TestSymbolTable:
    """Symbol table state for one translation."""

    def test_starts_with_predefined_only(self):
        table = SymbolTable()
        assert table.as_dict() == dict(PREDEFINED_SYMBOLS)
        assert len(table) == 23
        assert table.labels == {}
        assert table.variables == {}
        assert table.next_variable_address == 16

    def test_predefined_lookup(self):
        table = SymbolTable()
        assert table.get(SymbolName.of("screen")) == 16384
        assert table.is_predefined(SymbolName.of("KBD"))
        assert not table.is_predefined(SymbolName.of("LOOP"))

    def test_define_label(self):
        table = SymbolTable()
        assert table.define_label(SymbolName.of("LOOP"), 4)
        assert table.get(SymbolName.of("loop")) == 4
        assert table.labels == {"LOOP": 4}

    def test_first_label_declaration_wins(self):
        table = SymbolTable()
        table.define_label(SymbolName.of("END"), 2)
        assert not table.define_label(SymbolName.of("end"), 9)
        assert table.get(SymbolName.of("END")) == 2

    def test_label_cannot_rebind_predefined(self):
        table = SymbolTable()
        assert not table.define_label(SymbolName.of("SP"), 7)
        assert table.get(SymbolName.of("SP")) == 0

    def test_variables_allocated_in_order(self):
        table = SymbolTable()
        assert table.resolve(SymbolName.of("i")) == 16
        assert table.resolve(SymbolName.of("sum")) == 17
        assert table.resolve(SymbolName.of("I")) == 16
        assert table.variables == {"I": 16, "SUM": 17}
        assert table.next_variable_address == 18

    def test_resolve_known_symbol_does_not_allocate(self):
        table = SymbolTable()
        table.define_label(SymbolName.of("LOOP"), 3)
        assert table.resolve(SymbolName.of("LOOP")) == 3
        assert table.resolve(SymbolName.of("R5")) == 5
        assert table.next_variable_address == 16

    def test_custom_variable_base(self):
        table = SymbolTable(variable_base=1024)
        assert table.resolve(SymbolName.of("x")) == 1024

    def test_allocator_overflow(self):
        table = SymbolTable(variable_base=65535)
        assert table.resolve(SymbolName.of("last")) == 65535
        with pytest.raises(OverflowError):
            table.resolve(SymbolName.of("one_too_many"))

    def test_tables_are_independent(self):
        first = SymbolTable()
        first.define_label(SymbolName.of("LOOP"), 1)
        first.resolve(SymbolName.of("x"))

        second = SymbolTable()
        assert SymbolName.of("LOOP") not in second
        assert SymbolName.of("X") not in second
        assert second.next_variable_address == 16
