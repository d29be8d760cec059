# hackasm/tests/test_symbols.py
import pytest
from hackasm.hack_symbols import SymbolTable


@pytest.fixture
def table():
    """Provides a freshly seeded SymbolTable for each test."""
    return SymbolTable()


def test_predefined_symbols_seeded(table):
    assert len(table) == 23
    assert table.lookup("R0") == 0
    assert table.lookup("R15") == 15
    assert table.lookup("SCREEN") == 16384
    assert table.lookup("KBD") == 24576
    assert [table.lookup(n) for n in ("SP", "LCL", "ARG", "THIS", "THAT")] == [0, 1, 2, 3, 4]

def test_lookup_unknown_returns_none(table):
    assert table.lookup("nowhere") is None
    assert "nowhere" not in table

def test_insert_and_lookup(table):
    assert table.insert("LOOP", 7)
    assert table.lookup("LOOP") == 7
    assert "LOOP" in table

def test_duplicate_insert_keeps_first_binding(table):
    table.insert("LOOP", 7)
    assert table.insert("LOOP", 12) is False
    assert table.lookup("LOOP") == 7
    # Both bindings are recorded, in insertion order
    assert table.entries[-2:] == [("LOOP", 7), ("LOOP", 12)]

def test_variables_allocated_sequentially(table):
    assert table.allocate_variable("x") == 16
    assert table.allocate_variable("y") == 17
    assert table.allocate_variable("x") == 16
    assert table.allocate_variable("z") == 18
    assert table.next_variable_address == 19

def test_known_names_do_not_consume_addresses(table):
    table.insert("LABEL", 40)
    assert table.allocate_variable("R3") == 3
    assert table.allocate_variable("LABEL") == 40
    assert table.allocate_variable("fresh") == 16

def test_tables_are_independent():
    first = SymbolTable()
    first.allocate_variable("counter")
    second = SymbolTable()
    assert second.lookup("counter") is None
    assert second.allocate_variable("other") == 16
