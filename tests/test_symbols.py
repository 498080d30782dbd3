"""
Tests for the Symbol Table
==========================

These tests verify first-occurrence ordering, frequency counting and the
read-only queries of SymbolTable.
"""

from minilang.scanner.symbols import SymbolEntry, SymbolTable


class TestRecord:
    """Tests for SymbolTable.record()."""

    def test_first_occurrence_creates_entry(self):
        """A new name gets frequency 1 and its position."""
        table = SymbolTable()
        table.record("Count", 2, 5)

        assert table.get("Count") == SymbolEntry("Count", 2, 5, 1)

    def test_repeat_increments_frequency(self):
        """Later occurrences only bump the frequency."""
        table = SymbolTable()
        table.record("Count", 2, 5)
        table.record("Count", 3, 1)
        table.record("Count", 9, 9)

        entry = table.get("Count")
        assert entry.frequency == 3
        assert (entry.first_line, entry.first_column) == (2, 5)

    def test_insertion_order(self):
        """Entries keep first-occurrence order."""
        table = SymbolTable()
        for name in ["Zeta", "Alpha", "Zeta", "Mid"]:
            table.record(name, 1, 1)

        assert [entry.name for entry in table] == ["Zeta", "Alpha", "Mid"]
        assert [entry.name for entry in table.entries()] == ["Zeta", "Alpha", "Mid"]

    def test_category(self):
        """Entries are identifiers."""
        table = SymbolTable()
        table.record("X", 1, 1)
        assert table.get("X").category == "IDENTIFIER"


class TestQueries:
    """Tests for the query methods."""

    def test_contains(self):
        """contains() and the in operator agree."""
        table = SymbolTable()
        table.record("X", 1, 1)

        assert table.contains("X")
        assert "X" in table
        assert not table.contains("Y")
        assert "Y" not in table

    def test_frequency_of_absent_is_zero(self):
        """Unknown names have frequency 0."""
        assert SymbolTable().frequency_of("Missing") == 0

    def test_get_absent(self):
        """Unknown names have no entry."""
        assert SymbolTable().get("Missing") is None

    def test_len_counts_unique_names(self):
        """len() is the number of distinct identifiers."""
        table = SymbolTable()
        table.record("A", 1, 1)
        table.record("B", 1, 3)
        table.record("A", 1, 5)
        assert len(table) == 2

    def test_entries_is_a_copy(self):
        """Changing the returned list does not change the table."""
        table = SymbolTable()
        table.record("A", 1, 1)
        table.entries().clear()
        assert len(table) == 1
