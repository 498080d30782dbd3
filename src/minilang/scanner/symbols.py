"""
Symbol Table
============

Registry of the user identifiers seen during one scan. Entries are keyed
by name and kept in order of first occurrence. Keywords and boolean
literals are never recorded; the scanner only registers IDENTIFIER
tokens.

Example
-------
>>> table = SymbolTable()
>>> table.record("Count", 1, 9)
>>> table.record("Count", 2, 1)
>>> table.frequency_of("Count")
2
>>> table.get("Count").first_line
1
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class SymbolEntry:
    """
    One distinct identifier.

    The first-occurrence position is fixed when the entry is created;
    only the frequency changes afterwards.

    Attributes:
        name: The identifier text
        first_line: Line of the first occurrence (1-indexed)
        first_column: Column of the first occurrence (1-indexed)
        frequency: Number of occurrences seen so far (>= 1)
        category: Symbol category, always "IDENTIFIER" for the scanner
    """
    name: str
    first_line: int
    first_column: int
    frequency: int = 1
    category: str = "IDENTIFIER"


class SymbolTable:
    """
    Insertion-ordered identifier registry.

    A fresh table is created for every scan; there is no removal
    operation.
    """

    def __init__(self) -> None:
        # dicts preserve insertion order, which is first-occurrence order here
        self._entries: dict[str, SymbolEntry] = {}

    def record(self, name: str, line: int, column: int) -> None:
        """
        Register one occurrence of an identifier.

        Args:
            name: Identifier text
            line: Line of this occurrence
            column: Column of this occurrence
        """
        entry = self._entries.get(name)
        if entry is None:
            self._entries[name] = SymbolEntry(name, line, column)
        else:
            entry.frequency += 1

    def contains(self, name: str) -> bool:
        """Return True if the identifier has been recorded."""
        return name in self._entries

    def frequency_of(self, name: str) -> int:
        """Return the occurrence count of an identifier, 0 if absent."""
        entry = self._entries.get(name)
        return entry.frequency if entry is not None else 0

    def get(self, name: str) -> Optional[SymbolEntry]:
        """Return the entry for an identifier, or None if absent."""
        return self._entries.get(name)

    def entries(self) -> list[SymbolEntry]:
        """Return all entries in first-occurrence order."""
        return list(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({list(self._entries)!r})"
