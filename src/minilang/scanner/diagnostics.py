"""
Lexical Diagnostics
===================

Append-only log of the lexical errors found during one scan.

The scanner never raises for bad input. Each problem is recorded here
with its location, the exact text that was skipped, and a human readable
reason, and scanning carries on from the next character.

Diagnostic Kinds
----------------
| Kind                | Trigger                                         |
|---------------------|-------------------------------------------------|
| INVALID_CHARACTER   | a character no lexical rule accepts             |
| MALFORMED_LITERAL   | float with too many decimals, bad string escape |
| INVALID_IDENTIFIER  | over-length or wrongly cased identifier         |
| UNTERMINATED_STRING | string without closing quote on its line        |
| UNTERMINATED_CHAR   | character literal that is not closed            |
| UNCLOSED_COMMENT    | #* block comment without a closing *#           |

Example
-------
>>> log = Diagnostics()
>>> log.report(DiagnosticKind.INVALID_CHARACTER, 1, 5, "@",
...            "character '@' is not allowed in the language")
>>> log.has_errors()
True
>>> print(log.entries()[0])
ERROR [INVALID_CHARACTER] at Line 1, Col 5: '@' - character '@' is not allowed in the language
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from minilang.errors import LexicalErrors, SourceLocation

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    """Closed set of lexical error categories."""

    INVALID_CHARACTER = "INVALID_CHARACTER"
    MALFORMED_LITERAL = "MALFORMED_LITERAL"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    UNTERMINATED_STRING = "UNTERMINATED_STRING"
    UNTERMINATED_CHAR = "UNTERMINATED_CHAR"
    UNCLOSED_COMMENT = "UNCLOSED_COMMENT"


@dataclass(frozen=True)
class Diagnostic:
    """
    A recorded, non-fatal lexical error.

    Attributes:
        kind: The error category
        line: Line where the offending span starts (1-indexed)
        column: Column where the offending span starts (1-indexed)
        lexeme: The exact source text that was skipped
        reason: Human readable explanation
        filename: Name of the scanned source
    """
    kind: DiagnosticKind
    line: int
    column: int
    lexeme: str
    reason: str
    filename: str = "<input>"

    def __str__(self) -> str:
        return (
            f"ERROR [{self.kind.value}] at Line {self.line}, Col {self.column}: "
            f"'{_shorten(self.lexeme)}' - {self.reason}"
        )

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def format(self, source_line: Optional[str] = None) -> str:
        """
        Format the diagnostic in compiler style.

        Example output:
            prog.ml:3:9: error: character '@' is not allowed in the language
                declare @X = 1 ;
                        ^
        """
        parts = [f"{self.location}: error: {self.reason}"]

        if source_line is not None:
            parts.append(f"    {source_line}")
            padding = " " * (4 + self.column - 1)
            parts.append(f"{padding}^")

        return "\n".join(parts)


def _shorten(text: str, limit: int = 40) -> str:
    """Clip long lexemes (unclosed comments can swallow a whole file)."""
    text = text.replace("\n", "\\n")
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


class Diagnostics:
    """
    Ordered, append-only collection of diagnostics for one scan.

    Entries are never removed. Recording a diagnostic has no effect on
    the scan that produced it.

    Example:
        log = Diagnostics("prog.ml")
        log.report(DiagnosticKind.UNTERMINATED_STRING, 2, 7, '"abc',
                   "string literal is not properly closed")
        if log.has_errors():
            print(log.report_text())
    """

    def __init__(self, filename: str = "<input>"):
        """
        Initialize an empty log.

        Args:
            filename: Source name attached to every recorded diagnostic
        """
        self.filename = filename
        self._entries: list[Diagnostic] = []

    def report(
        self,
        kind: DiagnosticKind,
        line: int,
        column: int,
        lexeme: str,
        reason: str,
    ) -> Diagnostic:
        """Append a diagnostic and return it."""
        diagnostic = Diagnostic(kind, line, column, lexeme, reason, self.filename)
        self._entries.append(diagnostic)
        logger.debug("%s", diagnostic)
        return diagnostic

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been recorded."""
        return len(self._entries) > 0

    def count(self) -> int:
        """Return the number of recorded diagnostics."""
        return len(self._entries)

    def entries(self) -> list[Diagnostic]:
        """Return a copy of all diagnostics in detection order."""
        return list(self._entries)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the diagnostics of one kind, in detection order."""
        return [d for d in self._entries if d.kind is kind]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def report_text(self, source: Optional[str] = None) -> str:
        """
        Format every diagnostic for display.

        Args:
            source: The scanned text; when given, each entry shows its
                source line with a caret under the error column
        """
        lines = source.split("\n") if source is not None else None
        parts = []

        for diagnostic in self._entries:
            source_line = None
            if lines is not None and diagnostic.line <= len(lines):
                source_line = lines[diagnostic.line - 1].rstrip("\r")
            parts.append(diagnostic.format(source_line))
            parts.append("")

        word = "error" if len(self._entries) == 1 else "errors"
        parts.append(f"{len(self._entries)} lexical {word}")
        return "\n".join(parts)

    def raise_if_errors(self, source: Optional[str] = None) -> None:
        """Raise LexicalErrors if any diagnostics were recorded."""
        if self.has_errors():
            raise LexicalErrors(self.report_text(source), self.entries())
