"""
Minilang Error Hierarchy
========================

This module defines the exception hierarchy for the Minilang toolchain.
All exceptions inherit from MinilangError, allowing callers to catch all
toolchain errors with a single except clause if desired.

Exception Hierarchy
-------------------
MinilangError (base)
├── LexicalErrors - aggregate of scan diagnostics (raised on request only)
└── ScanInputError - source file could not be read

Design Philosophy
-----------------
The scanning engine itself never raises for malformed source text. Every
lexical problem becomes a Diagnostic and scanning continues. Exceptions
exist only at the boundaries: reading input files, and turning a finished
diagnostics log into a failure when the caller asks for it.

Error messages follow this format:
    filename:line:column: error: description
    source_line_text
        ^ (pointer to error location)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinilangError(Exception):
    """
    Base exception for all Minilang errors.

        try:
            result = scan_file("program.ml")
        except MinilangError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Boundary Exceptions
# =============================================================================

class ScanInputError(MinilangError):
    """
    Source input could not be read.

    Raised by scan_file() when the file is missing, unreadable, or not
    valid UTF-8. The engine never sees such input.

    Attributes:
        path: The path that failed to load
        reason: Description of the underlying failure
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")


class LexicalErrors(MinilangError):
    """
    Aggregate of lexical diagnostics.

    Raised by Diagnostics.raise_if_errors() when the caller wants a scan
    with errors to count as a failure. The message is the already
    formatted report of every diagnostic.

    Attributes:
        diagnostics: The Diagnostic entries that caused the failure
    """

    def __init__(self, message: str, diagnostics: Optional[list] = None):
        self.diagnostics = diagnostics or []
        super().__init__(message)
