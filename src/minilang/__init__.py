"""
Minilang - Lexical Toolchain for a Small Imperative Language
============================================================

This package provides the lexical front end for Minilang, a small
teaching language with `start ... finish` programs, `declare`d variables,
capitalised identifiers and `##` / `#* *#` comments.

Main Components
---------------
- **scanner**: the scanning engine
    Converts source text into tokens, a symbol table, lexical diagnostics
    and token statistics in one pass

- **cli**: command-line tools (mlscan)
    Scans a source file and prints the token listing, statistics, symbol
    table and error report

Quick Start
-----------
Scan a string:
    >>> from minilang import scan
    >>> result = scan("declare X = 1 ; X = X + 1 ;")
    >>> result.symbols.frequency_of("X")
    3

Scan a file:
    >>> from minilang import scan_file
    >>> result = scan_file("program.ml")
    >>> for diagnostic in result.diagnostics:
    ...     print(diagnostic)

Or use the command-line tool:
    $ mlscan program.ml
    $ mlscan --section symbols --section errors program.ml
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minilang.errors import (
    MinilangError,
    SourceLocation,
    ScanInputError,
    LexicalErrors,
)
from minilang.scanner import (
    Token,
    TokenKind,
    SymbolEntry,
    SymbolTable,
    Diagnostic,
    DiagnosticKind,
    Diagnostics,
    Scanner,
    ScannerOptions,
    ScanResult,
    scan,
    scan_file,
)

__all__ = [
    "__version__",
    # Errors
    "MinilangError",
    "SourceLocation",
    "ScanInputError",
    "LexicalErrors",
    # Scanner
    "Token",
    "TokenKind",
    "SymbolEntry",
    "SymbolTable",
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    "scan",
    "scan_file",
]
