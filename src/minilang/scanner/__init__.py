"""
Minilang Scanner
================

Lexical analysis for Minilang, a small imperative teaching language.

The scanner turns source text into classified tokens and, in the same
single pass, builds a symbol table of user identifiers, a log of lexical
errors, and per-kind token statistics.

    Source Text → Scanner → Tokens + SymbolTable + Diagnostics + Counts

Usage
-----
>>> from minilang.scanner import scan
>>> result = scan("start declare Total = 0 ; finish")
>>> [t.kind.name for t in result.tokens][:3]
['KEYWORD', 'KEYWORD', 'IDENTIFIER']
>>> result.has_errors
False

Language Summary
----------------
- Keywords: start finish loop condition declare output input function
  return break continue else
- Booleans: true false
- Identifiers: uppercase letter, then lowercase letters, digits or
  underscores (31 characters at most)
- Comments: ## to end of line, #* block *#
"""

from minilang.scanner.tokens import (
    Token,
    TokenKind,
    KEYWORDS,
    BOOLEAN_LITERALS,
)
from minilang.scanner.symbols import SymbolEntry, SymbolTable
from minilang.scanner.diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from minilang.scanner.lexer import (
    Scanner,
    ScannerOptions,
    ScanResult,
    scan,
    scan_file,
)

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "BOOLEAN_LITERALS",
    # Symbol table
    "SymbolEntry",
    "SymbolTable",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    # Engine
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    "scan",
    "scan_file",
]
