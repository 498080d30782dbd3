"""
Scan Report Rendering
=====================

Formats a ScanResult as human-readable text. Four sections are available:

- **tokens**: one line per token
- **stats**: totals and the per-kind distribution
- **symbols**: the symbol table
- **errors**: the lexical errors
"""

from typing import Iterable, Optional

from minilang.scanner.diagnostics import Diagnostics
from minilang.scanner.lexer import ScanResult
from minilang.scanner.symbols import SymbolTable
from minilang.scanner.tokens import Token, TokenKind

SECTIONS = ("tokens", "stats", "symbols", "errors")


def format_tokens(tokens: Iterable[Token]) -> str:
    """Format the token listing."""
    lines = ["", "========== TOKENS =========="]
    lines.extend(str(token) for token in tokens)
    lines.append("============================")
    return "\n".join(lines)


def format_statistics(result: ScanResult) -> str:
    """
    Format scan totals and the token distribution.

    Kinds with no tokens are left out; the rest appear in TokenKind
    declaration order.
    """
    lines = [
        "",
        "========== SCANNING STATISTICS ==========",
        f"Total Tokens: {result.token_count}",
        f"Lines Processed: {result.lines_processed}",
        f"Comments Removed: {result.comment_count}",
        "",
        "Token Type Distribution:",
        "-" * 45,
    ]
    for kind in TokenKind:
        count = result.count_of(kind)
        if count:
            lines.append(f"{kind.name:<25}: {count}")
    lines.append("=" * 45)
    return "\n".join(lines)


def format_symbol_table(symbols: SymbolTable) -> str:
    """Format the symbol table in first-occurrence order."""
    lines = [
        "",
        "========== SYMBOL TABLE ==========",
        f"{'Identifier':<32} {'Type':<12} {'First Occurrence':<18} {'Frequency':>9}",
        "=" * 75,
    ]
    for entry in symbols:
        first = f"(L:{entry.first_line}, C:{entry.first_column})"
        lines.append(
            f"{entry.name:<32} {entry.category:<12} {first:<18} {entry.frequency:>9}"
        )
    lines.append("=" * 75)
    lines.append(f"Total Unique Identifiers: {len(symbols)}")
    return "\n".join(lines)


def format_diagnostics(diagnostics: Diagnostics) -> str:
    """Format the lexical error listing."""
    if not diagnostics.has_errors():
        return "\nNo lexical errors found!"

    lines = ["", "========== LEXICAL ERRORS =========="]
    lines.extend(str(diagnostic) for diagnostic in diagnostics)
    lines.append("====================================")
    lines.append(f"Total Errors: {diagnostics.count()}")
    return "\n".join(lines)


def render_report(result: ScanResult, sections: Optional[Iterable[str]] = None) -> str:
    """
    Render the selected report sections.

    Args:
        result: The scan to report on
        sections: Section names from SECTIONS; all sections if None.
            Sections always appear in SECTIONS order.

    Raises:
        ValueError: If an unknown section name is given
    """
    wanted = set(SECTIONS if sections is None else sections)
    unknown = wanted.difference(SECTIONS)
    if unknown:
        raise ValueError(f"unknown report section(s): {', '.join(sorted(unknown))}")

    renderers = {
        "tokens": lambda: format_tokens(result.tokens),
        "stats": lambda: format_statistics(result),
        "symbols": lambda: format_symbol_table(result.symbols),
        "errors": lambda: format_diagnostics(result.diagnostics),
    }
    return "\n".join(renderers[name]() for name in SECTIONS if name in wanted)
