"""
Minilang Scanner
================

This module implements the scanning engine for Minilang. It converts
source text into an ordered list of tokens while building the symbol
table, the diagnostics log and the scan statistics.

Recognition Order
-----------------
At every position the rules below are tried in order and the first one
that applies wins:

 1. Block comment       #* ... *#   (may span lines)
 2. Line comment        ## ...      (to end of line)
 3. Whitespace          space, tab, carriage return, newline
 4. Two-char operators  ** == != <= >= && || ++ -- += -= *= /=
 5. String literal      "..."       escapes: \\" \\\\ \\n \\t \\r
 6. Char literal        '.'         escapes: \\' \\\\ \\n \\t \\r
 7. Float literal       [+-]digits.digits[(e|E)[+-]digits]
 8. Integer literal     [+-]digits
 9. Keyword / boolean / identifier
10. Single-char operator or punctuator
11. Anything else is an invalid character

Identifiers
-----------
An identifier is an uppercase letter followed by lowercase letters,
digits or underscores, at most 31 characters in total. Keywords and the
boolean literals are all lowercase, so they can never be identifiers.

Error Recovery
--------------
The scanner never raises for malformed input. Each problem is recorded
as a Diagnostic, the offending span is skipped, and scanning resumes
right after it. Malformed literals and identifiers produce a diagnostic
and no token.

Example Usage
-------------
>>> from minilang.scanner import scan
>>> result = scan("declare X = 1 ;")
>>> for token in result.tokens:
...     print(token)
<KEYWORD, "declare", Line: 1, Col: 1>
<IDENTIFIER, "X", Line: 1, Col: 9>
<ASSIGNMENT_OP, "=", Line: 1, Col: 11>
<INTEGER_LITERAL, "1", Line: 1, Col: 13>
<PUNCTUATOR, ";", Line: 1, Col: 15>
"""

import logging
import string
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterator, Optional, Union

from minilang.errors import ScanInputError
from minilang.scanner.diagnostics import DiagnosticKind, Diagnostics
from minilang.scanner.symbols import SymbolTable
from minilang.scanner.tokens import (
    BOOLEAN_LITERALS,
    KEYWORDS,
    MULTI_CHAR_OPERATORS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration.

    The defaults are the rules of the language.

    Attributes:
        filename: Source name used in diagnostics
        max_identifier_length: Longest accepted identifier
        max_float_decimals: Most fractional digits a float may have
        char_lookahead: Characters past the opening quote skipped when a
            character literal is malformed
    """
    filename: str = "<input>"
    max_identifier_length: int = 31
    max_float_decimals: int = 6
    char_lookahead: int = 4

    def __post_init__(self):
        for name in ("max_identifier_length", "max_float_decimals", "char_lookahead"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


# =============================================================================
# Scan Result
# =============================================================================

@dataclass
class ScanResult:
    """
    Everything produced by one scan.

    Attributes:
        tokens: Emitted tokens in source order
        symbols: Identifier registry for this scan
        diagnostics: Lexical errors in detection order
        token_counts: Number of emitted tokens per kind
        comment_count: Number of complete comments removed
        lines_processed: Final value of the line counter
        skipped_chars: Whitespace and comment characters consumed
            without producing a token
        filename: Source name
        source: The scanned text
    """
    tokens: list[Token]
    symbols: SymbolTable
    diagnostics: Diagnostics
    token_counts: dict[TokenKind, int]
    comment_count: int = 0
    lines_processed: int = 1
    skipped_chars: int = 0
    filename: str = "<input>"
    source: str = field(default="", repr=False)

    @property
    def token_count(self) -> int:
        """Total number of emitted tokens."""
        return len(self.tokens)

    @property
    def has_errors(self) -> bool:
        """True if any diagnostics were recorded."""
        return self.diagnostics.has_errors()

    def count_of(self, kind: TokenKind) -> int:
        """Return the number of emitted tokens of one kind."""
        return self.token_counts.get(kind, 0)

    def same_content(self, other: "ScanResult") -> bool:
        """
        Compare two results by content.

        Two scans agree when they produce the same tokens, the same
        symbol table, the same diagnostics and the same counters.
        Filenames are ignored.
        """
        def diagnostic_key(result):
            return [(d.kind, d.line, d.column, d.lexeme, d.reason)
                    for d in result.diagnostics]

        return (
            self.tokens == other.tokens
            and self.symbols.entries() == other.symbols.entries()
            and diagnostic_key(self) == diagnostic_key(other)
            and self.token_counts == other.token_counts
            and self.comment_count == other.comment_count
        )


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Minilang source code.

    Each call to tokenize() or scan() starts from a clean state: a new
    symbol table, a new diagnostics log and zeroed counters. Nothing
    leaks from one scan to the next.

    Usage:
        scanner = Scanner(source_text, ScannerOptions(filename="prog.ml"))
        result = scanner.scan()

    Attributes:
        source: The source code being tokenized
        options: Scanner configuration
        symbols: Symbol table of the current scan
        diagnostics: Diagnostics log of the current scan
    """

    WHITESPACE = " \t\r\n"
    DIGITS = string.digits
    SIGNS = "+-"

    # Characters that can start or continue a word
    WORD_START = string.ascii_letters
    WORD_CHARS = string.ascii_letters + string.digits + "_"

    # Characters allowed after the leading capital of an identifier
    IDENT_TAIL = string.ascii_lowercase + string.digits + "_"

    STRING_ESCAPES = frozenset('"\\ntr')
    CHAR_ESCAPES = frozenset("'\\ntr")

    def __init__(self, source: str, options: Optional[ScannerOptions] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: The Minilang source code to tokenize
            options: Scanner configuration (uses defaults if None)
        """
        self.source = source
        self.options = options or ScannerOptions()
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._line = 1
        self._column = 1

        self.symbols = SymbolTable()
        self.diagnostics = Diagnostics(self.options.filename)
        self._token_counts: dict[TokenKind, int] = {}
        self._comment_count = 0
        self._skipped_chars = 0

    def scan(self) -> ScanResult:
        """
        Scan the whole source.

        Returns:
            ScanResult with tokens, symbol table, diagnostics and counters
        """
        logger.debug("Scanning %s (%d characters)", self.options.filename, len(self.source))

        tokens = list(self.tokenize())

        result = ScanResult(
            tokens=tokens,
            symbols=self.symbols,
            diagnostics=self.diagnostics,
            token_counts=dict(self._token_counts),
            comment_count=self._comment_count,
            lines_processed=self._line,
            skipped_chars=self._skipped_chars,
            filename=self.options.filename,
            source=self.source,
        )

        logger.debug(
            "Scanned %s: %d tokens, %d comments, %d identifiers, %d errors",
            self.options.filename,
            result.token_count,
            result.comment_count,
            len(result.symbols),
            result.diagnostics.count(),
        )
        return result

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Every iteration of the loop consumes at least one character, so
        the scan always terminates.

        Yields:
            Token objects in source order
        """
        self._reset()

        while not self._at_end():
            token = self._scan_next()
            if token is not None:
                self._emit(token)
                yield token

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _char_at(self, index: int) -> str:
        """Return the character at an absolute index, or "" past the end."""
        if index >= len(self.source):
            return ""
        return self.source[index]

    def _peek(self, offset: int = 0) -> str:
        """Look at character at current position + offset without advancing."""
        return self._char_at(self._pos + offset)

    def _is_at(self, index: int, chars: str) -> bool:
        """True if the character at index exists and is one of chars."""
        char = self._char_at(index)
        return char != "" and char in chars

    def _digits_end(self, index: int) -> int:
        """Return the index just past a run of digits starting at index."""
        while self._is_at(index, self.DIGITS):
            index += 1
        return index

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        A newline moves to column 1 of the next line; any other character
        moves one column right.
        """
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _consume(self, count: int) -> str:
        """Consume count characters and return them."""
        start = self._pos
        for _ in range(count):
            self._advance()
        return self.source[start:self._pos]

    def _consume_to(self, end: int) -> str:
        """Consume up to (not including) an absolute index."""
        return self._consume(end - self._pos)

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _emit(self, token: Token) -> None:
        """Update counters and the symbol table for an emitted token."""
        self._token_counts[token.kind] = self._token_counts.get(token.kind, 0) + 1
        if token.kind is TokenKind.IDENTIFIER:
            self.symbols.record(token.lexeme, token.line, token.column)

    def _error(
        self,
        kind: DiagnosticKind,
        lexeme: str,
        reason: str,
        line: int,
        column: int,
    ) -> None:
        """Record a diagnostic for a span that has already been consumed."""
        self.diagnostics.report(kind, line, column, lexeme, reason)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_next(self) -> Optional[Token]:
        """
        Consume the next lexical element.

        Returns:
            The recognized token, or None when the element produced no
            token (comment, whitespace, or an error span)
        """
        line = self._line
        column = self._column
        char = self._peek()
        following = self._peek(1)

        if char == "#" and following == "*":
            self._skip_block_comment(line, column)
            return None

        if char == "#" and following == "#":
            self._skip_line_comment()
            return None

        if char in self.WHITESPACE:
            self._skip_whitespace()
            return None

        pair = char + following
        if pair in MULTI_CHAR_OPERATORS:
            return Token(MULTI_CHAR_OPERATORS[pair], self._consume(2), line, column)

        if char == '"':
            return self._scan_string(line, column)

        if char == "'":
            return self._scan_char(line, column)

        if char in self.DIGITS or (char in self.SIGNS and self._is_at(self._pos + 1, self.DIGITS)):
            return self._scan_number(line, column)

        if char in self.WORD_START:
            return self._scan_word(line, column)

        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char], self._consume(1), line, column)

        bad = self._consume(1)
        self._error(
            DiagnosticKind.INVALID_CHARACTER,
            bad,
            f"character {bad!r} is not allowed in the language",
            line,
            column,
        )
        return None

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip a run of whitespace."""
        end = self._pos
        while self._is_at(end, self.WHITESPACE):
            end += 1
        self._skipped_chars += len(self._consume_to(end))

    def _skip_line_comment(self) -> None:
        """Skip a line comment (## ...) up to, not including, the newline."""
        end = self.source.find("\n", self._pos)
        if end == -1:
            end = len(self.source)
        self._skipped_chars += len(self._consume_to(end))
        self._comment_count += 1

    def _skip_block_comment(self, line: int, column: int) -> None:
        """
        Skip a block comment (#* ... *#).

        An opener without a closer swallows the rest of the input and is
        reported at the opener's position.
        """
        close = self.source.find("*#", self._pos + 2)

        if close == -1:
            rest = self._consume_to(len(self.source))
            self._error(
                DiagnosticKind.UNCLOSED_COMMENT,
                rest,
                "multi-line comment is not properly closed with *#",
                line,
                column,
            )
            return

        self._skipped_chars += len(self._consume_to(close + 2))
        self._comment_count += 1

    # =========================================================================
    # Literal Scanning
    # =========================================================================

    def _scan_string(self, line: int, column: int) -> Optional[Token]:
        """
        Scan a double-quoted string literal.

        Strings cannot span lines. Reaching the end of the line first
        reports the span from the opening quote to the end of the line.
        """
        end = self._pos + 1
        bad_escape = None

        while True:
            char = self._char_at(end)

            if char in ("", "\n"):
                lexeme = self._consume_to(end)
                self._error(
                    DiagnosticKind.UNTERMINATED_STRING,
                    lexeme,
                    "string literal is not properly closed",
                    line,
                    column,
                )
                return None

            if char == '"':
                end += 1
                break

            if char == "\\":
                escaped = self._char_at(end + 1)
                if escaped in ("", "\n"):
                    end += 1
                    continue
                if escaped not in self.STRING_ESCAPES and bad_escape is None:
                    bad_escape = "\\" + escaped
                end += 2
                continue

            end += 1

        lexeme = self._consume_to(end)

        if bad_escape is not None:
            self._error(
                DiagnosticKind.MALFORMED_LITERAL,
                lexeme,
                f"invalid escape sequence '{bad_escape}' in string literal",
                line,
                column,
            )
            return None

        return Token(TokenKind.STRING_LITERAL, lexeme, line, column)

    def _scan_char(self, line: int, column: int) -> Optional[Token]:
        """
        Scan a single-quoted character literal.

        A valid literal holds exactly one character or one escape. Anything
        else skips a bounded span: at most char_lookahead characters past
        the opening quote, never crossing the end of the line.
        """
        start = self._pos
        first = self._char_at(start + 1)

        length = 0
        if first == "\\":
            if (
                self._char_at(start + 2) in self.CHAR_ESCAPES
                and self._char_at(start + 3) == "'"
            ):
                length = 4
        elif first not in ("", "'", "\n") and self._char_at(start + 2) == "'":
            length = 3

        if length:
            return Token(TokenKind.CHAR_LITERAL, self._consume(length), line, column)

        end = start + 1
        limit = start + 1 + self.options.char_lookahead
        while end < limit and self._char_at(end) not in ("", "\n"):
            end += 1

        lexeme = self._consume_to(end)
        self._error(
            DiagnosticKind.UNTERMINATED_CHAR,
            lexeme,
            "character literal is not properly closed",
            line,
            column,
        )
        return None

    def _scan_number(self, line: int, column: int) -> Optional[Token]:
        """
        Scan an integer or float literal with an optional sign.

        A float needs at least one digit on each side of the point. The
        whole fractional part is consumed so that too many decimals can be
        reported rather than split into two literals.
        """
        start = self._pos
        end = start
        if self._is_at(end, self.SIGNS):
            end += 1
        end = self._digits_end(end)

        if self._char_at(end) == "." and self._is_at(end + 1, self.DIGITS):
            fraction_start = end + 1
            end = self._digits_end(fraction_start)
            decimals = end - fraction_start

            if self._is_at(end, "eE"):
                exponent = end + 1
                if self._is_at(exponent, self.SIGNS):
                    exponent += 1
                if self._is_at(exponent, self.DIGITS):
                    end = self._digits_end(exponent)

            lexeme = self._consume_to(end)

            if decimals > self.options.max_float_decimals:
                self._error(
                    DiagnosticKind.MALFORMED_LITERAL,
                    lexeme,
                    f"float literal cannot have more than "
                    f"{self.options.max_float_decimals} decimal places",
                    line,
                    column,
                )
                return None

            return Token(TokenKind.FLOAT_LITERAL, lexeme, line, column)

        return Token(TokenKind.INTEGER_LITERAL, self._consume_to(end), line, column)

    # =========================================================================
    # Words
    # =========================================================================

    def _scan_word(self, line: int, column: int) -> Optional[Token]:
        """
        Scan a keyword, boolean literal or identifier.

        The whole run of letters, digits and underscores is consumed and
        then classified. Keywords and booleans are matched exactly; any
        other word must have identifier shape and length.
        """
        end = self._pos
        while self._is_at(end, self.WORD_CHARS):
            end += 1
        word = self._consume_to(end)

        if word in KEYWORDS:
            return Token(TokenKind.KEYWORD, word, line, column)

        if word in BOOLEAN_LITERALS:
            return Token(TokenKind.BOOLEAN_LITERAL, word, line, column)

        if not self._is_identifier_shaped(word):
            self._error(
                DiagnosticKind.INVALID_IDENTIFIER,
                word,
                "identifier must start with an uppercase letter followed by "
                "lowercase letters, digits or underscores",
                line,
                column,
            )
            return None

        if len(word) > self.options.max_identifier_length:
            self._error(
                DiagnosticKind.INVALID_IDENTIFIER,
                word,
                f"identifier exceeds maximum length of "
                f"{self.options.max_identifier_length} characters",
                line,
                column,
            )
            return None

        return Token(TokenKind.IDENTIFIER, word, line, column)

    def _is_identifier_shaped(self, word: str) -> bool:
        """True if word is a capital letter followed by identifier tail chars."""
        return word[0] in string.ascii_uppercase and all(
            char in self.IDENT_TAIL for char in word[1:]
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(
    source: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> ScanResult:
    """
    Scan Minilang source text.

    Args:
        source: Source text
        filename: Source name for diagnostics (ignored if options given)
        options: Scanner configuration

    Returns:
        ScanResult for the text

    Example:
        >>> result = scan("declare X = 1 ; X = X + 1 ;")
        >>> result.symbols.frequency_of("X")
        3
    """
    if options is None:
        options = ScannerOptions(filename=filename)
    return Scanner(source, options).scan()


def scan_file(
    path: Union[str, Path],
    options: Optional[ScannerOptions] = None,
) -> ScanResult:
    """
    Read and scan a UTF-8 source file.

    Args:
        path: Path to the source file
        options: Scanner configuration; its filename is replaced by path

    Returns:
        ScanResult for the file contents

    Raises:
        ScanInputError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanInputError(str(path), str(e)) from e

    options = replace(options or ScannerOptions(), filename=str(path))
    return scan(source, options=options)
