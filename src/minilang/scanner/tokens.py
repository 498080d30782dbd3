"""
Minilang Token Definitions
==========================

Token kinds, the token value type, and the fixed lexical tables of the
language (keywords, boolean literals, operators and punctuators).

Token Categories
----------------
| Kind            | Examples                          |
|-----------------|-----------------------------------|
| KEYWORD         | start, declare, loop, output      |
| IDENTIFIER      | Count, X, Total_2                 |
| INTEGER_LITERAL | 42, -7, +3                        |
| FLOAT_LITERAL   | 3.14, -0.5, 1.25e10               |
| STRING_LITERAL  | "hello\\n"                        |
| CHAR_LITERAL    | 'a', '\\t'                        |
| BOOLEAN_LITERAL | true, false                       |
| ARITHMETIC_OP   | + - * / % **                      |
| RELATIONAL_OP   | < > <= >= == !=                   |
| LOGICAL_OP      | && \\|\\| !                       |
| ASSIGNMENT_OP   | = += -= *= /=                     |
| INC_DEC_OP      | ++ --                             |
| PUNCTUATOR      | ( ) { } [ ] , ; :                 |

Comments and whitespace are consumed by the scanner and never become
tokens.
"""

from dataclasses import dataclass
from enum import Enum, auto

from minilang.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Lexical categories of the Minilang language.

    The set is closed. Declaration order is the order used when reporting
    per-kind statistics.
    """

    # === Words ===
    KEYWORD = auto()
    IDENTIFIER = auto()

    # === Literals ===
    INTEGER_LITERAL = auto()
    FLOAT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()
    BOOLEAN_LITERAL = auto()

    # === Operators ===
    ARITHMETIC_OP = auto()
    RELATIONAL_OP = auto()
    LOGICAL_OP = auto()
    ASSIGNMENT_OP = auto()
    INC_DEC_OP = auto()

    # === Delimiters ===
    PUNCTUATOR = auto()


# =============================================================================
# Lexical Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "start", "finish", "loop", "condition", "declare", "output",
    "input", "function", "return", "break", "continue", "else",
})

BOOLEAN_LITERALS: frozenset[str] = frozenset({"true", "false"})

# Two-character operators. Tried before any single-character rule so that
# "*=" never splits into "*" and "=".
MULTI_CHAR_OPERATORS: dict[str, TokenKind] = {
    "**": TokenKind.ARITHMETIC_OP,
    "==": TokenKind.RELATIONAL_OP,
    "!=": TokenKind.RELATIONAL_OP,
    "<=": TokenKind.RELATIONAL_OP,
    ">=": TokenKind.RELATIONAL_OP,
    "&&": TokenKind.LOGICAL_OP,
    "||": TokenKind.LOGICAL_OP,
    "++": TokenKind.INC_DEC_OP,
    "--": TokenKind.INC_DEC_OP,
    "+=": TokenKind.ASSIGNMENT_OP,
    "-=": TokenKind.ASSIGNMENT_OP,
    "*=": TokenKind.ASSIGNMENT_OP,
    "/=": TokenKind.ASSIGNMENT_OP,
}

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.ARITHMETIC_OP,
    "-": TokenKind.ARITHMETIC_OP,
    "*": TokenKind.ARITHMETIC_OP,
    "/": TokenKind.ARITHMETIC_OP,
    "%": TokenKind.ARITHMETIC_OP,
    "<": TokenKind.RELATIONAL_OP,
    ">": TokenKind.RELATIONAL_OP,
    "!": TokenKind.LOGICAL_OP,
    "=": TokenKind.ASSIGNMENT_OP,
    "(": TokenKind.PUNCTUATOR,
    ")": TokenKind.PUNCTUATOR,
    "{": TokenKind.PUNCTUATOR,
    "}": TokenKind.PUNCTUATOR,
    "[": TokenKind.PUNCTUATOR,
    "]": TokenKind.PUNCTUATOR,
    ",": TokenKind.PUNCTUATOR,
    ";": TokenKind.PUNCTUATOR,
    ":": TokenKind.PUNCTUATOR,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A classified lexeme with its source position.

    Tokens are immutable and compare structurally on all four fields.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text that was matched
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
    """
    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f'<{self.kind.name}, "{self.lexeme}", Line: {self.line}, Col: {self.column}>'

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)

    def is_literal(self) -> bool:
        """Return True if this token is a literal of any type."""
        return self.kind in (
            TokenKind.INTEGER_LITERAL,
            TokenKind.FLOAT_LITERAL,
            TokenKind.STRING_LITERAL,
            TokenKind.CHAR_LITERAL,
            TokenKind.BOOLEAN_LITERAL,
        )

    def is_operator(self) -> bool:
        """Return True if this token is an operator of any type."""
        return self.kind in (
            TokenKind.ARITHMETIC_OP,
            TokenKind.RELATIONAL_OP,
            TokenKind.LOGICAL_OP,
            TokenKind.ASSIGNMENT_OP,
            TokenKind.INC_DEC_OP,
        )
