"""Token and TokenType definitions for the loxlex scanner.

The scanner produces a list of Token objects that a parser consumes.
Each Token has a kind, the exact lexeme matched, an optional decoded
literal, and the source line it was found on.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    """Token kinds produced by the scanner.

    Organized by category:
    - Single-character punctuation
    - One or two character operators
    - Literals
    - Reserved words
    - End of input

    """

    # Single-character tokens
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenType enum)
        lexeme: The exact substring of source that was matched
        literal: Decoded value; str for STRING, float for NUMBER, else None
        line: Line number (1-indexed) the token was emitted on

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenType
    lexeme: str
    literal: str | float | None
    line: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lex = self.lexeme
        if len(lex) > 20:
            lex = lex[:17] + "..."
        if self.literal is None:
            return f"Token({self.kind.name}, {lex!r}, line={self.line})"
        return f"Token({self.kind.name}, {lex!r}, {self.literal!r}, line={self.line})"

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.kind.name} {self.lexeme} {literal}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict.

        Non-finite number literals (a lexeme too large for a float) are
        written as strings, since JSON has no infinity.

        Returns:
            Dict with kind (enum name), lexeme, literal and line.
        """
        literal = self.literal
        if isinstance(literal, float) and not math.isfinite(literal):
            literal = repr(literal)
        return {
            "kind": self.kind.name,
            "lexeme": self.lexeme,
            "literal": literal,
            "line": self.line,
        }
