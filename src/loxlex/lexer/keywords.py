"""Reserved words and character classes for the scanner.

All tables are built once at import time and never mutated:
- frozensets for O(1) character classification
- MappingProxyType views for token lookups (read-only dict)

Thread Safety:
Every constant here is immutable and safe to share across threads.
"""

from __future__ import annotations

from types import MappingProxyType

from loxlex.tokens import TokenType

# Reserved identifier spellings
KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)

# Punctuation that always forms a complete token on its own
SINGLE_CHAR_TOKENS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }
)

# Operators that may absorb a following "=": char -> (with "=", alone)
COMPOUND_TOKENS: MappingProxyType[str, tuple[TokenType, TokenType]] = MappingProxyType(
    {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }
)

# Insignificant whitespace (newline is handled separately for line counting)
WHITESPACE: frozenset[str] = frozenset(" \r\t")

DIGITS: frozenset[str] = frozenset("0123456789")

# ASCII only; no Unicode identifier rules
IDENTIFIER_START: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | DIGITS
