"""Literal scanning mixin: strings, numbers, identifiers."""

from __future__ import annotations

from loxlex.errors import ScanErrorKind
from loxlex.lexer.keywords import DIGITS, IDENTIFIER_CHARS, KEYWORDS
from loxlex.tokens import TokenType


class LiteralScannerMixin:
    """Mixin providing the multi-character literal modes.

    Each method is entered with the first character of the lexeme
    already consumed (``_start`` points at it).

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _start: int
    _current: int
    _line: int

    def _peek(self) -> str:
        """Peek at current character. Implemented by Scanner."""
        raise NotImplementedError

    def _peek_next(self) -> str:
        """Peek one past current character. Implemented by Scanner."""
        raise NotImplementedError

    def _add_token(self, kind: TokenType, literal: str | float | None = None) -> None:
        """Append token for current lexeme. Implemented by Scanner."""
        raise NotImplementedError

    def _error(self, kind: ScanErrorKind) -> None:
        """Report a lexical error. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_string(self) -> None:
        """Scan a string literal after the opening quote.

        Newlines inside the literal are allowed and counted. No escape
        sequences are interpreted; the literal is the raw text between
        the quotes.
        """
        source = self._source
        source_len = self._source_len
        pos = self._current
        while pos < source_len and source[pos] != '"':
            if source[pos] == "\n":
                self._line += 1
            pos += 1
        self._current = pos

        if pos >= source_len:
            self._error(ScanErrorKind.UNTERMINATED_STRING)
            return

        # The closing quote
        self._current += 1
        self._add_token(TokenType.STRING, source[self._start + 1 : self._current - 1])

    def _scan_number(self) -> None:
        """Scan a number literal after its first digit.

        A "." is only part of the number when a digit follows it, so
        ``123.`` leaves the dot for the next lexeme.
        """
        while self._peek() in DIGITS:
            self._current += 1

        # Fractional part
        if self._peek() == "." and self._peek_next() in DIGITS:
            self._current += 1
            while self._peek() in DIGITS:
                self._current += 1

        text = self._source[self._start : self._current]
        self._add_token(TokenType.NUMBER, float(text))

    def _scan_identifier(self) -> None:
        """Scan an identifier or reserved word after its first character."""
        while self._peek() in IDENTIFIER_CHARS:
            self._current += 1

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))
