"""Character-level state-machine scanner for Lox source.

Consumes one character at a time and classifies it:
punctuation and operators are decided with at most one character of
lookahead, while strings, numbers and identifiers hand off to the
literal modes in LiteralScannerMixin.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; the lookup tables are immutable.

"""

from __future__ import annotations

from collections.abc import Iterator

from loxlex.errors import ScanErrorKind
from loxlex.lexer.keywords import (
    COMPOUND_TOKENS,
    DIGITS,
    IDENTIFIER_START,
    SINGLE_CHAR_TOKENS,
    WHITESPACE,
)
from loxlex.lexer.literals import LiteralScannerMixin
from loxlex.reporting import ErrorReporter, LoggingReporter
from loxlex.tokens import Token, TokenType
from loxlex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(LiteralScannerMixin):
    """Lexical scanner producing a token list terminated by EOF.

    Lexical errors are handed to the reporter and scanning resumes at
    the next character, so one pass surfaces every error in the source.

    Usage:
        >>> scanner = Scanner("var x = 1;")
        >>> for token in scanner.tokenize():
        ...     print(token)
        VAR var null
        IDENTIFIER x null
        EQUAL = null
        NUMBER 1 1.0
        SEMICOLON ; null
        EOF  null

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_start",  # First character of the lexeme being scanned
        "_current",  # Next unconsumed character
        "_line",
        "_reporter",
        "_pending",  # Tokens produced by the current step, not yet yielded
    )

    def __init__(
        self,
        source: str,
        reporter: ErrorReporter | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Lox source text
            reporter: Error sink; defaults to a LoggingReporter
        """
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._current = 0
        self._line = 1
        self._reporter: ErrorReporter = (
            reporter if reporter is not None else LoggingReporter()
        )
        self._pending: list[Token] = []

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source.

        Returns:
            Tokens in source order, always ending with EOF.
        """
        return list(self.tokenize())

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, EOF last.

        Complexity: O(n) where n = len(source)
        """
        logger.debug("Scanning %d characters", self._source_len)
        count = 0
        source_len = self._source_len
        while self._current < source_len:
            self._start = self._current
            self._scan_token()
            if self._pending:
                count += len(self._pending)
                yield from self._pending
                self._pending.clear()

        self._start = self._current
        logger.debug("Scanned %d tokens over %d lines", count + 1, self._line)
        yield Token(TokenType.EOF, "", None, self._line)

    def _scan_token(self) -> None:
        """Consume one lexeme (or skip one insignificant character)."""
        char = self._advance()

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            self._add_token(kind)
            return

        pair = COMPOUND_TOKENS.get(char)
        if pair is not None:
            self._add_token(pair[0] if self._match("=") else pair[1])
            return

        if char == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline is left for the
                # main loop so the line counter advances there.
                end = self._source.find("\n", self._current)
                self._current = end if end != -1 else self._source_len
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._scan_string()
        elif char in DIGITS:
            self._scan_number()
        elif char in IDENTIFIER_START:
            self._scan_identifier()
        else:
            self._error(ScanErrorKind.UNEXPECTED_CHARACTER)

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _advance(self) -> str:
        """Consume and return the next character."""
        char = self._source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals expected."""
        if self._current >= self._source_len:
            return False
        if self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._current >= self._source_len:
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Peek one character past current (empty string past the end)."""
        if self._current + 1 >= self._source_len:
            return ""
        return self._source[self._current + 1]

    # =========================================================================
    # Emission
    # =========================================================================

    def _add_token(self, kind: TokenType, literal: str | float | None = None) -> None:
        """Queue a token for the lexeme between start and current."""
        text = self._source[self._start : self._current]
        self._pending.append(Token(kind, text, literal, self._line))

    def _error(self, kind: ScanErrorKind) -> None:
        """Hand a lexical error to the reporter; scanning continues."""
        self._reporter.report(self._line, kind.value)
