"""Exception classes for loxlex.

Provides standardized exceptions for error handling throughout loxlex.
Lexical errors are reported, not raised: the scanner hands them to an
error reporter and keeps going. ScanError is the record reporters keep.
"""

from __future__ import annotations

from enum import Enum


class LoxLexError(Exception):
    """Base exception for all loxlex errors.

    Subclass this for specific error categories.
    """

    pass


class ScanErrorKind(Enum):
    """Lexical error categories, valued by their reported message."""

    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."

    @classmethod
    def from_message(cls, message: str) -> ScanErrorKind | None:
        """Look up the kind for a reported message (None if unknown)."""
        try:
            return cls(message)
        except ValueError:
            return None


class ScanError(LoxLexError):
    """A single lexical error reported during scanning.

    Scanning never aborts on these. Instances are collected by
    ErrorCollector and surfaced through ScanFailedError.
    """

    def __init__(
        self,
        message: str,
        line: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error.

        Args:
            message: Error description as reported by the scanner
            line: Line number where the error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.line = line
        self.source_file = source_file
        self.kind = ScanErrorKind.from_message(message)

        location = f"{source_file}:{line}" if source_file else f"{line}"
        super().__init__(f"{location} {message}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScanError):
            return NotImplemented
        return (self.message, self.line, self.source_file) == (
            other.message,
            other.line,
            other.source_file,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.line, self.source_file))


class ScanFailedError(LoxLexError):
    """Raised by scan() when errors were reported and raise_on_error is set.

    The token list is still produced; this only signals the caller's
    policy of refusing to continue with a source that had lexical errors.
    """

    def __init__(self, errors: tuple[ScanError, ...]) -> None:
        """Initialize with the errors reported during the scan.

        Args:
            errors: Every ScanError reported, in source order
        """
        self.errors = errors
        count = len(errors)
        noun = "error" if count == 1 else "errors"
        details = "; ".join(str(e) for e in errors)
        super().__init__(f"{count} lexical {noun}: {details}")
