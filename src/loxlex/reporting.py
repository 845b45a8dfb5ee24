"""Error reporters for the scanner.

The scanner never owns error output. It calls ``report(line, message)`` on
whatever reporter it was given and keeps scanning. Deciding whether a source
with errors may proceed to parsing is left to the caller, typically by
checking ``ErrorCollector.had_error``.

Example:
    >>> from loxlex import Scanner
    >>> from loxlex.reporting import ErrorCollector
    >>> collector = ErrorCollector()
    >>> tokens = Scanner('"open', reporter=collector).scan_tokens()
    >>> collector.had_error
    True
    >>> collector.errors[0].message
    'Unterminated string.'

"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loxlex.errors import ScanError
from loxlex.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ErrorReporter(Protocol):
    """Protocol for lexical error sinks.

    Implementations must not raise and must not try to influence the
    scan; reporting is a side effect only.

    """

    def report(self, line: int, message: str) -> None:
        """Record or display one lexical error.

        Args:
            line: Line number the error was found on (1-indexed)
            message: Error description
        """
        ...


def format_error(line: int, message: str) -> str:
    """Format an error the way the command line prints it."""
    return f"[line {line}] Error: {message}"


class LoggingReporter:
    """Reporter that writes each error to the ``loxlex`` logger at WARNING.

    Used when no reporter is injected. The library installs no handlers,
    so output depends on the application's logging configuration.
    """

    __slots__ = ("_source_file",)

    def __init__(self, source_file: str | None = None) -> None:
        self._source_file = source_file

    def report(self, line: int, message: str) -> None:
        if self._source_file:
            logger.warning("%s: %s", self._source_file, format_error(line, message))
        else:
            logger.warning("%s", format_error(line, message))


class ErrorCollector:
    """Reporter that records every error as a ScanError.

    Attributes:
        errors: Reported errors in the order they were found

    Thread Safety:
        Not synchronized. Use one collector per scan.

    """

    __slots__ = ("_source_file", "errors")

    def __init__(self, source_file: str | None = None) -> None:
        """Initialize an empty collector.

        Args:
            source_file: Optional file path attached to each ScanError
        """
        self._source_file = source_file
        self.errors: list[ScanError] = []

    def report(self, line: int, message: str) -> None:
        self.errors.append(ScanError(message, line, self._source_file))

    @property
    def had_error(self) -> bool:
        """True once any error has been reported."""
        return bool(self.errors)

    def clear(self) -> None:
        """Forget all recorded errors."""
        self.errors.clear()


class TeeReporter:
    """Reporter that forwards every error to each wrapped reporter in turn."""

    __slots__ = ("_reporters",)

    def __init__(self, *reporters: ErrorReporter) -> None:
        self._reporters = reporters

    def report(self, line: int, message: str) -> None:
        for reporter in self._reporters:
            reporter.report(line, message)
