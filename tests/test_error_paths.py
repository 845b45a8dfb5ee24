"""Error classes and reporters.

Tests exception formatting and hierarchy, and the stock reporters that
receive lexical errors from the scanner.
"""

import logging

import pytest

from loxlex.errors import LoxLexError, ScanError, ScanErrorKind, ScanFailedError
from loxlex.reporting import (
    ErrorCollector,
    ErrorReporter,
    LoggingReporter,
    TeeReporter,
    format_error,
)

# =========================================================================
# ScanError construction and formatting
# =========================================================================


class TestScanErrorFormatting:
    """Verify ScanError produces well-formatted messages."""

    def test_line_only(self) -> None:
        err = ScanError("Unexpected character.", line=3)
        assert str(err) == "3 Unexpected character."
        assert err.source_file is None

    def test_with_source_file(self) -> None:
        err = ScanError("Unterminated string.", line=7, source_file="main.lox")
        assert str(err) == "main.lox:7 Unterminated string."

    def test_kind_from_message(self) -> None:
        assert ScanError("Unexpected character.", 1).kind is ScanErrorKind.UNEXPECTED_CHARACTER
        assert ScanError("Unterminated string.", 1).kind is ScanErrorKind.UNTERMINATED_STRING

    def test_unknown_message_has_no_kind(self) -> None:
        assert ScanError("something else", 1).kind is None

    def test_equality(self) -> None:
        assert ScanError("x", 1) == ScanError("x", 1)
        assert ScanError("x", 1) != ScanError("x", 2)
        assert len({ScanError("x", 1), ScanError("x", 1)}) == 1

    def test_is_loxlex_error(self) -> None:
        assert isinstance(ScanError("x", 1), LoxLexError)


class TestScanFailedError:
    """Verify ScanFailedError aggregates errors."""

    def test_single_error(self) -> None:
        err = ScanFailedError((ScanError("Unexpected character.", 2),))
        assert "1 lexical error:" in str(err)
        assert "2 Unexpected character." in str(err)

    def test_multiple_errors(self) -> None:
        errors = (ScanError("a", 1), ScanError("b", 2))
        err = ScanFailedError(errors)
        assert err.errors == errors
        assert "2 lexical errors" in str(err)

    def test_is_loxlex_error(self) -> None:
        with pytest.raises(LoxLexError):
            raise ScanFailedError(())


class TestScanErrorKind:
    def test_messages(self) -> None:
        assert ScanErrorKind.UNEXPECTED_CHARACTER.value == "Unexpected character."
        assert ScanErrorKind.UNTERMINATED_STRING.value == "Unterminated string."

    def test_from_message_unknown(self) -> None:
        assert ScanErrorKind.from_message("nope") is None


# =========================================================================
# Reporters
# =========================================================================


class TestErrorCollector:
    def test_records_in_order(self) -> None:
        collector = ErrorCollector()
        collector.report(4, "Unexpected character.")
        collector.report(9, "Unterminated string.")

        assert [e.line for e in collector.errors] == [4, 9]
        assert collector.had_error

    def test_attaches_source_file(self) -> None:
        collector = ErrorCollector("a.lox")
        collector.report(1, "Unexpected character.")
        assert collector.errors[0].source_file == "a.lox"

    def test_clear(self) -> None:
        collector = ErrorCollector()
        collector.report(1, "x")
        collector.clear()
        assert not collector.had_error
        assert collector.errors == []


class TestLoggingReporter:
    def test_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="loxlex"):
            LoggingReporter().report(5, "Unexpected character.")

        assert caplog.records[0].levelno == logging.WARNING
        assert caplog.records[0].name == "loxlex.reporting"
        assert caplog.records[0].getMessage() == "[line 5] Error: Unexpected character."

    def test_includes_source_file(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="loxlex"):
            LoggingReporter("x.lox").report(1, "Unterminated string.")
        assert caplog.records[0].getMessage() == "x.lox: [line 1] Error: Unterminated string."


class TestTeeReporter:
    def test_forwards_to_all(self) -> None:
        first, second = ErrorCollector(), ErrorCollector()
        TeeReporter(first, second).report(2, "x")
        assert first.errors == second.errors == [ScanError("x", 2)]


class TestProtocol:
    @pytest.mark.parametrize(
        "reporter",
        [ErrorCollector(), LoggingReporter(), TeeReporter()],
    )
    def test_stock_reporters_satisfy_protocol(self, reporter: object) -> None:
        assert isinstance(reporter, ErrorReporter)

    def test_format_error(self) -> None:
        assert format_error(12, "Unexpected character.") == "[line 12] Error: Unexpected character."
