"""
loxlex: lexical scanner for the Lox scripting language

Turns Lox source text into a list of classified tokens for a parser.
Lexical errors never abort a scan: they are handed to an injectable
error reporter and scanning continues.

Quick Start:
    >>> from loxlex import scan
    >>> [t.kind.name for t in scan("var x = 1;")]
    ['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'SEMICOLON', 'EOF']

    >>> # Collect errors instead of logging them
    >>> from loxlex import ErrorCollector
    >>> errors = ErrorCollector()
    >>> tokens = scan("var s = @;", reporter=errors)
    >>> errors.errors[0].message
    'Unexpected character.'

"""

from loxlex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from loxlex.errors import (
    LoxLexError,
    ScanError,
    ScanErrorKind,
    ScanFailedError,
)
from loxlex.lexer import KEYWORDS, Scanner
from loxlex.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from loxlex.reporting import (
    ErrorCollector,
    ErrorReporter,
    LoggingReporter,
    TeeReporter,
)
from loxlex.tokens import Token, TokenType

__version__ = "0.1.0"


def scan(
    source: str,
    *,
    reporter: ErrorReporter | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Scan Lox source into a token list.

    Args:
        source: Lox source text
        reporter: Error sink (falls back to the configured reporter, then
            to a LoggingReporter)
        source_file: Optional source file path for error messages

    Returns:
        Tokens in source order, always ending with EOF

    Raises:
        ScanFailedError: If the active ScanConfig has raise_on_error set and
            any lexical error was reported. Scanning still runs to the end
            first, so every error is included.

    Example:
        >>> tokens = scan("print 1.5;")
        >>> tokens[1].literal
        1.5
    """
    config = get_scan_config()
    if reporter is None:
        reporter = config.reporter
    if reporter is None:
        reporter = LoggingReporter(source_file)

    collector = ErrorCollector(source_file)
    tokens = Scanner(source, reporter=TeeReporter(reporter, collector)).scan_tokens()

    accumulator = get_scan_accumulator()
    if accumulator is not None:
        accumulator.record_scan(len(source), len(tokens), len(collector.errors))

    if config.raise_on_error and collector.had_error:
        raise ScanFailedError(tuple(collector.errors))

    return tokens


__all__ = [
    # Main API
    "scan",
    "Scanner",
    "KEYWORDS",
    # Tokens
    "Token",
    "TokenType",
    # Reporting
    "ErrorReporter",
    "ErrorCollector",
    "LoggingReporter",
    "TeeReporter",
    # Errors
    "LoxLexError",
    "ScanError",
    "ScanErrorKind",
    "ScanFailedError",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Version
    "__version__",
]
