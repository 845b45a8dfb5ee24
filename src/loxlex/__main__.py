"""Command-line token dump: ``python -m loxlex [FILE]``.

Prints one token per line (or a JSON array with ``--json``). Lexical errors
go to stderr as ``[line N] Error: message``.

Exit status:
    0   no lexical errors
    65  one or more lexical errors were reported
    66  the input file could not be read
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from loxlex import __version__
from loxlex.lexer import Scanner
from loxlex.reporting import ErrorCollector, format_error
from loxlex.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_DATAERR = 65
EXIT_NOINPUT = 66


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="loxlex",
        description="Scan Lox source and print its tokens.",
    )
    ap.add_argument(
        "file",
        nargs="?",
        default="-",
        help="source file to scan ('-' or omitted reads stdin)",
    )
    ap.add_argument("--json", action="store_true", help="print tokens as a JSON array")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _read_source(path: str) -> str:
    # Undecodable bytes become U+FFFD and reach the scanner as unexpected
    # characters instead of aborting the read.
    if path == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin.read()
        return buffer.read().decode("utf-8", errors="replace")
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the token dump and return the process exit status."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = _read_source(args.file)
    except OSError as e:
        print(f"loxlex: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return EXIT_NOINPUT

    source_file = None if args.file == "-" else args.file
    collector = ErrorCollector(source_file)
    tokens = Scanner(source, reporter=collector).scan_tokens()

    if args.json:
        print(json.dumps([t.to_dict() for t in tokens], indent=2, allow_nan=False))
    else:
        for token in tokens:
            print(token)

    for error in collector.errors:
        print(format_error(error.line, error.message), file=sys.stderr)

    if collector.had_error:
        logger.debug("%d lexical errors in %s", len(collector.errors), args.file)
        return EXIT_DATAERR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
