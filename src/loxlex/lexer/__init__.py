"""State-machine scanner for Lox source.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, KEYWORDS
├── core.py              # Scanner class (navigation + dispatch)
├── keywords.py          # Keyword table, operator tables, character sets
└── literals.py          # String, number and identifier modes

Usage:
    >>> from loxlex.lexer import Scanner
    >>> for token in Scanner("print 1 != 2;").tokenize():
    ...     print(repr(token))
Token(PRINT, 'print', line=1)
Token(NUMBER, '1', 1.0, line=1)
Token(BANG_EQUAL, '!=', line=1)
Token(NUMBER, '2', 2.0, line=1)
Token(SEMICOLON, ';', line=1)
Token(EOF, '', line=1)

"""

from loxlex.lexer.core import Scanner
from loxlex.lexer.keywords import KEYWORDS

__all__ = ["KEYWORDS", "Scanner"]
