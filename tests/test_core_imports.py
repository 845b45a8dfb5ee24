"""Verify core module imports work correctly."""

from __future__ import annotations


def test_import_tokens() -> None:
    """Test Token and TokenType imports."""
    from loxlex.tokens import Token, TokenType

    tok = Token(TokenType.NUMBER, "1.5", 1.5, 3)
    assert tok.kind == TokenType.NUMBER
    assert tok.lexeme == "1.5"
    assert tok.literal == 1.5
    assert tok.line == 3


def test_token_is_frozen() -> None:
    import dataclasses

    import pytest

    from loxlex.tokens import Token, TokenType

    tok = Token(TokenType.DOT, ".", None, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.line = 2  # type: ignore[misc]


def test_token_rendering() -> None:
    from loxlex.tokens import Token, TokenType

    assert str(Token(TokenType.STRING, '"hi"', "hi", 1)) == 'STRING "hi" hi'
    assert str(Token(TokenType.SEMICOLON, ";", None, 1)) == "SEMICOLON ; null"
    assert repr(Token(TokenType.IDENTIFIER, "x", None, 2)) == "Token(IDENTIFIER, 'x', line=2)"
    assert repr(Token(TokenType.NUMBER, "2", 2.0, 1)) == "Token(NUMBER, '2', 2.0, line=1)"


def test_token_repr_truncates_long_lexemes() -> None:
    from loxlex.tokens import Token, TokenType

    tok = Token(TokenType.IDENTIFIER, "x" * 40, None, 1)
    assert "x" * 17 + "..." in repr(tok)


def test_token_to_dict() -> None:
    from loxlex.tokens import Token, TokenType

    assert Token(TokenType.NUMBER, "3", 3.0, 4).to_dict() == {
        "kind": "NUMBER",
        "lexeme": "3",
        "literal": 3.0,
        "line": 4,
    }


def test_token_type_is_exhaustive() -> None:
    from loxlex.tokens import TokenType

    assert len(TokenType) == 39
    assert TokenType.EOF in TokenType


def test_import_lexer() -> None:
    from loxlex.lexer import KEYWORDS, Scanner

    assert Scanner("").scan_tokens()[0].lexeme == ""
    assert set(KEYWORDS) == {
        "and", "class", "else", "false", "for", "fun", "if", "nil",
        "or", "print", "return", "super", "this", "true", "var", "while",
    }


def test_get_logger_prefix() -> None:
    from loxlex.utils import get_logger

    assert get_logger("mymodule").name == "loxlex.mymodule"
    assert get_logger("loxlex.lexer").name == "loxlex.lexer"
    assert get_logger("loxlex").name == "loxlex"


def test_token_to_dict_non_finite_literal() -> None:
    from loxlex.tokens import Token, TokenType

    tok = Token(TokenType.NUMBER, "9" * 400, float("9" * 400), 1)
    assert tok.to_dict()["literal"] == "inf"
