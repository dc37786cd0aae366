"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from picolex.lexer import tokenize
from picolex.tokens import Token, TokenType
from picolex.validators import TokenizerOptions, Validators


@pytest.fixture
def lex():
    """Return a helper that tokenizes source, optionally overriding validators."""

    def _lex(source: str, **overrides) -> list[Token]:
        options = TokenizerOptions(validators=Validators(**overrides))
        return tokenize(source, options)

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
