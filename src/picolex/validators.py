"""Character classification policy for the lexer.

Every rule the lexer uses to type a character is a predicate on
:class:`Validators`. Callers override any subset of them; the rest keep
the defaults below.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from picolex.uid import get_token_id

CharacterValidator = Callable[[str, int, int], bool]
TokenValidator = Callable[[str, int, int], bool]

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_SPACES = frozenset(" \t\r\n")
_OPERATORS = frozenset("+-*/^%&=<>")
_SEPARATORS = frozenset("[](){}.#?¿:;, ")


def is_alpha(ch: str, line: int, col: int) -> bool:
    return ch in _LETTERS


def is_numeric(ch: str, line: int, col: int) -> bool:
    return ch in _DIGITS


def is_whitespace(ch: str, line: int, col: int) -> bool:
    return ch in _SPACES


def is_operator_char(ch: str, line: int, col: int) -> bool:
    return ch in _OPERATORS


def is_separator_char(ch: str, line: int, col: int) -> bool:
    return ch in _SEPARATORS


def is_decimal_point(ch: str, line: int, col: int) -> bool:
    return ch == "."


def is_double_quote(ch: str, line: int, col: int) -> bool:
    return ch == '"'


def never_instruction(text: str, line: int, col: int) -> bool:
    return False


def charset(chars: Iterable[str]) -> CharacterValidator:
    """Return a character predicate that accepts exactly the given characters."""
    members = frozenset(chars)

    def _check(ch: str, line: int, col: int) -> bool:
        return ch in members

    return _check


def keywords(words: Iterable[str], case_sensitive: bool = True) -> TokenValidator:
    """Return an instruction predicate that accepts the given keywords."""
    if case_sensitive:
        members = frozenset(words)

        def _check(text: str, line: int, col: int) -> bool:
            return text in members

    else:
        members = frozenset(w.casefold() for w in words)

        def _check(text: str, line: int, col: int) -> bool:
            return text.casefold() in members

    return _check


@dataclass(frozen=True, slots=True)
class Validators:
    """The eight classification predicates, each independently overridable.

    Character predicates receive ``(char, line, col)``. ``is_instruction``
    receives ``(token_text, line, col)`` when an identifier is emitted.
    """

    is_character: CharacterValidator = is_alpha
    is_number: CharacterValidator = is_numeric
    is_space: CharacterValidator = is_whitespace
    is_operator: CharacterValidator = is_operator_char
    is_number_separator: CharacterValidator = is_decimal_point
    is_separator: CharacterValidator = is_separator_char
    is_string: CharacterValidator = is_double_quote
    is_instruction: TokenValidator = never_instruction


@dataclass(frozen=True, slots=True)
class TokenizerOptions:
    """Per-call lexer configuration."""

    validators: Validators = field(default_factory=Validators)
    insert_eof: bool = False
    hasher: Callable[[str], int] = get_token_id
