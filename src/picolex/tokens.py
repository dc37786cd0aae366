"""Token types and the token data structure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    UNKNOWN = auto()  # pending accumulator only, never emitted

    STRING = auto()  # delimited literal, delimiters included
    NUMBER = auto()  # digit run, may carry number separators and trailing letters
    IDENTIFIER = auto()  # letter run, may carry trailing digits
    OPERATOR = auto()  # run of operator characters
    SEPARATOR = auto()  # run of punctuation
    SPACE = auto()  # run of whitespace, newlines included
    INSTRUCTION = auto()  # identifier accepted by is_instruction

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified substring of the source.

    ``line`` and ``pos`` are the 1-based line and column of the first
    character. ``uid`` is the fingerprint of ``text``.
    """

    type: TokenType
    text: str
    line: int
    pos: int
    uid: int


EOF_TOKEN = Token(TokenType.EOF, "", 0, 0, 0)
