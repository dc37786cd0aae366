"""picolex — configurable single-pass text tokenizer."""

from __future__ import annotations

from picolex.config import load_options
from picolex.lexer import Lexer, tokenize
from picolex.tokens import EOF_TOKEN, Token, TokenType
from picolex.uid import get_token_id
from picolex.validators import TokenizerOptions, Validators, charset, keywords

__version__ = "0.1.0"

__all__ = [
    "EOF_TOKEN",
    "Lexer",
    "Token",
    "TokenType",
    "TokenizerOptions",
    "Validators",
    "charset",
    "get_token_id",
    "keywords",
    "load_options",
    "tokenize",
]
