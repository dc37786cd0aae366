"""Human-readable and JSON-ready token dumps."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from picolex.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*: ``line:pos TYPE 'text' uid``."""
    width = max((len(_location(t)) for t in tokens), default=0)
    for tok in tokens:
        file.write(f"{_location(tok):<{width}} {tok.type.name:<11} {tok.text!r} {tok.uid}\n")


def token_records(tokens: list[Token]) -> list[dict[str, Any]]:
    """Convert tokens to plain dicts suitable for json.dumps()."""
    return [
        {
            "type": tok.type.name,
            "text": tok.text,
            "line": tok.line,
            "pos": tok.pos,
            "uid": tok.uid,
        }
        for tok in tokens
    ]


def _location(tok: Token) -> str:
    return f"{tok.line}:{tok.pos}"
