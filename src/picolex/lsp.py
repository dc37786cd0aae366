"""Minimal LSP server for picolex — semantic tokens only."""

from __future__ import annotations

import re
from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from picolex import __version__
from picolex.config import load_options
from picolex.lexer import tokenize
from picolex.tokens import Token, TokenType
from picolex.validators import TokenizerOptions

# Order defines the legend indices
_SEMANTIC_TYPES = {
    TokenType.STRING: "string",
    TokenType.NUMBER: "number",
    TokenType.IDENTIFIER: "variable",
    TokenType.OPERATOR: "operator",
    TokenType.INSTRUCTION: "keyword",
}
_TYPE_INDEX = {tt: i for i, tt in enumerate(_SEMANTIC_TYPES)}

# Line terminators as LSP counts them
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

LEGEND = SemanticTokensLegend(token_types=list(_SEMANTIC_TYPES.values()), token_modifiers=[])

server = LanguageServer("picolex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)
server_options = TokenizerOptions()


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def encode_semantic_tokens(tokens: list[Token]) -> list[int]:
    """Encode tokens as LSP relative semantic token data.

    Positions are recomputed from the token texts (0-based line, UTF-16
    character offset). Tokens spanning several lines are reported once per
    line, with CRLF, CR and LF each ending a line. SPACE, SEPARATOR and EOF
    tokens are skipped.
    """
    data: list[int] = []
    line = 0
    char = 0
    prev_line = 0
    prev_char = 0
    after_cr = False

    for tok in tokens:
        type_index = _TYPE_INDEX.get(tok.type)
        text = tok.text
        # A \r\n pair split across two tokens is one line break
        if after_cr and text.startswith("\n"):
            text = text[1:]
        after_cr = tok.text.endswith("\r")
        for i, segment in enumerate(_LINE_BREAK.split(text)):
            if i > 0:
                line += 1
                char = 0
            length = _utf16_len(segment)
            if type_index is not None and length:
                delta_line = line - prev_line
                delta_char = char - prev_char if delta_line == 0 else char
                data.extend((delta_line, delta_char, length, type_index, 0))
                prev_line, prev_char = line, char
            char += length

    return data


def _semantic_tokens(ls: LanguageServer, uri: str) -> SemanticTokens:
    """Tokenize the current document text and encode it."""
    doc = ls.workspace.get_text_document(uri)
    tokens = tokenize(doc.source, server_options)
    return SemanticTokens(data=encode_semantic_tokens(tokens))


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return _semantic_tokens(ls, params.text_document.uri)


def main() -> None:
    global server_options
    server_options = load_options(search_dir=Path.cwd())
    server.start_io()
