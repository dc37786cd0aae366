"""picolex lexer — classifies source text into a flat token stream."""

from __future__ import annotations

from picolex.tokens import EOF_TOKEN, Token, TokenType
from picolex.validators import TokenizerOptions


class Lexer:
    """Tokenize source text into a list of Token objects.

    The lexer never fails: every input, including unterminated strings,
    yields tokens whose texts concatenate back to the source.
    """

    def __init__(self, source: str, options: TokenizerOptions | None = None) -> None:
        self._source = source
        self._options = options if options is not None else TokenizerOptions()
        self._validators = self._options.validators
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

        # Pending token
        self._type = TokenType.UNKNOWN
        self._chars: list[str] = []
        self._start_line = 1
        self._start_col = 1

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        for ch in self._source:
            if ch == "\n":
                self._line += 1
                self._col = 1
            self._feed(ch)
            self._col += 1

        if self._type is not TokenType.UNKNOWN:
            self._flush()

        if self._options.insert_eof:
            self._tokens.append(EOF_TOKEN)
        return self._tokens

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _feed(self, ch: str) -> None:
        """Classify one character against the rules in priority order."""
        v = self._validators
        line, col = self._line, self._col
        pending = self._type

        if v.is_string(ch, line, col):
            self._lex_string_delimiter(ch)
            return

        if pending is TokenType.STRING:
            self._chars.append(ch)
            return

        if v.is_space(ch, line, col):
            self._accumulate(TokenType.SPACE, ch)
            return

        if v.is_separator(ch, line, col):
            # A number separator that is also punctuation stays in the number
            if pending is TokenType.NUMBER and v.is_number_separator(ch, line, col):
                self._accumulate(TokenType.NUMBER, ch)
            else:
                self._accumulate(TokenType.SEPARATOR, ch)
            return

        if v.is_number(ch, line, col):
            if pending is TokenType.IDENTIFIER:
                self._accumulate(TokenType.IDENTIFIER, ch)
            else:
                self._accumulate(TokenType.NUMBER, ch)
            return

        if v.is_character(ch, line, col):
            if pending is TokenType.NUMBER:
                self._accumulate(TokenType.NUMBER, ch)
            else:
                self._accumulate(TokenType.IDENTIFIER, ch)
            return

        if v.is_operator(ch, line, col):
            self._accumulate(TokenType.OPERATOR, ch)
            return

        if pending is TokenType.NUMBER and v.is_number_separator(ch, line, col):
            self._accumulate(TokenType.NUMBER, ch)
            return

        self._accumulate(TokenType.IDENTIFIER, ch)

    def _lex_string_delimiter(self, ch: str) -> None:
        if self._ends_with_escape():
            self._chars.append(ch)
            return

        self._accumulate(TokenType.STRING, ch)

        # Only the opening delimiter character closes the string
        if len(self._chars) > 1 and self._chars[0] == ch:
            self._flush()

    def _ends_with_escape(self) -> bool:
        """Return True if the pending text ends with an unpaired backslash."""
        count = 0
        for c in reversed(self._chars):
            if c != "\\":
                break
            count += 1
        return count % 2 == 1

    # ------------------------------------------------------------------
    # Accumulator
    # ------------------------------------------------------------------

    def _accumulate(self, tt: TokenType, ch: str) -> None:
        if self._type is not TokenType.UNKNOWN and self._type is not tt:
            self._flush()
        if self._type is TokenType.UNKNOWN:
            self._start_line = self._line
            self._start_col = self._col
        self._type = tt
        self._chars.append(ch)

    def _flush(self) -> None:
        text = "".join(self._chars)
        tt = self._type
        if tt is TokenType.IDENTIFIER and self._validators.is_instruction(
            text, self._line, self._col
        ):
            tt = TokenType.INSTRUCTION

        uid = self._options.hasher(text)
        self._tokens.append(Token(tt, text, self._start_line, self._start_col, uid))

        self._type = TokenType.UNKNOWN
        self._chars = []


def tokenize(source: str, options: TokenizerOptions | None = None) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, options).tokenize()
