"""Property-based tests for lexer invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from picolex.lexer import tokenize
from picolex.tokens import TokenType
from picolex.validators import TokenizerOptions, Validators, charset

# Characters that exercise every rule of the default policy
_INTERESTING = 'ab1_.9 \t\n"\\+=()¿;@é'

_SEPARATOR_POLICY = TokenizerOptions(
    validators=Validators(is_number_separator=charset("._"), is_string=charset("\"'"))
)


class TestCoverage:
    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_texts_reconstruct_source(self, source: str) -> None:
        tokens = tokenize(source)
        assert "".join(t.text for t in tokens) == source

    @given(st.text(alphabet=_INTERESTING + "'", max_size=200))
    @settings(max_examples=200)
    def test_texts_reconstruct_source_custom_policy(self, source: str) -> None:
        tokens = tokenize(source, _SEPARATOR_POLICY)
        assert "".join(t.text for t in tokens) == source

    @given(st.text(alphabet=_INTERESTING, max_size=200))
    @settings(max_examples=100)
    def test_no_empty_or_unknown_tokens(self, source: str) -> None:
        for tok in tokenize(source):
            assert tok.text
            assert tok.type not in (TokenType.UNKNOWN, TokenType.EOF)

    @given(st.text(alphabet=_INTERESTING, max_size=200))
    @settings(max_examples=100)
    def test_eof_is_single_and_last(self, source: str) -> None:
        tokens = tokenize(source, TokenizerOptions(insert_eof=True))
        assert tokens[-1].type == TokenType.EOF
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1


class TestDeterminism:
    @given(st.text(alphabet=_INTERESTING, max_size=200))
    @settings(max_examples=100)
    def test_same_input_same_tokens(self, source: str) -> None:
        assert tokenize(source) == tokenize(source)

    @given(st.text(alphabet=_INTERESTING, max_size=200))
    @settings(max_examples=100)
    def test_equal_text_equal_uid(self, source: str) -> None:
        uids: dict[str, int] = {}
        for tok in tokenize(source):
            assert uids.setdefault(tok.text, tok.uid) == tok.uid


class TestPositions:
    @given(st.text(alphabet=_INTERESTING, max_size=200))
    @settings(max_examples=100)
    def test_positions_positive_and_ordered(self, source: str) -> None:
        tokens = tokenize(source)
        for tok in tokens:
            assert tok.line >= 1
            assert tok.pos >= 1
        starts = [(t.line, t.pos) for t in tokens]
        assert starts == sorted(starts)

    @given(st.text(alphabet=_INTERESTING, max_size=200))
    @settings(max_examples=100)
    def test_line_matches_newlines_before_token(self, source: str) -> None:
        offset = 0
        for tok in tokenize(source):
            # A token starting with a newline already belongs to the next line
            expected = 1 + source.count("\n", 0, offset + 1)
            assert tok.line == expected
            offset += len(tok.text)
