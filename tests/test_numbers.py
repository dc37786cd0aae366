"""Test numbers and number separators."""

from picolex.tokens import TokenType
from picolex.validators import charset

from .conftest import assert_texts, assert_types

ID = TokenType.IDENTIFIER
NUM = TokenType.NUMBER
OP = TokenType.OPERATOR
SEP = TokenType.SEPARATOR
SP = TokenType.SPACE

UNDERSCORE_AND_DOT = charset("_.")


class TestDecimals:
    def test_integers_and_decimal(self, lex):
        tokens = lex("123 456.789")
        assert_types(tokens, [NUM, SP, NUM])
        assert_texts(tokens, ["123", " ", "456.789"])

    def test_single_decimal(self, lex):
        tokens = lex("3.14")
        assert_types(tokens, [NUM])
        assert tokens[0].text == "3.14"

    def test_several_decimals(self, lex):
        tokens = lex("3.14 2.718 1.618")
        assert_types(tokens, [NUM, SP, NUM, SP, NUM])
        assert_texts(tokens, ["3.14", " ", "2.718", " ", "1.618"])

    def test_trailing_dot(self, lex):
        tokens = lex("1.")
        assert_types(tokens, [NUM])

    def test_dot_after_identifier_is_separator(self, lex):
        tokens = lex("x.5")
        assert_types(tokens, [ID, SEP, NUM])


class TestNumberSeparators:
    def test_underscore_split_by_default(self, lex):
        tokens = lex("1_000_000")
        assert_types(tokens, [NUM, ID])
        assert_texts(tokens, ["1", "_000_000"])

    def test_underscore_separator(self, lex):
        tokens = lex("1_000_000", is_number_separator=charset("_"))
        assert_types(tokens, [NUM])
        assert tokens[0].text == "1_000_000"

    def test_dot_no_longer_joins_when_not_a_number_separator(self, lex):
        tokens = lex("1.5", is_number_separator=charset("_"))
        assert_types(tokens, [NUM, SEP, NUM])

    def test_mixed_separators(self, lex):
        tokens = lex("1_000.50 2_500_000.75", is_number_separator=UNDERSCORE_AND_DOT)
        assert_types(tokens, [NUM, SP, NUM])
        assert_texts(tokens, ["1_000.50", " ", "2_500_000.75"])

    def test_doubled_separators_stay_in_number(self, lex):
        tokens = lex("1..2 1__2 .5 _1", is_number_separator=UNDERSCORE_AND_DOT)
        assert_types(tokens, [NUM, SP, NUM, SP, SEP, NUM, SP, ID])
        assert_texts(tokens, ["1..2", " ", "1__2", " ", ".", "5", " ", "_1"])

    def test_numbers_in_expression(self, lex):
        tokens = lex("3.14 * 2_000 + 1.5", is_number_separator=UNDERSCORE_AND_DOT)
        assert_types(tokens, [NUM, SP, OP, SP, NUM, SP, OP, SP, NUM])
        assert tokens[4].text == "2_000"
        assert tokens[8].text == "1.5"

    def test_numbers_on_separate_lines(self, lex):
        tokens = lex("1_234.56\n7_890.12", is_number_separator=UNDERSCORE_AND_DOT)
        assert_types(tokens, [NUM, SP, NUM])
        assert_texts(tokens, ["1_234.56", "\n", "7_890.12"])
        assert tokens[2].line == 2
