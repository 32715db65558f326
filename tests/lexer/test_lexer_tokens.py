"""Tests for lexer token classification.

Covers each classification rule: line terminators, whitespace runs and
single tabs, punctuators, numeric literals, names, and EOF.
"""

import pytest

from randrprops.errors import LexError
from randrprops.lexer import Lexer
from randrprops.tokens import TokenType


def lex(source: bytes) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source).tokenize()]


class TestWhitespace:
    """Spaces coalesce; tabs never do."""

    def test_space_run_is_one_token(self) -> None:
        assert lex(b"a   b") == [
            (TokenType.NAME, "a"),
            (TokenType.WHITESPACE, "   "),
            (TokenType.NAME, "b"),
            (TokenType.EOF, ""),
        ]

    def test_two_tabs_are_two_tokens(self) -> None:
        assert lex(b"\t\tx") == [
            (TokenType.WHITESPACE, "\t"),
            (TokenType.WHITESPACE, "\t"),
            (TokenType.NAME, "x"),
            (TokenType.EOF, ""),
        ]

    def test_tab_ends_space_run(self) -> None:
        assert lex(b"  \t") == [
            (TokenType.WHITESPACE, "  "),
            (TokenType.WHITESPACE, "\t"),
            (TokenType.EOF, ""),
        ]

    def test_newline_is_not_whitespace(self) -> None:
        assert lex(b" \n ") == [
            (TokenType.WHITESPACE, " "),
            (TokenType.LINE_TERMINATOR, "\n"),
            (TokenType.WHITESPACE, " "),
            (TokenType.EOF, ""),
        ]


class TestPunctuators:
    """Single-character punctuators."""

    @pytest.mark.parametrize("char", ["+", "-", ":", "(", ")", "*", ","])
    def test_each_punctuator(self, char: str) -> None:
        assert lex(char.encode()) == [(TokenType.PUNCTUATOR, char), (TokenType.EOF, "")]

    def test_position_clause(self) -> None:
        assert lex(b"1920x1080+0+0") == [
            (TokenType.NAME, "1920x1080"),
            (TokenType.PUNCTUATOR, "+"),
            (TokenType.INT_VALUE, "0"),
            (TokenType.PUNCTUATOR, "+"),
            (TokenType.INT_VALUE, "0"),
            (TokenType.EOF, ""),
        ]

    def test_rate_flags(self) -> None:
        assert lex(b"60.00*+") == [
            (TokenType.FLOAT_VALUE, "60.00"),
            (TokenType.PUNCTUATOR, "*"),
            (TokenType.PUNCTUATOR, "+"),
            (TokenType.EOF, ""),
        ]

    def test_leading_hyphen_is_punctuator(self) -> None:
        assert lex(b"+-10") == [
            (TokenType.PUNCTUATOR, "+"),
            (TokenType.PUNCTUATOR, "-"),
            (TokenType.INT_VALUE, "10"),
            (TokenType.EOF, ""),
        ]

    def test_colon_ends_name(self) -> None:
        assert lex(b"EDID:") == [
            (TokenType.NAME, "EDID"),
            (TokenType.PUNCTUATOR, ":"),
            (TokenType.EOF, ""),
        ]


class TestWords:
    """Numbers and names."""

    def test_int_value(self) -> None:
        assert lex(b"1080") == [(TokenType.INT_VALUE, "1080"), (TokenType.EOF, "")]

    def test_float_value(self) -> None:
        assert lex(b"1.000000") == [(TokenType.FLOAT_VALUE, "1.000000"), (TokenType.EOF, "")]

    @pytest.mark.parametrize(
        "word",
        ["1920x1080", "1920x1080i", "310mm", "0x4a", "1.", "1.2.3", "connected", "axis"],
    )
    def test_names_with_numeric_parts(self, word: str) -> None:
        assert lex(word.encode()) == [(TokenType.NAME, word), (TokenType.EOF, "")]

    @pytest.mark.parametrize("word", ["eDP-1", "DP-1-1", "non-desktop", "link-status"])
    def test_hyphen_inside_name(self, word: str) -> None:
        assert lex(word.encode()) == [(TokenType.NAME, word), (TokenType.EOF, "")]

    def test_non_ascii_digits_are_names(self) -> None:
        assert lex("１２".encode()) == [(TokenType.NAME, "１２"), (TokenType.EOF, "")]

    def test_comma_splits_int(self) -> None:
        assert lex(b"200,") == [
            (TokenType.INT_VALUE, "200"),
            (TokenType.PUNCTUATOR, ","),
            (TokenType.EOF, ""),
        ]


class TestEndOfInput:
    """EOF behavior."""

    def test_empty_source(self) -> None:
        assert lex(b"") == [(TokenType.EOF, "")]

    def test_eof_repeats(self) -> None:
        lexer = Lexer(b"x")
        assert lexer.scan().type is TokenType.NAME
        assert lexer.scan().type is TokenType.EOF
        assert lexer.scan().type is TokenType.EOF
        assert lexer.scan().type is TokenType.EOF


class TestMalformedInput:
    """Invalid UTF-8 raises LexError with the byte offset."""

    def test_invalid_start_byte(self) -> None:
        with pytest.raises(LexError) as exc_info:
            list(Lexer(b"ab \xffcd").tokenize())
        assert exc_info.value.offset == 3
        assert exc_info.value.lineno == 1
        assert exc_info.value.col_offset == 4

    def test_truncated_sequence(self) -> None:
        with pytest.raises(LexError) as exc_info:
            list(Lexer(b"x\nab\xc3").tokenize())
        assert exc_info.value.offset == 4
        assert exc_info.value.lineno == 2
        assert exc_info.value.col_offset == 3

    def test_tokens_before_bad_byte_are_issued(self) -> None:
        lexer = Lexer(b"ok \xff")
        assert lexer.scan().value == "ok"
        assert lexer.scan().type is TokenType.WHITESPACE
        with pytest.raises(LexError):
            lexer.scan()

    def test_multibyte_name_is_fine(self) -> None:
        assert lex("écran".encode()) == [(TokenType.NAME, "écran"), (TokenType.EOF, "")]
