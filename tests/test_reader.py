"""Tests for the Reader layer."""

import pytest

from tabletool.errors import ParseError
from tabletool.reader import TokenType, tokenize


def _values(text):
    return [t.value for t in tokenize(text)[:-1]]


def _single(text):
    tokens = tokenize(text)
    assert len(tokens) == 2
    return tokens[0]


# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------

def test_assignment_tokens():
    tokens = tokenize('t = { [ "a" ] = 1 }')
    assert [t.type for t in tokens] == [
        TokenType.NAME,
        TokenType.SIGIL,
        TokenType.SIGIL,
        TokenType.SIGIL,
        TokenType.STRING,
        TokenType.SIGIL,
        TokenType.SIGIL,
        TokenType.NUMBER,
        TokenType.SIGIL,
        TokenType.EOF,
    ]

def test_keywords():
    kinds = {t.value: t.type for t in tokenize("local return nil true false other")[:-1]}
    assert kinds["local"] == TokenType.KEYWORD
    assert kinds["false"] == TokenType.KEYWORD
    assert kinds["other"] == TokenType.NAME

def test_positions():
    tokens = tokenize("a\n  b")
    assert (tokens[0].line, tokens[0].column) == (1, 1)
    assert (tokens[1].line, tokens[1].column) == (2, 3)

def test_comments_skipped():
    assert _values("-- header\nx --[[ block\nstill ]] y") == ["x", "y"]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def test_integer():
    assert _single("42").value == 42

def test_float():
    assert _single("1.5").value == 1.5

def test_exponent():
    assert _single("1e+20").value == 1e20

def test_hex():
    assert _single("0x1F").value == 31

def test_minus_is_separate_token():
    assert _values("-3") == ["-", 3]

def test_malformed_number():
    with pytest.raises(ParseError):
        tokenize("12abc")


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def test_double_and_single_quotes():
    assert _single('"abc"').value == "abc"
    assert _single("'abc'").value == "abc"

def test_escaped_quote_and_backslash():
    assert _single(r'"a\"b\\c"').value == 'a"b\\c'

def test_backslash_newline():
    assert _single('"a\\\nb"').value == "a\nb"

def test_named_escapes():
    assert _single(r'"\n\t\r"').value == "\n\t\r"

def test_decimal_escape():
    assert _single(r'"\65\0001"').value == "A\x001"

def test_hex_and_unicode_escapes():
    assert _single(r'"\x41\u{48}"').value == "AH"

def test_z_escape_skips_whitespace():
    assert _single('"a\\z   \n  b"').value == "ab"

def test_long_bracket():
    assert _single("[[\nhello]]").value == "hello"
    assert _single("[==[a]]b]==]").value == "a]]b"

def test_unfinished_string():
    with pytest.raises(ParseError):
        tokenize('"abc')

def test_newline_in_string():
    with pytest.raises(ParseError):
        tokenize('"a\nb"')

def test_invalid_escape():
    with pytest.raises(ParseError):
        tokenize(r'"\q"')

def test_unexpected_character():
    with pytest.raises(ParseError) as exc:
        tokenize("x = @")
    assert exc.value.line == 1
    assert exc.value.column == 5

def test_unicode_escape_out_of_range():
    with pytest.raises(ParseError, match="UTF-8 value too large"):
        tokenize(r'"\u{FFFFFFFF}"')

def test_unicode_escape_upper_bound():
    assert _single(r'"\u{10FFFF}"').value == "\U0010ffff"
