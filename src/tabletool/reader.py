"""Reader layer: converts Lua table source text into a token list."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from .errors import ParseError


class TokenType(Enum):
    NAME = auto()
    KEYWORD = auto()
    NUMBER = auto()
    STRING = auto()
    SIGIL = auto()
    EOF = auto()


@dataclass
class Token:
    type: TokenType
    value: object
    line: int
    column: int


KEYWORDS = frozenset({"local", "return", "nil", "true", "false"})

SIGILS = frozenset("{}[]=,;-")

DIGITS = "0123456789"

MAX_CODE_POINT = 0x10FFFF

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_HEX_RE = re.compile(r"0[xX][0-9A-Fa-f]+")
_NUMBER_RE = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_LONG_OPEN_RE = re.compile(r"\[(=*)\[")
_DEC_ESCAPE_RE = re.compile(r"[0-9]{1,3}")
_HEX_ESCAPE_RE = re.compile(r"x([0-9A-Fa-f]{2})")
_UTF8_ESCAPE_RE = re.compile(r"u\{([0-9A-Fa-f]+)\}")

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "\n": "\n",
}


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.line_start = 0

    @property
    def column(self) -> int:
        return self.pos - self.line_start + 1

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.line, self.column)

    def advance(self, n: int) -> str:
        chunk = self.text[self.pos:self.pos + n]
        for offset, ch in enumerate(chunk):
            if ch == "\n":
                self.line += 1
                self.line_start = self.pos + offset + 1
        self.pos += n
        return chunk


def tokenize(text: str) -> list[Token]:
    """Split *text* into tokens; the list always ends with an EOF token."""
    sc = _Scanner(text)
    tokens: list[Token] = []

    while sc.pos < len(text):
        ch = text[sc.pos]

        if ch in " \t\r\n\v\f":
            sc.advance(1)
            continue

        # Comments: -- line, --[[ block ]]
        if text.startswith("--", sc.pos):
            sc.advance(2)
            m = _LONG_OPEN_RE.match(text, sc.pos)
            if m:
                _read_long_bracket(sc, m)
            else:
                end = text.find("\n", sc.pos)
                sc.advance((len(text) if end == -1 else end) - sc.pos)
            continue

        line, column = sc.line, sc.column

        m = _NAME_RE.match(text, sc.pos)
        if m:
            word = sc.advance(m.end() - sc.pos)
            kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.NAME
            tokens.append(Token(kind, word, line, column))
            continue

        if ch in DIGITS or (ch == "." and _NUMBER_RE.match(text, sc.pos)):
            tokens.append(Token(TokenType.NUMBER, _read_number(sc), line, column))
            continue

        if ch in "\"'":
            tokens.append(Token(TokenType.STRING, _read_string(sc, ch), line, column))
            continue

        if ch == "[":
            m = _LONG_OPEN_RE.match(text, sc.pos)
            if m:
                tokens.append(Token(TokenType.STRING, _read_long_bracket(sc, m), line, column))
                continue

        if ch in SIGILS:
            tokens.append(Token(TokenType.SIGIL, sc.advance(1), line, column))
            continue

        raise sc.error(f"unexpected character {ch!r}")

    tokens.append(Token(TokenType.EOF, None, sc.line, sc.column))
    return tokens


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

def _read_number(sc: _Scanner) -> int | float:
    m = _HEX_RE.match(sc.text, sc.pos)
    if m:
        return int(sc.advance(m.end() - sc.pos), 16)
    m = _NUMBER_RE.match(sc.text, sc.pos)
    literal = sc.advance(m.end() - sc.pos)
    if _NAME_RE.match(sc.text, sc.pos):
        raise sc.error(f"malformed number near {literal!r}")
    if any(c in literal for c in ".eE"):
        return float(literal)
    return int(literal)


def _read_string(sc: _Scanner, delim: str) -> str:
    """Read a quoted string starting at the opening delimiter."""
    text = sc.text
    sc.advance(1)
    out: list[str] = []
    while True:
        if sc.pos >= len(text):
            raise sc.error("unfinished string")
        ch = text[sc.pos]
        if ch == delim:
            sc.advance(1)
            return "".join(out)
        if ch == "\n":
            raise sc.error("unfinished string")
        if ch != "\\":
            out.append(sc.advance(1))
            continue

        sc.advance(1)
        if sc.pos >= len(text):
            raise sc.error("unfinished string")
        esc = text[sc.pos]
        if esc in _SIMPLE_ESCAPES:
            sc.advance(1)
            out.append(_SIMPLE_ESCAPES[esc])
        elif esc == "\r":
            sc.advance(2 if text.startswith("\r\n", sc.pos) else 1)
            out.append("\n")
        elif esc in DIGITS:
            m = _DEC_ESCAPE_RE.match(text, sc.pos)
            code = int(sc.advance(m.end() - sc.pos))
            if code > 255:
                raise sc.error("decimal escape too large")
            out.append(chr(code))
        elif esc == "x":
            m = _HEX_ESCAPE_RE.match(text, sc.pos)
            if not m:
                raise sc.error("hexadecimal digit expected")
            sc.advance(3)
            out.append(chr(int(m.group(1), 16)))
        elif esc == "z":
            sc.advance(1)
            while sc.pos < len(text) and text[sc.pos] in " \t\r\n\v\f":
                sc.advance(1)
        elif esc == "u":
            m = _UTF8_ESCAPE_RE.match(text, sc.pos)
            if not m:
                raise sc.error("malformed unicode escape")
            code = int(m.group(1), 16)
            if code > MAX_CODE_POINT:
                raise sc.error("UTF-8 value too large")
            sc.advance(m.end() - sc.pos)
            out.append(chr(code))
        else:
            raise sc.error(f"invalid escape sequence '\\{esc}'")


def _read_long_bracket(sc: _Scanner, opening: re.Match) -> str:
    """Read ``[==[ ... ]==]``; a newline right after the opener is skipped."""
    close = "]" + opening.group(1) + "]"
    sc.advance(opening.end() - sc.pos)
    end = sc.text.find(close, sc.pos)
    if end == -1:
        raise sc.error("unfinished long string")
    body = sc.advance(end - sc.pos)
    sc.advance(len(close))
    if body.startswith("\r\n"):
        return body[2:]
    if body.startswith("\n"):
        return body[1:]
    return body
