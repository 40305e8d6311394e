"""Evaluator: interprets Lua table source text into a Document.

Only the subset written by :mod:`tabletool.writer` (plus what hand edits of
such files commonly add) is understood:

    chunk     := { stat [';'] } [ 'return' [exp] [';'] ] EOF
    stat      := 'local' Name [ '=' exp ] | Name '=' exp
    exp       := 'nil' | 'true' | 'false' | Number | String | Name
               | '-' exp | table
    table     := '{' [ field { (',' | ';') field } [ ',' | ';' ] ] '}'
    field     := '[' exp ']' '=' exp | Name '=' exp | exp

Nothing is executed; names only resolve to previously assigned values.
"""

from __future__ import annotations

import math

from .document import Document
from .environment import Environment
from .errors import ParseError
from .reader import Token, TokenType, tokenize
from .values import Key, Nil, Value, VBool, VList, VNumber, VTable, VText, _Nil

# Same nesting limit as Lua's parser
MAX_DEPTH = 200


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(text: str) -> Document:
    """Evaluate *text* and return a Document holding the returned value."""
    cursor = _Cursor(tokenize(text))
    doc = Document()

    while not cursor.at(TokenType.EOF):
        if cursor.at(TokenType.SIGIL, ";"):
            cursor.next()
            continue
        if cursor.at(TokenType.KEYWORD, "return"):
            _eval_return(cursor, doc)
            break
        _eval_stmt(cursor, doc.environment)

    return doc


# ---------------------------------------------------------------------------
# Token cursor
# ---------------------------------------------------------------------------

class _Cursor:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.index = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def at(self, kind: TokenType, value: object = None) -> bool:
        tok = self.current
        return tok.type == kind and (value is None or tok.value == value)

    def next(self) -> Token:
        tok = self.current
        if tok.type != TokenType.EOF:
            self.index += 1
        return tok

    def expect(self, kind: TokenType, value: object = None) -> Token:
        if not self.at(kind, value):
            wanted = repr(value) if value is not None else kind.name.lower()
            raise self.error(f"{wanted} expected")
        return self.next()

    def error(self, message: str) -> ParseError:
        tok = self.current
        near = "<eof>" if tok.type == TokenType.EOF else repr(tok.value)
        return ParseError(f"{message} near {near}", tok.line, tok.column)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def _eval_stmt(cursor: _Cursor, env: Environment) -> None:
    if cursor.at(TokenType.KEYWORD, "local"):
        cursor.next()
        name = cursor.expect(TokenType.NAME).value
        value: Value = Nil
        if cursor.at(TokenType.SIGIL, "="):
            cursor.next()
            value = _eval_exp(cursor, env)
        env.declare_local(name, value)
        return

    if cursor.at(TokenType.NAME):
        name = cursor.next().value
        cursor.expect(TokenType.SIGIL, "=")
        env.assign(name, _eval_exp(cursor, env))
        return

    raise cursor.error("unexpected symbol")


def _eval_return(cursor: _Cursor, doc: Document) -> None:
    cursor.expect(TokenType.KEYWORD, "return")
    doc.returned = True
    if not (cursor.at(TokenType.EOF) or cursor.at(TokenType.SIGIL, ";")):
        doc.result = _eval_exp(cursor, doc.environment)
    if cursor.at(TokenType.SIGIL, ";"):
        cursor.next()
    if not cursor.at(TokenType.EOF):
        raise cursor.error("'<eof>' expected")


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

def _eval_exp(cursor: _Cursor, env: Environment) -> Value:
    cursor.depth += 1
    if cursor.depth > MAX_DEPTH:
        raise cursor.error("too many syntax levels")
    try:
        return _eval_simple_exp(cursor, env)
    finally:
        cursor.depth -= 1


def _eval_simple_exp(cursor: _Cursor, env: Environment) -> Value:
    tok = cursor.current

    if tok.type == TokenType.KEYWORD:
        if tok.value == "nil":
            cursor.next()
            return Nil
        if tok.value in ("true", "false"):
            cursor.next()
            return VBool(tok.value == "true")
        raise cursor.error("unexpected symbol")

    if tok.type == TokenType.NUMBER:
        cursor.next()
        return VNumber(tok.value)

    if tok.type == TokenType.STRING:
        cursor.next()
        return VText(tok.value)

    if tok.type == TokenType.NAME:
        cursor.next()
        return env.lookup(tok.value)

    if tok.type == TokenType.SIGIL:
        if tok.value == "{":
            return _eval_table(cursor, env)
        if tok.value == "-":
            cursor.next()
            operand = _eval_exp(cursor, env)
            if not isinstance(operand, VNumber):
                raise ParseError("attempt to negate a non-number value", tok.line, tok.column)
            return VNumber(-operand.value)

    raise cursor.error("unexpected symbol")


def _eval_table(cursor: _Cursor, env: Environment) -> Value:
    """Evaluate a table constructor.

    Constructors with positional fields only become a VList; anything with
    a key becomes a VTable (positional fields keyed 1..n).
    """
    cursor.expect(TokenType.SIGIL, "{")
    entries: dict[Key, Value] = {}
    position = 0
    keyed = False

    while not cursor.at(TokenType.SIGIL, "}"):
        if cursor.at(TokenType.SIGIL, "["):
            open_tok = cursor.next()
            key = _to_key(_eval_exp(cursor, env), open_tok)
            cursor.expect(TokenType.SIGIL, "]")
            cursor.expect(TokenType.SIGIL, "=")
            _store(entries, key, _eval_exp(cursor, env))
            keyed = True
        elif cursor.at(TokenType.NAME) and _peek_is_assign(cursor):
            key = cursor.next().value
            cursor.expect(TokenType.SIGIL, "=")
            _store(entries, key, _eval_exp(cursor, env))
            keyed = True
        else:
            position += 1
            _store(entries, position, _eval_exp(cursor, env))

        if cursor.at(TokenType.SIGIL, ",") or cursor.at(TokenType.SIGIL, ";"):
            cursor.next()
        elif not cursor.at(TokenType.SIGIL, "}"):
            raise cursor.error("'}' expected")

    cursor.expect(TokenType.SIGIL, "}")

    if not keyed and position > 0 and list(entries) == list(range(1, position + 1)):
        return VList(list(entries.values()))
    return VTable(entries)


def _peek_is_assign(cursor: _Cursor) -> bool:
    nxt = cursor.tokens[cursor.index + 1]
    return nxt.type == TokenType.SIGIL and nxt.value == "="


def _store(entries: dict[Key, Value], key: Key, value: Value) -> None:
    if isinstance(value, _Nil):
        entries.pop(key, None)
    else:
        entries[key] = value


def _to_key(value: Value, tok: Token) -> Key:
    if isinstance(value, VText):
        return value.value
    if isinstance(value, VNumber):
        v = value.value
        if isinstance(v, int):
            return v
        if math.isfinite(v) and v == int(v):
            return int(v)
    raise ParseError(f"unsupported table key {value!r}", tok.line, tok.column)
