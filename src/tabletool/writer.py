"""Writer layer: renders Values as Lua table source text.

Two output styles are produced and they intentionally differ:

- :func:`serialize_table` writes one entry per line with ``[ key ] = value``
  and keys in canonical order (integers, then strings).
- :func:`serialize_array` writes each array element on one line, keys
  ordered by their string form, integer keys positional.
"""

from __future__ import annotations

import math
import re

from .errors import InvalidArgument, ToolTypeError
from .values import (
    Key,
    Value,
    VBool,
    VList,
    VNumber,
    VTable,
    VText,
    is_data,
    sort_keys,
    table_items,
    wrap,
)

INDENT = "    "

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

LUA_KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for", "function",
    "goto", "if", "in", "local", "nil", "not", "or", "repeat", "return", "then",
    "true", "until", "while",
})


def is_identifier(name: str) -> bool:
    return bool(_NAME_RE.match(name)) and name not in LUA_KEYWORDS


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def quote(s: str) -> str:
    """Quote *s* the way Lua's ``string.format("%q", s)`` does."""
    out = ['"']
    for i, ch in enumerate(s):
        if ch == '"':
            out.append('\\"')
        elif ch == "\\":
            out.append("\\\\")
        elif ch == "\n":
            out.append("\\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ord(ch) < 32 or ord(ch) == 127:
            # \ddd must not swallow a following digit
            nxt = s[i + 1] if i + 1 < len(s) else ""
            if nxt != "" and nxt in "0123456789":
                out.append(f"\\{ord(ch):03d}")
            else:
                out.append(f"\\{ord(ch)}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def format_scalar(value: Value) -> str:
    """Source text of a scalar value."""
    if isinstance(value, VText):
        return quote(value.value)
    if isinstance(value, VNumber):
        if isinstance(value.value, float) and not math.isfinite(value.value):
            raise InvalidArgument(f"cannot serialize non-finite number {value.value!r}")
        return str(value)
    if isinstance(value, VBool):
        return str(value)
    raise ToolTypeError(f"cannot serialize {value!r}")


def _format_key(key: Key) -> str:
    if isinstance(key, str):
        return f"[ {quote(key)} ]"
    return f"[ {key:d} ]"


def _as_table(tbl: object, func: str) -> VTable | VList:
    value = tbl if isinstance(tbl, (VTable, VList)) else wrap(tbl)
    if not isinstance(value, (VTable, VList)):
        raise ToolTypeError(f"{func}(): table expected, got {type(tbl).__name__}")
    return value


# ---------------------------------------------------------------------------
# Named table form
# ---------------------------------------------------------------------------

def serialize_table(tbl: object, name: str, raw: bool = False) -> str:
    """Render *tbl* as ``name = { ... }``.

    With ``raw=True`` the opening line is ``name {`` instead.
    The ``local name`` header and ``return name`` trailer are added by
    :func:`tabletool.codec.save_table`.
    """
    if not isinstance(name, str):
        raise ToolTypeError(f"serialize_table(): string expected for name, got {type(name).__name__}")
    if not is_identifier(name):
        raise InvalidArgument(f"serialize_table(): {name!r} is not a valid table name")
    value = _as_table(tbl, "serialize_table")
    lines: list[str] = []
    _write_table(value, name, "", raw, lines)
    return "".join(lines)


def _write_table(value: VTable | VList, name: str, tab: str, raw: bool, out: list[str]) -> None:
    if raw:
        out.append(f"{tab}{name} {{\n\n")
    else:
        out.append(f"{tab}{name} = {{\n\n")

    entries = dict(table_items(value))
    for key in sort_keys(entries):
        item = entries[key]
        if not is_data(item):
            continue
        skey = _format_key(key)
        if isinstance(item, (VTable, VList)):
            _write_table(item, skey, tab + INDENT, False, out)
            out.append(",\n")
        else:
            out.append(f"{tab}{INDENT}{skey} = {format_scalar(item)},\n")

    out.append("\n")
    out.append(f"{tab}}}")


# ---------------------------------------------------------------------------
# Array form
# ---------------------------------------------------------------------------

def serialize_array(items: object) -> str:
    """Render a list of tables and scalars as ``return { ... }``.

    Table elements go on one line each; scalar elements are written as
    quoted strings of their text form.
    """
    if items is None:
        items = []
    value = items if isinstance(items, VList) else wrap(items)
    if not isinstance(value, VList):
        raise ToolTypeError(f"serialize_array(): list expected, got {type(items).__name__}")

    out = ["return {\n\n"]
    for element in value.items:
        if isinstance(element, (VTable, VList)):
            out.append(f"{INDENT}{{ ")
            _write_inline(element, out)
            out.append("},\n")
        elif is_data(element):
            out.append(f"{INDENT}{quote(str(element))},\n")
    out.append("\n}")
    return "".join(out)


def _write_inline(value: VTable | VList, out: list[str]) -> None:
    entries = dict(table_items(value))
    # keys are ordered by their string form, so 10 comes before 2
    for key in sorted(entries, key=str):
        item = entries[key]
        if not is_data(item):
            continue
        prefix = "" if isinstance(key, int) else _inline_key(key)
        if isinstance(item, (VTable, VList)):
            out.append(prefix or " ")
            out.append("{ ")
            _write_inline(item, out)
            out.append("}, ")
        else:
            out.append(f"{prefix}{format_scalar(item)}, ")


def _inline_key(key: str) -> str:
    if is_identifier(key):
        return f"{key} = "
    return f"[ {quote(key)} ] = "
