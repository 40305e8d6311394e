"""Command line entry point (``tabletool`` / ``python -m tabletool.cli``)."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from . import settings
from .codec import load_table
from .errors import ToolError
from .formatting import format_bytes, format_seconds
from .password import generate_pass
from .values import Value, VBool, VList, VNumber, VTable, VText, sort_keys, wrap


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VText):
        return f'"{value.value}"'
    if isinstance(value, (VNumber, VBool)):
        return str(value)
    if isinstance(value, VList):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VTable):
        return "{" + ", ".join(
            f"{k}: {_fmt_inline(value.entries[k])}" for k in sort_keys(value.entries)
        ) + "}"
    return str(value)


def _fmt_inspect(value: Value, indent: str = "") -> str:
    """Pretty-print a loaded table, one entry per line."""
    if isinstance(value, VTable):
        if not value.entries:
            return "{}"
        width = max(len(str(k)) for k in value.entries)
        lines = ["{"]
        for k in sort_keys(value.entries):
            item = _fmt_inspect(value.entries[k], indent + "  ")
            lines.append(f"{indent}  {str(k):<{width}} : {item}")
        lines.append(indent + "}")
        return "\n".join(lines)

    if isinstance(value, VList):
        if not value.items:
            return "[]"
        lines = ["["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"{indent}  {i}: {_fmt_inspect(v, indent + '  ')}")
        lines.append(indent + "]")
        return "\n".join(lines)

    return _fmt_inline(value)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_show(args: argparse.Namespace, dest: IO[str]) -> None:
    print(_fmt_inspect(wrap(load_table(args.path))), file=dest)


def _cmd_bytes(args: argparse.Namespace, dest: IO[str]) -> None:
    print(format_bytes(args.value), file=dest)


def _cmd_seconds(args: argparse.Namespace, dest: IO[str]) -> None:
    d, h, m, s = format_seconds(args.value)
    print(f"{d}d {h}h {m}m {s}s", file=dest)


def _cmd_pass(args: argparse.Namespace, dest: IO[str]) -> None:
    print(generate_pass(args.length), file=dest)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabletool",
        description="Inspect saved table files and run the formatting helpers",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Load a table file and pretty-print it")
    show.add_argument("path")
    show.set_defaults(func=_cmd_show)

    size = sub.add_parser("bytes", help="Format a byte count")
    size.add_argument("value")
    size.set_defaults(func=_cmd_bytes)

    secs = sub.add_parser("seconds", help="Split seconds into days, hours, minutes, seconds")
    secs.add_argument("value")
    secs.set_defaults(func=_cmd_seconds)

    pwd = sub.add_parser("pass", help="Generate a random password")
    pwd.add_argument("length", nargs="?", default=20)
    pwd.set_defaults(func=_cmd_pass)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.func(args, sys.stdout)
    except ToolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
