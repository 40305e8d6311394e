"""Saving tables and arrays to files and loading them back."""

from __future__ import annotations

import logging
import os

from . import settings
from .errors import InvalidArgument, ParseError, ToolIOError, ToolTypeError
from .evaluator import evaluate
from .values import VList, VTable, unwrap
from .writer import serialize_array, serialize_table

logger = logging.getLogger(__name__)


def _check_path(path, func: str) -> None:
    if not isinstance(path, (str, os.PathLike)):
        raise ToolTypeError(f"{func}(): path expected, got {type(path).__name__}")


def _write_text(text: str, path, func: str) -> None:
    # encode before opening so an unencodable string leaves the file intact
    try:
        data = text.encode(settings.ENCODING)
    except UnicodeEncodeError as e:
        raise InvalidArgument(f"{func}(): text cannot be encoded as {settings.ENCODING}: {e}") from e
    try:
        with open(path, "wb") as fh:
            fh.write(data)
    except OSError as e:
        logger.error(f"{func}(): could not write {path}: {e}")
        raise ToolIOError(f"{func}(): could not write '{path}': {e}") from e
    logger.debug(f"{func}(): wrote {len(text)} characters to {path}")


def save_table(tbl, name: str, path) -> bool:
    """Save *tbl* to *path* as ``local name / name = {...} / return name``."""
    _check_path(path, "save_table")
    body = serialize_table(tbl, name)
    _write_text(f"local {name}\n\n{body}\n\nreturn {name}", path, "save_table")
    return True


def save_array(array, path) -> bool:
    """Save a list of tables and scalars to *path* as ``return {...}``."""
    _check_path(path, "save_array")
    _write_text(serialize_array(array), path, "save_array")
    return True


def persist(obj, path, mode: str = "table", name: str | None = None) -> bool:
    """Save *obj* in the given *mode*: ``"table"`` (needs *name*) or ``"array"``."""
    if mode == "table":
        if name is None:
            raise InvalidArgument("persist(): table mode requires a name")
        return save_table(obj, name, path)
    if mode == "array":
        return save_array(obj, path)
    raise InvalidArgument(f"persist(): unknown mode {mode!r}, expected 'table' or 'array'")


def loads(text: str):
    """Evaluate table source text and return the resulting dict or list."""
    if not isinstance(text, str):
        raise ToolTypeError(f"loads(): string expected, got {type(text).__name__}")
    doc = evaluate(text)
    if not doc.returned:
        raise ParseError("invalid table: no return statement")
    if not isinstance(doc.result, (VTable, VList)):
        raise ParseError(f"invalid table: chunk returned {doc.result}")
    return unwrap(doc.result)


def load_table(path):
    """Load a table saved by :func:`save_table` or :func:`save_array`."""
    _check_path(path, "load_table")
    try:
        with open(path, encoding=settings.ENCODING) as fh:
            content = fh.read()
    except OSError as e:
        logger.error(f"load_table(): could not open {path}: {e}")
        raise ToolIOError(f"load_table(): could not open '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"load_table(): '{path}' is not valid {settings.ENCODING} text: {e}") from e
    logger.debug(f"load_table(): read {len(content)} characters from {path}")
    return loads(content)
