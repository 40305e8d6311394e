"""Plain text file helpers."""

from __future__ import annotations

import logging
import os
from datetime import datetime

from . import settings
from .errors import AlreadyExists, NotFound, ToolIOError, ToolTypeError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMATS = {
    "time": "%H:%M:%S",
    "date": "%Y-%m-%d",
    "both": "%Y-%m-%d %H:%M:%S",
}


def _check_path(path, func: str, position: int = 1) -> None:
    if not isinstance(path, (str, os.PathLike)):
        raise ToolTypeError(f"{func}(): string expected for #{position}, got {type(path).__name__}")


def file_exists(path) -> bool:
    """True if *path* is a file that can be opened for reading."""
    _check_path(path, "file_exists")
    try:
        with open(path, "rb"):
            return True
    except OSError as e:
        logger.debug(f"file_exists(): {path}: {e}")
        return False


def make_file(path) -> bool:
    """Create an empty file; raises AlreadyExists if *path* is taken."""
    _check_path(path, "make_file")
    try:
        with open(path, "x", encoding=settings.ENCODING):
            pass
    except FileExistsError as e:
        raise AlreadyExists(f"make_file(): file already exists: '{path}'") from e
    except OSError as e:
        logger.error(f"make_file(): could not create {path}: {e}")
        raise ToolIOError(f"make_file(): could not create file, reason: {e}") from e
    logger.debug(f"make_file(): created {path}")
    return True


def clear_file(path) -> bool:
    """Truncate an existing file to zero length."""
    _check_path(path, "clear_file")
    if not file_exists(path):
        raise NotFound(f"clear_file(): file not found: '{path}'")
    try:
        with open(path, "w", encoding=settings.ENCODING):
            pass
    except OSError as e:
        logger.error(f"clear_file(): could not clear {path}: {e}")
        raise ToolIOError(f"clear_file(): file could not be cleared because: {e}") from e
    logger.debug(f"clear_file(): cleared {path}")
    return True


def timestamp_prefix(timestamp: str | None, now: datetime | None = None) -> str:
    """``"[...] "`` for ``"time"``, ``"date"`` or ``"both"``, else ``""``."""
    fmt = TIMESTAMP_FORMATS.get(timestamp) if isinstance(timestamp, str) else None
    if fmt is None:
        return ""
    now = now or datetime.now()
    return f"[{now.strftime(fmt)}] "


def file_write(txt: str, path, timestamp: str | None = None) -> bool:
    """Append *txt* as a new line at the end of an existing file.

    *timestamp* may be ``"time"``, ``"date"`` or ``"both"`` to prefix the
    line with ``[HH:MM:SS]``, ``[YYYY-MM-DD]`` or both.
    """
    if not isinstance(txt, str):
        raise ToolTypeError(f"file_write(): string expected for #1, got {type(txt).__name__}")
    _check_path(path, "file_write", 2)
    if not file_exists(path):
        raise NotFound(f"file_write(): file not found: '{path}'")
    line = timestamp_prefix(timestamp) + txt + "\n"
    try:
        with open(path, "a", encoding=settings.ENCODING) as fh:
            fh.write(line)
    except OSError as e:
        logger.error(f"file_write(): could not write to {path}: {e}")
        raise ToolIOError(f"file_write(): could not write text to file because: {e}") from e
    return True
