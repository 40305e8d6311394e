"""Mapping helpers."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping

from .errors import NotFound, ToolTypeError


def _check_index(index, func: str, position: int) -> None:
    if isinstance(index, bool) or not isinstance(index, (str, int, float)):
        raise ToolTypeError(
            f"{func}(): string or number expected for #{position}, got {type(index).__name__}"
        )


def table_is_empty(tbl: Mapping) -> bool:
    if not isinstance(tbl, Mapping):
        raise ToolTypeError(f"table_is_empty(): table expected, got {type(tbl).__name__}")
    return len(tbl) == 0


def table_index_exists(tbl: Mapping, index) -> bool:
    """True when *index* is a key of *tbl*, whatever its value (``None`` included)."""
    if not isinstance(tbl, Mapping):
        raise ToolTypeError(f"table_index_exists(): table expected for #1, got {type(tbl).__name__}")
    try:
        return index in tbl
    except TypeError as e:
        raise ToolTypeError(f"table_index_exists(): unusable index for #2: {e}") from e


def table_index_change(tbl: MutableMapping, old_index, new_index) -> bool:
    """Move the value at *old_index* to *new_index*.

    Raises NotFound when *old_index* is absent.
    """
    if not isinstance(tbl, MutableMapping):
        raise ToolTypeError(f"table_index_change(): table expected for #1, got {type(tbl).__name__}")
    _check_index(old_index, "table_index_change", 2)
    _check_index(new_index, "table_index_change", 3)
    if not table_index_exists(tbl, old_index):
        raise NotFound(f"table_index_change(): table index {old_index!r} not found")
    tbl[new_index] = tbl.pop(old_index)
    return True
