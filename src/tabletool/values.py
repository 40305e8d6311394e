"""Value types for tabletool.

Python objects are converted into these variants once, by :func:`wrap`, so the
serializers can dispatch on the variant instead of inspecting runtime types.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union

from .errors import ToolTypeError


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, float):
            return repr(v)
        return str(v)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VList:
    """Sequence: serialized with keys 1..n."""

    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self.items) + "}"


@dataclass
class VTable:
    """Mapping with ``str`` or ``int`` keys."""

    entries: dict["Key", "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"VTable({len(self.entries)})"


@dataclass
class Unsupported:
    """A value with no text form (functions, arbitrary objects)."""

    type_name: str

    def __str__(self) -> str:
        return f"<{self.type_name}>"


class _Nil:
    """Singleton for nil / absent values."""

    _instance: "_Nil | None" = None

    def __new__(cls) -> "_Nil":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nil"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "nil"


Nil = _Nil()

Key = Union[str, int]
Scalar = Union[VText, VNumber, VBool]
Value = Union[VText, VNumber, VBool, VList, VTable, Unsupported, _Nil]


# ---------------------------------------------------------------------------
# Python <-> Value conversion
# ---------------------------------------------------------------------------

def normalize_key(key: object) -> Key:
    """Return *key* as a table key, folding integral floats to ``int``."""
    if isinstance(key, bool):
        raise ToolTypeError(f"table key must be a string or integer, got bool {key!r}")
    if isinstance(key, (str, int)):
        return key
    if isinstance(key, float) and math.isfinite(key) and key == int(key):
        return int(key)
    raise ToolTypeError(
        f"table key must be a string or integer, got {type(key).__name__} {key!r}"
    )


def wrap(obj: object) -> Value:
    """Convert a Python object to a Value.

    - ``None`` -> Nil
    - ``bool`` / ``int`` / ``float`` / ``str`` -> scalars
    - any ``Mapping`` -> VTable (keys normalised by :func:`normalize_key`)
    - ``list`` / ``tuple`` -> VList
    - anything else (functions included) -> Unsupported
    """
    if obj is None:
        return Nil
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, Mapping):
        return VTable({normalize_key(k): wrap(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return VList([wrap(v) for v in obj])
    return Unsupported(type(obj).__name__)


def unwrap(value: Value) -> object:
    """Convert a Value back to plain Python objects.

    Nil and Unsupported entries inside tables are dropped.
    """
    if isinstance(value, (VText, VNumber, VBool)):
        return value.value
    if isinstance(value, VList):
        return [unwrap(v) for v in value.items if is_data(v)]
    if isinstance(value, VTable):
        return {k: unwrap(v) for k, v in value.entries.items() if is_data(v)}
    return None


def is_data(value: Value) -> bool:
    """True for values that have a text form."""
    return not isinstance(value, (Unsupported, _Nil))


def table_items(value: VTable | VList) -> list[tuple[Key, Value]]:
    """Key/value pairs of a table; sequences use 1-based integer keys."""
    if isinstance(value, VList):
        return list(enumerate(value.items, 1))
    return list(value.entries.items())


def sort_keys(keys) -> list[Key]:
    """Canonical key order: integers ascending, then strings ascending."""
    return sorted(keys, key=lambda k: (isinstance(k, str), k))
