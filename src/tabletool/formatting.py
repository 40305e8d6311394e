"""Number and string formatting helpers."""

from __future__ import annotations

import math

from .errors import InvalidArgument, ToolTypeError

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "YB")

WHITESPACE = " \t\n\v\f\r"


def to_number(value) -> int | float | None:
    """Numbers pass through, numeric strings are parsed, anything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip(WHITESPACE)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return None
    return None


def format_seconds(t) -> tuple:
    """Split *t* seconds into ``(days, hours, minutes, seconds)``.

    >>> format_seconds(90061)
    (1, 1, 1, 1)
    """
    n = to_number(t)
    if n is None:
        raise ToolTypeError(f"format_seconds(): number expected, got {type(t).__name__}")
    if isinstance(n, int):
        return n // 86400, n // 3600 % 24, n // 60 % 60, n % 60
    if not math.isfinite(n):
        raise InvalidArgument(f"format_seconds(): finite number expected, got {n!r}")
    return (
        math.floor(n / 86400),
        math.floor(n / 3600) % 24,
        math.floor(n / 60) % 60,
        n % 60,
    )


def format_bytes(size) -> str:
    """Render a byte count in the largest fitting unit, e.g. ``"209.81 GB"``."""
    n = to_number(size)
    if n is None:
        raise InvalidArgument(f"format_bytes(): invalid parameter, number expected, got {type(size).__name__}")
    try:
        n = float(n)
    except OverflowError as e:
        raise InvalidArgument("format_bytes(): invalid parameter, number too large") from e
    if math.isnan(n) or n < 0 or math.isinf(n):
        raise InvalidArgument(f"format_bytes(): invalid parameter {n!r}")
    if n == 0:
        return "0 B"
    i = 0
    while n >= 1024:
        n = n / 1024
        i += 1
    unit = BYTE_UNITS[i] if i < len(BYTE_UNITS) else "?"
    if unit == "B":
        return f"{n:.0f} {unit}"
    return f"{n:.2f} {unit}"


def trim_string(s: str) -> str:
    """Strip whitespace from both ends; all-whitespace input yields ``""``."""
    if not isinstance(s, str):
        raise ToolTypeError(f"trim_string(): string expected, got {type(s).__name__}")
    return s.strip(WHITESPACE)
