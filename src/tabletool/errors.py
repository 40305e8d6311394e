"""Exception taxonomy for tabletool."""

from __future__ import annotations


class ToolError(Exception):
    """Base exception for all tabletool errors."""
    pass


class ToolTypeError(ToolError, TypeError):
    """An argument has the wrong type."""
    pass


class InvalidArgument(ToolError, ValueError):
    """An argument has the right type but an out-of-domain value."""
    pass


class ToolIOError(ToolError, OSError):
    """Opening, reading or writing a file failed."""
    pass


class NotFound(ToolError, LookupError):
    """A key or file that must exist is missing."""
    pass


class AlreadyExists(ToolError):
    """A file that must not exist is already there."""
    pass


class ParseError(ToolError, ValueError):
    """Persisted table text is malformed or does not yield a table."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
