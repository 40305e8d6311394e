"""tabletool: Lua table persistence and small file/format helpers."""

from .codec import load_table, loads, persist, save_array, save_table
from .errors import (
    AlreadyExists,
    InvalidArgument,
    NotFound,
    ParseError,
    ToolError,
    ToolIOError,
    ToolTypeError,
)
from .fileutil import clear_file, file_exists, file_write, make_file
from .formatting import format_bytes, format_seconds, trim_string
from .password import generate_pass
from .tables import table_index_change, table_index_exists, table_is_empty
from .values import (
    Nil,
    Unsupported,
    Value,
    VBool,
    VList,
    VNumber,
    VTable,
    VText,
    unwrap,
    wrap,
)
from .writer import serialize_array, serialize_table

__all__ = [
    "save_table",
    "save_array",
    "persist",
    "load_table",
    "loads",
    "serialize_table",
    "serialize_array",
    "format_seconds",
    "format_bytes",
    "trim_string",
    "generate_pass",
    "table_is_empty",
    "table_index_exists",
    "table_index_change",
    "file_exists",
    "make_file",
    "clear_file",
    "file_write",
    "wrap",
    "unwrap",
    "Nil",
    "Unsupported",
    "Value",
    "VBool",
    "VList",
    "VNumber",
    "VTable",
    "VText",
    "ToolError",
    "ToolTypeError",
    "InvalidArgument",
    "ToolIOError",
    "ParseError",
    "NotFound",
    "AlreadyExists",
]
