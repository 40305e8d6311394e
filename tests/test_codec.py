"""Tests for saving and loading table files."""

import pytest

from tabletool.codec import load_table, loads, persist, save_array, save_table
from tabletool.errors import (
    InvalidArgument,
    ParseError,
    ToolError,
    ToolIOError,
    ToolTypeError,
)


# ---------------------------------------------------------------------------
# save_table
# ---------------------------------------------------------------------------

def test_save_table_layout(tmp_path):
    path = tmp_path / "cfg.tbl"
    assert save_table({"a": 1}, "cfg", path) is True
    assert path.read_text() == 'local cfg\n\ncfg = {\n\n    [ "a" ] = 1,\n\n}\n\nreturn cfg'

def test_save_table_truncates(tmp_path):
    path = tmp_path / "cfg.tbl"
    path.write_text("x" * 500)
    save_table({}, "cfg", path)
    assert path.read_text() == "local cfg\n\ncfg = {\n\n\n}\n\nreturn cfg"

def test_save_table_to_directory_fails(tmp_path):
    with pytest.raises(ToolIOError) as exc:
        save_table({}, "t", tmp_path)
    assert isinstance(exc.value, OSError)
    assert "save_table()" in str(exc.value)

def test_save_table_bad_name_leaves_file_alone(tmp_path):
    path = tmp_path / "cfg.tbl"
    path.write_text("keep")
    with pytest.raises(InvalidArgument):
        save_table({}, "not valid", path)
    assert path.read_text() == "keep"

def test_save_table_unencodable_text_leaves_file_alone(tmp_path):
    path = tmp_path / "cfg.tbl"
    path.write_text("keep")
    with pytest.raises(InvalidArgument):
        save_table({"a": "\ud800"}, "t", path)
    assert path.read_text() == "keep"

def test_save_table_bad_path_type():
    with pytest.raises(ToolTypeError):
        save_table({}, "t", 42)


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

def test_round_trip_nested(tmp_path):
    data = {
        "users": {
            "alice": {"age": 30, "admin": True, "score": 9.75},
            "bob": {"age": 25, "admin": False, "score": -1.5},
        },
        "motd": 'say "hi"\\n\tnow\nline two\r\x00end',
        "unicode": "héllo ✓",
        "empty": {},
        "ids": {1: "one", 2: "two", 10: "ten"},
    }
    path = tmp_path / "data.tbl"
    save_table(data, "data", path)
    assert load_table(path) == data

def test_round_trip_drops_functions(tmp_path):
    path = tmp_path / "t.tbl"
    save_table({"a": 1, "f": print, "n": None}, "t", path)
    assert load_table(path) == {"a": 1}

def test_sequence_in_table_loads_as_index_keys(tmp_path):
    path = tmp_path / "t.tbl"
    save_table({"list": ["a", "b"]}, "t", path)
    assert load_table(path) == {"list": {1: "a", 2: "b"}}

def test_save_array_round_trip(tmp_path):
    path = tmp_path / "a.tbl"
    assert save_array([{"a": 1, "b": "x"}, [1, 2], "s", 5, True], path) is True
    assert load_table(path) == [{"a": 1, "b": "x"}, [1, 2], "s", "5", "true"]

def test_save_array_none(tmp_path):
    path = tmp_path / "a.tbl"
    save_array(None, path)
    assert load_table(path) == {}


# ---------------------------------------------------------------------------
# persist
# ---------------------------------------------------------------------------

def test_persist_table_mode(tmp_path):
    path = tmp_path / "t.tbl"
    assert persist({"k": "v"}, path, mode="table", name="t")
    assert load_table(path) == {"k": "v"}

def test_persist_array_mode(tmp_path):
    path = tmp_path / "a.tbl"
    assert persist(["x"], path, mode="array")
    assert load_table(path) == ["x"]

def test_persist_table_needs_name(tmp_path):
    with pytest.raises(InvalidArgument):
        persist({}, tmp_path / "t.tbl")

def test_persist_unknown_mode(tmp_path):
    with pytest.raises(InvalidArgument):
        persist({}, tmp_path / "t.tbl", mode="json")


# ---------------------------------------------------------------------------
# load_table / loads
# ---------------------------------------------------------------------------

def test_load_missing_file(tmp_path):
    with pytest.raises(ToolIOError) as exc:
        load_table(tmp_path / "missing.tbl")
    assert "could not open" in str(exc.value)

def test_loads_non_table():
    with pytest.raises(ParseError, match="invalid table"):
        loads("return 5")

def test_loads_without_return():
    with pytest.raises(ParseError, match="no return"):
        loads("t = {}")

def test_loads_garbage():
    with pytest.raises(ParseError):
        loads("print('hello')")

def test_loads_not_string():
    with pytest.raises(ToolTypeError):
        loads(b"return {}")

def test_load_invalid_encoding(tmp_path):
    path = tmp_path / "bin.tbl"
    path.write_bytes(b"return { '\xff\xfe' }")
    with pytest.raises(ParseError):
        load_table(path)


# ---------------------------------------------------------------------------
# Every failure is a ToolError
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text",
    [
        'return { "\\u{FFFFFFFF}" }',
        "return " + "{" * 5000 + "}" * 5000,
        "return { [0.5] = 1 }",
        'return { "unterminated }',
        "return { 1 2 }",
        "x.y = 1",
        "",
    ],
)
def test_loads_malformed_raises_parse_error(text):
    with pytest.raises(ParseError):
        loads(text)

@pytest.mark.parametrize(
    "obj",
    [{"a": float("nan")}, {"a": "\udfff"}, {(1, 2): 1}, "not a table"],
)
def test_save_table_bad_input_raises_tool_error(tmp_path, obj):
    with pytest.raises(ToolError):
        save_table(obj, "t", tmp_path / "t.tbl")
