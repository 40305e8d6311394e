"""Tests for tabletool.tables."""

import pytest

from tabletool.errors import NotFound, ToolTypeError
from tabletool.tables import table_index_change, table_index_exists, table_is_empty


# ---------------------------------------------------------------------------
# table_is_empty
# ---------------------------------------------------------------------------

def test_is_empty():
    assert table_is_empty({}) is True
    assert table_is_empty({"a": 1}) is False

def test_is_empty_not_a_table():
    with pytest.raises(ToolTypeError):
        table_is_empty([])


# ---------------------------------------------------------------------------
# table_index_exists
# ---------------------------------------------------------------------------

def test_index_exists():
    assert table_index_exists({"a": 1}, "a") is True
    assert table_index_exists({"a": 1}, "b") is False

def test_index_with_none_value_is_present():
    assert table_index_exists({"a": None}, "a") is True

def test_index_exists_unhashable_index():
    with pytest.raises(ToolTypeError):
        table_index_exists({"a": 1}, ["a"])

def test_index_exists_not_a_table():
    with pytest.raises(ToolTypeError):
        table_index_exists("abc", "a")


# ---------------------------------------------------------------------------
# table_index_change
# ---------------------------------------------------------------------------

def test_change_moves_value():
    tbl = {"a": 1}
    assert table_index_change(tbl, "a", "b") is True
    assert tbl == {"b": 1}

def test_change_to_number_key():
    tbl = {"a": "x"}
    table_index_change(tbl, "a", 3)
    assert tbl == {3: "x"}

def test_change_same_key():
    tbl = {"a": 1}
    table_index_change(tbl, "a", "a")
    assert tbl == {"a": 1}

def test_change_moves_none_value():
    tbl = {"a": None}
    table_index_change(tbl, "a", "b")
    assert tbl == {"b": None}

def test_change_missing_key():
    tbl = {"a": 1}
    with pytest.raises(NotFound):
        table_index_change(tbl, "z", "b")
    assert tbl == {"a": 1}

@pytest.mark.parametrize("old, new", [(None, "b"), ("a", (1,)), (True, "b")])
def test_change_bad_index_type(old, new):
    with pytest.raises(ToolTypeError):
        table_index_change({"a": 1}, old, new)

def test_change_not_a_table():
    with pytest.raises(ToolTypeError):
        table_index_change(["a"], 0, 1)
