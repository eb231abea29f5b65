"""Tests for utilities."""

from consolehelp.utils import merge


def test_merge_nested_tables():
    assert merge({"a": {"b": 1}}, {"a": {"c": 2}}) == {"a": {"b": 1, "c": 2}}


def test_merge_lists_are_concatenated():
    merged = {"include": ["a.toml"]}
    merge(merged, {"include": ["b.toml"]})
    assert merged == {"include": ["a.toml", "b.toml"]}


def test_merge_replaces_scalars():
    assert merge({"name": "a", "keep": 1}, {"name": "b"}) == {"name": "b", "keep": 1}


def test_merge_table_over_scalar():
    assert merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}
