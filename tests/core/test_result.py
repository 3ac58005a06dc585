"""
Tests for validation results.
"""

import pytest

from validus.core.exceptions import InvalidOperationError
from validus.core.result import Result, ResultSet


def test_new_result_is_valid():
    """Test that a fresh result has no errors."""
    result = Result()
    assert result.is_valid()
    assert result.get_errors() == []
    assert result.errors == ()


@pytest.mark.parametrize(
    "messages",
    [[], ["a"], ["a", "b"], ["same", "same", "same"]],
)
def test_is_valid_matches_error_list(messages):
    """Test that validity always reflects whether errors were added."""
    result = Result()
    for message in messages:
        result.add_error(message)
    assert result.is_valid() == (len(result.get_errors()) == 0)
    assert result.get_errors() == messages


def test_errors_keep_insertion_order_without_dedup():
    """Test error order and duplicate handling."""
    result = Result()
    result.add_error("second")
    result.add_error("first")
    result.add_error("second")
    assert result.get_errors() == ["second", "first", "second"]
    assert len(result) == 3


def test_get_errors_returns_copy():
    """Test that callers cannot change a result through get_errors."""
    result = Result()
    result.add_error("error")
    result.get_errors().append("injected")
    assert result.get_errors() == ["error"]


def test_merge_appends_in_order():
    """Test merging concatenates errors after existing ones."""
    first = Result()
    first.add_error("one")
    second = Result()
    second.add_error("two")
    second.add_error("three")

    first.merge(second)

    assert first.get_errors() == ["one", "two", "three"]
    assert second.get_errors() == ["two", "three"]


def test_sealed_result_is_read_only():
    """Test that a sealed result rejects changes."""
    result = Result()
    result.add_error("error")
    result.seal()

    assert result.sealed
    with pytest.raises(InvalidOperationError):
        result.add_error("late error")
    with pytest.raises(InvalidOperationError):
        result.merge(Result())
    assert result.get_errors() == ["error"]


def test_result_set_mapping():
    """Test result set lookup, order and aggregate validity."""
    valid = Result()
    invalid = Result()
    invalid.add_error("bad")
    result_set = ResultSet({"b": valid, "a": invalid})

    assert list(result_set) == ["b", "a"]
    assert result_set.attributes == ["b", "a"]
    assert len(result_set) == 2
    assert result_set["a"] is invalid
    assert result_set.get_result("b") is valid
    assert not result_set.is_valid()
    assert result_set.get_errors() == {"a": ["bad"]}


def test_result_set_unknown_attribute():
    """Test looking up an undeclared attribute."""
    result_set = ResultSet({"a": Result()})
    with pytest.raises(KeyError):
        result_set.get_result("missing")
    assert "missing" not in result_set


def test_result_set_is_not_affected_by_source_mapping():
    """Test that the result set keeps its own copy of the mapping."""
    source = {"a": Result()}
    result_set = ResultSet(source)
    source["b"] = Result()
    assert list(result_set) == ["a"]
