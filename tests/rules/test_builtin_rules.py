"""
Tests for the required, number and regex rules.
"""

import re

import pytest

from validus.core.data_set import DictDataSet
from validus.core.exceptions import InvalidRuleDescriptorError
from validus.core.result import Result
from validus.rules.base import Rule, stringify, substitute_placeholders
from validus.rules.number import Number
from validus.rules.regex import MatchRegex
from validus.rules.required import Required


def test_required_with_defaults():
    """Test required rule with default settings."""
    rule = Required()
    assert not rule.validate(None).is_valid()
    assert not rule.validate([]).is_valid()
    assert not rule.validate("   ").is_valid()
    assert rule.validate("not empty").is_valid()
    assert rule.validate(["with", "elements"]).is_valid()
    assert rule.validate(0).is_valid()


def test_required_attribute_message():
    """Test required rule message for a blank attribute."""
    result = Required().validate_attribute(DictDataSet({"name": ""}), "name")
    assert result.get_errors() == ["name cannot be blank."]
    assert Required(message="fill {attribute}").validate_attribute(DictDataSet({}), "name").get_errors() == [
        "fill name"
    ]


@pytest.mark.parametrize("value", [13, "13", " -4 ", 5.0])
def test_integer_only_accepts_integers(value):
    """Test values accepted as integers."""
    assert Number(integer_only=True).validate_value(value).is_valid()


@pytest.mark.parametrize("value", [13.5, "13.5", "abc", None, True, [1]])
def test_integer_only_rejects_non_integers(value):
    """Test values rejected as integers."""
    assert Number(integer_only=True).validate_value(value).get_errors() == ["value must be an integer."]


@pytest.mark.parametrize("value", [1.5, "2.5e3", "-.5", 7])
def test_number_accepts_numbers(value):
    """Test values accepted as numbers."""
    assert Number().validate_value(value).is_valid()


def test_number_rejects_non_numbers():
    """Test number rule message for text."""
    assert Number().validate_value("ten").get_errors() == ["value must be a number."]


def test_number_range():
    """Test number rule range checks and messages."""
    rule = Number(min=0, max=100)
    data_set = DictDataSet({"low": -1, "high": "150", "ok": 50})

    assert rule.validate_attribute(data_set, "low").get_errors() == ["low must be no less than 0."]
    assert rule.validate_attribute(data_set, "high").get_errors() == ["high must be no greater than 100."]
    assert rule.validate_attribute(data_set, "ok").is_valid()


def test_number_reports_one_error():
    """Test that a non-number is not range checked."""
    assert len(Number(min=0, max=10).validate_value("x")) == 1


def test_regex_match():
    """Test regex rule matching."""
    rule = MatchRegex(r"^[a-z]+$")
    assert rule.validate_value("alice").is_valid()
    assert rule.validate_value("Alice").get_errors() == ["value is invalid."]
    assert not rule.validate_value(42).is_valid()


def test_regex_not_match():
    """Test inverted regex rule."""
    rule = MatchRegex(re.compile(r"\d"), not_match=True, message="{attribute} must not contain digits.")
    assert rule.validate_attribute(DictDataSet({"name": "bob"}), "name").is_valid()
    assert rule.validate_attribute(DictDataSet({"name": "b0b"}), "name").get_errors() == [
        "name must not contain digits."
    ]


def test_regex_invalid_pattern():
    """Test that a broken pattern is a configuration error."""
    with pytest.raises(InvalidRuleDescriptorError):
        MatchRegex("(")


def test_base_rule_requires_implementation():
    """Test that the base rule cannot validate by itself."""
    with pytest.raises(NotImplementedError):
        Rule().validate_value(1)


def test_attribute_only_rule():
    """Test a custom rule that only implements attribute validation."""

    class EqualsOther(Rule):
        def validate_attribute(self, data_set, attribute):
            outcome = Result()
            if data_set.get_value(attribute) != data_set.get_value("other"):
                outcome.add_error(self.format_message("{attribute} differs.", {"attribute": attribute}))
            return outcome

    rule = EqualsOther()
    assert rule.validate_attribute(DictDataSet({"a": 1, "other": 1}), "a").is_valid()
    assert rule.validate_attribute(DictDataSet({"a": 1, "other": 2}), "a").get_errors() == ["a differs."]
    with pytest.raises(NotImplementedError):
        rule.validate_value(1)


def test_with_translator_returns_copy(translator):
    """Test that attaching a translator leaves the original rule unchanged."""
    rule = Required()
    translated = rule.with_translator(translator)
    assert rule.translator is None
    assert translated.translator is translator
    assert translated.validate_value(None).get_errors() == ["X"]


@pytest.mark.parametrize(
    "value, expected",
    [(None, ""), (True, "1"), (False, ""), (10.0, "10"), (1.5, "1.5"), ("a", "a"), (3, "3")],
)
def test_stringify(value, expected):
    """Test conversion of values for messages."""
    assert stringify(value) == expected


def test_substitute_placeholders_leaves_unknown():
    """Test that unknown placeholders stay in the message."""
    assert substitute_placeholders("{attribute} vs {other}", {"attribute": "a"}) == "a vs {other}"
