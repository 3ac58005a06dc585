"""
Tests for rule configuration loading.
"""

import json

import pytest

from validus.config import RULES_CONFIG_SCHEMA, build_rules, load_catalog, load_json_document, load_rules
from validus.core.exceptions import InvalidRuleDescriptorError
from validus.factory import ValidatorFactory
from validus.rules.compare import Compare, CompareType
from validus.rules.number import Number
from validus.rules.regex import MatchRegex
from validus.rules.required import Required

RULES_DOCUMENT = {
    "password": [
        {"rule": "required"},
        {"rule": "compare", "operator": "==", "attribute": "password_repeat"},
    ],
    "age": [{"rule": "number", "integer_only": True, "min": 0, "max": 150}],
    "code": [{"rule": "regex", "pattern": "^[A-Z]{3}$", "message": "{attribute} must be three letters."}],
    "discount": [{"rule": "compare", "value": 50, "type": "number", "operator": "<="}],
}


def test_build_rules():
    """Test building rule instances from a document."""
    rules = build_rules(RULES_DOCUMENT)

    assert list(rules) == ["password", "age", "code", "discount"]
    assert isinstance(rules["password"][0], Required)
    compare = rules["password"][1]
    assert isinstance(compare, Compare)
    assert compare.compare_attribute == "password_repeat"
    assert isinstance(rules["age"][0], Number)
    assert rules["age"][0].integer_only
    assert isinstance(rules["code"][0], MatchRegex)
    assert rules["discount"][0].type is CompareType.NUMBER
    assert rules["discount"][0].compare_value == 50


def test_loaded_rules_validate():
    """Test validating data with rules loaded from JSON."""
    validator = ValidatorFactory().create(load_rules(json.dumps(RULES_DOCUMENT)))
    result_set = validator.validate(
        {"password": "x", "password_repeat": "y", "age": 200, "code": "abc", "discount": "75"}
    )

    assert result_set.get_errors() == {
        "password": ['password must be equal to "password_repeat".'],
        "age": ["age must be no greater than 150."],
        "code": ["code must be three letters."],
        "discount": ['discount must be less than or equal to "50".'],
    }


@pytest.mark.parametrize(
    "document",
    [
        {"a": [{"rule": "unknown"}]},
        {"a": [{"rule": "compare", "operator": "<>"}]},
        {"a": [{"rule": "compare", "type": "date"}]},
        {"a": [{"rule": "regex"}]},
        {"a": [{"rule": "number", "minimum": 1}]},
        {"a": [{"operator": "=="}]},
        {"a": "required"},
        ["a"],
    ],
)
def test_invalid_documents(document):
    """Test that documents not matching the schema are rejected."""
    with pytest.raises(InvalidRuleDescriptorError):
        build_rules(document)


def test_schema_lists_all_operators():
    """Test that the schema accepts every comparison operator."""
    compare_schema = RULES_CONFIG_SCHEMA["additionalProperties"]["items"]["oneOf"][0]
    assert set(compare_schema["properties"]["operator"]["enum"]) == {
        "==", "===", "!=", "!==", ">", ">=", "<", "<=",
    }


def test_invalid_regex_pattern():
    """Test that a broken pattern in a document is a configuration error."""
    with pytest.raises(InvalidRuleDescriptorError):
        build_rules({"a": [{"rule": "regex", "pattern": "("}]})


def test_load_json_document_from_file(tmp_path, monkeypatch):
    """Test loading a document through an @ file reference."""
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(RULES_DOCUMENT), encoding="utf-8")

    assert load_json_document(f"@{path}") == RULES_DOCUMENT

    monkeypatch.chdir(tmp_path)
    assert load_json_document("@rules.json") == RULES_DOCUMENT


def test_load_json_document_errors(tmp_path):
    """Test invalid JSON and missing files."""
    with pytest.raises(ValueError, match="Invalid JSON input"):
        load_json_document("{not json")
    with pytest.raises(ValueError, match="File not found"):
        load_json_document(f"@{tmp_path / 'missing.json'}")


def test_load_catalog():
    """Test loading and checking a message catalog."""
    assert load_catalog('{"a": "b"}') == {"a": "b"}
    with pytest.raises(ValueError, match="Invalid message catalog"):
        load_catalog('{"a": 1}')
