"""
Rule configuration loading.

This module builds rules from JSON rule configuration documents, allowing rule
specifications to live outside code. A document maps attribute names to lists
of rule entries:

    {
        "password": [
            {"rule": "required"},
            {"rule": "compare", "operator": "==", "attribute": "password_repeat"}
        ],
        "age": [{"rule": "number", "integer_only": true, "min": 0, "max": 150}]
    }

Documents are checked against RULES_CONFIG_SCHEMA with jsonschema before any
rule is built. JSON input can be provided either as a direct string or as a
file path prefixed with '@'.
"""

import json
import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Sequence

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.exceptions import InvalidRuleDescriptorError
from .rules.base import Rule
from .rules.compare import OPERATORS, Compare, CompareType
from .rules.number import Number
from .rules.regex import MatchRegex
from .rules.required import Required

logger = logging.getLogger(__name__)

_MESSAGE = {"type": "string"}
_NUMBER_OR_NULL = {"type": ["number", "null"]}


def _rule_schema(name: str, properties: Dict[str, Any], required: Sequence[str] = ()) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {"rule": {"const": name}, **properties},
        "required": ["rule", *required],
        "additionalProperties": False,
    }


RULES_CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": {
        "type": "array",
        "items": {
            "oneOf": [
                _rule_schema(
                    "compare",
                    {
                        "value": {"type": ["string", "number", "boolean"]},
                        "attribute": {"type": "string", "minLength": 1},
                        "operator": {"enum": sorted(OPERATORS)},
                        "type": {"enum": [compare_type.value for compare_type in CompareType]},
                        "message": _MESSAGE,
                    },
                ),
                _rule_schema("required", {"message": _MESSAGE}),
                _rule_schema(
                    "number",
                    {
                        "integer_only": {"type": "boolean"},
                        "min": _NUMBER_OR_NULL,
                        "max": _NUMBER_OR_NULL,
                        "message": _MESSAGE,
                        "too_small_message": _MESSAGE,
                        "too_big_message": _MESSAGE,
                    },
                ),
                _rule_schema(
                    "regex",
                    {
                        "pattern": {"type": "string"},
                        "not_match": {"type": "boolean"},
                        "message": _MESSAGE,
                    },
                    required=["pattern"],
                ),
            ]
        },
    },
}

CATALOG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": {"type": "string"},
}


def _build_compare(options: Mapping[str, Any]) -> Rule:
    return Compare(
        compare_value=options.get("value"),
        compare_attribute=options.get("attribute"),
        type=options.get("type", CompareType.STRING),
        operator=options.get("operator", "=="),
        message=options.get("message"),
    )


RULE_BUILDERS: Dict[str, Callable[[Mapping[str, Any]], Rule]] = {
    "compare": _build_compare,
    "required": lambda options: Required(**options),
    "number": lambda options: Number(**options),
    "regex": lambda options: MatchRegex(**options),
}


def load_json_document(source: str) -> Any:
    """
    Parse JSON input from either a string or a file.

    Args:
        source: Either a JSON string or a file path prefixed with '@'. Relative
            paths are resolved against the current working directory.

    Returns:
        Any: Parsed JSON data

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found
    """
    if source.startswith("@"):
        file_path = source[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            source = f.read()

    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def build_rules(document: Mapping[str, Any]) -> Dict[str, List[Rule]]:
    """
    Build rules from a parsed rule configuration document.

    Args:
        document: Parsed rule configuration

    Returns:
        Dict[str, List[Rule]]: Rules of every attribute, in document order

    Raises:
        InvalidRuleDescriptorError: If the document does not match the schema
    """
    try:
        json_validate(instance=document, schema=RULES_CONFIG_SCHEMA)
    except JsonSchemaError as e:
        logger.error(f"Rule configuration rejected: {e.message}")
        raise InvalidRuleDescriptorError(f"Invalid rule configuration: {e.message}") from e

    rules: Dict[str, List[Rule]] = {}
    for attribute, entries in document.items():
        rules[attribute] = []
        for entry in entries:
            options = {key: value for key, value in entry.items() if key != "rule"}
            rules[attribute].append(RULE_BUILDERS[entry["rule"]](options))
    return rules


def load_rules(source: str) -> Dict[str, List[Rule]]:
    """Load and build rules from a JSON string or '@' file reference."""
    return build_rules(load_json_document(source))


def load_catalog(source: str) -> Dict[str, str]:
    """
    Load a message catalog from a JSON string or '@' file reference.

    Raises:
        ValueError: If the catalog is not an object of strings
    """
    catalog = load_json_document(source)
    try:
        json_validate(instance=catalog, schema=CATALOG_SCHEMA)
    except JsonSchemaError as e:
        raise ValueError(f"Invalid message catalog: {e.message}") from e
    return catalog
