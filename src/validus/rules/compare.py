"""
Comparison Rule

This module provides the Compare rule, which compares the value being validated
with either a constant or the value of another attribute in the same data set.

The comparison target is resolved as follows:
- compare_value, when set, always takes precedence
- otherwise compare_attribute is looked up in the data set
- otherwise the attribute named "<attribute>_repeat" is used, so validating
  "password" compares against "password_repeat"

Values are coerced according to the comparison type before the operator is
applied. STRING (the default) compares text code point by code point, except
that two numeric strings are compared by value under every loose operator.
NUMBER converts both sides to floats.
"""

import re
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..core.exceptions import (
    MissingCompareTargetError,
    UnknownCompareTypeError,
    UnknownOperatorError,
)
from ..core.result import Result
from ..core.types import DataSet, Translator
from .base import Rule, stringify


class CompareType(str, Enum):
    """Coercion applied to both operands before comparing."""

    STRING = "string"
    NUMBER = "number"


DEFAULT_MESSAGES: Dict[str, str] = {
    "==": '{attribute} must be equal to "{compareValueOrAttribute}".',
    "===": '{attribute} must be equal to "{compareValueOrAttribute}".',
    "!=": '{attribute} must not be equal to "{compareValueOrAttribute}".',
    "!==": '{attribute} must not be equal to "{compareValueOrAttribute}".',
    ">": '{attribute} must be greater than "{compareValueOrAttribute}".',
    ">=": '{attribute} must be greater than or equal to "{compareValueOrAttribute}".',
    "<": '{attribute} must be less than "{compareValueOrAttribute}".',
    "<=": '{attribute} must be less than or equal to "{compareValueOrAttribute}".',
}

OPERATORS = frozenset(DEFAULT_MESSAGES)

INVALID_VALUE_MESSAGE = "{attribute} is invalid."
VALUE_LABEL = "value"
REPEAT_SUFFIX = "_repeat"

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def to_number(value: Any) -> float:
    """
    Convert a value to a float the way loose scalar casts do.

    Strings contribute their leading numeric part, so "12abc" becomes 12.0 and
    "abc" becomes 0.0. None becomes 0.0 and booleans become 0.0 or 1.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        return float(match.group(0)) if match else 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _is_numeric_string(value: str) -> bool:
    return bool(_NUMERIC_STRING.match(value))


def is_composite(value: Any) -> bool:
    """Check if a value is a collection rather than a scalar."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Mapping, Set))


def compare_values(
    operator: str,
    compare_type: Union[CompareType, str],
    value: Any,
    compare_value: Any,
) -> bool:
    """
    Compare two values with the specified operator.

    Args:
        operator: Comparison operator
        compare_type: Coercion applied to both values
        value: Value being validated
        compare_value: Value being compared with

    Returns:
        bool: Whether the comparison holds

    Raises:
        UnknownOperatorError: If the operator is not supported
        UnknownCompareTypeError: If the comparison type is not supported

    Example:
        >>> compare_values(">=", CompareType.NUMBER, "10", "9")
        True
        >>> compare_values(">=", CompareType.NUMBER, "abc", "9")
        False
    """
    compare_type = _coerce_type(compare_type)

    if compare_type is CompareType.NUMBER:
        left: Any = to_number(value)
        right: Any = to_number(compare_value)
    else:
        left = stringify(value)
        right = stringify(compare_value)

    if operator == "===":
        return type(left) is type(right) and left == right
    if operator == "!==":
        return not (type(left) is type(right) and left == right)

    if isinstance(left, str) and _is_numeric_string(left) and _is_numeric_string(right):
        left = float(left)
        right = float(right)

    if operator == "==":
        return left == right
    if operator == "!=":
        return left != right
    if operator == ">":
        return left > right
    if operator == ">=":
        return left >= right
    if operator == "<":
        return left < right
    if operator == "<=":
        return left <= right
    raise UnknownOperatorError(operator)


def _coerce_type(compare_type: Union[CompareType, str]) -> CompareType:
    try:
        return CompareType(compare_type)
    except ValueError as e:
        raise UnknownCompareTypeError(compare_type) from e


def _check_operator(operator: str) -> str:
    if operator not in OPERATORS:
        raise UnknownOperatorError(operator)
    return operator


class Compare(Rule):
    """
    Rule comparing a value with a constant or with another attribute.

    Supported operators:
    - ``==`` / ``!=``: loose (in)equality after coercion; numeric strings are
      compared by their numeric value
    - ``===`` / ``!==``: strict (in)equality after coercion
    - ``>``, ``>=``, ``<``, ``<=``: ordering after coercion; numeric strings
      are ordered by their numeric value

    The error message may contain the placeholders {attribute}, {value},
    {compareValue}, {compareAttribute} and {compareValueOrAttribute}. When no
    message is given, the default for the configured operator is used.

    Attributes:
        compare_value: Constant to compare with
        compare_attribute (Optional[str]): Attribute to compare with
        type (CompareType): Coercion applied before comparing
        operator (str): Comparison operator
        message (Optional[str]): Custom error message
    """

    def __init__(
        self,
        compare_value: Any = None,
        compare_attribute: Optional[str] = None,
        type: Union[CompareType, str] = CompareType.STRING,
        operator: str = "==",
        message: Optional[str] = None,
        translator: Optional[Translator] = None,
    ):
        """
        Initialize a comparison rule.

        Raises:
            UnknownOperatorError: If the operator is not supported
            UnknownCompareTypeError: If the comparison type is not supported
        """
        super().__init__(translator)
        self.compare_value = compare_value
        self.compare_attribute = compare_attribute
        self.type = _coerce_type(type)
        self.operator = _check_operator(operator)
        self.message = message

    def with_value(self, value: Any) -> "Compare":
        return self._copy_with(compare_value=value)

    def with_attribute(self, attribute: str) -> "Compare":
        return self._copy_with(compare_attribute=attribute)

    def with_operator(self, operator: str) -> "Compare":
        return self._copy_with(operator=_check_operator(operator))

    def with_type(self, compare_type: Union[CompareType, str]) -> "Compare":
        return self._copy_with(type=_coerce_type(compare_type))

    def with_message(self, message: str) -> "Compare":
        return self._copy_with(message=message)

    def get_message(self) -> str:
        """Return the custom message, or the default for the current operator."""
        if self.message is not None:
            return self.message
        return DEFAULT_MESSAGES[self.operator]

    def resolve_compare_attribute(self, attribute: str) -> str:
        """
        Name of the attribute compared with when no constant is configured.

        Example:
            >>> Compare().resolve_compare_attribute("password")
            'password_repeat'
        """
        if self.compare_attribute is not None:
            return self.compare_attribute
        return f"{attribute}{REPEAT_SUFFIX}"

    def validate_attribute(self, data_set: DataSet, attribute: str) -> Result:
        result = Result()
        value = data_set.get_value(attribute)

        if is_composite(value):
            result.add_error(self.format_message(INVALID_VALUE_MESSAGE, {"attribute": attribute}))
            return result

        if self.compare_value is not None:
            compare_value = self.compare_value
            compare_label = self.compare_value
        else:
            compare_label = self.resolve_compare_attribute(attribute)
            compare_value = data_set.get_value(compare_label)

        if not compare_values(self.operator, self.type, value, compare_value):
            result.add_error(
                self.format_message(
                    self.get_message(),
                    {
                        "attribute": attribute,
                        "value": value,
                        "compareValue": compare_value,
                        "compareAttribute": compare_label,
                        "compareValueOrAttribute": compare_label,
                    },
                )
            )
        return result

    def validate_value(self, value: Any) -> Result:
        """
        Validate a bare value against the configured constant.

        Raises:
            MissingCompareTargetError: If no compare_value is configured
        """
        if self.compare_value is None:
            raise MissingCompareTargetError(
                "Compare.compare_value must be set to validate a value without a data set"
            )

        result = Result()
        if is_composite(value):
            result.add_error(self.format_message(INVALID_VALUE_MESSAGE, {"attribute": VALUE_LABEL}))
            return result

        if not compare_values(self.operator, self.type, value, self.compare_value):
            result.add_error(
                self.format_message(
                    self.get_message(),
                    {
                        "attribute": VALUE_LABEL,
                        "value": value,
                        "compareValue": self.compare_value,
                        "compareAttribute": self.compare_value,
                        "compareValueOrAttribute": self.compare_value,
                    },
                )
            )
        return result

    def __repr__(self) -> str:
        return (
            f"Compare(compare_value={self.compare_value!r}, "
            f"compare_attribute={self.compare_attribute!r}, type={self.type.value!r}, "
            f"operator={self.operator!r})"
        )
