"""
Base Validation Rule

This module provides the base class of every validation rule. A rule checks a
value, or an attribute of a data set, and reports failures as messages in a
Result. Rules never raise for invalid data; exceptions are reserved for
configuration mistakes.

A rule implements at least one of two evaluation methods:
- validate_value(value): for checks that only need the value itself
- validate_attribute(data_set, attribute): for checks that need the other
  attributes of the data set or the attribute name

The base validate_attribute looks the value up and delegates to validate_value,
so simple rules only override validate_value.
"""

import copy
import re
from typing import Any, Mapping, Optional

from ..core.result import Result
from ..core.types import DataSet, Translator

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def stringify(value: Any) -> str:
    """
    Convert a value to the text used in messages and string comparisons.

    None and False become an empty string, True becomes "1", and floats
    without a fractional part lose their trailing ".0".
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def substitute_placeholders(message: str, params: Mapping[str, Any]) -> str:
    """
    Replace {name} placeholders in a message with parameter values.

    Placeholders without a matching parameter are left untouched.

    Args:
        message: Message template
        params: Values keyed by placeholder name

    Returns:
        str: Message with placeholders replaced

    Example:
        >>> substitute_placeholders("{attribute} is invalid.", {"attribute": "age"})
        'age is invalid.'
    """

    def replace(match: re.Match) -> str:
        name = match.group(1)
        return stringify(params[name]) if name in params else match.group(0)

    return _PLACEHOLDER.sub(replace, message)


class Rule:
    """
    Base class for all validation rules.

    Rule configuration is fixed once a rule is constructed. Methods that change
    configuration return a modified copy, so a rule can be shared between
    validators and threads.

    Attributes:
        translator (Optional[Translator]): Translator applied to every message
    """

    def __init__(self, translator: Optional[Translator] = None):
        self.translator = translator

    def validate_value(self, value: Any) -> Result:
        """
        Validate a bare value.

        Args:
            value: Value to validate

        Returns:
            Result: Errors found in the value

        Raises:
            NotImplementedError: If the subclass only supports attribute validation
        """
        raise NotImplementedError(f"{type(self).__name__} does not support bare value validation")

    def validate_attribute(self, data_set: DataSet, attribute: str) -> Result:
        """
        Validate an attribute of a data set.

        Args:
            data_set: Data set holding the attribute
            attribute: Name of the attribute to validate

        Returns:
            Result: Errors found in the attribute value
        """
        return self.validate_value(data_set.get_value(attribute))

    def validate(self, value: Any) -> Result:
        return self.validate_value(value)

    def format_message(self, message: str, params: Mapping[str, Any]) -> str:
        """
        Build the final text of an error message.

        When a translator is attached it receives the template and parameters
        and produces the final text. Otherwise placeholders are substituted.
        """
        if self.translator is not None:
            return self.translator.translate(message, params)
        return substitute_placeholders(message, params)

    def with_translator(self, translator: Optional[Translator]) -> "Rule":
        """Return a copy of this rule that passes its messages through a translator."""
        return self._copy_with(translator=translator)

    def _copy_with(self, **changes: Any) -> "Rule":
        rule = copy.copy(self)
        for name, value in changes.items():
            setattr(rule, name, value)
        return rule
