"""
Numeric validation rule.

Checks that a value is a number, optionally an integer, and optionally that it
falls within a range. Numeric strings such as "42" or "-3.5" are accepted and
converted before the range check.
"""

import re
from typing import Any, Optional

from ..core.result import Result
from ..core.types import DataSet, Translator
from .base import Rule

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
_NUMBER_PATTERN = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


class Number(Rule):
    """
    Rule for validating numbers and numeric ranges.

    Either min or max can be None to create an open-ended range. At most one
    error is reported per evaluation: a value that is not a number is not
    range checked.

    Attributes:
        integer_only (bool): Whether only integers are accepted
        min (Optional[float]): Minimum allowed value
        max (Optional[float]): Maximum allowed value
    """

    NOT_NUMBER_MESSAGE = "{attribute} must be a number."
    NOT_INTEGER_MESSAGE = "{attribute} must be an integer."
    TOO_SMALL_MESSAGE = "{attribute} must be no less than {min}."
    TOO_BIG_MESSAGE = "{attribute} must be no greater than {max}."

    def __init__(
        self,
        integer_only: bool = False,
        min: Optional[float] = None,
        max: Optional[float] = None,
        message: Optional[str] = None,
        too_small_message: Optional[str] = None,
        too_big_message: Optional[str] = None,
        translator: Optional[Translator] = None,
    ):
        """
        Initialize a number rule.

        Args:
            integer_only: Accept integers only
            min: Minimum allowed value, or None for no minimum
            max: Maximum allowed value, or None for no maximum
            message: Message used when the value is not a number
            too_small_message: Message used when the value is below min
            too_big_message: Message used when the value is above max
            translator: Optional translator for the produced messages
        """
        super().__init__(translator)
        self.integer_only = integer_only
        self.min = min
        self.max = max
        self.message = message or (
            self.NOT_INTEGER_MESSAGE if integer_only else self.NOT_NUMBER_MESSAGE
        )
        self.too_small_message = too_small_message or self.TOO_SMALL_MESSAGE
        self.too_big_message = too_big_message or self.TOO_BIG_MESSAGE

    def validate_value(self, value: Any) -> Result:
        return self._validate(value, "value")

    def validate_attribute(self, data_set: DataSet, attribute: str) -> Result:
        return self._validate(data_set.get_value(attribute), attribute)

    def _validate(self, value: Any, attribute: str) -> Result:
        result = Result()
        params = {"attribute": attribute, "value": value, "min": self.min, "max": self.max}

        number = self._to_number(value)
        if number is None:
            result.add_error(self.format_message(self.message, params))
        elif self.min is not None and number < self.min:
            result.add_error(self.format_message(self.too_small_message, params))
        elif self.max is not None and number > self.max:
            result.add_error(self.format_message(self.too_big_message, params))
        return result

    def _to_number(self, value: Any) -> Optional[float]:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return float(value)
        if isinstance(value, float):
            if self.integer_only and not value.is_integer():
                return None
            return value
        if isinstance(value, str):
            pattern = _INTEGER_PATTERN if self.integer_only else _NUMBER_PATTERN
            if pattern.match(value):
                return float(value)
        return None
