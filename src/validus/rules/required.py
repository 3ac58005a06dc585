"""Rule for validating required values."""

from collections.abc import Sized
from typing import Any, Optional

from ..core.result import Result
from ..core.types import DataSet, Translator
from .base import Rule


class Required(Rule):
    """
    Rule for validating required values.

    This rule ensures that a value is not None, that a string is not empty
    after stripping whitespace, and that a collection is not empty.
    """

    DEFAULT_MESSAGE = "{attribute} cannot be blank."

    def __init__(self, message: Optional[str] = None, translator: Optional[Translator] = None):
        super().__init__(translator)
        self.message = message or self.DEFAULT_MESSAGE

    def validate_value(self, value: Any) -> Result:
        result = Result()
        if self.is_empty(value):
            result.add_error(self.format_message(self.message, {"attribute": "value", "value": value}))
        return result

    def validate_attribute(self, data_set: DataSet, attribute: str) -> Result:
        value = data_set.get_value(attribute)
        result = Result()
        if self.is_empty(value):
            result.add_error(self.format_message(self.message, {"attribute": attribute, "value": value}))
        return result

    @staticmethod
    def is_empty(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return not value.strip()
        if isinstance(value, Sized):
            return len(value) == 0
        return False
