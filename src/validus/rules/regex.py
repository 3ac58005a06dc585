"""
Rule for regex pattern matching.
"""

import re
from typing import Any, Optional, Pattern, Union

from ..core.exceptions import InvalidRuleDescriptorError
from ..core.result import Result
from ..core.types import DataSet, Translator
from .base import Rule


class MatchRegex(Rule):
    """
    Rule for regex pattern matching.

    This rule ensures that a string value matches (or, with not_match, does not
    match) a regular expression. Values that are not strings are invalid.

    Attributes:
        pattern: Compiled regular expression pattern
        not_match (bool): Invert the match
    """

    DEFAULT_MESSAGE = "{attribute} is invalid."

    def __init__(
        self,
        pattern: Union[str, Pattern[str]],
        not_match: bool = False,
        message: Optional[str] = None,
        translator: Optional[Translator] = None,
    ):
        """
        Initialize a regex validation rule.

        Args:
            pattern: Regular expression pattern string or compiled pattern
            not_match: Fail when the pattern matches instead of when it does not
            message: Message to display when validation fails
            translator: Optional translator for the produced messages

        Raises:
            InvalidRuleDescriptorError: If the pattern does not compile
        """
        super().__init__(translator)
        try:
            self.pattern = re.compile(pattern)
        except re.error as e:
            raise InvalidRuleDescriptorError(f"Invalid regular expression {pattern!r}: {e}") from e
        self.not_match = not_match
        self.message = message or self.DEFAULT_MESSAGE

    def validate_value(self, value: Any) -> Result:
        return self._validate(value, "value")

    def validate_attribute(self, data_set: DataSet, attribute: str) -> Result:
        return self._validate(data_set.get_value(attribute), attribute)

    def _validate(self, value: Any, attribute: str) -> Result:
        result = Result()
        valid = isinstance(value, str) and bool(self.pattern.search(value)) != self.not_match
        if not valid:
            result.add_error(self.format_message(self.message, {"attribute": attribute, "value": value}))
        return result
