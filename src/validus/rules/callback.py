"""
Callable rule adapter.

Lets plain functions take part in validation. A function that accepts a single
value and returns a Result is wrapped in a CallableRule. The signature is
checked when the rule is built, so a function that can never be called with a
single value is rejected before any data is validated.
"""

import inspect
import logging
from typing import Any, Optional

from ..core.exceptions import InvalidRuleDescriptorError
from ..core.result import Result
from ..core.types import RuleCallable, Translator
from .base import Rule

logger = logging.getLogger(__name__)


def _describe(func: Any) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def check_rule_callable(func: Any) -> None:
    """
    Verify that a callable can be used as a value rule.

    Args:
        func: Candidate callable

    Raises:
        InvalidRuleDescriptorError: If the callable cannot be called with exactly
            one positional argument or is annotated to return something other
            than a Result
    """
    if not callable(func):
        raise InvalidRuleDescriptorError(f"Rule must be callable, got {type(func).__name__}")
    if isinstance(func, type):
        raise InvalidRuleDescriptorError(
            f"Rule descriptor {func.__name__} is a class; pass an instance or a function"
        )

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise InvalidRuleDescriptorError(
            f"Cannot inspect signature of rule callable {_describe(func)}: {e}"
        ) from e

    try:
        signature.bind(None)
    except TypeError as e:
        raise InvalidRuleDescriptorError(
            f"Rule callable {_describe(func)} must accept a single value argument: {e}"
        ) from e

    annotation = signature.return_annotation
    if annotation is inspect.Signature.empty:
        return
    if isinstance(annotation, str):
        # Postponed annotations are compared by name
        if annotation.rsplit(".", 1)[-1] != Result.__name__:
            raise InvalidRuleDescriptorError(
                f"Rule callable {_describe(func)} must return Result, annotated as {annotation}"
            )
        return
    if not (isinstance(annotation, type) and issubclass(annotation, Result)):
        raise InvalidRuleDescriptorError(
            f"Rule callable {_describe(func)} must return Result, annotated as {annotation!r}"
        )


class CallableRule(Rule):
    """
    Rule wrapping a function of one value returning a Result.

    Every error of the returned Result is passed through format_message, so a
    translator attached to the rule also applies to messages produced by the
    function.

    Attributes:
        func: Wrapped function
    """

    def __init__(self, func: RuleCallable, translator: Optional[Translator] = None):
        """
        Initialize a callable rule.

        Args:
            func: Function that takes a value and returns a Result
            translator: Optional translator for the produced messages

        Raises:
            InvalidRuleDescriptorError: If the function is not a usable rule
        """
        check_rule_callable(func)
        super().__init__(translator)
        self.func = func

    def validate_value(self, value: Any) -> Result:
        """
        Validate a value with the wrapped function.

        Raises:
            InvalidRuleDescriptorError: If the function does not return a Result
        """
        returned = self.func(value)
        if not isinstance(returned, Result):
            raise InvalidRuleDescriptorError(
                f"Rule callable {_describe(self.func)} returned {type(returned).__name__}, "
                "expected Result"
            )

        result = Result()
        for error in returned.get_errors():
            result.add_error(self.format_message(error, {"value": value}))
        return result

    def __repr__(self) -> str:
        return f"CallableRule({_describe(self.func)})"
