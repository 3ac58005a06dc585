"""
Core type definitions and protocols.

This module provides the protocols that collaborators of the validation engine
implement, so that data sources and message translators can be supplied by the
caller without inheriting from engine classes.
"""

from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from .result import Result


@runtime_checkable
class DataSet(Protocol):
    """Protocol for a named bag of values being validated."""

    def get_value(self, attribute: str) -> Any:
        """Get the value of an attribute, or None when it is absent."""
        ...

    def has_attribute(self, attribute: str) -> bool:
        """Check if the attribute exists, even when its value is None."""
        ...


@runtime_checkable
class Translator(Protocol):
    """Protocol for translating error message templates."""

    def translate(self, message: str, params: Mapping[str, Any]) -> str:
        """Translate a message template and substitute its placeholders."""
        ...


RuleCallable = Callable[[Any], Result]
