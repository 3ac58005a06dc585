"""
Custom exceptions for the validation engine.

This module defines the hierarchy of configuration errors raised by the engine.
Validation failures caused by data are never raised: they are collected as
messages in a Result. The exceptions below signal misuse of the engine, such as
an unknown comparison operator or an unusable rule descriptor, and always
propagate to the caller that triggered them.
"""


class ConfigurationError(Exception):
    """
    Raised when the validation engine is configured incorrectly.

    This is the base class for every error that indicates a programming or
    configuration mistake rather than invalid data.

    Examples:
        * Unknown comparison operator
        * Rule specification entries that are not rules
        * Comparison rules evaluated without a comparison target
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class UnknownOperatorError(ConfigurationError, ValueError):
    """
    Raised when a comparison rule is given an operator it does not support.

    Raised at rule construction time, never during evaluation.

    Examples:
        * Compare(operator="<>")
        * Compare().with_operator("~=")
    """

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Unknown operator: {operator}")


class UnknownCompareTypeError(ConfigurationError, ValueError):
    """
    Raised when a comparison rule is given an unsupported comparison type.

    Examples:
        * Compare(type="date")
    """

    def __init__(self, compare_type: object):
        self.compare_type = compare_type
        super().__init__(f"Unknown comparison type: {compare_type}")


class InvalidRuleDescriptorError(ConfigurationError, ValueError):
    """
    Raised when a rule specification contains something that cannot become a rule.

    The factory raises this while building a validator, before any data is
    validated.

    Examples:
        * A plain string in an attribute's rule list
        * A callable that cannot be called with a single value
        * A callable that returns something other than a Result
        * A rule configuration document that does not match its schema
    """


class MissingCompareTargetError(ConfigurationError):
    """
    Raised when a comparison rule has nothing to compare against.

    A bare value has no data set to resolve a comparison attribute from, so a
    comparison value must be configured.

    Examples:
        * Compare(compare_attribute="password_repeat").validate_value("secret")
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Adding an error to a Result returned by a finished validation pass
    """
