"""
Tests for custom exceptions.
"""

import pytest

from validus.core.exceptions import (
    ConfigurationError,
    InvalidRuleDescriptorError,
    MissingCompareTargetError,
    UnknownCompareTypeError,
    UnknownOperatorError,
)


def test_configuration_error_message():
    """Test configuration error message formatting."""
    error = ConfigurationError("test message")
    assert str(error) == "Configuration Error: test message"


def test_unknown_operator_error():
    """Test unknown operator error details."""
    error = UnknownOperatorError("<>")
    assert error.operator == "<>"
    assert str(error) == "Configuration Error: Unknown operator: <>"


def test_unknown_compare_type_error():
    """Test unknown comparison type error details."""
    error = UnknownCompareTypeError("date")
    assert error.compare_type == "date"
    assert "Unknown comparison type: date" in str(error)


@pytest.mark.parametrize(
    "error_class",
    [UnknownOperatorError, UnknownCompareTypeError, InvalidRuleDescriptorError],
)
def test_argument_errors_are_value_errors(error_class):
    """Test that invalid argument errors can be caught as ValueError."""
    assert issubclass(error_class, ValueError)
    assert issubclass(error_class, ConfigurationError)


def test_missing_compare_target_is_configuration_error():
    """Test missing comparison target error hierarchy."""
    assert issubclass(MissingCompareTargetError, ConfigurationError)
    assert not issubclass(MissingCompareTargetError, ValueError)
