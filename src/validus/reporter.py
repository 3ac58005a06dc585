"""
Validation Reporter Components

This module provides components for formatting and outputting validation results
in various formats. It supports:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization
"""

import json
from typing import Any, Dict

from .core.result import ResultSet


class ValidationReporter:
    """
    Reporter for formatting and outputting validation results.

    This class provides static methods for converting ResultSet instances into
    various formats suitable for different use cases, such as human-readable
    output, dictionary representation, or JSON serialization.
    """

    @staticmethod
    def format_result(result_set: ResultSet) -> str:
        """
        Format a validation result set as a human-readable string.

        Args:
            result_set: ResultSet instance to format

        Returns:
            str: Formatted string representation of the validation results

        Example:
            >>> print(ValidationReporter.format_result(result_set))
            Validation failed with the following errors:
              amount:
                - amount must be no greater than 100.
        """
        if result_set.is_valid():
            return "Validation passed successfully"

        lines = ["Validation failed with the following errors:"]
        for attribute, errors in result_set.get_errors().items():
            lines.append(f"  {attribute}:")
            for error in errors:
                lines.append(f"    - {error}")
        return "\n".join(lines)

    @staticmethod
    def to_dict(result_set: ResultSet) -> Dict[str, Any]:
        """
        Convert a validation result set to a dictionary.

        Example:
            >>> ValidationReporter.to_dict(result_set)
            {
                'is_valid': False,
                'attributes': {
                    'amount': {'is_valid': False, 'errors': ['amount must be no greater than 100.']}
                }
            }
        """
        return {
            "is_valid": result_set.is_valid(),
            "attributes": {
                attribute: {"is_valid": result.is_valid(), "errors": result.get_errors()}
                for attribute, result in result_set.items()
            },
        }

    @staticmethod
    def to_json(result_set: ResultSet) -> str:
        """Convert a validation result set to an indented JSON string."""
        return json.dumps(ValidationReporter.to_dict(result_set), indent=2)
