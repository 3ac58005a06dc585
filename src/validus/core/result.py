"""
Validation results.

A Result collects the error messages produced for one validation unit: a single
value or a single attribute of a data set. It is mutable while rules run and is
sealed by the Validator once a pass finishes. A ResultSet is the read-only
attribute to Result mapping returned by a validation pass.
"""

from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple

from .exceptions import InvalidOperationError


class Result:
    """
    Accumulator of validation error messages.

    Errors are kept in insertion order and are never deduplicated. A Result is
    valid exactly when no error has been added to it.
    """

    __slots__ = ("_errors", "_sealed")

    def __init__(self) -> None:
        self._errors: List[str] = []
        self._sealed = False

    def add_error(self, message: str) -> None:
        """
        Append an error message.

        Args:
            message: Error message to record

        Raises:
            InvalidOperationError: If the result has been sealed
        """
        self._ensure_writable()
        self._errors.append(message)

    def merge(self, other: "Result") -> None:
        """
        Append all errors of another result after the errors already present.

        Args:
            other: Result whose errors are appended

        Raises:
            InvalidOperationError: If this result has been sealed
        """
        self._ensure_writable()
        self._errors.extend(other._errors)

    def is_valid(self) -> bool:
        return not self._errors

    def get_errors(self) -> List[str]:
        """Return a copy of the accumulated error messages."""
        return list(self._errors)

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(self._errors)

    def seal(self) -> None:
        """Make the result read-only."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _ensure_writable(self) -> None:
        if self._sealed:
            raise InvalidOperationError("Cannot modify a sealed validation result")

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"Result(errors={self._errors!r})"


class ResultSet(Mapping):
    """
    Read-only mapping of attribute name to Result.

    Iteration order is the declaration order of the attributes in the rule
    specification that produced it.
    """

    def __init__(self, results: Mapping[str, Result]):
        self._results: Dict[str, Result] = dict(results)

    def __getitem__(self, attribute: str) -> Result:
        return self._results[attribute]

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def get_result(self, attribute: str) -> Result:
        """
        Get the result for an attribute.

        Args:
            attribute: Attribute name declared in the rule specification

        Returns:
            Result: Result of the attribute

        Raises:
            KeyError: If the attribute was not declared
        """
        return self._results[attribute]

    def is_valid(self) -> bool:
        """Return True if every attribute result is valid."""
        return all(result.is_valid() for result in self._results.values())

    def get_errors(self) -> Dict[str, List[str]]:
        """Return the error messages of every attribute that has errors."""
        return {
            attribute: result.get_errors()
            for attribute, result in self._results.items()
            if not result.is_valid()
        }

    @property
    def attributes(self) -> List[str]:
        return list(self._results)

    def __repr__(self) -> str:
        return f"ResultSet({self._results!r})"
