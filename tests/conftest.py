"""Shared test fixtures."""

from typing import Any, Dict, Mapping

import pytest

from validus.core.result import Result
from validus.rules.number import Number


class FixedTranslator:
    """Translator returning the same text for every message."""

    def __init__(self, text: str):
        self.text = text
        self.calls = []

    def translate(self, message: str, params: Mapping[str, Any]) -> str:
        self.calls.append((message, dict(params)))
        return self.text


def reject_thirteen(value: Any) -> Result:
    """Callable rule rejecting the value 13."""
    result = Result()
    if value == 13:
        result.add_error("Value should not be 13.")
    return result


@pytest.fixture
def amount_rules():
    """Fixture providing the integer, max and reject-13 rules for an amount."""
    return [Number(integer_only=True), Number(max=100), reject_thirteen]


@pytest.fixture
def translator() -> FixedTranslator:
    """Fixture providing a translator that always returns "X"."""
    return FixedTranslator("X")


@pytest.fixture
def registration_data() -> Dict[str, Any]:
    """Fixture providing a registration form data set."""
    return {
        "username": "alice",
        "password": "s3cret",
        "password_repeat": "s3cret",
        "age": "34",
        "nickname": None,
    }
