"""
Validation rules.

This package provides the Rule base class, the adapter that turns plain
callables into rules, and the built-in rules:

- Compare: compares a value with a constant or another attribute
- Required: rejects None, blank strings and empty collections
- Number: checks numbers, integers and numeric ranges
- MatchRegex: checks strings against a regular expression
"""

from .base import Rule, stringify, substitute_placeholders
from .callback import CallableRule, check_rule_callable
from .compare import Compare, CompareType, compare_values
from .number import Number
from .regex import MatchRegex
from .required import Required

__all__ = [
    "Rule",
    "CallableRule",
    "Compare",
    "CompareType",
    "MatchRegex",
    "Number",
    "Required",
    "check_rule_callable",
    "compare_values",
    "stringify",
    "substitute_placeholders",
]
