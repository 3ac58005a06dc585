"""
Validus - Attribute Rule Validation Engine

This package validates named values (a data set) against declarative rules
keyed by attribute name. It includes:

- Results that collect every error of a validation pass
- Rules, including cross-attribute comparison and plain callables
- Rule sets that run all of their rules without stopping at the first failure
- A validator and factory building validators from rule specifications
- Optional message translation, JSON rule configuration and reporting

Example:
    >>> from validus import Compare, ValidatorFactory
    >>> validator = ValidatorFactory().create({"password": [Compare()]})
    >>> validator.validate({"password": "a", "password_repeat": "b"}).is_valid()
    False
"""

__version__ = "0.1.0"
__author__ = "Validus Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Validus requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core import (
    ConfigurationError,
    DataSet,
    DictDataSet,
    InvalidOperationError,
    InvalidRuleDescriptorError,
    MissingCompareTargetError,
    Result,
    ResultSet,
    Translator,
    UnknownCompareTypeError,
    UnknownOperatorError,
)
from .rules import CallableRule, Compare, CompareType, MatchRegex, Number, Required, Rule
from .rule_set import RuleSet
from .validator import Validator
from .factory import ValidatorFactory
from .translation import MessageCatalogTranslator

__all__ = [
    "CallableRule",
    "Compare",
    "CompareType",
    "ConfigurationError",
    "DataSet",
    "DictDataSet",
    "InvalidOperationError",
    "InvalidRuleDescriptorError",
    "MatchRegex",
    "MessageCatalogTranslator",
    "MissingCompareTargetError",
    "Number",
    "Required",
    "Result",
    "ResultSet",
    "Rule",
    "RuleSet",
    "Translator",
    "UnknownCompareTypeError",
    "UnknownOperatorError",
    "Validator",
    "ValidatorFactory",
]
