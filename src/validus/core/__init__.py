"""Core validation types: results, data sets, protocols and exceptions."""

from .data_set import DictDataSet
from .exceptions import (
    ConfigurationError,
    InvalidOperationError,
    InvalidRuleDescriptorError,
    MissingCompareTargetError,
    UnknownCompareTypeError,
    UnknownOperatorError,
)
from .result import Result, ResultSet
from .types import DataSet, RuleCallable, Translator

__all__ = [
    "ConfigurationError",
    "DataSet",
    "DictDataSet",
    "InvalidOperationError",
    "InvalidRuleDescriptorError",
    "MissingCompareTargetError",
    "Result",
    "ResultSet",
    "RuleCallable",
    "Translator",
    "UnknownCompareTypeError",
    "UnknownOperatorError",
]
