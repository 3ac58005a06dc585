"""
Rule Set Validation Components

This module provides the RuleSet, an ordered group of rules applied together to
one value or to one attribute of a data set. Every rule always runs, so a single
pass reports all violations, and the errors of the individual rules are merged
in rule order.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional

from .core.result import Result
from .core.types import DataSet
from .rules.base import Rule

logger = logging.getLogger(__name__)


class RuleSet:
    """
    Ordered collection of validation rules.

    Attributes:
        rules (List[Rule]): Rules applied in the order they were added
    """

    def __init__(self, rules: Iterable[Rule] = ()):
        """
        Initialize a rule set.

        Args:
            rules: Initial rules, applied in iteration order
        """
        self.rules: List[Rule] = list(rules)

    def add_rule(self, rule: Rule) -> None:
        """
        Add a rule to the end of the rule set.

        Example:
            >>> rule_set = RuleSet()
            >>> rule_set.add_rule(Number(integer_only=True))
            >>> rule_set.add_rule(Number(max=100))
        """
        self.rules.append(rule)

    def validate_attribute(self, data_set: DataSet, attribute: str) -> Result:
        """
        Validate an attribute of a data set against every rule.

        Args:
            data_set: Data set holding the attribute
            attribute: Name of the attribute to validate

        Returns:
            Result: Errors of all rules, in rule order

        Example:
            >>> rule_set = RuleSet([Number(max=100)])
            >>> rule_set.validate_attribute(DictDataSet({"amount": 150}), "amount").get_errors()
            ['amount must be no greater than 100.']
        """
        result = Result()
        for rule in self.rules:
            rule_result = rule.validate_attribute(data_set, attribute)
            if not rule_result.is_valid():
                logger.debug(f"Rule {rule!r} failed for attribute {attribute}")
            result.merge(rule_result)
        return result

    def validate_value(self, value: Any) -> Result:
        """
        Validate a bare value against every rule.

        Args:
            value: Value to validate

        Returns:
            Result: Errors of all rules, in rule order
        """
        result = Result()
        for rule in self.rules:
            result.merge(rule.validate_value(value))
        return result

    def validate(self, value: Any, attribute: Optional[str] = None) -> Result:
        """
        Validate a data set attribute when an attribute name is given, else a bare value.
        """
        if attribute is not None:
            return self.validate_attribute(value, attribute)
        return self.validate_value(value)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.rules!r})"
