"""
Attribute validator.

The Validator runs the rule set declared for every attribute against a data set
and assembles the per-attribute results. Evaluation never stops early: a failing
attribute does not prevent the following attributes from being validated.
Attributes present in the data set but absent from the rule specification are
ignored.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from .core.data_set import DictDataSet
from .core.result import ResultSet
from .core.types import DataSet
from .rule_set import RuleSet
from .rules.base import Rule

logger = logging.getLogger(__name__)


class Validator:
    """
    Validates data sets against rule sets keyed by attribute name.

    Attributes:
        rules (Dict[str, RuleSet]): Rule set of every declared attribute, in
            declaration order
    """

    def __init__(self, rules: Mapping[str, Union[RuleSet, Iterable[Rule]]]):
        """
        Initialize a validator.

        Args:
            rules: Rule set, or iterable of rules, for each attribute
        """
        self.rules: Dict[str, RuleSet] = {
            attribute: rule_set if isinstance(rule_set, RuleSet) else RuleSet(rule_set)
            for attribute, rule_set in rules.items()
        }

    @property
    def attributes(self) -> List[str]:
        return list(self.rules)

    def validate(self, data_set: Union[DataSet, Mapping[str, Any]]) -> ResultSet:
        """
        Validate a data set.

        Args:
            data_set: Data set to validate; a plain mapping is wrapped in a
                DictDataSet

        Returns:
            ResultSet: One sealed Result per declared attribute, in declaration order

        Example:
            >>> validator = Validator({"amount": [Number(integer_only=True), Number(max=100)]})
            >>> validator.validate({"amount": 150}).get_errors()
            {'amount': ['amount must be no greater than 100.']}
        """
        if isinstance(data_set, Mapping):
            data_set = DictDataSet(data_set)

        results = {}
        for attribute, rule_set in self.rules.items():
            result = rule_set.validate_attribute(data_set, attribute)
            result.seal()
            results[attribute] = result
            logger.debug(f"Validated attribute {attribute}: {len(result)} error(s)")

        result_set = ResultSet(results)
        if not result_set.is_valid():
            logger.debug(f"Validation failed for attributes: {list(result_set.get_errors())}")
        return result_set

    def __repr__(self) -> str:
        return f"Validator(attributes={self.attributes!r})"
