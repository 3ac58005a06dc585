"""
Validator factory.

Builds a Validator from a declarative rule specification: a mapping of
attribute name to an ordered sequence of rule descriptors. A descriptor is
either a Rule instance or a callable taking a value and returning a Result.
Every descriptor is checked while the validator is built, so a broken
specification fails at create time rather than during validation.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional

from .core.exceptions import InvalidRuleDescriptorError
from .core.types import Translator
from .rule_set import RuleSet
from .rules.base import Rule
from .rules.callback import CallableRule
from .validator import Validator

logger = logging.getLogger(__name__)


class ValidatorFactory:
    """
    Factory turning rule specifications into validators.

    Attributes:
        translator (Optional[Translator]): Translator attached to every rule of
            the validators built by this factory
    """

    def __init__(self, translator: Optional[Translator] = None):
        self.translator = translator

    def create(self, rule_specification: Mapping[str, Any]) -> Validator:
        """
        Build a validator from a rule specification.

        Args:
            rule_specification: Attribute name mapped to a sequence of rule
                descriptors (Rule instances or callables)

        Returns:
            Validator: Validator applying the rules in declaration order

        Raises:
            InvalidRuleDescriptorError: If an entry is not a sequence of
                descriptors or a descriptor cannot be turned into a rule

        Example:
            >>> factory = ValidatorFactory()
            >>> validator = factory.create({"age": [Number(integer_only=True, min=0)]})
        """
        if not isinstance(rule_specification, Mapping):
            raise InvalidRuleDescriptorError(
                f"Rule specification must be a mapping, got {type(rule_specification).__name__}"
            )

        rule_sets = {}
        for attribute, descriptors in rule_specification.items():
            rule_sets[attribute] = RuleSet(self._build_rules(attribute, descriptors))

        logger.debug(f"Created validator for attributes: {list(rule_sets)}")
        return Validator(rule_sets)

    def _build_rules(self, attribute: str, descriptors: Any) -> List[Rule]:
        if isinstance(descriptors, (str, bytes)) or not isinstance(descriptors, Iterable):
            raise InvalidRuleDescriptorError(
                f"Rules of attribute {attribute!r} must be a sequence of rule descriptors, "
                f"got {type(descriptors).__name__}"
            )

        rules = []
        for position, descriptor in enumerate(descriptors):
            rule = self._build_rule(attribute, position, descriptor)
            if self.translator is not None:
                rule = rule.with_translator(self.translator)
            rules.append(rule)
        return rules

    def _build_rule(self, attribute: str, position: int, descriptor: Any) -> Rule:
        if isinstance(descriptor, Rule):
            return descriptor
        if callable(descriptor):
            return CallableRule(descriptor)
        raise InvalidRuleDescriptorError(
            f"Rule {position} of attribute {attribute!r} must be a Rule instance or a callable, "
            f"got {type(descriptor).__name__}"
        )
