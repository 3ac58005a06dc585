"""
Data set implementations.

A data set exposes the values under validation by attribute name. Looking up an
absent attribute returns None, while has_attribute tells absence and an explicit
None apart.
"""

from typing import Any, Dict, Iterator, Mapping


class DictDataSet:
    """
    Data set backed by a mapping.

    The mapping is copied on construction so that later changes made by the
    caller cannot leak into a running validation pass.

    Attributes:
        values (Dict[str, Any]): Attribute values keyed by attribute name
    """

    def __init__(self, values: Mapping[str, Any]):
        self.values: Dict[str, Any] = dict(values)

    def get_value(self, attribute: str) -> Any:
        return self.values.get(attribute)

    def has_attribute(self, attribute: str) -> bool:
        return attribute in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"DictDataSet({self.values!r})"
