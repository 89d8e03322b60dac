"""
Weight tables for boundary scoring.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union


class FeatureKey(str, Enum):
    """Feature categories a weight table may contain."""

    UW1 = "UW1"  # character at i-3
    UW2 = "UW2"  # character at i-2
    UW3 = "UW3"  # character at i-1
    UW4 = "UW4"  # character at i
    UW5 = "UW5"  # character at i+1
    UW6 = "UW6"  # character at i+2
    BW1 = "BW1"  # pair i-2..i
    BW2 = "BW2"  # pair i-1..i+1
    BW3 = "BW3"  # pair i..i+2
    TW1 = "TW1"  # triple i-3..i
    TW2 = "TW2"  # triple i-2..i+1
    TW3 = "TW3"  # triple i-1..i+2
    TW4 = "TW4"  # triple i..i+3
    BASE = "BASE"

    @classmethod
    def parse(cls, name: str) -> "FeatureKey":
        """Resolve a category name, raising ValueError for unknown names."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown feature category: {name!r}") from None


# Feature value used by BASE and by windows that start before the text.
EMPTY = ""

Weights = Mapping[str, int]


class Model:
    """Immutable feature category -> (feature value -> weight) table.

    Absent categories and values weigh zero, so lookups never fail. The
    table is frozen on construction and may be shared between parsers and
    threads; build a new Model to change weights.
    """

    __slots__ = ("_table",)

    def __init__(
        self,
        weights: Optional[Mapping[Union[FeatureKey, str], Mapping[str, int]]] = None,
    ):
        table: Dict[FeatureKey, Weights] = {}
        for category, values in (weights or {}).items():
            key = category if isinstance(category, FeatureKey) else FeatureKey.parse(category)
            table[key] = MappingProxyType(dict(values))
        self._table: Mapping[FeatureKey, Weights] = MappingProxyType(table)

    def get(self, category: Union[FeatureKey, str], value: str) -> int:
        """Weight of ``value`` under ``category``; 0 when absent."""
        if not isinstance(category, FeatureKey):
            try:
                category = FeatureKey(category)
            except ValueError:
                return 0
        group = self._table.get(category)
        if group is None:
            return 0
        return group.get(value, 0)

    def weights(self, category: FeatureKey) -> Weights:
        return self._table.get(category, MappingProxyType({}))

    def categories(self) -> Iterator[FeatureKey]:
        return iter(self._table)

    def has_base(self) -> bool:
        return FeatureKey.BASE in self._table

    def total_weight(self) -> int:
        """Sum of every weight in the table."""
        return sum(sum(group.values()) for group in self._table.values())

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {key.value: dict(group) for key, group in self._table.items()}

    def __len__(self) -> int:
        return sum(len(group) for group in self._table.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        names = ", ".join(key.value for key in self._table)
        return f"Model(categories=[{names}], entries={len(self)})"
