"""Duplicate rule for catalog entries.

Two entries are duplicates when their names match and their measure types
match. How names and measure types are compared is a policy:

- names are compared case-insensitively unless ``case_sensitive`` is set;
- measure types are compared by id or by name.

Archived entries are compared like any other entry.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from .measure_type import MeasureType


class MeasureTypeMatch(str, Enum):
    """How two measure types are compared by the duplicate rule."""
    ID = "id"
    NAME = "name"


@dataclass(frozen=True)
class DuplicatePolicy:
    """Uniqueness policy over (name, measure type)."""

    case_sensitive: bool = False
    match_measure_type_by: MeasureTypeMatch = MeasureTypeMatch.ID

    def normalize(self, name: str) -> str:
        return name if self.case_sensitive else name.lower()

    def names_match(self, left: str, right: str) -> bool:
        return self.normalize(str(left)) == self.normalize(str(right))

    def measure_types_match(self, left: MeasureType, right: MeasureType) -> bool:
        if self.match_measure_type_by is MeasureTypeMatch.NAME:
            return left.matches_name(right.name)
        return left.id == right.id

    def matches(self, entry: Any, name: str, measure_type: MeasureType) -> bool:
        """Check one entry (anything with ``name`` and ``measure_type``)."""
        return (
            self.names_match(entry.name, name)
            and self.measure_types_match(entry.measure_type, measure_type)
        )

    def is_duplicate(self, name: str, measure_type: MeasureType, existing: Iterable[Any]) -> bool:
        return any(self.matches(entry, name, measure_type) for entry in existing)


DEFAULT_DUPLICATE_POLICY = DuplicatePolicy()
