"""Shared kernel - value objects and rules used by every catalog."""

from .duplicates import DEFAULT_DUPLICATE_POLICY, DuplicatePolicy, MeasureTypeMatch
from .measure_type import MeasureType, MeasureTypeErrors
from .name import Name

__all__ = [
    "DEFAULT_DUPLICATE_POLICY",
    "DuplicatePolicy",
    "MeasureType",
    "MeasureTypeErrors",
    "MeasureTypeMatch",
    "Name",
]
