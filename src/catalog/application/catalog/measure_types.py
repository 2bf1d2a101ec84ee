"""Resolve the measure type given on a command."""
from typing import Optional, Union

from catalog.domain.base.result import Result
from catalog.domain.shared.measure_type import MeasureType, MeasureTypeErrors


def resolve_measure_type(raw: Optional[Union[int, str]]) -> Result[Optional[MeasureType]]:
    """
    Resolve a measure type from its id or its name.

    ``None`` resolves to ``None`` so the aggregate factory can report the
    missing value. Digit strings such as ``"2"`` are treated as ids.
    """
    if raw is None:
        return Result.ok(None)
    if isinstance(raw, int):
        return MeasureType.from_id(raw)
    if isinstance(raw, str) and raw.strip().isdigit():
        return MeasureType.from_id(int(raw.strip()))
    return MeasureType.from_name(raw)
