"""Measure type - the closed set of ways an entry is measured."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from catalog.domain.base.result import Error, ErrorKind, Result


@dataclass(frozen=True)
class MeasureType:
    """Unit family of a catalog entry.

    The set of members is fixed: ``WEIGHT`` and ``LIQUID``. Adding a unit
    means adding a member here, not subclassing. Members compare by id.
    """

    id: int
    name: str = field(compare=False)

    WEIGHT: ClassVar[MeasureType]
    LIQUID: ClassVar[MeasureType]

    @classmethod
    def list(cls) -> List[MeasureType]:
        """All members, in id order."""
        return [cls.WEIGHT, cls.LIQUID]

    @classmethod
    def from_id(cls, measure_type_id: Optional[int]) -> Result[MeasureType]:
        # bool is an int subclass and 2.0 == 2, neither is an id
        if type(measure_type_id) is not int:
            return Result.fail(MeasureTypeErrors.unknown_type())

        for member in cls.list():
            if member.id == measure_type_id:
                return Result.ok(member)
        return Result.fail(MeasureTypeErrors.unknown_type())

    @classmethod
    def from_name(cls, name: Optional[str]) -> Result[MeasureType]:
        if not isinstance(name, str) or not name:
            return Result.fail(MeasureTypeErrors.unknown_type())

        for member in cls.list():
            if member.matches_name(name):
                return Result.ok(member)
        return Result.fail(MeasureTypeErrors.unknown_type())

    def matches_name(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()

    def __str__(self) -> str:
        return self.name


MeasureType.WEIGHT = MeasureType(1, "weight")
MeasureType.LIQUID = MeasureType(2, "liquid")


class MeasureTypeErrors:
    """Errors produced while resolving a measure type."""

    @staticmethod
    def unknown_type() -> Error:
        names = ",".join(member.name for member in MeasureType.list())
        return Error(
            "unknown.measure.type",
            f"Possible values for MeasureType: {names}",
            ErrorKind.UNKNOWN_MEASURE_TYPE,
        )
