"""Measure aggregate root and its name value objects."""
from __future__ import annotations

from typing import ClassVar, Optional
from uuid import uuid4

from pydantic import Field

from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.errors import GeneralErrors
from catalog.domain.base.events import EntryCreatedEvent
from catalog.domain.base.result import Result
from catalog.domain.shared.measure_type import MeasureType
from catalog.domain.shared.name import Name


class MeasureFullName(Name):
    """Full, human readable name of a measure, e.g. ``kilogram``."""


class MeasureShortName(Name):
    """Abbreviated name of a measure, e.g. ``kg``."""

    MAX_LENGTH: ClassVar[int] = 6

    @classmethod
    def create(cls, raw: Optional[str]) -> Result[MeasureShortName]:
        result = super().create(raw)
        if result.is_failure:
            return result
        if len(raw) > cls.MAX_LENGTH:
            return Result.fail(GeneralErrors.value_is_too_long(cls.MAX_LENGTH, raw))
        return result


class Measure(ArchivableAggregate):
    """A concrete unit (kilogram, litre, ...) belonging to a measure type."""

    entity_type_name: ClassVar[str] = "Measure"
    error_prefix: ClassVar[str] = "measure"

    full_name: MeasureFullName = Field(frozen=True)
    short_name: MeasureShortName = Field(frozen=True)
    measure_type: MeasureType = Field(frozen=True)

    @property
    def name(self) -> MeasureFullName:
        return self.full_name

    @classmethod
    def create(
        cls,
        full_name: Optional[MeasureFullName],
        short_name: Optional[MeasureShortName],
        measure_type: Optional[MeasureType],
    ) -> Result[Measure]:
        if full_name is None:
            return Result.fail(GeneralErrors.value_is_required("full_name"))
        if short_name is None:
            return Result.fail(GeneralErrors.value_is_required("short_name"))
        if measure_type is None:
            return Result.fail(GeneralErrors.value_is_required("measure_type"))

        measure = cls(
            id=uuid4(),
            full_name=full_name,
            short_name=short_name,
            measure_type=measure_type,
        )
        measure.add_domain_event(
            EntryCreatedEvent(
                event_type="MeasureCreated",
                aggregate_id=str(measure.id),
                aggregate_type=cls.entity_type_name,
                name=str(full_name),
                measure_type=str(measure_type),
            )
        )
        return Result.ok(measure)
