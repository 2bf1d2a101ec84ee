"""Item aggregate root."""
from typing import ClassVar, Optional
from uuid import uuid4

from pydantic import Field

from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.errors import GeneralErrors
from catalog.domain.base.events import EntryCreatedEvent
from catalog.domain.base.result import Result
from catalog.domain.shared.measure_type import MeasureType


class Item(ArchivableAggregate):
    """Item aggregate root.

    Items carry their name as a plain string. Name and measure type are set
    once by ``create`` and never change; the only mutations are archive and
    unarchive.
    """

    entity_type_name: ClassVar[str] = "Item"
    error_prefix: ClassVar[str] = "item"

    name: str = Field(frozen=True)
    measure_type: MeasureType = Field(frozen=True)

    @classmethod
    def create(cls, name: Optional[str], measure_type: Optional[MeasureType]) -> Result["Item"]:
        """Create a new active item with a fresh identity."""
        if not isinstance(name, str) or not name.strip():
            return Result.fail(GeneralErrors.value_is_invalid("name"))

        if measure_type is None:
            return Result.fail(GeneralErrors.value_is_required("measure_type"))

        item = cls(id=uuid4(), name=name, measure_type=measure_type)
        item.add_domain_event(
            EntryCreatedEvent(
                event_type="ItemCreated",
                aggregate_id=str(item.id),
                aggregate_type=cls.entity_type_name,
                name=name,
                measure_type=str(measure_type),
            )
        )
        return Result.ok(item)
