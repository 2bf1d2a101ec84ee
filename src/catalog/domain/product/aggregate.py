"""Product aggregate root."""
from typing import ClassVar, Optional
from uuid import uuid4

from pydantic import Field

from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.errors import GeneralErrors
from catalog.domain.base.events import EntryCreatedEvent
from catalog.domain.base.result import Result
from catalog.domain.shared.measure_type import MeasureType
from catalog.domain.shared.name import Name


class ProductName(Name):
    """Name of a product."""


class Product(ArchivableAggregate):
    """Product aggregate root.

    Same lifecycle as an item, but the name is a ``ProductName`` value object.
    """

    entity_type_name: ClassVar[str] = "Product"
    error_prefix: ClassVar[str] = "product"

    name: ProductName = Field(frozen=True)
    measure_type: MeasureType = Field(frozen=True)

    @classmethod
    def create(cls, name: Optional[str], measure_type: Optional[MeasureType]) -> Result["Product"]:
        """Create a new active product with a fresh identity."""
        name_result = ProductName.create(name)
        if name_result.is_failure:
            return Result.fail(name_result.error)

        if measure_type is None:
            return Result.fail(GeneralErrors.value_is_required("measure_type"))

        product = cls(id=uuid4(), name=name_result.value, measure_type=measure_type)
        product.add_domain_event(
            EntryCreatedEvent(
                event_type="ProductCreated",
                aggregate_id=str(product.id),
                aggregate_type=cls.entity_type_name,
                name=name,
                measure_type=str(measure_type),
            )
        )
        return Result.ok(product)
