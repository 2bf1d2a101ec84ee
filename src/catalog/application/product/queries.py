"""Product queries for CQRS implementation."""

from typing import Optional
from uuid import UUID

from catalog.application.dto.base import BaseQuery
from catalog.application.catalog.queries import EntryIdQuery


class GetProductQuery(EntryIdQuery):
    """Query to get one product."""

    product_id: Optional[UUID] = None

    @property
    def entry_id(self) -> Optional[UUID]:
        return self.product_id


class GetAllProductsQuery(BaseQuery):
    """Query to list every product."""
