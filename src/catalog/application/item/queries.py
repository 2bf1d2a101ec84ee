"""Item queries for CQRS implementation."""

from typing import Optional
from uuid import UUID

from catalog.application.dto.base import BaseQuery
from catalog.application.catalog.queries import EntryIdQuery


class GetItemQuery(EntryIdQuery):
    """Query to get one item."""

    item_id: Optional[UUID] = None

    @property
    def entry_id(self) -> Optional[UUID]:
        return self.item_id


class GetAllItemsQuery(BaseQuery):
    """Query to list every item."""
