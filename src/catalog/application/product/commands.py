"""Product commands for CQRS implementation."""

from typing import Optional
from uuid import UUID

from catalog.application.catalog.commands import AddEntryCommand, EntryIdCommand


class AddProductCommand(AddEntryCommand):
    """Command to create a product."""


class ArchiveProductCommand(EntryIdCommand):
    """Command to archive a product."""

    product_id: Optional[UUID] = None

    @property
    def entry_id(self) -> Optional[UUID]:
        return self.product_id


class UnarchiveProductCommand(EntryIdCommand):
    """Command to unarchive a product."""

    product_id: Optional[UUID] = None

    @property
    def entry_id(self) -> Optional[UUID]:
        return self.product_id
