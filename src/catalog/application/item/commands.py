"""Item commands for CQRS implementation."""

from typing import Optional
from uuid import UUID

from catalog.application.catalog.commands import AddEntryCommand, EntryIdCommand


class AddItemCommand(AddEntryCommand):
    """Command to create an item."""


class ArchiveItemCommand(EntryIdCommand):
    """Command to archive an item."""

    item_id: Optional[UUID] = None

    @property
    def entry_id(self) -> Optional[UUID]:
        return self.item_id


class UnarchiveItemCommand(EntryIdCommand):
    """Command to unarchive an item."""

    item_id: Optional[UUID] = None

    @property
    def entry_id(self) -> Optional[UUID]:
        return self.item_id
