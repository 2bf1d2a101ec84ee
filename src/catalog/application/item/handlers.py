"""Item command and query handlers."""

from catalog.application.catalog.handlers import (
    AddEntryHandler,
    ArchiveEntryHandler,
    GetAllEntriesHandler,
    GetEntryHandler,
    UnarchiveEntryHandler,
)
from catalog.domain.item import Item


class AddItemHandler(AddEntryHandler[Item]):
    """Handler for AddItemCommand."""
    entry_class = Item


class ArchiveItemHandler(ArchiveEntryHandler[Item]):
    """Handler for ArchiveItemCommand."""
    entry_class = Item


class UnarchiveItemHandler(UnarchiveEntryHandler[Item]):
    """Handler for UnarchiveItemCommand."""
    entry_class = Item


class GetItemHandler(GetEntryHandler[Item]):
    """Handler for GetItemQuery."""
    entry_class = Item


class GetAllItemsHandler(GetAllEntriesHandler):
    """Handler for GetAllItemsQuery."""
