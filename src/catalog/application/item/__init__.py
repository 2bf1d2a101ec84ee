"""Item catalog use cases."""

from .commands import AddItemCommand, ArchiveItemCommand, UnarchiveItemCommand
from .handlers import (
    AddItemHandler,
    ArchiveItemHandler,
    GetAllItemsHandler,
    GetItemHandler,
    UnarchiveItemHandler,
)
from .queries import GetAllItemsQuery, GetItemQuery

__all__ = [
    "AddItemCommand",
    "AddItemHandler",
    "ArchiveItemCommand",
    "ArchiveItemHandler",
    "GetAllItemsHandler",
    "GetAllItemsQuery",
    "GetItemHandler",
    "GetItemQuery",
    "UnarchiveItemCommand",
    "UnarchiveItemHandler",
]
