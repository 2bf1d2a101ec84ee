"""Data transfer objects for the application layer."""

from .base import BaseCommand, BaseDTO, BaseQuery, BaseResponse
from .catalog import AddEntryResponse, CatalogEntryDTO, GetEntryResponse, ListEntriesResponse

__all__ = [
    "AddEntryResponse",
    "BaseCommand",
    "BaseDTO",
    "BaseQuery",
    "BaseResponse",
    "CatalogEntryDTO",
    "GetEntryResponse",
    "ListEntriesResponse",
]
