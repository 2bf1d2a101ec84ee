"""Product command and query handlers."""

from catalog.application.catalog.handlers import (
    AddEntryHandler,
    ArchiveEntryHandler,
    GetAllEntriesHandler,
    GetEntryHandler,
    UnarchiveEntryHandler,
)
from catalog.domain.product import Product


class AddProductHandler(AddEntryHandler[Product]):
    """Handler for AddProductCommand."""
    entry_class = Product


class ArchiveProductHandler(ArchiveEntryHandler[Product]):
    """Handler for ArchiveProductCommand."""
    entry_class = Product


class UnarchiveProductHandler(UnarchiveEntryHandler[Product]):
    """Handler for UnarchiveProductCommand."""
    entry_class = Product


class GetProductHandler(GetEntryHandler[Product]):
    """Handler for GetProductQuery."""
    entry_class = Product


class GetAllProductsHandler(GetAllEntriesHandler):
    """Handler for GetAllProductsQuery."""
