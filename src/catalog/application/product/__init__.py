"""Product catalog use cases."""

from .commands import AddProductCommand, ArchiveProductCommand, UnarchiveProductCommand
from .handlers import (
    AddProductHandler,
    ArchiveProductHandler,
    GetAllProductsHandler,
    GetProductHandler,
    UnarchiveProductHandler,
)
from .queries import GetAllProductsQuery, GetProductQuery

__all__ = [
    "AddProductCommand",
    "AddProductHandler",
    "ArchiveProductCommand",
    "ArchiveProductHandler",
    "GetAllProductsHandler",
    "GetAllProductsQuery",
    "GetProductHandler",
    "GetProductQuery",
    "UnarchiveProductCommand",
    "UnarchiveProductHandler",
]
