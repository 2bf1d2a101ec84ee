"""SQLite persistence - schema, repositories and unit of work."""

from .repositories import SqliteCatalogRepository, SqliteItemRepository, SqliteProductRepository
from .schema import initialize_schema
from .unit_of_work import SqliteUnitOfWork

__all__ = [
    "SqliteCatalogRepository",
    "SqliteItemRepository",
    "SqliteProductRepository",
    "SqliteUnitOfWork",
    "initialize_schema",
]
