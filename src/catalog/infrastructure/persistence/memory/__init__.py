"""In-memory persistence - dict-backed repositories and a staging unit of work."""

from .repositories import MemoryCatalogRepository, MemoryItemRepository, MemoryProductRepository
from .unit_of_work import MemoryUnitOfWork

__all__ = [
    "MemoryCatalogRepository",
    "MemoryItemRepository",
    "MemoryProductRepository",
    "MemoryUnitOfWork",
]
