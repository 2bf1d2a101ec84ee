"""Item repository interface - contract for item data access."""
from catalog.domain.base.repository import CatalogRepository

from .aggregate import Item


class ItemRepository(CatalogRepository[Item]):
    """Repository interface for item aggregates."""
