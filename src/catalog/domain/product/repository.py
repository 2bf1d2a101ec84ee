"""Product repository interface - contract for product data access."""
from catalog.domain.base.repository import CatalogRepository

from .aggregate import Product


class ProductRepository(CatalogRepository[Product]):
    """Repository interface for product aggregates."""
