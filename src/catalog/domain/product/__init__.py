"""Product catalog domain."""

from .aggregate import Product, ProductName
from .repository import ProductRepository

__all__ = ["Product", "ProductName", "ProductRepository"]
