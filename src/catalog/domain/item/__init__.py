"""Item catalog domain."""

from .aggregate import Item
from .repository import ItemRepository

__all__ = ["Item", "ItemRepository"]
