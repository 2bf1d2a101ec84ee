"""Repository interface - contract for catalog aggregate data access."""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from catalog.domain.shared.measure_type import MeasureType

from .archivable import ArchivableAggregate

T = TypeVar("T", bound=ArchivableAggregate)


class CatalogRepository(ABC, Generic[T]):
    """Persistence boundary for one kind of catalog entry.

    ``add`` and ``update`` stage changes; they become durable when the
    unit of work they were created with is committed.
    """

    @abstractmethod
    def add(self, entry: T) -> None:
        """Stage a new entry for insertion."""

    @abstractmethod
    def update(self, entry: T) -> None:
        """Stage changes to an existing entry."""

    @abstractmethod
    def get_by_id(self, entry_id: UUID) -> Optional[T]:
        """Find an entry by ID."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return every entry, archived ones included."""

    @abstractmethod
    def check_duplicate(self, name: str, measure_type: MeasureType) -> bool:
        """Check whether an entry with the same name and measure type exists."""
