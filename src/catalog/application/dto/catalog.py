"""DTOs for catalog entries (items and products)."""
from typing import List, Optional

from catalog.domain.base.archivable import ArchivableAggregate

from .base import BaseDTO, BaseResponse


class CatalogEntryDTO(BaseDTO):
    """Read model of an item or a product."""
    id: str
    name: str
    measure_type: str
    is_archive: bool

    @classmethod
    def from_domain(cls, entry: ArchivableAggregate) -> 'CatalogEntryDTO':
        """Create DTO from domain object."""
        return cls(
            id=str(entry.id),
            name=str(entry.name),
            measure_type=str(entry.measure_type),
            is_archive=entry.is_archive,
        )


class AddEntryResponse(BaseResponse):
    """Response for a create command."""
    entry_id: Optional[str] = None
    entry: Optional[CatalogEntryDTO] = None


class GetEntryResponse(BaseResponse):
    """Response for a get-one query."""
    entry: Optional[CatalogEntryDTO] = None


class ListEntriesResponse(BaseResponse):
    """Response for a get-all query."""
    entries: List[CatalogEntryDTO] = []
    total_count: int = 0
