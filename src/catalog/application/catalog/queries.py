"""Query shapes shared by both catalogs."""

from abc import abstractmethod
from typing import Optional
from uuid import UUID

from catalog.application.dto.base import BaseQuery


class EntryIdQuery(BaseQuery):
    """Query addressed to one existing entry."""

    @property
    @abstractmethod
    def entry_id(self) -> Optional[UUID]:
        """Id of the addressed entry, taken from the catalog-specific field."""
