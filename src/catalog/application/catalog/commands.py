"""Command shapes shared by both catalogs."""

from abc import abstractmethod
from typing import Optional, Union
from uuid import UUID

from catalog.application.dto.base import BaseCommand


class AddEntryCommand(BaseCommand):
    """Create an entry. ``measure_type`` is an id (``1``) or a name (``"weight"``)."""

    name: Optional[str] = None
    measure_type: Optional[Union[int, str]] = None


class EntryIdCommand(BaseCommand):
    """Command addressed to one existing entry."""

    @property
    @abstractmethod
    def entry_id(self) -> Optional[UUID]:
        """Id of the addressed entry, taken from the catalog-specific field."""
