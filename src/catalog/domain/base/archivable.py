"""Archivable aggregate - shared archive/unarchive lifecycle.

An archivable aggregate is either active or archived. It starts active.
Archiving an archived aggregate, or unarchiving an active one, is rejected
with a typed error and leaves the state untouched: the transitions are
strict, never silently idempotent.
"""
from typing import ClassVar

from .entity import AggregateRoot
from .errors import ArchivationErrors
from .events import EntryArchivedEvent, EntryUnarchivedEvent
from .result import Result


class ArchivableAggregate(AggregateRoot):
    """Aggregate root with a two-state archive lifecycle.

    Concrete aggregates declare ``entity_type_name`` (used in error messages
    and event types) and ``error_prefix`` (used in error codes).
    """

    entity_type_name: ClassVar[str] = "Record"
    error_prefix: ClassVar[str] = "record"

    is_archive: bool = False

    def make_archive(self) -> Result[None]:
        """Move from active to archived."""
        if self.is_archive:
            return Result.fail(
                ArchivationErrors.already_archived(
                    self.id, self.entity_type_name, self.error_prefix
                )
            )

        self.is_archive = True
        self.add_domain_event(
            EntryArchivedEvent(
                event_type=f"{self.entity_type_name}Archived",
                aggregate_id=str(self.id),
                aggregate_type=self.entity_type_name,
            )
        )
        return Result.ok()

    def make_unarchive(self) -> Result[None]:
        """Move from archived back to active."""
        if not self.is_archive:
            return Result.fail(
                ArchivationErrors.already_unarchived(
                    self.id, self.entity_type_name, self.error_prefix
                )
            )

        self.is_archive = False
        self.add_domain_event(
            EntryUnarchivedEvent(
                event_type=f"{self.entity_type_name}Unarchived",
                aggregate_id=str(self.id),
                aggregate_type=self.entity_type_name,
            )
        )
        return Result.ok()

    @property
    def is_active(self) -> bool:
        return not self.is_archive
