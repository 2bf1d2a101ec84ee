"""
Generic catalog handlers.

Each catalog binds these to its aggregate class and repository; the flow
is identical for items and products.
"""
from abc import abstractmethod
from typing import Generic, Optional, Type, TypeVar
from uuid import UUID

from catalog.application.base.handlers import BaseCommandHandler, BaseQueryHandler
from catalog.application.dto.base import BaseResponse
from catalog.application.dto.catalog import (
    AddEntryResponse,
    CatalogEntryDTO,
    GetEntryResponse,
    ListEntriesResponse,
)
from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.errors import CatalogErrors, GeneralErrors
from catalog.domain.base.ports import EventPublisherPort, UnitOfWorkPort
from catalog.domain.base.repository import CatalogRepository
from catalog.domain.base.result import Error, Result
from catalog.infrastructure.persistence.exceptions import PersistenceError, UniqueConstraintError

from .commands import AddEntryCommand, EntryIdCommand
from .measure_types import resolve_measure_type
from .queries import EntryIdQuery

T = TypeVar("T", bound=ArchivableAggregate)


def _validate_entry_id(entry_id: Optional[UUID], field_name: str) -> Optional[Error]:
    if entry_id is None or entry_id == UUID(int=0):
        return GeneralErrors.value_is_required(field_name)
    return None


class AddEntryHandler(BaseCommandHandler[AddEntryCommand, AddEntryResponse], Generic[T]):
    """
    Create an entry unless one with the same name and measure type exists.

    The repository check fails fast; the storage unique constraint catches
    a concurrent create that slipped past it.
    """

    entry_class: Type[ArchivableAggregate] = ArchivableAggregate

    def __init__(
        self,
        repository: CatalogRepository[T],
        unit_of_work: UnitOfWorkPort,
        event_publisher: Optional[EventPublisherPort] = None,
        logger=None,
    ):
        super().__init__(event_publisher, logger)
        self._repository = repository
        self._unit_of_work = unit_of_work

    async def execute_command(self, command: AddEntryCommand) -> AddEntryResponse:
        if not isinstance(command, AddEntryCommand):
            return AddEntryResponse.failure(GeneralErrors.incorrect_command())

        measure_type_result = resolve_measure_type(command.measure_type)
        if measure_type_result.is_failure:
            return AddEntryResponse.failure(measure_type_result.error)

        entry_result: Result[T] = self.entry_class.create(command.name, measure_type_result.value)
        if entry_result.is_failure:
            return AddEntryResponse.failure(entry_result.error)
        entry = entry_result.value

        if self._repository.check_duplicate(str(entry.name), entry.measure_type):
            return AddEntryResponse.failure(self._duplicate_error(entry))

        try:
            self._repository.add(entry)
            self._unit_of_work.commit()
        except UniqueConstraintError:
            self._unit_of_work.rollback()
            self.logger.warning("Unique constraint rejected insert", entry_id=str(entry.id))
            return AddEntryResponse.failure(self._duplicate_error(entry))
        except PersistenceError:
            self._unit_of_work.rollback()
            raise

        self.publish_events(entry)
        return AddEntryResponse(
            entry_id=str(entry.id),
            entry=CatalogEntryDTO.from_domain(entry),
            message=f"{entry.entity_type_name} created",
        )

    def _duplicate_error(self, entry: T) -> Error:
        return CatalogErrors.same_name_and_measure_type_exists(
            entry.entity_type_name, str(entry.name), entry.measure_type
        )


class _ChangeArchiveStateHandler(BaseCommandHandler[EntryIdCommand, BaseResponse], Generic[T]):
    """Load an entry, apply one lifecycle transition and save it."""

    entry_class: Type[ArchivableAggregate] = ArchivableAggregate

    def __init__(
        self,
        repository: CatalogRepository[T],
        unit_of_work: UnitOfWorkPort,
        event_publisher: Optional[EventPublisherPort] = None,
        logger=None,
    ):
        super().__init__(event_publisher, logger)
        self._repository = repository
        self._unit_of_work = unit_of_work

    @abstractmethod
    def transition(self, entry: T) -> Result[None]:
        """Apply the lifecycle change to a loaded entry."""

    async def execute_command(self, command: EntryIdCommand) -> BaseResponse:
        if not isinstance(command, EntryIdCommand):
            return BaseResponse.failure(GeneralErrors.incorrect_command())

        error = _validate_entry_id(command.entry_id, f"{self.entry_class.error_prefix}_id")
        if error:
            return BaseResponse.failure(error)

        entry = self._repository.get_by_id(command.entry_id)
        if entry is None:
            return BaseResponse.failure(
                CatalogErrors.not_exists(command.entry_id, self.entry_class.entity_type_name)
            )

        result = self.transition(entry)
        if result.is_failure:
            return BaseResponse.failure(result.error)

        try:
            self._repository.update(entry)
            self._unit_of_work.commit()
        except PersistenceError:
            self._unit_of_work.rollback()
            raise

        self.publish_events(entry)
        return BaseResponse(message=self.success_message(entry))

    @abstractmethod
    def success_message(self, entry: T) -> str:
        """Message returned once the change is committed."""


class ArchiveEntryHandler(_ChangeArchiveStateHandler[T]):
    """Archive an active entry."""

    def transition(self, entry: T) -> Result[None]:
        return entry.make_archive()

    def success_message(self, entry: T) -> str:
        return f"{entry.entity_type_name} {entry.id} archived"


class UnarchiveEntryHandler(_ChangeArchiveStateHandler[T]):
    """Restore an archived entry."""

    def transition(self, entry: T) -> Result[None]:
        return entry.make_unarchive()

    def success_message(self, entry: T) -> str:
        return f"{entry.entity_type_name} {entry.id} unarchived"


class GetEntryHandler(BaseQueryHandler[EntryIdQuery, GetEntryResponse], Generic[T]):
    """Fetch one entry by id."""

    entry_class: Type[ArchivableAggregate] = ArchivableAggregate

    def __init__(self, repository: CatalogRepository[T], logger=None):
        super().__init__(logger)
        self._repository = repository

    async def execute_query(self, query: EntryIdQuery) -> GetEntryResponse:
        error = _validate_entry_id(query.entry_id, f"{self.entry_class.error_prefix}_id")
        if error:
            return GetEntryResponse.failure(error)

        entry = self._repository.get_by_id(query.entry_id)
        if entry is None:
            return GetEntryResponse.failure(
                CatalogErrors.not_exists(query.entry_id, self.entry_class.entity_type_name)
            )
        return GetEntryResponse(entry=CatalogEntryDTO.from_domain(entry))


class GetAllEntriesHandler(BaseQueryHandler):
    """Fetch every entry of a catalog, archived ones included."""

    def __init__(self, repository: CatalogRepository, logger=None):
        super().__init__(logger)
        self._repository = repository

    async def execute_query(self, query) -> ListEntriesResponse:
        entries = [CatalogEntryDTO.from_domain(entry) for entry in self._repository.get_all()]
        return ListEntriesResponse(entries=entries, total_count=len(entries))
