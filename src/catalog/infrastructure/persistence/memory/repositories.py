"""Dict-backed catalog repositories."""
from typing import Dict, List, Optional, TypeVar
from uuid import UUID

from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.repository import CatalogRepository
from catalog.domain.item import Item, ItemRepository
from catalog.domain.product import Product, ProductRepository
from catalog.domain.shared.duplicates import DEFAULT_DUPLICATE_POLICY, DuplicatePolicy
from catalog.domain.shared.measure_type import MeasureType
from catalog.infrastructure.logging import get_logger
from catalog.infrastructure.persistence.exceptions import StorageError, UniqueConstraintError

from .unit_of_work import MemoryUnitOfWork

T = TypeVar("T", bound=ArchivableAggregate)


class MemoryCatalogRepository(CatalogRepository[T]):
    """
    In-memory repository for one kind of catalog entry.

    Entries are stored as copies: a caller mutating an aggregate it loaded
    does not change what is stored until it calls ``update`` and commits.
    The duplicate policy is enforced again when an insert is applied, the
    way a unique index would.
    """

    def __init__(self, unit_of_work: MemoryUnitOfWork, policy: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY):
        self.logger = get_logger(__name__)
        self._unit_of_work = unit_of_work
        self._policy = policy
        self._store: Dict[UUID, T] = {}

    def add(self, entry: T) -> None:
        staged = _detached_copy(entry)
        self._unit_of_work.register(self, lambda: self._insert(staged))
        self.logger.debug("Staged insert", entry_type=entry.entity_type_name, entry_id=str(entry.id))

    def update(self, entry: T) -> None:
        staged = _detached_copy(entry)
        self._unit_of_work.register(self, lambda: self._replace(staged))
        self.logger.debug("Staged update", entry_type=entry.entity_type_name, entry_id=str(entry.id))

    def get_by_id(self, entry_id: UUID) -> Optional[T]:
        entry = self._store.get(entry_id)
        return _detached_copy(entry) if entry is not None else None

    def get_all(self) -> List[T]:
        return [_detached_copy(entry) for entry in self._store.values()]

    def check_duplicate(self, name: str, measure_type: MeasureType) -> bool:
        return self._policy.is_duplicate(str(name), measure_type, self._store.values())

    def snapshot(self) -> Dict[UUID, T]:
        return dict(self._store)

    def restore(self, store: Dict[UUID, T]) -> None:
        self._store = dict(store)

    def _insert(self, entry: T) -> None:
        if entry.id in self._store:
            raise StorageError(f"{entry.entity_type_name} with ID {entry.id} already stored")
        if self._policy.is_duplicate(str(entry.name), entry.measure_type, self._store.values()):
            raise UniqueConstraintError(
                f"{entry.entity_type_name} violates unique (name, measure type)",
                name=str(entry.name),
                measure_type=str(entry.measure_type),
            )
        self._store[entry.id] = entry

    def _replace(self, entry: T) -> None:
        if entry.id not in self._store:
            raise StorageError(f"{entry.entity_type_name} with ID {entry.id} is not stored")
        self._store[entry.id] = entry


class MemoryItemRepository(MemoryCatalogRepository[Item], ItemRepository):
    """In-memory item repository."""


class MemoryProductRepository(MemoryCatalogRepository[Product], ProductRepository):
    """In-memory product repository."""


def _detached_copy(entry: T) -> T:
    copy = entry.model_copy(deep=True)
    copy.clear_domain_events()
    return copy
