"""SQLite catalog repositories."""
import sqlite3
from abc import abstractmethod
from typing import List, Optional, TypeVar
from uuid import UUID

from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.repository import CatalogRepository
from catalog.domain.item import Item, ItemRepository
from catalog.domain.product import Product, ProductName, ProductRepository
from catalog.domain.shared.duplicates import DEFAULT_DUPLICATE_POLICY, DuplicatePolicy, MeasureTypeMatch
from catalog.domain.shared.measure_type import MeasureType
from catalog.infrastructure.logging import get_logger
from catalog.infrastructure.persistence.exceptions import StorageError, UniqueConstraintError

from .unit_of_work import SqliteUnitOfWork

T = TypeVar("T", bound=ArchivableAggregate)


class SqliteCatalogRepository(CatalogRepository[T]):
    """
    SQLite repository for one catalog table.

    Subclasses name the table and map rows back to aggregates.
    """

    table_name: str = ""

    def __init__(self, unit_of_work: SqliteUnitOfWork, policy: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY):
        self.logger = get_logger(__name__)
        self._unit_of_work = unit_of_work
        self._policy = policy

    @property
    def _conn(self) -> sqlite3.Connection:
        return self._unit_of_work.connection

    @abstractmethod
    def _to_entity(self, row: sqlite3.Row) -> T:
        """Rebuild an aggregate from a table row."""

    def add(self, entry: T) -> None:
        name = str(entry.name)
        try:
            self._conn.execute(
                f"""
                INSERT INTO {self.table_name}
                (id, name, normalized_name, measure_type_id, is_archive)
                VALUES (?, ?, ?, ?, ?)
                """,
                (str(entry.id), name, self._policy.normalize(name),
                 entry.measure_type.id, int(entry.is_archive)),
            )
        except sqlite3.IntegrityError as e:
            if "normalized_name" in str(e):
                raise UniqueConstraintError(
                    f"{entry.entity_type_name} violates unique (name, measure type)",
                    name=name,
                    measure_type=str(entry.measure_type),
                ) from e
            raise StorageError(f"Database error: {str(e)}") from e
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e

        self.logger.debug("Inserted row", table=self.table_name, entry_id=str(entry.id))

    def update(self, entry: T) -> None:
        try:
            cursor = self._conn.execute(
                f"UPDATE {self.table_name} SET is_archive = ? WHERE id = ?",
                (int(entry.is_archive), str(entry.id)),
            )
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e

        if cursor.rowcount == 0:
            raise StorageError(f"{entry.entity_type_name} with ID {entry.id} is not stored")
        self.logger.debug("Updated row", table=self.table_name, entry_id=str(entry.id))

    def get_by_id(self, entry_id: UUID) -> Optional[T]:
        try:
            row = self._conn.execute(
                f"SELECT id, name, measure_type_id, is_archive FROM {self.table_name} WHERE id = ?",
                (str(entry_id),),
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e
        return self._to_entity(row) if row else None

    def get_all(self) -> List[T]:
        try:
            rows = self._conn.execute(
                f"SELECT id, name, measure_type_id, is_archive FROM {self.table_name} ORDER BY rowid"
            ).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e
        return [self._to_entity(row) for row in rows]

    def check_duplicate(self, name: str, measure_type: MeasureType) -> bool:
        if self._policy.match_measure_type_by is MeasureTypeMatch.NAME:
            query = f"""
                SELECT 1 FROM {self.table_name} t
                JOIN measure_types mt ON mt.id = t.measure_type_id
                WHERE t.normalized_name = ? AND lower(mt.name) = lower(?)
                LIMIT 1
            """
            params = (self._policy.normalize(str(name)), measure_type.name)
        else:
            query = f"""
                SELECT 1 FROM {self.table_name}
                WHERE normalized_name = ? AND measure_type_id = ?
                LIMIT 1
            """
            params = (self._policy.normalize(str(name)), measure_type.id)

        try:
            return self._conn.execute(query, params).fetchone() is not None
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e

    def _measure_type(self, measure_type_id: int) -> MeasureType:
        result = MeasureType.from_id(measure_type_id)
        if result.is_failure:
            raise StorageError(f"Unknown measure_type_id {measure_type_id} in {self.table_name}")
        return result.value


class SqliteItemRepository(SqliteCatalogRepository[Item], ItemRepository):
    """SQLite item repository."""

    table_name = "items"

    def _to_entity(self, row: sqlite3.Row) -> Item:
        return Item(
            id=UUID(row["id"]),
            name=row["name"],
            measure_type=self._measure_type(row["measure_type_id"]),
            is_archive=bool(row["is_archive"]),
        )


class SqliteProductRepository(SqliteCatalogRepository[Product], ProductRepository):
    """SQLite product repository."""

    table_name = "products"

    def _to_entity(self, row: sqlite3.Row) -> Product:
        return Product(
            id=UUID(row["id"]),
            name=ProductName(row["name"]),
            measure_type=self._measure_type(row["measure_type_id"]),
            is_archive=bool(row["is_archive"]),
        )
