"""SQLite unit of work - one connection, one transaction at a time."""
import os
import sqlite3

from catalog.domain.base.ports import UnitOfWorkPort
from catalog.infrastructure.logging import get_logger
from catalog.infrastructure.persistence.exceptions import StorageError

from .schema import initialize_schema


class SqliteUnitOfWork(UnitOfWorkPort):
    """
    Owns the connection shared by the SQLite repositories.

    Repository writes run inside the connection's open transaction and
    become visible to other connections on ``commit``.
    """

    def __init__(self, db_path: str, enable_wal: bool = True):
        self.logger = get_logger(__name__)
        self._db_path = os.path.expandvars(db_path)

        if self._db_path != ":memory:":
            db_dir = os.path.dirname(self._db_path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

        try:
            self._connection = sqlite3.connect(self._db_path)
            self._connection.row_factory = sqlite3.Row
            initialize_schema(self._connection, enable_wal=enable_wal and self._db_path != ":memory:")
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e

        self.logger.debug("SQLite database opened", db_path=self._db_path)

    @property
    def connection(self) -> sqlite3.Connection:
        return self._connection

    def commit(self) -> None:
        try:
            self._connection.commit()
        except sqlite3.Error as e:
            self._connection.rollback()
            raise StorageError(f"Database error: {str(e)}") from e
        self.logger.debug("SQLite transaction committed")

    def rollback(self) -> None:
        try:
            self._connection.rollback()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {str(e)}") from e
        self.logger.debug("SQLite transaction rolled back")

    def close(self) -> None:
        self._connection.close()
