"""In-memory unit of work."""
from typing import Callable, Dict, List, Tuple

from catalog.domain.base.ports import UnitOfWorkPort
from catalog.infrastructure.logging import get_logger
from catalog.infrastructure.persistence.exceptions import PersistenceError


class MemoryUnitOfWork(UnitOfWorkPort):
    """
    Stages repository writes and applies them on commit.

    Writes from every repository sharing this unit of work are applied in
    the order they were staged. If one of them fails the stores touched by
    the commit are restored, so a commit is all or nothing.
    """

    def __init__(self):
        self.logger = get_logger(__name__)
        self._operations: List[Tuple[object, Callable[[], None]]] = []

    @property
    def pending_count(self) -> int:
        return len(self._operations)

    def register(self, repository, operation: Callable[[], None]) -> None:
        """Stage an operation against ``repository``."""
        self._operations.append((repository, operation))

    def commit(self) -> None:
        snapshots: Dict[int, Tuple[object, dict]] = {}
        for repository, _ in self._operations:
            if id(repository) not in snapshots:
                snapshots[id(repository)] = (repository, repository.snapshot())

        count = len(self._operations)
        try:
            for _, operation in self._operations:
                operation()
        except PersistenceError as e:
            for repository, store in snapshots.values():
                repository.restore(store)
            self.logger.error("Memory commit failed, changes discarded", error=str(e))
            raise
        finally:
            self._operations.clear()

        self.logger.debug("Memory unit of work committed", operations=count)

    def rollback(self) -> None:
        count = len(self._operations)
        self._operations.clear()
        self.logger.debug("Memory unit of work rolled back", operations=count)
