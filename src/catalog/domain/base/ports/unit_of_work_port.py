"""Unit of work port - commit boundary around repository writes."""

from abc import ABC, abstractmethod


class UnitOfWorkPort(ABC):
    """Makes staged repository writes durable, or discards them."""

    @abstractmethod
    def commit(self) -> None:
        """Persist every change staged since the last commit or rollback."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change staged since the last commit or rollback."""

    def __enter__(self) -> "UnitOfWorkPort":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            self.rollback()
