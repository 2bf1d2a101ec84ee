"""Identity-bearing domain objects and aggregate roots."""
from abc import ABC
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .events import DomainEvent


class Entity(BaseModel, ABC):
    """
    Mutable pydantic model identified by a UUID.

    Assignments are validated, and two entities of the same class are
    equal when their ids are, whatever their other fields hold.
    """
    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    id: UUID = Field(frozen=True)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__, self.id))


class AggregateRoot(Entity):
    """Entity that records domain events until a handler publishes them."""

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        """Recorded events, oldest first. The returned list is a copy."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()
