"""Outbound port for domain events recorded by catalog aggregates."""

from abc import ABC, abstractmethod
from typing import List

from catalog.domain.base.events import DomainEvent


class EventPublisherPort(ABC):
    """
    Publishes the events a command handler collected from an aggregate.

    Handlers call it only after the unit of work has committed.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publish one event."""

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publish events in the order they were recorded."""

    @abstractmethod
    def is_enabled(self) -> bool:
        """False when events are dropped, so handlers can skip collecting them."""
