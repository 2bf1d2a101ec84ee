"""Base event classes - foundation for domain events raised by aggregates."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=_utcnow)
    event_type: str
    aggregate_id: str
    aggregate_type: str
    version: int = 1
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if 'event_type' not in data or not data['event_type']:
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class StatusChangeEvent(DomainEvent):
    """Base class for events that track status transitions."""
    old_status: str
    new_status: str
    reason: Optional[str] = None


class EntryCreatedEvent(DomainEvent):
    """A catalog entry was created through its factory."""
    name: str
    measure_type: str


class EntryArchivedEvent(StatusChangeEvent):
    """A catalog entry moved from active to archived."""
    old_status: str = "active"
    new_status: str = "archived"


class EntryUnarchivedEvent(StatusChangeEvent):
    """A catalog entry moved from archived back to active."""
    old_status: str = "archived"
    new_status: str = "active"
