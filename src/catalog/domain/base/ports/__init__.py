"""Domain ports - interfaces the infrastructure layer implements."""

from .event_publisher_port import EventPublisherPort
from .unit_of_work_port import UnitOfWorkPort

__all__ = ["EventPublisherPort", "UnitOfWorkPort"]
