"""Mode-based publisher for catalog domain events."""
from typing import Callable, Dict, List

from catalog.domain.base.events import DomainEvent
from catalog.domain.base.ports import EventPublisherPort
from catalog.infrastructure.logging import get_logger

VALID_MODES = ("logging", "sync", "disabled")

EventHandler = Callable[[DomainEvent], None]


class ConfigurableEventPublisher(EventPublisherPort):
    """
    Event publisher selected by ``events.mode``.

    Modes:
    - "logging": write each event to the log as an audit trail
    - "sync": call the handlers registered for the event type, in order
    - "disabled": drop events

    Events are published after the command has committed, so a failing
    handler is logged and never propagates to the caller.
    """

    def __init__(self, mode: str = "logging"):
        if mode not in VALID_MODES:
            raise ValueError(f"Invalid event mode '{mode}', expected one of {list(VALID_MODES)}")

        self.mode = mode
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._logger = get_logger(__name__)

    def is_enabled(self) -> bool:
        return self.mode != "disabled"

    def publish(self, event: DomainEvent) -> None:
        if self.mode == "logging":
            self._log_event(event)
        elif self.mode == "sync":
            self._dispatch(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to events such as ``ItemArchived``."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug("Registered event handler", event_type=event_type)

    def get_registered_handlers(self) -> Dict[str, int]:
        """Handler count per event type."""
        return {event_type: len(handlers) for event_type, handlers in self._handlers.items()}

    def _log_event(self, event: DomainEvent) -> None:
        self._logger.info(
            "Domain event",
            event_type=event.event_type,
            aggregate=f"{event.aggregate_type}:{event.aggregate_id}",
            occurred_at=event.occurred_at.isoformat(),
        )

    def _dispatch(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(event.event_type, [])
        if not handlers:
            self._logger.debug("No handlers registered", event_type=event.event_type)
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    "Event handler failed",
                    event_type=event.event_type,
                    handler=getattr(handler, "__name__", repr(handler)),
                    error=str(e),
                )


def create_event_publisher(mode: str = "logging") -> ConfigurableEventPublisher:
    return ConfigurableEventPublisher(mode=mode)
