import pytest

from catalog.domain.base.events import EntryArchivedEvent, EntryCreatedEvent
from catalog.infrastructure.events import ConfigurableEventPublisher, create_event_publisher


class RecordingHandler:
    def __init__(self):
        self.received_events = []

    def __call__(self, event):
        self.received_events.append(event)


@pytest.fixture
def created_event():
    return EntryCreatedEvent(
        event_type="ItemCreated",
        aggregate_id="test-123",
        aggregate_type="Item",
        name="Apple",
        measure_type="weight",
    )


def test_sync_mode_calls_registered_handlers(created_event):
    # Arrange
    publisher = ConfigurableEventPublisher(mode="sync")
    handler1 = RecordingHandler()
    handler2 = RecordingHandler()
    publisher.register_handler("ItemCreated", handler1)
    publisher.register_handler("ItemCreated", handler2)

    # Act
    publisher.publish(created_event)

    # Assert
    assert handler1.received_events == [created_event]
    assert handler2.received_events == [created_event]
    assert publisher.get_registered_handlers() == {"ItemCreated": 2}


def test_handlers_only_receive_their_event_type(created_event):
    publisher = ConfigurableEventPublisher(mode="sync")
    handler = RecordingHandler()
    publisher.register_handler("ItemArchived", handler)

    publisher.publish_batch([
        created_event,
        EntryArchivedEvent(event_type="ItemArchived", aggregate_id="test-123", aggregate_type="Item"),
    ])

    assert [e.event_type for e in handler.received_events] == ["ItemArchived"]


def test_failing_handler_does_not_stop_others(created_event):
    publisher = ConfigurableEventPublisher(mode="sync")
    received = RecordingHandler()

    def failing(event):
        raise RuntimeError("handler failed")

    publisher.register_handler("ItemCreated", failing)
    publisher.register_handler("ItemCreated", received)

    publisher.publish(created_event)

    assert received.received_events == [created_event]


def test_logging_mode_does_not_call_handlers(created_event):
    publisher = create_event_publisher()
    handler = RecordingHandler()
    publisher.register_handler("ItemCreated", handler)

    publisher.publish(created_event)

    assert publisher.mode == "logging"
    assert handler.received_events == []


def test_disabled_mode():
    assert ConfigurableEventPublisher(mode="disabled").is_enabled() is False
    assert ConfigurableEventPublisher(mode="sync").is_enabled() is True


def test_invalid_mode():
    with pytest.raises(ValueError):
        ConfigurableEventPublisher(mode="async")


def test_event_defaults():
    event = EntryArchivedEvent(aggregate_id="a", aggregate_type="Item")

    assert event.event_type == "EntryArchivedEvent"
    assert event.old_status == "active"
    assert event.new_status == "archived"
    assert event.occurred_at.tzinfo is not None
