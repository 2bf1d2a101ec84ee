from uuid import UUID

import pytest

from catalog.domain.base.events import EntryCreatedEvent
from catalog.domain.base.result import ErrorKind
from catalog.domain.item import Item


def test_create_item(weight):
    # Act
    result = Item.create("Apple", weight)

    # Assert
    assert result.is_success
    item = result.value
    assert item.name == "Apple"
    assert item.measure_type == weight
    assert item.is_archive is False
    assert isinstance(item.id, UUID)
    assert item.id != UUID(int=0)


def test_create_assigns_distinct_ids(weight):
    ids = {Item.create("Apple", weight).value.id for _ in range(20)}

    assert len(ids) == 20


@pytest.mark.parametrize("name", [None, "", " ", "\t"])
def test_create_rejects_blank_name(name, weight):
    result = Item.create(name, weight)

    assert result.is_failure
    assert result.error.kind == ErrorKind.VALUE_INVALID
    assert "name" in result.error.message


def test_create_requires_measure_type():
    result = Item.create("Apple", None)

    assert result.is_failure
    assert result.error.kind == ErrorKind.VALUE_REQUIRED
    assert result.error.code == "value.is.required"
    assert "measure_type" in result.error.message


def test_name_is_checked_before_measure_type():
    result = Item.create("", None)

    assert result.error.kind == ErrorKind.VALUE_INVALID


def test_create_records_created_event(weight):
    item = Item.create("Apple", weight).value

    events = item.get_domain_events()

    assert len(events) == 1
    assert isinstance(events[0], EntryCreatedEvent)
    assert events[0].event_type == "ItemCreated"
    assert events[0].aggregate_id == str(item.id)
    assert events[0].measure_type == "weight"
