import pytest

from catalog.domain.item import Item
from catalog.infrastructure.persistence.exceptions import StorageError, UniqueConstraintError


class TestMemoryRepository:
    """Dict-backed repository with a staging unit of work."""

    def test_add_is_invisible_until_commit(self, memory_item_repository, memory_uow, apple_item):
        memory_item_repository.add(apple_item)

        assert memory_item_repository.get_by_id(apple_item.id) is None
        memory_uow.commit()
        assert memory_item_repository.get_by_id(apple_item.id) == apple_item

    def test_rollback_discards_staged_writes(self, memory_item_repository, memory_uow, apple_item):
        memory_item_repository.add(apple_item)

        memory_uow.rollback()
        memory_uow.commit()

        assert memory_item_repository.get_all() == []

    def test_stored_entries_are_copies(self, memory_item_repository, memory_uow, apple_item):
        memory_item_repository.add(apple_item)
        memory_uow.commit()

        loaded = memory_item_repository.get_by_id(apple_item.id)
        loaded.make_archive()

        assert memory_item_repository.get_by_id(apple_item.id).is_archive is False
        assert loaded.get_domain_events()[0].event_type == "ItemArchived"

    def test_update_after_commit(self, memory_item_repository, memory_uow, apple_item):
        memory_item_repository.add(apple_item)
        memory_uow.commit()
        loaded = memory_item_repository.get_by_id(apple_item.id)
        loaded.make_archive()

        memory_item_repository.update(loaded)
        memory_uow.commit()

        assert memory_item_repository.get_by_id(apple_item.id).is_archive is True

    def test_update_of_unknown_entry_fails(self, memory_item_repository, memory_uow, apple_item):
        memory_item_repository.update(apple_item)

        with pytest.raises(StorageError):
            memory_uow.commit()

    def test_check_duplicate_ignores_case(self, memory_item_repository, memory_uow, apple_item, weight, liquid):
        memory_item_repository.add(apple_item)
        memory_uow.commit()

        assert memory_item_repository.check_duplicate("APPLE", weight)
        assert not memory_item_repository.check_duplicate("APPLE", liquid)

    def test_commit_is_all_or_nothing(self, memory_item_repository, memory_uow, weight):
        pear = Item.create("Pear", weight).value
        apple = Item.create("Apple", weight).value
        apple_again = Item.create("apple", weight).value
        memory_item_repository.add(pear)
        memory_item_repository.add(apple)
        memory_item_repository.add(apple_again)

        with pytest.raises(UniqueConstraintError):
            memory_uow.commit()

        assert memory_item_repository.get_all() == []
        assert memory_uow.pending_count == 0

    def test_repositories_share_one_unit_of_work(self, memory_item_repository, memory_product_repository,
                                                 memory_uow, apple_item, milk_product):
        memory_item_repository.add(apple_item)
        memory_product_repository.add(milk_product)

        assert memory_uow.pending_count == 2
        memory_uow.commit()

        assert len(memory_item_repository.get_all()) == 1
        assert len(memory_product_repository.get_all()) == 1
