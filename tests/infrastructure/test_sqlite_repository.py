import sqlite3

import pytest

from catalog.domain.item import Item
from catalog.domain.product import Product, ProductName
from catalog.domain.shared.duplicates import DuplicatePolicy, MeasureTypeMatch
from catalog.infrastructure.persistence.exceptions import StorageError, UniqueConstraintError
from catalog.infrastructure.persistence.sqlite import SqliteItemRepository, SqliteUnitOfWork


class TestSqliteSchema:

    def test_measure_types_are_seeded(self, sqlite_uow):
        rows = sqlite_uow.connection.execute("SELECT id, name FROM measure_types ORDER BY id").fetchall()

        assert [tuple(row) for row in rows] == [(1, "weight"), (2, "liquid")]

    def test_schema_is_idempotent(self, tmp_path):
        path = str(tmp_path / "twice.db")
        SqliteUnitOfWork(path).close()
        uow = SqliteUnitOfWork(path)

        count = uow.connection.execute("SELECT COUNT(*) FROM measure_types").fetchone()[0]
        uow.close()

        assert count == 2

    def test_unique_index_exists(self, sqlite_uow):
        indexes = {
            row["name"]
            for row in sqlite_uow.connection.execute("SELECT name FROM sqlite_master WHERE type = 'index'")
        }

        assert "ux_items_name_measure_type" in indexes
        assert "ux_products_name_measure_type" in indexes
        assert "idx_items_is_archive" in indexes


class TestSqliteRepository:

    def test_round_trip_item(self, sqlite_item_repository, sqlite_uow, apple_item):
        sqlite_item_repository.add(apple_item)
        sqlite_uow.commit()

        loaded = sqlite_item_repository.get_by_id(apple_item.id)

        assert loaded == apple_item
        assert loaded.name == "Apple"
        assert loaded.measure_type == apple_item.measure_type
        assert loaded.is_archive is False
        assert loaded.get_domain_events() == []

    def test_round_trip_product(self, sqlite_product_repository, sqlite_uow, milk_product):
        sqlite_product_repository.add(milk_product)
        sqlite_uow.commit()

        loaded = sqlite_product_repository.get_by_id(milk_product.id)

        assert isinstance(loaded, Product)
        assert loaded.name == ProductName("Milk")

    def test_missing_returns_none(self, sqlite_item_repository, apple_item):
        assert sqlite_item_repository.get_by_id(apple_item.id) is None

    def test_update_archive_state(self, sqlite_item_repository, sqlite_uow, apple_item):
        sqlite_item_repository.add(apple_item)
        sqlite_uow.commit()
        apple_item.make_archive()

        sqlite_item_repository.update(apple_item)
        sqlite_uow.commit()

        assert sqlite_item_repository.get_by_id(apple_item.id).is_archive is True

    def test_update_unknown_row(self, sqlite_item_repository, apple_item):
        with pytest.raises(StorageError):
            sqlite_item_repository.update(apple_item)

    def test_rollback_discards_insert(self, sqlite_item_repository, sqlite_uow, apple_item):
        sqlite_item_repository.add(apple_item)

        sqlite_uow.rollback()

        assert sqlite_item_repository.get_all() == []

    def test_committed_rows_visible_to_new_connection(self, tmp_path, apple_item):
        path = str(tmp_path / "shared.db")
        writer = SqliteUnitOfWork(path)
        SqliteItemRepository(writer).add(apple_item)
        writer.commit()
        writer.close()

        reader = SqliteUnitOfWork(path)
        loaded = SqliteItemRepository(reader).get_all()
        reader.close()

        assert [entry.id for entry in loaded] == [apple_item.id]

    def test_check_duplicate(self, sqlite_item_repository, sqlite_uow, apple_item, weight, liquid):
        sqlite_item_repository.add(apple_item)
        sqlite_uow.commit()

        assert sqlite_item_repository.check_duplicate("aPPle", weight)
        assert not sqlite_item_repository.check_duplicate("apple", liquid)
        assert not sqlite_item_repository.check_duplicate("pear", weight)

    def test_check_duplicate_by_measure_type_name(self, sqlite_uow, apple_item, weight):
        repository = SqliteItemRepository(sqlite_uow, DuplicatePolicy(match_measure_type_by=MeasureTypeMatch.NAME))
        repository.add(apple_item)
        sqlite_uow.commit()

        assert repository.check_duplicate("APPLE", weight)

    def test_unique_index_rejects_duplicate(self, sqlite_item_repository, sqlite_uow, apple_item, weight):
        sqlite_item_repository.add(apple_item)
        sqlite_uow.commit()

        with pytest.raises(UniqueConstraintError) as exc_info:
            sqlite_item_repository.add(Item.create("APPLE", weight).value)

        assert exc_info.value.name == "APPLE"
        assert exc_info.value.measure_type == "weight"

    def test_archived_rows_still_block_duplicates(self, sqlite_item_repository, sqlite_uow, apple_item, weight):
        apple_item.make_archive()
        sqlite_item_repository.add(apple_item)
        sqlite_uow.commit()

        assert sqlite_item_repository.check_duplicate("apple", weight)

    def test_get_all_keeps_insertion_order(self, sqlite_item_repository, sqlite_uow, weight, liquid):
        names = ["Apple", "Water", "Bread"]
        for name, measure_type in zip(names, [weight, liquid, weight]):
            sqlite_item_repository.add(Item.create(name, measure_type).value)
        sqlite_uow.commit()

        assert [entry.name for entry in sqlite_item_repository.get_all()] == names

    def test_sqlite_errors_become_storage_errors(self, sqlite_item_repository, sqlite_uow):
        sqlite_uow.connection.execute("DROP TABLE items")

        with pytest.raises(StorageError):
            sqlite_item_repository.get_all()
