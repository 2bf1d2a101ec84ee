import pytest

from catalog.domain.base.result import ErrorKind
from catalog.domain.item import Item
from catalog.domain.product import Product
from catalog.domain.shared.catalog_service import CatalogService
from catalog.domain.shared.duplicates import DuplicatePolicy, MeasureTypeMatch
from catalog.domain.shared.measure_type import MeasureType


class TestDuplicatePolicy:
    """Same name (case-insensitive) and same measure type is a duplicate."""

    @pytest.fixture
    def existing(self, weight):
        return [Item.create("Apple", weight).value]

    @pytest.mark.parametrize("name", ["Apple", "apple", "APPLE"])
    def test_same_name_any_case_is_duplicate(self, name, existing, weight):
        assert DuplicatePolicy().is_duplicate(name, weight, existing)

    def test_different_measure_type_is_not_duplicate(self, existing, liquid):
        assert not DuplicatePolicy().is_duplicate("Apple", liquid, existing)

    def test_different_name_is_not_duplicate(self, existing, weight):
        assert not DuplicatePolicy().is_duplicate("Pear", weight, existing)

    def test_archived_entries_still_count(self, existing, weight):
        existing[0].make_archive()

        assert DuplicatePolicy().is_duplicate("apple", weight, existing)

    def test_case_sensitive_policy(self, existing, weight):
        policy = DuplicatePolicy(case_sensitive=True)

        assert policy.is_duplicate("Apple", weight, existing)
        assert not policy.is_duplicate("apple", weight, existing)

    def test_match_measure_type_by_name(self, existing):
        policy = DuplicatePolicy(match_measure_type_by=MeasureTypeMatch.NAME)

        assert policy.is_duplicate("apple", MeasureType(99, "WEIGHT"), existing)
        assert not DuplicatePolicy().is_duplicate("apple", MeasureType(99, "WEIGHT"), existing)

    def test_works_with_value_object_names(self, liquid):
        products = [Product.create("Milk", liquid).value]

        assert DuplicatePolicy().is_duplicate("MILK", liquid, products)


class TestCatalogService:
    """In-memory add with id and duplicate checks."""

    def test_apple_weight_liquid_scenario(self, weight, liquid):
        service = CatalogService()
        entries = []

        first = service.add(Item.create("Apple", weight).value, entries)
        second = service.add(Item.create("apple", weight).value, entries)
        third = service.add(Item.create("Apple", liquid).value, entries)

        assert first.is_success
        assert second.is_failure
        assert second.error.kind == ErrorKind.UNIQUE_VIOLATION
        assert second.error.code == "item.unique.violation"
        assert second.error.message == "Item with name 'apple' and measure type 'weight' already exists"
        assert third.is_success
        assert len(entries) == 2

    def test_same_id_is_rejected_before_duplicate_name(self, apple_item):
        entries = [apple_item]

        result = CatalogService().add(apple_item, entries)

        assert result.error.code == "item.id.already.exists"
        assert len(entries) == 1

    def test_missing_inputs(self, apple_item):
        service = CatalogService()

        assert service.add(None, []).error.kind == ErrorKind.VALUE_REQUIRED
        assert service.add(apple_item, None).error.kind == ErrorKind.VALUE_REQUIRED

    def test_success_returns_same_list(self, apple_item):
        entries = []

        result = CatalogService().add(apple_item, entries)

        assert result.value is entries
        assert entries == [apple_item]
