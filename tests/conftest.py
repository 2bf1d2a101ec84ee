import pytest
from unittest.mock import Mock

from catalog.bootstrap import Application
from catalog.config.schemas import AppConfig
from catalog.domain.base.ports import EventPublisherPort
from catalog.domain.item import Item
from catalog.domain.product import Product
from catalog.domain.shared.duplicates import DuplicatePolicy, MeasureTypeMatch
from catalog.domain.shared.measure_type import MeasureType
from catalog.infrastructure.persistence.memory import (
    MemoryItemRepository,
    MemoryProductRepository,
    MemoryUnitOfWork,
)
from catalog.infrastructure.persistence.sqlite import (
    SqliteItemRepository,
    SqliteProductRepository,
    SqliteUnitOfWork,
)


@pytest.fixture
def weight():
    return MeasureType.WEIGHT


@pytest.fixture
def liquid():
    return MeasureType.LIQUID


@pytest.fixture
def apple_item(weight):
    return Item.create("Apple", weight).value


@pytest.fixture
def milk_product(liquid):
    return Product.create("Milk", liquid).value


@pytest.fixture
def memory_uow():
    return MemoryUnitOfWork()


@pytest.fixture
def memory_item_repository(memory_uow):
    return MemoryItemRepository(memory_uow, DuplicatePolicy(match_measure_type_by=MeasureTypeMatch.NAME))


@pytest.fixture
def memory_product_repository(memory_uow):
    return MemoryProductRepository(memory_uow, DuplicatePolicy())


@pytest.fixture
def sqlite_uow(tmp_path):
    uow = SqliteUnitOfWork(str(tmp_path / "catalog.db"))
    yield uow
    uow.close()


@pytest.fixture
def sqlite_item_repository(sqlite_uow):
    return SqliteItemRepository(sqlite_uow)


@pytest.fixture
def sqlite_product_repository(sqlite_uow):
    return SqliteProductRepository(sqlite_uow)


@pytest.fixture
def mock_event_publisher():
    publisher = Mock(spec=EventPublisherPort)
    publisher.is_enabled.return_value = True
    return publisher


@pytest.fixture
def app():
    """Application on in-memory storage."""
    application = Application(config=AppConfig.from_dict({"storage": {"strategy": "memory"}})).initialize()
    yield application
    application.shutdown()


@pytest.fixture
def sqlite_app(tmp_path):
    config = AppConfig.from_dict(
        {"storage": {"strategy": "sqlite", "sqlite": {"path": str(tmp_path / "app.db")}}}
    )
    application = Application(config=config).initialize()
    yield application
    application.shutdown()
