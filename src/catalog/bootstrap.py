"""Application bootstrap - wires configuration, storage, handlers and buses."""

from __future__ import annotations

from typing import Any, Dict, Optional

from catalog.application.item import (
    AddItemCommand,
    AddItemHandler,
    ArchiveItemCommand,
    ArchiveItemHandler,
    GetAllItemsHandler,
    GetAllItemsQuery,
    GetItemHandler,
    GetItemQuery,
    UnarchiveItemCommand,
    UnarchiveItemHandler,
)
from catalog.application.product import (
    AddProductCommand,
    AddProductHandler,
    ArchiveProductCommand,
    ArchiveProductHandler,
    GetAllProductsHandler,
    GetAllProductsQuery,
    GetProductHandler,
    GetProductQuery,
    UnarchiveProductCommand,
    UnarchiveProductHandler,
)
from catalog.config.manager import ConfigurationManager
from catalog.config.schemas import AppConfig
from catalog.domain.base.ports import UnitOfWorkPort
from catalog.infrastructure.di.buses import CommandBus, QueryBus
from catalog.infrastructure.events import ConfigurableEventPublisher
from catalog.infrastructure.logging import get_logger, setup_logging
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


class Application:
    """Application context: builds every component once, in dependency order."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        config: Optional[AppConfig] = None,
        log_level: Optional[str] = None,
    ) -> None:
        """Initialize the instance; nothing is built until ``initialize``."""
        self.config_path = config_path
        self._config = config
        self._log_level = log_level
        self._initialized = False

        self.unit_of_work: Optional[UnitOfWorkPort] = None
        self.item_repository = None
        self.product_repository = None
        self.event_publisher: Optional[ConfigurableEventPublisher] = None
        self._command_bus: Optional[CommandBus] = None
        self._query_bus: Optional[QueryBus] = None

        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = ConfigurationManager(self.config_path).app_config
        return self._config

    def initialize(self) -> "Application":
        """Build config, logging, storage, publisher, handlers and buses."""
        if self._initialized:
            return self

        app_config = self.config
        logging_config = app_config.logging
        if self._log_level:
            logging_config = logging_config.model_copy(update={"level": self._log_level.upper()})
        setup_logging(logging_config)

        self._build_storage(app_config)
        self.event_publisher = ConfigurableEventPublisher(mode=app_config.events.mode)
        self._build_buses()

        self._initialized = True
        self.logger.info(
            "Application initialized",
            storage=app_config.storage.strategy,
            events=app_config.events.mode,
        )
        return self

    def _build_storage(self, app_config: AppConfig) -> None:
        item_policy = app_config.duplicates.items.to_policy()
        product_policy = app_config.duplicates.products.to_policy()

        if app_config.storage.strategy == "sqlite":
            sqlite_config = app_config.storage.sqlite
            unit_of_work = SqliteUnitOfWork(sqlite_config.path, enable_wal=sqlite_config.enable_wal)
            self.item_repository = SqliteItemRepository(unit_of_work, item_policy)
            self.product_repository = SqliteProductRepository(unit_of_work, product_policy)
        else:
            unit_of_work = MemoryUnitOfWork()
            self.item_repository = MemoryItemRepository(unit_of_work, item_policy)
            self.product_repository = MemoryProductRepository(unit_of_work, product_policy)

        self.unit_of_work = unit_of_work

    def _build_buses(self) -> None:
        publisher = self.event_publisher
        uow = self.unit_of_work
        items = self.item_repository
        products = self.product_repository

        command_bus = CommandBus()
        command_bus.register(AddItemCommand, AddItemHandler(items, uow, publisher))
        command_bus.register(ArchiveItemCommand, ArchiveItemHandler(items, uow, publisher))
        command_bus.register(UnarchiveItemCommand, UnarchiveItemHandler(items, uow, publisher))
        command_bus.register(AddProductCommand, AddProductHandler(products, uow, publisher))
        command_bus.register(ArchiveProductCommand, ArchiveProductHandler(products, uow, publisher))
        command_bus.register(UnarchiveProductCommand, UnarchiveProductHandler(products, uow, publisher))

        query_bus = QueryBus()
        query_bus.register(GetItemQuery, GetItemHandler(items))
        query_bus.register(GetAllItemsQuery, GetAllItemsHandler(items))
        query_bus.register(GetProductQuery, GetProductHandler(products))
        query_bus.register(GetAllProductsQuery, GetAllProductsHandler(products))

        self._command_bus = command_bus
        self._query_bus = query_bus

    def get_command_bus(self) -> CommandBus:
        """Get the command bus for CQRS operations."""
        if not self._initialized:
            raise RuntimeError("Application not initialized")
        return self._command_bus

    def get_query_bus(self) -> QueryBus:
        """Get the query bus for CQRS operations."""
        if not self._initialized:
            raise RuntimeError("Application not initialized")
        return self._query_bus

    def health_check(self) -> Dict[str, Any]:
        if not self._initialized:
            return {"status": "error", "message": "Application not initialized"}
        return {
            "status": "healthy",
            "storage": self.config.storage.strategy,
            "events": self.config.events.mode,
        }

    def shutdown(self) -> None:
        """Shutdown the application."""
        if isinstance(self.unit_of_work, SqliteUnitOfWork):
            self.unit_of_work.close()
        self.logger.info("Shutting down application")
        self._initialized = False

    def __enter__(self) -> "Application":
        return self.initialize()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    async def __aenter__(self) -> "Application":
        """Async context manager entry."""
        return self.initialize()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        self.shutdown()


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    return Application(config_path, log_level=log_level).initialize()
