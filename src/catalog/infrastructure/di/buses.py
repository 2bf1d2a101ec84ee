"""
CQRS Bus Implementation.

QueryBus and CommandBus mediate between callers and handlers through a
dispatch table keyed by message type. Cross-cutting concerns (logging,
validation) run as middleware around every dispatch.
"""
import asyncio
import time
from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Awaitable, Callable, Dict, List, Type

from catalog.application.dto.base import BaseCommand, BaseQuery
from catalog.infrastructure.logging import get_logger


class BusMiddleware(ABC):
    """Base class for bus middleware."""

    @abstractmethod
    async def execute(self, message: Any, next_handler: Callable[[], Awaitable[Any]]) -> Any:
        """Execute middleware logic."""


class LoggingMiddleware(BusMiddleware):
    """Middleware for logging bus operations."""

    def __init__(self, logger=None):
        self.logger = logger or get_logger(__name__)

    async def execute(self, message: Any, next_handler: Callable[[], Awaitable[Any]]) -> Any:
        """Log bus operations."""
        message_type = type(message).__name__
        start_time = time.time()

        self.logger.debug("Executing message", message_type=message_type)

        try:
            result = await next_handler()
            execution_time = time.time() - start_time
            self.logger.debug(
                "Completed message",
                message_type=message_type,
                duration=f"{execution_time:.3f}s",
            )
            return result
        except Exception as e:
            execution_time = time.time() - start_time
            self.logger.error(
                "Failed message",
                message_type=message_type,
                duration=f"{execution_time:.3f}s",
                error=str(e),
            )
            raise


class ValidationMiddleware(BusMiddleware):
    """Middleware for validating messages."""

    async def execute(self, message: Any, next_handler: Callable[[], Awaitable[Any]]) -> Any:
        """Validate message before processing."""
        if message is None:
            raise ValueError("Message cannot be None")
        return await next_handler()


class _MessageBus:
    """Dispatch table plus middleware chain shared by both buses."""

    kind = "message"

    def __init__(self, logger=None):
        self.logger = logger or get_logger(__name__)
        self.middleware: List[BusMiddleware] = []
        self._handlers: Dict[Type, Any] = {}

        # Add default middleware
        self.add_middleware(LoggingMiddleware(self.logger))
        self.add_middleware(ValidationMiddleware())

    def add_middleware(self, middleware: BusMiddleware) -> None:
        """Add middleware to the bus."""
        self.middleware.append(middleware)
        self.logger.debug("Added middleware", middleware=type(middleware).__name__)

    def register(self, message_type: Type, handler: Any) -> None:
        """Route ``message_type`` to ``handler``; one handler per type."""
        if message_type in self._handlers:
            raise ValueError(f"Handler already registered for {message_type.__name__}")
        self._handlers[message_type] = handler

    def handler_for(self, message_type: Type) -> Any:
        """
        Look up the handler for a message type.

        Raises:
            KeyError: If no handler is registered for the type
        """
        try:
            return self._handlers[message_type]
        except KeyError:
            self.logger.error(f"No handler registered for {self.kind}", message_type=message_type.__name__)
            raise KeyError(f"No handler registered for {self.kind} {message_type.__name__}") from None

    def registered_types(self) -> List[Type]:
        return list(self._handlers)

    async def execute(self, message: Any) -> Any:
        """
        Execute a message through the middleware chain.

        Raises:
            KeyError: If no handler is registered for the message type
        """
        handler = self.handler_for(type(message))

        async def final_handler():
            return await handler.handle(message)

        chain: Callable[[], Awaitable[Any]] = final_handler
        for middleware in reversed(self.middleware):
            chain = partial(middleware.execute, message, chain)

        return await chain()

    def execute_sync(self, message: Any) -> Any:
        """Execute a message from synchronous code, e.g. the CLI."""
        return asyncio.run(self.execute(message))


class QueryBus(_MessageBus):
    """Bus for handling queries in CQRS architecture."""

    kind = "query"

    def register(self, query_type: Type[BaseQuery], handler: Any) -> None:
        super().register(query_type, handler)


class CommandBus(_MessageBus):
    """Bus for handling commands in CQRS architecture."""

    kind = "command"

    def register(self, command_type: Type[BaseCommand], handler: Any) -> None:
        super().register(command_type, handler)
