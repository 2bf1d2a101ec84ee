"""
CQRS-aligned base handler hierarchy.

Command handlers validate, execute and then publish the domain events the
aggregates recorded. Query handlers only read. Both log start, completion
and failure of every message with its duration.
"""

import time
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from catalog.application.dto.base import BaseCommand, BaseQuery, BaseResponse
from catalog.domain.base.entity import AggregateRoot
from catalog.domain.base.ports import EventPublisherPort
from catalog.infrastructure.logging import get_logger

TCommand = TypeVar("TCommand", bound=BaseCommand)
TQuery = TypeVar("TQuery", bound=BaseQuery)
TResponse = TypeVar("TResponse", bound=BaseResponse)


class BaseHandler(ABC):
    """Root base handler with logging and timing shared by all handlers."""

    message_kind = "message"

    def __init__(self, logger=None):
        """Initialize base handler with optional logger."""
        self.logger = logger or get_logger(self.__class__.__module__)

    async def _run(self, message, operation) -> BaseResponse:
        operation_id = f"{self.__class__.__name__}.handle"
        start_time = time.time()
        self.logger.info(f"Starting {self.message_kind}", operation=operation_id)

        try:
            result = await operation(message)
        except Exception as e:
            duration = time.time() - start_time
            self.logger.error(
                f"Failed {self.message_kind}",
                operation=operation_id,
                duration=f"{duration:.3f}s",
                error=str(e),
            )
            raise

        duration = time.time() - start_time
        if result.success:
            self.logger.info(
                f"Completed {self.message_kind}",
                operation=operation_id,
                duration=f"{duration:.3f}s",
            )
        else:
            self.logger.info(
                f"Rejected {self.message_kind}",
                operation=operation_id,
                duration=f"{duration:.3f}s",
                error_code=result.error_code,
            )
        return result


class BaseCommandHandler(BaseHandler, Generic[TCommand, TResponse]):
    """
    Base for all CQRS command handlers.

    Concrete handlers implement ``execute_command`` and call
    ``publish_events`` once their changes are committed.
    """

    message_kind = "command"

    def __init__(self, event_publisher: Optional[EventPublisherPort] = None, logger=None):
        super().__init__(logger)
        self.event_publisher = event_publisher

    async def handle(self, command: TCommand) -> TResponse:
        """Handle command with monitoring."""
        return await self._run(command, self._validate_and_execute)

    async def _validate_and_execute(self, command: TCommand) -> TResponse:
        await self.validate_command(command)
        return await self.execute_command(command)

    async def validate_command(self, command: TCommand) -> None:
        """
        Validate command before execution.

        Override in specific handlers for custom validation logic.
        """
        if not command:
            raise ValueError("Command cannot be None")

    @abstractmethod
    async def execute_command(self, command: TCommand) -> TResponse:
        """
        Execute the specific command logic.

        Must be implemented by concrete command handlers.
        """

    def publish_events(self, aggregate: AggregateRoot) -> None:
        """Publish and clear the events recorded by ``aggregate``."""
        events = aggregate.get_domain_events()
        if self.event_publisher and self.event_publisher.is_enabled() and events:
            self.event_publisher.publish_batch(events)
        aggregate.clear_domain_events()


class BaseQueryHandler(BaseHandler, Generic[TQuery, TResponse]):
    """Base for all CQRS query handlers."""

    message_kind = "query"

    async def handle(self, query: TQuery) -> TResponse:
        """Handle query with monitoring."""
        return await self._run(query, self.execute_query)

    @abstractmethod
    async def execute_query(self, query: TQuery) -> TResponse:
        """
        Execute the specific query logic.

        Must be implemented by concrete query handlers.
        """
