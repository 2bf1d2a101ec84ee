"""Message buses that wire commands and queries to their handlers."""

from .buses import BusMiddleware, CommandBus, LoggingMiddleware, QueryBus, ValidationMiddleware

__all__ = ["BusMiddleware", "CommandBus", "LoggingMiddleware", "QueryBus", "ValidationMiddleware"]
