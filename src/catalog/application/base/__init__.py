"""Base handler hierarchy."""

from .handlers import BaseCommandHandler, BaseHandler, BaseQueryHandler

__all__ = ["BaseCommandHandler", "BaseHandler", "BaseQueryHandler"]
