"""Configuration package - pydantic schemas and the configuration manager."""

from .schemas import (
    AppConfig,
    DuplicatesConfig,
    DuplicatePolicyConfig,
    EventsConfig,
    LoggingConfig,
    SqliteConfig,
    StorageConfig,
)

__all__ = [
    "AppConfig",
    "DuplicatesConfig",
    "DuplicatePolicyConfig",
    "EventsConfig",
    "LoggingConfig",
    "SqliteConfig",
    "StorageConfig",
]
