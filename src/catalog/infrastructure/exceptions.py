"""Infrastructure exception hierarchy."""
from typing import Any, Optional


class InfrastructureError(Exception):
    """Failure outside the domain: storage, configuration, wiring."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(InfrastructureError):
    """Configuration file or override could not be loaded or validated."""
