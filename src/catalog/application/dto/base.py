"""Base DTOs for catalog commands, queries and responses."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from catalog.domain.base.result import Error


class BaseDTO(BaseModel):
    """
    Immutable pydantic model with a plain-dict view.

    ``to_dict`` returns JSON-compatible values (UUIDs as strings) so the
    CLI formatters can render any DTO without knowing its type.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class BaseCommand(BaseDTO):
    """Base class for commands: requests that change a catalog."""
    correlation_id: Optional[str] = None


class BaseQuery(BaseDTO):
    """Base class for queries: requests that only read a catalog."""
    correlation_id: Optional[str] = None


class BaseResponse(BaseDTO):
    """
    Outcome of a command or query.

    A failed response carries the domain error's code, kind and message;
    the transport layer maps the kind to a status.
    """
    success: bool = True
    message: Optional[str] = None
    error_code: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def failure(cls, error: Error, **kwargs) -> "BaseResponse":
        """Build a failed response carrying a domain error."""
        return cls(
            success=False,
            message=error.message,
            error_code=error.code,
            error_kind=error.kind.value,
            **kwargs,
        )
