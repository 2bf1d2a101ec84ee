"""Error payloads shared by the entry points."""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Union

from catalog.domain.base.result import Error, ErrorKind
from catalog.infrastructure.exceptions import ConfigurationError
from catalog.infrastructure.persistence.exceptions import PersistenceError

HTTP_STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALUE_REQUIRED: 400,
    ErrorKind.VALUE_INVALID: 400,
    ErrorKind.UNKNOWN_MEASURE_TYPE: 400,
    ErrorKind.INCORRECT_COMMAND: 400,
    ErrorKind.ALREADY_ARCHIVED: 409,
    ErrorKind.ALREADY_UNARCHIVED: 409,
    ErrorKind.UNIQUE_VIOLATION: 409,
    ErrorKind.NOT_FOUND: 404,
}


def status_for_kind(kind: Union[ErrorKind, str, None]) -> int:
    """Transport status for an error kind; unknown kinds are server errors."""
    if kind is None:
        return 500
    try:
        return HTTP_STATUS_BY_KIND[ErrorKind(kind)]
    except (ValueError, KeyError):
        return 500


@dataclass(frozen=True)
class ErrorResponse:
    """Error payload printed by the CLI and suitable for any transport."""

    error_code: str
    message: str
    kind: Optional[str] = None
    http_status: int = 500
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: Error) -> "ErrorResponse":
        return cls(
            error_code=error.code,
            message=error.message,
            kind=error.kind.value,
            http_status=status_for_kind(error.kind),
        )

    @classmethod
    def from_response(cls, response) -> "ErrorResponse":
        """Build from a failed handler response DTO."""
        return cls(
            error_code=response.error_code or "unknown.error",
            message=response.message or "",
            kind=response.error_kind,
            http_status=status_for_kind(response.error_kind),
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "ErrorResponse":
        if isinstance(exc, ConfigurationError):
            code = "configuration.error"
        elif isinstance(exc, PersistenceError):
            code = "storage.error"
        else:
            code = "internal.error"
        return cls(
            error_code=code,
            message=str(exc),
            details={"exception": type(exc).__name__},
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
