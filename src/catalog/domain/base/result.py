"""Typed failure values returned by the domain layer.

Expected business outcomes (invalid input, illegal transitions, duplicates)
are returned as a failed ``Result`` carrying an ``Error`` instead of being
raised. Exceptions are reserved for programming errors.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Stable categories of domain failures."""

    VALUE_REQUIRED = "value_required"
    VALUE_INVALID = "value_invalid"
    UNKNOWN_MEASURE_TYPE = "unknown_measure_type"
    ALREADY_ARCHIVED = "already_archived"
    ALREADY_UNARCHIVED = "already_unarchived"
    UNIQUE_VIOLATION = "unique_violation"
    NOT_FOUND = "not_found"
    INCORRECT_COMMAND = "incorrect_command"


@dataclass(frozen=True)
class Error:
    """A domain error carrying a stable code and its kind."""

    code: str
    message: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a domain operation, either a value or an error."""

    _value: Optional[T] = None
    error: Optional[Error] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(_value=value)

    @classmethod
    def fail(cls, error: Error) -> "Result[T]":
        if error is None:
            raise ValueError("A failed result requires an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def value(self) -> T:
        """Return the success value; accessing it on a failure is a bug."""
        if self.error is not None:
            raise ValueError(f"Cannot read the value of a failed result: {self.error}")
        return self._value
