"""Name value objects."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type, TypeVar

from catalog.domain.base.errors import GeneralErrors
from catalog.domain.base.result import Result

N = TypeVar("N", bound="Name")


@dataclass(frozen=True)
class Name:
    """Non-blank name, kept exactly as given.

    Equality is by exact value: ``Name("Apple") != Name("apple")``.
    Case-insensitive matching belongs to the duplicate rule.
    """

    value: str

    @classmethod
    def create(cls: Type[N], raw: Optional[str]) -> Result[N]:
        if not isinstance(raw, str) or not raw.strip():
            return Result.fail(GeneralErrors.value_is_invalid("name"))
        return Result.ok(cls(raw))

    def __str__(self) -> str:
        return self.value
