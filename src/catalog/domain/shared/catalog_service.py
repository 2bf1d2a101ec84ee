"""In-memory catalog domain service."""
from typing import List, Optional, TypeVar

from catalog.domain.base.archivable import ArchivableAggregate
from catalog.domain.base.errors import CatalogErrors, GeneralErrors
from catalog.domain.base.result import Result

from .duplicates import DEFAULT_DUPLICATE_POLICY, DuplicatePolicy

T = TypeVar("T", bound=ArchivableAggregate)


class CatalogService:
    """Adds entries to an in-memory collection while enforcing uniqueness."""

    def __init__(self, policy: DuplicatePolicy = DEFAULT_DUPLICATE_POLICY):
        self._policy = policy

    def add(self, new_entry: Optional[T], all_entries: Optional[List[T]]) -> Result[List[T]]:
        """Append ``new_entry`` to ``all_entries`` unless it collides.

        Returns the same list on success. A colliding id is reported before
        a colliding (name, measure type) pair.
        """
        if new_entry is None:
            return Result.fail(GeneralErrors.value_is_required("new_entry"))

        if all_entries is None:
            return Result.fail(GeneralErrors.value_is_required("all_entries"))

        kind = new_entry.entity_type_name
        if any(entry.id == new_entry.id for entry in all_entries):
            return Result.fail(CatalogErrors.id_already_exists(new_entry.id, kind))

        name = str(new_entry.name)
        if self._policy.is_duplicate(name, new_entry.measure_type, all_entries):
            return Result.fail(
                CatalogErrors.same_name_and_measure_type_exists(kind, name, new_entry.measure_type)
            )

        all_entries.append(new_entry)
        return Result.ok(all_entries)
