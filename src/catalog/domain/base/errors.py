"""General-purpose domain errors shared by every aggregate."""
from uuid import UUID

from .result import Error, ErrorKind


class GeneralErrors:
    """Factories for errors that are not tied to a single aggregate."""

    @staticmethod
    def value_is_required(name: str) -> Error:
        return Error(
            "value.is.required",
            f"Value is required for {name}",
            ErrorKind.VALUE_REQUIRED,
        )

    @staticmethod
    def value_is_invalid(name: str) -> Error:
        return Error(
            "value.is.invalid",
            f"Value is invalid for {name}",
            ErrorKind.VALUE_INVALID,
        )

    @staticmethod
    def value_is_too_long(max_length: int, value: str) -> Error:
        return Error(
            "value.is.too.long",
            f"Value '{value}' is too long, max length is {max_length}",
            ErrorKind.VALUE_INVALID,
        )

    @staticmethod
    def incorrect_command() -> Error:
        return Error(
            "command.is.incorrect",
            "The command is incorrect",
            ErrorKind.INCORRECT_COMMAND,
        )


class ArchivationErrors:
    """Errors for illegal archive state transitions."""

    @staticmethod
    def already_archived(entity_id: UUID, entity_name: str, prefix: str = "record") -> Error:
        _require_identity(entity_id, entity_name)
        return Error(
            f"{prefix}.is.already.archived",
            f"The {entity_name} with ID: {entity_id} is already archived",
            ErrorKind.ALREADY_ARCHIVED,
        )

    @staticmethod
    def already_unarchived(entity_id: UUID, entity_name: str, prefix: str = "record") -> Error:
        _require_identity(entity_id, entity_name)
        return Error(
            f"{prefix}.is.already.unarchived",
            f"The {entity_name} with ID: {entity_id} is already unarchived",
            ErrorKind.ALREADY_UNARCHIVED,
        )


class CatalogErrors:
    """Errors raised by the catalog use cases for a given entry kind."""

    @staticmethod
    def not_exists(entity_id: UUID, entity_name: str) -> Error:
        _require_identity(entity_id, entity_name)
        return Error(
            f"{entity_name.lower()}.is.not.exists",
            f"The {entity_name.lower()} with ID: {entity_id} is not exists",
            ErrorKind.NOT_FOUND,
        )

    @staticmethod
    def same_name_and_measure_type_exists(entity_name: str, name: str, measure_type) -> Error:
        return Error(
            f"{entity_name.lower()}.unique.violation",
            f"{entity_name} with name '{name}' and measure type '{measure_type}' already exists",
            ErrorKind.UNIQUE_VIOLATION,
        )

    @staticmethod
    def id_already_exists(entity_id: UUID, entity_name: str) -> Error:
        return Error(
            f"{entity_name.lower()}.id.already.exists",
            f"{entity_name} with ID {entity_id} already exists in the collection",
            ErrorKind.UNIQUE_VIOLATION,
        )


def _require_identity(entity_id, entity_name: str) -> None:
    # Empty identities here mean the caller skipped the factory.
    if entity_id is None or entity_id == UUID(int=0) or not str(entity_id).strip():
        raise ValueError(f"Entity id is required, got {entity_id!r}")
    if not entity_name or not entity_name.strip():
        raise ValueError(f"Entity type name is required for {entity_id}")
