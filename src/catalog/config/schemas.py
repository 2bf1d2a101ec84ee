"""Application configuration schema."""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.domain.shared.duplicates import DuplicatePolicy, MeasureTypeMatch


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field("INFO", description="Root log level")
    destination: Literal["console", "file", "both"] = Field(
        "console",
        description="Where log records are written; console output goes to stderr",
    )
    file_path: str = Field("logs/catalog.log", description="Log file path")
    max_size_mb: int = Field(10, description="Rotate the log file at this size")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased level name

        Raises:
            ValueError: If level is not a standard logging level
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Value must not be negative")
        return v


class SqliteConfig(BaseModel):
    """SQLite storage settings."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field("data/catalog.db", description="Database file path")
    enable_wal: bool = Field(True, description="Enable Write-Ahead Logging")


class StorageConfig(BaseModel):
    """Storage configuration."""

    model_config = ConfigDict(extra="forbid")

    strategy: Literal["memory", "sqlite"] = Field(
        "sqlite", description="Storage backend; memory keeps nothing between runs"
    )
    sqlite: SqliteConfig = Field(default_factory=SqliteConfig)


class EventsConfig(BaseModel):
    """Domain event publishing configuration."""

    model_config = ConfigDict(extra="forbid")

    mode: Literal["logging", "sync", "disabled"] = Field(
        "logging", description="How domain events are published"
    )


class DuplicatePolicyConfig(BaseModel):
    """Duplicate rule for one catalog."""

    model_config = ConfigDict(extra="forbid")

    case_sensitive: bool = False
    match_measure_type_by: MeasureTypeMatch = MeasureTypeMatch.ID

    def to_policy(self) -> DuplicatePolicy:
        return DuplicatePolicy(
            case_sensitive=self.case_sensitive,
            match_measure_type_by=self.match_measure_type_by,
        )


class DuplicatesConfig(BaseModel):
    """Duplicate rules per catalog."""

    model_config = ConfigDict(extra="forbid")

    items: DuplicatePolicyConfig = Field(
        default_factory=lambda: DuplicatePolicyConfig(match_measure_type_by=MeasureTypeMatch.NAME)
    )
    products: DuplicatePolicyConfig = Field(default_factory=DuplicatePolicyConfig)


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)
    duplicates: DuplicatesConfig = Field(default_factory=DuplicatesConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)
