class PersistenceError(Exception):
    """Base exception for persistence-related errors."""
    pass


class StorageError(PersistenceError):
    """Raised when there's an error with storage operations."""
    pass


class UniqueConstraintError(PersistenceError):
    """Raised when a write violates the (name, measure type) unique index."""

    def __init__(self, message: str, name: str = "", measure_type: str = ""):
        super().__init__(message)
        self.name = name
        self.measure_type = measure_type
