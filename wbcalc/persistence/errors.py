"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class RecordNotFoundError(PersistenceError):
    """Raised when a row does not exist."""

    def __init__(self, table: str, record_id: int):
        self.table = table
        self.record_id = record_id
        super().__init__(f"{table}/{record_id} not found")


class DatabaseNotReadyError(PersistenceError):
    """Raised when the schema has not been created yet."""
