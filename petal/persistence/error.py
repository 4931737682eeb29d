"""Persistence layer errors."""


class PersistenceError(Exception):
    """Raised when the database fails to read or write a record."""

    def __init__(self, operation: str, resource: str, identifier: str):
        self.operation = operation
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Failed to {operation} {resource} {identifier}")
