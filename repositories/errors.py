"""
repositories/errors.py
----------------------
Errors raised by repository adapters and propagated unchanged by services.
"""

from typing import Any


class RepositoryError(Exception):
    """Base class for every persistence error."""


class NotFoundError(RepositoryError):
    """No record exists for the requested key."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")


class ConflictError(RepositoryError):
    """A uniqueness constraint would be violated."""

    def __init__(self, entity: str, field: str, value: Any):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field}={value!r} already exists")


class StorageError(RepositoryError):
    """Any other failure of the backing store."""
