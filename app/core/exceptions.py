"""
Error taxonomy for the data service.

Unique-index violations surface as pymongo's own DuplicateKeyError, which is
re-exported here so callers have a single import location.
"""

from typing import List

from pymongo.errors import DuplicateKeyError

__all__ = [
    "ConfigurationError",
    "DatabaseConnectionError",
    "DatabaseUsageError",
    "DocumentValidationError",
    "DuplicateKeyError",
]


class ConfigurationError(Exception):
    """A required configuration value is missing."""


class DatabaseConnectionError(ConnectionError):
    """The MongoDB server is unreachable or rejected the ping."""


class DatabaseUsageError(RuntimeError):
    """The database handle was requested before a successful connect()."""


class DocumentValidationError(ValueError):
    """A document violates the structural contract of its collection."""

    def __init__(self, collection: str, errors: List[str]):
        self.collection = collection
        self.errors = list(errors)
        super().__init__(
            f"Document failed validation for collection '{collection}': "
            + "; ".join(self.errors)
        )
