"""
utils/exceptions.py
-------------------
Typed errors raised by the data access layer.

Lookups that find nothing return ``None`` (single row) or ``[]`` (list);
a query that fails raises ``QueryFailedError`` so callers can tell the two apart.
"""

from typing import Any


class RepositoryError(Exception):
    """Base class for all data access errors."""


class QueryFailedError(RepositoryError):
    """A statement failed to execute. The driver error is kept on ``cause``."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class InvalidInputError(RepositoryError, ValueError):
    """A search option, limit or listing field could not be interpreted."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': {value!r}")


class DuplicateEmailError(RepositoryError):
    """A user with this email is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email {email} already exists")
