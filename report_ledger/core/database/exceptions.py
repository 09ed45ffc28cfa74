"""Database repository exceptions.

Custom exceptions for repository operations that provide better
error messages and typing than raw SQLAlchemy exceptions.

Hierarchy:
    RepositoryError
    ├── QueryError
    │   └── InvalidFilterError
    │       ├── UnknownFieldError
    │       └── UnsupportedOperationError
    └── PersistenceError
"""
from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """Base exception for repository operations.

    Raised when a repository operation fails due to programming
    errors, configuration issues, or backing store failures.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize repository error.

        Args:
            message: Error description
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Format error message with details."""
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class QueryError(RepositoryError):
    """A read query could not be built or executed.

    Raised for malformed filters (see InvalidFilterError) and when the
    backing store rejects a well-formed query (connectivity, syntax,
    resource limits).
    """


class InvalidFilterError(QueryError):
    """Invalid filter or query parameters.

    Raised when filter parameters are malformed, reference non-existent
    fields, or contain invalid values.
    """

    def __init__(self, message: str, filter_name: str | None = None):
        """Initialize invalid filter error.

        Args:
            message: Error description
            filter_name: Name of the problematic filter (if applicable)
        """
        details = {"filter": filter_name} if filter_name else {}
        super().__init__(message, details=details)
        self.filter_name = filter_name


class UnknownFieldError(InvalidFilterError):
    """Filter references a field outside the supported set."""

    def __init__(self, field: str):
        super().__init__(f"unexpected field {field}", filter_name=field)
        self.field = field


class UnsupportedOperationError(InvalidFilterError):
    """Filter field is known but the requested operator is not supported."""

    def __init__(self, field: str, operator: str | None = None):
        message = "operation not implemented"
        if operator:
            message = f"operation {operator!r} not implemented"
        super().__init__(message, filter_name=field)
        self.field = field
        self.operator = operator


class PersistenceError(RepositoryError):
    """A write could not be durably committed.

    Also raised when schema provisioning fails.
    """


__all__ = [
    "InvalidFilterError",
    "PersistenceError",
    "QueryError",
    "RepositoryError",
    "UnknownFieldError",
    "UnsupportedOperationError",
]
