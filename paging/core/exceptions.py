"""
Exception hierarchy for the paging library.

Store failures (SQLAlchemy, pymongo) are never wrapped: they reach the
caller unchanged. The classes below only cover errors raised by this
library itself.

Dependencies: None (pure domain layer)
System role: Library-level error types
"""

from typing import Any


class PagingException(Exception):
    """Base exception for all paging library errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidPageRequestError(PagingException):
    """Raised when a page helper receives out-of-range input."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid page request error.

        Args:
            message: Error message
            field: Name of the offending parameter
            value: Value that was rejected
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details)


class StoreConfigurationError(PagingException):
    """Raised when a store or connection cannot be built from its inputs."""

    def __init__(
        self,
        message: str,
        store: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store configuration error.

        Args:
            message: Error message
            store: Store kind being configured (sqlalchemy, mongo)
            details: Additional context
        """
        details = details or {}
        if store:
            details["store"] = store
        super().__init__(message, details)
