"""Infrastructure exceptions for node store operations.

Node store errors extend CatalogException so callers can map them to
responses consistently. Every error names the client operation that
failed; nothing here is retried.
"""

from catalog.domain.exceptions import CatalogException


class NodeStoreException(CatalogException):
    """Base exception for node store operations."""


class NodeStoreRequestError(NodeStoreException):
    """Node store answered with a non-2xx status or an unreadable body."""

    def __init__(self, operation: str, status_code: int, reason: str) -> None:
        super().__init__(
            f"{operation}: node store returned {status_code}: {reason}",
            "NODE_STORE_ERROR",
            {"operation": operation, "status_code": status_code, "reason": reason},
        )
        self.status_code = status_code


class NodeStoreUnavailableError(NodeStoreException):
    """Node store could not be reached (connect/read failure or timeout)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"{operation}: node store unavailable: {reason}",
            "NODE_STORE_UNAVAILABLE",
            {"operation": operation, "reason": reason},
        )
