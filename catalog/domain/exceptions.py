"""Domain exceptions for the catalog service.

Defines domain-level exceptions that represent business rule violations
on the category tree. These exceptions are independent of the node store
transport; callers (e.g. an HTTP handler layer) map them to responses
using message, error_code, and details.
"""

from typing import Any


class CatalogException(Exception):
    """Base exception for all catalog errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(CatalogException):
    """Raised when input validation fails (empty name, empty id list, bad anchor)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UniqueNameExhaustedException(ValidationException):
    """Raised when no free copy name exists among the bounded candidates."""

    def __init__(self, base_name: str, attempts: int) -> None:
        super().__init__(f"Unable to generate unique name for {base_name!r}", field="name")
        self.error_code = "UNIQUE_NAME_EXHAUSTED"
        self.details.update({"base_name": base_name, "attempts": attempts})


class ResourceNotFoundException(CatalogException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'category', 'document').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class CategoryHasChildrenException(CatalogException):
    """Raised when soft-deleting a category that still has children."""

    def __init__(self, category_id: int) -> None:
        super().__init__(
            "Cannot delete category with children",
            "CATEGORY_HAS_CHILDREN",
            {"category_id": category_id},
        )


class BulkOperationException(CatalogException):
    """Raised when a sub-step of a bulk operation fails.

    Steps that completed before the failure are not rolled back; their ids
    are listed so the caller can reconcile. The failing step's exception is
    chained as __cause__.
    """

    def __init__(
        self,
        operation: str,
        failed_id: int | None,
        completed_ids: list[int],
        reason: str,
    ) -> None:
        """Initialize with the operation and what had been done so far.

        Args:
            operation: Bulk operation name (e.g. 'bulk_move').
            failed_id: Source id whose sub-step failed; None when the failing
                step is not tied to one id (e.g. the final reorder).
            completed_ids: Ids already processed. For bulk copy these are the
                ids of every node created so far, descendants included.
            reason: Message of the underlying error.
        """
        where = f"at id {failed_id}" if failed_id is not None else "after processing"
        super().__init__(
            f"{operation} failed {where}: {reason}",
            "BULK_OPERATION_FAILED",
            {
                "operation": operation,
                "failed_id": failed_id,
                "completed_ids": list(completed_ids),
                "reason": reason,
            },
        )
        self.operation = operation
        self.failed_id = failed_id
        self.completed_ids = list(completed_ids)
