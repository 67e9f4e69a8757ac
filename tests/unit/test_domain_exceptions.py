"""Tests for domain and node store exceptions (error_code, message, details)."""

import pytest

from catalog.domain.exceptions import (
    BulkOperationException,
    CatalogException,
    CategoryHasChildrenException,
    ResourceNotFoundException,
    UniqueNameExhaustedException,
    ValidationException,
)
from catalog.infrastructure.exceptions import (
    NodeStoreException,
    NodeStoreRequestError,
    NodeStoreUnavailableError,
)


def test_catalog_exception_default_error_code() -> None:
    """Base CatalogException uses class name as error_code when not provided."""
    exc = CatalogException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CatalogException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_catalog_exception_custom_error_code_and_details() -> None:
    exc = CatalogException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("name is required", field="name")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "name"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_unique_name_exhausted_is_validation_error() -> None:
    exc = UniqueNameExhaustedException("Docs", 50)
    assert isinstance(exc, ValidationException)
    assert exc.error_code == "UNIQUE_NAME_EXHAUSTED"
    assert exc.details == {"field": "name", "base_name": "Docs", "attempts": 50}
    assert "Docs" in exc.message


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("category", 42)
    assert exc.message == "category not found: 42"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "category", "resource_id": 42}


def test_category_has_children_exception() -> None:
    exc = CategoryHasChildrenException(9)
    assert exc.error_code == "CATEGORY_HAS_CHILDREN"
    assert exc.details == {"category_id": 9}
    assert "children" in exc.message


def test_bulk_operation_exception_with_failed_id() -> None:
    exc = BulkOperationException("bulk_move", 3, [1, 2], "boom")
    assert exc.error_code == "BULK_OPERATION_FAILED"
    assert exc.message == "bulk_move failed at id 3: boom"
    assert exc.failed_id == 3
    assert exc.completed_ids == [1, 2]
    assert exc.details["completed_ids"] == [1, 2]
    assert exc.details["reason"] == "boom"


def test_bulk_operation_exception_copies_completed_ids() -> None:
    done = [1]
    exc = BulkOperationException("bulk_copy", 2, done, "x")
    done.append(5)
    assert exc.completed_ids == [1]


def test_bulk_operation_exception_without_failed_id() -> None:
    exc = BulkOperationException("bulk_move", None, [4], "reorder failed")
    assert exc.message == "bulk_move failed after processing: reorder failed"
    assert exc.details["failed_id"] is None


def test_node_store_request_error() -> None:
    exc = NodeStoreRequestError("update node", 500, "internal")
    assert isinstance(exc, NodeStoreException)
    assert isinstance(exc, CatalogException)
    assert exc.error_code == "NODE_STORE_ERROR"
    assert exc.status_code == 500
    assert exc.details == {"operation": "update node", "status_code": 500, "reason": "internal"}
    assert exc.message.startswith("update node:")


def test_node_store_unavailable_error() -> None:
    exc = NodeStoreUnavailableError("list nodes", "connection refused")
    assert exc.error_code == "NODE_STORE_UNAVAILABLE"
    assert exc.details["operation"] == "list nodes"


@pytest.mark.parametrize(
    "exc",
    [
        ValidationException("x"),
        ResourceNotFoundException("category", 1),
        CategoryHasChildrenException(1),
        BulkOperationException("bulk_delete", 1, [], "x"),
        NodeStoreUnavailableError("ping", "down"),
    ],
)
def test_all_are_catalog_exceptions(exc: CatalogException) -> None:
    assert isinstance(exc, CatalogException)
