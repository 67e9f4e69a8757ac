"""BulkMoveService tests: anchored splicing, validation, partial failure."""

from unittest.mock import AsyncMock

import pytest

from catalog.application.use_cases.categories import CategoryService
from catalog.application.use_cases.categories.bulk_move import splice_ordering
from catalog.domain.exceptions import (
    BulkOperationException,
    ResourceNotFoundException,
    ValidationException,
)
from tests.conftest import FakeNodeStore


class TestSpliceOrdering:
    def test_append_without_anchor(self) -> None:
        assert splice_ordering([1, 2], [7, 8]) == [1, 2, 7, 8]

    def test_before_anchor(self) -> None:
        assert splice_ordering([1, 2, 3], [7, 8], insert_before_id=2) == [1, 7, 8, 2, 3]

    def test_after_anchor(self) -> None:
        assert splice_ordering([1, 2, 3], [7, 8], insert_after_id=3) == [1, 2, 3, 7, 8]

    def test_missing_anchor_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            splice_ordering([1, 2], [7], insert_after_id=9)
        assert exc_info.value.details == {"field": "insert_after_id"}


@pytest.fixture
def roots_and_folder(store: FakeNodeStore) -> dict[str, int]:
    """Roots P, X, Y; P holds A and B."""
    p = store.add("P")
    x = store.add("X")
    y = store.add("Y")
    a = store.add("A", p)
    b = store.add("B", p)
    return {"P": p, "X": x, "Y": y, "A": a, "B": b}


async def test_move_before_anchor(
    service: CategoryService, store: FakeNodeStore, roots_and_folder: dict[str, int]
) -> None:
    ids = roots_and_folder

    moved = await service.bulk_move([ids["A"], ids["B"]], insert_before_id=ids["X"])

    assert [c.id for c in moved] == [ids["A"], ids["B"]]
    assert [n.name for n in store.children_of(None)] == ["P", "A", "B", "X", "Y"]
    assert [n.position for n in store.children_of(None)] == [1, 2, 3, 4, 5]
    assert store.children_of(ids["P"]) == []


async def test_move_after_anchor_keeps_source_order(
    service: CategoryService, store: FakeNodeStore, roots_and_folder: dict[str, int]
) -> None:
    ids = roots_and_folder

    moved = await service.bulk_move([ids["B"], ids["A"]], insert_after_id=ids["Y"])

    assert [c.id for c in moved] == [ids["B"], ids["A"]]
    assert [n.name for n in store.children_of(None)] == ["P", "X", "Y", "B", "A"]


async def test_move_without_anchor_appends(
    service: CategoryService, store: FakeNodeStore, roots_and_folder: dict[str, int]
) -> None:
    ids = roots_and_folder

    await service.bulk_move([ids["X"]], target_parent_id=ids["P"])

    assert [n.name for n in store.children_of(ids["P"])] == ["A", "B", "X"]
    assert [n.name for n in store.children_of(None)] == ["P", "Y"]


async def test_anchor_not_a_sibling_rejected_before_moving(
    service: CategoryService, store: FakeNodeStore, roots_and_folder: dict[str, int]
) -> None:
    ids = roots_and_folder

    with pytest.raises(ValidationException):
        await service.bulk_move([ids["X"]], target_parent_id=ids["P"], insert_before_id=ids["Y"])

    assert "update_node" not in store.calls


@pytest.mark.parametrize(
    "kwargs",
    [
        {"source_ids": []},
        {"source_ids": [1, 1]},
        {"source_ids": [1], "insert_before_id": 2, "insert_after_id": 3},
        {"source_ids": [1, 2], "insert_before_id": 2},
        {"source_ids": [1, 2], "insert_after_id": 1},
    ],
)
async def test_invalid_input_rejected_before_remote_call(kwargs: dict) -> None:
    store = AsyncMock()
    svc = CategoryService(store)

    with pytest.raises(ValidationException):
        await svc.bulk_move(**kwargs)

    store.get_node.assert_not_awaited()
    store.update_node.assert_not_awaited()
    store.list_nodes.assert_not_awaited()


async def test_failed_move_reports_moved_ids(
    service: CategoryService, store: FakeNodeStore, roots_and_folder: dict[str, int]
) -> None:
    ids = roots_and_folder

    with pytest.raises(BulkOperationException) as exc_info:
        await service.bulk_move([ids["A"], 999])

    exc = exc_info.value
    assert exc.failed_id == 999
    assert exc.completed_ids == [ids["A"]]
    assert isinstance(exc.__cause__, ResourceNotFoundException)
    assert "reorder_nodes" not in store.calls


async def test_reorder_failure_after_moves(
    service: CategoryService, store: FakeNodeStore, roots_and_folder: dict[str, int]
) -> None:
    ids = roots_and_folder
    store.reorder_nodes = AsyncMock(side_effect=ResourceNotFoundException("category", 1))

    with pytest.raises(BulkOperationException) as exc_info:
        await service.bulk_move([ids["A"], ids["B"]])

    exc = exc_info.value
    assert exc.failed_id is None
    assert exc.completed_ids == [ids["A"], ids["B"]]
