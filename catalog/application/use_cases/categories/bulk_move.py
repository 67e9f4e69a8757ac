"""Bulk relocation of several categories under one parent, anchored among siblings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.dtos.category import Category
from catalog.application.use_cases.categories.siblings import list_sibling_ids
from catalog.domain.exceptions import (
    BulkOperationException,
    CatalogException,
    ValidationException,
)
from catalog.domain.value_objects.core import ParentRef
from catalog.shared.telemetry.logging import get_logger
from catalog.shared.telemetry.tracing import add_span_event, traced

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore
    from catalog.application.use_cases.categories.category_operations import (
        CategoryMutationService,
    )
    from catalog.application.use_cases.categories.category_ordering import (
        CategoryOrderingService,
    )

logger = get_logger(__name__)


def splice_ordering(
    remaining: list[int],
    moved: list[int],
    insert_before_id: int | None = None,
    insert_after_id: int | None = None,
) -> list[int]:
    """Insert ``moved`` into ``remaining`` before/after an anchor, or append.

    Raises:
        ValidationException: anchor is not in ``remaining``.
    """
    anchor = insert_before_id if insert_before_id is not None else insert_after_id
    if anchor is None:
        return [*remaining, *moved]
    if anchor not in remaining:
        raise ValidationException(
            f"anchor id {anchor} not found among siblings",
            field="insert_before_id" if insert_before_id is not None else "insert_after_id",
        )
    index = remaining.index(anchor)
    if insert_after_id is not None:
        index += 1
    return [*remaining[:index], *moved, *remaining[index:]]


class BulkMoveService:
    """Move several categories to one parent and place them as a contiguous block."""

    def __init__(
        self,
        store: INodeStore,
        mutations: CategoryMutationService,
        ordering: CategoryOrderingService,
        sibling_page_size: int = 200,
    ) -> None:
        self.store = store
        self.mutations = mutations
        self.ordering = ordering
        self.sibling_page_size = sibling_page_size

    @staticmethod
    def _validate(
        source_ids: list[int],
        insert_before_id: int | None,
        insert_after_id: int | None,
    ) -> None:
        if not source_ids:
            raise ValidationException("source_ids is required", field="source_ids")
        if len(set(source_ids)) != len(source_ids):
            raise ValidationException("source_ids must not repeat ids", field="source_ids")
        if insert_before_id is not None and insert_after_id is not None:
            raise ValidationException(
                "insert_before_id and insert_after_id cannot both be set",
                field="insert_before_id",
            )
        anchor = insert_before_id if insert_before_id is not None else insert_after_id
        if anchor is not None and anchor in source_ids:
            raise ValidationException(
                "anchor cannot be part of source_ids",
                field="insert_before_id" if insert_before_id is not None else "insert_after_id",
            )

    @traced("category.bulk_move")
    async def bulk_move(
        self,
        source_ids: list[int],
        target_parent_id: int | None = None,
        insert_before_id: int | None = None,
        insert_after_id: int | None = None,
    ) -> list[Category]:
        """Move source_ids under target_parent_id (root when None).

        The moved categories end up contiguous, in ``source_ids`` order,
        immediately before/after the anchor sibling or at the end. Returns
        only the moved categories, in ``source_ids`` order. Not transactional:
        a failure after the first move raises BulkOperationException listing
        the ids already moved.
        """
        self._validate(source_ids, insert_before_id, insert_after_id)
        logger.info(
            "bulk move sources=%s target_parent_id=%s before=%s after=%s",
            source_ids,
            target_parent_id,
            insert_before_id,
            insert_after_id,
        )

        if insert_before_id is not None or insert_after_id is not None:
            # Anchor must already be a sibling at the target; check before mutating.
            current = await list_sibling_ids(
                self.store, target_parent_id, self.sibling_page_size
            )
            splice_ordering(current, [], insert_before_id, insert_after_id)

        target = ParentRef.to(target_parent_id)
        moved_ids: list[int] = []
        for source_id in source_ids:
            try:
                await self.mutations.move(source_id, target)
            except CatalogException as e:
                add_span_event("bulk_move.failed", {"source_id": source_id, "moved": len(moved_ids)})
                raise BulkOperationException("bulk_move", source_id, moved_ids, e.message) from e
            moved_ids.append(source_id)

        try:
            siblings = await list_sibling_ids(
                self.store, target_parent_id, self.sibling_page_size
            )
            moved_set = set(source_ids)
            remaining = [sid for sid in siblings if sid not in moved_set]
            ordered = splice_ordering(
                remaining, list(source_ids), insert_before_id, insert_after_id
            )
            reordered = await self.ordering.reorder(target_parent_id, ordered)
        except CatalogException as e:
            logger.warning("bulk move reorder failed moved=%s: %s", moved_ids, e.message)
            raise BulkOperationException("bulk_move", None, moved_ids, e.message) from e

        rank = {sid: i for i, sid in enumerate(source_ids)}
        moved = [c for c in reordered if c.id in rank]
        moved.sort(key=lambda c: rank[c.id])
        logger.info("bulk move done moved=%s ordering=%s", len(moved), ordered)
        return moved
