"""Sibling ordering: reorder a full sibling set, and move-then-reorder (reposition)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.dtos.category import Category, RepositionResult
from catalog.domain.exceptions import ValidationException
from catalog.domain.value_objects.core import ParentRef
from catalog.shared.telemetry.logging import get_logger
from catalog.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore
    from catalog.application.use_cases.categories.category_operations import (
        CategoryMutationService,
    )

logger = get_logger(__name__)


class CategoryOrderingService:
    """Dense 1-based sibling positions, assigned by the node store in one call."""

    def __init__(self, store: INodeStore, mutations: CategoryMutationService) -> None:
        self.store = store
        self.mutations = mutations

    @traced("category.reorder")
    async def reorder(
        self, parent_id: int | None, ordered_ids: list[int]
    ) -> list[Category]:
        """Set position = index + 1 for each id under parent_id.

        The caller supplies the complete sibling set; partial reorders are
        not merged with the store's current order.
        """
        if not ordered_ids:
            raise ValidationException("ordered_ids is required", field="ordered_ids")
        if len(set(ordered_ids)) != len(ordered_ids):
            raise ValidationException("ordered_ids must not repeat ids", field="ordered_ids")

        logger.info("reorder parent_id=%s ids=%s", parent_id, ordered_ids)
        nodes = await self.store.reorder_nodes(parent_id, list(ordered_ids))
        categories = [Category.from_node(node, parent_id) for node in nodes]
        logger.info("reorder done parent_id=%s count=%s", parent_id, len(categories))
        return categories

    @traced("category.reposition")
    async def reposition(
        self,
        category_id: int,
        ordered_ids: list[int],
        new_parent: ParentRef | None = None,
    ) -> RepositionResult:
        """Move (when the parent changes) and reorder the destination siblings.

        Repeating a call with the same arguments is a pure reorder: the parent
        already matches, so no move is issued.
        """
        new_parent = new_parent or ParentRef.unset()
        if not ordered_ids:
            raise ValidationException("ordered_ids is required", field="ordered_ids")
        if category_id not in ordered_ids:
            raise ValidationException(
                "ordered_ids must contain the target category id", field="ordered_ids"
            )
        logger.info(
            "reposition id=%s parent_specified=%s new_parent=%s ordered_ids=%s",
            category_id,
            new_parent.specified,
            new_parent.parent_id,
            ordered_ids,
        )

        current = await self.mutations.get(category_id, include_deleted=True)
        parent_id = current.parent_id
        if new_parent.differs_from(current.parent_id):
            current = await self.mutations.move(category_id, new_parent)
            parent_id = new_parent.parent_id

        siblings = await self.reorder(parent_id, ordered_ids)
        category = next((c for c in siblings if c.id == category_id), current)
        return RepositionResult(category=category, siblings=siblings)
