"""Category use cases: tree reads, mutations, ordering, bulk copy/move, dependency checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.use_cases.categories.bulk_copy import BulkCopyService
from catalog.application.use_cases.categories.bulk_move import BulkMoveService
from catalog.application.use_cases.categories.category_operations import (
    CategoryMutationService,
)
from catalog.application.use_cases.categories.category_ordering import (
    CategoryOrderingService,
)
from catalog.application.use_cases.categories.category_tree import (
    CategoryTreeService,
    build_tree,
)
from catalog.application.use_cases.categories.dependency_check import (
    DependencyCheckService,
)

if TYPE_CHECKING:
    from catalog.application.dtos.category import (
        Category,
        DependencySummary,
        RepositionResult,
    )
    from catalog.application.interfaces.node_store import INodeStore
    from catalog.core.config import Settings
    from catalog.domain.value_objects.core import ParentRef


class CategoryService:
    """Single entry point over one node store: every category operation.

    Attributes expose the individual services; the methods below are the
    operations callers (e.g. an HTTP handler layer) invoke.
    """

    def __init__(
        self,
        store: INodeStore,
        page_size: int = 100,
        sibling_page_size: int = 200,
    ) -> None:
        self.store = store
        self.tree = CategoryTreeService(store, page_size=page_size)
        self.mutations = CategoryMutationService(store)
        self.ordering = CategoryOrderingService(store, self.mutations)
        self.copier = BulkCopyService(
            store, self.mutations, sibling_page_size=sibling_page_size
        )
        self.mover = BulkMoveService(
            store, self.mutations, self.ordering, sibling_page_size=sibling_page_size
        )
        self.dependencies = DependencyCheckService(store)

    @classmethod
    def from_settings(cls, store: INodeStore, settings: Settings) -> CategoryService:
        return cls(
            store,
            page_size=settings.node_store_page_size,
            sibling_page_size=settings.sibling_page_size,
        )

    # Tree reads
    async def get_tree(self, include_deleted: bool = False) -> list[Category]:
        return await self.tree.get_tree(include_deleted=include_deleted)

    async def get_trash(self) -> list[Category]:
        return await self.tree.get_trash()

    # Single-node mutations
    async def get(self, category_id: int, include_deleted: bool = False) -> Category:
        return await self.mutations.get(category_id, include_deleted=include_deleted)

    async def create(self, name: str, parent_id: int | None = None) -> Category:
        return await self.mutations.create(name, parent_id=parent_id)

    async def rename(self, category_id: int, name: str) -> Category:
        return await self.mutations.rename(category_id, name)

    async def move(self, category_id: int, new_parent: ParentRef) -> Category:
        return await self.mutations.move(category_id, new_parent)

    async def delete(self, category_id: int) -> None:
        await self.mutations.delete(category_id)

    async def restore(self, category_id: int) -> Category:
        return await self.mutations.restore(category_id)

    async def purge(self, category_id: int) -> None:
        await self.mutations.purge(category_id)

    async def bulk_delete(self, ids: list[int]) -> list[int]:
        return await self.mutations.bulk_delete(ids)

    async def bulk_restore(self, ids: list[int]) -> list[Category]:
        return await self.mutations.bulk_restore(ids)

    async def bulk_purge(self, ids: list[int]) -> list[int]:
        return await self.mutations.bulk_purge(ids)

    # Ordering
    async def reorder(
        self, parent_id: int | None, ordered_ids: list[int]
    ) -> list[Category]:
        return await self.ordering.reorder(parent_id, ordered_ids)

    async def reposition(
        self,
        category_id: int,
        ordered_ids: list[int],
        new_parent: ParentRef | None = None,
    ) -> RepositionResult:
        return await self.ordering.reposition(category_id, ordered_ids, new_parent=new_parent)

    # Bulk relocation
    async def bulk_copy(
        self, source_ids: list[int], target_parent_id: int | None = None
    ) -> list[Category]:
        return await self.copier.bulk_copy(source_ids, target_parent_id=target_parent_id)

    async def bulk_move(
        self,
        source_ids: list[int],
        target_parent_id: int | None = None,
        insert_before_id: int | None = None,
        insert_after_id: int | None = None,
    ) -> list[Category]:
        return await self.mover.bulk_move(
            source_ids,
            target_parent_id=target_parent_id,
            insert_before_id=insert_before_id,
            insert_after_id=insert_after_id,
        )

    # Delete preview
    async def check_dependencies(
        self, ids: list[int], include_descendants: bool = True
    ) -> list[DependencySummary]:
        return await self.dependencies.check_dependencies(
            ids, include_descendants=include_descendants
        )


__all__ = [
    "BulkCopyService",
    "BulkMoveService",
    "CategoryMutationService",
    "CategoryOrderingService",
    "CategoryService",
    "CategoryTreeService",
    "DependencyCheckService",
    "build_tree",
]
