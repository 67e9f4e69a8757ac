"""Category mutations: create, rename, move, delete, restore, purge (and bulk variants)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.dtos.category import Category
from catalog.domain.exceptions import (
    BulkOperationException,
    CatalogException,
    CategoryHasChildrenException,
    ValidationException,
)
from catalog.domain.value_objects.core import ParentRef
from catalog.domain.value_objects.slug import slug_for
from catalog.schemas.node_store import NodeCreate, NodeUpdate
from catalog.shared.telemetry.logging import get_logger
from catalog.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore

logger = get_logger(__name__)


def _require_name(name: str | None) -> str:
    """Return the stripped name; empty or whitespace-only is a validation error."""
    if name is None or not name.strip():
        raise ValidationException("name is required", field="name")
    return name.strip()


def _require_ids(ids: list[int], field: str = "ids") -> None:
    if not ids:
        raise ValidationException(f"{field} is required", field=field)


class CategoryMutationService:
    """Single-node tree edits that enforce rules the node store does not.

    Each method issues plain sequential calls to the store; nothing is cached
    and nothing is retried.
    """

    def __init__(self, store: INodeStore) -> None:
        self.store = store

    @traced("category.get")
    async def get(self, category_id: int, include_deleted: bool = False) -> Category:
        node = await self.store.get_node(category_id, include_deleted=include_deleted)
        return Category.from_node(node)

    async def _parent_path(self, parent_id: int) -> str:
        parent = await self.store.get_node(parent_id)
        return parent.path

    @traced("category.create")
    async def create(self, name: str, parent_id: int | None = None) -> Category:
        """Create a category under parent_id (root when None); appended as last sibling."""
        clean_name = _require_name(name)
        logger.info("create name=%r parent_id=%s", clean_name, parent_id)

        parent_path = None
        if parent_id is not None:
            parent_path = await self._parent_path(parent_id)

        body = NodeCreate(name=clean_name, slug=slug_for(clean_name), parent_path=parent_path)
        node = await self.store.create_node(body)
        category = Category.from_node(node, parent_id)
        logger.info(
            "created id=%s path=%s position=%s",
            category.id,
            category.path,
            category.position,
        )
        return category

    @traced("category.rename")
    async def rename(self, category_id: int, name: str) -> Category:
        """Rename and re-slug; the store propagates the new slug into paths."""
        clean_name = _require_name(name)
        logger.info("rename id=%s name=%r", category_id, clean_name)
        node = await self.store.update_node(
            category_id, NodeUpdate(name=clean_name, slug=slug_for(clean_name))
        )
        category = Category.from_node(node)
        logger.info("renamed id=%s path=%s", category.id, category.path)
        return category

    @traced("category.move")
    async def move(self, category_id: int, new_parent: ParentRef) -> Category:
        """Change a category's parent.

        ``ParentRef.unset()`` sends no parent field, ``ParentRef.root()`` sends
        ``parent_path: null`` and ``ParentRef.to(n)`` sends n's path. The store
        recomputes path and appends the node as the last sibling.
        """
        logger.info(
            "move id=%s new_parent=%s specified=%s",
            category_id,
            new_parent.parent_id,
            new_parent.specified,
        )
        if not new_parent.specified:
            body = NodeUpdate()
        elif new_parent.is_root:
            body = NodeUpdate(parent_path=None)
        else:
            body = NodeUpdate(parent_path=await self._parent_path(new_parent.parent_id))

        node = await self.store.update_node(category_id, body)
        category = Category.from_node(node, new_parent.parent_id)
        logger.info(
            "moved id=%s parent_id=%s position=%s",
            category.id,
            category.parent_id,
            category.position,
        )
        return category

    @traced("category.delete")
    async def delete(self, category_id: int) -> None:
        """Soft-delete a leaf category; categories with children are refused."""
        logger.info("delete id=%s", category_id)
        if await self.store.has_children(category_id):
            raise CategoryHasChildrenException(category_id)
        await self.store.delete_node(category_id)

    @traced("category.restore")
    async def restore(self, category_id: int) -> Category:
        logger.info("restore id=%s", category_id)
        node = await self.store.restore_node(category_id)
        category = Category.from_node(node)
        logger.info("restored id=%s path=%s", category.id, category.path)
        return category

    @traced("category.purge")
    async def purge(self, category_id: int) -> None:
        """Permanently delete; irreversible and not guarded by a children check."""
        logger.info("purge id=%s", category_id)
        await self.store.purge_node(category_id)

    @traced("category.bulk_delete")
    async def bulk_delete(self, ids: list[int]) -> list[int]:
        _require_ids(ids)
        done: list[int] = []
        for category_id in ids:
            try:
                await self.delete(category_id)
            except CatalogException as e:
                raise BulkOperationException("bulk_delete", category_id, done, e.message) from e
            done.append(category_id)
        return done

    @traced("category.bulk_restore")
    async def bulk_restore(self, ids: list[int]) -> list[Category]:
        _require_ids(ids)
        restored: list[Category] = []
        for category_id in ids:
            try:
                restored.append(await self.restore(category_id))
            except CatalogException as e:
                raise BulkOperationException(
                    "bulk_restore", category_id, [c.id for c in restored], e.message
                ) from e
        return restored

    @traced("category.bulk_purge")
    async def bulk_purge(self, ids: list[int]) -> list[int]:
        _require_ids(ids)
        done: list[int] = []
        for category_id in ids:
            try:
                await self.purge(category_id)
            except CatalogException as e:
                raise BulkOperationException("bulk_purge", category_id, done, e.message) from e
            done.append(category_id)
        return done
