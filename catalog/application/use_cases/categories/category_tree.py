"""Tree aggregation: assemble the category forest from paginated node listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.dtos.category import Category
from catalog.application.use_cases.categories.siblings import fetch_all_nodes
from catalog.shared.telemetry.logging import get_logger
from catalog.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore
    from catalog.schemas.node_store import Node

logger = get_logger(__name__)


def _sort_key(category: Category) -> tuple[int, str]:
    return (category.position, category.name)


def build_tree(nodes: list[Node]) -> list[Category]:
    """Build a rooted, ordered forest from a flat node list.

    A node whose parent is absent from ``nodes`` (or that has no parent) is a
    root, so orphans stay visible instead of being dropped. Roots and every
    child list are ordered by (position, name).
    """
    by_id = {node.id: Category.from_node(node) for node in nodes}
    roots: list[Category] = []
    for category in by_id.values():
        parent = by_id.get(category.parent_id) if category.parent_id is not None else None
        if parent is None or parent is category:
            roots.append(category)
        else:
            parent.children.append(category)

    roots.sort(key=_sort_key)
    for category in by_id.values():
        if category.children:
            category.children.sort(key=_sort_key)
    return roots


class CategoryTreeService:
    """Read-side aggregation over the node store (tree and trash)."""

    def __init__(self, store: INodeStore, page_size: int = 100) -> None:
        self.store = store
        self.page_size = page_size

    @traced("category.get_tree")
    async def get_tree(self, include_deleted: bool = False) -> list[Category]:
        """Return the whole forest; tombstones only when include_deleted."""
        nodes = await fetch_all_nodes(self.store, self.page_size, include_deleted)
        tree = build_tree(nodes)
        add_span_attributes(fetched=len(nodes), roots=len(tree))
        logger.info(
            "tree aggregated fetched=%s roots=%s include_deleted=%s",
            len(nodes),
            len(tree),
            include_deleted,
        )
        return tree

    @traced("category.get_trash")
    async def get_trash(self) -> list[Category]:
        """Return soft-deleted categories as a flat list."""
        nodes = await fetch_all_nodes(self.store, self.page_size, include_deleted=True)
        deleted = [Category.from_node(n) for n in nodes if n.deleted_at is not None]
        logger.info("trash listed fetched=%s deleted=%s", len(nodes), len(deleted))
        return deleted
