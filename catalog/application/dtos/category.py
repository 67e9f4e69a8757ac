"""DTOs for categories (tree nodes as seen by the catalog)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from catalog.shared.utils.datetime import format_rfc3339

if TYPE_CHECKING:
    from catalog.schemas.node_store import Node


@dataclass
class Category:
    """Category read-model.

    ``children`` is transient: filled by tree aggregation and bulk copy,
    never sent to the node store.
    """

    id: int
    name: str
    slug: str
    path: str
    parent_id: int | None
    position: int
    created_at: str
    updated_at: str
    deleted_at: str | None = None
    children: list[Category] = field(default_factory=list)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def from_node(cls, node: Node, parent_id: int | None = None) -> Category:
        """Map a store node; an explicit parent_id overrides the node's own."""
        return cls(
            id=node.id,
            name=node.name,
            slug=node.slug,
            path=node.path,
            parent_id=parent_id if parent_id is not None else node.parent_id,
            position=node.position,
            created_at=format_rfc3339(node.created_at) or "",
            updated_at=format_rfc3339(node.updated_at) or "",
            deleted_at=format_rfc3339(node.deleted_at),
        )


@dataclass(frozen=True)
class RepositionResult:
    """Outcome of a reposition: the node and its full updated sibling list."""

    category: Category
    siblings: list[Category]


@dataclass(frozen=True)
class DependencySummary:
    """Per-category blast radius used to confirm a (bulk) delete."""

    id: int
    name: str
    path: str
    has_children: bool
    document_count: int
    include_descendants: bool
    warnings: list[str] = field(default_factory=list)
