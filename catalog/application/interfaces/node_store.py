"""Node store interface (port) for the application layer.

The Protocol defines the contract the remote node store client must
fulfil (DIP). Types reference pydantic schemas only; no infrastructure
imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from catalog.schemas.node_store import (
        Document,
        Node,
        NodeCreate,
        NodesPage,
        NodeUpdate,
    )


class INodeStore(Protocol):
    """Protocol for the remote hierarchical node store."""

    async def ping(self) -> None:
        """Raise if the store is not ready."""

    async def list_nodes(
        self, page: int = 1, size: int = 100, include_deleted: bool = False
    ) -> NodesPage:
        """Return one page of nodes (all parents), optionally with tombstones."""

    async def get_node(self, node_id: int, include_deleted: bool = False) -> Node:
        """Return node by id; ResourceNotFoundException if missing."""

    async def create_node(self, body: NodeCreate) -> Node:
        """Create node; the store assigns id, path and position (last sibling)."""

    async def update_node(self, node_id: int, body: NodeUpdate) -> Node:
        """Update only the fields set on body (null clears, absent keeps)."""

    async def delete_node(self, node_id: int) -> None:
        """Soft-delete node."""

    async def restore_node(self, node_id: int) -> Node:
        """Clear deleted_at on node."""

    async def purge_node(self, node_id: int) -> None:
        """Permanently delete node."""

    async def list_children(self, node_id: int) -> list[Node]:
        """Return direct children ordered by position."""

    async def has_children(self, node_id: int) -> bool:
        """Return True if node has at least one non-deleted child."""

    async def reorder_nodes(
        self, parent_id: int | None, ordered_ids: list[int]
    ) -> list[Node]:
        """Assign position = index + 1 to ordered_ids under parent_id."""

    async def list_node_documents(
        self, node_id: int, include_descendants: bool = True
    ) -> list[Document]:
        """Return documents bound to node (and its subtree when requested)."""
