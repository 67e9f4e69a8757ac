"""Pytest configuration and fixtures for catalog.

Provides an in-memory node store with real path and position bookkeeping
for scenario tests. Unit tests that only check call shapes use AsyncMock.
"""

import os
import sys
from datetime import datetime, timezone
from typing import Any

import pytest

# Settings require a node store URL; tests never reach it.
os.environ.setdefault("NODE_STORE_BASE_URL", "http://node-store.test")

from catalog.application.use_cases.categories import CategoryService  # noqa: E402
from catalog.core.config import get_settings  # noqa: E402
from catalog.domain.exceptions import ResourceNotFoundException  # noqa: E402
from catalog.schemas.node_store import (  # noqa: E402
    Document,
    Node,
    NodeCreate,
    NodesPage,
    NodeUpdate,
)
from catalog.shared.context import clear_request_meta  # noqa: E402

FIXED_TIME = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_node(
    node_id: int,
    name: str,
    parent_id: int | None = None,
    position: int = 1,
    deleted: bool = False,
) -> Node:
    """Node with fixed timestamps; slug and path derived from the name."""
    slug = name.lower().replace(" ", "-")
    return Node(
        id=node_id,
        name=name,
        slug=slug,
        path=f"/{slug}",
        parent_id=parent_id,
        position=position,
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
        deleted_at=FIXED_TIME if deleted else None,
    )


class FakeNodeStore:
    """In-memory INodeStore.

    Mirrors the store rules the catalog relies on: paths built from parent
    path and slug, new and moved nodes appended as last sibling, dense
    positions after removal, reorder assigning index + 1.
    """

    def __init__(self) -> None:
        self.nodes: dict[int, dict[str, Any]] = {}
        self.documents: dict[int, list[Document]] = {}
        self.calls: list[str] = []
        self._next_id = 1

    # ---- helpers ----
    def _node(self, record: dict[str, Any]) -> Node:
        return Node(**record)

    def _siblings(self, parent_id: int | None) -> list[dict[str, Any]]:
        return sorted(
            (
                r
                for r in self.nodes.values()
                if r["parent_id"] == parent_id and r["deleted_at"] is None
            ),
            key=lambda r: r["position"],
        )

    def _densify(self, parent_id: int | None) -> None:
        for i, record in enumerate(self._siblings(parent_id), start=1):
            record["position"] = i

    def _next_position(self, parent_id: int | None) -> int:
        return len(self._siblings(parent_id)) + 1

    def _refresh_paths(self, record: dict[str, Any]) -> None:
        parent = self.nodes.get(record["parent_id"]) if record["parent_id"] else None
        prefix = parent["path"] if parent else ""
        record["path"] = f"{prefix}/{record['slug']}"
        for child in self.nodes.values():
            if child["parent_id"] == record["id"]:
                self._refresh_paths(child)

    def _parent_id_for_path(self, path: str | None) -> int | None:
        if path is None:
            return None
        for record in self.nodes.values():
            if record["path"] == path and record["deleted_at"] is None:
                return record["id"]
        raise ResourceNotFoundException("category", path)

    def _require(self, node_id: int, include_deleted: bool = True) -> dict[str, Any]:
        record = self.nodes.get(node_id)
        if record is None or (record["deleted_at"] is not None and not include_deleted):
            raise ResourceNotFoundException("category", node_id)
        return record

    def _descendant_ids(self, node_id: int) -> list[int]:
        ids = []
        for record in self.nodes.values():
            if record["parent_id"] == node_id:
                ids.append(record["id"])
                ids.extend(self._descendant_ids(record["id"]))
        return ids

    def add(
        self, name: str, parent_id: int | None = None, deleted: bool = False
    ) -> int:
        """Seed a node directly (no call recorded)."""
        node_id = self._next_id
        self._next_id += 1
        record = {
            "id": node_id,
            "name": name,
            "slug": name.lower().replace(" ", "-"),
            "path": "",
            "parent_id": parent_id,
            "position": self._next_position(parent_id),
            "created_at": FIXED_TIME,
            "updated_at": FIXED_TIME,
            "deleted_at": FIXED_TIME if deleted else None,
        }
        self.nodes[node_id] = record
        self._refresh_paths(record)
        return node_id

    def children_of(self, parent_id: int | None) -> list[Node]:
        return [self._node(r) for r in self._siblings(parent_id)]

    # ---- INodeStore ----
    async def ping(self) -> None:
        self.calls.append("ping")

    async def list_nodes(
        self, page: int = 1, size: int = 100, include_deleted: bool = False
    ) -> NodesPage:
        self.calls.append("list_nodes")
        records = [
            r
            for _, r in sorted(self.nodes.items())
            if include_deleted or r["deleted_at"] is None
        ]
        start = (page - 1) * size
        items = [self._node(r) for r in records[start : start + size]]
        return NodesPage(page=page, size=size, total=len(records), items=items)

    async def get_node(self, node_id: int, include_deleted: bool = False) -> Node:
        self.calls.append("get_node")
        return self._node(self._require(node_id, include_deleted))

    async def create_node(self, body: NodeCreate) -> Node:
        self.calls.append("create_node")
        parent_id = self._parent_id_for_path(body.parent_path)
        node_id = self.add(body.name, parent_id)
        record = self.nodes[node_id]
        if body.slug:
            record["slug"] = body.slug
            self._refresh_paths(record)
        return self._node(record)

    async def update_node(self, node_id: int, body: NodeUpdate) -> Node:
        self.calls.append("update_node")
        record = self._require(node_id, include_deleted=False)
        payload = body.to_payload()
        if "name" in payload:
            record["name"] = payload["name"]
        if "slug" in payload:
            record["slug"] = payload["slug"]
        if "parent_path" in payload:
            old_parent = record["parent_id"]
            new_parent = self._parent_id_for_path(payload["parent_path"])
            record["parent_id"] = new_parent
            record["position"] = sys.maxsize
            self._densify(old_parent)
            self._densify(new_parent)
        self._refresh_paths(record)
        return self._node(record)

    async def delete_node(self, node_id: int) -> None:
        self.calls.append("delete_node")
        record = self._require(node_id, include_deleted=False)
        record["deleted_at"] = FIXED_TIME
        self._densify(record["parent_id"])

    async def restore_node(self, node_id: int) -> Node:
        self.calls.append("restore_node")
        record = self._require(node_id)
        record["deleted_at"] = None
        record["position"] = sys.maxsize
        self._densify(record["parent_id"])
        return self._node(record)

    async def purge_node(self, node_id: int) -> None:
        self.calls.append("purge_node")
        record = self._require(node_id)
        for descendant in self._descendant_ids(node_id):
            self.nodes.pop(descendant, None)
        self.nodes.pop(node_id)
        self._densify(record["parent_id"])

    async def list_children(self, node_id: int) -> list[Node]:
        self.calls.append("list_children")
        self._require(node_id)
        children = [r for r in self.nodes.values() if r["parent_id"] == node_id]
        return [self._node(r) for r in sorted(children, key=lambda r: r["position"])]

    async def has_children(self, node_id: int) -> bool:
        self.calls.append("has_children")
        self._require(node_id)
        return bool(self._siblings(node_id))

    async def reorder_nodes(
        self, parent_id: int | None, ordered_ids: list[int]
    ) -> list[Node]:
        self.calls.append("reorder_nodes")
        result = []
        for i, node_id in enumerate(ordered_ids, start=1):
            record = self._require(node_id, include_deleted=False)
            record["position"] = i
            result.append(self._node(record))
        return result

    async def list_node_documents(
        self, node_id: int, include_descendants: bool = True
    ) -> list[Document]:
        self.calls.append("list_node_documents")
        self._require(node_id)
        ids = [node_id]
        if include_descendants:
            ids.extend(self._descendant_ids(node_id))
        return [doc for i in ids for doc in self.documents.get(i, [])]


@pytest.fixture
def store() -> FakeNodeStore:
    return FakeNodeStore()


@pytest.fixture
def service(store: FakeNodeStore) -> CategoryService:
    """CategoryService over the in-memory store, with small pages to exercise paging."""
    return CategoryService(store, page_size=2, sibling_page_size=2)


@pytest.fixture(autouse=True)
def _reset_context():
    """Each test starts with empty request metadata and fresh settings."""
    clear_request_meta()
    get_settings.cache_clear()
    yield
    clear_request_meta()
    get_settings.cache_clear()
