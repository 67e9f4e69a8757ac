"""Pydantic schemas for the node store wire format."""

from catalog.schemas.node_store import (
    Document,
    HasChildrenResponse,
    Node,
    NodeCreate,
    NodeReorderPayload,
    NodesPage,
    NodeUpdate,
)

__all__ = [
    "Document",
    "HasChildrenResponse",
    "Node",
    "NodeCreate",
    "NodeReorderPayload",
    "NodesPage",
    "NodeUpdate",
]
