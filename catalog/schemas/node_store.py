"""Wire models for the node store REST API.

Request models serialise with ``exclude_unset`` so a field the caller never
set is omitted while a field explicitly set to ``None`` is sent as ``null``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    """Node resource as returned by the store."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    slug: str = ""
    path: str = ""
    parent_id: int | None = None
    position: int = 0
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class NodesPage(BaseModel):
    """One page of the paginated node listing."""

    model_config = ConfigDict(extra="ignore")

    page: int = 0
    size: int = 0
    total: int = 0
    items: list[Node] = Field(default_factory=list)


class NodeCreate(BaseModel):
    """Create payload; parent_path omitted for root nodes."""

    name: str
    slug: str | None = None
    parent_path: str | None = None


class NodeUpdate(BaseModel):
    """Update payload with tri-state fields (absent / null / value)."""

    name: str | None = None
    slug: str | None = None
    parent_path: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class NodeReorderPayload(BaseModel):
    """Reorder payload; store assigns position = index + 1."""

    parent_id: int | None = None
    ordered_ids: list[int]


class HasChildrenResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    has_children: bool


class Document(BaseModel):
    """Document bound to a node (read-only here; content lives elsewhere)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    type: str | None = None
    position: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    content: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
