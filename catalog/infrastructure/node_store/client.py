"""Node store REST client.

All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Caller metadata from the request context is forwarded as headers. 404
becomes ResourceNotFoundException; any other non-2xx or transport failure
is wrapped with the operation name. No call is retried.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from catalog.core.config import Settings
from catalog.core.constants import (
    HEADER_ADMIN_KEY,
    HEADER_API_KEY,
    HEADER_REQUEST_ID,
    HEADER_USER_ID,
)
from catalog.domain.exceptions import ResourceNotFoundException
from catalog.infrastructure.exceptions import (
    NodeStoreRequestError,
    NodeStoreUnavailableError,
)
from catalog.schemas.node_store import (
    Document,
    HasChildrenResponse,
    Node,
    NodeCreate,
    NodeReorderPayload,
    NodesPage,
    NodeUpdate,
)
from catalog.shared.context import get_request_meta
from catalog.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_API_PREFIX = "/api/v1"
_NODE_LIST = TypeAdapter(list[Node])
_DOCUMENT_LIST = TypeAdapter(list[Document])


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


class NodeStoreClient:
    """Async client for the node store REST API (implements INodeStore)."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        *,
        default_user_id: str = "",
        admin_key: str | None = None,
        timeout: float = 30.0,
        debug_traffic: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._default_user_id = default_user_id
        self._admin_key = admin_key
        self._debug_traffic = debug_traffic
        self._http = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        )
        self._owns_http = http_client is None

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: httpx.AsyncClient | None = None
    ) -> NodeStoreClient:
        admin_key = settings.admin_key.get_secret_value() if settings.admin_key else None
        return cls(
            settings.node_store_base_url,
            settings.node_store_api_key.get_secret_value(),
            default_user_id=settings.default_user_id,
            admin_key=admin_key,
            timeout=settings.node_store_timeout_seconds,
            debug_traffic=settings.debug_traffic,
            http_client=http_client,
        )

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> NodeStoreClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        """Build forwarding headers; request meta wins over configured defaults."""
        meta = get_request_meta()
        headers = {"Accept": "application/json"}
        api_key = meta.api_key or self._api_key
        if api_key:
            headers[HEADER_API_KEY] = api_key
        user_id = meta.user_id or self._default_user_id
        if user_id:
            headers[HEADER_USER_ID] = user_id
        if meta.request_id:
            headers[HEADER_REQUEST_ID] = meta.request_id
        admin_key = meta.admin_key or self._admin_key
        if admin_key:
            headers[HEADER_ADMIN_KEY] = admin_key
        return headers

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        resource_id: int | None = None,
    ) -> Any:
        """Perform one HTTP call and return decoded JSON (None for empty bodies)."""
        url = f"{self._base_url}{path}"
        if self._debug_traffic:
            logger.debug("node store -> %s %s params=%s body=%s", method, url, params, json)
        try:
            resp = await self._http.request(
                method, url, params=params, json=json, headers=self._headers()
            )
        except httpx.TransportError as e:
            logger.warning("node store %s unreachable: %s", operation, e)
            raise NodeStoreUnavailableError(operation, str(e)) from e

        if self._debug_traffic:
            logger.debug("node store <- %s %s: %s", resp.status_code, url, resp.text)
        if resp.status_code == 404 and resource_id is not None:
            raise ResourceNotFoundException("category", resource_id)
        if not resp.is_success:
            logger.warning(
                "node store %s failed: status=%s body=%s",
                operation,
                resp.status_code,
                resp.text,
            )
            raise NodeStoreRequestError(operation, resp.status_code, resp.text)
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise NodeStoreRequestError(
                operation, resp.status_code, "response is not valid JSON"
            ) from e

    @staticmethod
    def _parse(operation: str, parser: Any, data: Any) -> Any:
        try:
            return parser(data)
        except ValidationError as e:
            raise NodeStoreRequestError(operation, 200, f"unexpected payload: {e}") from e

    async def ping(self) -> None:
        await self._request("ping", "GET", "/ready")

    async def list_nodes(
        self, page: int = 1, size: int = 100, include_deleted: bool = False
    ) -> NodesPage:
        params: dict[str, Any] = {"page": page, "size": size}
        if include_deleted:
            params["include_deleted"] = _bool_param(True)
        data = await self._request("list nodes", "GET", f"{_API_PREFIX}/nodes", params=params)
        return self._parse("list nodes", NodesPage.model_validate, data or {})

    async def get_node(self, node_id: int, include_deleted: bool = False) -> Node:
        params = {"include_deleted": _bool_param(True)} if include_deleted else None
        data = await self._request(
            "get node",
            "GET",
            f"{_API_PREFIX}/nodes/{node_id}",
            params=params,
            resource_id=node_id,
        )
        return self._parse("get node", Node.model_validate, data)

    async def create_node(self, body: NodeCreate) -> Node:
        data = await self._request(
            "create node",
            "POST",
            f"{_API_PREFIX}/nodes",
            json=body.model_dump(exclude_none=True),
        )
        return self._parse("create node", Node.model_validate, data)

    async def update_node(self, node_id: int, body: NodeUpdate) -> Node:
        """PUT the set fields of body.

        When a parent path is sent, a 404 may mean the parent path is unknown
        rather than node_id, so it surfaces as NodeStoreRequestError(404)
        carrying the store's message instead of naming node_id.
        """
        payload = body.to_payload()
        moves_under_parent = payload.get("parent_path") is not None
        data = await self._request(
            "update node",
            "PUT",
            f"{_API_PREFIX}/nodes/{node_id}",
            json=payload,
            resource_id=None if moves_under_parent else node_id,
        )
        return self._parse("update node", Node.model_validate, data)

    async def delete_node(self, node_id: int) -> None:
        await self._request(
            "delete node", "DELETE", f"{_API_PREFIX}/nodes/{node_id}", resource_id=node_id
        )

    async def restore_node(self, node_id: int) -> Node:
        data = await self._request(
            "restore node",
            "POST",
            f"{_API_PREFIX}/nodes/{node_id}/restore",
            resource_id=node_id,
        )
        return self._parse("restore node", Node.model_validate, data)

    async def purge_node(self, node_id: int) -> None:
        await self._request(
            "purge node",
            "DELETE",
            f"{_API_PREFIX}/nodes/{node_id}/purge",
            resource_id=node_id,
        )

    async def list_children(self, node_id: int) -> list[Node]:
        data = await self._request(
            "list children",
            "GET",
            f"{_API_PREFIX}/nodes/{node_id}/children",
            resource_id=node_id,
        )
        return self._parse("list children", _NODE_LIST.validate_python, data or [])

    async def has_children(self, node_id: int) -> bool:
        data = await self._request(
            "has children",
            "GET",
            f"{_API_PREFIX}/nodes/{node_id}/has-children",
            resource_id=node_id,
        )
        parsed = self._parse("has children", HasChildrenResponse.model_validate, data)
        return parsed.has_children

    async def reorder_nodes(
        self, parent_id: int | None, ordered_ids: list[int]
    ) -> list[Node]:
        payload = NodeReorderPayload(parent_id=parent_id, ordered_ids=ordered_ids)
        data = await self._request(
            "reorder nodes",
            "POST",
            f"{_API_PREFIX}/nodes/reorder",
            json=payload.model_dump(),
        )
        return self._parse("reorder nodes", _NODE_LIST.validate_python, data or [])

    async def list_node_documents(
        self, node_id: int, include_descendants: bool = True
    ) -> list[Document]:
        data = await self._request(
            "list node documents",
            "GET",
            f"{_API_PREFIX}/nodes/{node_id}/subtree-documents",
            params={"include_descendants": _bool_param(include_descendants)},
            resource_id=node_id,
        )
        return self._parse("list node documents", _DOCUMENT_LIST.validate_python, data or [])
