"""Node store integration (REST client over httpx)."""

from catalog.infrastructure.node_store.client import NodeStoreClient

__all__ = ["NodeStoreClient"]
