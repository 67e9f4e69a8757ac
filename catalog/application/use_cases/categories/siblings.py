"""Paginated node enumeration shared by tree, copy and move operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore
    from catalog.schemas.node_store import Node

logger = get_logger(__name__)


async def fetch_all_nodes(
    store: INodeStore, page_size: int, include_deleted: bool = False
) -> list[Node]:
    """Page through the whole node listing.

    Stops when the running count reaches the first page's reported total,
    a page comes back empty, or a page is shorter than the page size. Any
    one of these is enough, so a missing or wrong total cannot loop forever.
    """
    nodes: list[Node] = []
    total = 0
    page_number = 1
    while True:
        page = await store.list_nodes(
            page=page_number, size=page_size, include_deleted=include_deleted
        )
        if total == 0:
            total = page.total
        nodes.extend(page.items)

        effective_size = page.size or page_size
        if (
            (total and len(nodes) >= total)
            or not page.items
            or len(page.items) < effective_size
        ):
            break
        page_number += 1
    logger.debug(
        "fetched nodes total=%s fetched=%s pages=%s include_deleted=%s",
        total,
        len(nodes),
        page_number,
        include_deleted,
    )
    return nodes


async def list_sibling_nodes(
    store: INodeStore, parent_id: int | None, page_size: int
) -> list[Node]:
    """Non-deleted children of parent_id (roots when None), ordered by position."""
    if parent_id is None:
        nodes = await fetch_all_nodes(store, page_size)
        siblings = [n for n in nodes if n.parent_id is None and n.deleted_at is None]
    else:
        children = await store.list_children(parent_id)
        siblings = [n for n in children if n.deleted_at is None]
    return sorted(siblings, key=lambda n: n.position)


async def list_sibling_ids(
    store: INodeStore, parent_id: int | None, page_size: int
) -> list[int]:
    return [n.id for n in await list_sibling_nodes(store, parent_id, page_size)]


async def list_sibling_names(
    store: INodeStore, parent_id: int | None, page_size: int
) -> set[str]:
    return {n.name for n in await list_sibling_nodes(store, parent_id, page_size)}
