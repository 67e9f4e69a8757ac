"""Recursive subtree copy with per-destination unique-name resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.dtos.category import Category
from catalog.application.use_cases.categories.siblings import list_sibling_names
from catalog.core.constants import COPY_NAME_SUFFIX, MAX_COPY_NAME_ATTEMPTS
from catalog.domain.exceptions import (
    BulkOperationException,
    CatalogException,
    UniqueNameExhaustedException,
    ValidationException,
)
from catalog.shared.telemetry.logging import get_logger
from catalog.shared.telemetry.tracing import add_span_event, traced

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore
    from catalog.application.use_cases.categories.category_operations import (
        CategoryMutationService,
    )

logger = get_logger(__name__)


def copy_name_candidates(base: str, attempts: int = MAX_COPY_NAME_ATTEMPTS) -> list[str]:
    """Names to try in order: base, "base (copy)", "base (copy 2)", ... "base (copy N)"."""
    candidates = [base]
    for i in range(1, attempts + 1):
        if i == 1:
            candidates.append(f"{base} ({COPY_NAME_SUFFIX})")
        else:
            candidates.append(f"{base} ({COPY_NAME_SUFFIX} {i})")
    return candidates


class _CopyRun:
    """State of one bulk_copy call.

    ``used_names`` maps destination parent id (None for root) to the sibling
    names already taken there, loaded once and extended as copies are
    allocated. It lives only for the call, so concurrent copies never share it.
    """

    def __init__(self, service: BulkCopyService) -> None:
        self.service = service
        self.used_names: dict[int | None, set[str]] = {}
        self.created_ids: list[int] = []

    async def unique_name(self, parent_id: int | None, base: str) -> str:
        names = self.used_names.get(parent_id)
        if names is None:
            names = await list_sibling_names(
                self.service.store, parent_id, self.service.sibling_page_size
            )
            self.used_names[parent_id] = names
        for candidate in copy_name_candidates(base, self.service.max_attempts):
            if candidate not in names:
                names.add(candidate)
                return candidate
        raise UniqueNameExhaustedException(base, self.service.max_attempts)

    async def copy(self, source_id: int, target_parent_id: int | None) -> Category:
        source = await self.service.store.get_node(source_id)
        if source.deleted_at is not None:
            raise ValidationException(
                f"source category {source_id} is deleted", field="source_ids"
            )

        # Names are stored stripped; resolve collisions on the stored form.
        name = await self.unique_name(target_parent_id, source.name.strip())
        created = await self.service.mutations.create(name, target_parent_id)
        self.created_ids.append(created.id)

        children = await self.service.store.list_children(source_id)
        for child in sorted(children, key=lambda n: n.position):
            # Skip tombstones and copies made by this run (target inside source).
            if child.deleted_at is not None or child.id in self.created_ids:
                continue
            created.children.append(await self.copy(child.id, created.id))
        return created


class BulkCopyService:
    """Duplicate whole subtrees under a target parent."""

    def __init__(
        self,
        store: INodeStore,
        mutations: CategoryMutationService,
        sibling_page_size: int = 200,
        max_attempts: int = MAX_COPY_NAME_ATTEMPTS,
    ) -> None:
        self.store = store
        self.mutations = mutations
        self.sibling_page_size = sibling_page_size
        self.max_attempts = max_attempts

    @traced("category.bulk_copy")
    async def bulk_copy(
        self, source_ids: list[int], target_parent_id: int | None = None
    ) -> list[Category]:
        """Copy each source subtree under target_parent_id (root when None).

        Returns the new top-level copies with nested ``children`` mirroring
        the source shapes. Not transactional: on failure, nodes already
        created remain and are listed on the raised BulkOperationException.
        """
        if not source_ids:
            raise ValidationException("source_ids is required", field="source_ids")
        logger.info("bulk copy sources=%s target_parent_id=%s", source_ids, target_parent_id)

        run = _CopyRun(self)
        copies: list[Category] = []
        for source_id in source_ids:
            try:
                copies.append(await run.copy(source_id, target_parent_id))
            except CatalogException as e:
                logger.warning(
                    "bulk copy failed source=%s created=%s: %s",
                    source_id,
                    run.created_ids,
                    e.message,
                )
                add_span_event(
                    "bulk_copy.failed",
                    {"source_id": source_id, "created": len(run.created_ids)},
                )
                raise BulkOperationException(
                    "bulk_copy", source_id, run.created_ids, e.message
                ) from e
        logger.info("bulk copy done roots=%s created=%s", len(copies), len(run.created_ids))
        return copies
