"""Delete-confirmation summaries: children and bound documents per category."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.application.dtos.category import DependencySummary
from catalog.core.constants import WARNING_BOUND_DOCUMENTS, WARNING_HAS_CHILDREN
from catalog.domain.exceptions import ValidationException
from catalog.shared.telemetry.logging import get_logger
from catalog.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from catalog.application.interfaces.node_store import INodeStore

logger = get_logger(__name__)


class DependencyCheckService:
    """Aggregate child-existence and document-count signals for a delete preview."""

    def __init__(self, store: INodeStore) -> None:
        self.store = store

    @traced("category.check_dependencies")
    async def check_dependencies(
        self, ids: list[int], include_descendants: bool = True
    ) -> list[DependencySummary]:
        """Return one summary per id, in input order.

        Raises:
            ValidationException: ids is empty.
            ResourceNotFoundException: any id does not exist.
        """
        if not ids:
            raise ValidationException("no category ids provided", field="ids")

        summaries: list[DependencySummary] = []
        for category_id in ids:
            node = await self.store.get_node(category_id)
            has_children = await self.store.has_children(category_id)
            documents = await self.store.list_node_documents(
                category_id, include_descendants=include_descendants
            )
            warnings: list[str] = []
            if has_children:
                warnings.append(WARNING_HAS_CHILDREN)
            if documents:
                warnings.append(WARNING_BOUND_DOCUMENTS.format(count=len(documents)))
            summaries.append(
                DependencySummary(
                    id=category_id,
                    name=node.name,
                    path=node.path,
                    has_children=has_children,
                    document_count=len(documents),
                    include_descendants=include_descendants,
                    warnings=warnings,
                )
            )
        logger.info(
            "dependency check ids=%s include_descendants=%s", ids, include_descendants
        )
        return summaries
