"""Application DTOs (no transport dependency)."""

from catalog.application.dtos.category import (
    Category,
    DependencySummary,
    RepositionResult,
)

__all__ = [
    "Category",
    "DependencySummary",
    "RepositionResult",
]
