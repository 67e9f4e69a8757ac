"""Application layer: interfaces, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (node store client).
"""

from catalog.application.dtos import Category, DependencySummary, RepositionResult
from catalog.application.interfaces import INodeStore
from catalog.application.use_cases.categories import CategoryService

__all__ = [
    "Category",
    "CategoryService",
    "DependencySummary",
    "INodeStore",
    "RepositionResult",
]
