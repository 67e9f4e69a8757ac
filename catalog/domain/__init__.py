"""Domain layer: value objects and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from catalog.domain.exceptions import (
    BulkOperationException,
    CatalogException,
    CategoryHasChildrenException,
    ResourceNotFoundException,
    UniqueNameExhaustedException,
    ValidationException,
)
from catalog.domain.value_objects import ParentRef, slugify

__all__ = [
    # Exceptions
    "BulkOperationException",
    "CatalogException",
    "CategoryHasChildrenException",
    "ResourceNotFoundException",
    "UniqueNameExhaustedException",
    "ValidationException",
    # Value objects
    "ParentRef",
    "slugify",
]
