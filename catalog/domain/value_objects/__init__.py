"""Domain value objects and shared value types."""

from catalog.domain.value_objects.core import ParentRef
from catalog.domain.value_objects.slug import slug_for, slugify, synthetic_slug

__all__ = [
    "ParentRef",
    "slugify",
    "slug_for",
    "synthetic_slug",
]
