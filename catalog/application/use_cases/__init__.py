"""Application use cases: one entry point per workflow."""

from catalog.application.use_cases.categories import CategoryService

__all__ = ["CategoryService"]
