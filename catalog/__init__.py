"""Catalog: category tree service over a remote node store."""

__version__ = "1.0.0"
