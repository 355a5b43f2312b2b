# src/lessonbank/stores/__init__.py
"""Storage abstractions for lessonbank."""

from lessonbank.stores.base import CatalogStore
from lessonbank.stores.sqlite_catalog import SQLiteCatalogStore

__all__ = ["CatalogStore", "SQLiteCatalogStore"]
