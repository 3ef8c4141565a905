"""Catalog adapters implementing CatalogPort."""

from dashsynth.adapters.catalog.in_memory import InMemoryCatalog

__all__ = ["InMemoryCatalog"]
