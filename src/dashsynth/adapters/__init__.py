"""Adapters implementing core ports."""

from dashsynth.adapters.catalog.in_memory import InMemoryCatalog
from dashsynth.adapters.templates.in_memory import InMemoryTemplateRegistry

__all__ = [
    "InMemoryCatalog",
    "InMemoryTemplateRegistry",
]
