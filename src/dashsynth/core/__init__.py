"""Core domain: models, ports and collection synthesis."""

from dashsynth.core.collection import CollectionSynthesizer, filter_collection
from dashsynth.core.errors import DashsynthError, NotFoundError, TemplateConfigError
from dashsynth.core.models import Collection, CollectionEntry, Template
from dashsynth.core.options import clone_options
from dashsynth.core.ports import CatalogPort, TemplateRegistryPort

__all__ = [
    "CatalogPort",
    "Collection",
    "CollectionEntry",
    "CollectionSynthesizer",
    "DashsynthError",
    "NotFoundError",
    "Template",
    "TemplateConfigError",
    "TemplateRegistryPort",
    "clone_options",
    "filter_collection",
]
