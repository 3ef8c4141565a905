"""dashsynth: build dashboard collections from origin templates."""

import logging

from dashsynth.adapters import InMemoryCatalog, InMemoryTemplateRegistry
from dashsynth.config import load_templates, load_templates_file
from dashsynth.core import (
    CatalogPort,
    Collection,
    CollectionEntry,
    CollectionSynthesizer,
    DashsynthError,
    NotFoundError,
    Template,
    TemplateConfigError,
    TemplateRegistryPort,
    clone_options,
    filter_collection,
)
from dashsynth.core.encoding.json import encode_collection, encode_collection_json

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CatalogPort",
    "Collection",
    "CollectionEntry",
    "CollectionSynthesizer",
    "DashsynthError",
    "InMemoryCatalog",
    "InMemoryTemplateRegistry",
    "NotFoundError",
    "Template",
    "TemplateConfigError",
    "TemplateRegistryPort",
    "clone_options",
    "encode_collection",
    "encode_collection_json",
    "filter_collection",
    "load_templates",
    "load_templates_file",
]
