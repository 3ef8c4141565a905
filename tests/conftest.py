"""Shared test fixtures for all test modules."""

import re

import pytest

from dashsynth.adapters.catalog.in_memory import InMemoryCatalog
from dashsynth.adapters.templates.in_memory import InMemoryTemplateRegistry
from dashsynth.core.collection import CollectionSynthesizer
from dashsynth.core.models import Collection, CollectionEntry, Template


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Provide an empty in-memory catalog."""
    return InMemoryCatalog()


@pytest.fixture
def templates() -> InMemoryTemplateRegistry:
    """Provide an empty in-memory template registry."""
    return InMemoryTemplateRegistry()


@pytest.fixture
def synthesizer(
    catalog: InMemoryCatalog, templates: InMemoryTemplateRegistry
) -> CollectionSynthesizer:
    """Synthesizer wired to the catalog and templates fixtures."""
    return CollectionSynthesizer(catalog, templates)


@pytest.fixture
def cpu_host(
    catalog: InMemoryCatalog, templates: InMemoryTemplateRegistry
) -> None:
    """Populate origin o1 with host1 CPU metrics and a split CPU template."""
    for metric in ("cpu.0.user", "cpu.1.user", "cpu.0.sys"):
        catalog.add_metric("o1", "host1", metric)
    templates.register(
        "o1",
        Template(
            name="t1",
            split_pattern=re.compile(r"cpu\.(\d+)\."),
            options={"title": "CPU %s"},
        ),
    )


@pytest.fixture
def titled_collection() -> Collection:
    """Collection mixing titled and untitled entries."""
    return Collection(
        name="host1",
        id="c1",
        description="Host overview",
        entries=[
            CollectionEntry(id="unnamed0", options={"title": "My CPU Graph"}),
            CollectionEntry(id="unnamed1", options={"origin": "o1"}),
            CollectionEntry(id="unnamed2", options={"title": "Memory usage"}),
            CollectionEntry(id="unnamed3", options={"title": "cpu steal"}),
        ],
    )
