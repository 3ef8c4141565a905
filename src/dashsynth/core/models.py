"""Core domain models for dashboard collections."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Template:
    """A per-origin rule for generating collection entries.

    Attributes:
        name: Template name, unique within its origin.
        split_pattern: Compiled pattern applied to metric names. When set,
            one entry is generated per distinct value of its capture group.
        options: Default render options copied into every generated entry.
            A ``title`` option may contain one ``%s`` placeholder.
    """

    name: str
    split_pattern: re.Pattern[str] | None = None
    options: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CollectionEntry:
    """A single graph definition inside a collection.

    Attributes:
        id: Generated identifier (e.g., unnamed0).
        options: Render options (origin, source, template, filter, title...).
    """

    id: str
    options: dict[str, str] = field(default_factory=dict)


@dataclass
class Collection:
    """A named, ordered group of graph entries.

    Attributes:
        name: Collection name (the source name for synthesized collections).
        id: Library identifier, empty for synthesized collections.
        description: Free-form description.
        entries: Ordered graph entries.
        parent: Parent collection in the library tree.
        children: Child collections in the library tree.
    """

    name: str
    id: str = ""
    description: str = ""
    entries: list[CollectionEntry] = field(default_factory=list)
    parent: Collection | None = field(default=None, repr=False, compare=False)
    children: list[Collection] = field(
        default_factory=list, repr=False, compare=False
    )
