"""Port interfaces for catalog and template adapters.

These protocols define the read contracts the collection synthesizer relies
on. The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dashsynth.core.models import Template


@runtime_checkable
class CatalogPort(Protocol):
    """Port for read access to the metric catalog.

    The catalog maps origin names to sources, and sources to metric names.
    Examples: InMemoryCatalog.
    """

    def origins(self) -> Iterable[str]:
        """Return the names of all known origins."""
        ...

    def source_exists(self, origin: str, source: str) -> bool:
        """Return True if the origin exposes a source with this name."""
        ...

    def metric_names(self, origin: str, source: str) -> Iterable[str]:
        """Return the metric names of a source.

        Args:
            origin: Origin name.
            source: Source name within the origin.

        Returns:
            Iterable of metric names. Empty if the source is unknown.
        """
        ...


@runtime_checkable
class TemplateRegistryPort(Protocol):
    """Port for read access to per-origin templates.

    Examples: InMemoryTemplateRegistry.
    """

    def template_names(self, origin: str) -> Iterable[str]:
        """Return the template names configured for an origin.

        Unknown origins have no templates.
        """
        ...

    def template(self, origin: str, name: str) -> Template:
        """Return a template definition.

        Raises:
            KeyError: If the origin has no template with this name.
        """
        ...
