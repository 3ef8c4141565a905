"""In-memory catalog adapter."""

from collections.abc import Iterable, Mapping


class InMemoryCatalog:
    """In-memory implementation of CatalogPort.

    Stores origins, sources and metric names in nested dicts. Suitable for
    testing and for catalogs assembled by the caller at startup.
    """

    def __init__(self) -> None:
        self._origins: dict[str, dict[str, set[str]]] = {}

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Mapping[str, Iterable[str]]]
    ) -> "InMemoryCatalog":
        """Build a catalog from ``{origin: {source: [metric, ...]}}``."""
        catalog = cls()
        for origin, sources in data.items():
            catalog.add_origin(origin)
            for source, metrics in sources.items():
                catalog.add_source(origin, source)
                for metric in metrics:
                    catalog.add_metric(origin, source, metric)
        return catalog

    def add_origin(self, origin: str) -> None:
        """Register an origin with no sources."""
        self._origins.setdefault(origin, {})

    def add_source(self, origin: str, source: str) -> None:
        """Register a source with no metrics, creating the origin if needed."""
        self._origins.setdefault(origin, {}).setdefault(source, set())

    def add_metric(self, origin: str, source: str, metric: str) -> None:
        """Register a metric, creating its origin and source if needed."""
        self._origins.setdefault(origin, {}).setdefault(source, set()).add(metric)

    def origins(self) -> list[str]:
        """Return the names of all known origins."""
        return list(self._origins)

    def source_exists(self, origin: str, source: str) -> bool:
        """Return True if the origin exposes a source with this name."""
        return source in self._origins.get(origin, {})

    def metric_names(self, origin: str, source: str) -> list[str]:
        """Return the metric names of a source, empty if unknown."""
        return sorted(self._origins.get(origin, {}).get(source, ()))
