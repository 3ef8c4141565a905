"""Collection synthesis from origin templates, and title filtering."""

import dataclasses
import logging

from dashsynth.core.errors import NotFoundError
from dashsynth.core.models import Collection, CollectionEntry, Template
from dashsynth.core.options import clone_options
from dashsynth.core.ports import CatalogPort, TemplateRegistryPort

logger = logging.getLogger(__name__)

ENTRY_ID_PREFIX = "unnamed"


def _split_values(template: Template, metric_names: list[str]) -> list[str]:
    """Collect the distinct values captured by a template's split pattern.

    Only matches yielding exactly one capture group contribute. An optional
    group that did not participate contributes the empty string.
    """
    assert template.split_pattern is not None
    values: set[str] = set()
    for metric_name in metric_names:
        match = template.split_pattern.search(metric_name)
        if match is None or len(match.groups()) != 1:
            continue
        values.add(match.group(1) or "")
    return sorted(values)


class CollectionSynthesizer:
    """Builds collections for a source from catalog and template registry.

    Example:
        ```python
        synthesizer = CollectionSynthesizer(catalog, templates)
        collection = synthesizer.synthesize("host1")
        ```
    """

    def __init__(
        self,
        catalog: CatalogPort,
        templates: TemplateRegistryPort,
    ) -> None:
        """Initialize the synthesizer with its read-only collaborators.

        Args:
            catalog: Catalog adapter implementing CatalogPort.
            templates: Template adapter implementing TemplateRegistryPort.
        """
        self.catalog = catalog
        self.templates = templates

    def synthesize(self, source_name: str) -> Collection:
        """Generate a collection for a source from every matching origin.

        Origins are processed in name order, templates in name order, and
        split values in ascending order. Entry IDs are numbered from 0 for
        each call.

        Args:
            source_name: Name of the source to build the collection for.

        Returns:
            Collection named after the source.

        Raises:
            NotFoundError: If no origin exposes the source.
        """
        entries: list[CollectionEntry] = []
        found = False

        for origin_name in sorted(self.catalog.origins()):
            if not self.catalog.source_exists(origin_name, source_name):
                continue

            found = True
            logger.debug(
                "Expanding templates for source",
                extra={"origin": origin_name, "source": source_name},
            )

            for template_name in sorted(self.templates.template_names(origin_name)):
                template = self.templates.template(origin_name, template_name)
                base_options = {
                    "origin": origin_name,
                    "source": source_name,
                    "template": template_name,
                }

                if template.split_pattern is None:
                    options = clone_options(template.options)
                    options.update(base_options)
                    entries.append(self._entry(len(entries), options))
                    continue

                metric_names = list(
                    self.catalog.metric_names(origin_name, source_name)
                )
                for value in _split_values(template, metric_names):
                    options = clone_options(template.options)
                    options.update(base_options)
                    options["filter"] = value
                    if options.get("title"):
                        options["title"] = options["title"].replace("%s", value, 1)
                    entries.append(self._entry(len(entries), options))

        if not found:
            logger.info("Source not found in any origin", extra={"source": source_name})
            raise NotFoundError(source_name)

        logger.debug(
            "Synthesized collection",
            extra={"source": source_name, "entry_count": len(entries)},
        )
        return Collection(name=source_name, entries=entries)

    @staticmethod
    def _entry(index: int, options: dict[str, str]) -> CollectionEntry:
        return CollectionEntry(id=f"{ENTRY_ID_PREFIX}{index}", options=options)


def filter_collection(collection: Collection, substring: str) -> Collection | None:
    """Filter collection entries by graph title.

    Args:
        collection: Collection to filter. It is not modified.
        substring: Case-insensitive text the entry title must contain.

    Returns:
        None if substring is empty (no filtering requested). Otherwise a copy
        of the collection whose entries are the original entry objects that
        have a title containing substring, in their original order.
    """
    if not substring:
        return None

    needle = substring.lower()
    kept = [
        entry
        for entry in collection.entries
        if "title" in entry.options and needle in entry.options["title"].lower()
    ]
    return dataclasses.replace(collection, entries=kept)
