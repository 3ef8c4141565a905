"""Step definitions for collection synthesis scenarios."""

import re
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from dashsynth.core.collection import filter_collection
from dashsynth.core.errors import NotFoundError
from dashsynth.core.models import Template


@pytest.fixture
def context() -> dict[str, Any]:
    """Mutable scenario state shared between steps."""
    return {}


# === Given ===


@given(
    parsers.parse('origin "{origin}" has source "{source}" with metrics "{metrics}"')
)
def origin_has_source(catalog, origin: str, source: str, metrics: str) -> None:
    catalog.add_source(origin, source)
    for metric in metrics.split(","):
        catalog.add_metric(origin, source, metric)


@given(parsers.parse('origin "{origin}" has template "{name}" titled "{title}"'))
def origin_has_template(templates, origin: str, name: str, title: str) -> None:
    templates.register(origin, Template(name=name, options={"title": title}))


@given(
    parsers.parse(
        'origin "{origin}" has split template "{name}" on "{pattern}" titled "{title}"'
    )
)
def origin_has_split_template(
    templates, origin: str, name: str, pattern: str, title: str
) -> None:
    templates.register(
        origin,
        Template(
            name=name, split_pattern=re.compile(pattern), options={"title": title}
        ),
    )


# === When ===


@when(parsers.parse('I synthesize the collection for "{source}"'))
def synthesize(synthesizer, context: dict[str, Any], source: str) -> None:
    try:
        context["collection"] = synthesizer.synthesize(source)
    except NotFoundError as exc:
        context["error"] = exc


@when(parsers.parse('I filter the collection by "{substring}"'))
def filter_by(context: dict[str, Any], substring: str) -> None:
    context["filtered"] = filter_collection(context["collection"], substring)


@when("I filter the collection with an empty string")
def filter_empty(context: dict[str, Any]) -> None:
    context["filtered"] = filter_collection(context["collection"], "")


# === Then ===


@then(parsers.parse("the collection has {count:d} entries"))
def collection_has_entries(context: dict[str, Any], count: int) -> None:
    assert len(context["collection"].entries) == count


@then(
    parsers.parse('entry "{entry_id}" has option "{key}" set to "{value}"')
)
def entry_has_option(
    context: dict[str, Any], entry_id: str, key: str, value: str
) -> None:
    entries = {entry.id: entry for entry in context["collection"].entries}
    assert entries[entry_id].options[key] == value


@then(parsers.parse('the entry titles are "{titles}"'))
def entry_titles(context: dict[str, Any], titles: str) -> None:
    actual = [entry.options["title"] for entry in context["collection"].entries]
    assert actual == titles.split(",")


@then(parsers.parse('the filtered entry titles are "{titles}"'))
def filtered_entry_titles(context: dict[str, Any], titles: str) -> None:
    filtered = context["filtered"]
    assert filtered is not None
    assert [entry.options["title"] for entry in filtered.entries] == titles.split(",")


@then("synthesis fails with not found")
def synthesis_not_found(context: dict[str, Any]) -> None:
    assert "collection" not in context
    assert isinstance(context["error"], NotFoundError)


@then("no filtering is applied")
def no_filtering(context: dict[str, Any]) -> None:
    assert context["filtered"] is None
