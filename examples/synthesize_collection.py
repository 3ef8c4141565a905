"""Build and filter a collection from an in-memory catalog.

Run with:
    python examples/synthesize_collection.py
"""

import logging

from dashsynth import (
    CollectionSynthesizer,
    InMemoryCatalog,
    encode_collection_json,
    filter_collection,
    load_templates,
)

TEMPLATES = {
    "origins": {
        "collectd": {
            "templates": {
                "cpu": {
                    "split_pattern": r"^cpu\.(\d+)\.",
                    "options": {"title": "CPU %s usage", "stack_mode": "percent"},
                },
                "load": {"options": {"title": "Load average"}},
            }
        }
    }
}


def build_catalog() -> InMemoryCatalog:
    """Inventory for a single four-core host."""
    metrics = [
        f"cpu.{core}.{state}"
        for core in range(4)
        for state in ("user", "system", "idle")
    ]
    metrics.append("load.shortterm")
    return InMemoryCatalog.from_mapping({"collectd": {"web01": metrics}})


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    synthesizer = CollectionSynthesizer(build_catalog(), load_templates(TEMPLATES))
    collection = synthesizer.synthesize("web01")
    print(encode_collection_json(collection))

    filtered = filter_collection(collection, "cpu 2")
    if filtered is not None:
        print(encode_collection_json(filtered))


if __name__ == "__main__":
    main()
