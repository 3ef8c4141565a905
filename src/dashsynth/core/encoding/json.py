"""JSON encoder for collections."""

import json
from typing import Any

from dashsynth.core.models import Collection


def encode_collection(collection: Collection) -> dict[str, Any]:
    """Convert a collection to a JSON-serializable dict.

    Structural links (parent, children) are not included.

    Args:
        collection: The collection to encode.

    Returns:
        Dict with id, name, description and entries.
    """
    return {
        "id": collection.id,
        "name": collection.name,
        "description": collection.description,
        "entries": [
            {"id": entry.id, "options": dict(entry.options)}
            for entry in collection.entries
        ],
    }


def encode_collection_json(collection: Collection) -> str:
    """Encode a collection to a JSON string.

    Keys are sorted, so equal collections always encode to the same bytes.
    """
    return json.dumps(encode_collection(collection), sort_keys=True)
