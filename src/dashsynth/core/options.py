"""Helpers for render option mappings."""

from collections.abc import Mapping


def clone_options(options: Mapping[str, str] | None) -> dict[str, str]:
    """Return an independent copy of a render option mapping.

    Keys and values are copied as-is; option sets are str -> str.

    Args:
        options: Source mapping, or None for an empty option set.

    Returns:
        A new dict sharing no storage with ``options``.
    """
    if options is None:
        return {}
    return dict(options)
