"""Loading template configuration from mappings and JSON files.

Expected shape::

    {
        "origins": {
            "collectd": {
                "templates": {
                    "cpu": {
                        "split_pattern": "^cpu-(\\\\d+)/",
                        "options": {"title": "CPU %s"}
                    }
                }
            }
        }
    }
"""

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dashsynth.adapters.templates.in_memory import InMemoryTemplateRegistry
from dashsynth.core.errors import TemplateConfigError
from dashsynth.core.models import Template

logger = logging.getLogger(__name__)


def _section(data: Any, key: str, where: str) -> Mapping[str, Any]:
    """Return an optional mapping section, empty when missing."""
    value = data.get(key, {})
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TemplateConfigError(f"{where}: {key!r} must be a mapping")
    return value


def _parse_template(origin: str, name: str, data: Any) -> Template:
    where = f"origin {origin!r} template {name!r}"
    if not isinstance(data, Mapping):
        raise TemplateConfigError(f"{where}: definition must be a mapping")

    options = _section(data, "options", where)
    for key, value in options.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise TemplateConfigError(
                f"{where}: option {key!r} must map a string to a string"
            )

    pattern = data.get("split_pattern") or None
    compiled = None
    if pattern is not None:
        if not isinstance(pattern, str):
            raise TemplateConfigError(f"{where}: split_pattern must be a string")
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise TemplateConfigError(f"{where}: invalid split_pattern: {exc}") from exc

    return Template(name=name, split_pattern=compiled, options=dict(options))


def load_templates(data: Mapping[str, Any]) -> InMemoryTemplateRegistry:
    """Build a template registry from configuration data.

    Args:
        data: Mapping with an ``origins`` section (see module docstring).

    Returns:
        InMemoryTemplateRegistry holding every configured template.

    Raises:
        TemplateConfigError: If the data does not have the expected shape or
            a split pattern does not compile.
    """
    if not isinstance(data, Mapping):
        raise TemplateConfigError("configuration must be a mapping")

    registry = InMemoryTemplateRegistry()
    for origin, origin_data in _section(data, "origins", "configuration").items():
        if not isinstance(origin_data, Mapping):
            raise TemplateConfigError(f"origin {origin!r}: definition must be a mapping")
        templates = _section(origin_data, "templates", f"origin {origin!r}")
        for name, template_data in templates.items():
            registry.register(origin, _parse_template(origin, name, template_data))
        logger.debug(
            "Loaded origin templates",
            extra={"origin": origin, "template_count": len(templates)},
        )
    return registry


def load_templates_file(path: str | Path) -> InMemoryTemplateRegistry:
    """Load a template registry from a JSON file.

    Raises:
        TemplateConfigError: If the file is not valid JSON or has the wrong shape.
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TemplateConfigError(f"{path}: invalid JSON: {exc}") from exc
    return load_templates(data)
