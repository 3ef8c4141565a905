"""In-memory template registry adapter."""

from dashsynth.core.models import Template


class InMemoryTemplateRegistry:
    """In-memory implementation of TemplateRegistryPort.

    Holds templates per origin in a dict keyed by template name.
    """

    def __init__(self) -> None:
        self._templates: dict[str, dict[str, Template]] = {}

    def register(self, origin: str, template: Template) -> None:
        """Register a template for an origin.

        Args:
            origin: Origin the template applies to.
            template: Template definition.

        Raises:
            TypeError: If template is not a Template.
            ValueError: If the origin already has a template with this name.
        """
        if not isinstance(template, Template):
            raise TypeError("template must be a Template instance")
        templates = self._templates.setdefault(origin, {})
        if template.name in templates:
            raise ValueError(
                f"template {template.name!r} already registered for origin {origin!r}"
            )
        templates[template.name] = template

    def template_names(self, origin: str) -> list[str]:
        """Return the template names of an origin, empty if unknown."""
        return list(self._templates.get(origin, {}))

    def template(self, origin: str, name: str) -> Template:
        """Return a template definition.

        Raises:
            KeyError: If the origin has no template with this name.
        """
        try:
            return self._templates[origin][name]
        except KeyError:
            raise KeyError(f"no template {name!r} for origin {origin!r}") from None
