"""Template registry adapters implementing TemplateRegistryPort."""

from dashsynth.adapters.templates.in_memory import InMemoryTemplateRegistry

__all__ = ["InMemoryTemplateRegistry"]
