"""Exception types raised by dashsynth."""


class DashsynthError(Exception):
    """Base class for all dashsynth errors."""


class NotFoundError(DashsynthError, LookupError):
    """Raised when a source name is not exposed by any catalog origin."""

    def __init__(self, source_name: str) -> None:
        super().__init__(f"source not found in any origin: {source_name!r}")
        self.source_name = source_name


class TemplateConfigError(DashsynthError, ValueError):
    """Raised when template configuration data cannot be loaded."""
