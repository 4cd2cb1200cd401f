"""
Exporter Custom Exceptions
~~~~~~~~~~~~~~~~~~~~~~~~~~

All custom exception classes for value-exporter, organized by domain.
Every distinct failure mode has its own exception type.

**Structured Error Messages**

Misconfiguration errors surfaced to callers provide three structured fields:
- ``what_happened``: Clear plain-English description
- ``exporters_consulted``: The object exporters that were asked
- ``how_to_fix``: Concrete, actionable steps
"""

__all__ = [
    # Base
    "ExporterError",
    # Config
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigValidationError",
    # Tracking
    "UnsupportedKindError",
    # Object exporters
    "ObjectNotSupportedError",
]


# ── Formatting Helper ────────────────────────────────────────────────────────

_SEPARATOR = "─" * 52


def _format_structured_error(
    title: str,
    what_happened: str,
    exporters_consulted: str,
    how_to_fix: str,
) -> str:
    """Build a rich, structured error message."""
    lines = [
        f"  {title}",
        f"  {_SEPARATOR}",
        "  What happened:",
        *[f"    {line}" for line in what_happened.strip().splitlines()],
        "",
        "  Exporters consulted:",
        f"    {exporters_consulted}",
        "",
        "  How to fix:",
        *[f"    {line}" for line in how_to_fix.strip().splitlines()],
    ]
    return "\n".join(lines)


# ── Base Exception ───────────────────────────────────────────────────────────


class ExporterError(Exception):
    """Base exception for all value-exporter errors."""

    def __init__(self, message: str = "", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


# ── Config Exceptions ────────────────────────────────────────────────────────


class ConfigError(ExporterError):
    """Base exception for configuration-related errors."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when a configuration file cannot be found at the specified path."""


class ConfigValidationError(ConfigError):
    """Raised when configuration values fail validation."""


# ── Tracking Exceptions ──────────────────────────────────────────────────────


class UnsupportedKindError(ExporterError):
    """
    Raised when a recursion context is asked to track a value that is
    neither a sequence nor a record.
    """

    def __init__(
        self,
        message: str = "Only sequences and records are supported",
        kind: str = "",
        details: dict | None = None,
    ) -> None:
        self.kind = kind
        super().__init__(message, details)


# ── Object Exporter Exceptions ───────────────────────────────────────────────


class ObjectNotSupportedError(ExporterError):
    """
    Raised when an object exporter chain is asked to export a record
    that none of its members handles.

    Structured fields:
    - ``what_happened``: which type could not be exported
    - ``exporters_consulted``: the exporters in the chain, in order
    - ``how_to_fix``: actionable remediation steps
    """

    def __init__(
        self,
        message: str = "Object not supported",
        type_name: str = "",
        exporters: list[str] | None = None,
        details: dict | None = None,
        what_happened: str = "",
        how_to_fix: str = "",
    ) -> None:
        self.type_name = type_name
        self.exporters = list(exporters or [])
        self.what_happened = what_happened or (
            f'No object exporter in the chain handles values of type "{type_name}".'
        )
        self.how_to_fix = how_to_fix or (
            "1. Register an exporter whose handles() accepts this type:\n"
            "   chain.register(MyExporter())\n"
            "2. Enable the default field expansion in your config:\n"
            "   objects:\n"
            "     default_fallback: true"
        )
        super().__init__(message, details)

    def __str__(self) -> str:
        return _format_structured_error(
            title=f"ObjectNotSupportedError: {self.args[0]}",
            what_happened=self.what_happened,
            exporters_consulted=", ".join(self.exporters) or "(none)",
            how_to_fix=self.how_to_fix,
        )
