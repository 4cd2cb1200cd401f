"""
Module-level API
~~~~~~~~~~~~~~~~

Convenience functions bound to a shared, default-configured Exporter.
"""

from __future__ import annotations

from typing import Any

from value_exporter.core.context import RecursionContext
from value_exporter.core.exporter import Exporter

__all__ = [
    "export",
    "shortened_export",
    "shortened_recursive_export",
    "to_field_map",
]

# Exporters keep no per-call state, so one instance serves every caller.
_default_exporter = Exporter.default()


def export(value: Any, indentation: int = 0) -> str:
    """Export a value into a multi-line string."""
    return _default_exporter.export(value, indentation)


def shortened_export(value: Any, max_length_for_strings: int = 40) -> str:
    """Export a value into a single-line string."""
    return _default_exporter.shortened_export(value, max_length_for_strings)


def shortened_recursive_export(
    data: Any,
    max_length_for_strings: int = 40,
    processed: RecursionContext | None = None,
) -> str:
    """Export a sequence into a single comma-separated line, without truncation."""
    return _default_exporter.shortened_recursive_export(
        data, max_length_for_strings, processed
    )


def to_field_map(value: Any) -> dict[Any, Any]:
    """Convert a value to an ordered mapping of its entries."""
    return _default_exporter.to_field_map(value)
