"""
value-exporter — Human-readable rendering of arbitrary Python values.

value-exporter turns any value into deterministic, diff-friendly text for
debugging and test output:

- Indented multi-line rendering of nested sequences and objects
- Stable identifiers for composite values within one rendering
- Cycle and shared-reference detection
- Single-line summaries with bounded string length
- Element-count truncation for large nested sequences
- Pluggable renderers for specific object types

Quick Start::

    from value_exporter import Exporter

    exporter = Exporter.default()

    data = {"name": "report", "rows": [[1, 2], [3, 4]]}
    data["self"] = data

    print(exporter.export(data))
    print(exporter.shortened_export("a long string " * 10))

:license: BSD-3-Clause
"""

from value_exporter.api import (
    export,
    shortened_export,
    shortened_recursive_export,
    to_field_map,
)
from value_exporter.config.schema import ExporterConfig
from value_exporter.core.context import NOT_FOUND, RecursionContext
from value_exporter.core.exporter import Exporter
from value_exporter.core.kinds import Kind, kind_of, type_name
from value_exporter.core.storage import ObjectStorage
from value_exporter.objects.base import BaseObjectExporter
from value_exporter.objects.chain import ObjectExporterChain

__version__ = "0.1.0"
__license__ = "BSD-3-Clause"

__all__ = [
    # Main class
    "Exporter",
    "ExporterConfig",
    # Recursion tracking
    "RecursionContext",
    "NOT_FOUND",
    # Value kinds
    "Kind",
    "kind_of",
    "type_name",
    # Containers
    "ObjectStorage",
    # Extension bases
    "BaseObjectExporter",
    "ObjectExporterChain",
    # Module-level API
    "export",
    "shortened_export",
    "shortened_recursive_export",
    "to_field_map",
    # Version
    "__version__",
]
