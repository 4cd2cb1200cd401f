"""Exporter core module — value kinds, recursion context, and renderer."""

from value_exporter.core.context import NOT_FOUND, RecursionContext
from value_exporter.core.exporter import Exporter
from value_exporter.core.kinds import Kind, kind_of, type_name
from value_exporter.core.storage import ObjectStorage

__all__ = [
    "Kind",
    "kind_of",
    "type_name",
    "NOT_FOUND",
    "RecursionContext",
    "ObjectStorage",
    "Exporter",
]
