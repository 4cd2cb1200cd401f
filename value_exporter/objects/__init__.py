"""Object exporters — custom renderers for object-like values."""

from value_exporter.objects.base import BaseObjectExporter
from value_exporter.objects.chain import ObjectExporterChain

__all__ = [
    "BaseObjectExporter",
    "ObjectExporterChain",
]
