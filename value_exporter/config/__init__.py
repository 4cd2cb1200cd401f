"""Exporter configuration — loading, validation, and defaults."""

from value_exporter.config.defaults import DEFAULT_CONFIG
from value_exporter.config.loader import load_config, load_config_from_dict
from value_exporter.config.schema import ExporterConfig

__all__ = [
    "load_config",
    "load_config_from_dict",
    "ExporterConfig",
    "DEFAULT_CONFIG",
]
