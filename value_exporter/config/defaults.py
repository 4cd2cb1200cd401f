"""
Default Configuration
~~~~~~~~~~~~~~~~~~~~~

Sensible defaults for the Exporter when no config file is provided.
"""

from __future__ import annotations

__all__ = ["DEFAULT_CONFIG"]

DEFAULT_CONFIG: dict = {
    "version": "1.0",
    "strings": {
        "max_length": 40,
    },
    "arrays": {
        "shorten_longer_than": 0,
    },
    "objects": {
        "default_fallback": True,
        "ignored_fields": ["__weakref__"],
        "exception_ignored_fields": ["__traceback__"],
    },
}
