"""
Exporter — Main Renderer Class
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Turns arbitrary values into deterministic, human-readable text. The output
is similar to ``repr()`` but:

- ``None`` renders as ``null`` and booleans as ``true``/``false``
- strings are always single-quoted and line breaks are spelled out
- composite values are rendered one entry per line, indented
- cycles and repeated rendering of the same sequence or object collapse
  to a reference marker (``Array &0``, ``Foo Object #140...``)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from value_exporter.config.loader import load_config, load_config_from_dict
from value_exporter.config.schema import ExporterConfig
from value_exporter.core.context import NOT_FOUND, RecursionContext
from value_exporter.core.fields import record_fields
from value_exporter.core.kinds import Kind, entries, kind_of, object_id, type_name
from value_exporter.core.scalars import (
    export_float,
    export_int,
    export_resource,
    export_string,
    shorten,
)
from value_exporter.exceptions import ObjectNotSupportedError
from value_exporter.objects.base import BaseObjectExporter
from value_exporter.objects.chain import ObjectExporterChain

__all__ = ["Exporter"]

logger = logging.getLogger(__name__)

_INDENT = " " * 4
_RECURSION_MARKER = "*RECURSION*"


@dataclass
class _ElementCounter:
    """Elements visited so far by one shortened recursive export."""

    count: int = 0


class Exporter:
    """
    Renders values as indented multi-line text or as one-line summaries.

    An exporter holds no per-call state and may be shared between
    threads; each top-level call gets its own RecursionContext unless one
    is passed in.
    """

    def __init__(
        self,
        config: ExporterConfig | None = None,
        object_exporter: BaseObjectExporter | None = None,
    ) -> None:
        self._config = config or ExporterConfig()
        self._object_exporter = object_exporter

    # ── Construction ──────────────────────────────────────────────

    @classmethod
    def default(cls) -> Exporter:
        """Create an exporter with the default configuration."""
        return cls()

    @classmethod
    def from_config(
        cls,
        path: str | os.PathLike[str],
        object_exporter: BaseObjectExporter | None = None,
    ) -> Exporter:
        """
        Create an exporter from a YAML configuration file.

        Raises:
            ConfigFileNotFoundError: If the file doesn't exist.
            ConfigValidationError: If the config fails validation.
        """
        return cls(config=load_config(path), object_exporter=object_exporter)

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], object_exporter: BaseObjectExporter | None = None
    ) -> Exporter:
        """
        Create an exporter from a configuration dictionary.

        Raises:
            ConfigValidationError: If the config fails validation.
        """
        return cls(config=load_config_from_dict(data), object_exporter=object_exporter)

    # ── Properties ────────────────────────────────────────────────

    @property
    def config(self) -> ExporterConfig:
        """Return the active configuration."""
        return self._config

    @property
    def object_exporter(self) -> BaseObjectExporter | None:
        """Return the custom object exporter, if any."""
        return self._object_exporter

    # ── Public API ────────────────────────────────────────────────

    def export(self, value: Any, indentation: int = 0) -> str:
        """
        Export a value into a string.

        Args:
            value: The value to export.
            indentation: The indentation level of the 2nd+ line.

        Returns:
            The multi-line rendering of the value.
        """
        return self._recursive_export(value, indentation)

    def shortened_export(
        self, value: Any, max_length_for_strings: int | None = None
    ) -> str:
        """
        Export a value into a single-line string.

        Line breaks inside strings are kept in their spelled-out form and
        the contents of sequences and records are replaced by ``...``.

        Args:
            value: The value to export.
            max_length_for_strings: Longest string rendering kept intact;
                defaults to the configured ``strings.max_length``.
        """
        max_length = self._max_length(max_length_for_strings)
        kind = kind_of(value)

        if kind is Kind.STRING:
            return shorten(self.export(value), max_length)

        if kind is Kind.ENUM:
            return f"{type_name(value)} Enum ({self._enum_body(value)})"

        if kind is Kind.SEQUENCE:
            return "[...]" if len(value) > 0 else "[]"

        if kind is Kind.RECORD:
            body = "..." if self.to_field_map(value) else ""
            return f"{type_name(value)} Object ({body})"

        return self.export(value)

    def shortened_recursive_export(
        self,
        data: Any,
        max_length_for_strings: int | None = None,
        processed: RecursionContext | None = None,
    ) -> str:
        """
        Export a sequence into a single comma-separated line.

        Nested sequences are rendered inline in brackets, everything else
        with :meth:`shortened_export`. A sequence that was already visited
        renders as ``*RECURSION*``.

        When ``arrays.shorten_longer_than`` is positive, rendering stops
        once that many elements have been visited, and a
        ``, ...N more elements`` suffix reports the remainder.

        Args:
            data: The sequence to export.
            max_length_for_strings: Passed on to :meth:`shortened_export`.
            processed: A context to share with related export calls.
        """
        if kind_of(data) is not Kind.SEQUENCE:
            return self.shortened_export(data, max_length_for_strings)

        if processed is None:
            processed = RecursionContext()
        processed.add(data)

        max_length = self._max_length(max_length_for_strings)
        limit = self._config.arrays.shorten_longer_than
        counter = _ElementCounter()

        result = self._shortened_recursive(data, processed, max_length, limit, counter)

        if limit > 0:
            overall = _count_elements(data)
            if overall > limit:
                logger.debug(
                    "Shortened export truncated after %d of %d elements",
                    limit,
                    overall,
                )
                result += f", ...{overall - limit} more elements"

        return result

    def to_field_map(self, value: Any) -> dict[Any, Any]:
        """
        Convert a value to an ordered mapping of its entries.

        Records yield their fields, sequences their entries, and any other
        value is wrapped as the single entry ``{0: value}``.
        """
        kind = kind_of(value)
        if kind is Kind.SEQUENCE:
            return dict(entries(value))
        if kind is not Kind.RECORD:
            return {0: value}

        objects = self._config.objects
        return record_fields(
            value,
            ignored=objects.ignored_fields,
            exception_ignored=objects.exception_ignored_fields,
        )

    # ── Rendering ─────────────────────────────────────────────────

    def _recursive_export(
        self,
        value: Any,
        indentation: int,
        processed: RecursionContext | None = None,
    ) -> str:
        kind = kind_of(value)

        if kind is Kind.NULL:
            return "null"
        if kind is Kind.BOOL:
            return "true" if value else "false"
        if kind is Kind.INT:
            return export_int(value)
        if kind is Kind.FLOAT:
            return export_float(value)
        if kind is Kind.STRING:
            return export_string(value)
        if kind is Kind.RESOURCE:
            return export_resource(value)
        if kind is Kind.ENUM:
            return f"{type_name(value)} Enum #{object_id(value)} ({self._enum_body(value)})"

        if processed is None:
            processed = RecursionContext()

        if kind is Kind.SEQUENCE:
            return self._export_array(value, indentation, processed)
        return self._export_object(value, indentation, processed)

    def _export_array(
        self, value: Any, indentation: int, processed: RecursionContext
    ) -> str:
        key = processed.contains(value)
        if key is not NOT_FOUND:
            return f"Array &{key}"

        key = processed.add(value)
        body = self._export_entries(entries(value), indentation, processed)
        if not body:
            return f"Array &{key} []"
        return f"Array &{key} [\n{body}{_INDENT * indentation}]"

    def _export_object(
        self, value: Any, indentation: int, processed: RecursionContext
    ) -> str:
        class_name = type_name(value)

        token = processed.contains(value)
        if token is not NOT_FOUND:
            return f"{class_name} Object #{token}"

        token = processed.add(value)

        if self._object_exporter is not None:
            handler = self._object_exporter.exporter_for(value)
            if handler is not None:
                return handler.export(value, self, indentation)
            if not self._config.objects.default_fallback:
                raise ObjectNotSupportedError(
                    f"No object exporter handles {class_name}",
                    type_name=class_name,
                    exporters=_exporter_names(self._object_exporter),
                )

        fields = self.to_field_map(value)
        body = self._export_entries(fields.items(), indentation, processed)
        if not body:
            return f"{class_name} Object #{token} ()"
        return f"{class_name} Object #{token} (\n{body}{_INDENT * indentation})"

    def _export_entries(
        self, items: Any, indentation: int, processed: RecursionContext
    ) -> str:
        whitespace = _INDENT * indentation
        lines = []
        for key, item in items:
            lines.append(
                f"{whitespace}{_INDENT}{self._recursive_export(key, indentation)}"
                f" => {self._recursive_export(item, indentation + 1, processed)},\n"
            )
        return "".join(lines)

    def _enum_body(self, value: Any) -> str:
        backing = value.value
        if isinstance(backing, (int, str)) and not isinstance(backing, bool):
            return f"{value.name}, {self.export(backing)}"
        return str(value.name)

    def _shortened_recursive(
        self,
        data: Any,
        processed: RecursionContext,
        max_length: int,
        limit: int,
        counter: _ElementCounter,
    ) -> str:
        result: list[str] = []

        for _, value in entries(data):
            if limit > 0 and counter.count > limit:
                break

            if kind_of(value) is Kind.SEQUENCE:
                if processed.contains(value) is not NOT_FOUND:
                    result.append(_RECURSION_MARKER)
                else:
                    processed.add(value)
                    inner = self._shortened_recursive(
                        value, processed, max_length, limit, counter
                    )
                    result.append(f"[{inner}]")
            else:
                result.append(self.shortened_export(value, max_length))

            counter.count += 1

        return ", ".join(result)

    def _max_length(self, max_length_for_strings: int | None) -> int:
        if max_length_for_strings is None:
            return self._config.strings.max_length
        return max_length_for_strings

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} "
            f"max_length={self._config.strings.max_length} "
            f"shorten_longer_than={self._config.arrays.shorten_longer_than}>"
        )


def _count_elements(data: Any) -> int:
    """Count every element at every depth, each distinct sequence once."""
    seen = {id(data)}
    stack = [data]
    total = 0
    while stack:
        for _, value in entries(stack.pop()):
            total += 1
            if kind_of(value) is Kind.SEQUENCE and id(value) not in seen:
                seen.add(id(value))
                stack.append(value)
    return total


def _exporter_names(object_exporter: BaseObjectExporter) -> list[str]:
    if isinstance(object_exporter, ObjectExporterChain):
        return [e.__class__.__name__ for e in object_exporter.exporters]
    return [object_exporter.__class__.__name__]
