"""
Record Field Extraction
~~~~~~~~~~~~~~~~~~~~~~~

Collects the named fields of object-like values, whatever their declared
visibility, in declaration order.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator, Mapping
from typing import Any

from value_exporter.core.kinds import object_id
from value_exporter.core.storage import ObjectStorage

__all__ = ["record_fields"]

_EXCEPTION_FIELDS = ("__cause__", "__context__", "__traceback__")


def record_fields(
    value: Any,
    ignored: Collection[str] = (),
    exception_ignored: Collection[str] = (),
) -> dict[Any, Any]:
    """
    Return the fields of a record as an ordered mapping.

    Slot values come first (base classes first), then the instance
    ``__dict__``. Exceptions additionally report ``args`` up front and
    their chaining attributes at the end.

    Args:
        value: The record to inspect.
        ignored: Field names never reported.
        exception_ignored: Field names never reported for exceptions.
    """
    fields: dict[Any, Any] = {}

    if isinstance(value, BaseException):
        fields["args"] = value.args

    for name, field_value in _slot_values(value):
        fields[name] = field_value

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        for name, field_value in list(instance_dict.items()):
            fields[_demangle(type(value), name)] = field_value

    if isinstance(value, BaseException):
        for name in _EXCEPTION_FIELDS:
            if name not in exception_ignored:
                fields[name] = getattr(value, name)

    if isinstance(value, ObjectStorage):
        for name in ObjectStorage.INTERNAL_FIELDS:
            fields.pop(name, None)
        for obj, info in value.items():
            fields[f"Object #{object_id(obj)}"] = {"held": obj, "info": info}

    for name in ignored:
        fields.pop(name, None)

    return fields


def _slot_values(value: Any) -> Iterator[tuple[str, Any]]:
    cls = type(value)
    seen: set[str] = set()
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot == "__dict__" or slot in seen:
                continue
            seen.add(slot)
            name = _mangle(klass, slot)
            try:
                field_value = getattr(value, name)
            except AttributeError:
                # Declared but never assigned.
                continue
            yield slot, field_value


def _mangle(klass: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{klass.__name__.lstrip('_')}{name}"
    return name


def _demangle(cls: type, name: Any) -> Any:
    """Report ``_Owner__name`` attributes as ``__name``."""
    if not isinstance(name, str) or name.endswith("__"):
        return name
    for klass in cls.__mro__:
        prefix = f"_{klass.__name__.lstrip('_')}"
        if name.startswith(prefix + "__"):
            return name[len(prefix):]
    return name
