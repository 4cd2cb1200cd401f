"""
Value Kinds
~~~~~~~~~~~

The closed set of value kinds the exporter knows how to render, and the
classification of arbitrary Python objects into exactly one of them.
"""

from __future__ import annotations

import io
import socket
from collections.abc import Iterator, Mapping, Sequence, Set
from enum import Enum, StrEnum
from typing import Any

__all__ = [
    "Kind",
    "kind_of",
    "type_name",
    "object_id",
    "entries",
]


class Kind(StrEnum):
    """
    Classification of a value for rendering.

    - SEQUENCE and RECORD are composite and are tracked by identity.
    - ENUM constants carry an identity but are never tracked.
    - Everything else is a scalar.
    """

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    RESOURCE = "resource"
    SEQUENCE = "sequence"
    RECORD = "record"
    ENUM = "enum"

    def is_composite(self) -> bool:
        """Return True if values of this kind can take part in cycles."""
        return self in (Kind.SEQUENCE, Kind.RECORD)


def kind_of(value: Any) -> Kind:
    """
    Classify a value.

    Enum members are checked before int and str so that IntEnum and
    StrEnum members render as enum constants.
    """
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, Enum):
        return Kind.ENUM
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, (str, bytes, bytearray)):
        return Kind.STRING
    if isinstance(value, (io.IOBase, socket.socket)):
        return Kind.RESOURCE
    if isinstance(value, (Mapping, Sequence, Set)):
        return Kind.SEQUENCE
    return Kind.RECORD


def type_name(value: Any) -> str:
    """Return the qualified type name of a value, without the builtins module."""
    cls = type(value)
    module = cls.__module__
    if module and module != "builtins":
        return f"{module}.{cls.__qualname__}"
    return cls.__qualname__


def object_id(value: Any) -> int:
    """
    Process-wide identity token of an object.

    Unique among live objects and stable for the object's lifetime.
    """
    return id(value)


def entries(value: Any) -> Iterator[tuple[Any, Any]]:
    """
    Yield the (key, value) entries of a sequence in insertion order.

    Entries are snapshotted first, so the walk survives in-place
    mutation of the sequence.
    """
    if isinstance(value, Mapping):
        yield from list(value.items())
    else:
        yield from enumerate(list(value))
