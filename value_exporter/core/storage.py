"""
Object Storage
~~~~~~~~~~~~~~

An identity-keyed collection of objects, each with attached data.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from value_exporter.core.kinds import object_id

__all__ = ["ObjectStorage"]


class ObjectStorage:
    """
    Set of objects keyed by identity, with optional data per object.

    Objects do not need to be hashable; two equal but distinct objects
    are two different members. The exporter renders each member as an
    entry keyed by the member's object id.
    """

    # Not part of the rendered value; replaced by one entry per member.
    INTERNAL_FIELDS: tuple[str, ...] = ("_storage",)

    def __init__(self) -> None:
        self._storage: dict[int, tuple[Any, Any]] = {}

    def attach(self, obj: Any, info: Any = None) -> None:
        """Add an object, or replace the data attached to it."""
        self._storage[object_id(obj)] = (obj, info)

    def detach(self, obj: Any) -> None:
        """Remove an object if present."""
        self._storage.pop(object_id(obj), None)

    def get_info(self, obj: Any) -> Any:
        """
        Return the data attached to an object.

        Raises:
            KeyError: If the object is not in the storage.
        """
        try:
            return self._storage[object_id(obj)][1]
        except KeyError:
            raise KeyError(f"Object #{object_id(obj)} is not attached") from None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (object, data) pairs in attachment order."""
        yield from list(self._storage.values())

    def __contains__(self, obj: Any) -> bool:
        return object_id(obj) in self._storage

    def __iter__(self) -> Iterator[Any]:
        for obj, _ in list(self._storage.values()):
            yield obj

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} size={len(self)}>"
