"""
Recursion Context
~~~~~~~~~~~~~~~~~

Tracks the sequences and records already rendered during one export call,
so that cycles and shared substructure collapse to a reference marker.
"""

from __future__ import annotations

from typing import Any, Final

from value_exporter.core.kinds import Kind, kind_of, object_id
from value_exporter.exceptions import UnsupportedKindError

__all__ = ["RecursionContext", "NOT_FOUND"]


class _NotFound:
    """Sentinel returned by :meth:`RecursionContext.contains` for unseen values."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = _NotFound()


class RecursionContext:
    """
    Identity registry for one export call.

    Sequences receive a 0-based index in visitation order; records are
    identified by their process-wide object id. Both are matched by
    identity, never by equality: two equal but distinct lists get two
    different indexes.

    Since index ``0`` is a valid identifier, callers must compare the
    result of :meth:`contains` against ``NOT_FOUND`` with ``is``.

    A context is not safe for concurrent mutation. Create one per export
    call, or pass one explicitly to share state across related calls.
    """

    def __init__(self) -> None:
        # Registered sequences are kept alive so their ids cannot be reused.
        self._arrays: list[Any] = []
        self._array_index: dict[int, int] = {}
        self._objects: dict[int, Any] = {}

    def add(self, value: Any) -> int:
        """
        Register a sequence or record.

        Args:
            value: The composite value to register.

        Returns:
            The value's identifier. Registering the same value again
            returns the identifier it already has.

        Raises:
            UnsupportedKindError: If the value is not a sequence or record.
        """
        kind = self._composite_kind(value)
        if kind is Kind.SEQUENCE:
            return self._add_array(value)
        return self._add_object(value)

    def contains(self, value: Any) -> int | _NotFound:
        """
        Look up a sequence or record without registering it.

        Returns:
            The identifier if the value was added before, else ``NOT_FOUND``.

        Raises:
            UnsupportedKindError: If the value is not a sequence or record.
        """
        kind = self._composite_kind(value)
        if kind is Kind.SEQUENCE:
            return self._array_index.get(id(value), NOT_FOUND)
        token = object_id(value)
        if token in self._objects:
            return token
        return NOT_FOUND

    def __len__(self) -> int:
        return len(self._arrays) + len(self._objects)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} arrays={len(self._arrays)} "
            f"objects={len(self._objects)}>"
        )

    # ── Internals ──────────────────────────────────────────────────

    @staticmethod
    def _composite_kind(value: Any) -> Kind:
        kind = kind_of(value)
        if not kind.is_composite():
            raise UnsupportedKindError(
                f"Only sequences and records are supported, got {kind.value}",
                kind=kind.value,
            )
        return kind

    def _add_array(self, value: Any) -> int:
        existing = self._array_index.get(id(value))
        if existing is not None:
            return existing

        self._arrays.append(value)
        index = len(self._arrays) - 1
        self._array_index[id(value)] = index
        return index

    def _add_object(self, value: Any) -> int:
        token = object_id(value)
        self._objects.setdefault(token, value)
        return token
