"""
Base Object Exporter
~~~~~~~~~~~~~~~~~~~~

Abstract base class for custom renderers of object-like values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from value_exporter.core.exporter import Exporter

__all__ = ["BaseObjectExporter"]


class BaseObjectExporter(ABC):
    """
    Abstract base class for object exporters.

    An object exporter replaces the default field expansion for the
    records it handles. Each exporter is responsible for:
    1. Declaring which records it handles (handles)
    2. Rendering a handled record (export)

    Subclasses must implement handles() and export().
    """

    @abstractmethod
    def handles(self, value: object) -> bool:
        """
        Check if this exporter renders the given record.

        Args:
            value: The record about to be rendered.

        Returns:
            True if export() should be used for this record.
        """
        ...

    @abstractmethod
    def export(self, value: object, exporter: Exporter, indentation: int) -> str:
        """
        Render a handled record.

        Args:
            value: The record to render.
            exporter: The calling exporter, for rendering nested values.
            indentation: The indentation level of the 2nd+ line.

        Returns:
            The rendered text.
        """
        ...

    def exporter_for(self, value: object) -> BaseObjectExporter | None:
        """
        Return the exporter that renders the given record, if any.

        Composite exporters override this to resolve the member in a
        single pass instead of asking handles() and then export().
        """
        return self if self.handles(value) else None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
