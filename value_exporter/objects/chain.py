"""
Object Exporter Chain
~~~~~~~~~~~~~~~~~~~~~

Ordered list of object exporters, tried first-match-wins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from value_exporter.core.kinds import type_name
from value_exporter.exceptions import ObjectNotSupportedError
from value_exporter.objects.base import BaseObjectExporter

if TYPE_CHECKING:
    from value_exporter.core.exporter import Exporter

__all__ = ["ObjectExporterChain"]

logger = logging.getLogger(__name__)


class ObjectExporterChain(BaseObjectExporter):
    """
    Chain of object exporters.

    The first exporter whose handles() accepts a record renders it. The
    chain is itself an object exporter, so chains can be nested.
    """

    def __init__(self, exporters: list[BaseObjectExporter] | None = None) -> None:
        self._exporters: list[BaseObjectExporter] = list(exporters or [])

    def register(self, exporter: BaseObjectExporter) -> None:
        """
        Append an exporter to the end of the chain.

        Args:
            exporter: The exporter to register.
        """
        self._exporters.append(exporter)
        logger.debug("Registered object exporter %s", exporter.__class__.__name__)

    def handles(self, value: object) -> bool:
        """Check if any exporter in the chain handles the record."""
        return self.exporter_for(value) is not None

    def exporter_for(self, value: object) -> BaseObjectExporter | None:
        """Return the first member that handles the record, searching nested chains."""
        for object_exporter in self._exporters:
            found = object_exporter.exporter_for(value)
            if found is not None:
                return found
        return None

    def export(self, value: object, exporter: Exporter, indentation: int) -> str:
        """
        Render a record with the first exporter that handles it.

        Raises:
            ObjectNotSupportedError: If no exporter handles the record.
        """
        found = self.exporter_for(value)
        if found is not None:
            return found.export(value, exporter, indentation)

        raise ObjectNotSupportedError(
            f"No object exporter handles {type_name(value)}",
            type_name=type_name(value),
            exporters=[e.__class__.__name__ for e in self._exporters],
        )

    @property
    def exporters(self) -> list[BaseObjectExporter]:
        """Return all registered exporters."""
        return list(self._exporters)

    def clear(self) -> None:
        """Remove all registered exporters."""
        self._exporters.clear()

    def __len__(self) -> int:
        return len(self._exporters)

    def __repr__(self) -> str:
        names = [e.__class__.__name__ for e in self._exporters]
        return f"<{self.__class__.__name__} exporters={names!r}>"
