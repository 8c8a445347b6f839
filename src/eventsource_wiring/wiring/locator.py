"""
Name-based dispatch over committed locator tables.

After the registry has been compiled, downstream code looks projections,
their managers and their read models up by projection name instead of by
component ID.

Example:
    >>> locators = ProjectionLocators(registry)
    >>> projection = locators.projections.get("orders")
    >>> manager = locators.managers.get("orders")
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from eventsource_wiring.components.in_memory import InMemoryComponentRegistry
from eventsource_wiring.components.interface import LocatorTable, Reference
from eventsource_wiring.exceptions import ComponentNotFoundError
from eventsource_wiring.wiring.config import ResolverConfig


class ProjectionLocator:
    """
    Lookup of components by projection name through one locator anchor.

    The anchor table is read on use and cached once the registry is frozen,
    so a locator can be created and queried before the registry is compiled.
    """

    def __init__(self, registry: InMemoryComponentRegistry, anchor: str) -> None:
        self._registry = registry
        self._anchor = anchor
        self._table: LocatorTable | None = None

    @property
    def anchor(self) -> str:
        return self._anchor

    def _get_table(self) -> LocatorTable:
        if self._table is not None:
            return self._table
        table = self._registry.get_anchor_table(self._anchor)
        if self._registry.is_frozen:
            self._table = table
        return table

    def has(self, name: str) -> bool:
        return name in self._get_table()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._get_table())

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> list[str]:
        """Sorted projection names present in the table."""
        return sorted(self._get_table())

    def reference(self, name: str) -> Reference:
        """
        Get the reference registered for a projection name.

        Raises:
            ComponentNotFoundError: If the name is not in the table
        """
        try:
            return self._get_table()[name]
        except KeyError:
            raise ComponentNotFoundError(f"{self._anchor}[{name}]") from None

    def get(self, name: str) -> Any:
        """
        Get the component registered for a projection name.

        Raises:
            ComponentNotFoundError: If the name is not in the table or the
                referenced component does not exist
        """
        return self._registry.resolve(self.reference(name))


class ProjectionLocators:
    """
    The three projection locators of a registry.

    Attributes:
        projections: projection name -> projection component
        managers: projection name -> projection manager component
        read_models: projection name -> read model component
    """

    def __init__(
        self,
        registry: InMemoryComponentRegistry,
        config: ResolverConfig | None = None,
    ) -> None:
        config = config or ResolverConfig()
        self.projections = ProjectionLocator(registry, config.projections_anchor)
        self.managers = ProjectionLocator(registry, config.managers_anchor)
        self.read_models = ProjectionLocator(registry, config.read_models_anchor)


__all__ = ["ProjectionLocator", "ProjectionLocators"]
