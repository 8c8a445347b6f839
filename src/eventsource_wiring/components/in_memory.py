"""
In-memory component registry implementation.

Holds component definitions, aliases and locator anchors in dictionaries.
The registry is built up by declaration code, compiled once by running
compiler passes against it, and then frozen for use.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from eventsource_wiring.components.interface import (
    CompilerPass,
    ComponentDefinition,
    ComponentRegistry,
    LocatorTable,
    Reference,
    TagAttributes,
)
from eventsource_wiring.exceptions import (
    AnchorNotFoundError,
    ComponentNotFoundError,
    InvalidAliasError,
    RegistryFrozenError,
)

logger = logging.getLogger(__name__)


class InMemoryComponentRegistry(ComponentRegistry):
    """
    In-memory implementation of ComponentRegistry.

    Features:
    - Component declaration with ordered tag occurrences
    - Aliases with chain resolution (aliases shadow definitions of the same name)
    - Locator anchors holding name -> Reference tables
    - compile() to run compiler passes and freeze the registry
    - Lazy, shared instantiation through get()

    Limitations:
    - Not thread-safe; build and compile from a single thread

    Example:
        >>> registry = InMemoryComponentRegistry()
        >>> registry.register("projection_manager.default", ProjectionManager)
        >>> registry.register("orders", OrderProjection)
        >>> registry.add_tag(
        ...     "orders",
        ...     "projection",
        ...     projection_name="orders",
        ...     projection_manager="default",
        ... )
        >>> registry.declare_anchor("projections")
        >>> registry.compile([ProjectionResolver()])
        >>> registry.get("projection.orders")
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._definitions: dict[str, ComponentDefinition] = {}
        self._aliases: dict[str, str] = {}
        self._anchors: dict[str, LocatorTable] = {}
        self._instances: dict[str, Any] = {}
        self._frozen = False

    # -------------------------------------------------------------------------
    # Declaration
    # -------------------------------------------------------------------------

    def register(
        self,
        component_id: str,
        implementation: type | None = None,
        *,
        factory: Callable[[], Any] | None = None,
        tags: Mapping[str, Iterable[Mapping[str, Any]]] | None = None,
    ) -> ComponentDefinition:
        """
        Declare a component, replacing any previous declaration with the same ID.

        Args:
            component_id: Unique ID of the component
            implementation: Concrete implementation type
            factory: Optional zero-argument callable creating the instance
            tags: Optional tag kind -> iterable of attribute mappings

        Returns:
            The stored ComponentDefinition
        """
        self._ensure_mutable("register a component")
        definition = ComponentDefinition(
            component_id=component_id,
            implementation=implementation,
            tags={
                tag: tuple(dict(attrs) for attrs in occurrences)
                for tag, occurrences in (tags or {}).items()
            },
            factory=factory,
        )
        self._definitions[component_id] = definition
        self._instances.pop(component_id, None)
        logger.debug(
            "Registered component '%s'",
            component_id,
            extra={
                "component_id": component_id,
                "implementation": (
                    getattr(implementation, "__name__", repr(implementation))
                    if implementation is not None
                    else None
                ),
            },
        )
        return definition

    def add_tag(self, component_id: str, tag: str, **attributes: Any) -> None:
        """
        Append a tag occurrence to a declared component.

        Raises:
            ComponentNotFoundError: If the component is not declared
        """
        self._ensure_mutable("add a tag")
        definition = self.get_definition(component_id)
        self._definitions[component_id] = definition.with_tag(tag, attributes)
        logger.debug(
            "Tagged component '%s' with '%s'",
            component_id,
            tag,
            extra={"component_id": component_id, "tag": tag},
        )

    def declare_anchor(self, anchor: str, table: Mapping[str, Reference] | None = None) -> None:
        """
        Declare a locator anchor.

        Args:
            anchor: Logical name of the anchor
            table: Initial contents (defaults to an empty placeholder)
        """
        self._ensure_mutable("declare an anchor")
        self._anchors[anchor] = dict(table or {})
        logger.debug("Declared locator anchor '%s'", anchor, extra={"anchor": anchor})

    # -------------------------------------------------------------------------
    # ComponentRegistry interface
    # -------------------------------------------------------------------------

    def find_tagged_component_ids(self, tag: str) -> list[str]:
        return [
            component_id
            for component_id, definition in self._definitions.items()
            if definition.has_tag(tag)
        ]

    def get_implementation(self, component_id: str) -> type | None:
        return self.get_definition(component_id).implementation

    def get_tags(self, component_id: str, tag: str) -> list[TagAttributes]:
        occurrences = self.get_definition(component_id).tags.get(tag, ())
        return [dict(attrs) for attrs in occurrences]

    def has(self, component_id: str) -> bool:
        return component_id in self._definitions or component_id in self._aliases

    def has_anchor(self, anchor: str) -> bool:
        return anchor in self._anchors

    def get_anchor_table(self, anchor: str) -> LocatorTable:
        return dict(self._get_anchor(anchor))

    def replace_anchor_table(self, anchor: str, table: Mapping[str, Reference]) -> None:
        self._ensure_mutable("replace an anchor table")
        self._get_anchor(anchor)
        self._anchors[anchor] = dict(table)
        logger.debug(
            "Replaced locator anchor '%s' (%d entries)",
            anchor,
            len(table),
            extra={"anchor": anchor, "entry_count": len(table)},
        )

    def set_alias(self, alias: str, target_id: str) -> None:
        self._ensure_mutable("set an alias")
        if alias == target_id:
            raise InvalidAliasError(alias)
        previous = self._aliases.get(alias)
        self._aliases[alias] = target_id
        if previous is not None and previous != target_id:
            logger.debug(
                "Alias '%s' overwritten: '%s' -> '%s'",
                alias,
                previous,
                target_id,
                extra={"alias": alias, "previous_target": previous, "target": target_id},
            )
        else:
            logger.debug(
                "Alias '%s' -> '%s'",
                alias,
                target_id,
                extra={"alias": alias, "target": target_id},
            )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_definition(self, component_id: str) -> ComponentDefinition:
        """
        Get a component definition by ID (aliases are not followed).

        Raises:
            ComponentNotFoundError: If the component is not declared
        """
        try:
            return self._definitions[component_id]
        except KeyError:
            raise ComponentNotFoundError(component_id) from None

    def get_alias(self, alias: str) -> str | None:
        """Get the direct target of an alias, or None if it is not an alias."""
        return self._aliases.get(alias)

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only view of all aliases."""
        return MappingProxyType(self._aliases)

    @property
    def component_ids(self) -> list[str]:
        """IDs of all declared components in declaration order."""
        return list(self._definitions)

    def resolve_id(self, name: str) -> str:
        """
        Resolve a component ID or alias to a declared component ID.

        Raises:
            ComponentNotFoundError: If the name (or the end of its alias chain) is unknown
            InvalidAliasError: If the alias chain loops
        """
        chain = [name]
        current = name
        while current in self._aliases:
            current = self._aliases[current]
            if current in chain:
                raise InvalidAliasError(name, [*chain, current])
            chain.append(current)
        if current not in self._definitions:
            raise ComponentNotFoundError(current)
        return current

    def resolve(self, reference: Reference) -> Any:
        """Get the component a reference points at."""
        return self.get(reference.component_id)

    def get(self, name: str) -> Any:
        """
        Get a component instance by ID or alias.

        Instances are created on first access and shared afterwards.

        Raises:
            ComponentNotFoundError: If the component is unknown
            InvalidAliasError: If the alias chain loops
        """
        component_id = self.resolve_id(name)
        if component_id not in self._instances:
            definition = self._definitions[component_id]
            factory = definition.factory or definition.implementation
            if factory is None:
                raise ComponentNotFoundError(component_id)
            self._instances[component_id] = factory()
        return self._instances[component_id]

    # -------------------------------------------------------------------------
    # Compilation
    # -------------------------------------------------------------------------

    @property
    def is_frozen(self) -> bool:
        """Whether the registry rejects further mutations."""
        return self._frozen

    def freeze(self) -> None:
        """Freeze the registry. Subsequent mutations raise RegistryFrozenError."""
        self._frozen = True

    def compile(self, passes: Iterable[CompilerPass]) -> None:
        """
        Run compiler passes once, in order, then freeze the registry.

        Args:
            passes: Compiler passes to run

        Raises:
            RegistryFrozenError: If the registry was already compiled
        """
        self._ensure_mutable("compile")
        for compiler_pass in passes:
            logger.debug(
                "Running compiler pass %s",
                type(compiler_pass).__name__,
                extra={"compiler_pass": type(compiler_pass).__name__},
            )
            compiler_pass.process(self)
        self.freeze()
        logger.info(
            "Compiled component registry: %d components, %d aliases",
            len(self._definitions),
            len(self._aliases),
            extra={
                "component_count": len(self._definitions),
                "alias_count": len(self._aliases),
            },
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _get_anchor(self, anchor: str) -> LocatorTable:
        try:
            return self._anchors[anchor]
        except KeyError:
            raise AnchorNotFoundError(anchor, list(self._anchors)) from None

    def _ensure_mutable(self, operation: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(operation)


__all__ = ["InMemoryComponentRegistry"]
