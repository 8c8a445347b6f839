"""
Component registry interface and core data structures.

The component registry owns component declarations, their tags and the
aliases that point at them. Compiler passes such as the projection resolver
read declarations from it and write derived wiring back into it.

This module provides:
- Reference: A lazy handle to a component, resolved at lookup time
- ComponentDefinition: A declared component with its tags
- LocatorTable: Type alias for name -> Reference tables
- ComponentRegistry: Abstract base class for registry implementations
- CompilerPass: Protocol for passes run by ComponentRegistry.compile()
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

TagAttributes = dict[str, Any]


@dataclass(frozen=True)
class Reference:
    """
    Lazy handle to a component.

    A reference stores the component ID only. The registry resolves it to a
    component (following aliases) when the reference is looked up, so
    references can be created before the target is declared.

    Attributes:
        component_id: ID (or alias) of the referenced component
    """

    component_id: str

    def __post_init__(self) -> None:
        if not self.component_id:
            raise ValueError("Reference component_id must be a non-empty string")

    def __str__(self) -> str:
        return f"@{self.component_id}"


LocatorTable = dict[str, Reference]
"""Mapping of logical name -> Reference, used for dispatch by name."""


@dataclass(frozen=True)
class ComponentDefinition:
    """
    A declared component.

    Attributes:
        component_id: Unique ID of the component
        implementation: Concrete implementation type, if known
        tags: Tag kind -> ordered tag occurrences (attribute mappings)
        factory: Optional zero-argument callable creating the instance.
            When omitted, the implementation type is called without arguments.
    """

    component_id: str
    implementation: type | None = None
    tags: Mapping[str, tuple[TagAttributes, ...]] = field(default_factory=dict)
    factory: Callable[[], Any] | None = None

    def __post_init__(self) -> None:
        if not self.component_id:
            raise ValueError("component_id must be a non-empty string")

    def has_tag(self, tag: str) -> bool:
        """Check if the component carries at least one occurrence of a tag."""
        return bool(self.tags.get(tag))

    def with_tag(self, tag: str, attributes: Mapping[str, Any]) -> "ComponentDefinition":
        """Return a copy of this definition with one more tag occurrence appended."""
        tags = dict(self.tags)
        tags[tag] = (*tags.get(tag, ()), dict(attributes))
        return ComponentDefinition(
            component_id=self.component_id,
            implementation=self.implementation,
            tags=tags,
            factory=self.factory,
        )


class ComponentRegistry(ABC):
    """
    Abstract base class for component registries.

    This is the boundary compiler passes operate on. Implementations must
    provide:
    - Enumeration of tagged components and access to their tags
    - Implementation type lookup for capability checks
    - Existence checks for component IDs and aliases
    - Access to the locator anchors and alias registration
    """

    @abstractmethod
    def find_tagged_component_ids(self, tag: str) -> list[str]:
        """
        List the IDs of all components carrying a tag.

        Args:
            tag: The tag kind to search for

        Returns:
            Component IDs in declaration order
        """
        pass

    @abstractmethod
    def get_implementation(self, component_id: str) -> type | None:
        """
        Get the declared implementation type of a component.

        Raises:
            ComponentNotFoundError: If the component is not declared
        """
        pass

    @abstractmethod
    def get_tags(self, component_id: str, tag: str) -> list[TagAttributes]:
        """
        Get all occurrences of a tag on a component.

        Args:
            component_id: ID of the component
            tag: The tag kind

        Returns:
            Attribute mappings in declaration order (empty if untagged)

        Raises:
            ComponentNotFoundError: If the component is not declared
        """
        pass

    @abstractmethod
    def has(self, component_id: str) -> bool:
        """Check whether a component ID or alias is known."""
        pass

    @abstractmethod
    def has_anchor(self, anchor: str) -> bool:
        """Check whether a locator anchor has been declared."""
        pass

    @abstractmethod
    def get_anchor_table(self, anchor: str) -> LocatorTable:
        """
        Get the current contents of a locator anchor.

        Returns a copy: changes are only applied through replace_anchor_table().

        Raises:
            AnchorNotFoundError: If the anchor has not been declared
        """
        pass

    @abstractmethod
    def replace_anchor_table(self, anchor: str, table: Mapping[str, Reference]) -> None:
        """
        Replace the contents of a locator anchor.

        Raises:
            AnchorNotFoundError: If the anchor has not been declared
            RegistryFrozenError: If the registry is frozen
        """
        pass

    @abstractmethod
    def set_alias(self, alias: str, target_id: str) -> None:
        """
        Create or overwrite an alias.

        Raises:
            InvalidAliasError: If the alias would point at itself
            RegistryFrozenError: If the registry is frozen
        """
        pass


@runtime_checkable
class CompilerPass(Protocol):
    """
    Protocol for compiler passes.

    A compiler pass runs once against a registry before the registry is
    frozen, reading declarations and writing derived wiring back.

    Example:
        >>> class MyPass:
        ...     def process(self, registry: ComponentRegistry) -> None:
        ...         for component_id in registry.find_tagged_component_ids("my_tag"):
        ...             ...
    """

    def process(self, registry: ComponentRegistry) -> None:
        """Run the pass against a registry."""
        ...
