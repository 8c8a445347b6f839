"""
Component registry for the eventsource_wiring library.

Public API:
- ComponentRegistry: Abstract base class for registries
- InMemoryComponentRegistry: Dictionary-backed registry with compile/freeze
- ComponentDefinition: A declared component with its tags
- Reference: Lazy handle to a component
- LocatorTable: Type alias for name -> Reference tables
- CompilerPass: Protocol for passes run during compilation
"""

from eventsource_wiring.components.in_memory import InMemoryComponentRegistry
from eventsource_wiring.components.interface import (
    CompilerPass,
    ComponentDefinition,
    ComponentRegistry,
    LocatorTable,
    Reference,
    TagAttributes,
)

__all__ = [
    "CompilerPass",
    "ComponentDefinition",
    "ComponentRegistry",
    "InMemoryComponentRegistry",
    "LocatorTable",
    "Reference",
    "TagAttributes",
]
