"""
eventsource_wiring - Projection wiring for event-sourced applications.

This library provides:
- A component registry with tags, aliases and locator anchors
- Projection capability types (Projection, ReadModelProjection)
- A compiler pass resolving tagged projections into locator tables
- Name-based lookup of projections, projection managers and read models
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("eventsource-wiring")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

# Component registry
from eventsource_wiring.components import (
    CompilerPass,
    ComponentDefinition,
    ComponentRegistry,
    InMemoryComponentRegistry,
    LocatorTable,
    Reference,
)
from eventsource_wiring.exceptions import (
    AnchorNotFoundError,
    ComponentNotFoundError,
    ConfigurationError,
    InvalidAliasError,
    InvalidCapabilityError,
    InvalidTagAttributeError,
    MissingTagAttributeError,
    RegistryFrozenError,
    UnknownProjectionManagerError,
    WiringError,
)

# Projection capabilities
from eventsource_wiring.projections import (
    Capability,
    Projection,
    ReadModelProjection,
    capabilities_of,
)

# Projection wiring
from eventsource_wiring.wiring import (
    ProjectionLocator,
    ProjectionLocators,
    ProjectionResolver,
    ProjectionTag,
    ResolverConfig,
    resolve_projections,
)

__all__ = [
    "__version__",
    # Exceptions
    "WiringError",
    "ConfigurationError",
    "InvalidCapabilityError",
    "MissingTagAttributeError",
    "InvalidTagAttributeError",
    "UnknownProjectionManagerError",
    "ComponentNotFoundError",
    "AnchorNotFoundError",
    "RegistryFrozenError",
    "InvalidAliasError",
    # Components
    "ComponentRegistry",
    "InMemoryComponentRegistry",
    "ComponentDefinition",
    "CompilerPass",
    "LocatorTable",
    "Reference",
    # Projections
    "Projection",
    "ReadModelProjection",
    "Capability",
    "capabilities_of",
    # Wiring
    "ProjectionResolver",
    "resolve_projections",
    "ResolverConfig",
    "ProjectionTag",
    "ProjectionLocator",
    "ProjectionLocators",
]
