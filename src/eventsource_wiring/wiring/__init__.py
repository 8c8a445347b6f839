"""
Projection wiring for the eventsource_wiring library.

Public API:
- ProjectionResolver: Compiler pass building the projection locator tables
- resolve_projections: Run a single resolution pass
- ResolverConfig: Tag kind, namespaces and anchor names
- ProjectionTag: Validated projection tag occurrence
- ProjectionLocator / ProjectionLocators: Dispatch by projection name
- Naming functions for manager IDs and projection aliases

Example:
    >>> from eventsource_wiring.components import InMemoryComponentRegistry
    >>> from eventsource_wiring.wiring import ProjectionLocators, ProjectionResolver
    >>>
    >>> registry = InMemoryComponentRegistry()
    >>> ...  # declare managers, projections and anchors
    >>> registry.compile([ProjectionResolver()])
    >>> ProjectionLocators(registry).projections.get("orders")
"""

from eventsource_wiring.wiring.config import (
    PROJECTION_MANAGER_NAMESPACE,
    PROJECTION_MANAGERS_ANCHOR,
    PROJECTIONS_ANCHOR,
    READ_MODELS_ANCHOR,
    TAG_PROJECTION,
    ResolverConfig,
)
from eventsource_wiring.wiring.locator import ProjectionLocator, ProjectionLocators
from eventsource_wiring.wiring.naming import (
    canonical_projection_alias,
    manager_component_id,
    projection_manager_alias_name,
    read_model_alias_name,
)
from eventsource_wiring.wiring.resolver import ProjectionResolver, resolve_projections
from eventsource_wiring.wiring.tags import ProjectionTag

__all__ = [
    # Configuration
    "TAG_PROJECTION",
    "PROJECTION_MANAGER_NAMESPACE",
    "PROJECTIONS_ANCHOR",
    "PROJECTION_MANAGERS_ANCHOR",
    "READ_MODELS_ANCHOR",
    "ResolverConfig",
    # Resolution
    "ProjectionResolver",
    "resolve_projections",
    "ProjectionTag",
    # Dispatch
    "ProjectionLocator",
    "ProjectionLocators",
    # Naming
    "canonical_projection_alias",
    "manager_component_id",
    "projection_manager_alias_name",
    "read_model_alias_name",
]
