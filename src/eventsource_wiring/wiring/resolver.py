"""
Projection resolver.

The resolver is a compiler pass that turns components tagged as projections
into three locator tables, keyed by projection name:
- projections: the projection component
- projection managers: the manager that runs the projection
- read models: the read model a ReadModelProjection writes to

While doing so it validates each tagged component and tag occurrence and
registers aliases so every projection can also be looked up by name:
- ``<namespace>.<projection_name>`` -> the projection component
- ``<namespace>.<projection_name>.projection_manager`` -> its manager
- ``<namespace>.<projection_name>.read_model`` -> its read model

The pass is fail-fast. The first invalid declaration raises a
ConfigurationError and no table is committed.
"""

import logging

from eventsource_wiring.components.interface import ComponentRegistry, LocatorTable, Reference
from eventsource_wiring.exceptions import (
    InvalidCapabilityError,
    InvalidTagAttributeError,
    UnknownProjectionManagerError,
)
from eventsource_wiring.observability import Tracer, create_tracer
from eventsource_wiring.observability.attributes import (
    ATTR_COMPONENT_COUNT,
    ATTR_PROJECTION_COUNT,
    ATTR_READ_MODEL_COUNT,
    ATTR_TAG,
    SPAN_RESOLVE_PROJECTIONS,
)
from eventsource_wiring.projections.capabilities import (
    capabilities_of,
    capability_names,
    is_read_model_projection,
)
from eventsource_wiring.wiring.config import ResolverConfig
from eventsource_wiring.wiring.naming import (
    canonical_projection_alias,
    manager_component_id,
    projection_manager_alias_name,
    read_model_alias_name,
)
from eventsource_wiring.wiring.tags import ATTR_READ_MODEL, ProjectionTag

logger = logging.getLogger(__name__)


class ProjectionResolver:
    """
    Compiler pass building the projection locator tables.

    The pass does nothing when any of the three locator anchors is missing
    from the registry, so partially configured registries compile cleanly.

    Example:
        >>> registry = InMemoryComponentRegistry()
        >>> registry.register("projection_manager.default", ProjectionManager)
        >>> registry.register("app.orders", OrderProjection)
        >>> registry.add_tag(
        ...     "app.orders",
        ...     "projection",
        ...     projection_name="orders",
        ...     projection_manager="default",
        ... )
        >>> for anchor in ("projections", "projection_managers", "read_models"):
        ...     registry.declare_anchor(anchor)
        >>> ProjectionResolver().process(registry)
        >>> registry.get_anchor_table("projections")
        {'orders': Reference(component_id='app.orders')}

    Note:
        Two components tagged with the same projection_name overwrite each
        other's table entries and aliases; the last one processed wins. The
        resolver logs a warning when this happens but does not reject it.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        tracer: Tracer | None = None,
        enable_tracing: bool = False,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            config: Tag kind, namespaces and anchor names (defaults to ResolverConfig())
            tracer: Optional custom Tracer instance
            enable_tracing: If True and OpenTelemetry is available, emit a span per pass.
                Ignored if tracer is explicitly provided.
        """
        self._config = config or ResolverConfig()
        self._tracer = tracer or create_tracer(__name__, enable_tracing)

    @property
    def config(self) -> ResolverConfig:
        """The configuration used by this resolver."""
        return self._config

    def process(self, registry: ComponentRegistry) -> None:
        """
        Resolve all projection components and commit the locator tables.

        Args:
            registry: The registry to read declarations from and write wiring to

        Raises:
            InvalidCapabilityError: If a tagged component is not a projection
            MissingTagAttributeError: If a tag occurrence lacks a required attribute
            InvalidTagAttributeError: If a tag attribute has an unusable value
            UnknownProjectionManagerError: If a referenced manager is not registered
        """
        component_ids = registry.find_tagged_component_ids(self._config.tag)
        with self._tracer.span(
            SPAN_RESOLVE_PROJECTIONS,
            {
                ATTR_TAG: self._config.tag,
                ATTR_COMPONENT_COUNT: len(component_ids),
            },
        ) as span:
            counts = self._process(registry, component_ids)
            if span is not None and counts is not None:
                span.set_attribute(ATTR_PROJECTION_COUNT, counts[0])
                span.set_attribute(ATTR_READ_MODEL_COUNT, counts[1])

    def _process(
        self, registry: ComponentRegistry, component_ids: list[str]
    ) -> tuple[int, int] | None:
        """Run the pass; returns the committed projection and read model counts."""
        config = self._config

        missing_anchors = [anchor for anchor in config.anchors if not registry.has_anchor(anchor)]
        if missing_anchors:
            logger.debug(
                "Skipping projection resolution, locator anchors not declared: %s",
                ", ".join(missing_anchors),
                extra={"missing_anchors": missing_anchors},
            )
            return None

        projections = self._load_table(registry, config.projections_anchor)
        managers = self._load_table(registry, config.managers_anchor)
        read_models = self._load_table(registry, config.read_models_anchor)

        # projection name -> component that last claimed it
        owners: dict[str, str] = {}

        for component_id in component_ids:
            implementation = registry.get_implementation(component_id)
            self._assert_valid_capability(component_id, implementation)
            is_read_model = is_read_model_projection(implementation)

            for attributes in registry.get_tags(component_id, config.tag):
                tag = ProjectionTag.from_attributes(
                    attributes,
                    component_id=component_id,
                    tag=config.tag,
                )
                manager_id = self._assert_manager_exists(registry, component_id, tag)
                name = tag.projection_name
                read_model: str | None = None

                if is_read_model:
                    read_model = tag.require_read_model(component_id=component_id, tag=config.tag)
                    read_model_alias = read_model_alias_name(name, config.alias_namespace)
                    if read_model == read_model_alias:
                        raise InvalidTagAttributeError(
                            ATTR_READ_MODEL,
                            config.tag,
                            component_id,
                            f"'{read_model}' is the alias of the read model itself",
                        )
                    registry.set_alias(read_model_alias, read_model)
                    read_models[name] = Reference(read_model)

                managers[name] = Reference(manager_id)

                previous_owner = owners.get(name)
                if previous_owner is not None and previous_owner != component_id:
                    logger.warning(
                        "Projection name '%s' is declared by both '%s' and '%s'; '%s' wins",
                        name,
                        previous_owner,
                        component_id,
                        component_id,
                        extra={
                            "projection_name": name,
                            "previous_component_id": previous_owner,
                            "component_id": component_id,
                        },
                    )
                owners[name] = component_id
                projections[name] = Reference(component_id)

                registry.set_alias(
                    projection_manager_alias_name(name, config.alias_namespace),
                    manager_id,
                )

                canonical_id = canonical_projection_alias(name, config.alias_namespace)
                if component_id != canonical_id:
                    registry.set_alias(canonical_id, component_id)

                logger.debug(
                    "Resolved projection '%s' -> '%s' (manager '%s')",
                    name,
                    component_id,
                    manager_id,
                    extra={
                        "projection_name": name,
                        "component_id": component_id,
                        "manager_id": manager_id,
                        "read_model": read_model,
                    },
                )

        registry.replace_anchor_table(config.managers_anchor, managers)
        registry.replace_anchor_table(config.read_models_anchor, read_models)
        registry.replace_anchor_table(config.projections_anchor, projections)

        logger.info(
            "Resolved %d projections (%d with read models) from %d components",
            len(projections),
            len(read_models),
            len(component_ids),
            extra={
                "projection_count": len(projections),
                "read_model_count": len(read_models),
                "component_count": len(component_ids),
            },
        )
        return len(projections), len(read_models)

    @staticmethod
    def _load_table(registry: ComponentRegistry, anchor: str) -> LocatorTable:
        """Start a fresh table for an anchor; placeholder contents are discarded."""
        placeholder = registry.get_anchor_table(anchor)
        if placeholder:
            logger.debug(
                "Discarding %d existing entries of locator anchor '%s'",
                len(placeholder),
                anchor,
                extra={"anchor": anchor, "entry_count": len(placeholder)},
            )
        return {}

    @staticmethod
    def _assert_valid_capability(component_id: str, implementation: type | None) -> None:
        """
        Raises:
            InvalidCapabilityError: If implementation is neither a Projection
                nor a ReadModelProjection
        """
        if not capabilities_of(implementation):
            raise InvalidCapabilityError(component_id, capability_names())

    def _assert_manager_exists(
        self,
        registry: ComponentRegistry,
        component_id: str,
        tag: ProjectionTag,
    ) -> str:
        """
        Resolve the manager component ID of a tag and check that it exists.

        Raises:
            UnknownProjectionManagerError: If no such manager is registered
        """
        manager_id = manager_component_id(tag.projection_manager, self._config.manager_namespace)
        if not registry.has(manager_id):
            raise UnknownProjectionManagerError(
                component_id=component_id,
                projection_name=tag.projection_name,
                manager_name=tag.projection_manager,
                manager_id=manager_id,
            )
        return manager_id


def resolve_projections(registry: ComponentRegistry, config: ResolverConfig | None = None) -> None:
    """
    Run a single projection resolution pass against a registry.

    Args:
        registry: The registry to resolve
        config: Optional resolver configuration

    Raises:
        ConfigurationError: If a projection declaration is invalid
    """
    ProjectionResolver(config=config).process(registry)


__all__ = ["ProjectionResolver", "resolve_projections"]
