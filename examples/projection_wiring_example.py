"""
Projection Wiring Example

This example demonstrates:
- Declaring projection managers, projections and read models in a registry
- Tagging projections with their logical projection names
- Compiling the registry with ProjectionResolver
- Dispatching by projection name through ProjectionLocators
- The configuration error raised for a misdeclared projection

Run with: python -m examples.projection_wiring_example
"""

import asyncio
import logging
from typing import Any

from eventsource_wiring import (
    ConfigurationError,
    InMemoryComponentRegistry,
    Projection,
    ProjectionLocators,
    ProjectionResolver,
    ReadModelProjection,
    ResolverConfig,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# =============================================================================
# Components
# =============================================================================


class ProjectionManager:
    """Runs the projections assigned to it."""

    def __init__(self, name: str) -> None:
        self.name = name


class OrderCountReadModel:
    """Read model holding order counts per customer."""

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}


class OrderAuditProjection(Projection):
    """Keeps an in-memory audit trail of order events."""

    def __init__(self) -> None:
        self.trail: list[Any] = []

    async def handle(self, event: Any) -> None:
        self.trail.append(event)

    async def reset(self) -> None:
        self.trail.clear()


class OrderCountProjection(ReadModelProjection):
    """Counts orders per customer into OrderCountReadModel."""

    def __init__(self, read_model: OrderCountReadModel) -> None:
        self.read_model = read_model

    async def handle(self, event: Any) -> None:
        customer = event["customer"]
        self.read_model.counts[customer] = self.read_model.counts.get(customer, 0) + 1

    async def reset(self) -> None:
        self.read_model.counts.clear()


# =============================================================================
# Declaration
# =============================================================================


def declare(registry: InMemoryComponentRegistry, config: ResolverConfig) -> None:
    """Declare managers, projections, read models and locator anchors."""
    for anchor in config.anchors:
        registry.declare_anchor(anchor)

    registry.register(
        "projection_manager.default",
        ProjectionManager,
        factory=lambda: ProjectionManager("default"),
    )

    registry.register("app.order_audit", OrderAuditProjection)
    registry.add_tag(
        "app.order_audit",
        config.tag,
        projection_name="order_audit",
        projection_manager="default",
    )

    registry.register("app.order_counts.read_model", OrderCountReadModel)
    registry.register(
        "app.order_counts",
        OrderCountProjection,
        factory=lambda: OrderCountProjection(registry.get("app.order_counts.read_model")),
    )
    registry.add_tag(
        "app.order_counts",
        config.tag,
        projection_name="order_counts",
        projection_manager="default",
        read_model="app.order_counts.read_model",
    )


async def main() -> None:
    config = ResolverConfig()

    # Wire and compile
    registry = InMemoryComponentRegistry()
    declare(registry, config)
    registry.compile([ProjectionResolver(config)])

    locators = ProjectionLocators(registry, config)
    logger.info("Projections: %s", ", ".join(locators.projections.names()))

    # Dispatch by projection name
    events = [{"customer": "alice"}, {"customer": "bob"}, {"customer": "alice"}]
    for name in locators.projections.names():
        projection = locators.projections.get(name)
        manager = locators.managers.get(name)
        for event in events:
            await projection.handle(event)
        logger.info("%s handled %d events (manager: %s)", name, len(events), manager.name)

    read_model = locators.read_models.get("order_counts")
    logger.info("Order counts: %s", read_model.counts)

    # Canonical aliases reach the same components
    assert registry.get("projection.order_counts.read_model") is read_model
    assert registry.get("projection.order_audit") is locators.projections.get("order_audit")

    # A projection referencing an unknown manager fails the whole pass
    broken = InMemoryComponentRegistry()
    declare(broken, config)
    broken.add_tag(
        "app.order_audit",
        config.tag,
        projection_name="order_audit_v2",
        projection_manager="reporting",
    )
    try:
        broken.compile([ProjectionResolver(config)])
    except ConfigurationError as e:
        logger.info("Compilation failed as expected: %s", e)


if __name__ == "__main__":
    asyncio.run(main())
