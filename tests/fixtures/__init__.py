"""
Shared test fixtures for the eventsource_wiring library.

Usage:
    from tests.fixtures import (
        InventoryProjection,
        InventoryReadModel,
        LegacyOrderProjection,
        NotAProjection,
        OrderProjection,
        ProjectionManager,
    )
"""

from tests.fixtures.projections import (
    InventoryProjection,
    InventoryReadModel,
    LegacyOrderProjection,
    NotAProjection,
    OrderProjection,
    ProjectionManager,
)

__all__ = [
    "InventoryProjection",
    "InventoryReadModel",
    "LegacyOrderProjection",
    "NotAProjection",
    "OrderProjection",
    "ProjectionManager",
]
