"""
Projection capabilities for the eventsource_wiring library.

Public API:
- Projection: Base class for projection components
- ReadModelProjection: Projection variant backed by a read model component
- Capability: Enumeration of projection capabilities
- capabilities_of: Capabilities satisfied by an implementation type
- satisfies: Check a single capability
- is_read_model_projection: Shortcut for the ReadModelProjection capability
"""

from eventsource_wiring.projections.base import Projection, ReadModelProjection
from eventsource_wiring.projections.capabilities import (
    REQUIRED_CAPABILITIES,
    Capability,
    capabilities_of,
    capability_names,
    is_read_model_projection,
    satisfies,
)

__all__ = [
    # Base classes
    "Projection",
    "ReadModelProjection",
    # Capability queries
    "Capability",
    "REQUIRED_CAPABILITIES",
    "capabilities_of",
    "capability_names",
    "is_read_model_projection",
    "satisfies",
]
