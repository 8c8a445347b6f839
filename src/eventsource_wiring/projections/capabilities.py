"""
Capability queries for projection implementations.

Capabilities are determined once per component from its implementation
type. ReadModelProjection is a refinement of Projection, so a read model
projection always reports both capabilities.
"""

from enum import Enum
from typing import Any

from eventsource_wiring.projections.base import Projection, ReadModelProjection


class Capability(Enum):
    """
    Capabilities a projection component can satisfy.

    Values:
        PROJECTION: Implements Projection
        READ_MODEL_PROJECTION: Implements ReadModelProjection
    """

    PROJECTION = "projection"
    READ_MODEL_PROJECTION = "read_model_projection"

    @property
    def base_class(self) -> type[Projection]:
        """The ABC an implementation must subclass (or be registered with)."""
        return _CAPABILITY_CLASSES[self]


_CAPABILITY_CLASSES: dict[Capability, type[Projection]] = {
    Capability.PROJECTION: Projection,
    Capability.READ_MODEL_PROJECTION: ReadModelProjection,
}

REQUIRED_CAPABILITIES: tuple[Capability, ...] = (
    Capability.READ_MODEL_PROJECTION,
    Capability.PROJECTION,
)


def capabilities_of(implementation: Any) -> frozenset[Capability]:
    """
    Get the capabilities satisfied by an implementation type.

    Args:
        implementation: The implementation type of a component

    Returns:
        The satisfied capabilities; empty if implementation is not a class
    """
    if not isinstance(implementation, type):
        return frozenset()
    return frozenset(
        capability
        for capability, base in _CAPABILITY_CLASSES.items()
        if issubclass(implementation, base)
    )


def satisfies(implementation: Any, capability: Capability) -> bool:
    """Check whether an implementation type satisfies a capability."""
    return capability in capabilities_of(implementation)


def is_read_model_projection(implementation: Any) -> bool:
    """Check whether an implementation type is a ReadModelProjection."""
    return satisfies(implementation, Capability.READ_MODEL_PROJECTION)


def capability_names(capabilities: tuple[Capability, ...] = REQUIRED_CAPABILITIES) -> list[str]:
    """Qualified class names for capabilities, used in error messages."""
    return [
        f"{capability.base_class.__module__}.{capability.base_class.__qualname__}"
        for capability in capabilities
    ]


__all__ = [
    "Capability",
    "REQUIRED_CAPABILITIES",
    "capabilities_of",
    "capability_names",
    "is_read_model_projection",
    "satisfies",
]
