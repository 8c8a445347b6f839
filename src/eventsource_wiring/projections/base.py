"""
Capability base classes for projection components.

A component tagged as a projection must be implemented by a class that
satisfies one of these capabilities:
- Projection: consumes an ordered event stream and produces derived state
- ReadModelProjection: a projection that writes into a read model, and
  therefore needs a read model component declared next to it

Classes that cannot inherit from these bases can still gain the capability
through ABC virtual registration:

    >>> Projection.register(LegacyOrderProjection)
"""

from abc import ABC, abstractmethod
from typing import Any


class Projection(ABC):
    """
    Base class for projection components.

    Subclasses must implement:
    - handle(): Process a single event
    - reset(): Clear all derived state

    Example:
        >>> class OrderSummaryProjection(Projection):
        ...     async def handle(self, event: Any) -> None:
        ...         await self._apply(event)
        ...
        ...     async def reset(self) -> None:
        ...         self._summaries.clear()
    """

    @abstractmethod
    async def handle(self, event: Any) -> None:
        """
        Handle an event.

        Args:
            event: The event to process
        """
        pass

    @abstractmethod
    async def reset(self) -> None:
        """Reset the projection (clear all derived state)."""
        pass


class ReadModelProjection(Projection):
    """
    Projection that writes its state into an external read model.

    Every projection tag on a ReadModelProjection component must name the
    read model component through the ``read_model`` attribute. The wiring
    pass exposes that component under ``<namespace>.<projection_name>.read_model``.
    """

    pass
