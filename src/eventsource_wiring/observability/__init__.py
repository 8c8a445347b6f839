"""
Observability utilities for eventsource_wiring.

Note:
    OpenTelemetry is an optional dependency. Without it, create_tracer()
    returns a NullTracer and no spans are emitted.
"""

from eventsource_wiring.observability.attributes import (
    ATTR_COMPONENT_COUNT,
    ATTR_PROJECTION_COUNT,
    ATTR_READ_MODEL_COUNT,
    ATTR_TAG,
    SPAN_RESOLVE_PROJECTIONS,
)
from eventsource_wiring.observability.tracer import (
    OTEL_AVAILABLE,
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
)

__all__ = [
    # Availability
    "OTEL_AVAILABLE",
    # Tracers
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
    # Attributes
    "SPAN_RESOLVE_PROJECTIONS",
    "ATTR_TAG",
    "ATTR_COMPONENT_COUNT",
    "ATTR_PROJECTION_COUNT",
    "ATTR_READ_MODEL_COUNT",
]
