"""
Standard span attributes for eventsource_wiring.

Example:
    >>> with tracer.span(
    ...     SPAN_RESOLVE_PROJECTIONS,
    ...     {ATTR_COMPONENT_COUNT: len(component_ids)},
    ... ):
    ...     pass
"""

# =============================================================================
# Span Names
# =============================================================================

SPAN_RESOLVE_PROJECTIONS = "eventsource_wiring.resolve_projections"
"""Span wrapping one projection resolution pass."""

# =============================================================================
# Wiring Attributes
# =============================================================================

ATTR_TAG = "eventsource_wiring.tag"
"""Tag kind the pass resolves (e.g., 'projection')."""

ATTR_COMPONENT_COUNT = "eventsource_wiring.component.count"
"""Number of tagged components processed by the pass."""

ATTR_PROJECTION_COUNT = "eventsource_wiring.projection.count"
"""Number of entries committed to the projections table."""

ATTR_READ_MODEL_COUNT = "eventsource_wiring.read_model.count"
"""Number of entries committed to the read model table."""

__all__ = [
    "SPAN_RESOLVE_PROJECTIONS",
    "ATTR_TAG",
    "ATTR_COMPONENT_COUNT",
    "ATTR_PROJECTION_COUNT",
    "ATTR_READ_MODEL_COUNT",
]
