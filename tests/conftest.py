"""
Shared pytest fixtures for the eventsource_wiring library tests.

This module provides:
- Resolver configuration fixtures (config)
- Registry fixtures (empty_registry, registry with anchors and a default manager)
- Tracer fixtures (mock_tracer)
- OpenTelemetry availability checks
"""

from __future__ import annotations

import pytest

from eventsource_wiring.components import InMemoryComponentRegistry
from eventsource_wiring.observability import MockTracer
from eventsource_wiring.wiring import ResolverConfig
from tests.fixtures import ProjectionManager

# ============================================================================
# OpenTelemetry Availability Check
# ============================================================================

OTEL_SDK_AVAILABLE = False
try:
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import SimpleSpanProcessor
    from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

    OTEL_SDK_AVAILABLE = True
except ImportError:
    TracerProvider = None  # type: ignore[assignment, misc]
    SimpleSpanProcessor = None  # type: ignore[assignment, misc]
    InMemorySpanExporter = None  # type: ignore[assignment, misc]

skip_if_no_otel_sdk = pytest.mark.skipif(
    not OTEL_SDK_AVAILABLE, reason="opentelemetry-sdk not installed"
)


# ============================================================================
# Helpers
# ============================================================================


def declare_anchors(registry: InMemoryComponentRegistry, config: ResolverConfig) -> None:
    """Declare the three empty locator anchors a resolver needs."""
    for anchor in config.anchors:
        registry.declare_anchor(anchor)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def config() -> ResolverConfig:
    """Default resolver configuration."""
    return ResolverConfig()


@pytest.fixture
def empty_registry() -> InMemoryComponentRegistry:
    """A registry with nothing declared."""
    return InMemoryComponentRegistry()


@pytest.fixture
def registry(config: ResolverConfig) -> InMemoryComponentRegistry:
    """
    A registry ready for projection resolution.

    Declares the three locator anchors and a projection manager called
    "default" (component ID ``projection_manager.default``).
    """
    registry = InMemoryComponentRegistry()
    declare_anchors(registry, config)
    registry.register("projection_manager.default", ProjectionManager)
    return registry


@pytest.fixture
def mock_tracer() -> MockTracer:
    """A tracer recording spans."""
    return MockTracer()
