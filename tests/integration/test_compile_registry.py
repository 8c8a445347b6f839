"""
Integration tests for compiling a registry with projection resolution.

Covers the whole lifecycle: declaring managers, projections and anchors,
compiling once, dispatching by projection name, and tracing the pass
through the OpenTelemetry SDK.
"""

import pytest

from eventsource_wiring import (
    InMemoryComponentRegistry,
    ProjectionLocators,
    ProjectionResolver,
    RegistryFrozenError,
    ResolverConfig,
    UnknownProjectionManagerError,
)
from eventsource_wiring.observability import (
    ATTR_COMPONENT_COUNT,
    ATTR_PROJECTION_COUNT,
    ATTR_READ_MODEL_COUNT,
    SPAN_RESOLVE_PROJECTIONS,
    OpenTelemetryTracer,
)
from tests.conftest import (
    InMemorySpanExporter,
    SimpleSpanProcessor,
    TracerProvider,
    declare_anchors,
    skip_if_no_otel_sdk,
)
from tests.fixtures import (
    InventoryProjection,
    InventoryReadModel,
    OrderProjection,
    ProjectionManager,
)


def build_registry(config: ResolverConfig) -> InMemoryComponentRegistry:
    registry = InMemoryComponentRegistry()
    declare_anchors(registry, config)
    registry.register("projection_manager.default", ProjectionManager)
    registry.register("projection_manager.reporting", ProjectionManager)
    registry.register("app.orders", OrderProjection)
    registry.add_tag(
        "app.orders", "projection", projection_name="orders", projection_manager="default"
    )
    registry.add_tag(
        "app.orders",
        "projection",
        projection_name="order_reports",
        projection_manager="reporting",
    )
    registry.register("app.inventory", InventoryProjection)
    registry.register("rm.inventory", InventoryReadModel)
    registry.add_tag(
        "app.inventory",
        "projection",
        projection_name="inventory",
        projection_manager="default",
        read_model="rm.inventory",
    )
    return registry


class TestCompileRegistry:
    """End-to-end compilation."""

    def test_compile_and_dispatch(self):
        config = ResolverConfig()
        registry = build_registry(config)

        registry.compile([ProjectionResolver(config)])
        locators = ProjectionLocators(registry, config)

        assert registry.is_frozen
        assert locators.projections.names() == ["inventory", "order_reports", "orders"]
        assert locators.read_models.names() == ["inventory"]
        assert locators.projections.get("orders") is locators.projections.get("order_reports")
        assert locators.managers.get("orders") is registry.get("projection_manager.default")
        assert locators.managers.get("order_reports") is registry.get(
            "projection_manager.reporting"
        )
        assert locators.read_models.get("inventory") is registry.get(
            "projection.inventory.read_model"
        )

    def test_compile_only_once(self):
        config = ResolverConfig()
        registry = build_registry(config)
        registry.compile([ProjectionResolver(config)])

        with pytest.raises(RegistryFrozenError):
            registry.compile([ProjectionResolver(config)])

    def test_failed_compile_leaves_registry_unfrozen(self):
        config = ResolverConfig()
        registry = build_registry(config)
        registry.add_tag(
            "app.orders", "projection", projection_name="audit", projection_manager="missing"
        )

        with pytest.raises(UnknownProjectionManagerError):
            registry.compile([ProjectionResolver(config)])

        assert not registry.is_frozen
        assert registry.get_anchor_table(config.projections_anchor) == {}

    def test_compile_without_anchors(self):
        registry = InMemoryComponentRegistry()
        registry.register("app.orders", OrderProjection)
        registry.add_tag("app.orders", "projection", projection_name="orders")

        registry.compile([ProjectionResolver()])

        assert registry.is_frozen
        assert dict(registry.aliases) == {}


@skip_if_no_otel_sdk
class TestResolverTracing:
    """Resolution spans exported through the OpenTelemetry SDK."""

    @pytest.fixture
    def exporter(self):
        return InMemorySpanExporter()

    @pytest.fixture
    def tracer(self, exporter):
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))
        return OpenTelemetryTracer(__name__, tracer_provider=provider)

    def test_span_exported(self, exporter, tracer):
        config = ResolverConfig()
        registry = build_registry(config)
        registry.compile([ProjectionResolver(config, tracer=tracer)])

        spans = exporter.get_finished_spans()
        assert [span.name for span in spans] == [SPAN_RESOLVE_PROJECTIONS]
        assert spans[0].attributes[ATTR_COMPONENT_COUNT] == 2

    def test_committed_counts_recorded(self, exporter, tracer):
        config = ResolverConfig()
        registry = build_registry(config)
        registry.compile([ProjectionResolver(config, tracer=tracer)])

        attributes = exporter.get_finished_spans()[0].attributes
        assert attributes[ATTR_PROJECTION_COUNT] == 3
        assert attributes[ATTR_READ_MODEL_COUNT] == 1

    def test_no_counts_when_resolution_skipped(self, exporter, tracer):
        InMemoryComponentRegistry().compile([ProjectionResolver(tracer=tracer)])

        attributes = exporter.get_finished_spans()[0].attributes
        assert ATTR_PROJECTION_COUNT not in attributes
        assert ATTR_READ_MODEL_COUNT not in attributes
