"""Unit tests for ProjectionLocator and ProjectionLocators."""

import pytest

from eventsource_wiring.components import Reference
from eventsource_wiring.exceptions import AnchorNotFoundError, ComponentNotFoundError
from eventsource_wiring.wiring import (
    ProjectionLocator,
    ProjectionLocators,
    ProjectionResolver,
    ResolverConfig,
)
from tests.fixtures import (
    InventoryProjection,
    InventoryReadModel,
    OrderProjection,
    ProjectionManager,
)


@pytest.fixture
def compiled(registry, config):
    registry.register("app.orders", OrderProjection)
    registry.add_tag(
        "app.orders", "projection", projection_name="orders", projection_manager="default"
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
    registry.compile([ProjectionResolver(config)])
    return registry


class TestProjectionLocator:
    """Tests for lookups through a single anchor."""

    def test_names(self, compiled):
        locator = ProjectionLocator(compiled, "projections")

        assert locator.anchor == "projections"
        assert locator.names() == ["inventory", "orders"]
        assert list(locator) == ["inventory", "orders"]
        assert len(locator) == 2

    def test_has(self, compiled):
        locator = ProjectionLocator(compiled, "read_models")

        assert locator.has("inventory")
        assert not locator.has("orders")
        assert "inventory" in locator
        assert 42 not in locator

    def test_reference(self, compiled):
        locator = ProjectionLocator(compiled, "projections")
        assert locator.reference("orders") == Reference("app.orders")

    def test_get_returns_shared_instance(self, compiled):
        locator = ProjectionLocator(compiled, "projections")

        projection = locator.get("orders")

        assert isinstance(projection, OrderProjection)
        assert projection is compiled.get("app.orders")
        assert projection is compiled.get("projection.orders")

    def test_unknown_name(self, compiled):
        locator = ProjectionLocator(compiled, "projections")

        with pytest.raises(ComponentNotFoundError) as exc_info:
            locator.get("unknown")
        assert "projections[unknown]" in str(exc_info.value)

    def test_unknown_anchor(self, compiled):
        locator = ProjectionLocator(compiled, "missing")
        with pytest.raises(AnchorNotFoundError):
            locator.names()

    def test_table_read_lazily(self, registry, config):
        """A locator created before compilation sees the compiled table."""
        locator = ProjectionLocator(registry, "projections")
        registry.register("app.orders", OrderProjection)
        registry.add_tag(
            "app.orders", "projection", projection_name="orders", projection_manager="default"
        )
        registry.compile([ProjectionResolver(config)])

        assert locator.names() == ["orders"]

    def test_query_before_compile_is_not_cached(self, registry, config):
        locator = ProjectionLocator(registry, "projections")
        assert len(locator) == 0

        registry.register("app.orders", OrderProjection)
        registry.add_tag(
            "app.orders", "projection", projection_name="orders", projection_manager="default"
        )
        registry.compile([ProjectionResolver(config)])

        assert "orders" in locator


class TestProjectionLocators:
    """Tests for the bundle of the three locators."""

    def test_dispatch_by_projection_name(self, compiled):
        locators = ProjectionLocators(compiled)

        assert isinstance(locators.projections.get("inventory"), InventoryProjection)
        assert isinstance(locators.managers.get("inventory"), ProjectionManager)
        assert isinstance(locators.read_models.get("inventory"), InventoryReadModel)
        assert locators.managers.get("orders") is locators.managers.get("inventory")

    def test_custom_anchor_names(self, registry):
        config = ResolverConfig(
            projections_anchor="p",
            managers_anchor="m",
            read_models_anchor="r",
        )
        locators = ProjectionLocators(registry, config)

        assert locators.projections.anchor == "p"
        assert locators.managers.anchor == "m"
        assert locators.read_models.anchor == "r"
