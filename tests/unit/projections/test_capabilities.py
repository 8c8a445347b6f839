"""
Unit tests for projection capabilities.

Tests cover:
- Projection and ReadModelProjection abstract base classes
- Capability detection for each capability combination
- ABC virtual registration
"""

import pytest

from eventsource_wiring.projections import (
    REQUIRED_CAPABILITIES,
    Capability,
    Projection,
    ReadModelProjection,
    capabilities_of,
    capability_names,
    is_read_model_projection,
    satisfies,
)
from tests.fixtures import (
    InventoryProjection,
    LegacyOrderProjection,
    NotAProjection,
    OrderProjection,
)


class TestProjectionBaseClasses:
    """Tests for the capability ABCs."""

    def test_projection_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="abstract"):
            Projection()  # type: ignore[abstract]

    def test_read_model_projection_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="abstract"):
            ReadModelProjection()  # type: ignore[abstract]

    def test_read_model_projection_refines_projection(self):
        assert issubclass(ReadModelProjection, Projection)

    def test_complete_projection_instantiates(self):
        assert isinstance(OrderProjection(), Projection)


class TestCapabilitiesOf:
    """Tests for capability detection."""

    def test_projection_only(self):
        assert capabilities_of(OrderProjection) == frozenset({Capability.PROJECTION})

    def test_read_model_projection_has_both(self):
        assert capabilities_of(InventoryProjection) == frozenset(
            {Capability.PROJECTION, Capability.READ_MODEL_PROJECTION}
        )

    def test_virtual_registration(self):
        assert capabilities_of(LegacyOrderProjection) == frozenset({Capability.PROJECTION})

    def test_no_capability(self):
        assert capabilities_of(NotAProjection) == frozenset()

    @pytest.mark.parametrize("implementation", [None, "OrderProjection", OrderProjection()])
    def test_non_class_has_no_capability(self, implementation):
        assert capabilities_of(implementation) == frozenset()

    def test_satisfies(self):
        assert satisfies(OrderProjection, Capability.PROJECTION)
        assert not satisfies(OrderProjection, Capability.READ_MODEL_PROJECTION)

    def test_is_read_model_projection(self):
        assert is_read_model_projection(InventoryProjection)
        assert not is_read_model_projection(OrderProjection)
        assert not is_read_model_projection(None)


class TestCapabilityNames:
    """Tests for the names used in error messages."""

    def test_base_class(self):
        assert Capability.PROJECTION.base_class is Projection
        assert Capability.READ_MODEL_PROJECTION.base_class is ReadModelProjection

    def test_required_capability_names(self):
        assert REQUIRED_CAPABILITIES == (
            Capability.READ_MODEL_PROJECTION,
            Capability.PROJECTION,
        )
        assert capability_names() == [
            "eventsource_wiring.projections.base.ReadModelProjection",
            "eventsource_wiring.projections.base.Projection",
        ]
