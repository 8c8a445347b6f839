"""
Projection tag occurrences.

A projection tag is declared as a loose attribute mapping. ProjectionTag
validates the attributes every occurrence needs where it is read from the
registry. read_model only matters to read model projections, so it is kept
as declared and validated on demand by require_read_model().
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from eventsource_wiring.exceptions import InvalidTagAttributeError, MissingTagAttributeError

ATTR_PROJECTION_NAME = "projection_name"
ATTR_PROJECTION_MANAGER = "projection_manager"
ATTR_READ_MODEL = "read_model"

_component_id_adapter: TypeAdapter[str] = TypeAdapter(
    str, config=ConfigDict(coerce_numbers_to_str=True)
)


class ProjectionTag(BaseModel):
    """
    One projection tag occurrence.

    Attributes:
        projection_name: Logical name the projection is dispatched by
        projection_manager: Name of the manager that runs the projection
        read_model: Component ID of the read model (read model projections only)

    Example:
        >>> tag = ProjectionTag.from_attributes(
        ...     {"projection_name": "orders", "projection_manager": "default"},
        ...     component_id="app.orders_projection",
        ...     tag="projection",
        ... )
        >>> tag.projection_name
        'orders'
    """

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    projection_name: str = Field(..., description="Logical projection name")
    projection_manager: str = Field(..., description="Projection manager name")
    read_model: Any = Field(default=None, description="Read model component ID, as declared")

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, Any],
        *,
        component_id: str,
        tag: str,
    ) -> "ProjectionTag":
        """
        Build a ProjectionTag from a raw tag occurrence.

        projection_name is checked before projection_manager. read_model is
        neither required nor type-checked here; see require_read_model().

        Args:
            attributes: The tag occurrence as declared
            component_id: ID of the tagged component (for error messages)
            tag: Tag kind (for error messages)

        Raises:
            MissingTagAttributeError: If projection_name or projection_manager is absent or None
            InvalidTagAttributeError: If projection_name or projection_manager cannot
                be read as a string
        """
        for attribute in (ATTR_PROJECTION_NAME, ATTR_PROJECTION_MANAGER):
            if attributes.get(attribute) is None:
                raise MissingTagAttributeError(attribute, tag, component_id)

        try:
            return cls.model_validate(dict(attributes))
        except ValidationError as e:
            error = e.errors()[0]
            attribute = str(error["loc"][0]) if error["loc"] else "?"
            raise InvalidTagAttributeError(attribute, tag, component_id, error["msg"]) from e

    def require_read_model(self, *, component_id: str, tag: str) -> str:
        """
        Get the read model component ID, which read model projections must declare.

        Raises:
            MissingTagAttributeError: If read_model was not declared
            InvalidTagAttributeError: If read_model is empty or cannot be read as a string
        """
        if self.read_model is None:
            raise MissingTagAttributeError(ATTR_READ_MODEL, tag, component_id)
        try:
            read_model = _component_id_adapter.validate_python(self.read_model)
        except ValidationError as e:
            raise InvalidTagAttributeError(
                ATTR_READ_MODEL, tag, component_id, e.errors()[0]["msg"]
            ) from e
        if not read_model:
            raise InvalidTagAttributeError(
                ATTR_READ_MODEL, tag, component_id, "component ID must not be empty"
            )
        return read_model


__all__ = [
    "ATTR_PROJECTION_MANAGER",
    "ATTR_PROJECTION_NAME",
    "ATTR_READ_MODEL",
    "ProjectionTag",
]
