"""
Naming conventions for projection wiring.

All component IDs and aliases derived from a projection tag are built here,
so the naming policy lives in one place. Namespaces are passed explicitly
and never end with a separator.

Example:
    >>> manager_component_id("default", "projection_manager")
    'projection_manager.default'
    >>> projection_manager_alias_name("orders", "projection")
    'projection.orders.projection_manager'
"""


def manager_component_id(manager_name: str, manager_namespace: str) -> str:
    """Component ID of the projection manager called ``manager_name``."""
    return f"{manager_namespace}.{manager_name}"


def canonical_projection_alias(projection_name: str, alias_namespace: str) -> str:
    """Canonical alias of the projection component for ``projection_name``."""
    return f"{alias_namespace}.{projection_name}"


def projection_manager_alias_name(projection_name: str, alias_namespace: str) -> str:
    """Alias of the manager that runs ``projection_name``."""
    return f"{canonical_projection_alias(projection_name, alias_namespace)}.projection_manager"


def read_model_alias_name(projection_name: str, alias_namespace: str) -> str:
    """Alias of the read model written by ``projection_name``."""
    return f"{canonical_projection_alias(projection_name, alias_namespace)}.read_model"


__all__ = [
    "canonical_projection_alias",
    "manager_component_id",
    "projection_manager_alias_name",
    "read_model_alias_name",
]
