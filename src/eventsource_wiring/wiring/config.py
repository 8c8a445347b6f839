"""
Configuration for projection wiring.

This module provides:
- Naming constants shared by declaration code and the resolver
- ResolverConfig: Tag kind, namespaces and anchor names used by a resolution pass
"""

from __future__ import annotations

from dataclasses import dataclass

TAG_PROJECTION = "projection"
"""Tag kind marking a component as a projection."""

PROJECTION_MANAGER_NAMESPACE = "projection_manager"
"""Namespace of projection manager component IDs (``projection_manager.<name>``)."""

PROJECTIONS_ANCHOR = "projections"
PROJECTION_MANAGERS_ANCHOR = "projection_managers"
READ_MODELS_ANCHOR = "read_models"


@dataclass(frozen=True)
class ResolverConfig:
    """
    Configuration for a projection resolution pass.

    Attributes:
        tag: Tag kind identifying projection components
        alias_namespace: Namespace of canonical projection aliases
            (``<alias_namespace>.<projection_name>``). Defaults to the tag kind.
        manager_namespace: Namespace of projection manager component IDs
        projections_anchor: Anchor of the projection name -> projection table
        managers_anchor: Anchor of the projection name -> manager table
        read_models_anchor: Anchor of the projection name -> read model table

    Example:
        >>> config = ResolverConfig(manager_namespace="managers")
        >>> config.alias_namespace
        'projection'
    """

    tag: str = TAG_PROJECTION
    alias_namespace: str = ""
    manager_namespace: str = PROJECTION_MANAGER_NAMESPACE
    projections_anchor: str = PROJECTIONS_ANCHOR
    managers_anchor: str = PROJECTION_MANAGERS_ANCHOR
    read_models_anchor: str = READ_MODELS_ANCHOR

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.tag:
            raise ValueError("tag must be a non-empty string, e.g. 'projection' (default).")

        if not self.alias_namespace:
            object.__setattr__(self, "alias_namespace", self.tag)

        for name in ("alias_namespace", "manager_namespace"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must be a non-empty string.")
            if value.endswith("."):
                raise ValueError(
                    f"{name} must not end with '.', got {value!r}. "
                    "The separator is added when names are built."
                )

        anchors = self.anchors
        if not all(anchors):
            raise ValueError(f"Anchor names must be non-empty strings, got {anchors!r}.")
        if len(set(anchors)) != len(anchors):
            raise ValueError(
                f"Anchor names must be distinct, got {anchors!r}. "
                "Each locator table needs its own anchor."
            )

    @property
    def anchors(self) -> tuple[str, str, str]:
        """The projections, managers and read models anchors, in that order."""
        return (self.projections_anchor, self.managers_anchor, self.read_models_anchor)


__all__ = [
    "TAG_PROJECTION",
    "PROJECTION_MANAGER_NAMESPACE",
    "PROJECTIONS_ANCHOR",
    "PROJECTION_MANAGERS_ANCHOR",
    "READ_MODELS_ANCHOR",
    "ResolverConfig",
]
