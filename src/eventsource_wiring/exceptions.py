"""Library exceptions for the eventsource_wiring package."""

from collections.abc import Sequence


class WiringError(Exception):
    """Base exception for eventsource_wiring."""

    pass


class ConfigurationError(WiringError):
    """
    Raised when component declarations cannot be wired together.

    Configuration errors are deterministic: they are caused by malformed
    declarations, never by transient conditions, so retrying will not help.
    """

    pass


class InvalidCapabilityError(ConfigurationError):
    """
    Raised when a tagged component implements none of the required capabilities.

    Attributes:
        component_id: ID of the tagged component
        required: Qualified names of the accepted capabilities
    """

    def __init__(self, component_id: str, required: Sequence[str]) -> None:
        self.component_id = component_id
        self.required = tuple(required)
        required_str = " or ".join(f'"{name}"' for name in self.required)
        super().__init__(f'Tagged component "{component_id}" must implement either {required_str}')


class MissingTagAttributeError(ConfigurationError):
    """
    Raised when a tag occurrence omits a required attribute.

    An attribute set to None counts as missing.

    Attributes:
        attribute: Name of the missing attribute
        tag: The tag kind the occurrence belongs to
        component_id: ID of the tagged component
    """

    def __init__(self, attribute: str, tag: str, component_id: str) -> None:
        self.attribute = attribute
        self.tag = tag
        self.component_id = component_id
        super().__init__(
            f'"{attribute}" argument is missing from "{tag}" tagged component "{component_id}"'
        )


class InvalidTagAttributeError(ConfigurationError):
    """
    Raised when a tag attribute is present but has an unusable value.

    Attributes:
        attribute: Name of the offending attribute
        tag: The tag kind the occurrence belongs to
        component_id: ID of the tagged component
        reason: Why the value was rejected
    """

    def __init__(self, attribute: str, tag: str, component_id: str, reason: str) -> None:
        self.attribute = attribute
        self.tag = tag
        self.component_id = component_id
        self.reason = reason
        super().__init__(
            f'"{attribute}" argument of "{tag}" tagged component "{component_id}" '
            f"is invalid: {reason}"
        )


class UnknownProjectionManagerError(ConfigurationError):
    """
    Raised when a projection references a manager that is not registered.

    Attributes:
        component_id: ID of the projection component carrying the tag
        projection_name: Logical projection name from the tag
        manager_name: Manager name from the tag
        manager_id: Component ID the manager name resolved to
    """

    def __init__(
        self,
        component_id: str,
        projection_name: str,
        manager_name: str,
        manager_id: str,
    ) -> None:
        self.component_id = component_id
        self.projection_name = projection_name
        self.manager_name = manager_name
        self.manager_id = manager_id
        super().__init__(
            f'Projection "{projection_name}" (component "{component_id}") has been tagged '
            f'for the projection manager "{manager_name}", but this projection manager '
            f'does not exist. Please register a projection manager as "{manager_id}".'
        )


class ComponentNotFoundError(WiringError, KeyError):
    """Raised when a component ID or alias is not known to the registry."""

    def __init__(self, component_id: str) -> None:
        self.component_id = component_id
        super().__init__(f"Component not found: '{component_id}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class AnchorNotFoundError(WiringError, KeyError):
    """Raised when a locator anchor has not been declared."""

    def __init__(self, anchor: str, available: Sequence[str]) -> None:
        self.anchor = anchor
        self.available = tuple(available)
        available_str = ", ".join(sorted(self.available)) if self.available else "none"
        super().__init__(f"Unknown locator anchor: '{anchor}'. Declared anchors: {available_str}")

    def __str__(self) -> str:
        return str(self.args[0])


class RegistryFrozenError(WiringError):
    """Raised when a frozen registry is mutated."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: the component registry is frozen. "
            "Registries are frozen by compile() and cannot be modified afterwards."
        )


class InvalidAliasError(WiringError):
    """Raised when an alias references itself or an alias chain loops."""

    def __init__(self, alias: str, chain: Sequence[str] | None = None) -> None:
        self.alias = alias
        self.chain = tuple(chain or (alias, alias))
        super().__init__(f"Alias '{alias}' is circular: {' -> '.join(self.chain)}")
