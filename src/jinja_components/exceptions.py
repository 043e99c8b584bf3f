"""jinja-components exceptions."""

from pathlib import Path
from typing import Any


class ComponentsError(Exception):
    """Base exception for jinja-components errors."""


class ComponentNotFoundError(ComponentsError, KeyError):
    """Raised when a component name is not registered.

    Attributes:
        component: The canonical name that was looked up.
    """

    def __init__(self, component: str) -> None:
        """Initialize with the missing component name.

        Args:
            component: The canonical component name.
        """
        super().__init__(f"Component [{component}] not found.")
        self.component: str = component

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return str(self.args[0])


class ComponentDefinitionError(ComponentsError):
    """Raised when a component's companion definition cannot be used.

    Attributes:
        component: Canonical name of the component being loaded.
        path: Path to the companion file, if one was involved.
    """

    def __init__(
        self,
        message: str,
        *,
        component: str,
        path: Path | None = None,
    ) -> None:
        """Initialize with error message and component context."""
        super().__init__(message)
        self.component: str = component
        self.path: Path | None = path


class RegistryFrozenError(ComponentsError):
    """Raised when registering into a registry that has been frozen."""


class ConfigError(ComponentsError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
