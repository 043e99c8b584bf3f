"""Component registry.

This module provides the ComponentRegistry class, an in-memory mapping of
canonical component names to their descriptors. The registry is built once
from the component folders found on disk and then frozen.

Example:
    >>> registry = ComponentRegistry.build_from_directories(
    ...     ["button", "card"], root=Path("resources/components")
    ... )
    >>> registry.exists("button")
    True
    >>> registry.find("Button").name
    'Button'
"""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Self

from jinja_components._naming import canonicalize
from jinja_components.exceptions import ComponentNotFoundError, RegistryFrozenError

from ._definition import ComponentFactories, load_component
from ._descriptor import ComponentDescriptor, supported_types_from

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DEFAULT_COMPONENT_NAMESPACE = "app.components"


def type_names(descriptor: ComponentDescriptor) -> list[str]:
    """Return the type names a descriptor declares support for.

    List declarations yield their entries; mapping declarations yield their
    keys. Custom descriptors returning a raw list or dict are normalized the
    same way.
    """
    return supported_types_from(
        descriptor.get_supported_types(), component=descriptor.name
    ).names()


class ComponentRegistry:
    """Registry of component descriptors keyed by canonical name.

    Registration order is preserved and decides ties in
    :meth:`find_by_type`: the first registered component declaring a type
    wins. Directory discovery registers components in lexicographic order
    of their folder names.
    """

    __slots__ = ("_components", "_frozen")

    def __init__(self) -> None:
        self._components: dict[str, ComponentDescriptor] = {}
        self._frozen: bool = False

    @classmethod
    def build_from_directories(
        cls,
        names: Iterable[str],
        *,
        root: Path,
        namespace: str = DEFAULT_COMPONENT_NAMESPACE,
        factories: ComponentFactories | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> Self:
        """Build a registry from component directory names.

        Args:
            names: Directory names under ``root``, in registration order.
            root: Components root directory.
            namespace: Module that bare descriptor class names resolve in.
            factories: Optional explicit descriptor factories.
            logger: Logger used while loading definitions.

        Returns:
            A new, unfrozen registry.

        Raises:
            ComponentDefinitionError: If a companion definition is malformed.
        """
        registry = cls()
        for directory in names:
            name = canonicalize(directory)
            registry.register(
                name,
                load_component(
                    name,
                    root=root,
                    namespace=namespace,
                    factories=factories,
                    folder=directory,
                    logger=logger,
                ),
            )
        return registry

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Self:
        """Reject any further registration. Returns the registry itself."""
        self._frozen = True
        return self

    def register(self, name: str, descriptor: ComponentDescriptor) -> None:
        """Insert or overwrite a component.

        Args:
            name: Canonical component name.
            descriptor: The component descriptor.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        if self._frozen:
            msg = f"Cannot register component [{name}]: registry is frozen"
            raise RegistryFrozenError(msg)
        self._components[name] = descriptor

    def find(self, name: str) -> ComponentDescriptor:
        """Look up a component by its exact canonical name.

        Raises:
            ComponentNotFoundError: If no component has that name.
        """
        try:
            return self._components[name]
        except KeyError:
            raise ComponentNotFoundError(name) from None

    def find_by_type(self, type_name: str) -> ComponentDescriptor | None:
        """Find the first registered component declaring support for a type.

        Args:
            type_name: The type handle, compared verbatim.

        Returns:
            The first matching descriptor in registration order, or None.
        """
        for descriptor in self._components.values():
            if type_name in type_names(descriptor):
                return descriptor
        return None

    def exists(self, handle: str) -> bool:
        """Check whether a handle names a component or one of its types.

        Args:
            handle: A component name (any casing convention) or a type.

        Returns:
            True if the canonical handle is registered or some component
            declares it as a type.
        """
        if canonicalize(handle) in self._components:
            return True
        return self.find_by_type(handle) is not None

    def get_types(self, name: str) -> list[str]:
        """Return the types a component declares.

        Args:
            name: A component name or a type handle.

        Returns:
            An empty list when the handle is unknown, otherwise the declared
            type names of the component it refers to.
        """
        descriptor = self._components.get(canonicalize(name))
        if descriptor is None:
            descriptor = self.find_by_type(name)
        if descriptor is None:
            return []
        return type_names(descriptor)

    def names(self) -> list[str]:
        return list(self._components)

    def items(self) -> list[tuple[str, ComponentDescriptor]]:
        return list(self._components.items())

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)
