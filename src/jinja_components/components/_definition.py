"""Loading component descriptors from companion definition files.

Each component folder may contain a YAML file named after the component::

    resources/components/Button/Button.yaml

The file may declare the supported types and a custom descriptor class::

    types:
      cta: callToAction
    class: app.components.button:ButtonComponent

A bare class name (``class: ButtonComponent``) is looked up as an attribute
of the configured component namespace module. Descriptors can also be
supplied in code through :class:`ComponentFactories`, which take precedence
over the companion file's ``class`` entry.

Malformed definitions fail fast with :class:`ComponentDefinitionError`.
"""

import importlib
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from jinja_components._logging import get_logger
from jinja_components._naming import canonicalize
from jinja_components.exceptions import ComponentDefinitionError

from ._descriptor import Component, ComponentDescriptor, supported_types_from

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DEFINITION_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")
"""Companion file suffixes, in lookup order."""

_KNOWN_KEYS = frozenset({"types", "class"})

type ComponentFactory = Callable[..., ComponentDescriptor]


class ComponentFactories:
    """Explicit descriptor factories keyed by canonical component name.

    A factory is called with the component name, plus the normalized
    supported types when the companion file declares any.

    Example:
        >>> factories = ComponentFactories()
        >>> factories.register("button", ButtonComponent)
        >>> "Button" in factories
        True
    """

    __slots__ = ("_factories",)

    def __init__(self) -> None:
        self._factories: dict[str, ComponentFactory] = {}

    def register(self, name: str, factory: ComponentFactory) -> None:
        self._factories[canonicalize(name)] = factory

    def get(self, name: str) -> ComponentFactory | None:
        return self._factories.get(canonicalize(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonicalize(name) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def find_definition_file(
    root: Path, name: str, folder: str | None = None
) -> Path | None:
    """Find the companion definition file for a component.

    The file lives in the component folder and is named after either the
    canonical name or the folder, so ``icon-button/IconButton.yaml`` and
    ``icon-button/icon-button.yaml`` are both found.

    Args:
        root: Components root directory.
        name: Canonical component name.
        folder: Folder name on disk. Defaults to the canonical name.

    Returns:
        The first existing ``.yaml`` (or ``.yml``) candidate, or None.
    """
    directory = root / (folder or name)
    for stem in dict.fromkeys((name, folder or name)):
        for suffix in DEFINITION_SUFFIXES:
            path = directory / f"{stem}{suffix}"
            if path.is_file():
                return path
    return None


def read_definition(path: Path, *, component: str) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read and parse a companion definition file.

    Args:
        path: Path to the YAML file.
        component: Canonical component name, for error context.

    Returns:
        The parsed mapping. An empty file yields an empty mapping.

    Raises:
        ComponentDefinitionError: If the file is not valid YAML or its
            top-level value is not a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))  # pyright: ignore[reportAny]
    except yaml.YAMLError as e:
        msg = f"Failed to parse definition for component [{component}]: {e}"
        raise ComponentDefinitionError(msg, component=component, path=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = (
            f"Definition for component [{component}] must be a mapping, "
            f"got {type(data).__name__}"
        )
        raise ComponentDefinitionError(msg, component=component, path=path)
    return data


def import_component_class(
    reference: str,
    *,
    namespace: str,
    component: str,
    path: Path | None = None,
) -> type:
    """Import a descriptor class from a reference string.

    Args:
        reference: ``"package.module:ClassName"`` or a bare ``ClassName``.
        namespace: Module that bare class names are looked up in.
        component: Canonical component name, for error context.
        path: Companion file the reference came from, for error context.

    Returns:
        The referenced class.

    Raises:
        ComponentDefinitionError: If the module cannot be imported or the
            attribute is missing or not a class.
    """
    if ":" in reference:
        module_name, _, attribute = reference.partition(":")
    else:
        module_name, attribute = namespace, reference

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = (
            f"Cannot import module {module_name!r} for component [{component}]: {e}"
        )
        raise ComponentDefinitionError(msg, component=component, path=path) from e

    cls = getattr(module, attribute, None)
    if not isinstance(cls, type):
        msg = f"Module {module_name!r} has no class {attribute!r} for component [{component}]"
        raise ComponentDefinitionError(msg, component=component, path=path)
    return cls


def _instantiate(
    factory: ComponentFactory,
    name: str,
    types: object,
    *,
    path: Path | None,
) -> ComponentDescriptor:
    try:
        descriptor = factory(name) if types is None else factory(name, types)
    except TypeError as e:
        msg = f"Cannot construct descriptor for component [{name}]: {e}"
        raise ComponentDefinitionError(msg, component=name, path=path) from e

    if not isinstance(descriptor, ComponentDescriptor):
        msg = (
            f"Descriptor for component [{name}] must provide name, "
            "get_supported_types() and view_name()"
        )
        raise ComponentDefinitionError(msg, component=name, path=path)
    return descriptor


def load_component(
    name: str,
    *,
    root: Path,
    namespace: str,
    factories: ComponentFactories | None = None,
    folder: str | None = None,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> ComponentDescriptor:
    """Build the descriptor for one component folder.

    Lookup order:
    1. A factory registered for the component name
    2. The ``class`` entry of the companion file
    3. The default :class:`Component`

    Args:
        name: Canonical component name.
        root: Components root directory.
        namespace: Module that bare class names are looked up in.
        factories: Optional explicit factories.
        folder: Folder name on disk, when it differs from ``name``.
        logger: Logger to report through. Defaults to the default logger.

    Returns:
        The component descriptor.

    Raises:
        ComponentDefinitionError: If the companion file or the class it names
            is unusable.
    """
    log = get_logger("components.definition", logger)

    path = find_definition_file(root, name, folder)
    data = read_definition(path, component=name) if path is not None else {}

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        log.warning(
            "definition_unknown_keys", component=name, path=str(path), keys=unknown
        )

    types = (
        supported_types_from(data["types"], component=name) if "types" in data else None
    )

    factory = factories.get(name) if factories is not None else None
    if factory is None and "class" in data:
        reference = data["class"]
        if not isinstance(reference, str) or not reference:
            msg = f"Component [{name}] class must be a non-empty string"
            raise ComponentDefinitionError(msg, component=name, path=path)
        factory = import_component_class(
            reference, namespace=namespace, component=name, path=path
        )
    if factory is None:
        factory = Component

    descriptor = _instantiate(factory, name, types, path=path)
    log.debug(
        "component_loaded",
        component=name,
        descriptor=type(descriptor).__name__,
        definition=str(path) if path is not None else None,
    )
    return descriptor
