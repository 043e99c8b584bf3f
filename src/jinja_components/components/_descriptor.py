"""Component descriptors and their supported types.

A component may declare which fieldset "types" it supports. The declaration
is either a plain list, where each entry is both the fieldset name and the
view name, or a mapping from fieldset name to a differently named view::

    types:
      - hero
      - banner

    types:
      cta: callToAction
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from jinja_components.exceptions import ComponentDefinitionError


@dataclass(slots=True, frozen=True)
class TypeList:
    """Supported types declared as a plain list.

    Attributes:
        types: Type names, each doubling as its view name.
    """

    types: tuple[str, ...] = ()

    def names(self) -> list[str]:
        return list(self.types)

    def view_for(self, type_name: str) -> str:
        return type_name


@dataclass(slots=True, frozen=True)
class TypeAliases:
    """Supported types declared as a type-to-view mapping.

    Attributes:
        aliases: Read-only mapping of type name to view name.
    """

    aliases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def names(self) -> list[str]:
        return list(self.aliases)

    def view_for(self, type_name: str) -> str:
        return self.aliases.get(type_name, type_name)


type SupportedTypes = TypeList | TypeAliases


def supported_types_from(
    raw: object,
    *,
    component: str,
) -> SupportedTypes:
    """Normalize a raw ``types`` declaration into a SupportedTypes variant.

    Args:
        raw: ``None``, a sequence of strings, a string-to-string mapping, or
            an existing SupportedTypes value.
        component: Component name, used in error messages.

    Returns:
        TypeList for ``None`` and sequences, TypeAliases for mappings.

    Raises:
        ComponentDefinitionError: If the declaration has any other shape or
            contains non-string entries.
    """
    if isinstance(raw, TypeList | TypeAliases):
        return raw
    if raw is None:
        return TypeList()
    if isinstance(raw, Mapping):
        aliases: dict[str, str] = {}
        for key, value in raw.items():
            if not isinstance(key, str) or not isinstance(value, str):
                msg = (
                    f"Component [{component}] declares a non-string type alias: "
                    f"{key!r} -> {value!r}"
                )
                raise ComponentDefinitionError(msg, component=component)
            aliases[key] = value
        return TypeAliases(MappingProxyType(aliases))
    if isinstance(raw, Sequence) and not isinstance(raw, str):
        types = tuple(raw)
        for entry in types:
            if not isinstance(entry, str):
                msg = f"Component [{component}] declares a non-string type: {entry!r}"
                raise ComponentDefinitionError(msg, component=component)
        return TypeList(types)

    msg = (
        f"Component [{component}] types must be a list or a mapping, "
        f"got {type(raw).__name__}"
    )
    raise ComponentDefinitionError(msg, component=component)


@runtime_checkable
class SupportedTypesProvider(Protocol):
    """Anything that can report the types it supports."""

    def get_supported_types(self) -> SupportedTypes: ...


@runtime_checkable
class ViewNamer(Protocol):
    """Anything that maps a type handle to a resolvable partial handle."""

    def view_name(self, partial: str) -> str: ...


@runtime_checkable
class ComponentDescriptor(SupportedTypesProvider, ViewNamer, Protocol):
    """The capabilities the registry and resolver need from a component."""

    name: str


class Component:
    """Default component descriptor.

    Custom descriptors may subclass this to override ``view_name`` or to
    declare their types in code through ``supported_types``.

    Attributes:
        name: Canonical component name, e.g. ``Button``.
        supported_types: Class-level default declaration, used when no
            declaration is passed to the constructor.
    """

    supported_types: object = None

    __slots__ = ("_types", "name")

    def __init__(self, name: str, supported_types: object = None) -> None:
        self.name: str = name
        declared = (
            supported_types
            if supported_types is not None
            else type(self).supported_types
        )
        self._types: SupportedTypes = supported_types_from(declared, component=name)

    def get_supported_types(self) -> SupportedTypes:
        return self._types

    def view_name(self, partial: str) -> str:
        """Map a type handle to a partial handle inside this component.

        Example:
            >>> Component("Button", {"cta": "callToAction"}).view_name("cta")
            'Button.callToAction'
        """
        return f"{self.name}.{self._types.view_for(partial)}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, types={self._types!r})"
