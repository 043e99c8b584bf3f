"""Component discovery, registry and partial resolution.

Example:
    >>> from pathlib import Path
    >>> from jinja_components.components import (
    ...     ComponentPaths,
    ...     ComponentRegistry,
    ...     PartialResolver,
    ... )
    >>> paths = ComponentPaths(Path("resources/components"))
    >>> registry = ComponentRegistry.build_from_directories(
    ...     paths.directories(), root=paths.root
    ... ).freeze()
    >>> resolver = PartialResolver(registry, view_exists=lambda name: False)
    >>> resolver.resolve("button.icon")
    'Button.views.icon'
"""

from ._definition import (
    DEFINITION_SUFFIXES,
    ComponentFactories,
    ComponentFactory,
    find_definition_file,
    import_component_class,
    load_component,
    read_definition,
)
from ._descriptor import (
    Component,
    ComponentDescriptor,
    SupportedTypes,
    SupportedTypesProvider,
    TypeAliases,
    TypeList,
    ViewNamer,
    supported_types_from,
)
from ._discovery import (
    FIELDSETS_DIR,
    ComponentPaths,
    FieldsetNamespaces,
    NamespaceRegistrar,
    list_directories,
    register_fieldset_namespaces,
)
from ._registry import DEFAULT_COMPONENT_NAMESPACE, ComponentRegistry, type_names
from ._resolver import (
    DEFAULT_PARTIAL,
    PARTIALS_PREFIX,
    PartialResolver,
    ViewExists,
    candidate_identifier,
    underscored,
)

__all__ = [
    "DEFAULT_COMPONENT_NAMESPACE",
    "DEFAULT_PARTIAL",
    "DEFINITION_SUFFIXES",
    "FIELDSETS_DIR",
    "PARTIALS_PREFIX",
    "Component",
    "ComponentDescriptor",
    "ComponentFactories",
    "ComponentFactory",
    "ComponentPaths",
    "ComponentRegistry",
    "FieldsetNamespaces",
    "NamespaceRegistrar",
    "PartialResolver",
    "SupportedTypes",
    "SupportedTypesProvider",
    "TypeAliases",
    "TypeList",
    "ViewExists",
    "ViewNamer",
    "candidate_identifier",
    "find_definition_file",
    "import_component_class",
    "list_directories",
    "load_component",
    "read_definition",
    "register_fieldset_namespaces",
    "supported_types_from",
    "type_names",
    "underscored",
]
