r"""jinja-components.

Reusable components for Jinja2, organized as folders of templates::

    resources/components/
        button/
            Button.yaml          # optional: supported types, custom class
            views/
                template.html    # {% component "button" %}
                _icon.html       # {% component "button.icon" %}
            fieldsets/           # registered as the "button" namespace
    resources/views/
        partials/Card/views/template.html

Basic usage:
    from jinja_components import create_environment, load_config

    env = create_environment(load_config())
    html = env.from_string('{% component "button.icon", label="Save" %}').render()

Resolving handles without rendering:
    from jinja_components import get_runtime

    get_runtime(env).view_name("button.icon")  # 'Button.views._icon'
"""

from ._naming import camel, canonicalize, studly
from .components import (
    Component,
    ComponentDescriptor,
    ComponentFactories,
    ComponentPaths,
    ComponentRegistry,
    FieldsetNamespaces,
    PartialResolver,
    SupportedTypes,
    TypeAliases,
    TypeList,
)
from .config import ComponentsConfig, load_config
from .exceptions import (
    ComponentDefinitionError,
    ComponentNotFoundError,
    ComponentsError,
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    RegistryFrozenError,
)
from .templating import (
    ComponentExtension,
    ComponentRuntime,
    EnvironmentConfig,
    create_environment,
    get_runtime,
)

__all__ = [
    "Component",
    "ComponentDefinitionError",
    "ComponentDescriptor",
    "ComponentExtension",
    "ComponentFactories",
    "ComponentNotFoundError",
    "ComponentPaths",
    "ComponentRegistry",
    "ComponentRuntime",
    "ComponentsConfig",
    "ComponentsError",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "EnvironmentConfig",
    "FieldsetNamespaces",
    "PartialResolver",
    "RegistryFrozenError",
    "SupportedTypes",
    "TypeAliases",
    "TypeList",
    "camel",
    "canonicalize",
    "create_environment",
    "get_runtime",
    "load_config",
    "studly",
]
