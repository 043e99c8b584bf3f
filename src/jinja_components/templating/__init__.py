"""Jinja2 integration for components.

Basic usage:
    from jinja_components.templating import create_environment

    env = create_environment()
    html = env.from_string('{% component "button.icon", label="Save" %}').render()

The environment's loader searches the components directory and the views
directories. A handle such as ``button.icon`` resolves to the first of
``Button/views/_icon``, ``partials/Button/views/icon`` and
``partials/Button/views/_icon`` that exists, then to type aliases declared
by components, and otherwise to ``Button/views/icon``.
"""

from ._environment import EnvironmentConfig, create_environment
from ._extension import ComponentExtension
from ._oracle import LoaderViewOracle, view_path
from ._runtime import ComponentRuntime, build_runtime, get_runtime

__all__ = [
    "ComponentExtension",
    "ComponentRuntime",
    "EnvironmentConfig",
    "LoaderViewOracle",
    "build_runtime",
    "create_environment",
    "get_runtime",
    "view_path",
]
