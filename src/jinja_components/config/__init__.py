"""jinja-components configuration.

Example:
    >>> from jinja_components.config import load_config
    >>> config = load_config()
    >>> config.components_path.name
    'components'
"""

from jinja_components.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._load import (
    APP_NAME,
    CONFIG_FILENAME,
    discover_config_file,
    get_user_config_path,
    load_config,
)
from ._loader import (
    ENV_PREFIX,
    deep_merge,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    ComponentsConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    component_path,
    components_path,
)

__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "ENV_PREFIX",
    "ComponentsConfig",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "discover_config_file",
    "get_user_config_path",
    "component_path",
    "components_path",
    "load_config",
    "parse_env_vars",
    "read_toml_file",
    "set_nested_key",
]
