"""Configuration discovery and loading."""

from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ValidationError

from jinja_components.exceptions import ConfigLoadError, ConfigValidationError

from ._loader import deep_merge, parse_env_vars, read_toml_file
from ._models import ComponentsConfig

APP_NAME = "jinja-components"
CONFIG_FILENAME = "components.toml"


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/jinja-components/config.toml``
    - macOS: ``~/Library/Application Support/jinja-components/config.toml``
    - Windows: ``%APPDATA%\jinja-components\config.toml``
    """
    return platformdirs.user_config_path(APP_NAME) / "config.toml"


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the configuration file to load.

    Search order (first found wins):
    1. ``components.toml`` in ``start`` (default: current directory)
    2. The user config file

    Returns:
        Path to the config file, or None if neither exists.
    """
    project_file = (start or Path.cwd()) / CONFIG_FILENAME
    if project_file.is_file():
        return project_file

    user_file = get_user_config_path()
    if user_file.is_file():
        return user_file

    return None


def load_config(
    config_path: Path | None = None,
    *,
    base_dir: Path | None = None,
    include_env: bool = True,
    overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> ComponentsConfig:
    """Load configuration from file, environment and overrides.

    Sources are merged in order (later values override earlier):
    1. Defaults
    2. The config file (explicit ``config_path`` or discovered)
    3. ``JINJA_COMPONENTS_*`` environment variables
    4. ``overrides``

    Relative paths are anchored at the config file's directory, or at
    ``base_dir`` (default: current directory) when no file was loaded.

    Args:
        config_path: Explicit config file. Must exist when given.
        base_dir: Directory searched for ``components.toml``.
        include_env: Whether to apply environment variables.
        overrides: Highest-precedence values, e.g. from CLI flags.

    Returns:
        The validated configuration.

    Raises:
        ConfigLoadError: If the explicit file is missing or any file fails
            to parse.
        ConfigValidationError: If the merged values are invalid.
    """
    if config_path is not None and not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigLoadError(msg, path=config_path)

    path = config_path if config_path is not None else discover_config_file(base_dir)

    data: dict[str, Any] = read_toml_file(path) if path is not None else {}  # pyright: ignore[reportExplicitAny]
    if include_env:
        data = deep_merge(data, parse_env_vars())
    if overrides:
        data = deep_merge(data, overrides)

    try:
        config = ComponentsConfig.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error["loc"])
        msg = f"Invalid configuration value for {key!r}: {error['msg']}"
        raise ConfigValidationError(
            msg,
            key=key,
            value=error.get("input"),
            expected=error["msg"],
            source=str(path) if path is not None else None,
        ) from e

    anchor = path.parent if path is not None else (base_dir or Path.cwd())
    return config.relative_to(anchor)
