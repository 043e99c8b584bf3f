"""Jinja2 Environment factory."""

from dataclasses import dataclass

from jinja2 import Environment, FileSystemLoader

from jinja_components._logging import create_logger
from jinja_components.components import (
    ComponentFactories,
    ComponentRegistry,
    FieldsetNamespaces,
)
from jinja_components.config import ComponentsConfig, load_config

from ._extension import ComponentExtension
from ._runtime import build_runtime


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for Jinja2 Environment.

    Attributes:
        autoescape: Enable autoescaping (default: True for HTML components).
        trim_blocks: Remove first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before block tags.
        keep_trailing_newline: Preserve trailing newline in templates.
    """

    autoescape: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True


def create_environment(
    config: ComponentsConfig | None = None,
    *,
    environment_config: EnvironmentConfig | None = None,
    registry: ComponentRegistry | None = None,
    factories: ComponentFactories | None = None,
    fieldsets: FieldsetNamespaces | None = None,
    configure_logging: bool = True,
) -> Environment:
    """Create a Jinja2 Environment with the ``component`` tag installed.

    The loader searches the components directory first, then each of the
    configured views directories (where the shared ``partials`` tree lives).
    The components directory is scanned once and the resulting registry is
    frozen.

    Args:
        config: Component settings. Loaded with ``load_config()`` when None.
        environment_config: Optional Jinja2 settings. If None, uses defaults.
        registry: Prebuilt registry, skipping the directory scan.
        factories: Explicit descriptor factories used while scanning.
        fieldsets: Registrar receiving fieldset namespaces.
        configure_logging: Whether to build a logger from ``config.logging``
            for this environment. When False the library default is used.

    Returns:
        Configured Jinja2 Environment with a ``component_runtime``
        attribute.

    Raises:
        ConfigError: If the configuration cannot be loaded.
        ComponentDefinitionError: If a companion definition is malformed.

    Example:
        from jinja_components import create_environment, load_config

        env = create_environment(load_config())
        html = env.from_string('{% component "button", label="Save" %}').render()
    """
    if config is None:
        config = load_config()
    if environment_config is None:
        environment_config = EnvironmentConfig()

    logger = None
    if configure_logging:
        logger = create_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
        )

    search_paths = [str(config.components_path), *(str(p) for p in config.views_paths)]
    env = Environment(
        loader=FileSystemLoader(search_paths),
        extensions=[ComponentExtension],
        autoescape=environment_config.autoescape,
        trim_blocks=environment_config.trim_blocks,
        lstrip_blocks=environment_config.lstrip_blocks,
        keep_trailing_newline=environment_config.keep_trailing_newline,
    )
    env.component_runtime = build_runtime(  # type: ignore[attr-defined]
        env,
        config,
        registry=registry,
        factories=factories,
        fieldsets=fieldsets,
        logger=logger,
    )
    return env
