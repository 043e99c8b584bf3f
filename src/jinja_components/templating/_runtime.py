"""Per-environment component state."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jinja2 import Environment

from jinja_components._logging import get_logger
from jinja_components.components import (
    ComponentFactories,
    ComponentPaths,
    ComponentRegistry,
    FieldsetNamespaces,
    PartialResolver,
    register_fieldset_namespaces,
)
from jinja_components.config import ComponentsConfig

from ._oracle import LoaderViewOracle, view_path

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


@dataclass(slots=True, frozen=True)
class ComponentRuntime:
    """Everything the ``component`` tag needs, built once per environment.

    Attributes:
        config: Settings the runtime was built from.
        registry: Frozen component registry.
        fieldsets: Fieldset namespaces contributed by component folders.
        oracle: Template-existence checks against the environment's loader.
        resolver: Handle-to-identifier resolver.
        logger: Logger the runtime and its resolver report through.
    """

    config: ComponentsConfig
    registry: ComponentRegistry
    fieldsets: FieldsetNamespaces
    oracle: LoaderViewOracle
    resolver: PartialResolver
    logger: "FilteringBoundLogger"

    def view_name(self, handle: str) -> str:
        """Resolve a handle to its template identifier."""
        return self.resolver.resolve(handle)

    def exists(self, handle: str | None) -> bool:
        """Check whether a handle names a component or a declared type."""
        if not handle:
            return False
        return self.registry.exists(handle)

    def template_name(self, handle: str) -> str:
        """Resolve a handle to a loader template name.

        Falls back to the identifier with the first configured extension, so
        a missing template surfaces as ``TemplateNotFound`` for that name.
        """
        identifier = self.view_name(handle)
        name = self.oracle.template_for(identifier)
        if name is not None:
            return name
        return view_path(
            identifier, self.config.template_extensions[0], self.oracle.folders
        )


def build_runtime(
    environment: Environment,
    config: ComponentsConfig,
    *,
    registry: ComponentRegistry | None = None,
    factories: ComponentFactories | None = None,
    fieldsets: FieldsetNamespaces | None = None,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> ComponentRuntime:
    """Scan the components directory and assemble a runtime.

    Args:
        environment: Environment whose loader backs existence checks.
        config: Component settings.
        registry: Prebuilt registry. Scanned from disk when omitted.
        factories: Explicit descriptor factories used while scanning.
        fieldsets: Registrar for fieldset namespaces. A new one is created
            when omitted.
        logger: Logger bound to this runtime. Defaults to the default logger.

    Returns:
        The runtime, with a frozen registry.

    Raises:
        ComponentDefinitionError: If a companion definition is malformed.
    """
    log = get_logger("templating.runtime", logger)
    paths = ComponentPaths(config.components_path)

    if registry is None:
        registry = ComponentRegistry.build_from_directories(
            paths.directories(),
            root=paths.root,
            namespace=config.component_namespace,
            factories=factories,
            logger=logger,
        )
    registry.freeze()

    if fieldsets is None:
        fieldsets = FieldsetNamespaces()
    namespaces = register_fieldset_namespaces(paths, fieldsets, logger=logger)

    oracle = LoaderViewOracle(
        environment, config.template_extensions, paths.folders()
    )
    log.debug(
        "components_registered",
        root=str(paths.root),
        components=registry.names(),
        fieldset_namespaces=namespaces,
    )
    return ComponentRuntime(
        config=config,
        registry=registry,
        fieldsets=fieldsets,
        oracle=oracle,
        resolver=PartialResolver(registry, oracle, logger=logger),
        logger=log,
    )


def get_runtime(environment: Environment) -> ComponentRuntime:
    """Return the component runtime attached to an environment.

    Raises:
        RuntimeError: If the environment was not created by
            :func:`create_environment`.
    """
    runtime = getattr(environment, "component_runtime", None)
    if runtime is None:
        msg = "Environment has no component runtime; use create_environment()"
        raise RuntimeError(msg)
    return runtime
