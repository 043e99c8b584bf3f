"""The command-line interface for jinja-components."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from enum import IntEnum
from pathlib import Path
from typing import Annotated, Any, Never

from cyclopts import App, Parameter
from jinja2 import Environment
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jinja_components.components import TypeAliases, supported_types_from
from jinja_components.config import load_config
from jinja_components.exceptions import (
    ComponentDefinitionError,
    ConfigLoadError,
    ConfigValidationError,
)
from jinja_components.templating import ComponentRuntime, create_environment, get_runtime

APP_HELP = "Inspect and resolve folder-based Jinja2 components."


class ExitCode(IntEnum):
    """Exit codes for jinja-components commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3


ConfigOption = Annotated[
    Path | None, Parameter(name="--config", help="Path to config file")
]
ComponentsPathOption = Annotated[
    Path | None,
    Parameter(name="--components-path", help="Components directory override"),
]
ViewsPathOption = Annotated[
    list[Path] | None,
    Parameter(name="--views-path", help="Views directory override (repeatable)"),
]


def _exit_with_error(console: Console, message: str, code: ExitCode) -> Never:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)


def _load_environment(
    error_console: Console,
    config: Path | None,
    components_path: Path | None,
    views_path: list[Path] | None,
) -> Environment:
    """Load configuration and build an environment, exiting on failure."""
    overrides: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
    if components_path is not None:
        overrides["components_path"] = str(components_path.resolve())
    if views_path:
        overrides["views_paths"] = [str(path.resolve()) for path in views_path]

    try:
        loaded = load_config(config, overrides=overrides or None)
        return create_environment(loaded)
    except ConfigLoadError as e:
        _exit_with_error(error_console, str(e), ExitCode.LOAD_ERROR)
    except (ConfigValidationError, ComponentDefinitionError) as e:
        _exit_with_error(error_console, str(e), ExitCode.VALIDATION_ERROR)


def _format_types(runtime: ComponentRuntime, name: str) -> str:
    types = supported_types_from(
        runtime.registry.find(name).get_supported_types(), component=name
    )
    if isinstance(types, TypeAliases):
        return ", ".join(f"{key} -> {value}" for key, value in types.aliases.items())
    return ", ".join(types.names())


def register_commands(app: App, console: Console, error_console: Console) -> None:
    """Register all commands on an app.

    Args:
        app: The app to register commands on.
        console: Console for regular output.
        error_console: Console for error output.
    """

    @app.command(name="list")
    def list_components(
        *,
        config: ConfigOption = None,
        components_path: ComponentsPathOption = None,
        views_path: ViewsPathOption = None,
    ) -> None:
        """List registered components, their types and fieldset namespaces."""
        runtime = get_runtime(
            _load_environment(error_console, config, components_path, views_path)
        )

        if not len(runtime.registry):
            console.print(f"No components found in {runtime.config.components_path}")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Component", style="cyan")
        table.add_column("Types")
        table.add_column("Descriptor")
        table.add_column("Fieldsets")
        for name, descriptor in runtime.registry.items():
            table.add_row(
                name,
                _format_types(runtime, name),
                type(descriptor).__name__,
                "yes" if name.lower() in runtime.fieldsets else "",
            )
        console.print(table)

    @app.command
    def resolve(
        handle: str,
        *,
        config: ConfigOption = None,
        components_path: ComponentsPathOption = None,
        views_path: ViewsPathOption = None,
    ) -> None:
        """Print the template a component handle resolves to.

        Exits with code 3 when no template backs the resolved identifier.

        Args:
            handle: Component handle, e.g. ``button`` or ``button.icon``.
        """
        runtime = get_runtime(
            _load_environment(error_console, config, components_path, views_path)
        )

        identifier = runtime.view_name(handle)
        template = runtime.oracle.template_for(identifier)
        console.print(identifier, highlight=False)
        if template is None:
            error_console.print(
                f"[yellow]No template found for {identifier}[/yellow]", highlight=False
            )
            raise SystemExit(ExitCode.NOT_FOUND)
        console.print(template, highlight=False)

    @app.command
    def exists(
        handle: str,
        *,
        config: ConfigOption = None,
        components_path: ComponentsPathOption = None,
        views_path: ViewsPathOption = None,
    ) -> None:
        """Check whether a handle names a component or a declared type.

        Prints ``true`` or ``false`` and exits with code 3 for ``false``.

        Args:
            handle: Component name or type handle.
        """
        runtime = get_runtime(
            _load_environment(error_console, config, components_path, views_path)
        )

        found = runtime.exists(handle)
        console.print("true" if found else "false", highlight=False)
        if not found:
            raise SystemExit(ExitCode.NOT_FOUND)


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
) -> App:
    """Create the CLI app.

    Args:
        console: Console for regular output.
        error_console: Console for error output. Defaults to stderr.

    Returns:
        The configured app.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)

    app = App(
        name="jinja-components",
        help=APP_HELP,
        help_on_error=True,
        console=console,
    )
    register_commands(app, console, error_console)
    return app


def main() -> None:
    """Default entrypoint for the `jinja-components` CLI."""
    app = create_app()
    app()
