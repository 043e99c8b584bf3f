"""The ``component`` tag for Jinja2.

Usage in templates::

    {% component "button" %}
    {% component "button.icon", label="Save", size="small" %}
    {{ component("card", title=page.title) }}

    {% if component_exists("hero") %}...{% endif %}
    {% if "hero" is component %}...{% endif %}
    <link rel="prefetch" href="{{ component_view('button.icon') }}">

The rendered partial sees the caller's context plus the keyword arguments.
"""

from typing import TYPE_CHECKING, Any

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.runtime import Context
from jinja2.utils import pass_context
from markupsafe import Markup

from ._runtime import ComponentRuntime, get_runtime

if TYPE_CHECKING:
    from jinja2 import Environment
    from jinja2.parser import Parser


class ComponentExtension(Extension):
    """Jinja2 extension adding the ``component`` tag, global and test.

    The environment must carry a ``component_runtime`` attribute, which
    :func:`create_environment` sets up.
    """

    tags = {"component"}  # noqa: RUF012

    def __init__(self, environment: "Environment") -> None:  # noqa: UP037
        super().__init__(environment)
        environment.extend(component_runtime=None)
        environment.globals["component"] = self._render
        environment.globals["component_exists"] = self._exists
        environment.globals["component_view"] = self._view_name
        environment.tests["component"] = self._exists

    @property
    def runtime(self) -> ComponentRuntime:
        return get_runtime(self.environment)

    def parse(self, parser: "Parser") -> nodes.Node:  # noqa: UP037
        lineno = next(parser.stream).lineno
        handle = parser.parse_expression()

        params: list[nodes.Pair] = []
        while parser.stream.current.type != "block_end":
            parser.stream.skip_if("comma")
            if parser.stream.current.type == "block_end":
                break
            key = parser.stream.expect("name")
            parser.stream.expect("assign")
            value = parser.parse_expression()
            params.append(
                nodes.Pair(
                    nodes.Const(key.value, lineno=key.lineno),
                    value,
                    lineno=key.lineno,
                )
            )

        call = self.call_method(
            "_render_tag", [handle, nodes.Dict(params, lineno=lineno)], lineno=lineno
        )
        return nodes.Output([call], lineno=lineno)

    @pass_context
    def _render_tag(
        self,
        context: Context,
        handle: str,
        params: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    ) -> Markup:
        return self._render_component(context, handle, params)

    @pass_context
    def _render(self, context: Context, handle: str, /, **params: Any) -> Markup:  # pyright: ignore[reportExplicitAny]
        return self._render_component(context, handle, params)

    def _render_component(
        self,
        context: Context,
        handle: str,
        params: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    ) -> Markup:
        template = self.environment.get_template(
            self.runtime.template_name(handle), parent=context.name
        )
        return Markup(template.render({**context.get_all(), **params}))

    def _exists(self, handle: str | None = None, src: str | None = None) -> bool:
        return self.runtime.exists(handle if handle is not None else src)

    def _view_name(self, handle: str) -> str:
        return self.runtime.view_name(handle)
