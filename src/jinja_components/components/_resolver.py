"""Partial view-name resolution.

Turns a component handle such as ``button`` or ``button.icon.small`` into the
template identifier to render. Authors may put a partial directly in the
component folder or under a shared ``partials`` tree, and may prefix either
with ``_``. The resolver tries each convention in a fixed order:

1. ``Button.views._icon``
2. ``partials.Button.views.icon``
3. ``partials.Button.views._icon``
4. a component declaring ``button.icon`` as a type, resolved through its
   ``view_name``

When nothing matches, the plain ``Button.views.icon`` identifier is returned
and the template engine reports the missing template at render time.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from jinja_components._logging import get_logger
from jinja_components._naming import canonicalize

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ._registry import ComponentRegistry

DEFAULT_PARTIAL = "template"
"""Sub-view used when a handle names only a component."""

PARTIALS_PREFIX = "partials"
"""Shared directory searched for component partials."""

type ViewExists = Callable[[str], bool]


def underscored(identifier: str) -> str:
    """Prefix the last segment of a dotted identifier with ``_``.

    Example:
        >>> underscored("Button.views.icon")
        'Button.views._icon'
    """
    head, _, last = identifier.rpartition(".")
    return f"{head}._{last}" if head else f"_{last}"


def candidate_identifier(partial: str) -> str:
    """Build the plain template identifier for a handle.

    Example:
        >>> candidate_identifier("button")
        'Button.views.template'
        >>> candidate_identifier("icon-button.icon.small")
        'IconButton.views.icon.small'
    """
    component, *rest = partial.split(".")
    sub_path = ".".join(rest) if rest else DEFAULT_PARTIAL
    return f"{canonicalize(component)}.views.{sub_path}"


class PartialResolver:
    """Resolve component handles to template identifiers.

    Args:
        registry: Registry consulted for the type-alias fallback.
        view_exists: Callable returning True iff the template engine can load
            a template under the given identifier.
        logger: Logger to report through. Defaults to the default logger.
    """

    __slots__ = ("_logger", "registry", "view_exists")

    def __init__(
        self,
        registry: "ComponentRegistry",  # noqa: UP037
        view_exists: ViewExists,
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self.registry = registry
        self.view_exists = view_exists
        self._logger = get_logger("components.resolver", logger)

    def resolve(self, partial: str) -> str:
        """Resolve a handle to the template identifier to render.

        Args:
            partial: Dotted handle, e.g. ``button`` or ``button.icon``.

        Returns:
            The first identifier the template engine confirms, or the plain
            candidate identifier when none is found.
        """
        return self._resolve(partial, ())

    def _resolve(self, partial: str, seen: tuple[str, ...]) -> str:
        candidate = candidate_identifier(partial)
        underscored_candidate = underscored(candidate)

        for strategy, identifier in (
            ("underscored", underscored_candidate),
            ("subdirectory", f"{PARTIALS_PREFIX}.{candidate}"),
            ("subdirectory_underscored", f"{PARTIALS_PREFIX}.{underscored_candidate}"),
        ):
            if self.view_exists(identifier):
                self._logger.debug(
                    "partial_resolved",
                    partial=partial,
                    strategy=strategy,
                    template=identifier,
                )
                return identifier

        component = self.registry.find_by_type(partial)
        if component is not None:
            alias = component.view_name(partial)
            if alias in seen or alias == partial:
                self._logger.warning(
                    "partial_alias_cycle",
                    partial=partial,
                    alias=alias,
                    chain=[*seen, partial],
                )
            else:
                self._logger.debug(
                    "partial_type_alias",
                    partial=partial,
                    component=component.name,
                    alias=alias,
                )
                return self._resolve(alias, (*seen, partial))

        self._logger.debug("partial_fallback", partial=partial, template=candidate)
        return candidate
