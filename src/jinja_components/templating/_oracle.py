"""Template-existence checks against a Jinja2 loader."""

from collections.abc import Mapping, Sequence

from jinja2 import Environment, TemplateNotFound


def view_path(
    identifier: str,
    extension: str = "",
    folders: Mapping[str, str] | None = None,
) -> str:
    """Map a dotted template identifier to a loader template name.

    The component segment (the first one, or the second under ``partials``)
    is translated through ``folders`` so that ``IconButton.views.template``
    can live in an ``icon-button/`` folder.

    Example:
        >>> view_path("partials.Button.views._icon", ".html")
        'partials/Button/views/_icon.html'
        >>> view_path("IconButton.views.icon", "", {"IconButton": "icon-button"})
        'icon-button/views/icon'
    """
    segments = identifier.split(".")
    if folders:
        index = 1 if segments[0] == "partials" and len(segments) > 1 else 0
        segments[index] = folders.get(segments[index], segments[index])
    return "/".join(segments) + extension


class LoaderViewOracle:
    """Answer whether the environment's loader can load an identifier.

    Each configured extension is tried in order, so ``Button.views.icon``
    matches ``Button/views/icon.html.j2`` before ``Button/views/icon.html``.
    For each extension the on-disk folder name is tried before the
    canonical one.

    Args:
        environment: Environment whose loader is queried.
        extensions: File extensions to try, in order.
        folders: Canonical component names mapped to their folder names.
    """

    __slots__ = ("environment", "extensions", "folders")

    def __init__(
        self,
        environment: Environment,
        extensions: Sequence[str],
        folders: Mapping[str, str] | None = None,
    ) -> None:
        self.environment = environment
        self.extensions = tuple(extensions)
        self.folders = dict(folders or {})

    def template_for(self, identifier: str) -> str | None:
        """Return the loader template name backing an identifier, if any."""
        loader = self.environment.loader
        if loader is None:
            return None

        for extension in self.extensions:
            names = (
                view_path(identifier, extension, self.folders),
                view_path(identifier, extension),
            )
            for name in dict.fromkeys(names):
                try:
                    loader.get_source(self.environment, name)
                except TemplateNotFound:
                    continue
                return name
        return None

    def __call__(self, identifier: str) -> bool:
        return self.template_for(identifier) is not None
