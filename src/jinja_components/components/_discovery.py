"""Component folder discovery and fieldset namespaces."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from jinja_components._logging import get_logger
from jinja_components._naming import canonicalize

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

FIELDSETS_DIR = "fieldsets"
"""Component subfolder holding fieldset definitions."""


def list_directories(root: Path) -> list[str]:
    """List the component folders directly under a root directory.

    Args:
        root: Components root directory.

    Returns:
        Folder names sorted lexicographically. Hidden folders are skipped.
        A missing root yields an empty list.
    """
    if not root.is_dir():
        return []
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )


@dataclass(slots=True, frozen=True)
class ComponentPaths:
    """Paths rooted at the configured components directory.

    Attributes:
        root: Components root directory.
    """

    root: Path

    def components_path(self, sub_path: str = "") -> Path:
        """Join the components root with a relative path.

        Example:
            >>> ComponentPaths(Path("/site/components")).components_path("/Button")
            PosixPath('/site/components/Button')
        """
        return self.root / sub_path.lstrip("/")

    def exists(self, relative: str) -> bool:
        return self.components_path(relative).exists()

    def directories(self) -> list[str]:
        return list_directories(self.root)

    def folders(self) -> dict[str, str]:
        """Map canonical component names to their folder names on disk.

        When two folders canonicalize to the same name, the first in sorted
        order wins, matching registration order.

        Example:
            >>> ComponentPaths(Path("/site/components")).folders()
            {'IconButton': 'icon-button'}
        """
        folders: dict[str, str] = {}
        for directory in self.directories():
            folders.setdefault(canonicalize(directory), directory)
        return folders


class NamespaceRegistrar(Protocol):
    """Anything that accepts fieldset namespace registrations."""

    def add_namespace(self, name: str, path: Path) -> None: ...


class FieldsetNamespaces:
    """Fieldset namespaces contributed by component folders.

    A component folder ``button`` with a ``fieldsets`` subfolder registers the
    namespace ``button``; fieldset handles such as ``button::hero`` then
    locate ``button/fieldsets/hero.yaml``. The definitions themselves are
    never parsed here.
    """

    __slots__ = ("_namespaces",)

    def __init__(self) -> None:
        self._namespaces: dict[str, Path] = {}

    def add_namespace(self, name: str, path: Path) -> None:
        self._namespaces[name] = path

    def get(self, name: str) -> Path | None:
        return self._namespaces.get(name)

    def namespaces(self) -> dict[str, Path]:
        return dict(self._namespaces)

    def fieldset_path(self, handle: str) -> Path | None:
        """Locate the file for a namespaced fieldset handle.

        Args:
            handle: ``<namespace>::<fieldset>``, where the fieldset part may
                use dots for subfolders.

        Returns:
            The candidate YAML path, or None when the handle has no namespace
            or the namespace is unknown.
        """
        namespace, separator, fieldset = handle.partition("::")
        if not separator or not fieldset:
            return None
        root = self._namespaces.get(namespace)
        if root is None:
            return None
        return root.joinpath(*fieldset.split(".")).with_suffix(".yaml")

    def __contains__(self, name: object) -> bool:
        return name in self._namespaces

    def __len__(self) -> int:
        return len(self._namespaces)


def register_fieldset_namespaces(
    paths: ComponentPaths,
    registrar: NamespaceRegistrar,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> list[str]:
    """Register a fieldset namespace for every component with fieldsets.

    The namespace is the lower-cased folder name.

    Args:
        paths: Components root paths.
        registrar: Receives one ``add_namespace`` call per component.
        logger: Logger to report through. Defaults to the default logger.

    Returns:
        The registered namespace names.
    """
    log = get_logger("components.discovery", logger)
    registered: list[str] = []
    for directory in paths.directories():
        if not paths.exists(f"{directory}/{FIELDSETS_DIR}"):
            continue
        namespace = directory.lower()
        fieldsets = paths.components_path(f"{directory}/{FIELDSETS_DIR}")
        registrar.add_namespace(namespace, fieldsets)
        registered.append(namespace)
        log.debug("fieldset_namespace_added", namespace=namespace, path=str(fieldsets))
    return registered
