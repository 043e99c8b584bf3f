"""Shared test fixtures for jinja-components tests."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest

from jinja_components._logging import configure_default_logger
from jinja_components.config import ComponentsConfig


@dataclass(frozen=True, slots=True)
class ComponentsSite:
    """Paths for a test site with components and views directories.

    Structure:
        tmp_path/
            resources/components/   # one folder per component
            resources/views/        # shared partials tree
    """

    root: Path
    components: Path
    views: Path

    def config(self, **overrides: object) -> ComponentsConfig:
        return ComponentsConfig.model_validate(
            {
                "components_path": self.components,
                "views_paths": [self.views],
                **overrides,
            }
        )


WriteFile = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def reset_default_logger() -> Iterator[None]:
    """Drop any default logger a test configured."""
    yield
    configure_default_logger(None)


@pytest.fixture
def site(tmp_path: Path) -> ComponentsSite:
    components = tmp_path / "resources" / "components"
    views = tmp_path / "resources" / "views"
    components.mkdir(parents=True)
    views.mkdir(parents=True)
    return ComponentsSite(root=tmp_path, components=components, views=views)


@pytest.fixture
def write_file(site: ComponentsSite) -> WriteFile:
    """Return a function writing a file relative to the site root."""

    def _write(relative: str, content: str = "") -> Path:
        path = site.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
