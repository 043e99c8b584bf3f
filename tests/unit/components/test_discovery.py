"""Tests for component folder discovery and fieldset namespaces."""

from pathlib import Path

from pyfakefs.fake_filesystem import FakeFilesystem

from jinja_components.components import (
    ComponentPaths,
    FieldsetNamespaces,
    list_directories,
    register_fieldset_namespaces,
)

ROOT = Path("/site/resources/components")


class TestListDirectories:
    def test_lists_sorted_directories(self, fs: FakeFilesystem) -> None:
        for name in ("Card", "Button", "banner"):
            fs.create_dir(ROOT / name)

        assert list_directories(ROOT) == ["Button", "Card", "banner"]

    def test_skips_files_and_hidden_directories(self, fs: FakeFilesystem) -> None:
        fs.create_dir(ROOT / "Button")
        fs.create_dir(ROOT / ".cache")
        fs.create_file(ROOT / "README.md")

        assert list_directories(ROOT) == ["Button"]

    def test_missing_root_yields_empty_list(self, fs: FakeFilesystem) -> None:
        assert list_directories(ROOT) == []

    def test_root_that_is_a_file_yields_empty_list(self, fs: FakeFilesystem) -> None:
        fs.create_file(ROOT)

        assert list_directories(ROOT) == []


class TestComponentPaths:
    def test_components_path_strips_leading_slash(self) -> None:
        paths = ComponentPaths(ROOT)

        assert paths.components_path("/Button") == ROOT / "Button"
        assert paths.components_path("Button/views") == ROOT / "Button" / "views"

    def test_components_path_defaults_to_root(self) -> None:
        assert ComponentPaths(ROOT).components_path() == ROOT

    def test_exists(self, fs: FakeFilesystem) -> None:
        fs.create_file(ROOT / "Button" / "views" / "template.html.j2")
        paths = ComponentPaths(ROOT)

        assert paths.exists("Button/views/template.html.j2")
        assert not paths.exists("Button/fieldsets")

    def test_directories(self, fs: FakeFilesystem) -> None:
        fs.create_dir(ROOT / "Button")

        assert ComponentPaths(ROOT).directories() == ["Button"]

    def test_folders_map_canonical_names(self, fs: FakeFilesystem) -> None:
        for name in ("Card", "button", "icon-button"):
            fs.create_dir(ROOT / name)

        assert ComponentPaths(ROOT).folders() == {
            "Card": "Card",
            "Button": "button",
            "IconButton": "icon-button",
        }

    def test_folders_keep_first_of_colliding_names(self, fs: FakeFilesystem) -> None:
        fs.create_dir(ROOT / "icon-button")
        fs.create_dir(ROOT / "icon_button")

        assert ComponentPaths(ROOT).folders() == {"IconButton": "icon-button"}


class TestFieldsetNamespaces:
    def test_fieldset_path(self) -> None:
        namespaces = FieldsetNamespaces()
        namespaces.add_namespace("button", ROOT / "Button" / "fieldsets")

        assert namespaces.fieldset_path("button::hero") == (
            ROOT / "Button" / "fieldsets" / "hero.yaml"
        )

    def test_fieldset_path_with_subfolders(self) -> None:
        namespaces = FieldsetNamespaces()
        namespaces.add_namespace("button", ROOT / "Button" / "fieldsets")

        assert namespaces.fieldset_path("button::layout.wide") == (
            ROOT / "Button" / "fieldsets" / "layout" / "wide.yaml"
        )

    def test_fieldset_path_requires_known_namespace(self) -> None:
        namespaces = FieldsetNamespaces()

        assert namespaces.fieldset_path("button::hero") is None
        assert namespaces.fieldset_path("hero") is None

    def test_fieldset_path_requires_fieldset(self) -> None:
        namespaces = FieldsetNamespaces()
        namespaces.add_namespace("button", ROOT)

        assert namespaces.fieldset_path("button::") is None

    def test_container_protocol(self) -> None:
        namespaces = FieldsetNamespaces()
        namespaces.add_namespace("button", ROOT)

        assert "button" in namespaces
        assert len(namespaces) == 1
        assert namespaces.get("button") == ROOT
        assert namespaces.get("card") is None
        assert namespaces.namespaces() == {"button": ROOT}


class RecordingRegistrar:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []

    def add_namespace(self, name: str, path: Path) -> None:
        self.calls.append((name, path))


class TestRegisterFieldsetNamespaces:
    def test_registers_components_with_fieldsets(self, fs: FakeFilesystem) -> None:
        fs.create_file(ROOT / "Button" / "fieldsets" / "hero.yaml")
        fs.create_dir(ROOT / "Card")
        fs.create_dir(ROOT / "IconButton" / "fieldsets")
        registrar = RecordingRegistrar()

        registered = register_fieldset_namespaces(ComponentPaths(ROOT), registrar)

        assert registered == ["button", "iconbutton"]
        assert registrar.calls == [
            ("button", ROOT / "Button" / "fieldsets"),
            ("iconbutton", ROOT / "IconButton" / "fieldsets"),
        ]

    def test_no_components(self, fs: FakeFilesystem) -> None:
        registrar = RecordingRegistrar()

        assert register_fieldset_namespaces(ComponentPaths(ROOT), registrar) == []
        assert registrar.calls == []

    def test_feeds_fieldset_namespaces(self, fs: FakeFilesystem) -> None:
        fs.create_file(ROOT / "Button" / "fieldsets" / "hero.yaml")
        namespaces = FieldsetNamespaces()

        register_fieldset_namespaces(ComponentPaths(ROOT), namespaces)

        path = namespaces.fieldset_path("button::hero")
        assert path is not None
        assert path.is_file()
