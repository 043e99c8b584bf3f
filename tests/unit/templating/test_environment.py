from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from jinja2 import DictLoader, Environment, TemplateNotFound

from jinja_components._logging import configure_default_logger, create_logger
from jinja_components.components import (
    Component,
    ComponentFactories,
    ComponentRegistry,
    FieldsetNamespaces,
)
from jinja_components.config import ComponentsConfig
from jinja_components.exceptions import ComponentDefinitionError
from jinja_components.templating import (
    ComponentExtension,
    EnvironmentConfig,
    create_environment,
    get_runtime,
)

if TYPE_CHECKING:
    from tests.conftest import ComponentsSite, WriteFile


@pytest.fixture
def button_site(site: "ComponentsSite", write_file: "WriteFile") -> "ComponentsSite":
    """A site with a button component, a card with fieldsets and shared partials."""
    write_file(
        "resources/components/Button/views/template.html.j2",
        "<button>{{ label }}</button>",
    )
    write_file(
        "resources/components/Button/views/_icon.html.j2",
        "<i>{{ icon }}</i>",
    )
    write_file(
        "resources/components/Button/views/callToAction.html.j2",
        "<a>{{ label }}</a>",
    )
    write_file(
        "resources/components/Button/Button.yaml",
        "types:\n  cta: callToAction\n",
    )
    write_file("resources/components/Card/views/template.html", "<div>{{ title }}</div>")
    write_file("resources/components/Card/fieldsets/hero.yaml", "title: Hero\n")
    write_file("resources/views/partials/Card/views/_footer.html.j2", "<footer/>")
    return site


class TestCreateEnvironment:
    def test_registers_components_from_disk(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())
        runtime = get_runtime(env)

        assert runtime.registry.names() == ["Button", "Card"]
        assert runtime.registry.frozen

    def test_registers_fieldset_namespaces(self, button_site: "ComponentsSite") -> None:
        fieldsets = FieldsetNamespaces()

        create_environment(button_site.config(), fieldsets=fieldsets)

        assert fieldsets.namespaces() == {
            "card": button_site.components / "Card" / "fieldsets"
        }
        path = fieldsets.fieldset_path("card::hero")
        assert path is not None
        assert path.is_file()

    def test_uses_prebuilt_registry(self, button_site: "ComponentsSite") -> None:
        registry = ComponentRegistry()
        registry.register("Only", Component("Only"))

        env = create_environment(button_site.config(), registry=registry)

        assert get_runtime(env).registry.names() == ["Only"]
        assert registry.frozen

    def test_uses_factories(self, button_site: "ComponentsSite") -> None:
        factories = ComponentFactories()
        factories.register("card", lambda name: Component(name, ["tile"]))

        env = create_environment(button_site.config(), factories=factories)

        assert get_runtime(env).exists("tile")

    def test_malformed_definition_fails(
        self, site: "ComponentsSite", write_file: "WriteFile"
    ) -> None:
        write_file("resources/components/Button/Button.yaml", "types: 5\n")

        with pytest.raises(ComponentDefinitionError):
            create_environment(site.config())

    def test_applies_environment_config(self, button_site: "ComponentsSite") -> None:
        env = create_environment(
            button_site.config(),
            environment_config=EnvironmentConfig(autoescape=False, trim_blocks=True),
        )

        assert env.autoescape is False
        assert env.trim_blocks is True

    def test_missing_components_directory(self, tmp_path: Path) -> None:
        config = ComponentsConfig.model_validate(
            {"components_path": tmp_path / "missing", "views_paths": [tmp_path]}
        )

        env = create_environment(config)

        assert get_runtime(env).registry.names() == []


class TestComponentTag:
    def test_renders_default_template(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "button", label="Save" %}').render()

        assert html == "<button>Save</button>"

    def test_renders_underscored_partial(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "button.icon", icon="star" %}').render()

        assert html == "<i>star</i>"

    def test_renders_shared_partial(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        assert env.from_string('{% component "card.footer" %}').render() == "<footer/>"

    def test_renders_type_alias(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "cta", label="Go" %}').render()

        assert html == "<a>Go</a>"

    def test_partial_sees_caller_context(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "card" %}').render(title="Welcome")

        assert html == "<div>Welcome</div>"

    def test_params_override_context(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "card", title="Inner" %}').render(
            title="Outer"
        )

        assert html == "<div>Inner</div>"

    def test_handle_may_be_an_expression(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string("{% component name ~ '.icon', icon=glyph %}").render(
            name="button", glyph="bolt"
        )

        assert html == "<i>bolt</i>"

    def test_output_is_not_escaped_twice(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "button", label="<b>" %}').render()

        assert html == "<button>&lt;b&gt;</button>"

    def test_trailing_comma_without_params(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "button", %}').render(label="Ok")

        assert html == "<button>Ok</button>"

    def test_trailing_comma_after_params(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{% component "card", title="x", %}').render()

        assert html == "<div>x</div>"

    def test_missing_partial_raises_template_not_found(
        self, button_site: "ComponentsSite"
    ) -> None:
        env = create_environment(button_site.config())

        with pytest.raises(TemplateNotFound) as exc_info:
            env.from_string('{% component "button.missing" %}').render()

        assert exc_info.value.name == "Button/views/missing.html.j2"


class TestGlobals:
    def test_component_function(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string('{{ component("button", label="Ok") }}').render()

        assert html == "<button>Ok</button>"

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ('component_exists("button")', "True"),
            ('component_exists("cta")', "True"),
            ('component_exists("missing")', "False"),
            ('component_exists(src="card")', "True"),
            ("component_exists()", "False"),
            ('component_exists("")', "False"),
        ],
    )
    def test_component_exists(
        self, button_site: "ComponentsSite", expression: str, expected: str
    ) -> None:
        env = create_environment(button_site.config())

        assert env.from_string(f"{{{{ {expression} }}}}").render() == expected

    def test_component_test(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())
        template = env.from_string(
            "{% if handle is component %}yes{% else %}no{% endif %}"
        )

        assert template.render(handle="button") == "yes"
        assert template.render(handle="hero") == "no"

    def test_component_view(self, button_site: "ComponentsSite") -> None:
        env = create_environment(button_site.config())

        html = env.from_string(
            "{{ component_view('button.icon') }}|{{ component_view('card.footer') }}"
        ).render()

        assert html == "Button.views._icon|partials.Card.views._footer"


class TestGetRuntime:
    def test_requires_runtime(self) -> None:
        env = Environment(loader=DictLoader({}), extensions=[ComponentExtension])

        with pytest.raises(RuntimeError, match="no component runtime"):
            get_runtime(env)

    def test_tag_without_runtime_fails(self) -> None:
        env = Environment(loader=DictLoader({}), extensions=[ComponentExtension])

        with pytest.raises(RuntimeError):
            env.from_string('{% component "button" %}').render()


class TestFolderNames:
    @pytest.fixture
    def kebab_site(
        self, site: "ComponentsSite", write_file: "WriteFile"
    ) -> "ComponentsSite":
        write_file(
            "resources/components/icon-button/icon-button.yaml",
            "types:\n  glyph: icon\n",
        )
        write_file(
            "resources/components/icon-button/views/template.html",
            "<button>{{ label }}</button>",
        )
        write_file("resources/components/icon-button/views/_icon.html", "<i/>")
        return site

    def test_companion_file_in_kebab_folder(self, kebab_site: "ComponentsSite") -> None:
        runtime = get_runtime(create_environment(kebab_site.config()))

        assert runtime.registry.names() == ["IconButton"]
        assert runtime.registry.get_types("icon-button") == ["glyph"]
        assert runtime.exists("glyph")

    def test_renders_template_from_kebab_folder(
        self, kebab_site: "ComponentsSite"
    ) -> None:
        env = create_environment(kebab_site.config())

        html = env.from_string('{% component "icon-button", label="Go" %}').render()

        assert html == "<button>Go</button>"

    def test_renders_alias_from_kebab_folder(self, kebab_site: "ComponentsSite") -> None:
        env = create_environment(kebab_site.config())

        assert env.from_string('{% component "glyph" %}').render() == "<i/>"
        assert env.from_string("{{ component_view('glyph') }}").render() == (
            "IconButton.views._icon"
        )

    def test_missing_template_names_on_disk_folder(
        self, kebab_site: "ComponentsSite"
    ) -> None:
        env = create_environment(kebab_site.config())

        with pytest.raises(TemplateNotFound) as exc_info:
            env.from_string('{% component "icon-button.missing" %}').render()

        assert exc_info.value.name == "icon-button/views/missing.html.j2"


class TestLogging:
    def _config(self, site: "ComponentsSite", log_file: Path) -> ComponentsConfig:
        return site.config(
            logging={"level": "debug", "format": "json", "file": str(log_file)}
        )

    def test_environments_keep_their_own_logger(
        self, button_site: "ComponentsSite", tmp_path: Path
    ) -> None:
        first_log = tmp_path / "logs" / "first.log"
        second_log = tmp_path / "logs" / "second.log"
        first = create_environment(self._config(button_site, first_log))
        second = create_environment(self._config(button_site, second_log))

        first.from_string('{% component "button" %}').render(label="Ok")

        assert '"event": "partial_fallback"' in first_log.read_text()
        assert "partial_fallback" not in second_log.read_text()
        assert get_runtime(first).logger is not get_runtime(second).logger

    def test_does_not_replace_default_logger(
        self, button_site: "ComponentsSite", tmp_path: Path
    ) -> None:
        default_log = tmp_path / "logs" / "default.log"
        configure_default_logger(
            create_logger(level="debug", log_format="json", log_file=str(default_log))
        )
        env = create_environment(self._config(button_site, tmp_path / "env.log"))

        env.from_string('{% component "button" %}').render(label="Ok")

        assert "partial_fallback" not in default_log.read_text()

    def test_uses_default_logger_when_not_configuring(
        self, button_site: "ComponentsSite", tmp_path: Path
    ) -> None:
        default_log = tmp_path / "logs" / "default.log"
        configure_default_logger(
            create_logger(level="debug", log_format="json", log_file=str(default_log))
        )
        env = create_environment(button_site.config(), configure_logging=False)

        env.from_string('{% component "button" %}').render(label="Ok")

        content = default_log.read_text()
        assert '"event": "partial_fallback"' in content
        assert '"logger": "components.resolver"' in content
