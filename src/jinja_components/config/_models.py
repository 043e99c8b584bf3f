"""Configuration models.

This module provides the Pydantic models for jinja-components settings.
"""

from enum import StrEnum
from pathlib import Path
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class ComponentsConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        components_path: Directory holding one folder per component.
        component_namespace: Module that bare descriptor class names in
            companion definition files are looked up in.
        views_paths: Extra template directories searched after the
            components directory (the shared ``partials`` tree lives here).
        template_extensions: File extensions tried, in order, when mapping a
            template identifier to a file.
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    components_path: Path = Path("resources/components")
    component_namespace: str = Field(default="app.components", min_length=1)
    views_paths: tuple[Path, ...] = (Path("resources/views"),)
    template_extensions: tuple[str, ...] = (".html.j2", ".html", ".j2")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("template_extensions")
    @classmethod
    def _extensions_have_dot(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            msg = "at least one template extension is required"
            raise ValueError(msg)
        for extension in value:
            if not extension.startswith("."):
                msg = f"template extension must start with '.': {extension!r}"
                raise ValueError(msg)
        return value

    def relative_to(self, base: Path) -> Self:
        """Return a copy with relative paths anchored at ``base``."""
        return self.model_copy(
            update={
                "components_path": base / self.components_path,
                "views_paths": tuple(base / path for path in self.views_paths),
            }
        )

    def components_dir(self, sub_path: str = "") -> Path:
        """Join the components root with a relative path.

        Example:
            >>> ComponentsConfig(components_path=Path("/site/c")).components_dir("Button")
            PosixPath('/site/c/Button')
        """
        return self.components_path / sub_path.lstrip("/")


def components_path(config: ComponentsConfig, sub_path: str = "") -> Path:
    """Join the configured components root with a relative path."""
    return config.components_dir(sub_path)


# Same helper under the singular name
component_path = components_path
