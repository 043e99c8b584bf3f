"""Command-line interface for jinja-components."""

from ._app import ExitCode, create_app, main, register_commands

__all__ = ["ExitCode", "create_app", "main", "register_commands"]
