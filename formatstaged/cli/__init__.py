"""CLI entry point for formatstaged.

Installed as ``git-format-staged``, so it also runs as ``git format-staged``.
"""

import typer

from formatstaged.cli.main import FORMATTER_COMMAND_KEY, FormatterCommand, main_command

app = typer.Typer(
    name="git-format-staged",
    help="Format staged files without touching unstaged changes",
    add_completion=False,
)

app.command(cls=FormatterCommand)(main_command)


__all__ = [
    "app",
    "main_command",
    "FormatterCommand",
    "FORMATTER_COMMAND_KEY",
]
