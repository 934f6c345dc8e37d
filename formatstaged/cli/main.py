"""Main CLI command for formatting staged files."""

from pathlib import Path
from typing import Optional

import typer
from typer.core import TyperCommand

from formatstaged import __version__
from formatstaged.config import load_config
from formatstaged.engine import (
    FormatStagedError,
    FormatterError,
    ReconcileError,
    StagingError,
    format_staged,
)
from formatstaged.git import GitError, get_repo_root


FORMATTER_COMMAND_KEY = "formatstaged.formatter_command"


class FormatterCommand(TyperCommand):
    """Command that treats everything after the first ``--`` as the formatter.

    click would merge those arguments into the positional file list; they are
    set aside in ``ctx.meta`` before normal parsing instead.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        if "--" in args:
            split = args.index("--")
            ctx.meta[FORMATTER_COMMAND_KEY] = args[split + 1:]
            args = args[:split]
        return super().parse_args(ctx, args)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-format-staged {__version__}")
        raise typer.Exit()


def _echo_messages(trace: list[str], warnings: list[str], debug: bool) -> None:
    """Print the engine's debug trace (with --debug) and its warnings."""
    if debug:
        for line in trace:
            typer.echo(line, err=True)
    for warning in warnings:
        typer.echo(f"Warning: {warning}", err=True)


def _report_reconcile_error(error: ReconcileError) -> None:
    """Explain how to recover from a failure after formatting succeeded."""
    typer.echo(f"Error: {error}", err=True)
    typer.echo("", err=True)
    typer.echo("The index was not modified. Backups were left in place:", err=True)
    for backup in error.backups:
        if backup.exists():
            typer.echo(f"  {backup}", err=True)
    typer.echo("", err=True)
    typer.echo("MANUAL RECOVERY:", err=True)
    typer.echo("  <file>.orig holds your working copy from before the run.", err=True)
    typer.echo("  <file>.staged.orig holds the staged content from before the run.", err=True)
    typer.echo("  To restore a file: mv <file>.orig <file> && rm <file>.staged.orig", err=True)


def main_command(
    ctx: typer.Context,
    files: Optional[list[str]] = typer.Argument(
        None,
        help="The staged files to format. Put the formatter command after `--`.",
        show_default=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Trace each step on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Format the staged content of FILES without losing unstaged edits.

    The formatter runs on the staged version of each file. The index gets the
    formatted content; the working tree gets only the lines the formatter
    changed.

    Example: git-format-staged src/app.py -- black --quiet
    """
    files = files or []
    formatter = ctx.meta.get(FORMATTER_COMMAND_KEY, [])
    cwd = Path.cwd()

    try:
        repo_root = get_repo_root(cwd)
        config = load_config(repo_root)
        command = formatter or config.command
        debug = debug or config.debug

        if not command:
            typer.echo("Error: No formatter command given.", err=True)
            typer.echo("Pass one after `--`, e.g.: git-format-staged app.py -- black", err=True)
            raise typer.Exit(1)

        if not files:
            typer.echo("Nothing to format.", err=True)
            raise typer.Exit(0)

        result = format_staged(files, command, cwd=cwd)

    except StagingError as e:
        for problem in e.problems:
            typer.echo(f"Error: {problem}", err=True)
        raise typer.Exit(e.exit_code)
    except FormatterError as e:
        _echo_messages(e.trace, e.warnings, debug)
        typer.echo(f"Error: {e}", err=True)
        if e.warnings:
            typer.echo("Some files could not be restored; see the warnings above.", err=True)
        else:
            typer.echo("Working tree and index were restored.", err=True)
        raise typer.Exit(e.exit_code)
    except ReconcileError as e:
        _echo_messages(e.trace, e.warnings, debug)
        _report_reconcile_error(e)
        raise typer.Exit(e.exit_code)
    except FormatStagedError as e:
        _echo_messages(e.trace, e.warnings, debug)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(e.exit_code)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    _echo_messages(result.trace, result.warnings, debug)

    if debug:
        typer.echo(
            f"Reformatted {len(result.changed)} of {len(result.targets)} file(s), "
            f"{result.hunk_count} hunk(s).",
            err=True,
        )
