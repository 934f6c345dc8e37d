"""Formatter invocation for formatstaged.

Contains:
- format_command_line: Render an argv list for diagnostics
- run_formatter: Run the formatter once over all targets
"""

import shlex
import subprocess
from pathlib import Path

from formatstaged.engine.errors import FormatterError


def format_command_line(argv: list[str]) -> str:
    """Render ``argv`` as a shell-quoted command line."""
    return " ".join(shlex.quote(part) for part in argv)


def run_formatter(command: list[str], files: list[str], cwd: Path) -> None:
    """Run ``command`` with ``files`` appended and wait for it to finish.

    The formatter's stdout and stderr are passed through untouched. All
    files go to a single invocation; nothing is retried.

    Args:
        command: Formatter executable followed by its own arguments.
        files: Target paths, relative to ``cwd``.
        cwd: Directory to run the formatter in.

    Raises:
        FormatterError: If the command cannot be started, exits non-zero,
            or is terminated by a signal.
    """
    argv = list(command) + list(files)
    try:
        result = subprocess.run(argv, cwd=cwd, check=False)
    except OSError as e:
        raise FormatterError(f"command `{format_command_line(argv)}` failed: {e}") from e
    except KeyboardInterrupt:
        raise FormatterError(f"{command[0]} was interrupted")

    if result.returncode < 0:
        raise FormatterError(
            f"{command[0]} was terminated by a signal",
            signal=-result.returncode,
        )
    if result.returncode != 0:
        raise FormatterError(
            f"{command[0]} exited with status {result.returncode}",
            returncode=result.returncode,
        )
