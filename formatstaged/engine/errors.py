"""Exception classes for the formatstaged engine.

Every error carries the process exit code the CLI should use:
- FormatStagedError: Base class (exit 1)
- StagingError: Targets rejected before anything was touched
- ConfigError: Unreadable or invalid configuration
- BackupError: Filesystem failure while preparing the working tree
- FormatterError: The formatter failed, could not start, or was signaled
- ReconcileError: Failure after formatting; backups are left on disk
"""

from pathlib import Path
from typing import Optional


class FormatStagedError(Exception):
    """Base exception for formatstaged errors.

    ``trace`` holds the debug lines recorded before the failure and
    ``warnings`` any undo steps that could not be completed; the CLI prints
    both.
    """

    exit_code = 1

    def __init__(self, *args):
        super().__init__(*args)
        self.trace: list[str] = []
        self.warnings: list[str] = []


class StagingError(FormatStagedError):
    """Raised when one or more targets cannot be formatted."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("\n".join(problems))


class ConfigError(FormatStagedError):
    """Raised when the configuration cannot be loaded."""

    pass


class BackupError(FormatStagedError):
    """Raised when backing up or extracting a target fails."""

    pass


class FormatterError(FormatStagedError):
    """Raised when the formatter command does not succeed."""

    def __init__(self, message: str, returncode: Optional[int] = None, signal: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode
        self.signal = signal
        # Mirror the formatter's own status when it exited normally
        if returncode is not None and returncode > 0:
            self.exit_code = returncode


class ReconcileError(FormatStagedError):
    """Raised when a failure happens after the formatter succeeded.

    The index has not been modified. Backups stay on disk so the user can
    inspect the formatter output and recover by hand.
    """

    def __init__(self, message: str, backups: Optional[list[Path]] = None):
        super().__init__(message)
        self.backups = backups or []
