"""Data models for the formatstaged engine.

Contains:
- FileState: Whether a target's staged content matches its working copy
- TargetFile: One file requested for formatting, with its per-run state
- Hunk: A single zero-context hunk of the formatting delta
- FileDelta: The formatting delta for one file
- FormatResult: Outcome of a successful run
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


BACKUP_SUFFIX = ".orig"
STAGED_BACKUP_SUFFIX = ".staged.orig"


class FileState(str, Enum):
    """Relationship between a target's staged and working-tree content."""

    UNKNOWN = "unknown"  # Not yet extracted
    CLEAN = "clean"  # Staged content equals working content
    DIRTY = "dirty"  # Working copy carries unstaged edits


@dataclass
class TargetFile:
    """A file requested for formatting."""

    arg: str  # As given on the command line, relative to the invocation dir
    path: Path  # Absolute working-tree path
    repo_path: str  # Index path, relative to the repository root
    mode: str = "100644"
    staged_oid: str = ""
    state: FileState = FileState.UNKNOWN
    formatted_oid: Optional[str] = None

    @property
    def backup_path(self) -> Path:
        """Pre-run working-tree copy."""
        return self.path.with_name(self.path.name + BACKUP_SUFFIX)

    @property
    def staged_backup_path(self) -> Path:
        """Pristine staged copy."""
        return self.path.with_name(self.path.name + STAGED_BACKUP_SUFFIX)

    @property
    def changed(self) -> bool:
        """True once formatting produced a blob different from the staged one."""
        return self.formatted_oid is not None and self.formatted_oid != self.staged_oid

    def backups(self) -> list[Path]:
        return [self.backup_path, self.staged_backup_path]


@dataclass
class Hunk:
    """A single zero-context hunk."""

    header: str  # The @@ ... @@ line
    old_start: int
    old_len: int
    new_start: int
    new_len: int
    lines: list[str]  # Header plus +/- lines

    @property
    def added(self) -> int:
        return sum(1 for ln in self.lines[1:] if ln.startswith("+"))

    @property
    def removed(self) -> int:
        return sum(1 for ln in self.lines[1:] if ln.startswith("-"))


@dataclass
class FileDelta:
    """Formatting delta for one file."""

    file_path: str
    header_lines: list[str]  # From 'diff --git' up to first @@
    hunks: list[Hunk] = field(default_factory=list)
    is_binary: bool = False


@dataclass
class FormatResult:
    """Outcome of a successful run."""

    targets: list[TargetFile] = field(default_factory=list)
    deltas: list[FileDelta] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    trace: list[str] = field(default_factory=list)  # Debug lines, one per step

    @property
    def changed(self) -> list[TargetFile]:
        return [t for t in self.targets if t.changed]

    @property
    def hunk_count(self) -> int:
        return sum(len(d.hunks) for d in self.deltas)
