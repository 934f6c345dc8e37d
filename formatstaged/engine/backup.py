"""Backup manager for formatstaged.

Contains:
- resolve_targets: Validate the requested files and build TargetFile objects
- backup_originals: Rename each target to its ``.orig`` backup
- restore_original: Copy a target's ``.orig`` backup over its working copy
"""

import os
import shutil
from pathlib import Path

from formatstaged.engine.errors import BackupError, StagingError
from formatstaged.engine.models import TargetFile
from formatstaged.engine.undo import UndoStack
from formatstaged.git.index import get_index_entries, get_staged_entry


def _to_target(repo_root: Path, cwd: Path, arg: str) -> TargetFile:
    """Map a command-line path to a TargetFile.

    Raises:
        ValueError: If the path is not inside the repository.
    """
    path = Path(os.path.normpath(cwd / arg))
    repo_path = path.relative_to(repo_root).as_posix()
    return TargetFile(arg=arg, path=path, repo_path=repo_path)


def resolve_targets(repo_root: Path, cwd: Path, files: list[str]) -> list[TargetFile]:
    """Validate the requested files before anything is modified.

    Every problem is collected so the user sees all offending paths at once.
    Duplicate requests for the same file are collapsed.

    Args:
        repo_root: The root directory of the git repository.
        cwd: The directory the paths are relative to (absolute).
        files: Paths as given on the command line.

    Returns:
        One TargetFile per distinct file, in request order.

    Raises:
        StagingError: If any file cannot be formatted.
    """
    problems: list[str] = []
    targets: list[TargetFile] = []
    seen: set[str] = set()

    for arg in files:
        try:
            target = _to_target(repo_root, cwd, arg)
        except ValueError:
            problems.append(f"{arg} is outside the repository")
            continue
        if target.repo_path in seen:
            continue
        seen.add(target.repo_path)
        targets.append(target)

    entries = get_index_entries(repo_root, [t.repo_path for t in targets])
    target_paths = {t.path: t for t in targets}
    backup_owners: dict[Path, TargetFile] = {}
    for target in targets:
        entry = get_staged_entry(entries[target.repo_path])
        if entry is None:
            problems.append(f"{target.arg} is not a staged file")
            continue
        if not entry.is_regular_file:
            problems.append(f"{target.arg} is not a regular file (mode {entry.mode})")
            continue
        target.mode = entry.mode
        target.staged_oid = entry.oid

        if not target.path.is_file():
            problems.append(f"{target.arg} does not exist in the working tree")
            continue
        for backup in target.backups():
            other = target_paths.get(backup)
            owner = backup_owners.setdefault(backup, target)
            if other is not None:
                # e.g. both "x" and "x.orig" were requested
                problems.append(f"{other.arg} is also the backup name of {target.arg}")
            elif owner is not target:
                # e.g. "x" and "x.staged" both need "x.staged.orig"
                problems.append(
                    f"{owner.arg} and {target.arg} share the backup file {backup.name}"
                )
            elif os.path.lexists(backup):
                problems.append(f"{target.arg}: backup file {backup.name} already exists")

    if problems:
        raise StagingError(problems)
    return targets


def backup_originals(targets: list[TargetFile], undo: UndoStack) -> None:
    """Rename each target file to ``<path>.orig``.

    Each successful rename is recorded on ``undo`` so a later failure can
    put the original file back.

    Raises:
        BackupError: If a rename fails. Earlier renames are not reversed here;
            the caller unwinds ``undo``.
    """
    for target in targets:
        try:
            os.rename(target.path, target.backup_path)
        except OSError as e:
            raise BackupError(
                f"Failed to rename {target.path} to {target.backup_path}: {e}"
            ) from e
        undo.push(f"restore {target.path}", os.replace, target.backup_path, target.path)


def restore_original(target: TargetFile) -> None:
    """Replace the working copy with the pre-run content from ``.orig``.

    The backup itself is kept. Permission bits are copied along with the
    content.
    """
    shutil.copy(target.backup_path, target.path)
