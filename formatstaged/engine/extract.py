"""Staged-content extractor for formatstaged.

Contains:
- extract_staged: Write each target's staged blob to the working tree
"""

from pathlib import Path

from formatstaged.engine.errors import BackupError
from formatstaged.engine.models import FileState, TargetFile
from formatstaged.engine.undo import UndoStack
from formatstaged.git.exceptions import GitError
from formatstaged.git.objects import read_blob


def extract_staged(repo_root: Path, targets: list[TargetFile], undo: UndoStack) -> None:
    """Materialize the staged content of each target.

    The staged blob is written both to ``<path>.staged.orig`` and to
    ``<path>`` itself, so the formatter only ever sees staged bytes. The
    target's state records whether its working copy had unstaged edits.

    Requires ``backup_originals`` to have run for every target.

    Args:
        repo_root: The root directory of the git repository.
        targets: Validated and backed-up targets.
        undo: Undo stack to record created files on.

    Raises:
        BackupError: If a staged blob or a file cannot be read, or a file
            cannot be written.
    """
    for target in targets:
        try:
            content = read_blob(repo_root, target.staged_oid)
        except GitError as e:
            raise BackupError(f"Failed to read staged content of {target.arg}: {e}") from e

        try:
            target.staged_backup_path.write_bytes(content)
            undo.push(f"remove {target.staged_backup_path}", target.staged_backup_path.unlink)
            target.path.write_bytes(content)
            original = target.backup_path.read_bytes()
        except OSError as e:
            raise BackupError(f"Failed to extract staged content of {target.arg}: {e}") from e

        target.state = FileState.CLEAN if original == content else FileState.DIRTY
