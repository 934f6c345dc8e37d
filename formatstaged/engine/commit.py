"""Commit and cleanup for formatstaged.

Contains:
- commit_index: Point the changed targets' index entries at formatted blobs
- remove_backups: Delete every backup artifact of the run
"""

from pathlib import Path

from formatstaged.engine.models import TargetFile
from formatstaged.git.index import IndexEntry, update_index_entries


def commit_index(repo_root: Path, targets: list[TargetFile]) -> None:
    """Update the index for every target that formatting changed.

    All entries are written in one index update, so either all of them
    change or none does. Other index entries are left untouched.
    """
    update_index_entries(
        repo_root,
        [
            IndexEntry(path=t.repo_path, mode=t.mode, oid=t.formatted_oid)
            for t in targets
            if t.changed
        ],
    )


def remove_backups(targets: list[TargetFile]) -> list[str]:
    """Delete the ``.orig`` and ``.staged.orig`` files of every target.

    Failures do not stop the remaining removals.

    Returns:
        Warning messages for backups that could not be removed.
    """
    warnings: list[str] = []
    for target in targets:
        for backup in target.backups():
            try:
                backup.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                warnings.append(f"Failed to remove {backup}: {e}")
    return warnings
