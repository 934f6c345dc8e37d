"""Delta backport for formatstaged.

Contains:
- compute_delta: Parse the zero-context delta between two trees
- backport_delta: Bring the formatting changes into the working copies
"""

import shutil
from pathlib import Path

from formatstaged.engine.backup import restore_original
from formatstaged.engine.models import FileDelta, FileState, TargetFile
from formatstaged.engine.parser import parse_delta
from formatstaged.git.diff import apply_patch, diff_trees


def compute_delta(repo_root: Path, index_tree: str, formatted_tree: str) -> list[FileDelta]:
    """Compute the per-file hunks introduced by formatting.

    Returns:
        One FileDelta per changed file; empty when formatting changed nothing.
    """
    if index_tree == formatted_tree:
        return []
    return parse_delta(diff_trees(repo_root, index_tree, formatted_tree))


def backport_delta(
    repo_root: Path,
    index_tree: str,
    formatted_tree: str,
    targets: list[TargetFile],
) -> None:
    """Restore every working copy and re-apply only the formatting changes.

    - Unchanged by formatting: the original working copy comes back as is.
    - CLEAN: there were no unstaged edits, so the formatted file already is
      the wanted working copy; only the original permissions are restored.
    - DIRTY: the original working copy comes back and the file's zero-context
      hunks are applied on top, leaving unstaged edits in place.

    All DIRTY files are patched in one ``git apply``, which touches nothing
    unless every hunk applies.

    Raises:
        GitError: If a hunk conflicts with unstaged edits.
        OSError: If a working copy cannot be restored.
    """
    dirty: list[str] = []
    for target in targets:
        if target.changed and target.state is FileState.CLEAN:
            shutil.copymode(target.backup_path, target.path)
            continue

        restore_original(target)
        if target.changed:
            dirty.append(target.repo_path)

    if dirty:
        patch = diff_trees(repo_root, index_tree, formatted_tree, paths=dirty)
        apply_patch(repo_root, patch)
