"""Git diff and patch utilities.

Contains:
- diff_trees: Zero-context patch between two trees
- apply_patch: Apply a patch to the working tree
"""

from pathlib import Path
from typing import Iterable, Optional

from formatstaged.git.runner import _run_git


def diff_trees(
    repo_root: Path,
    old_tree: str,
    new_tree: str,
    paths: Optional[Iterable[str]] = None,
) -> bytes:
    """Compute a patch from ``old_tree`` to ``new_tree``.

    Hunks carry no context lines, so each hunk covers only the lines that
    actually changed. Binary changes are emitted as binary patches.

    Args:
        repo_root: The root directory of the git repository.
        old_tree: Id of the tree before the change.
        new_tree: Id of the tree after the change.
        paths: Restrict the patch to these repository-relative paths.

    Returns:
        The raw patch (empty when the trees are identical).
    """
    args = [
        "diff-tree",
        "-r",
        "-p",
        "--unified=0",
        "--binary",
        "--full-index",
        "--no-color",
        "--no-ext-diff",
        "--no-renames",
        "--src-prefix=a/",
        "--dst-prefix=b/",
        old_tree,
        new_tree,
    ]
    if paths is not None:
        paths = list(paths)
        if not paths:
            return b""
        args += ["--"] + paths
    return _run_git(args, cwd=repo_root)


def apply_patch(repo_root: Path, patch: bytes) -> None:
    """Apply ``patch`` to the working tree.

    Zero-context hunks are accepted. The patch is applied atomically: if any
    hunk does not apply, no file is touched.

    Args:
        repo_root: The root directory of the git repository.
        patch: Patch as produced by ``diff_trees``.

    Raises:
        GitError: If the patch does not apply.
    """
    if not patch:
        return
    _run_git(
        ["apply", "--unidiff-zero", "--whitespace=nowarn", "-"],
        cwd=repo_root,
        input=patch,
    )
