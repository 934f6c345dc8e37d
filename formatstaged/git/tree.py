"""Git tree construction utilities.

Contains:
- build_tree: Build a tree from a base tree plus overlaid entries
"""

import tempfile
from pathlib import Path
from typing import Iterable

from formatstaged.git.index import IndexEntry, update_index_entries, write_index_tree
from formatstaged.git.runner import _run_git


def build_tree(repo_root: Path, base_tree: str, overlays: Iterable[IndexEntry]) -> str:
    """Build a tree equal to ``base_tree`` with ``overlays`` upserted.

    The work happens in a throwaway index file, so the repository's own
    index is never read or written. The same base tree and overlays always
    produce the same tree id.

    Args:
        repo_root: The root directory of the git repository.
        base_tree: Id of the tree to start from.
        overlays: Entries to add or replace, by path.

    Returns:
        The id of the resulting tree.
    """
    with tempfile.TemporaryDirectory(prefix="formatstaged-") as tmp:
        index_file = Path(tmp) / "index"
        env = {"GIT_INDEX_FILE": str(index_file)}
        _run_git(["read-tree", base_tree], cwd=repo_root, env=env)
        update_index_entries(repo_root, overlays, index_file=index_file)
        return write_index_tree(repo_root, index_file=index_file)
