"""Tree reconciler for formatstaged.

Contains:
- build_formatted_tree: Build the post-format tree from the formatted files
"""

from pathlib import Path

from formatstaged.engine.models import TargetFile
from formatstaged.git.index import IndexEntry
from formatstaged.git.objects import write_blob
from formatstaged.git.tree import build_tree


def build_formatted_tree(repo_root: Path, index_tree: str, targets: list[TargetFile]) -> str:
    """Store each formatted file as a blob and build the post-format tree.

    The result equals ``index_tree`` except that every target points at the
    blob of its formatted content, with its staged mode kept. Sets
    ``formatted_oid`` on each target.

    Args:
        repo_root: The root directory of the git repository.
        index_tree: Id of the pre-format index tree.
        targets: Targets whose working copies hold the formatter output.

    Returns:
        The id of the post-format tree.
    """
    overlays: list[IndexEntry] = []
    for target in targets:
        target.formatted_oid = write_blob(repo_root, target.path.read_bytes())
        overlays.append(
            IndexEntry(path=target.repo_path, mode=target.mode, oid=target.formatted_oid)
        )

    return build_tree(repo_root, index_tree, overlays)
