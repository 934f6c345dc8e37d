"""Git index (staging area) utilities.

Contains:
- IndexEntry: A single staged entry (mode, blob id, stage, path)
- REGULAR_FILE_MODES: Index modes that denote regular files
- get_index_entries: Look up the index entries for a set of paths
- write_index_tree: Materialize the index as a tree object
- update_index_entries: Point index entries at new blobs in one atomic write
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from formatstaged.git.runner import _run_git, _run_git_command


# 100644 is a plain file, 100755 an executable one. Symlinks (120000) and
# submodules (160000) are not formattable content.
REGULAR_FILE_MODES = ("100644", "100755")


@dataclass(frozen=True)
class IndexEntry:
    """A single entry of the git index."""

    path: str  # Repository-relative, forward slashes
    mode: str  # Octal string, e.g. "100644"
    oid: str
    stage: int = 0  # Non-zero while a merge conflict is unresolved

    @property
    def is_regular_file(self) -> bool:
        return self.mode in REGULAR_FILE_MODES


def _parse_ls_files_stage(output: bytes) -> list[IndexEntry]:
    """Parse NUL-terminated ``git ls-files --stage -z`` output."""
    entries: list[IndexEntry] = []
    for record in output.split(b"\0"):
        if not record:
            continue
        meta, _, path = record.partition(b"\t")
        mode, oid, stage = meta.decode().split(" ")
        entries.append(
            IndexEntry(
                path=path.decode("utf-8", errors="surrogateescape"),
                mode=mode,
                oid=oid,
                stage=int(stage),
            )
        )
    return entries


def get_index_entries(repo_root: Path, paths: Iterable[str]) -> dict[str, list[IndexEntry]]:
    """Look up the index entries recorded for each of ``paths``.

    Only exact path matches are returned; a directory pathspec that matches
    files below it does not produce an entry for the directory itself.

    Args:
        repo_root: The root directory of the git repository.
        paths: Repository-relative paths.

    Returns:
        Mapping of path to its entries (one per stage; empty if untracked).
    """
    wanted = list(dict.fromkeys(paths))
    found: dict[str, list[IndexEntry]] = {path: [] for path in wanted}
    if not wanted:
        return found

    output = _run_git(["ls-files", "--stage", "-z", "--"] + wanted, cwd=repo_root)
    for entry in _parse_ls_files_stage(output):
        if entry.path in found:
            found[entry.path].append(entry)
    return found


def get_staged_entry(entries: list[IndexEntry]) -> Optional[IndexEntry]:
    """Return the stage-0 entry, or None if the path is not cleanly staged."""
    if len(entries) != 1 or entries[0].stage != 0:
        return None
    return entries[0]


def write_index_tree(repo_root: Path, index_file: Optional[Path] = None) -> str:
    """Write the tree equivalent to the index and return its id.

    Fails while the index has unresolved conflicts.

    Args:
        repo_root: The root directory of the git repository.
        index_file: Alternative index file to use instead of the repository's.

    Returns:
        The tree object id.
    """
    env = {"GIT_INDEX_FILE": str(index_file)} if index_file else None
    return _run_git_command(["write-tree"], cwd=repo_root, env=env)


def update_index_entries(
    repo_root: Path,
    entries: Iterable[IndexEntry],
    index_file: Optional[Path] = None,
) -> None:
    """Set the given entries in the index with a single index write.

    git takes the index lock, rewrites the whole index and renames it into
    place, so either every entry is updated or none is.

    Args:
        repo_root: The root directory of the git repository.
        entries: Entries to add or replace (stage 0).
        index_file: Alternative index file to use instead of the repository's.
    """
    records = b"".join(
        f"{entry.mode} {entry.oid}\t".encode()
        + entry.path.encode("utf-8", errors="surrogateescape")
        + b"\0"
        for entry in entries
    )
    if not records:
        return

    env = {"GIT_INDEX_FILE": str(index_file)} if index_file else None
    _run_git(["update-index", "-z", "--index-info"], cwd=repo_root, input=records, env=env)
