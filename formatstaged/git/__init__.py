"""Git plumbing wrappers for formatstaged.

This package provides the version-control operations the engine needs:
- exceptions: GitError, NotAGitRepositoryError
- runner: _run_git, _run_git_command, get_repo_root
- index: IndexEntry, get_index_entries, get_staged_entry, write_index_tree,
         update_index_entries
- objects: read_blob, write_blob
- tree: build_tree
- diff: diff_trees, apply_patch
"""

# Exceptions
from formatstaged.git.exceptions import (
    GitError,
    NotAGitRepositoryError,
)

# Runner utilities
from formatstaged.git.runner import (
    _run_git,
    _run_git_command,
    get_repo_root,
)

# Index utilities
from formatstaged.git.index import (
    REGULAR_FILE_MODES,
    IndexEntry,
    get_index_entries,
    get_staged_entry,
    update_index_entries,
    write_index_tree,
)

# Object store utilities
from formatstaged.git.objects import (
    read_blob,
    write_blob,
)

# Tree construction
from formatstaged.git.tree import (
    build_tree,
)

# Diff and patch
from formatstaged.git.diff import (
    apply_patch,
    diff_trees,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotAGitRepositoryError",
    # Runner
    "_run_git",
    "_run_git_command",
    "get_repo_root",
    # Index
    "REGULAR_FILE_MODES",
    "IndexEntry",
    "get_index_entries",
    "get_staged_entry",
    "update_index_entries",
    "write_index_tree",
    # Objects
    "read_blob",
    "write_blob",
    # Tree
    "build_tree",
    # Diff
    "apply_patch",
    "diff_trees",
]
