"""Git object store utilities.

Contains:
- read_blob: Read the bytes of a blob by id
- write_blob: Store bytes as a blob and return its id
"""

from pathlib import Path

from formatstaged.git.runner import _run_git, _run_git_command


def read_blob(repo_root: Path, oid: str) -> bytes:
    """Read the content of a blob.

    Args:
        repo_root: The root directory of the git repository.
        oid: The blob id.

    Returns:
        The exact bytes stored in the blob.

    Raises:
        GitError: If the object is missing or not a blob.
    """
    return _run_git(["cat-file", "blob", oid], cwd=repo_root)


def write_blob(repo_root: Path, content: bytes) -> str:
    """Write ``content`` to the object store as a blob.

    Content is stored verbatim: no clean filters or line-ending conversion
    are applied, so the id depends on the bytes alone.

    Args:
        repo_root: The root directory of the git repository.
        content: The blob content.

    Returns:
        The new blob id.
    """
    return _run_git_command(
        ["hash-object", "-w", "--stdin", "--no-filters"],
        cwd=repo_root,
        input=content,
    )
