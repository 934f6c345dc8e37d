"""Git command runner and repository utilities.

Contains:
- _run_git: Run a git command and return its raw stdout bytes
- _run_git_command: Run a git command and return its decoded, stripped output
- get_repo_root: Get the root directory of the enclosing git repository
"""

import os
import subprocess
from pathlib import Path
from typing import Optional

from formatstaged.git.exceptions import GitError, NotAGitRepositoryError


def _run_git(
    args: list[str],
    cwd: Optional[Path] = None,
    input: Optional[bytes] = None,
    env: Optional[dict[str, str]] = None,
) -> bytes:
    """Run a git command and return its raw output.

    Pathspecs are always taken literally, so file names containing glob
    characters never match more than themselves.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the current directory).
        input: Bytes to feed to git's stdin.
        env: Extra environment variables for this invocation.

    Returns:
        The stdout of the git command, unmodified.

    Raises:
        GitError: If the command fails.
    """
    run_env = None
    if env:
        run_env = os.environ.copy()
        run_env.update(env)

    try:
        result = subprocess.run(
            ["git", "--literal-pathspecs"] + args,
            cwd=cwd,
            input=input,
            capture_output=True,
            env=run_env,
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode(errors="replace").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _run_git_command(
    args: list[str],
    cwd: Optional[Path] = None,
    input: Optional[bytes] = None,
    env: Optional[dict[str, str]] = None,
) -> str:
    """Run a git command and return its output as stripped text.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in.
        input: Bytes to feed to git's stdin.
        env: Extra environment variables for this invocation.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    return _run_git(args, cwd=cwd, input=input, env=env).decode(errors="replace").strip()


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Get the root directory of the git repository enclosing ``cwd``.

    Returns:
        Resolved path to the repository root.

    Raises:
        NotAGitRepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
    except GitError:
        raise NotAGitRepositoryError("Not in a git repository.")
    if not root:
        # Inside the .git directory or a bare repository
        raise NotAGitRepositoryError("Not inside a git working tree.")
    return Path(root).resolve()
