"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotAGitRepositoryError: Raised when no repository encloses the working directory
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotAGitRepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass
