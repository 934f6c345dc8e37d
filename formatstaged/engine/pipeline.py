"""Staged-content reconciliation pipeline.

Contains:
- format_staged: Format the staged content of files and backport the result
"""

from pathlib import Path
from typing import Optional

from formatstaged.engine.backport import backport_delta, compute_delta
from formatstaged.engine.backup import backup_originals, resolve_targets
from formatstaged.engine.commit import commit_index, remove_backups
from formatstaged.engine.errors import FormatStagedError, ReconcileError
from formatstaged.engine.extract import extract_staged
from formatstaged.engine.formatter import format_command_line, run_formatter
from formatstaged.engine.models import FormatResult, TargetFile
from formatstaged.engine.reconcile import build_formatted_tree
from formatstaged.engine.undo import UndoStack
from formatstaged.git.exceptions import GitError
from formatstaged.git.index import write_index_tree
from formatstaged.git.runner import get_repo_root


def _prepare_and_format(
    repo_root: Path,
    cwd: Path,
    targets: list[TargetFile],
    command: list[str],
    trace: list[str],
) -> None:
    """Back up, extract and format; undo everything if any step fails.

    Raises:
        FormatStagedError: With ``warnings`` listing undo steps that failed.
    """
    undo = UndoStack()
    try:
        backup_originals(targets, undo)
        extract_staged(repo_root, targets, undo)
        for target in targets:
            trace.append(f"  {target.repo_path}: {target.state.value}")
        trace.append(f"Running: {format_command_line(command + [t.arg for t in targets])}")
        run_formatter(command, [t.arg for t in targets], cwd)
    except FormatStagedError as e:
        e.warnings.extend(undo.unwind())
        raise
    # The formatter output is kept; the backups are the recovery path now
    undo.clear()


def format_staged(
    files: list[str],
    command: list[str],
    cwd: Optional[Path] = None,
) -> FormatResult:
    """Format the staged content of ``files`` with ``command``.

    The index receives the formatted staged content. Working copies receive
    only the lines the formatter changed, so unstaged edits survive.

    Args:
        files: Target paths, relative to ``cwd``.
        command: Formatter executable and its arguments; the target paths
            are appended.
        cwd: Invocation directory (defaults to the current directory).

    Returns:
        FormatResult describing the targets and the formatting delta, with
        one trace line per step.

    Raises:
        NotAGitRepositoryError: If ``cwd`` is not inside a git work tree.
        StagingError: If any target cannot be formatted; nothing is touched.
        FormatterError: If the formatter fails; all files are restored.
        ReconcileError: If a later step fails; backups are left on disk.
    """
    if not command:
        raise FormatStagedError("No formatter command given.")

    cwd = Path(cwd or Path.cwd()).resolve()
    repo_root = get_repo_root(cwd)
    targets = resolve_targets(repo_root, cwd, files)
    if not targets:
        return FormatResult()

    trace: list[str] = []
    index_tree = write_index_tree(repo_root)
    trace.append(f"Repository: {repo_root}")
    trace.append(f"Index tree: {index_tree}")

    try:
        _prepare_and_format(repo_root, cwd, targets, command, trace)
    except FormatStagedError as e:
        e.trace = trace
        raise

    try:
        formatted_tree = build_formatted_tree(repo_root, index_tree, targets)
        deltas = compute_delta(repo_root, index_tree, formatted_tree)
        trace.append(f"Formatted tree: {formatted_tree}")
        for delta in deltas:
            trace.append(f"  {delta.file_path}: {len(delta.hunks)} hunk(s)")
        backport_delta(repo_root, index_tree, formatted_tree, targets)
        commit_index(repo_root, targets)
    except (GitError, OSError) as e:
        error = ReconcileError(
            str(e),
            backups=[backup for t in targets for backup in t.backups()],
        )
        error.trace = trace
        raise error from e

    return FormatResult(
        targets=targets,
        deltas=deltas,
        warnings=remove_backups(targets),
        trace=trace,
    )
