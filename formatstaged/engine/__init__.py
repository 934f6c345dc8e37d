"""Staged-content reconciliation engine for formatstaged.

This package provides the formatting pipeline with:
- models: FileState, TargetFile, Hunk, FileDelta, FormatResult
- errors: FormatStagedError, StagingError, ConfigError, BackupError,
          FormatterError, ReconcileError
- undo: UndoStack
- backup: resolve_targets, backup_originals, restore_original
- extract: extract_staged
- formatter: run_formatter, format_command_line
- reconcile: build_formatted_tree
- parser: parse_delta
- backport: compute_delta, backport_delta
- commit: commit_index, remove_backups
- pipeline: format_staged
"""

# Models
from formatstaged.engine.models import (
    BACKUP_SUFFIX,
    STAGED_BACKUP_SUFFIX,
    FileDelta,
    FileState,
    FormatResult,
    Hunk,
    TargetFile,
)

# Errors
from formatstaged.engine.errors import (
    BackupError,
    ConfigError,
    FormatStagedError,
    FormatterError,
    ReconcileError,
    StagingError,
)

# Undo stack
from formatstaged.engine.undo import (
    UndoStack,
)

# Stages
from formatstaged.engine.backup import (
    backup_originals,
    resolve_targets,
    restore_original,
)
from formatstaged.engine.extract import (
    extract_staged,
)
from formatstaged.engine.formatter import (
    format_command_line,
    run_formatter,
)
from formatstaged.engine.reconcile import (
    build_formatted_tree,
)
from formatstaged.engine.parser import (
    parse_delta,
)
from formatstaged.engine.backport import (
    backport_delta,
    compute_delta,
)
from formatstaged.engine.commit import (
    commit_index,
    remove_backups,
)

# Pipeline
from formatstaged.engine.pipeline import (
    format_staged,
)


__all__ = [
    # Models
    "BACKUP_SUFFIX",
    "STAGED_BACKUP_SUFFIX",
    "FileDelta",
    "FileState",
    "FormatResult",
    "Hunk",
    "TargetFile",
    # Errors
    "BackupError",
    "ConfigError",
    "FormatStagedError",
    "FormatterError",
    "ReconcileError",
    "StagingError",
    # Undo
    "UndoStack",
    # Stages
    "backup_originals",
    "resolve_targets",
    "restore_original",
    "extract_staged",
    "format_command_line",
    "run_formatter",
    "build_formatted_tree",
    "parse_delta",
    "backport_delta",
    "compute_delta",
    "commit_index",
    "remove_backups",
    # Pipeline
    "format_staged",
]
