"""Diff parser for the formatting delta.

Contains functions for parsing the patch produced by ``diff_trees``:
- parse_delta: Parse a patch into FileDelta objects
- _unquote_path: Undo git's C-style quoting of a path
- _parse_file_block: Parse a single file block from the patch
- _parse_hunks: Parse hunks from the hunk portion of a file block
- _create_hunk: Create a Hunk from parsed hunk data
"""

import re
from typing import Optional

from formatstaged.engine.models import FileDelta, Hunk


_HUNK_HEADER_RE = re.compile(r"@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_FILE_HEADER_RE = re.compile(r'diff --git (?:"a/.*?"|a/.*?) ("b/.*"|b/.*)$')
_QUOTED_CHAR_RE = re.compile(r'\\([0-7]{3}|.)')
_C_ESCAPES = {"a": "\a", "b": "\b", "t": "\t", "n": "\n", "v": "\v", "f": "\f", "r": "\r"}


def parse_delta(patch: bytes) -> list[FileDelta]:
    """Parse a git patch into per-file deltas.

    Args:
        patch: Raw patch bytes (content need not be valid UTF-8).

    Returns:
        One FileDelta per file in the patch, in patch order.
    """
    text = patch.decode("utf-8", errors="replace")
    deltas: list[FileDelta] = []

    if not text.strip():
        return deltas

    # Each file starts with 'diff --git a/... b/...'
    file_blocks = re.split(r"(?=^diff --git )", text, flags=re.MULTILINE)

    for block in file_blocks:
        if not block.startswith("diff --git"):
            continue

        delta = _parse_file_block(block.split("\n"))
        if delta:
            deltas.append(delta)

    return deltas


def _unquote_path(path: str) -> str:
    """Undo git's C-style quoting of a path, e.g. ``"caf\\303\\251"``.

    Octal escapes are raw bytes of the UTF-8 file name. Unquoted paths are
    returned as is.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    raw = bytearray()
    pos = 0
    body = path[1:-1]
    for match in _QUOTED_CHAR_RE.finditer(body):
        raw += body[pos:match.start()].encode("utf-8")
        escape = match.group(1)
        if len(escape) == 3:
            raw.append(int(escape, 8))
        else:
            raw += _C_ESCAPES.get(escape, escape).encode("utf-8")
        pos = match.end()
    raw += body[pos:].encode("utf-8")
    return raw.decode("utf-8", errors="replace")


def _parse_file_block(lines: list[str]) -> Optional[FileDelta]:
    """Parse a single file block of the patch.

    Args:
        lines: Lines of the file block

    Returns:
        FileDelta object or None if the header is unrecognized
    """
    # Format: diff --git a/path b/path (quoted when the path is unusual)
    match = _FILE_HEADER_RE.match(lines[0])
    if not match:
        return None
    file_path = _unquote_path(match.group(1))[len("b/"):]

    header_lines: list[str] = []
    for i, line in enumerate(lines):
        if line.startswith("@@"):
            return FileDelta(
                file_path=file_path,
                header_lines=header_lines,
                hunks=_parse_hunks(lines[i:]),
            )
        header_lines.append(line)

        if line.startswith("GIT binary patch") or line.startswith("Binary files"):
            return FileDelta(file_path=file_path, header_lines=header_lines, is_binary=True)

    # No hunks (mode-only change)
    return FileDelta(file_path=file_path, header_lines=header_lines)


def _parse_hunks(lines: list[str]) -> list[Hunk]:
    """Parse hunks from the hunk portion of a file block.

    Args:
        lines: Lines starting from the first @@

    Returns:
        List of Hunk objects
    """
    hunks: list[Hunk] = []
    current: list[str] = []

    for line in lines:
        if line.startswith("@@"):
            if current:
                hunk = _create_hunk(current)
                if hunk:
                    hunks.append(hunk)
            current = [line]
        elif current and line[:1] in ("+", "-", " ", "\\"):
            current.append(line)

    if current:
        hunk = _create_hunk(current)
        if hunk:
            hunks.append(hunk)

    return hunks


def _create_hunk(lines: list[str]) -> Optional[Hunk]:
    """Create a Hunk from its header and body lines.

    Args:
        lines: All lines of the hunk including the header

    Returns:
        Hunk object or None if the header is malformed
    """
    # Format: @@ -old_start,old_len +new_start,new_len @@ optional context
    match = _HUNK_HEADER_RE.match(lines[0])
    if not match:
        return None

    return Hunk(
        header=lines[0],
        old_start=int(match.group(1)),
        old_len=int(match.group(2)) if match.group(2) is not None else 1,
        new_start=int(match.group(3)),
        new_len=int(match.group(4)) if match.group(4) is not None else 1,
        lines=lines,
    )
