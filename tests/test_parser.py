"""Tests for formatstaged.engine.parser module."""

import pytest

from formatstaged.engine import parse_delta


@pytest.fixture
def zero_context_patch():
    """Patch as produced by diff-tree -U0 for two reformatted files."""
    return b"""diff --git a/src/app.py b/src/app.py
index 1111111111111111111111111111111111111111..2222222222222222222222222222222222222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1 +1 @@
-x=1
+x = 1
@@ -4,2 +4,3 @@ def main():
-    y=2
-    z=3
+    y = 2
+    z = 3
+
diff --git a/lib/util.py b/lib/util.py
index 3333333333333333333333333333333333333333..4444444444444444444444444444444444444444 100644
--- a/lib/util.py
+++ b/lib/util.py
@@ -10,0 +11 @@ import os
+import sys
"""


class TestParseDelta:
    """Tests for parse_delta function."""

    def test_parses_files_in_order(self, zero_context_patch):
        """Test that one delta per file is returned in patch order."""
        deltas = parse_delta(zero_context_patch)

        assert [d.file_path for d in deltas] == ["src/app.py", "lib/util.py"]

    def test_parses_hunks(self, zero_context_patch):
        """Test hunk header parsing, including omitted lengths."""
        deltas = parse_delta(zero_context_patch)
        first, second = deltas[0].hunks

        assert (first.old_start, first.old_len, first.new_start, first.new_len) == (1, 1, 1, 1)
        assert (second.old_start, second.old_len, second.new_start, second.new_len) == (4, 2, 4, 3)
        assert second.removed == 2
        assert second.added == 3

    def test_pure_insertion(self, zero_context_patch):
        """Test a zero-length old range."""
        hunk = parse_delta(zero_context_patch)[1].hunks[0]

        assert hunk.old_start == 10
        assert hunk.old_len == 0
        assert hunk.added == 1
        assert hunk.removed == 0

    def test_header_lines(self, zero_context_patch):
        """Test that header lines stop at the first hunk."""
        header = parse_delta(zero_context_patch)[0].header_lines

        assert header[0] == "diff --git a/src/app.py b/src/app.py"
        assert header[-1] == "+++ b/src/app.py"

    def test_empty_patch(self):
        """Test that an empty patch has no deltas."""
        assert parse_delta(b"") == []

    def test_no_newline_marker(self):
        """Test that the no-newline marker stays with its hunk."""
        patch = (
            b"diff --git a/a.txt b/a.txt\n"
            b"--- a/a.txt\n"
            b"+++ b/a.txt\n"
            b"@@ -1 +1 @@\n"
            b"-x\n"
            b"\\ No newline at end of file\n"
            b"+x\n"
        )

        hunk = parse_delta(patch)[0].hunks[0]

        assert hunk.lines[2] == "\\ No newline at end of file"
        assert hunk.removed == 1
        assert hunk.added == 1

    def test_binary_file(self):
        """Test that binary changes are flagged and have no hunks."""
        patch = (
            b"diff --git a/logo.png b/logo.png\n"
            b"index 5555555555555555555555555555555555555555..6666666666666666666666666666666666666666 100644\n"
            b"GIT binary patch\n"
            b"literal 4\n"
            b"LcmZ?wbhEp0\n"
        )

        delta = parse_delta(patch)[0]

        assert delta.is_binary
        assert delta.hunks == []

    def test_non_utf8_content(self):
        """Test that undecodable content does not break parsing."""
        patch = (
            b"diff --git a/latin1.txt b/latin1.txt\n"
            b"--- a/latin1.txt\n"
            b"+++ b/latin1.txt\n"
            b"@@ -1 +1 @@\n"
            b"-caf\xe9\n"
            b"+caf\xe9 \n"
        )

        deltas = parse_delta(patch)

        assert len(deltas[0].hunks) == 1

    def test_quoted_path(self):
        """Test that quoted paths are unwrapped."""
        patch = (
            b'diff --git "a/with space.txt" "b/with space.txt"\n'
            b'--- "a/with space.txt"\n'
            b'+++ "b/with space.txt"\n'
            b"@@ -1 +1 @@\n"
            b"-a\n"
            b"+b\n"
        )

        assert parse_delta(patch)[0].file_path == "with space.txt"

    def test_octal_escaped_path(self):
        """Test that git's octal escapes are decoded into the file name."""
        patch = (
            b'diff --git "a/src/caf\\303\\251.py" "b/src/caf\\303\\251.py"\n'
            b'--- "a/src/caf\\303\\251.py"\n'
            b'+++ "b/src/caf\\303\\251.py"\n'
            b"@@ -1 +1 @@\n"
            b"-x=1\n"
            b"+x = 1\n"
        )

        assert parse_delta(patch)[0].file_path == "src/caf\u00e9.py"

    def test_escaped_quote_and_tab_in_path(self):
        """Test that C escapes inside a quoted path are decoded."""
        patch = (
            b'diff --git "a/say \\"hi\\"\\t.txt" "b/say \\"hi\\"\\t.txt"\n'
            b"@@ -1 +1 @@\n"
            b"-a\n"
            b"+b\n"
        )

        assert parse_delta(patch)[0].file_path == 'say "hi"\t.txt'
