"""Tests for formatstaged.engine.undo module."""

from formatstaged.engine import UndoStack


class TestUndoStack:
    """Tests for UndoStack."""

    def test_unwinds_in_reverse_order(self):
        """Test that actions run most recent first."""
        calls = []
        undo = UndoStack()
        undo.push("first", calls.append, 1)
        undo.push("second", calls.append, 2)
        undo.push("third", calls.append, 3)

        failures = undo.unwind()

        assert calls == [3, 2, 1]
        assert failures == []
        assert len(undo) == 0

    def test_failed_action_does_not_stop_others(self):
        """Test that a failing action is reported and the rest still run."""
        calls = []

        def broken():
            raise PermissionError("read-only")

        undo = UndoStack()
        undo.push("restore a.py", calls.append, "a")
        undo.push("remove a.py.staged.orig", broken)

        failures = undo.unwind()

        assert calls == ["a"]
        assert len(failures) == 1
        assert "remove a.py.staged.orig" in failures[0]
        assert "read-only" in failures[0]

    def test_clear_drops_actions(self):
        """Test that cleared actions are never run."""
        calls = []
        undo = UndoStack()
        undo.push("first", calls.append, 1)

        undo.clear()

        assert undo.unwind() == []
        assert calls == []

    def test_unwind_twice(self):
        """Test that unwinding an empty stack does nothing."""
        calls = []
        undo = UndoStack()
        undo.push("first", calls.append, 1)

        undo.unwind()
        undo.unwind()

        assert calls == [1]
