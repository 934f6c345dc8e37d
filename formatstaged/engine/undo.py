"""Undo stack for reversible working-tree changes.

Contains:
- UndoStack: Ordered stack of undo actions, unwound last-in first-out
"""

from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class _UndoAction:
    description: str
    func: Callable[..., Any]
    args: tuple


class UndoStack:
    """Record how to reverse each filesystem change as it happens.

    Stages push an action right after each successful mutation. On failure
    the pipeline calls ``unwind`` to reverse everything in reverse order;
    once the changes must be kept, ``clear`` drops the recorded actions.
    """

    def __init__(self) -> None:
        self._actions: list[_UndoAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def push(self, description: str, func: Callable[..., Any], *args: Any) -> None:
        """Record ``func(*args)`` as the way to undo the last change."""
        self._actions.append(_UndoAction(description, func, args))

    def clear(self) -> None:
        """Forget all recorded actions without running them."""
        self._actions.clear()

    def unwind(self) -> list[str]:
        """Run every recorded action, most recent first.

        An action that fails does not stop the remaining ones from running.

        Returns:
            Messages describing actions that failed (empty on full success).
        """
        failures: list[str] = []
        while self._actions:
            action = self._actions.pop()
            try:
                action.func(*action.args)
            except OSError as e:
                failures.append(f"Failed to {action.description}: {e}")
        return failures
