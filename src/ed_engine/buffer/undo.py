"""Snapshot based undo for buffer commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """Full copy of the undoable part of the editor state."""

    label: str
    lines: Tuple[str, ...]
    address: int
    filename: Optional[str]


class UndoStack:
    """Bounded stack of snapshots taken before undoable commands.

    The default depth of one gives ed's single-level "undo last command".
    """

    def __init__(self, *, depth: int = 1) -> None:
        if depth < 1:
            raise ValueError("undo depth must be at least 1")
        self.depth = depth
        self._entries: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        self._entries.append(entry)
        if len(self._entries) > self.depth:
            del self._entries[: len(self._entries) - self.depth]

    def pop(self) -> Optional[UndoEntry]:
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()
