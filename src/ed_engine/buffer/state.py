"""Current address, mode, and change tracking state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EditorMode(str, Enum):
    """How the next raw input line is interpreted."""

    COMMAND = "command"
    INSERT = "insert"


class RunState(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(slots=True)
class EditorState:
    """Mutable cursor + session toggles tied to a LineDocument."""

    address: int = 0
    dirty: bool = False
    mode: EditorMode = EditorMode.COMMAND
    filename: Optional[str] = None
    last_pattern: Optional[str] = None
    last_error: Optional[str] = None
    show_help: bool = True
    show_debug: bool = False
    silent: bool = False

    def set_address(self, address: int) -> None:
        self.address = address

    def mark_dirty(self) -> None:
        self.dirty = True

    def mark_clean(self) -> None:
        self.dirty = False
