"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ed_engine.buffer import Buffer, EditorMode, RunState
from ed_engine.errors import EdError
from ed_engine.host import FileStore, Printer, ShellRunner


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_line``."""

    run_state: RunState = RunState.RUNNING
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None
    error: Optional[EdError] = None

    @property
    def stopped(self) -> bool:
        return self.run_state is RunState.STOPPED


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and command handler can access."""

    buffer: Buffer
    output: Printer
    files: FileStore
    shell: ShellRunner
    bus: "ModeBus"


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: EditorMode = EditorMode.COMMAND

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_line(
        self, line: str
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
