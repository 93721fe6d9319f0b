"""Mode manager coordinating the command/insert state machine."""

from __future__ import annotations

from typing import Dict, Optional, Type

from ed_engine.buffer import Buffer, EditorMode, EditorState
from ed_engine.host import (
    FileStore,
    LocalFileStore,
    Printer,
    RichPrinter,
    ShellRunner,
    SubprocessShell,
)
from ed_engine.runtime import telemetry

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode


class ModeManager:
    """Owns the registered modes and routes each input line to the active one.

    The active mode is whatever ``buffer.state.mode`` says, so the editor
    state stays the single source of truth.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[EditorMode, Mode] = {}

    @property
    def state(self) -> EditorState:
        return self.context.buffer.state

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self.state.mode)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        return mode

    def switch_mode(self, name: EditorMode) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name.value}'")
        previous = self.state.mode
        if previous is name:
            return
        self._modes[previous].on_exit(name)
        self.state.mode = name
        self._modes[name].on_enter(previous)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name.value})

    def handle_line(self, line: str) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No mode registered for the current editor state")
        with telemetry.span(
            name=f"mode::{mode.name.value}",
            component=True,
            metadata={"mode": mode.name.value},
        ):
            result = mode.handle_line(line)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


def create_default_manager(
    buffer: Optional[Buffer] = None,
    *,
    output: Optional[Printer] = None,
    files: Optional[FileStore] = None,
    shell: Optional[ShellRunner] = None,
    bus: Optional[ModeBus] = None,
) -> ModeManager:
    """Build a ModeManager with command and insert modes registered."""

    context = ModeContext(
        buffer=buffer if buffer is not None else Buffer(),
        output=output or RichPrinter(),
        files=files or LocalFileStore(),
        shell=shell or SubprocessShell(),
        bus=bus or ModeBus(),
    )
    manager = ModeManager(context)
    manager.register_mode(CommandMode)
    manager.register_mode(InsertMode)
    return manager
