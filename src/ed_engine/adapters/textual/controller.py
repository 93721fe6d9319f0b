"""Textual adapter glue that wires ModeManager results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from ed_engine.buffer import EditorMode
from ed_engine.host import MemoryPrinter
from ed_engine.modes import ModeManager, ModeResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    write_output: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    show_prompt: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop


class TextualEdAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface.

    The manager must print into a :class:`MemoryPrinter`; its lines are
    drained into ``hooks.write_output`` after every submitted line.
    """

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        if not isinstance(manager.context.output, MemoryPrinter):
            raise TypeError("TextualEdAdapter needs a manager using MemoryPrinter")
        self.manager = manager
        self.hooks = hooks
        self.printer: MemoryPrinter = manager.context.output
        self._subscribe_events()
        self._refresh_status()

    def submit_line(self, line: str) -> ModeResult:
        """Feed one input line to the editor and surface its output."""

        self.hooks.write_output(f"{self.prompt}{line}")
        result = self.manager.handle_line(line)
        for text in self.printer.drain():
            self.hooks.write_output(text)
        self._refresh_status()
        if result.stopped:
            self.hooks.request_exit()
        return result

    @property
    def prompt(self) -> str:
        return ":" if self.manager.state.mode is EditorMode.COMMAND else ""

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "command.submit",
            "command.error",
            "command.edit",
            "command.read",
            "command.write",
            "command.quit",
            "command.undo",
            "insert.start",
            "insert.end",
        ):
            bus.subscribe(
                event,
                lambda payload, name=event: self.hooks.handle_event(name, payload),
            )

    def _refresh_status(self) -> None:
        self.hooks.show_prompt(self.prompt)
        self.hooks.update_status(self._status_line())

    def _status_line(self) -> str:
        metadata = self._state_metadata()
        return "  ".join(f"{key}={value}" for key, value in metadata.items())

    def _state_metadata(self) -> Dict[str, object]:
        state = self.manager.state
        return {
            "mode": state.mode.value,
            "file": state.filename or "-",
            "line": f"{state.address}/{len(self.manager.context.buffer)}",
            "modified": "yes" if state.dirty else "no",
        }


__all__ = ["TextualEdAdapter", "TextualUIHooks"]
