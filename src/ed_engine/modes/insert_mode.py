"""Insert mode: raw lines become buffer content until a lone ``.``."""

from __future__ import annotations

from ed_engine.buffer import EditorMode

from .base_mode import Mode, ModeContext, ModeResult

TERMINATOR = "."


class InsertMode(Mode):
    name = EditorMode.INSERT

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.inserted = 0

    def on_enter(self, previous: EditorMode | None) -> None:
        del previous
        self.inserted = 0
        self.context.bus.emit("insert.start", self.context.buffer.state.address)

    def on_exit(self, next_mode: EditorMode | None) -> None:
        del next_mode
        self.context.bus.emit("insert.end", self.inserted)

    def handle_line(self, line: str) -> ModeResult:
        if line == TERMINATOR:
            return ModeResult(switch_to=EditorMode.COMMAND, message="exit_insert")

        buffer = self.context.buffer
        address = buffer.state.address
        buffer.insert_after(address, [line])
        buffer.state.set_address(address + 1)
        self.inserted += 1
        return ModeResult(status="inserted")
