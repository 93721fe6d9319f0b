"""Command mode: parse, resolve, validate, then dispatch one command line."""

from __future__ import annotations

from typing import Callable, Optional

from ed_engine.buffer import EditorMode
from ed_engine.commands import (
    AddressResolver,
    CommandLineParser,
    ParsedCommand,
    Range,
    ensure_range,
)
from ed_engine.errors import EdError
from ed_engine.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult

Dispatcher = Callable[[ModeContext, ParsedCommand, Range], ModeResult]


class CommandMode(Mode):
    name = EditorMode.COMMAND

    def __init__(
        self,
        context: ModeContext,
        *,
        parser: Optional[CommandLineParser] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("ed_engine.modes.command")
        self._parser = parser or CommandLineParser()
        if dispatcher is None:
            # Imported here: the handlers themselves import this package.
            from ed_engine.actions.command import run_command

            dispatcher = run_command
        self._dispatch = dispatcher

    def handle_line(self, line: str) -> ModeResult:
        self.context.bus.emit("command.submit", line)
        buffer = self.context.buffer
        try:
            parsed = self._parser.parse(line)
            span = AddressResolver(buffer).resolve(parsed)
            ensure_range(parsed.spec, span, len(buffer))
            if buffer.state.show_debug:
                self._print_debug(parsed, span)
            return self._dispatch(self.context, parsed, span)
        except EdError as error:
            return self._report(line, error)

    def _report(self, line: str, error: EdError) -> ModeResult:
        state = self.context.buffer.state
        state.last_error = error.message
        self.context.bus.emit("command.error", error)
        telemetry.record_event(
            "command.error",
            data={"line": line, "kind": type(error).__name__, "reason": error.message},
        )
        self.context.output.error(error, show_help=state.show_help)
        return ModeResult(status="error", message=error.message, error=error)

    def _print_debug(self, parsed: ParsedCommand, span: Range) -> None:
        output = self.context.output
        output.message(f"# range: [{span.addr_1},{span.addr_2}]")
        output.message(f"# addr: {self.context.buffer.state.address}")
        output.message(f"# cmd: {parsed.command.value!r}{'!' if parsed.flag else ''}")
        output.message(f"# params: {list(parsed.params)!r}")
        self.logger.debug(f"parsed {parsed!r}")
