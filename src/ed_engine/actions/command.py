"""Dispatch table mapping each command name to its handler."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict

from ed_engine.buffer import EditorMode, RunState
from ed_engine.commands import CommandName, ParsedCommand, Range
from ed_engine.errors import Dirty, NoUndo
from ed_engine.modes.base_mode import ModeContext, ModeResult
from ed_engine.runtime import telemetry

from .core import (
    append_lines,
    change_lines,
    delete_lines,
    goto_line,
    insert_lines,
    join_lines,
    number_lines,
    print_lines,
)
from .files import edit_file, filename, read_file, write_and_quit, write_file
from .search import global_command, substitute

CommandHandler = Callable[[ModeContext, ParsedCommand, Range], ModeResult]


def run_command(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    """Run the handler for ``parsed`` over an already validated ``span``.

    Undoable commands run inside a buffer transaction so a snapshot of the
    state before them can be restored by ``u``.
    """

    handler = _COMMAND_HANDLERS[parsed.command]
    label = parsed.command.name.lower()
    with telemetry.span(
        f"command::{label}",
        component="commands",
        metadata={"range": f"{span.addr_1},{span.addr_2}", "flag": parsed.flag},
    ):
        if not parsed.spec.undoable:
            return handler(context, parsed, span)
        with context.buffer.transaction(label) as tx:
            result = handler(context, parsed, span)
            if result.switch_to is EditorMode.INSERT:
                tx.keep()
        return result


def _handle_quit(
    context: ModeContext,
    parsed: ParsedCommand,
    span: Range,
    *,
    force: bool = False,
) -> ModeResult:
    del span
    force = force or parsed.flag
    if context.buffer.state.dirty and not force:
        raise Dirty()
    context.bus.emit("command.quit", {"force": force})
    message = "quit!" if force else "quit"
    return ModeResult(run_state=RunState.STOPPED, status="quit", message=message)


def _handle_undo(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed, span
    buffer = context.buffer
    entry = buffer.undo.pop()
    if entry is None:
        raise NoUndo()
    buffer.restore(entry)
    context.bus.emit("command.undo", entry.label)
    return ModeResult(status="undo", message=entry.label)


def _handle_help(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed, span
    last_error = context.buffer.state.last_error
    if last_error:
        context.output.message(last_error)
    return ModeResult(status="help")


def _handle_toggle_help(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed, span
    state = context.buffer.state
    state.show_help = not state.show_help
    if state.show_help and state.last_error:
        context.output.message(state.last_error)
    return ModeResult(status="help", message="on" if state.show_help else "off")


_COMMAND_HANDLERS: Dict[CommandName, CommandHandler] = {
    CommandName.GOTO: goto_line,
    CommandName.APPEND: append_lines,
    CommandName.INSERT: insert_lines,
    CommandName.CHANGE: change_lines,
    CommandName.DELETE: delete_lines,
    CommandName.JOIN: join_lines,
    CommandName.EDIT: edit_file,
    CommandName.FILENAME: filename,
    CommandName.READ: read_file,
    CommandName.WRITE: write_file,
    CommandName.WRITE_QUIT: write_and_quit,
    CommandName.EXIT: write_and_quit,
    CommandName.PRINT: print_lines,
    CommandName.NUMBER: number_lines,
    CommandName.PRINT_NUMBER: number_lines,
    CommandName.GLOBAL: global_command,
    CommandName.INVERSE_GLOBAL: global_command,
    CommandName.SUBSTITUTE: substitute,
    CommandName.QUIT: _handle_quit,
    CommandName.FORCE_QUIT: partial(_handle_quit, force=True),
    CommandName.UNDO: _handle_undo,
    CommandName.HELP: _handle_help,
    CommandName.TOGGLE_HELP: _handle_toggle_help,
}


__all__ = ["run_command", "CommandHandler"]
