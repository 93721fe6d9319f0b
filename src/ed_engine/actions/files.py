"""Commands that move whole files in and out of the buffer.

``e``, ``r`` and ``w`` also accept ``!command``: the first two load the
command's standard output, ``w`` pipes the buffer into it.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ed_engine.buffer import RunState
from ed_engine.commands import ParsedCommand, Range
from ed_engine.errors import InvalidCommand, NoFilename
from ed_engine.host import LoadedText
from ed_engine.host.files import encode_lines
from ed_engine.modes.base_mode import ModeContext, ModeResult


def _check_filename(name: str) -> str:
    if name.startswith("!") or name in {".", ".."} or name.endswith("/"):
        raise InvalidCommand("invalid filename")
    return name


def _target(context: ModeContext, parsed: ParsedCommand) -> str:
    name: Optional[str] = parsed.param(0) or context.buffer.state.filename
    if not name:
        raise NoFilename()
    return _check_filename(name)


def _shell_command(parsed: ParsedCommand) -> str:
    command = parsed.param(0)
    if not command:
        raise NoFilename()
    return command


def _load(context: ModeContext, parsed: ParsedCommand) -> Tuple[str, LoadedText]:
    """Read from ``!command`` or a file; returns the source and what was read."""

    if parsed.shell:
        command = _shell_command(parsed)
        return f"!{command}", context.shell.run(command)
    path = _target(context, parsed)
    return path, context.files.read_lines(path)


def _report_bytes(context: ModeContext, count: int) -> None:
    if not context.buffer.state.silent:
        context.output.message(str(count))


def edit_file(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    del span
    source, loaded = _load(context, parsed)
    buffer = context.buffer
    buffer.load(loaded.lines)
    if not parsed.shell:
        buffer.state.filename = source
    context.bus.emit("command.edit", {"path": source, "lines": len(loaded.lines)})
    _report_bytes(context, loaded.size)
    return ModeResult(status="edit", message=source)


def read_file(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    del span
    buffer = context.buffer
    source, loaded = _load(context, parsed)
    if not parsed.shell and buffer.state.filename is None:
        buffer.state.filename = source

    buffer.insert_after(len(buffer), loaded.lines)
    buffer.state.set_address(len(buffer))
    buffer.state.mark_dirty()
    context.bus.emit("command.read", {"source": source, "lines": len(loaded.lines)})
    _report_bytes(context, loaded.size)
    return ModeResult(status="read", message=source)


def filename(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    del span
    state = context.buffer.state
    name = parsed.param(0)
    if name:
        state.filename = _check_filename(name)
        return ModeResult(status="filename", message=state.filename)
    if state.filename is None:
        raise NoFilename()
    context.output.message(state.filename)
    return ModeResult(status="filename", message=state.filename)


def _write_to_shell(context: ModeContext, parsed: ParsedCommand) -> ModeResult:
    command = _shell_command(parsed)
    lines = context.buffer.lines
    output = context.shell.run(command, input_lines=lines)
    for text in output.lines:
        context.output.line(text)
    # Piping the buffer out does not save it anywhere.
    count = len(encode_lines(lines).encode("utf-8"))
    context.bus.emit("command.write", {"path": f"!{command}", "bytes": count})
    _report_bytes(context, count)
    return ModeResult(status="write", message=f"!{command}")


def write_file(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    del span
    if parsed.shell:
        return _write_to_shell(context, parsed)
    buffer = context.buffer
    path = _target(context, parsed)
    count = context.files.write_lines(path, buffer.lines)
    buffer.state.filename = path
    buffer.state.mark_clean()
    context.bus.emit("command.write", {"path": path, "bytes": count})
    _report_bytes(context, count)
    return ModeResult(status="write", message=path)


def write_and_quit(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    write_file(context, parsed, span)
    context.bus.emit("command.quit", {"force": False})
    return ModeResult(run_state=RunState.STOPPED, status="quit", message="wq")


__all__ = ["edit_file", "read_file", "filename", "write_file", "write_and_quit"]
