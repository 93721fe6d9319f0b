"""Line editing and printing commands."""

from __future__ import annotations

from ed_engine.buffer import EditorMode
from ed_engine.commands import ParsedCommand, Range
from ed_engine.errors import InvalidAddress
from ed_engine.modes.base_mode import ModeContext, ModeResult


def number_width(context: ModeContext) -> int:
    return len(str(len(context.buffer)))


def goto_line(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    del parsed
    buffer = context.buffer
    buffer.state.set_address(span.addr_2)
    context.output.line(buffer.line(span.addr_2))
    return ModeResult(status="print")


def append_lines(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed
    context.buffer.state.set_address(span.addr_1)
    return ModeResult(switch_to=EditorMode.INSERT, message="enter_insert")


def insert_lines(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed
    context.buffer.state.set_address(max(span.addr_1 - 1, 0))
    return ModeResult(switch_to=EditorMode.INSERT, message="enter_insert")


def change_lines(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    delete_lines(context, parsed, span)
    return ModeResult(switch_to=EditorMode.INSERT, message="enter_insert")


def delete_lines(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed
    buffer = context.buffer
    buffer.delete_range(span.addr_1, span.addr_2)
    buffer.state.set_address(span.addr_1 - 1)
    return ModeResult(status="delete")


def join_lines(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    buffer = context.buffer
    first, last = span
    if not parsed.has_address:
        # Without addresses ``j`` joins the current line with the next one.
        last = first + 1
        if last > len(buffer):
            raise InvalidAddress()
    if first == last:
        return ModeResult(status="noop")

    joined = "".join(buffer.document.lines_between(first, last))
    buffer.delete_range(first + 1, last)
    buffer.set_line(first, joined)
    buffer.state.set_address(first)
    return ModeResult(status="join")


def print_lines(context: ModeContext, parsed: ParsedCommand, span: Range) -> ModeResult:
    del parsed
    buffer = context.buffer
    for address in range(span.addr_1, span.addr_2 + 1):
        context.output.line(buffer.line(address))
        buffer.state.set_address(address)
    return ModeResult(status="print")


def number_lines(
    context: ModeContext, parsed: ParsedCommand, span: Range
) -> ModeResult:
    del parsed
    buffer = context.buffer
    width = number_width(context)
    for address in range(span.addr_1, span.addr_2 + 1):
        context.output.numbered(address, width, buffer.line(address))
        buffer.state.set_address(address)
    return ModeResult(status="print")


__all__ = [
    "goto_line",
    "append_lines",
    "insert_lines",
    "change_lines",
    "delete_lines",
    "join_lines",
    "print_lines",
    "number_lines",
    "number_width",
]
