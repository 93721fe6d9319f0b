"""Range checks applied between address resolution and dispatch."""

from __future__ import annotations

from ed_engine.errors import InvalidAddress

from .models import CommandName, CommandSpec, Range


def is_range_ok(addr_1: int, addr_2: int, length: int, command: CommandName) -> bool:
    if command is CommandName.APPEND and addr_1 == 0:
        # Appending after line 0 inserts at the top of the buffer.
        return addr_2 <= length
    return 1 <= addr_1 <= addr_2 <= length


def ensure_range(spec: CommandSpec, span: Range, length: int) -> Range:
    """Return ``span`` unchanged or raise :class:`InvalidAddress`."""

    if spec.addresses == 0:
        return span
    if not is_range_ok(span.addr_1, span.addr_2, length, spec.name):
        raise InvalidAddress()
    return span


__all__ = ["is_range_ok", "ensure_range"]
