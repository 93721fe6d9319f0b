"""Resolve address tokens against the current buffer."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from ed_engine.buffer import Buffer
from ed_engine.errors import InvalidAddress, NoMatch, PatternError

from .models import AddressKind, AddressToken, CommandName, ParsedCommand, Range


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> "re.Pattern[str]":
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(f"invalid pattern: {exc.msg}", pattern=pattern) from exc


def remember_pattern(buffer: Buffer, pattern: str) -> "re.Pattern[str]":
    """Compile ``pattern``; an empty one reuses the last pattern seen."""

    if not pattern:
        if buffer.state.last_pattern is None:
            raise PatternError("no previous pattern")
        pattern = buffer.state.last_pattern
    regex = compile_pattern(pattern)
    buffer.state.last_pattern = pattern
    return regex


class AddressResolver:
    """Turns the tokens of a :class:`ParsedCommand` into a :class:`Range`."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def resolve(self, parsed: ParsedCommand) -> Range:
        current = self.buffer.state.address
        last = len(self.buffer)

        if parsed.command is CommandName.GOTO and not parsed.has_address:
            # A blank line steps to the next line.
            return Range(current + 1, current + 1)

        if not parsed.separator:
            addr_1 = self._resolve_or(parsed.addr_1, base=current, default=current)
            addr_2 = self._resolve_or(parsed.addr_2, base=current, default=addr_1)
            return Range(addr_1, addr_2)

        if parsed.separator == ";":
            addr_1 = self._resolve_or(parsed.addr_1, base=current, default=current)
            addr_2 = self._resolve_or(parsed.addr_2, base=addr_1, default=last)
            return Range(addr_1, addr_2)

        addr_1 = self._resolve_or(parsed.addr_1, base=current, default=1)
        addr_2 = self._resolve_or(parsed.addr_2, base=current, default=last)
        return Range(addr_1, addr_2)

    def _resolve_or(self, token: AddressToken, *, base: int, default: int) -> int:
        resolved = self.resolve_token(token, base=base)
        return default if resolved is None else resolved

    def resolve_token(self, token: AddressToken, *, base: int) -> Optional[int]:
        """Return the line number for ``token`` or ``None`` if it is empty."""

        kind = token.kind
        if kind is AddressKind.NONE:
            return None
        if kind is AddressKind.CURRENT:
            line = base
        elif kind is AddressKind.LAST:
            line = len(self.buffer)
        elif kind is AddressKind.NUMBER:
            line = token.value
        else:
            regex = remember_pattern(self.buffer, token.pattern)
            backward = kind is AddressKind.SEARCH_BACKWARD
            line = self.search(regex, start=base, backward=backward)

        line += token.offset
        if line < 0:
            raise InvalidAddress()
        return line

    def search(
        self, regex: "re.Pattern[str]", *, start: int, backward: bool = False
    ) -> int:
        """Find the next line matching ``regex``, wrapping around the buffer.

        Every line is visited at most once, ending with ``start`` itself.
        """

        total = len(self.buffer)
        if start > total:
            raise InvalidAddress()
        line = start
        for _ in range(total):
            if backward:
                line = line - 1 if line > 1 else total
            else:
                line = line % total + 1
            if regex.search(self.buffer.line(line)):
                return line
        raise NoMatch()


__all__ = ["AddressResolver", "compile_pattern", "remember_pattern"]
