"""Line storage for ed_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineDocument:
    """Ordered list of text lines addressed from 1.

    Address ``0`` is the position before the first line, so inserting "at"
    address ``n`` places the new line after line ``n``.
    """

    _lines: List[str] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=list(lines))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def get_line(self, address: int) -> str:
        return self._lines[address - 1]

    def set_line(self, address: int, text: str) -> None:
        self._lines[address - 1] = text

    def lines_between(self, first: int, last: int) -> Sequence[str]:
        """Return lines ``first..last`` inclusive."""

        return tuple(self._lines[first - 1 : last])

    def insert_after(self, address: int, new_lines: Iterable[str]) -> int:
        """Insert ``new_lines`` after ``address`` and return how many went in."""

        incoming = list(new_lines)
        self._lines[address:address] = incoming
        return len(incoming)

    def delete(self, first: int, last: int) -> None:
        del self._lines[first - 1 : last]

    def replace_all(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
