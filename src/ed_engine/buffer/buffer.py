"""High-level buffer façade combining document, state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, Optional, Sequence

from ed_engine.runtime import telemetry

from .document import LineDocument
from .state import EditorState
from .undo import UndoEntry, UndoStack


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
        state: Optional[EditorState] = None,
        undo: Optional[UndoStack] = None,
        undo_depth: int = 1,
    ) -> None:
        self.name = name
        self.document = document if document is not None else LineDocument()
        self.state = state or EditorState()
        self.undo = undo if undo is not None else UndoStack(depth=undo_depth)

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: str = "default") -> "Buffer":
        buffer = cls(name=name, document=LineDocument.from_lines(lines))
        buffer.state.set_address(len(buffer.document))
        return buffer

    def __len__(self) -> int:
        return len(self.document)

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    def line(self, address: int) -> str:
        return self.document.get_line(address)

    def insert_after(self, address: int, lines: Iterable[str]) -> int:
        count = self.document.insert_after(address, lines)
        if count:
            self.state.mark_dirty()
        return count

    def delete_range(self, first: int, last: int) -> None:
        self.document.delete(first, last)
        self.state.mark_dirty()

    def set_line(self, address: int, text: str) -> None:
        self.document.set_line(address, text)
        self.state.mark_dirty()

    def load(self, lines: Iterable[str]) -> None:
        """Replace the whole buffer, as after reading a file from scratch."""

        self.document.replace_all(lines)
        self.state.set_address(len(self.document))
        self.state.mark_clean()
        self.undo.clear()

    def capture(self, label: str) -> UndoEntry:
        return UndoEntry(
            label=label,
            lines=tuple(self.document.snapshot()),
            address=self.state.address,
            filename=self.state.filename,
        )

    def restore(self, entry: UndoEntry) -> None:
        self.document.replace_all(entry.lines)
        self.state.set_address(entry.address)
        # The restored text no longer matches what was last written.
        self.state.mark_dirty()
        self.state.filename = entry.filename

    def transaction(self, label: str) -> "Transaction":
        return Transaction(self, label)


class Transaction(AbstractContextManager["Transaction"]):
    """Records an undo snapshot around one command.

    The snapshot is pushed on a clean exit when the command changed the
    buffer or asked to keep it via :meth:`keep` (append/insert/change enter
    insert mode before any line has been added).
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.before: Optional[UndoEntry] = None
        self._keep = False
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self.before = self.buffer.capture(self.label)
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def keep(self) -> None:
        self._keep = True

    def changed(self) -> bool:
        if self.before is None:
            return False
        after = self.buffer.capture(self.label)
        before = (self.before.lines, self.before.filename)
        return (after.lines, after.filename) != before

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None and self.before is not None:
            if self._keep or self.changed():
                self.buffer.undo.push(self.before)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
