"""Output sinks for printed lines, messages, and errors."""

from __future__ import annotations

from typing import List, Optional, Protocol

from rich.console import Console
from rich.text import Text

from ed_engine.errors import EdError


def format_number(number: int, width: int) -> str:
    return f"{number:>{width}}"


def format_error(error: EdError, show_help: bool) -> str:
    return f"? {error.message}" if show_help else "?"


class Printer(Protocol):
    """Protocol describing where command output goes."""

    def line(self, text: str) -> None:
        """Emit a buffer line verbatim."""
        ...

    def numbered(self, number: int, width: int, text: str) -> None:
        """Emit a buffer line prefixed with its right-aligned line number."""
        ...

    def message(self, text: str) -> None:
        """Emit an informational message (byte counts, filenames)."""
        ...

    def error(self, error: EdError, *, show_help: bool) -> None:
        ...


class RichPrinter:
    """Terminal printer: green line numbers, red errors."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)

    def line(self, text: str) -> None:
        self.console.print(Text(text))

    def numbered(self, number: int, width: int, text: str) -> None:
        self.console.print(
            Text.assemble((format_number(number, width), "green"), " ", text)
        )

    def message(self, text: str) -> None:
        self.console.print(Text(text))

    def error(self, error: EdError, *, show_help: bool) -> None:
        self.console.print(Text(format_error(error, show_help), style="red"))


class MemoryPrinter:
    """Collects plain-text output, for tests and hosts that render it later."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def line(self, text: str) -> None:
        self.lines.append(text)

    def numbered(self, number: int, width: int, text: str) -> None:
        self.lines.append(f"{format_number(number, width)} {text}")

    def message(self, text: str) -> None:
        self.lines.append(text)

    def error(self, error: EdError, *, show_help: bool) -> None:
        self.lines.append(format_error(error, show_help))

    def drain(self) -> List[str]:
        drained, self.lines = self.lines, []
        return drained
