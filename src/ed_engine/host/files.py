"""Whole-file reader/writer used by the edit, read, and write commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Sequence

from ed_engine.errors import CannotOpen


@dataclass(frozen=True, slots=True)
class LoadedText:
    """Lines read from a file or command, plus the byte size they came from."""

    lines: List[str]
    size: int


class FileStore(Protocol):
    """Protocol describing how commands load and save whole files."""

    def read_lines(self, path: str) -> LoadedText:
        """Return the file's lines without their newlines."""
        ...

    def write_lines(self, path: str, lines: Sequence[str]) -> int:
        """Write ``lines`` newline-terminated and return the byte count."""
        ...


def encode_lines(lines: Sequence[str]) -> str:
    return "\n".join(lines) + "\n"


def decode_text(text: str) -> List[str]:
    """Split on ``\\n`` only; every other control character stays in its line."""

    # A lone newline is what an empty buffer writes.
    if text in ("", "\n"):
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def decode_bytes(data: bytes, encoding: str = "utf-8") -> LoadedText:
    return LoadedText(lines=decode_text(data.decode(encoding)), size=len(data))


class LocalFileStore:
    """FileStore backed by the local filesystem."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_lines(self, path: str) -> LoadedText:
        # Bytes, not read_text: no newline translation on the way in.
        try:
            return decode_bytes(Path(path).read_bytes(), self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise CannotOpen(path=path) from exc

    def write_lines(self, path: str, lines: Sequence[str]) -> int:
        data = encode_lines(lines).encode(self.encoding)
        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            raise CannotOpen("cannot open output file", path=path) from exc
        return len(data)
