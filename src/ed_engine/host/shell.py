"""Shell command runner for ``e !cmd``, ``r !cmd`` and ``w !cmd``."""

from __future__ import annotations

import subprocess
from typing import Optional, Protocol, Sequence

from ed_engine.errors import CannotOpen
from ed_engine.runtime import telemetry

from .files import LoadedText, decode_text, encode_lines


class ShellRunner(Protocol):
    def run(
        self, command: str, input_lines: Optional[Sequence[str]] = None
    ) -> LoadedText:
        """Run ``command``, feeding it ``input_lines``; return its stdout lines."""
        ...


class SubprocessShell:
    def __init__(
        self, *, timeout: float | None = None, encoding: str = "utf-8"
    ) -> None:
        self.timeout = timeout
        self.encoding = encoding

    def run(
        self, command: str, input_lines: Optional[Sequence[str]] = None
    ) -> LoadedText:
        stdin = None
        if input_lines is not None:
            stdin = encode_lines(input_lines).encode(self.encoding)
        try:
            completed = subprocess.run(
                command,
                shell=True,
                input=stdin,
                capture_output=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise CannotOpen(f"cannot run '{command}'") from exc
        if completed.returncode != 0:
            telemetry.record_event(
                "shell.exit",
                level="warning",
                data={"command": command, "returncode": completed.returncode},
            )
        # Undecodable output bytes are replaced instead of failing the command.
        text = completed.stdout.decode(self.encoding, errors="replace")
        return LoadedText(lines=decode_text(text), size=len(completed.stdout))
