"""Interactive console session: read a line, hand it to the modes, repeat."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Protocol, Sequence

try:  # pragma: no cover - readline is missing on some platforms
    import readline
except ImportError:  # pragma: no cover
    readline = None  # type: ignore[assignment]

from ed_engine.buffer import EditorMode
from ed_engine.errors import CannotOpen
from ed_engine.modes import ModeManager, create_default_manager
from ed_engine.runtime import telemetry

DEFAULT_PROMPT = ":"
DEFAULT_HISTORY_FILE = "~/.ed_engine_history"


class LineReader(Protocol):
    def read(self, prompt: str) -> Optional[str]:
        """Return the next input line, or ``None`` at end of input."""
        ...


class ReadlineReader:
    """LineReader built on ``input()`` with readline history persistence."""

    def __init__(
        self, history_file: Optional[str] = None, *, history_length: int = 1000
    ) -> None:
        self.history_file = (
            Path(history_file).expanduser() if history_file else None
        )
        self.history_length = history_length

    def __enter__(self) -> "ReadlineReader":
        if readline is not None and self.history_file is not None:
            readline.set_history_length(self.history_length)
            if self.history_file.exists():
                try:
                    readline.read_history_file(str(self.history_file))
                except OSError as exc:
                    telemetry.record_event(
                        "history.load_failed",
                        level="warning",
                        data={"path": str(self.history_file), "reason": str(exc)},
                    )
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if readline is not None and self.history_file is not None:
            try:
                readline.write_history_file(str(self.history_file))
            except OSError as exc:
                telemetry.record_event(
                    "history.save_failed",
                    level="warning",
                    data={"path": str(self.history_file), "reason": str(exc)},
                )
        return False

    def read(self, prompt: str) -> Optional[str]:
        try:
            return input(prompt)
        except EOFError:
            return None


class ConsoleSession:
    """Read-parse-dispatch loop until a command stops it or input ends."""

    def __init__(
        self,
        manager: ModeManager,
        reader: LineReader,
        *,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self.manager = manager
        self.reader = reader
        self.prompt = prompt

    def open_file(self, path: str) -> None:
        """Load ``path`` the way ``e path`` would, remembering it even if missing."""

        result = self.manager.handle_line(f"e {path}")
        if isinstance(result.error, CannotOpen):
            self.manager.state.filename = path

    def run(self) -> int:
        while True:
            in_command_mode = self.manager.state.mode is EditorMode.COMMAND
            line = self.reader.read(self.prompt if in_command_mode else "")
            if line is None:
                telemetry.record_event("session.eof", level="debug")
                return 0
            result = self.manager.handle_line(line)
            if result.stopped:
                return 0


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ed-engine", description="Line-oriented text editor."
    )
    parser.add_argument("file", nargs="?", help="File to edit")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Echo parsed commands and log at debug level",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Suppress byte counts and terse error output",
    )
    parser.add_argument(
        "-p",
        "--prompt",
        default=os.environ.get("ED_ENGINE_PROMPT", DEFAULT_PROMPT),
        help=f"Command mode prompt (default: {DEFAULT_PROMPT!r})",
    )
    parser.add_argument(
        "--history-file",
        default=os.environ.get("ED_ENGINE_HISTORY_FILE", DEFAULT_HISTORY_FILE),
        help="Where to persist input history",
    )
    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not load or save input history",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.debug:
        telemetry.configure(preset="development")

    manager = create_default_manager()
    state = manager.state
    state.show_debug = args.debug
    state.silent = args.silent
    state.show_help = not args.silent

    history_file = None if args.no_history else args.history_file
    with ReadlineReader(history_file) as reader:
        session = ConsoleSession(manager, reader, prompt=args.prompt)
        if args.file:
            session.open_file(args.file)
        try:
            return session.run()
        except KeyboardInterrupt:
            # Leave without writing anything, like ed on a fatal signal.
            print()
            return 130


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
