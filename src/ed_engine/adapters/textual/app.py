"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Input, RichLog, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use ed_engine.adapters.textual.app"
    ) from exc

from ed_engine.errors import CannotOpen
from ed_engine.host import MemoryPrinter
from ed_engine.modes import ModeManager, create_default_manager
from ed_engine.runtime import telemetry

from .controller import TextualEdAdapter, TextualUIHooks


class EdEngineApp(App[None]):
    """Scrolling transcript on top, command line at the bottom."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#transcript {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		dock: bottom;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, path: Optional[str] = None, silent: bool = False) -> None:
        super().__init__()
        self._path = path
        self._silent = silent
        self.manager: ModeManager | None = None
        self.adapter: TextualEdAdapter | None = None
        self._transcript: RichLog | None = None
        self._status_widget: Static | None = None
        self._input: Input | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._transcript = RichLog(id="transcript", wrap=False, markup=False)
        yield self._transcript
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        self._input = Input(placeholder="command", id="command-line")
        yield self._input
        yield Footer()

    def on_mount(self) -> None:
        self.manager = create_default_manager(output=MemoryPrinter())
        self.manager.state.silent = self._silent
        hooks = TextualUIHooks(
            write_output=self._write_output,
            update_status=self._update_status,
            show_prompt=self._show_prompt,
            handle_event=self._handle_event,
            request_exit=self.exit,
        )
        self.adapter = TextualEdAdapter(self.manager, hooks)
        if self._path:
            result = self.adapter.submit_line(f"e {self._path}")
            if isinstance(result.error, CannotOpen):
                self.manager.state.filename = self._path
        if self._input:
            self._input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        line = event.value
        event.input.value = ""
        self.adapter.submit_line(line)

    def _write_output(self, text: str) -> None:
        if self._transcript:
            self._transcript.write(text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _show_prompt(self, prompt: str) -> None:
        if self._input:
            self._input.placeholder = "command" if prompt else "text (. to finish)"

    def _handle_event(self, name: str, payload: Any | None) -> None:
        telemetry.record_event(
            "ui.event", level="debug", data={"name": name, "payload": payload}
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ed-engine-tui", description="Run the editor in a Textual UI."
    )
    parser.add_argument("file", nargs="?", help="File to edit")
    parser.add_argument(
        "-s", "--silent", action="store_true", help="Suppress byte counts"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = EdEngineApp(path=args.file, silent=args.silent)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
