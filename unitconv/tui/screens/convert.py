"""
Convert screen: the REPL in a pane.
Type a request into the input box and press Enter; the request and its
result are appended to the log below. 'exit' closes the console.
"""
from __future__ import annotations
from textual.app import ComposeResult
from textual.widgets import Input, RichLog
from unitconv.converter import UnitConverter
from unitconv.tui.screens.base import ConverterPane

EXIT_WORD = "exit"


class ConvertScreen(ConverterPane):
    """Input box plus scrolling result log."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.converter = UnitConverter()
        self.history: list[tuple[str, str]] = []

    def compose(self) -> ComposeResult:
        yield Input(placeholder="5 km to miles", id="convert-input")
        yield RichLog(id="convert-log", wrap=True)

    def on_mount(self) -> None:
        self.focus_content()

    def focus_content(self) -> None:
        self.query_one("#convert-input", Input).focus()

    def submit_line(self, line: str) -> str | None:
        """Convert one line and log it. Returns None when the line is 'exit'."""
        line = line.strip()
        if not line:
            return None
        if line.lower() == EXIT_WORD:
            self.app.exit()
            return None
        result = self.converter.run(line)
        self.history.append((line, result))
        log = self.query_one("#convert-log", RichLog)
        log.write(f"▶ {line}")
        log.write(f"◀ {result}")
        return result

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.input.value = ""
        self.submit_line(event.value)

    def refresh_content(self) -> None:
        self.query_one("#convert-log", RichLog).clear()
        self.history.clear()
