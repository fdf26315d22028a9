"""
unitconv console: Textual front end for the converter.
Two tabs: Convert (the REPL) and Units (the catalog).
Entry point: unitconv console (alias: tui, jack)
"""
from __future__ import annotations
from typing import ClassVar
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget
from textual.widgets import Footer, Header, TabbedContent, TabPane
from unitconv.config import get_config
from unitconv.tui.screens.base import ConverterPane
from unitconv.tui.screens.convert import ConvertScreen
from unitconv.tui.screens.units import UnitsScreen

# ---------------------------------------------------------------------------
# Screen registry: add new panes here to extend the console
# Each entry: (key, label, tab_id, pane_class)
# ---------------------------------------------------------------------------
SCREEN_REGISTRY: list[tuple[str, str, str, type[Widget]]] = [
    ("f1", "Convert", "convert", ConvertScreen),
    ("f2", "Units",   "units",   UnitsScreen),
]


class ConverterApp(App):
    """unitconv console."""
    CSS = """
    #convert-input {
        dock: top;
    }
    """
    SUB_TITLE = "length · weight · temperature"
    BINDINGS: ClassVar[list[Binding]] = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "switch_tab('convert')", "Convert", show=True),
        Binding("f2", "switch_tab('units')",   "Units",   show=True),
        Binding("ctrl+r", "refresh_all",        "Clear",   show=True),
    ]

    def on_mount(self) -> None:
        self.title = get_config()["console"]["title"]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with TabbedContent(initial="convert"):
            for _key, label, tab_id, pane_cls in SCREEN_REGISTRY:
                with TabPane(label, id=tab_id):
                    yield pane_cls(id=f"{tab_id}-pane")
        yield Footer()

    def action_switch_tab(self, tab_id: str) -> None:
        # A focused widget in the old tab pulls TabbedContent back to it
        self.set_focus(None)
        self.query_one(TabbedContent).active = tab_id
        pane = self.query_one(f"#{tab_id}-pane", ConverterPane)
        self.call_after_refresh(pane.focus_content)

    def action_refresh_all(self) -> None:
        for _key, _label, tab_id, _cls in SCREEN_REGISTRY:
            self.query_one(f"#{tab_id}-pane").refresh_content()
