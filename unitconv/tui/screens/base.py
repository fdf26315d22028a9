"""
Base class for all console panes.
Every pane inherits from ConverterPane, which provides the
refresh_content() hook called by the app-level refresh action.
"""
from __future__ import annotations
from textual.widget import Widget
class ConverterPane(Widget):
    """
    Base widget for console panel content.
    Subclass this, implement compose() and optionally refresh_content().
    """
    DEFAULT_CSS = """
    ConverterPane {
        height: 1fr;
        width: 1fr;
    }
    """
    def refresh_content(self) -> None:
        """Called by the app to request a data refresh. Override in subclasses."""
        self.refresh()
    def focus_content(self) -> None:
        """Called after the pane's tab becomes active. Override to focus a widget."""
