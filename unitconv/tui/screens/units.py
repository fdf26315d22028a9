"""
Units screen: the catalog as a reference table.
One section per kind; each row is the unit key followed by every name the
resolver accepts for it.
"""
from __future__ import annotations
from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Static
from unitconv.catalog import CATALOG, UnitKind
from unitconv.tui.screens.base import ConverterPane


def _units_markup() -> str:
    lines = []
    for kind in UnitKind:
        lines.append(f"[bold green]── {kind.label} ──[/bold green]")
        for unit in CATALOG.by_kind(kind):
            scale = f"×{unit.scale:g}" if kind is not UnitKind.TEMPERATURE else "formula"
            lines.append(f"  [bold]{unit.key.lower():<11}[/bold] [dim]{scale:>10}[/dim]  {', '.join(unit.names)}")
        lines.append("")
    return "\n".join(lines)


class UnitsScreen(ConverterPane):
    """Read-only catalog listing."""

    text: str = ""

    def compose(self) -> ComposeResult:
        with ScrollableContainer(id="units-scroll"):
            yield Static(id="units-body", markup=True)

    def on_mount(self) -> None:
        self.refresh_content()

    def refresh_content(self) -> None:
        self.text = _units_markup()
        self.query_one("#units-body", Static).update(self.text)
