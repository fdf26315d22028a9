"""Tests for the Textual console, driven through Textual's test pilot."""

import pytest
from textual.widgets import Input, TabbedContent
from unitconv.config import reset_config
from unitconv.tui.app import ConverterApp
from unitconv.tui.screens.convert import ConvertScreen
from unitconv.tui.screens.units import UnitsScreen


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("UNITCONV_CONFIG", str(tmp_path / "config.yaml"))
    reset_config()
    yield
    reset_config()


@pytest.mark.asyncio
async def test_submit_line_records_result():
    app = ConverterApp()
    async with app.run_test() as pilot:
        pane = app.query_one("#convert-pane", ConvertScreen)
        result = pane.submit_line("10 c to f")
        await pilot.pause()
        assert result == "10.0 degrees Celsius is 50.0 degrees Fahrenheit"
        assert pane.history == [("10 c to f", result)]


@pytest.mark.asyncio
async def test_enter_submits_input():
    app = ConverterApp()
    async with app.run_test() as pilot:
        app.query_one("#convert-input", Input).value = "1 m to m"
        await pilot.press("enter")
        await pilot.pause()
        pane = app.query_one("#convert-pane", ConvertScreen)
        assert pane.history == [("1 m to m", "1.0 meter is 1.0 meter")]
        assert app.query_one("#convert-input", Input).value == ""


@pytest.mark.asyncio
async def test_blank_line_ignored():
    app = ConverterApp()
    async with app.run_test() as pilot:
        pane = app.query_one("#convert-pane", ConvertScreen)
        assert pane.submit_line("   ") is None
        await pilot.pause()
        assert pane.history == []


@pytest.mark.asyncio
async def test_units_tab_lists_catalog():
    app = ConverterApp()
    async with app.run_test() as pilot:
        await pilot.press("f2")
        await pilot.pause()
        assert app.query_one(TabbedContent).active == "units"
        pane = app.query_one("#units-pane", UnitsScreen)
        assert "kilometers" in pane.text
        assert "degrees Celsius" in pane.text


@pytest.mark.asyncio
async def test_tab_switch_round_trip_refocuses_input():
    app = ConverterApp()
    async with app.run_test() as pilot:
        await pilot.press("f2")
        await pilot.pause()
        assert app.query_one(TabbedContent).active == "units"
        await pilot.press("f1")
        await pilot.pause()
        assert app.query_one(TabbedContent).active == "convert"
        assert app.focused is app.query_one("#convert-input", Input)
