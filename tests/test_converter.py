"""
End-to-end tests for single-line conversion output.
Run with: pytest tests/test_converter.py
"""

import pytest
from unitconv import converter as converter_module
from unitconv.catalog import Catalog
from unitconv.converter import UnitConverter


@pytest.fixture
def conv():
    return UnitConverter()


class TestSuccess:
    def test_km_to_miles(self, conv):
        assert conv.run("5 km to miles") == f"5.0 kilometers is {5000.0 / 1609.35} miles"

    def test_km_to_miles_prefix(self, conv):
        assert conv.run("5 km to miles").startswith("5.0 kilometers is 3.10685")

    def test_singular_both_sides(self, conv):
        assert conv.run("1 m to m") == "1.0 meter is 1.0 meter"

    def test_celsius_to_fahrenheit(self, conv):
        assert conv.run("10 c to f") == "10.0 degrees Celsius is 50.0 degrees Fahrenheit"

    def test_negative_temperature(self, conv):
        assert conv.run("-5 c to f") == "-5.0 degrees Celsius is 23.0 degrees Fahrenheit"

    def test_singular_degree(self, conv):
        assert conv.run("1 degree Celsius to k") == f"1.0 degree Celsius is {1.0 + 273.15} kelvins"

    def test_case_insensitive_units(self, conv):
        assert conv.run("2 FEET in M") == f"2.0 feet is {2.0 * 0.3048} meters"

    def test_inch_source(self, conv):
        assert conv.run("1 inch to cm") == f"1.0 inch is {0.0254 / 0.01} centimeters"

    def test_inch_target(self, conv):
        assert conv.run("1 cm to in") == f"1.0 centimeter is {0.01 / 0.0254} inches"

    def test_surrounding_whitespace(self, conv):
        assert conv.run("  1 m to m \n") == "1.0 meter is 1.0 meter"


class TestFailures:
    def test_parse_error(self, conv):
        assert conv.run("abc") == "Parse error"

    def test_inch_abbreviation_as_source_is_parse_error(self, conv):
        assert conv.run("5 in to cm") == "Parse error"

    def test_early_separator_is_parse_error(self, conv):
        assert conv.run("5 to km to m") == "Parse error"

    def test_bad_number(self, conv):
        assert conv.run("x km to m") == "Parse error"

    def test_unknown_from(self, conv):
        assert conv.run("5 banana to km") == "Conversion from ??? to kilometers is impossible"

    def test_unknown_to(self, conv):
        assert conv.run("5 kelvin to banana") == "Conversion from kelvins to ??? is impossible"

    def test_both_unknown(self, conv):
        assert conv.run("5 apples to pears") == "Conversion from ??? to ??? is impossible"

    def test_kind_mismatch_uses_plurals(self, conv):
        assert conv.run("1 km to kg") == "Conversion from kilometers to kilograms is impossible"

    def test_temperature_mismatch(self, conv):
        assert conv.run("1 k to lb") == "Conversion from kelvins to pounds is impossible"

    def test_negative_weight(self, conv):
        assert conv.run("-5 kg to g") == "Weight shouldn't be negative."

    def test_negative_length(self, conv):
        assert conv.run("-3 m to km") == "Length shouldn't be negative."

    def test_unknown_unit_wins_over_negative(self, conv):
        assert conv.run("-5 banana to km") == "Conversion from ??? to kilometers is impossible"

    def test_convert_to_special_case(self, conv):
        assert conv.run("5 km convertTo miles") == "Conversion from ??? to ??? is impossible"

    def test_unexpected_error_is_parse_error(self, conv, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")
        monkeypatch.setattr(converter_module, "convert", boom)
        assert conv.run("1 m to km") == "Parse error"

    def test_failure_does_not_affect_next_line(self, conv):
        assert conv.run("abc") == "Parse error"
        assert conv.run("1 m to m") == "1.0 meter is 1.0 meter"


class TestCustomCatalog:
    def test_empty_catalog_knows_no_units(self):
        conv = UnitConverter(Catalog([]))
        assert conv.run("5 km to m") == "Conversion from ??? to ??? is impossible"
