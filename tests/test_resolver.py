"""Tests for the name resolver."""

from unitconv.catalog import Catalog, UnitDefinition, UnitKind
from unitconv.resolver import resolve


def test_resolves_multiword_phrase():
    assert resolve("degrees Celsius").key == "CELSIUS"


def test_resolves_mixed_case():
    assert resolve("KiLoGrAmS").key == "KILOGRAM"


def test_unknown_is_none_not_error():
    assert resolve("banana") is None
    assert resolve("") is None


def test_inch_abbreviation():
    assert resolve("in").key == "INCH"


def test_custom_catalog():
    unit = UnitDefinition("FURLONG", 201.168, ("fur", "furlong", "furlongs"), UnitKind.LENGTH)
    cat = Catalog([unit])
    assert resolve("Furlongs", cat) is unit
    assert resolve("km", cat) is None


def test_empty_catalog_is_respected():
    assert resolve("km", Catalog([])) is None
