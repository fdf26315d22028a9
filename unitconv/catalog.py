"""
Unit catalog: the fixed table of units the converter understands.

Every unit belongs to one kind. Length and weight units carry a scale factor
relative to the kind's reference unit (meters, grams); temperature units
have no scale and are converted with dedicated formulas in engine.py.

Name lists follow a positional convention for length and weight:
    names[0]  abbreviation      ("km")
    names[1]  singular          ("kilometer")
    names[2]  plural            ("kilometers")

The table is turned into a flat, case-insensitive name index once, at import
time, and never changes afterwards.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class UnitKind(Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"

    @property
    def label(self) -> str:
        """'Length', 'Weight', 'Temperature'."""
        return self.name.capitalize()


@dataclass(frozen=True)
class UnitDefinition:
    """One convertible unit."""
    key: str                     # stable identifier, e.g. "KILOMETER"
    scale: float                 # multiplier to the reference unit (0.0 for temperature)
    names: tuple[str, ...]       # recognized aliases, see module docstring
    kind: UnitKind

    @property
    def abbreviation(self) -> str:
        return self.names[0]


class DuplicateUnitName(ValueError):
    """Two units register the same name (compared lower-cased)."""


# (key, scale, names)
_LENGTH = [
    ("METER",      1.0,     ("m", "meter", "meters")),
    ("KILOMETER",  1000.0,  ("km", "kilometer", "kilometers")),
    ("MILLIMETER", 0.001,   ("mm", "millimeter", "millimeters")),
    ("CENTIMETER", 0.01,    ("cm", "centimeter", "centimeters")),
    ("MILE",       1609.35, ("mi", "mile", "miles")),
    ("YARD",       0.9144,  ("yd", "yard", "yards")),
    ("FOOT",       0.3048,  ("ft", "foot", "feet")),
    ("INCH",       0.0254,  ("in", "inch", "inches")),
]
_WEIGHT = [
    ("GRAM",       1.0,     ("g", "gram", "grams")),
    ("KILOGRAM",   1000.0,  ("kg", "kilogram", "kilograms")),
    ("MILLIGRAM",  0.001,   ("mg", "milligram", "milligrams")),
    ("POUND",      453.592, ("lb", "pound", "pounds")),
    ("OUNCE",      28.3495, ("oz", "ounce", "ounces")),
]
_TEMPERATURE = [
    ("CELSIUS",    0.0, ("c", "dc", "celsius", "degree Celsius", "degrees Celsius")),
    ("FAHRENHEIT", 0.0, ("f", "df", "fahrenheit", "degree Fahrenheit", "degrees Fahrenheit")),
    ("KELVIN",     0.0, ("k", "kelvin", "kelvins")),
]


def _build_units() -> list[UnitDefinition]:
    units = []
    for table, kind in (
        (_LENGTH, UnitKind.LENGTH),
        (_WEIGHT, UnitKind.WEIGHT),
        (_TEMPERATURE, UnitKind.TEMPERATURE),
    ):
        for key, scale, names in table:
            units.append(UnitDefinition(key=key, scale=scale, names=names, kind=kind))
    return units


UNITS: tuple[UnitDefinition, ...] = tuple(_build_units())


class Catalog:
    """Read-only, case-insensitive name index over a set of units."""

    def __init__(self, units=UNITS):
        self._units: tuple[UnitDefinition, ...] = tuple(units)
        index: dict[str, UnitDefinition] = {}
        for unit in self._units:
            for name in unit.names:
                lowered = name.lower()
                existing = index.get(lowered)
                if existing is not None:
                    raise DuplicateUnitName(
                        f"Unit name '{name}' of {unit.key} already registered by {existing.key}"
                    )
                index[lowered] = unit
        self._index = index
        logger.debug("Catalog built: %d units, %d names", len(self._units), len(index))

    @property
    def units(self) -> tuple[UnitDefinition, ...]:
        """Units in registration order."""
        return self._units

    def names(self) -> list[str]:
        return list(self._index.keys())

    def lookup(self, name: str) -> UnitDefinition | None:
        """Exact, case-insensitive match. None if the name is unknown."""
        return self._index.get(name.lower())

    def by_kind(self, kind: UnitKind) -> list[UnitDefinition]:
        return [u for u in self._units if u.kind is kind]

    def get(self, key: str) -> UnitDefinition:
        """Fetch a unit by its key ("KELVIN"). Raises KeyError if absent."""
        for unit in self._units:
            if unit.key == key:
                return unit
        raise KeyError(key)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._index

    def __len__(self) -> int:
        return len(self._units)


CATALOG = Catalog()
