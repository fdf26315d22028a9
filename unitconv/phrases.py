"""
Phrase formatter: picks the display name of a unit for a given value.

Singular is used only when the value is exactly 1.0. There is no tolerance:
1.0000001 reads as plural, and so do 0 and negative values.
"""

from unitconv.catalog import UnitDefinition, UnitKind

# Temperature phrasing: key -> (singular, plural)
_TEMPERATURE_PHRASES = {
    "CELSIUS":    ("degree Celsius", "degrees Celsius"),
    "FAHRENHEIT": ("degree Fahrenheit", "degrees Fahrenheit"),
    "KELVIN":     ("kelvin", "kelvins"),
}


def _name_at(unit: UnitDefinition, position: int) -> str:
    if position < len(unit.names):
        return unit.names[position]
    return unit.names[0]


def display_name(unit: UnitDefinition, value: float) -> str:
    singular = value == 1.0

    if unit.kind is UnitKind.TEMPERATURE:
        phrases = _TEMPERATURE_PHRASES.get(unit.key)
        if phrases is None:
            return unit.names[0]
        return phrases[0] if singular else phrases[1]

    return _name_at(unit, 1 if singular else 2)
