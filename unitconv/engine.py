"""
Conversion engine.

Length and weight convert linearly through the kind's reference unit:
    result = quantity * from.scale / to.scale

Temperature has one direct formula per ordered pair. Pairs are never chained
through an intermediate unit, so K→F is not computed as K→C→F and keeps its
own rounding.
"""

import logging

from unitconv.catalog import UnitDefinition, UnitKind

logger = logging.getLogger(__name__)

# Kinds that reject negative quantities
_NON_NEGATIVE_KINDS = (UnitKind.LENGTH, UnitKind.WEIGHT)


class ConversionError(Exception):
    """Base class for conversions that cannot be performed."""


class IncompatibleKinds(ConversionError):
    def __init__(self, from_unit: UnitDefinition, to_unit: UnitDefinition):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"Cannot convert {from_unit.kind.value} ({from_unit.key}) "
            f"to {to_unit.kind.value} ({to_unit.key})"
        )


class NegativeNotAllowed(ConversionError):
    def __init__(self, kind: UnitKind):
        self.kind = kind
        super().__init__(f"{kind.label} shouldn't be negative.")


_TEMPERATURE_FORMULAS = {
    ("CELSIUS", "FAHRENHEIT"): lambda v: v * 9 / 5 + 32,
    ("FAHRENHEIT", "CELSIUS"): lambda v: (v - 32) * 5 / 9,
    ("CELSIUS", "KELVIN"):     lambda v: v + 273.15,
    ("KELVIN", "CELSIUS"):     lambda v: v - 273.15,
    ("FAHRENHEIT", "KELVIN"):  lambda v: (v + 459.67) * 5 / 9,
    ("KELVIN", "FAHRENHEIT"):  lambda v: v * 9 / 5 - 459.67,
}


def convert_temperature(value: float, from_unit: UnitDefinition, to_unit: UnitDefinition) -> float:
    """Apply the direct formula for the pair; identity for same-unit or unknown pairs."""
    formula = _TEMPERATURE_FORMULAS.get((from_unit.key, to_unit.key))
    if formula is None:
        return value
    return formula(value)


def convert(quantity: float, from_unit: UnitDefinition, to_unit: UnitDefinition) -> float:
    """
    Convert quantity from one unit to another of the same kind.

    Raises:
        IncompatibleKinds:  the units belong to different kinds.
        NegativeNotAllowed: quantity < 0 for a length or weight unit.
    """
    if from_unit.kind is not to_unit.kind:
        raise IncompatibleKinds(from_unit, to_unit)

    if quantity < 0 and from_unit.kind in _NON_NEGATIVE_KINDS:
        raise NegativeNotAllowed(from_unit.kind)

    if from_unit.kind is UnitKind.TEMPERATURE:
        result = convert_temperature(quantity, from_unit, to_unit)
    else:
        result = quantity * from_unit.scale / to_unit.scale

    logger.debug("convert: %r %s -> %r %s", quantity, from_unit.key, result, to_unit.key)
    return result
