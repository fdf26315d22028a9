"""
Line converter: one input line in, one output line out.

This is the only place where parse and conversion failures are turned into
user-facing text. Nothing raised while handling a line escapes run(), so a
bad line never affects the next one.

Examples:
  "5 km to miles"   → "5.0 kilometers is 3.1068... miles"
  "10 c to f"       → "10.0 degrees Celsius is 50.0 degrees Fahrenheit"
  "-5 kg to g"      → "Weight shouldn't be negative."
  "5 banana to km"  → "Conversion from ??? to kilometers is impossible"
"""

import logging

from unitconv.catalog import Catalog, UnitDefinition
from unitconv.engine import IncompatibleKinds, NegativeNotAllowed, convert
from unitconv.parser import ConvertToRequested, ParseError, parse_line
from unitconv.phrases import display_name
from unitconv.resolver import resolve

logger = logging.getLogger(__name__)

PARSE_ERROR = "Parse error"
UNKNOWN_UNIT = "???"

# Value used to force the plural form in "impossible" messages
_PLURAL = 2.0


def impossible(from_unit: UnitDefinition | None, to_unit: UnitDefinition | None) -> str:
    from_name = display_name(from_unit, _PLURAL) if from_unit else UNKNOWN_UNIT
    to_name = display_name(to_unit, _PLURAL) if to_unit else UNKNOWN_UNIT
    return f"Conversion from {from_name} to {to_name} is impossible"


class UnitConverter:
    """Parses, resolves, converts and phrases a single request."""

    def __init__(self, catalog: Catalog | None = None):
        self.catalog = catalog

    def run(self, line: str) -> str:
        try:
            return self._run(line.strip())
        except ConvertToRequested:
            return impossible(None, None)
        except ParseError as e:
            logger.debug("Parse failed: %s", e)
            return PARSE_ERROR
        except Exception:
            logger.exception("Unexpected failure converting %r", line)
            return PARSE_ERROR

    def _run(self, line: str) -> str:
        request = parse_line(line)
        from_unit = resolve(request.from_phrase, self.catalog)
        to_unit = resolve(request.to_phrase, self.catalog)

        if from_unit is None or to_unit is None:
            logger.debug("Unknown unit in %r", line)
            return impossible(from_unit, to_unit)

        try:
            result = convert(request.quantity, from_unit, to_unit)
        except IncompatibleKinds as e:
            logger.debug("%s", e)
            return impossible(from_unit, to_unit)
        except NegativeNotAllowed as e:
            return str(e)

        return (
            f"{request.quantity} {display_name(from_unit, request.quantity)} "
            f"is {result} {display_name(to_unit, result)}"
        )
