"""
Input parser: turns one line of free text into a conversion request.

Syntax:
    <number> <from unit words...> to <to unit words...>
    <number> <from unit words...> in <to unit words...>

Unit phrases may span several words ("degrees Celsius"). The separator is
the first literal 'to' or 'in' anywhere in the line; if it sits before word
position 2, or is the last word, the line is a parse error. That makes
"5 in to cm" a parse error: the inch abbreviation is taken as the separator.

    "5 km to miles"
    "1 degree Celsius in kelvins"
    "12 inches to cm"

Words are split on runs of whitespace, so "5  km to m" reads the same as
"5 km to m". The quantity must be a plain float literal: digit-group
underscores ("1_000") are rejected; "nan" and "inf" are accepted.

Any line containing 'convertTo' (any case) is rejected outright with
ConvertToRequested, before the grammar is applied.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SEPARATORS = ("to", "in")

_CONVERT_TO = re.compile(r"convertto", re.IGNORECASE)


class ParseError(ValueError):
    """The line does not follow the '<number> <unit> to <unit>' shape."""


class ConvertToRequested(Exception):
    """The line contains 'convertTo'; no unit resolution is attempted."""


@dataclass
class ConversionRequest:
    """Parsed conversion request."""
    quantity: float
    from_phrase: str
    to_phrase: str


def _separator_index(parts: list[str]) -> int:
    for i, part in enumerate(parts):
        if part in SEPARATORS:
            return i
    return -1


def parse_line(line: str) -> ConversionRequest:
    """
    Parse a conversion line.

    Raises ConvertToRequested for the 'convertTo' special case and
    ParseError for anything that does not match the grammar.
    """
    if _CONVERT_TO.search(line):
        raise ConvertToRequested(line)

    parts = line.split()
    sep = _separator_index(parts)
    if sep < 2 or sep >= len(parts) - 1:
        raise ParseError(f"No usable 'to'/'in' separator in {line!r}")

    if "_" in parts[0]:
        raise ParseError(f"Not a number: {parts[0]!r}")
    try:
        quantity = float(parts[0])
    except ValueError as e:
        raise ParseError(f"Not a number: {parts[0]!r}") from e

    request = ConversionRequest(
        quantity=quantity,
        from_phrase=" ".join(parts[1:sep]),
        to_phrase=" ".join(parts[sep + 1:]),
    )
    logger.debug("Parsed %r -> %s", line, request)
    return request
