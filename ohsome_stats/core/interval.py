"""ISO-8601 duration tokens -> native interval expressions.

Only single-component durations are supported, since the engine's
interval arithmetic takes exactly one unit:

    P1Y -> "1 YEAR"     P3M -> "3 MONTH"    P2W -> "2 WEEK"
    P1D -> "1 DAY"      PT6H -> "6 HOUR"    PT15M -> "15 MINUTE"
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ohsome_stats.core.exceptions import InvalidIntervalError

DATE_UNITS = {"Y": "YEAR", "M": "MONTH", "W": "WEEK", "D": "DAY"}
TIME_UNITS = {"H": "HOUR", "M": "MINUTE"}

# Full grammar of the accepted subset; used to tell "malformed" apart
# from "well-formed but not translatable".
_GRAMMAR = re.compile(
    r"^P(?:\d+Y)?(?:\d+M)?(?:\d+W)?(?:\d+D)?(?:T(?:\d+H)?(?:\d+M)?)?$"
)
_COMPONENT = re.compile(r"(\d+)([A-Z])")


@dataclass(frozen=True)
class Interval:
    magnitude: int
    unit: str

    @property
    def native(self) -> str:
        return f"{self.magnitude} {self.unit}"


def parse_interval(token: str) -> Interval:
    """Parse a duration token into a single-unit Interval.

    Raises InvalidIntervalError for tokens outside the grammar, tokens that
    mix date and time parts, tokens with several components, and zero widths.
    """
    if not token or not _GRAMMAR.match(token) or token in ("P", "PT") or token.endswith("T"):
        raise InvalidIntervalError(token, "expected P<n>[Y|M|W|D] or PT<n>[H|M]")

    if "T" in token:
        date_part, time_part = token.split("T", 1)
        if date_part != "P":
            raise InvalidIntervalError(token, "date and time components cannot be combined")
        body, vocabulary = time_part, TIME_UNITS
    else:
        body, vocabulary = token[1:], DATE_UNITS

    components = _COMPONENT.findall(body)
    if len(components) != 1:
        raise InvalidIntervalError(token, "exactly one duration component is supported")

    digits, letter = components[0]
    magnitude = int(digits)
    if magnitude == 0:
        raise InvalidIntervalError(token, "interval width must be positive")
    return Interval(magnitude=magnitude, unit=vocabulary[letter])


def translate_interval(token: str) -> str:
    """Translate a duration token to the engine's interval syntax, e.g. "P1M" -> "1 MONTH"."""
    return parse_interval(token).native


def is_valid_interval(token: str) -> bool:
    try:
        parse_interval(token)
    except InvalidIntervalError:
        return False
    return True
