"""Numeric parsing and rounding helpers shared by services and schemas.

Recipe data arrives from JavaScript clients, so amounts and macro grams are
parsed the way `parseFloat` reads them (leading number, trailing text
ignored) and rounding follows `Math.round` / `toFixed` (half away from
zero on the exact binary value) rather than Python's banker's rounding.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_float_prefix(value: Any) -> Optional[float]:
    """Return the leading number of `value`, or None when there is none.

    >>> parse_float_prefix("2 cups")
    2.0
    >>> parse_float_prefix("pinch") is None
    True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return None
    return float(match.group(1))


def parse_grams(value: Any) -> float:
    """Parse a decimal-as-string macro value, treating garbage as 0."""
    parsed = parse_float_prefix(value)
    return parsed if parsed is not None else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward (JavaScript `Math.round`)."""
    return int(math.floor(value + 0.5))


def to_fixed(value: float, digits: int) -> str:
    """Format like JavaScript `Number.prototype.toFixed`."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

