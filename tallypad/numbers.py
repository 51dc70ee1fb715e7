"""Number parsing, formatting and rounding for the calculator display.

The display only ever holds text, so every arithmetic step goes
text → float → text. These helpers pin down both directions:

- parse_number reads the longest numeric prefix ("5." → 5, "3abc" → 3)
  and yields NaN when there is none.
- format_number prints the shortest text that round-trips, integral
  values without a fractional part, exponent form only for very small or
  very large magnitudes.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

_NUMBER_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INFINITY_PREFIX_RE = re.compile(r"^\s*([+-]?)Infinity")

# Exponent range rendered in plain decimal notation.
_MIN_PLAIN_EXPONENT = -6
_MAX_PLAIN_EXPONENT = 20


def parse_number(text: str) -> float:
    """Parse the numeric prefix of text.

    Returns:
        The parsed float, or math.nan if text has no numeric prefix.
    """
    match = _NUMBER_PREFIX_RE.match(text)
    if match:
        return float(match.group(1))
    match = _INFINITY_PREFIX_RE.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return math.nan


def is_number(text: str) -> bool:
    """True if text has a numeric prefix."""
    return not math.isnan(parse_number(text))


def format_number(value: float) -> str:
    """Render a float the way the display shows it.

    8.0 → "8", 0.1 + 0.2 → "0.30000000000000004", 1e-7 → "1e-7",
    1e21 → "1e+21", nan → "NaN".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 10 ** (_MAX_PLAIN_EXPONENT + 1):
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if _MIN_PLAIN_EXPONENT <= exp <= _MAX_PLAIN_EXPONENT:
        return format(Decimal(text), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def round_to(value: float, decimals: int) -> float:
    """Round value to a number of decimal places, halves away from zero.

    Args:
        value: Number to round. NaN and infinities pass through.
        decimals: Decimal places to keep.
    """
    value = float(value)
    if not math.isfinite(value) or value.is_integer():
        return value
    # Round the shortest decimal text, not the binary float scaled up
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
