"""Lenient parsing of user-entered quantities.

Quantity inputs are never rejected. Whatever the customer types is read the
way the storefront has always read it: take the leading integer, and fall back
to 1 when there is no number (or the number is zero). Negative numbers are
kept, so ``Cart.set_quantity`` removes the line.
"""

import math
import re

DEFAULT_QUANTITY = 1

# ASCII digits only: full-width and other Unicode digits are not numbers here.
_LEADING_INTEGER = re.compile(r"^\s*([+-]?[0-9]+)")

# Floats outside this range are written in exponent form ("1e+21", "1e-07")
# before parsing, so only the leading mantissa digits count.
_EXPONENT_FORM_ABOVE = 1e21
_EXPONENT_FORM_BELOW = 1e-6


def _parse_leading_int(raw) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return None
        if abs(raw) >= _EXPONENT_FORM_ABOVE or 0 < abs(raw) < _EXPONENT_FORM_BELOW:
            raw = repr(raw)
        else:
            return math.trunc(raw)

    match = _LEADING_INTEGER.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def coerce_quantity(raw) -> int:
    """Normalise a raw quantity input to an integer.

    >>> coerce_quantity("3")
    3
    >>> coerce_quantity("2 boxes")
    2
    >>> coerce_quantity("")
    1
    >>> coerce_quantity("0")
    1
    >>> coerce_quantity("-5")
    -5
    """
    value = _parse_leading_int(raw)
    if not value:
        return DEFAULT_QUANTITY
    return value
