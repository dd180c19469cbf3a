"""Number helpers — fixed-point rounding and JS-compatible formatting. No engine imports."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# toFixed leaves magnitudes at or above this untouched
_FIXED_LIMIT = 1e21

# Exponent range printed positionally by the host runtime: 1e-7 < |x| < 1e21
_MIN_POSITIONAL_EXP = -6
_MAX_POSITIONAL_EXP = 20


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward +inf (like Math.round). NaN/inf pass through."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def fixed(value: float, digits: int) -> float:
    """Round to ``digits`` decimals the way toFixed + parseFloat does.

    Rounds the exact binary value, ties away from zero. NaN/inf and
    magnitudes of 1e21 and above pass through.
    """
    if not math.isfinite(value) or abs(value) >= _FIXED_LIMIT:
        return value
    with localcontext() as dctx:
        dctx.prec = 64
        quantum = Decimal(1).scaleb(-digits)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Format a float the way the host scripting runtime prints numbers.

    Integral values drop the trailing ``.0``; ``-0`` prints as ``0``;
    exponents carry no leading zeros (``1e-7``, ``1e+21``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if float(value).is_integer() and abs(value) < _FIXED_LIMIT:
        return str(int(value))

    text = repr(float(value))
    if "e" not in text:
        return text
    mantissa, exp_text = text.split("e")
    exp = int(exp_text)
    if _MIN_POSITIONAL_EXP <= exp <= _MAX_POSITIONAL_EXP:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def format_fixed(value: float, digits: int) -> str:
    return format_number(fixed(value, digits))
