"""Number rendering for result fields and calculation steps.

Result fields are fixed to two decimals with ties rounded away from zero,
applied to the exact binary value of the float.  Raw inputs embedded in the
step text are rendered plainly: whole numbers without a decimal point,
everything else in shortest round-trip digits, switching to exponent form
only outside 1e-6 to 1e21.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal


_WIDE = Context(prec=400)


def format_fixed(value: float, digits: int = 2) -> str:
    """Format ``value`` with exactly ``digits`` fractional digits.

    Parameters
    ----------
    value : float
        Number to format.  Non-finite values are rendered as
        ``"Infinity"``, ``"-Infinity"`` or ``"NaN"``.
    digits : int
        Number of fractional digits.

    Returns
    -------
    str
        Decimal string, e.g. ``format_fixed(0.125) == "0.13"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_WIDE
    )
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:f}"


def format_number(value: float) -> str:
    """Render a raw number the way it is echoed in step text.

    Shortest round-trip digits, in fixed notation for magnitudes from 1e-6
    up to 1e21 and in exponent form outside that range:
    ``4000.0`` -> ``"4000"``, ``0.00005`` -> ``"0.00005"``,
    ``1e-07`` -> ``"1e-7"``, ``1e21`` -> ``"1e+21"``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # position of the decimal point relative to the first digit
    n = exponent + k

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        power = n - 1
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + body
