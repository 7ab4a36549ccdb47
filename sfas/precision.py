"""Monetary precision helpers."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

_CENTS = Decimal("0.01")

# Enough significant digits for the largest finite float (~1.8e308) plus cents
_PRECISION = 400


def round_money(value: float) -> float:
    """Round a monetary amount to two decimal places.

    Ties round away from zero, and the float is read through its
    shortest decimal text, so ``1000.005`` becomes ``1000.01`` even
    though its binary value sits just below the tie. Infinities and
    NaN are returned unchanged.

    Args:
        value: Amount to round.

    Returns:
        The amount rounded to cents.

    """
    value = float(value)
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))
