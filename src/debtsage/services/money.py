"""Currency rounding shared by every calculator."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")

# Balances at or below this are treated as paid off.
PAID_OFF_EPSILON = 0.01


def round_money(value: float) -> float:
    """Round to cents using half-up rounding.

    The float is routed through its shortest ``repr`` so values such as
    ``2.675`` round the way they read rather than the way they are stored.
    This differs from scaling by 100 and rounding the float: ``2.675``
    becomes 2.68 rather than 2.67, and negative halves round away from zero
    (``-1.005`` becomes -1.01) rather than toward positive infinity.
    Non-finite values pass through unchanged.
    """

    if not math.isfinite(value):
        return value
    return float(Decimal(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP))


def sum_money(values) -> float:
    """Sum values and round the result to cents."""

    return round_money(sum(values, 0.0))
