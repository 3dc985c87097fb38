"""Rounding helpers shared by the timer and its diff utilities."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_DOWN, Decimal, localcontext


def round_half_down(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` digits, breaking ties towards zero.

    The float is converted through its shortest ``repr`` so that literals such
    as ``0.00005`` are treated as exact ties rather than as their binary
    approximation. Infinities and NaN are returned unchanged.
    """

    if precision < 0:
        raise ValueError("precision must be non-negative")
    value = float(value)
    if not math.isfinite(value):
        return value
    number = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, number.adjusted() + precision + 2)
        return float(number.quantize(quantum, rounding=ROUND_HALF_DOWN))


def abs_round_diff(a: float, b: float, precision: int) -> float:
    """Return ``|a - b|`` rounded half-down to ``precision`` digits."""

    return abs(round_half_down(a - b, precision))


__all__ = ["round_half_down", "abs_round_diff"]
