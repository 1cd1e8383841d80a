"""Fraction pretty-printing for quantities (0.5 -> "1/2", 2.25 -> "2 1/4")."""
from __future__ import annotations
import math
from typing import Dict, Optional, Tuple

__all__ = ["COMMON_FRACTIONS", "SIMPLE_DENOMINATORS", "format_as_fraction"]

# keyed by the value rounded half-up to 2 decimal places
COMMON_FRACTIONS: Dict[float, str] = {
    0.25: '1/4',
    0.33: '1/3',
    0.5: '1/2',
    0.67: '2/3',
    0.75: '3/4',
}
SIMPLE_DENOMINATORS: Tuple[int, ...] = (2, 3, 4, 5, 6, 8, 10, 12, 16)
TOLERANCE = 0.01


def _round2(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


def _closest_simple_fraction(fraction: float) -> Optional[Tuple[int, int]]:
    best = None
    for denom in SIMPLE_DENOMINATORS:
        for num in range(1, denom):
            diff = abs(fraction - num / denom)
            if diff < TOLERANCE and (best is None or diff < best[0]):
                best = (diff, num, denom)
    return (best[1], best[2]) if best else None


def format_as_fraction(value) -> str:
    """Render a quantity for people: whole numbers, common fractions, mixed numbers.

    Falls back to the plain decimal when no simple fraction is close enough;
    inf and nan come back as their string form.
    """
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return str(value)
    if value.is_integer():
        return str(int(value))

    rounded = _round2(value)
    if rounded in COMMON_FRACTIONS:
        return COMMON_FRACTIONS[rounded]

    whole = math.floor(value)
    fraction = value - whole
    if value > 1:
        common = COMMON_FRACTIONS.get(_round2(fraction))
        if common:
            return f"{whole} {common}"

    simple = _closest_simple_fraction(fraction)
    if simple:
        num, denom = simple
        return f"{whole} {num}/{denom}" if whole >= 1 else f"{num}/{denom}"

    return str(value)
