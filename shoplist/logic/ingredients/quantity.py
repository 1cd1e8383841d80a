"""Quantity parsing: integers, decimals, simple fractions and mixed numbers.

Provides parse_fraction(text) for standalone values and
split_leading_quantity(text) for the start of an ingredient line.
"""
from __future__ import annotations
import math
import re
from typing import Optional, Tuple, Union

__all__ = ["parse_fraction", "split_leading_quantity", "LEADING_QUANTITY_RE"]

Number = Union[int, float]

# mixed "2 1/2", fraction "1/2", decimal "2.5" or integer "2", tried as one pattern
LEADING_QUANTITY_RE = re.compile(r"^(\d+(?:\s+\d+/\d+|\.\d+|/\d+)?)")

_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+)$")


def _divide(numerator: int, denominator: int) -> Optional[float]:
    if denominator == 0:
        return None
    return numerator / denominator


def _finite(value) -> Optional[Number]:
    # ints too large for a float are rejected like inf and nan
    try:
        return value if math.isfinite(value) else None
    except OverflowError:
        return None


def _convert(s: str) -> Optional[Number]:
    m = _MIXED_RE.match(s)
    if m:
        part = _divide(int(m.group(2)), int(m.group(3)))
        return None if part is None else int(m.group(1)) + part

    m = _FRACTION_RE.match(s)
    if m:
        return _divide(int(m.group(1)), int(m.group(2)))

    if _INTEGER_RE.match(s):
        return int(s)
    if _DECIMAL_RE.match(s):
        return float(s)
    return None


def parse_fraction(text) -> Optional[Number]:
    """Parse a numeric token into a number.

    Accepts mixed numbers ("2 1/2"), simple fractions ("3/4"), decimals and
    integers. Numbers pass through unchanged. Anything else, including a zero
    denominator or a value that does not fit a finite float, yields None
    rather than raising.
    """
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, (int, float)):
        return _finite(text)

    s = str(text).strip()
    if not s:
        return None

    try:
        value = _convert(s)
    except (ValueError, OverflowError):
        # digit runs past the int-string conversion limit
        return None
    return None if value is None else _finite(value)


def split_leading_quantity(text: str) -> Tuple[Optional[Number], str]:
    """Split a leading quantity off text.

    Returns (quantity, remainder). When no numeric run starts the text the
    quantity is None and the remainder is the trimmed input.
    """
    m = LEADING_QUANTITY_RE.match(text)
    if not m:
        return None, text.strip()
    quantity = parse_fraction(m.group(1))
    if quantity is None:
        return None, text.strip()
    return quantity, text[m.end():].strip()
