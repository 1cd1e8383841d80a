"""Ingredient line parser.

Turns a raw recipe line such as "2 1/4 lbs ground beef" into an IngredientLine:
quantity 2.25, unit "pound", item "ground beef", category "meat".
"""
from __future__ import annotations
import re
from typing import Optional

from shoplist.domain.IngredientLine import IngredientLine
from shoplist.logic.ingredients.categories import categorize_ingredient
from shoplist.logic.ingredients.quantity import split_leading_quantity
from shoplist.logic.ingredients.units import is_known_unit, normalize_unit

__all__ = ["parse_ingredient"]

_UNIT_TOKEN_RE = re.compile(r"^(\w+)")


def parse_ingredient(ingredient_text) -> Optional[IngredientLine]:
    """Parse one ingredient line; returns None for empty or non-string input.

    The item is taken from the lower-cased working copy, so it is always lower
    case. A unit is only looked for right after a quantity, and only words from
    the unit map count as units ("2 eggs" keeps "eggs" as the item).
    """
    if not ingredient_text or not isinstance(ingredient_text, str):
        return None

    original = ingredient_text.strip()
    if not original:
        return None

    quantity, remaining = split_leading_quantity(original.lower())

    unit = None
    if quantity is not None:
        m = _UNIT_TOKEN_RE.match(remaining)
        if m and is_known_unit(m.group(1)):
            unit = normalize_unit(m.group(1))
            remaining = remaining[m.end():].strip()

    item = remaining or original
    return IngredientLine(
        item=item,
        quantity=quantity,
        unit=unit,
        original_text=original,
        category=categorize_ingredient(item),
    )
