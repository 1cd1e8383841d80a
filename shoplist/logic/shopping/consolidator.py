"""Ingredient consolidation.

Merges ingredient lines that share the same item and unit. Lines with
different units are never merged (no unit conversion).
"""
from __future__ import annotations
import logging
from typing import Dict, List, Tuple

from shoplist.domain.IngredientLine import IngredientLine
from shoplist.utilities.constants import NO_UNIT_KEY

__all__ = ["consolidate_ingredients", "consolidation_key"]

logger = logging.getLogger(__name__)


def consolidation_key(line: IngredientLine) -> Tuple[str, str]:
    return line.item, line.unit or NO_UNIT_KEY


def consolidate_ingredients(lines) -> List[IngredientLine]:
    """Merge lines with the same (item, unit) key.

    Returns new IngredientLine objects in first-appearance order of each key.
    A group is summed only when every member has a quantity; otherwise the
    first member stands for the whole group and later duplicates are dropped.
    Inputs are never mutated.
    """
    if not isinstance(lines, (list, tuple)):
        return []

    groups: Dict[Tuple[str, str], List[IngredientLine]] = {}
    for line in lines:
        if not isinstance(line, IngredientLine) or not line.item:
            continue
        groups.setdefault(consolidation_key(line), []).append(line)

    result: List[IngredientLine] = []
    for key, members in groups.items():
        first = members[0]
        if len(members) == 1:
            result.append(first.copy())
            continue
        if all(m.quantity is not None for m in members):
            total = sum(m.quantity for m in members)
            result.append(first.copy(quantity=total, consolidated=True))
        else:
            # TODO: surface dropped duplicates as a warning instead of discarding them
            logger.debug("Not summing %d entries for %s: missing quantity", len(members), key)
            result.append(first.copy())
    return result
