"""Plain-text rendering of shopping lists (categorized or flat bullet lists)."""
from __future__ import annotations
from typing import List

from shoplist.domain.IngredientLine import IngredientLine
from shoplist.domain.ShoppingList import ShoppingList
from shoplist.logic.formatting.fractions import format_as_fraction

__all__ = ["format_item", "format_categories", "format_flat", "format_for_display"]

BULLET = "•"


def format_item(item: IngredientLine) -> str:
    """'<quantity> <unit> <item>', leaving out the parts that are missing."""
    if item is None:
        return ""
    parts: List[str] = []
    if item.quantity is not None:
        parts.append(format_as_fraction(item.quantity))
        if item.unit:
            parts.append(item.unit)
    parts.append(item.item or "Unknown item")
    return " ".join(parts)


def format_categories(shopping_list: ShoppingList) -> str:
    blocks = []
    for category, items in (shopping_list.organized or {}).items():
        lines = [f"{category.upper()}:"]
        lines.extend(f"{BULLET} {format_item(item)}" for item in items)
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


def format_flat(shopping_list: ShoppingList) -> str:
    items = shopping_list.items if isinstance(shopping_list.items, list) else []
    return "".join(f"{BULLET} {format_item(item)}\n" for item in items)


def format_for_display(shopping_list: ShoppingList, organize_by_category: bool = False) -> str:
    '''
    Renders a shopping list as text: title, underline, then either one block per
    category (upper-cased header) or a single bullet list.
    '''
    if not isinstance(shopping_list, ShoppingList) or not shopping_list.title:
        return "Invalid shopping list"

    output = f"{shopping_list.title}\n"
    output += "=" * len(shopping_list.title) + "\n\n"

    if organize_by_category and shopping_list.organized:
        output += format_categories(shopping_list)
    elif shopping_list.items:
        output += format_flat(shopping_list)

    if shopping_list.recipes:
        output += f"\nFrom {len(shopping_list.recipes)} recipe(s)"
    return output
