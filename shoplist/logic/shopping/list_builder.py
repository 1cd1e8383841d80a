"""Shopping list builder.

Turns recipes into ShoppingList values and derives new lists from existing ones:
generate_from_recipe, generate_from_multiple_recipes, organize_by_category,
scale_quantities, filter_by_category, add_recipe_to_list.

Every function returns a result dict:
    {"success": True, "shopping_list": ShoppingList}
    {"success": False, "error": "<reason>"}
Source lists are never mutated; transforms return a new ShoppingList.
"""
import logging
import math
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from shoplist.domain.IngredientLine import IngredientLine
from shoplist.domain.Recipe import Recipe
from shoplist.domain.ShoppingList import ShoppingList
from shoplist.logic.ingredients.parser import parse_ingredient
from shoplist.logic.shopping.consolidator import consolidate_ingredients
from shoplist.utilities.constants import (
    DEFAULT_CATEGORY,
    DEFAULT_COMBINED_TITLE,
    DEFAULT_SINGLE_TITLE_SUFFIX,
)

logger = logging.getLogger(__name__)


def _fail(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    result = {"success": False, "error": error}
    if details:
        result["details"] = details
    return result


def _ok(shopping_list: ShoppingList) -> Dict[str, Any]:
    return {"success": True, "shopping_list": shopping_list}


def _as_recipe(recipe) -> Optional[Recipe]:
    if isinstance(recipe, Recipe):
        return recipe
    if isinstance(recipe, dict):
        return Recipe.from_dict(recipe)
    return None


def _format_multiplier(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_lines(lines: Iterable[Any]) -> List[IngredientLine]:
    parsed = (parse_ingredient(line) for line in lines)
    return [p for p in parsed if p is not None]


def validate_recipe(recipe) -> Dict[str, Any]:
    '''Checks that a recipe has a title and a non-empty ingredients list.'''
    r = _as_recipe(recipe)
    if r is None:
        return {"is_valid": False, "error": "Recipe must be an object"}
    if not isinstance(r.title, str) or not r.title.strip():
        return {"is_valid": False, "error": "Recipe must have a valid title"}
    if not isinstance(r.ingredients, list):
        return {"is_valid": False, "error": "Recipe must have ingredients array"}
    if not r.ingredients:
        return {"is_valid": False, "error": "Recipe must have at least one ingredient"}
    return {"is_valid": True}


def organize_by_category(items) -> Dict[str, List[IngredientLine]]:
    """Group items by category, keeping their relative order within each category."""
    if not isinstance(items, list):
        return {}
    organized: Dict[str, List[IngredientLine]] = {}
    for item in items:
        category = item.category or DEFAULT_CATEGORY
        organized.setdefault(category, []).append(item)
    return organized


def create_shopping_list(items: List[IngredientLine], title: str, recipe_ids: List[str]) -> ShoppingList:
    return ShoppingList(
        title=title,
        items=items,
        organized=organize_by_category(items),
        recipes=recipe_ids,
        created_at=datetime.now(),
    )


def generate_from_recipe(recipe):
    """Build an unconsolidated shopping list from one recipe."""
    if recipe is None or not isinstance(recipe, (Recipe, dict)):
        return _fail("Invalid recipe object")
    r = _as_recipe(recipe)

    if not r.title:
        return _fail("Recipe must have a title")
    if not isinstance(r.ingredients, list):
        return _fail("Invalid recipe ingredients")
    if not r.ingredients:
        return _fail("Recipe has no ingredients")

    items = _parse_lines(r.ingredients)
    logger.debug("Parsed %d of %d ingredient lines for recipe %s", len(items), len(r.ingredients), r.id)
    return _ok(create_shopping_list(items, f"{r.title}{DEFAULT_SINGLE_TITLE_SUFFIX}", [r.id]))


def generate_from_multiple_recipes(recipes, title: Optional[str] = None):
    """Build one consolidated shopping list from several recipes.

    Recipes without a list of ingredients are skipped; every other recipe is
    recorded in the list's recipe ids, even when none of its lines parse.
    """
    if not isinstance(recipes, (list, tuple)):
        return _fail("Recipes must be a list")
    if not recipes:
        return _fail("No recipes provided")

    all_items: List[IngredientLine] = []
    recipe_ids: List[str] = []
    for recipe in recipes:
        r = _as_recipe(recipe)
        if r is None or not isinstance(r.ingredients, list):
            logger.warning("Skipping recipe without an ingredients list: %r", recipe)
            continue
        recipe_ids.append(r.id)
        all_items.extend(_parse_lines(r.ingredients))

    if not all_items:
        return _fail("No valid ingredients found in recipes")

    consolidated = consolidate_ingredients(all_items)
    logger.info("Consolidated %d lines into %d items from %d recipes",
                len(all_items), len(consolidated), len(recipe_ids))
    return _ok(create_shopping_list(consolidated, title or DEFAULT_COMBINED_TITLE, recipe_ids))


def scale_quantities(shopping_list: ShoppingList, multiplier):
    """Return a copy of the list with every known quantity multiplied."""
    if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)) \
            or not math.isfinite(multiplier) or multiplier <= 0:
        return _fail("Scale multiplier must be greater than 0")
    if not isinstance(shopping_list, ShoppingList) or not isinstance(shopping_list.items, list):
        return _fail("Invalid shopping list")

    scaled_items = [
        item.copy(
            quantity=item.quantity * multiplier if item.quantity is not None else None,
            scaled=True,
            original_quantity=item.quantity,
        )
        for item in shopping_list.items
    ]
    scaled = shopping_list.copy_with(
        title=f"{shopping_list.title} (scaled {_format_multiplier(multiplier)}x)",
        items=scaled_items,
        organized=organize_by_category(scaled_items),
        scale_multiplier=multiplier,
        scaled_at=datetime.now(),
    )
    return _ok(scaled)


def filter_by_category(shopping_list: ShoppingList, categories):
    """Return a copy of the list holding only items in the given categories."""
    if not categories or not isinstance(categories, (list, tuple, set, frozenset)):
        return _fail("No categories specified")
    if not isinstance(shopping_list, ShoppingList) or not isinstance(shopping_list.items, list):
        return _fail("Invalid shopping list")

    wanted = list(categories)
    filtered_items = [item.copy() for item in shopping_list.items if item.category in wanted]
    filtered = shopping_list.copy_with(
        title=f"{shopping_list.title} ({', '.join(wanted)})",
        items=filtered_items,
        organized=organize_by_category(filtered_items),
        filtered_categories=wanted,
    )
    return _ok(filtered)


def add_recipe_to_list(existing: ShoppingList, recipe):
    """Merge a recipe's ingredients into an existing list, consolidating duplicates."""
    if not isinstance(existing, ShoppingList) or not isinstance(existing.items, list):
        return _fail("Invalid shopping list")
    r = _as_recipe(recipe)
    if r is None or not r.ingredients:
        return _fail("Invalid recipe")

    new_result = generate_from_recipe(r)
    if not new_result["success"]:
        return new_result

    items = consolidate_ingredients(existing.items + new_result["shopping_list"].items)
    updated = existing.copy_with(
        items=items,
        organized=organize_by_category(items),
        recipes=existing.recipes + [r.id],
        modified_at=datetime.now(),
    )
    return _ok(updated)


__all__ = [
    'validate_recipe', 'organize_by_category', 'create_shopping_list',
    'generate_from_recipe', 'generate_from_multiple_recipes',
    'scale_quantities', 'filter_by_category', 'add_recipe_to_list',
]
