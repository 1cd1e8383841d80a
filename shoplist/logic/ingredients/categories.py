"""Grocery category heuristics.

An ordered rule table of (category, keywords). The first category with a
keyword occurring anywhere in the lower-cased item wins; plain substring
matching, so "green onions" and "onion powder" both hit "onion".
"""
from __future__ import annotations
from typing import List, Optional, Tuple
from shoplist.utilities.constants import DEFAULT_CATEGORY

__all__ = ["CATEGORY_RULES", "CATEGORIES", "categorize_ingredient"]

CATEGORY_RULES: List[Tuple[str, Tuple[str, ...]]] = [
    ("meat", (
        'beef', 'pork', 'chicken', 'turkey', 'lamb', 'fish', 'salmon', 'tuna', 'shrimp',
        'brisket', 'ribs', 'steak', 'ground beef', 'ground pork', 'bacon', 'sausage',
    )),
    ("vegetables", (
        'onion', 'onions', 'carrot', 'carrots', 'celery', 'bell pepper', 'peppers',
        'mushroom', 'mushrooms', 'tomato', 'tomatoes', 'potato', 'potatoes',
        'ginger', 'jalapeño', 'jalapeños',
    )),
    ("spices", (
        'salt', 'pepper', 'paprika', 'cumin', 'chili powder', 'garlic powder',
        'onion powder', 'oregano', 'thyme', 'rosemary', 'bay leaves', 'cayenne',
        'black pepper', 'white pepper', 'red pepper flakes', 'vanilla',
    )),
    ("dairy", (
        'milk', 'butter', 'cheese', 'cream', 'yogurt', 'sour cream', 'cream cheese',
    )),
    ("pantry", (
        'flour', 'sugar', 'brown sugar', 'honey', 'oil', 'olive oil', 'vinegar',
        'soy sauce', 'worcestershire', 'ketchup', 'mustard', 'bbq sauce', 'sauce',
    )),
]

CATEGORIES: Tuple[str, ...] = tuple(name for name, _ in CATEGORY_RULES)


def categorize_ingredient(item: Optional[str]) -> str:
    """Classify an ingredient name into a grocery category (default 'pantry')."""
    if not item:
        return DEFAULT_CATEGORY
    lower_item = item.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lower_item for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
