"""Unit normalization: spelling variants -> one canonical singular form per unit."""
from __future__ import annotations
from typing import Dict, Optional

__all__ = ["UNIT_MAP", "is_known_unit", "normalize_unit"]

UNIT_MAP: Dict[str, str] = {
    # Volume
    'tbsp': 'tablespoon',
    'tablespoon': 'tablespoon',
    'tablespoons': 'tablespoon',
    'tsp': 'teaspoon',
    'teaspoon': 'teaspoon',
    'teaspoons': 'teaspoon',
    'cup': 'cup',
    'cups': 'cup',
    'pt': 'pint',
    'pint': 'pint',
    'pints': 'pint',
    'qt': 'quart',
    'quart': 'quart',
    'quarts': 'quart',
    'gal': 'gallon',
    'gallon': 'gallon',
    'gallons': 'gallon',

    # Weight
    'oz': 'ounce',
    'ounce': 'ounce',
    'ounces': 'ounce',
    'lb': 'pound',
    'lbs': 'pound',
    'pound': 'pound',
    'pounds': 'pound',

    # Length
    'in': 'inch',
    'inch': 'inch',
    'inches': 'inch',
}


def is_known_unit(token: Optional[str]) -> bool:
    """True if token (any case) is one of the units the parser extracts."""
    if not token or not isinstance(token, str):
        return False
    return token.lower() in UNIT_MAP


def normalize_unit(token: Optional[str]) -> Optional[str]:
    """Return the canonical unit for token; unknown tokens come back unchanged."""
    if not token:
        return None
    return UNIT_MAP.get(token.lower(), token)
