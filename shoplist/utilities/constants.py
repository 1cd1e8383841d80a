from typing import Final

DEFAULT_CATEGORY: Final[str] = "pantry"
NO_UNIT_KEY: Final[str] = "no-unit"

# Categories accepted in requests (order matters only for display of stats)
VALID_CATEGORIES: Final[list[str]] = ['meat', 'vegetables', 'pantry', 'spices', 'dairy']

# Advisory vocabulary for request validation. Wider than the parser's unit map
# (includes metric units the parser never extracts).
VALID_UNITS: Final[list[str]] = [
    'cup', 'cups', 'tablespoon', 'tablespoons', 'tbsp', 'tsp', 'teaspoon', 'teaspoons',
    'pound', 'pounds', 'lb', 'lbs', 'ounce', 'ounces', 'oz',
    'gram', 'grams', 'g', 'kilogram', 'kilograms', 'kg',
    'pint', 'pints', 'pt', 'quart', 'quarts', 'qt',
    'gallon', 'gallons', 'gal', 'liter', 'liters', 'l',
    'inch', 'inches', 'in',
]

DEFAULT_SINGLE_TITLE_SUFFIX: Final[str] = " - Shopping List"
DEFAULT_COMBINED_TITLE: Final[str] = "Combined Recipes - Shopping List"
DEFAULT_ALL_RECIPES_TITLE: Final[str] = "All Recipes - Shopping List"

# Reminder app deep links
SHORTCUTS_URL_SCHEME: Final[str] = "shortcuts://run-shortcut"
REMINDERKIT_URL_SCHEME: Final[str] = "x-apple-reminderkit://REMSaveRequest"
SUPPORTED_PLATFORMS: Final[tuple[str, ...]] = ("ios", "macos")
