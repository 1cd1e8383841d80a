"""
Request validation schemas using Pydantic, plus advisory checks for units and categories.
"""
import math
import re
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from shoplist.utilities.config import MAX_LIST_NAME_LENGTH, MAX_RECIPE_IDS
from shoplist.utilities.constants import DEFAULT_CATEGORY, VALID_CATEGORIES, VALID_UNITS

_RECIPE_ID_RE = re.compile(r'^[a-zA-Z0-9._-]+$')
_SCRIPT_RE = re.compile(r'<script[^>]*>.*?</script>', re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r'<[^>]*>')
_ENTITY_RE = re.compile(r'&[^;\s]+;')


def sanitize_html(value) -> str:
    """Strip script blocks, tags and entities from user supplied text."""
    if not value:
        return ''
    text = _SCRIPT_RE.sub('', str(value))
    text = _TAG_RE.sub('', text)
    text = _ENTITY_RE.sub('', text)
    return text.strip()


def validate_recipe_id(recipe_id) -> dict:
    if not recipe_id or not isinstance(recipe_id, str):
        return {"is_valid": False, "error": "Recipe ID must be a non-empty string"}
    trimmed = recipe_id.strip()
    if len(trimmed) < 2:
        return {"is_valid": False, "error": "Recipe ID must be at least 2 characters"}
    if len(trimmed) > 100:
        return {"is_valid": False, "error": "Recipe ID must be 100 characters or less"}
    if not _RECIPE_ID_RE.match(trimmed):
        return {"is_valid": False, "error": "Recipe ID contains invalid characters"}
    return {"is_valid": True, "sanitized_id": trimmed}


def validate_unit(unit) -> dict:
    """Unknown units are accepted with a warning; only non-strings are rejected."""
    if unit is None:
        return {"is_valid": True, "sanitized_unit": None}
    if not isinstance(unit, str):
        return {"is_valid": False, "error": "Unit must be a string or null"}
    trimmed = unit.strip().lower()
    if not trimmed:
        return {"is_valid": False, "error": "Unit cannot be empty string"}
    if trimmed in VALID_UNITS:
        return {"is_valid": True, "sanitized_unit": trimmed}
    return {"is_valid": True, "sanitized_unit": trimmed, "warning": f"Unknown unit: {unit}. Using as-is."}


def validate_category(category) -> dict:
    if not category or not isinstance(category, str):
        return {"is_valid": True, "sanitized_category": DEFAULT_CATEGORY}
    trimmed = category.strip().lower()
    if trimmed in VALID_CATEGORIES:
        return {"is_valid": True, "sanitized_category": trimmed}
    return {
        "is_valid": True,
        "sanitized_category": DEFAULT_CATEGORY,
        "warning": f"Unknown category: {category}. Defaulting to {DEFAULT_CATEGORY}.",
    }


def validate_quantity(quantity) -> dict:
    if quantity is None:
        return {"is_valid": True, "sanitized_quantity": None}
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)) \
            or not math.isfinite(quantity) or quantity < 0:
        return {"is_valid": False, "error": "Quantity must be a positive number or null"}
    return {"is_valid": True, "sanitized_quantity": quantity}


def check_shopping_list_items(items) -> dict:
    """Collect per-item errors and advisory warnings for a client supplied item list."""
    errors: List[str] = []
    warnings: List[str] = []
    if not isinstance(items, list):
        return {"errors": ["Shopping list items must be a list"], "warnings": warnings}
    for number, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            errors.append(f"Item {number}: must be an object")
            continue
        name = item.get('item')
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Item {number}: item name is required")
        q = validate_quantity(item.get('quantity'))
        if not q["is_valid"]:
            errors.append(f"Item {number}: {q['error']}")
        u = validate_unit(item.get('unit'))
        if not u["is_valid"]:
            errors.append(f"Item {number}: {u['error']}")
        elif "warning" in u:
            warnings.append(f"Item {number}: {u['warning']}")
        c = validate_category(item.get('category'))
        if "warning" in c:
            warnings.append(f"Item {number}: {c['warning']}")
    return {"errors": errors, "warnings": warnings}


class ShoppingListOptions(BaseModel):
    """Schema for shopping list generation options."""
    scale_multiplier: Optional[float] = None
    category_filter: Optional[List[str]] = None
    organize_by_category: bool = False

    @field_validator('scale_multiplier', mode='before')
    @classmethod
    def validate_scale(cls, v):
        """Multiplier must be a finite number greater than 0."""
        if v is None:
            return v
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v) or v <= 0:
            raise ValueError('Scale multiplier must be a positive number')
        return v

    @field_validator('category_filter', mode='before')
    @classmethod
    def validate_categories(cls, v):
        """Filter must be a non-empty list of known categories."""
        if v is None:
            return v
        if not isinstance(v, list):
            raise ValueError('Category filter must be a list')
        if not v:
            raise ValueError('Category filter cannot be empty')
        invalid = [str(c) for c in v if not isinstance(c, str) or not c.strip() or c not in VALID_CATEGORIES]
        if invalid:
            raise ValueError(f"Invalid categories: {', '.join(invalid)}")
        return v


class ShoppingListRequest(BaseModel):
    """Schema for a multi-recipe shopping list request."""
    recipe_ids: Optional[List[str]] = Field(default=None, validate_default=True)
    list_name: Optional[str] = None
    options: ShoppingListOptions = Field(default_factory=ShoppingListOptions)

    @field_validator('recipe_ids', mode='before')
    @classmethod
    def validate_recipe_ids(cls, v):
        """Between one and MAX_RECIPE_IDS well-formed ids."""
        if v is None:
            raise ValueError('Recipe IDs are required')
        if not isinstance(v, list):
            raise ValueError('Recipe IDs must be a list')
        if not v:
            raise ValueError('At least one recipe ID is required')
        if len(v) > MAX_RECIPE_IDS:
            raise ValueError(f'Cannot process more than {MAX_RECIPE_IDS} recipes at once')
        if any(not validate_recipe_id(i)["is_valid"] for i in v):
            raise ValueError('All recipe IDs must be non-empty strings')
        return [i.strip() for i in v]

    @field_validator('list_name', mode='before')
    @classmethod
    def validate_list_name(cls, v):
        """Strip markup; empty names become None."""
        if v is None:
            return v
        name = sanitize_html(v)
        if len(name) > MAX_LIST_NAME_LENGTH:
            raise ValueError(f'List name must be {MAX_LIST_NAME_LENGTH} characters or less')
        return name or None


def first_error_message(exc: ValidationError) -> str:
    """Human readable message of the first validation error (without pydantic's prefix)."""
    errors = exc.errors()
    if not errors:
        return 'Request validation failed'
    msg = errors[0].get('msg', 'Request validation failed')
    prefix = 'Value error, '
    return msg[len(prefix):] if msg.startswith(prefix) else msg
