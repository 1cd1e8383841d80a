"""ShoppingList aggregate: consolidated ingredient lines, grouped by category."""
from datetime import datetime
from typing import Dict, List, Optional

from shoplist.domain.IngredientLine import IngredientLine


def _parse_ts(value):
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


class ShoppingList:
    def __init__(self, title: str = "", items: Optional[List[IngredientLine]] = None,
                 organized: Optional[Dict[str, List[IngredientLine]]] = None,
                 recipes: Optional[List[str]] = None, created_at: Optional[datetime] = None,
                 scale_multiplier=None, scaled_at: Optional[datetime] = None,
                 filtered_categories: Optional[List[str]] = None, modified_at: Optional[datetime] = None):
        self.title = title
        # Keep malformed values as given so formatters can report them
        self.items = items[:] if isinstance(items, list) else items
        self.organized = {k: v[:] for k, v in organized.items()} if isinstance(organized, dict) else organized
        self.recipes = recipes[:] if recipes else []
        self.created_at = created_at or datetime.now()
        self.scale_multiplier = scale_multiplier
        self.scaled_at = scaled_at
        self.filtered_categories = filtered_categories[:] if filtered_categories else None
        self.modified_at = modified_at

    @property
    def item_count(self) -> int:
        return len(self.items) if isinstance(self.items, list) else 0

    def copy_with(self, **changes) -> "ShoppingList":
        '''
        Returns a new ShoppingList with the given fields replaced; the original is untouched.
        '''
        fields = {
            "title": self.title,
            "items": self.items,
            "organized": self.organized,
            "recipes": self.recipes,
            "created_at": self.created_at,
            "scale_multiplier": self.scale_multiplier,
            "scaled_at": self.scaled_at,
            "filtered_categories": self.filtered_categories,
            "modified_at": self.modified_at,
        }
        fields.update(changes)
        return ShoppingList(**fields)

    def __str__(self) -> str:
        return f"Shopping List '{self.title}' - {self.item_count} items from {len(self.recipes)} recipe(s)"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        '''
        Builds a ShoppingList from a JSON payload. Item entries are converted to
        IngredientLine objects; a non-list items value is kept for validation.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        items = d.get("items")
        if isinstance(items, list):
            items = [IngredientLine.from_dict(i) for i in items if isinstance(i, dict)]
        organized = d.get("organized")
        if isinstance(organized, dict):
            organized = {
                str(cat): [IngredientLine.from_dict(i) for i in entries if isinstance(i, dict)]
                for cat, entries in organized.items() if isinstance(entries, list)
            }
        recipes = d.get("recipes")
        return ShoppingList(
            title=d.get("title") if isinstance(d.get("title"), str) else "",
            items=items,
            organized=organized,
            recipes=[str(r) for r in recipes] if isinstance(recipes, list) else None,
            created_at=_parse_ts(d.get("created_at")),
            scale_multiplier=d.get("scale_multiplier"),
            scaled_at=_parse_ts(d.get("scaled_at")),
            filtered_categories=d.get("filtered_categories") if isinstance(d.get("filtered_categories"), list) else None,
            modified_at=_parse_ts(d.get("modified_at")),
        )

    def to_dict(self):
        '''Converts the ShoppingList to a dictionary for JSON responses.'''
        items = self.items if isinstance(self.items, list) else []
        organized = self.organized if isinstance(self.organized, dict) else {}
        data = {
            "title": self.title,
            "items": [i.to_dict() for i in items],
            "organized": {cat: [i.to_dict() for i in entries] for cat, entries in organized.items()},
            "recipes": self.recipes,
            "item_count": self.item_count,
            "created_at": self.created_at.isoformat(),
        }
        if self.scale_multiplier is not None:
            data["scale_multiplier"] = self.scale_multiplier
            data["scaled_at"] = self.scaled_at.isoformat() if self.scaled_at else None
        if self.filtered_categories is not None:
            data["filtered_categories"] = self.filtered_categories
        if self.modified_at is not None:
            data["modified_at"] = self.modified_at.isoformat()
        return data


class SavedShoppingList:
    def __init__(self, list_id: str, shopping_list: ShoppingList, saved_at: Optional[datetime] = None,
                 version: int = 1):
        self.list_id = list_id
        self.shopping_list = shopping_list
        self.saved_at = saved_at or datetime.now()
        self.version = version

    def __str__(self) -> str:
        return f"{self.list_id} - {self.shopping_list.title} (saved {self.saved_at.isoformat()})"

    __repr__ = __str__

    def to_dict(self):
        return {
            "list_id": self.list_id,
            "shopping_list": self.shopping_list.to_dict(),
            "saved_at": self.saved_at.isoformat(),
            "version": self.version,
        }
