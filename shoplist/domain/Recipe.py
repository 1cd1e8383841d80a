"""Recipe domain entity: id, title and raw ingredient lines (as written in the recipe)."""
from typing import List, Optional


class Recipe:
    def __init__(self, id: Optional[str] = None, title: str = "", ingredients: Optional[List[str]] = None,
                 description: str = "", servings: str = ""):
        self.id = id
        self.title = title
        # Non-list values are kept so the shopping list builder can reject them
        self.ingredients = ingredients[:] if isinstance(ingredients, list) else ingredients
        self.description = description
        self.servings = servings

    def __str__(self) -> str:
        count = len(self.ingredients) if isinstance(self.ingredients, list) else 0
        return f"{self.title} ({self.id}) - {count} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "title", "ingredients", "description", "servings"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        if filtered.get("id") is not None:
            filtered["id"] = str(filtered["id"])
        if "servings" in filtered and not isinstance(filtered["servings"], str):
            filtered["servings"] = str(filtered["servings"] or "")
        return Recipe(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": self.ingredients if isinstance(self.ingredients, list) else [],
            "description": self.description,
            "servings": self.servings,
        }
