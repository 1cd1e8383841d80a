"""IngredientLine domain entity: one parsed ingredient (quantity, unit, item, category)."""
from typing import Optional, Union
from shoplist.utilities.constants import DEFAULT_CATEGORY

Number = Union[int, float]


class IngredientLine:
    def __init__(self, item: str = "", quantity: Optional[Number] = None, unit: Optional[str] = None,
                 original_text: str = "", category: str = DEFAULT_CATEGORY, consolidated: bool = False,
                 scaled: bool = False, original_quantity: Optional[Number] = None):
        self.item = item
        self.quantity = quantity
        self.unit = unit
        self.original_text = original_text
        self.category = category or DEFAULT_CATEGORY
        self.consolidated = consolidated
        self.scaled = scaled
        self.original_quantity = original_quantity

    def copy(self, **changes) -> "IngredientLine":
        '''Returns a new IngredientLine with the given fields replaced.'''
        data = self.to_dict()
        data.update(changes)
        return IngredientLine.from_dict(data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientLine):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        parts = []
        if self.quantity is not None:
            parts.append(str(self.quantity))
            if self.unit:
                parts.append(self.unit)
        parts.append(self.item)
        return f"{' '.join(parts)} [{self.category}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientLine from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        # Accept the camelCase keys sent by browser clients
        if "originalText" in d and "original_text" not in d:
            d["original_text"] = d["originalText"]
        if "originalQuantity" in d and "original_quantity" not in d:
            d["original_quantity"] = d["originalQuantity"]
        allowed = {"item", "quantity", "unit", "original_text", "category",
                   "consolidated", "scaled", "original_quantity"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        if isinstance(filtered.get("quantity"), bool) or not isinstance(filtered.get("quantity"), (int, float)):
            filtered["quantity"] = None
        if not isinstance(filtered.get("unit"), str) or not filtered.get("unit"):
            filtered["unit"] = None
        filtered.setdefault("item", "")
        filtered.setdefault("original_text", "")
        filtered["consolidated"] = bool(filtered.get("consolidated", False))
        filtered["scaled"] = bool(filtered.get("scaled", False))
        return IngredientLine(**filtered)

    def to_dict(self):
        '''Converts the IngredientLine to a dictionary for JSON transport.'''
        data = {
            "quantity": self.quantity,
            "unit": self.unit,
            "item": self.item,
            "original_text": self.original_text,
            "category": self.category,
            "consolidated": self.consolidated,
        }
        if self.scaled:
            data["scaled"] = True
            data["original_quantity"] = self.original_quantity
        return data
