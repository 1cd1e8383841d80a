"""Reminder app export.

Builds the two deep links used to push a shopping list into the Reminders app:
  - a Shortcuts URL that runs a named shortcut with the list text as input
  - a fallback reminderkit URL carrying the reminder text and list name
Callers try the first and fall back to the second; nothing here opens either.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from shoplist.domain.IngredientLine import IngredientLine
from shoplist.domain.ShoppingList import ShoppingList
from shoplist.logic.formatting.text import format_item
from shoplist.utilities.config import REMINDERS_SHORTCUT_NAME
from shoplist.utilities.constants import (
    DEFAULT_CATEGORY,
    REMINDERKIT_URL_SCHEME,
    SHORTCUTS_URL_SCHEME,
    SUPPORTED_PLATFORMS,
)

__all__ = ["ReminderFormatter", "sanitize_for_url", "flatten_organized_items"]

logger = logging.getLogger(__name__)

# Same set encodeURIComponent leaves alone
_URL_SAFE = "-_.!~*'()"


def sanitize_for_url(text: Optional[str]) -> str:
    if not text:
        return ""
    return quote(str(text), safe=_URL_SAFE)


def flatten_organized_items(organized: Dict[str, List[IngredientLine]]) -> List[IngredientLine]:
    items: List[IngredientLine] = []
    for entries in organized.values():
        items.extend(entries)
    return items


class ReminderFormatter:
    """Formats shopping lists for the Reminders app."""

    def __init__(self, shortcut_name: str = REMINDERS_SHORTCUT_NAME,
                 url_scheme: str = SHORTCUTS_URL_SCHEME,
                 fallback_scheme: str = REMINDERKIT_URL_SCHEME):
        self.shortcut_name = shortcut_name
        self.url_scheme = url_scheme
        self.fallback_scheme = fallback_scheme

    @staticmethod
    def _coerce(shopping_list) -> Optional[ShoppingList]:
        if isinstance(shopping_list, dict):
            return ShoppingList.from_dict(shopping_list)
        return shopping_list

    def validate_shopping_list(self, shopping_list) -> Dict[str, Any]:
        shopping_list = self._coerce(shopping_list)
        if shopping_list is None:
            return {"is_valid": False, "error": "Shopping list is required"}
        if not isinstance(shopping_list, ShoppingList):
            raise TypeError(f"Expected a ShoppingList, got {type(shopping_list).__name__}")
        title = shopping_list.title
        if not isinstance(title, str) or not title.strip():
            return {"is_valid": False, "error": "Shopping list must have a valid title"}
        if shopping_list.items is None and shopping_list.organized is None:
            return {"is_valid": False, "error": "Shopping list must have items or organized categories"}
        if shopping_list.items is not None and not isinstance(shopping_list.items, list):
            return {"is_valid": False, "error": "Shopping list items must be a list"}
        return {"is_valid": True}

    def format_item_text(self, item: Optional[IngredientLine]) -> str:
        return format_item(item) if item is not None else ""

    def _resolve_items(self, shopping_list: ShoppingList, organize_by_category: bool) -> List[IngredientLine]:
        if organize_by_category and shopping_list.organized:
            return flatten_organized_items(shopping_list.organized)
        if isinstance(shopping_list.items, list):
            return shopping_list.items
        return flatten_organized_items(shopping_list.organized or {})

    def format_for_reminders(self, shopping_list, organize_by_category: bool = False) -> Dict[str, Any]:
        """Reminder text for the list: one line per item, optionally under category headers."""
        validation = self.validate_shopping_list(shopping_list)
        if not validation["is_valid"]:
            return {"success": False, "error": validation["error"]}
        shopping_list = self._coerce(shopping_list)

        lines: List[str] = []
        item_count = 0
        if organize_by_category and shopping_list.organized:
            for index, (category, entries) in enumerate(shopping_list.organized.items()):
                if index > 0:
                    lines.append("")
                lines.append(f"{category.upper()}:")
                for item in entries:
                    lines.append(self.format_item_text(item))
                    item_count += 1
        else:
            for item in self._resolve_items(shopping_list, False):
                lines.append(self.format_item_text(item))
                item_count += 1

        return {
            "success": True,
            "reminder_text": "\n".join(lines).strip(),
            "list_name": shopping_list.title,
            "item_count": item_count,
        }

    def generate_reminder_url(self, shopping_list, list_name: Optional[str] = None,
                              organize_by_category: bool = False, platform: str = "ios") -> Dict[str, Any]:
        """Build the Shortcuts URL and the reminderkit fallback URL for a list."""
        validation = self.validate_shopping_list(shopping_list)
        if not validation["is_valid"]:
            return {"success": False, "error": validation["error"]}
        shopping_list = self._coerce(shopping_list)

        items = self._resolve_items(shopping_list, organize_by_category)
        if not items:
            return {"success": False, "error": "Shopping list is empty"}

        name = list_name or shopping_list.title
        item_texts = [self.format_item_text(item) for item in items]
        simple_text = f"{name}\n\n" + "\n".join(item_texts)

        url = f"{self.url_scheme}?name={sanitize_for_url(self.shortcut_name)}&input={sanitize_for_url(simple_text)}"

        formatted = self.format_for_reminders(shopping_list, organize_by_category)
        fallback_url = (
            f"{self.fallback_scheme}?reminderText={sanitize_for_url(formatted['reminder_text'])}"
            f"&listName={sanitize_for_url(name)}"
        )
        logger.debug("Generated reminder URLs for '%s' (%d items)", name, len(items))

        return {
            "success": True,
            "url": url,
            "fallback_url": fallback_url,
            "list_name": name,
            "item_count": len(items),
            "shortcut_required": True,
            "shortcut_name": self.shortcut_name,
            "platform": platform,
        }

    def get_platform_specific_url(self, shopping_list, platform: str = "ios") -> Dict[str, Any]:
        # iOS and macOS share the same URL schemes for now
        if platform not in SUPPORTED_PLATFORMS:
            return {"success": False, "error": f"Unsupported platform: {platform}"}
        return self.generate_reminder_url(shopping_list, platform=platform)

    @staticmethod
    def sanitize_item(item) -> Optional[IngredientLine]:
        '''Builds a well-formed IngredientLine from a loosely shaped dict.'''
        if isinstance(item, IngredientLine):
            return item
        if not isinstance(item, dict):
            return None
        quantity = item.get("quantity")
        unit = item.get("unit")
        name = item.get("item")
        return IngredientLine(
            item=name if isinstance(name, str) and name else "Unknown item",
            quantity=quantity if isinstance(quantity, (int, float)) and not isinstance(quantity, bool) else None,
            unit=unit if isinstance(unit, str) else None,
            category=item.get("category") or DEFAULT_CATEGORY,
        )
