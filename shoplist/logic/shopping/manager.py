"""Shopping list manager.

Fetches recipes from a repository, validates requests, runs the list builder
and keeps saved lists in an injected store. Expected failures come back as
result dicts ({"success": False, "error": ...}), never as exceptions.
"""
import logging
import time
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import ValidationError

from shoplist.domain.ShoppingList import SavedShoppingList, ShoppingList
from shoplist.infra.Recipe_Repository import RecipeRepository, RecipeRepositoryError
from shoplist.infra.Saved_List_Store import InMemorySavedListStore, SavedListStore
from shoplist.logic.formatting.reminders import ReminderFormatter
from shoplist.logic.shopping import list_builder
from shoplist.utilities.constants import (
    DEFAULT_ALL_RECIPES_TITLE,
    DEFAULT_COMBINED_TITLE,
    VALID_CATEGORIES,
    VALID_UNITS,
)
from shoplist.utilities.validators import (
    ShoppingListOptions,
    ShoppingListRequest,
    first_error_message,
)

logger = logging.getLogger(__name__)


def _fail(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    result = {"success": False, "error": error}
    if details:
        result["details"] = details
    return result


class ShoppingListManager:
    def __init__(self, recipe_repository: RecipeRepository, store: Optional[SavedListStore] = None,
                 formatter: Optional[ReminderFormatter] = None):
        self.recipe_repository = recipe_repository
        self.store = store if store is not None else InMemorySavedListStore()
        self.formatter = formatter or ReminderFormatter()

    # --- Generation -----------------------------------------------------------
    def _apply_options(self, shopping_list: ShoppingList, scale_multiplier=None,
                       category_filter: Optional[List[str]] = None) -> Dict[str, Any]:
        if scale_multiplier and scale_multiplier != 1:
            scaled = list_builder.scale_quantities(shopping_list, scale_multiplier)
            if not scaled["success"]:
                return scaled
            shopping_list = scaled["shopping_list"]
        if category_filter:
            filtered = list_builder.filter_by_category(shopping_list, category_filter)
            if not filtered["success"]:
                return filtered
            shopping_list = filtered["shopping_list"]
        return {"success": True, "shopping_list": shopping_list}

    def generate_from_single_recipe(self, recipe_id: str, list_name: Optional[str] = None,
                                    scale_multiplier=None, category_filter: Optional[List[str]] = None):
        """Shopping list for one recipe, optionally renamed, scaled and filtered."""
        try:
            options = ShoppingListOptions(scale_multiplier=scale_multiplier, category_filter=category_filter)
        except ValidationError as e:
            return _fail(first_error_message(e))

        try:
            recipe = self.recipe_repository.find_by_id(recipe_id)
        except RecipeRepositoryError as e:
            logger.error(f"Failed to retrieve recipe {recipe_id}: {e}")
            return _fail("Failed to retrieve recipe", str(e))

        if recipe is None:
            return _fail("Recipe not found")

        validation = list_builder.validate_recipe(recipe)
        if not validation["is_valid"]:
            return _fail(f"Invalid recipe data: {validation['error']}")

        result = list_builder.generate_from_recipe(recipe)
        if not result["success"]:
            return result

        shopping_list = result["shopping_list"]
        if list_name:
            shopping_list = shopping_list.copy_with(title=list_name)
        return self._apply_options(shopping_list, options.scale_multiplier, options.category_filter)

    def generate_from_multiple_recipes(self, recipe_ids: List[str], list_name: Optional[str] = None,
                                       scale_multiplier=None, category_filter: Optional[List[str]] = None):
        """Consolidated list for several recipes; missing or broken recipes become warnings."""
        if not isinstance(recipe_ids, list) or not recipe_ids:
            return _fail("No recipe IDs provided")

        try:
            request = ShoppingListRequest(
                recipe_ids=recipe_ids,
                list_name=list_name,
                options={"scale_multiplier": scale_multiplier, "category_filter": category_filter},
            )
        except ValidationError as e:
            return _fail(first_error_message(e))

        recipes = []
        warnings: List[str] = []
        try:
            for recipe_id in request.recipe_ids:
                recipe = self.recipe_repository.find_by_id(recipe_id)
                if recipe is None:
                    warnings.append(f"Recipe not found: {recipe_id}")
                    continue
                validation = list_builder.validate_recipe(recipe)
                if validation["is_valid"]:
                    recipes.append(recipe)
                else:
                    warnings.append(f"Invalid recipe data for {recipe_id}: {validation['error']}")
        except RecipeRepositoryError as e:
            logger.error(f"Failed to retrieve recipes: {e}")
            return _fail("Failed to generate shopping list", str(e))

        for w in warnings:
            logger.warning(w)

        if not recipes:
            return _fail("No valid recipes found")

        result = list_builder.generate_from_multiple_recipes(recipes, request.list_name or DEFAULT_COMBINED_TITLE)
        if not result["success"]:
            return result

        result = self._apply_options(result["shopping_list"], request.options.scale_multiplier,
                                     request.options.category_filter)
        if result["success"] and warnings:
            result["warnings"] = warnings
        return result

    def generate_from_all_recipes(self, list_name: Optional[str] = None, scale_multiplier=None,
                                  category_filter: Optional[List[str]] = None):
        """Consolidated list for every recipe in the repository."""
        try:
            recipes = self.recipe_repository.find_all()
        except RecipeRepositoryError as e:
            logger.error(f"Failed to retrieve recipes: {e}")
            return _fail("Failed to retrieve recipes", str(e))

        if not recipes:
            return _fail("No recipes available")

        return self.generate_from_multiple_recipes(
            [r.id for r in recipes],
            list_name=list_name or DEFAULT_ALL_RECIPES_TITLE,
            scale_multiplier=scale_multiplier,
            category_filter=category_filter,
        )

    def add_ingredients_to_existing_list(self, existing_list: ShoppingList, recipe):
        return list_builder.add_recipe_to_list(existing_list, recipe)

    # --- Export ----------------------------------------------------------------
    def generate_reminder_url(self, shopping_list, list_name: Optional[str] = None,
                              organize_by_category: bool = False):
        return self.formatter.generate_reminder_url(
            shopping_list, list_name=list_name, organize_by_category=organize_by_category)

    def format_for_reminders(self, shopping_list, organize_by_category: bool = False):
        return self.formatter.format_for_reminders(shopping_list, organize_by_category=organize_by_category)

    # --- Saved lists -------------------------------------------------------------
    @staticmethod
    def generate_list_id() -> str:
        return f"list-{int(time.time() * 1000)}-{uuid4().hex[:9]}"

    def save_shopping_list(self, shopping_list: ShoppingList, list_id: Optional[str] = None):
        if not isinstance(shopping_list, ShoppingList):
            return _fail("Invalid shopping list")
        saved = SavedShoppingList(list_id or self.generate_list_id(), shopping_list)
        self.store.put(saved)
        logger.info(f"Saved shopping list {saved.list_id} ({shopping_list.item_count} items)")
        return {"success": True, "list_id": saved.list_id, "saved_at": saved.saved_at}

    def get_saved_lists(self):
        lists = sorted(self.store.values(), key=lambda s: s.saved_at, reverse=True)
        return {"success": True, "lists": lists}

    def get_saved_list(self, list_id: str):
        saved = self.store.get(list_id)
        if saved is None:
            return _fail("Saved list not found")
        return {"success": True, "saved_list": saved}

    def delete_saved_list(self, list_id: str):
        return {"success": True, "deleted": self.store.delete(list_id)}

    def clear_saved_lists(self):
        self.store.clear()
        return {"success": True, "message": "All saved lists cleared"}

    def get_statistics(self):
        return {
            "saved_lists_count": len(self.store),
            "available_categories": list(VALID_CATEGORIES),
            "supported_units": list(VALID_UNITS),
        }
