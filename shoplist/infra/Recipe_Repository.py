import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from shoplist.domain.Recipe import Recipe
from shoplist.utilities.config import RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeRepositoryError(Exception):
    """Raised when the recipes file exists but cannot be read or decoded."""


class RecipeRepository:
    """Read-only access to recipes stored as a JSON list of {id, title, ingredients}."""

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path else RECIPES_FILE

    def _load(self) -> List[dict]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Recipes file not found: {self.path}. Returning empty list.")
            return []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in recipes file: {e}")
            raise RecipeRepositoryError(f"Invalid JSON in recipes file: {e}") from e
        except OSError as e:
            logger.error(f"Error reading recipes: {e}")
            raise RecipeRepositoryError(f"Error reading recipes: {e}") from e
        if not isinstance(data, list):
            raise RecipeRepositoryError("Recipes file must contain a JSON list")
        return [entry for entry in data if isinstance(entry, dict)]

    def find_all(self) -> List[Recipe]:
        return [Recipe.from_dict(entry) for entry in self._load()]

    def find_by_id(self, recipe_id: str) -> Optional[Recipe]:
        for entry in self._load():
            if str(entry.get('id')) == recipe_id:
                return Recipe.from_dict(entry)
        return None
