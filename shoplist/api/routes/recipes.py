from fastapi import APIRouter, HTTPException
from shoplist.infra.Recipe_Repository import RecipeRepository, RecipeRepositoryError

router = APIRouter(prefix="/api/recipes")
repository = RecipeRepository()


@router.get("")
def list_recipes():
    """Return id, title and ingredient count of every recipe."""
    try:
        recipes = repository.find_all()
    except RecipeRepositoryError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "count": len(recipes),
        "recipes": [
            {
                "id": r.id,
                "title": r.title,
                "ingredient_count": len(r.ingredients) if isinstance(r.ingredients, list) else 0,
            }
            for r in recipes
        ],
    }


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str):
    try:
        recipe = repository.find_by_id(recipe_id)
    except RecipeRepositoryError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()
