import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse, RedirectResponse

from shoplist.domain.ShoppingList import ShoppingList
from shoplist.infra.Recipe_Repository import RecipeRepository
from shoplist.infra.Saved_List_Store import InMemorySavedListStore
from shoplist.logic.formatting.text import format_for_display
from shoplist.logic.shopping.manager import ShoppingListManager
from shoplist.utilities.validators import check_shopping_list_items

router = APIRouter(prefix="/api/shopping-lists")
logger = logging.getLogger(__name__)

# The API process owns the saved lists for its lifetime
manager = ShoppingListManager(RecipeRepository(), InMemorySavedListStore())


def _raise_for(result: dict):
    error = result.get("error") or "Request failed"
    status = 404 if "not found" in error.lower() else 400
    raise HTTPException(status_code=status, detail=error)


def _list_response(result: dict, organize_by_category: bool = False) -> dict:
    shopping_list = result["shopping_list"]
    return {
        "success": True,
        "shopping_list": shopping_list.to_dict(),
        "text": format_for_display(shopping_list, organize_by_category=organize_by_category),
        "warnings": result.get("warnings", []),
    }


# -------------------- Generation --------------------
@router.post("/single")
def generate_single(data: dict):
    recipe_id = data.get("recipe_id")
    if not recipe_id:
        raise HTTPException(status_code=400, detail="Recipe ID is required")
    result = manager.generate_from_single_recipe(
        recipe_id,
        list_name=data.get("list_name"),
        scale_multiplier=data.get("scale_multiplier"),
        category_filter=data.get("category_filter"),
    )
    if not result["success"]:
        _raise_for(result)
    return _list_response(result, bool(data.get("organize_by_category")))


@router.post("/multiple")
def generate_multiple(data: dict):
    recipe_ids = data.get("recipe_ids")
    if not isinstance(recipe_ids, list) or not recipe_ids:
        raise HTTPException(status_code=400, detail="Recipe IDs array is required and must not be empty")
    result = manager.generate_from_multiple_recipes(
        recipe_ids,
        list_name=data.get("list_name"),
        scale_multiplier=data.get("scale_multiplier"),
        category_filter=data.get("category_filter"),
    )
    if not result["success"]:
        # a batch with no usable recipe is a bad request, not a missing resource
        raise HTTPException(status_code=400, detail=result["error"])
    return _list_response(result, bool(data.get("organize_by_category")))


@router.post("/all")
def generate_all(data: Optional[dict] = None):
    data = data or {}
    result = manager.generate_from_all_recipes(
        list_name=data.get("list_name"),
        scale_multiplier=data.get("scale_multiplier"),
        category_filter=data.get("category_filter"),
    )
    if not result["success"]:
        raise HTTPException(status_code=400, detail=result["error"])
    return _list_response(result, bool(data.get("organize_by_category")))


# -------------------- Reminders export --------------------
@router.post("/reminders-url")
def reminders_url(data: dict):
    """Build the Shortcuts URL (and reminderkit fallback) for a client supplied list."""
    payload = data.get("shopping_list")
    if not payload:
        raise HTTPException(status_code=400, detail="Shopping list data is required")

    warnings = []
    if isinstance(payload, dict) and "items" in payload:
        checked = check_shopping_list_items(payload.get("items"))
        if checked["errors"]:
            raise HTTPException(status_code=400, detail=checked["errors"][0])
        warnings = checked["warnings"]

    organize = bool(data.get("organize_by_category"))
    shopping_list = ShoppingList.from_dict(payload)
    result = manager.generate_reminder_url(shopping_list, list_name=data.get("list_name"),
                                           organize_by_category=organize)
    if not result["success"]:
        raise HTTPException(status_code=400, detail=result["error"])

    formatted = manager.format_for_reminders(shopping_list, organize_by_category=organize)
    return {
        "success": True,
        "url": result["url"],
        "fallback_url": result["fallback_url"],
        "reminder_text": formatted.get("reminder_text") if formatted["success"] else None,
        "list_name": result["list_name"],
        "item_count": result["item_count"],
        "warnings": warnings,
    }


@router.get("/export/{recipe_id}")
def export_recipe(recipe_id: str,
                  format: str = Query(default="reminders"),
                  list_name: Optional[str] = Query(default=None),
                  scale: Optional[float] = Query(default=None)):
    result = manager.generate_from_single_recipe(recipe_id, list_name=list_name, scale_multiplier=scale)
    if not result["success"]:
        _raise_for(result)
    shopping_list = result["shopping_list"]

    if format == "reminders":
        url_result = manager.generate_reminder_url(shopping_list)
        if not url_result["success"]:
            raise HTTPException(status_code=400, detail=url_result["error"])
        logger.info("Redirecting export of %s to Shortcuts", recipe_id)
        return RedirectResponse(url=url_result["url"], status_code=302)
    if format == "json":
        return {"success": True, "shopping_list": shopping_list.to_dict()}
    if format == "text":
        return PlainTextResponse(format_for_display(shopping_list, organize_by_category=True))
    raise HTTPException(status_code=400, detail='Unsupported format. Use "reminders", "json" or "text".')


# -------------------- Saved lists --------------------
@router.post("/saved")
def save_list(data: dict):
    payload = data.get("shopping_list")
    if not isinstance(payload, dict) or not payload.get("title"):
        raise HTTPException(status_code=400, detail="Shopping list data is required")
    result = manager.save_shopping_list(ShoppingList.from_dict(payload), data.get("list_id"))
    if not result["success"]:
        _raise_for(result)
    return {"success": True, "list_id": result["list_id"], "saved_at": result["saved_at"].isoformat()}


@router.get("/saved")
def saved_lists():
    lists = manager.get_saved_lists()["lists"]
    return {"count": len(lists), "lists": [s.to_dict() for s in lists]}


@router.get("/saved/{list_id}")
def saved_list(list_id: str):
    result = manager.get_saved_list(list_id)
    if not result["success"]:
        _raise_for(result)
    return result["saved_list"].to_dict()


@router.delete("/saved/{list_id}")
def delete_saved_list(list_id: str):
    return manager.delete_saved_list(list_id)


@router.get("/stats")
def statistics():
    return manager.get_statistics()
