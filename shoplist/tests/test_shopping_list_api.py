import json
import pytest
from fastapi.testclient import TestClient

from shoplist.api.api_run import app
from shoplist.api.routes import recipes, shopping_lists
from shoplist.infra.Recipe_Repository import RecipeRepository
from shoplist.infra.Saved_List_Store import InMemorySavedListStore
from shoplist.logic.formatting.reminders import ReminderFormatter
from shoplist.logic.shopping.manager import ShoppingListManager

RECIPES = [
    {'id': 'r1', 'title': 'BBQ Ribs', 'ingredients': ['2 lbs baby back ribs', '1/2 cup brown sugar', '1 tsp salt']},
    {'id': 'r2', 'title': 'BBQ Sauce', 'ingredients': ['1/4 cup brown sugar', '2 tsp salt', '1 cup ketchup']},
]


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Point both routers at a temporary recipes file (don't touch the bundled one)."""
    fake_recipes = tmp_path / "recipes.json"
    fake_recipes.write_text(json.dumps(RECIPES), encoding="utf-8")
    repo = RecipeRepository(fake_recipes)
    manager = ShoppingListManager(repo, InMemorySavedListStore(),
                                  ReminderFormatter(shortcut_name="Add Shopping List to Reminders"))
    monkeypatch.setattr(recipes, "repository", repo)
    monkeypatch.setattr(shopping_lists, "manager", manager)
    return TestClient(app)


def _item(shopping_list, name):
    return next(i for i in shopping_list["items"] if i["item"] == name)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_and_get_recipes(client):
    resp = client.get("/api/recipes")
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert data["recipes"][0] == {"id": "r1", "title": "BBQ Ribs", "ingredient_count": 3}

    resp = client.get("/api/recipes/r2")
    assert resp.status_code == 200
    assert resp.json()["ingredients"][2] == "1 cup ketchup"

    resp = client.get("/api/recipes/nope")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Recipe not found"


def test_single_recipe(client):
    resp = client.post("/api/shopping-lists/single", json={"recipe_id": "r1", "organize_by_category": True})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["success"] is True
    assert data["shopping_list"]["title"] == "BBQ Ribs - Shopping List"
    assert data["shopping_list"]["item_count"] == 3
    assert "MEAT:" in data["text"]
    assert data["warnings"] == []


def test_single_recipe_errors(client):
    resp = client.post("/api/shopping-lists/single", json={})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Recipe ID is required"

    resp = client.post("/api/shopping-lists/single", json={"recipe_id": "nope"})
    assert resp.status_code == 404

    resp = client.post("/api/shopping-lists/single", json={"recipe_id": "r1", "scale_multiplier": 0})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Scale multiplier must be a positive number"


def test_multiple_recipes(client):
    resp = client.post("/api/shopping-lists/multiple", json={"recipe_ids": ["r1", "r2", "gone"]})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    sugar = _item(data["shopping_list"], "brown sugar")
    assert sugar["quantity"] == 0.75
    assert sugar["consolidated"] is True
    assert data["shopping_list"]["recipes"] == ["r1", "r2"]
    assert data["warnings"] == ["Recipe not found: gone"]
    assert "3/4 cup brown sugar" in data["text"]


def test_multiple_recipes_errors(client):
    resp = client.post("/api/shopping-lists/multiple", json={"recipe_ids": []})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Recipe IDs array is required and must not be empty"

    resp = client.post("/api/shopping-lists/multiple", json={"recipe_ids": ["gone"]})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "No valid recipes found"


def test_all_recipes(client):
    resp = client.post("/api/shopping-lists/all", json={"scale_multiplier": 2})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["shopping_list"]["title"] == "All Recipes - Shopping List (scaled 2x)"
    assert _item(data["shopping_list"], "salt")["quantity"] == 6
    assert data["shopping_list"]["scale_multiplier"] == 2


def test_reminders_url(client):
    payload = {
        "shopping_list": {
            "title": "Test Shopping List",
            "items": [
                {"quantity": 2, "unit": "cups", "item": "flour", "category": "pantry"},
                {"quantity": 1, "unit": "handful", "item": "parsley", "category": "vegetables"},
            ],
        },
        "list_name": "Groceries",
    }
    resp = client.post("/api/shopping-lists/reminders-url", json=payload)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["url"].startswith("shortcuts://run-shortcut?name=Add%20Shopping%20List%20to%20Reminders&input=")
    assert data["fallback_url"].endswith("&listName=Groceries")
    assert data["reminder_text"] == "2 cups flour\n1 handful parsley"
    assert data["list_name"] == "Groceries"
    assert data["item_count"] == 2
    assert len(data["warnings"]) == 1
    assert "Unknown unit: handful" in data["warnings"][0]


def test_reminders_url_errors(client):
    resp = client.post("/api/shopping-lists/reminders-url", json={})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Shopping list data is required"

    bad_item = {"shopping_list": {"title": "T", "items": [{"item": "flour", "quantity": -2}]}}
    resp = client.post("/api/shopping-lists/reminders-url", json=bad_item)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Item 1: Quantity must be a positive number or null"

    resp = client.post("/api/shopping-lists/reminders-url", json={"shopping_list": {"title": "T", "items": []}})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Shopping list is empty"


def test_export(client):
    resp = client.get("/api/shopping-lists/export/r1", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"].startswith("shortcuts://run-shortcut?")

    resp = client.get("/api/shopping-lists/export/r1", params={"format": "json", "scale": 2})
    assert resp.status_code == 200
    assert resp.json()["shopping_list"]["title"] == "BBQ Ribs - Shopping List (scaled 2x)"

    resp = client.get("/api/shopping-lists/export/r1", params={"format": "text", "list_name": "Ribs"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith("Ribs\n====\n\nMEAT:\n")

    resp = client.get("/api/shopping-lists/export/r1", params={"format": "pdf"})
    assert resp.status_code == 400

    resp = client.get("/api/shopping-lists/export/nope", params={"format": "json"})
    assert resp.status_code == 404


def test_saved_lists(client):
    generated = client.post("/api/shopping-lists/single", json={"recipe_id": "r1"}).json()["shopping_list"]

    resp = client.post("/api/shopping-lists/saved", json={"shopping_list": generated})
    assert resp.status_code == 200, resp.text
    list_id = resp.json()["list_id"]
    assert list_id.startswith("list-")

    resp = client.get("/api/shopping-lists/saved")
    assert resp.json()["count"] == 1

    resp = client.get(f"/api/shopping-lists/saved/{list_id}")
    assert resp.status_code == 200
    saved = resp.json()
    assert saved["shopping_list"]["title"] == "BBQ Ribs - Shopping List"
    assert saved["shopping_list"]["item_count"] == 3

    assert client.get("/api/shopping-lists/stats").json()["saved_lists_count"] == 1

    resp = client.delete(f"/api/shopping-lists/saved/{list_id}")
    assert resp.json() == {"success": True, "deleted": True}
    assert client.get(f"/api/shopping-lists/saved/{list_id}").status_code == 404

    resp = client.post("/api/shopping-lists/saved", json={"shopping_list": {}})
    assert resp.status_code == 400
