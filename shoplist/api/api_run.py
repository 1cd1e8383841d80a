import logging

from fastapi import FastAPI

from shoplist.api.routes import recipes, shopping_lists
from shoplist.utilities.config import DEBUG, RECIPES_FILE

# Logging
logger = logging.getLogger("shoplist_app")

# Initialize FastAPI app
app = FastAPI(title="Recipe Shopping List API", debug=DEBUG)

# Include routers
app.include_router(recipes.router)
app.include_router(shopping_lists.router)


@app.on_event("startup")
def _log_startup():
    logger.info("Shopping list API started (recipes file: %s)", RECIPES_FILE)


@app.get("/health")
def health():
    return {"status": "ok"}
