"""FastAPI dependencies shared by the meal plan and recipe routers."""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import AuthenticationError
from data.recipes_dataset import RECIPES_DATA
from database.deps import get_db_read
from services.meal_plan_generator import MealPlanGenerator
from services.recipe_store import InMemoryRecipeStore, RecipeStore, SqlRecipeStore

_memory_store: Optional[InMemoryRecipeStore] = None


def _get_memory_store() -> InMemoryRecipeStore:
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryRecipeStore.from_seed_data(RECIPES_DATA)
    return _memory_store


def get_recipe_store(db: Session = Depends(get_db_read)) -> RecipeStore:
    """Return the recipe store selected by `RECIPE_STORE_BACKEND`."""
    if settings.recipe_store_backend == "memory":
        return _get_memory_store()
    return SqlRecipeStore(db)


def get_meal_plan_generator(store: RecipeStore = Depends(get_recipe_store)) -> MealPlanGenerator:
    return MealPlanGenerator(store)


def get_requester_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Identify the requesting trainer.

    Authentication happens upstream; the gateway forwards the user id in the
    `X-User-Id` header.
    """
    if not x_user_id or not x_user_id.strip():
        raise AuthenticationError("Authentication required: missing X-User-Id header")
    return x_user_id.strip()
