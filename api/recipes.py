"""Recipes API router.

Read-only access to the recipe catalog the generator draws from.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_recipe_store
from core.exceptions import NotFoundError
from core.logger import get_logger
from schemas import Recipe, RecipeFilter, RecipeSearchResult
from services.recipe_store import RecipeStore

logger = get_logger("api.recipes")
router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("", response_model=RecipeSearchResult)
def search_recipes(
    approved: Optional[bool] = Query(None),
    limit: int = Query(12, ge=1, le=100),
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None),
    meal_type: Optional[str] = Query(None, alias="mealType"),
    dietary_tag: Optional[str] = Query(None, alias="dietaryTag"),
    max_prep_time: Optional[int] = Query(None, alias="maxPrepTime", ge=0),
    min_calories: Optional[int] = Query(None, alias="minCalories", ge=0),
    max_calories: Optional[int] = Query(None, alias="maxCalories", ge=0),
    include_ingredients: Optional[List[str]] = Query(None, alias="includeIngredients"),
    exclude_ingredients: Optional[List[str]] = Query(None, alias="excludeIngredients"),
    store: RecipeStore = Depends(get_recipe_store),
):
    """Return one page of recipes matching the query filters."""
    recipe_filter = RecipeFilter(
        approved=approved,
        limit=limit,
        page=page,
        search=search,
        meal_type=meal_type,
        dietary_tag=dietary_tag,
        max_prep_time=max_prep_time,
        min_calories=min_calories,
        max_calories=max_calories,
        include_ingredients=include_ingredients,
        exclude_ingredients=exclude_ingredients,
    )
    result = store.search_recipes(recipe_filter)
    logger.debug("Recipe search returned %s of %s", len(result.recipes), result.total)
    return result


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)):
    """Return a single recipe.

    Raises:
        NotFoundError: If no recipe has this id.
    """
    recipe = store.get_recipe(recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe", recipe_id)
    return recipe
