"""Fill in recipe details for normalized meal plans.

Meals referencing a recipe only by id are completed from the recipe store.
A failed lookup only affects that meal: it keeps whatever partial data it
had and the rest of the plan is still enriched.
"""

from typing import Any, Dict, Optional

from core.logger import get_logger
from services.recipe_store import RecipeStore

logger = get_logger("services.recipe_enricher")

RECIPE_DEFAULTS = {
    "dietaryTags": list,
    "mealTypes": list,
    "ingredientsJson": list,
    "instructionsText": str,
    "description": str,
}


def with_recipe_defaults(recipe: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of `recipe` with missing optional fields defaulted."""
    filled = dict(recipe)
    for key, factory in RECIPE_DEFAULTS.items():
        if not filled.get(key):
            filled[key] = factory()
    return filled


def _has_complete_recipe(meal: Dict[str, Any]) -> bool:
    recipe = meal.get("recipe")
    return isinstance(recipe, dict) and bool(recipe.get("name")) and recipe.get("ingredientsJson") is not None


def _recipe_id(meal: Dict[str, Any]) -> Optional[str]:
    if meal.get("recipeId"):
        return str(meal["recipeId"])
    recipe = meal.get("recipe")
    if isinstance(recipe, dict) and recipe.get("id"):
        return str(recipe["id"])
    return None


def enrich_meal(meal: Any, recipe_store: RecipeStore) -> Any:
    """Return `meal` with a complete recipe where one can be found."""
    if not isinstance(meal, dict):
        return meal

    if _has_complete_recipe(meal):
        return {**meal, "recipe": with_recipe_defaults(meal["recipe"])}

    recipe_id = _recipe_id(meal)
    if recipe_id:
        try:
            full_recipe = recipe_store.get_recipe(recipe_id)
        except Exception as exc:
            logger.warning("Failed to fetch recipe %s: %s", recipe_id, exc)
            full_recipe = None
        else:
            if full_recipe is None:
                logger.warning("Recipe %s not found; keeping partial meal data", recipe_id)
        if full_recipe is not None:
            record = full_recipe.model_dump(by_alias=True)
            return {**meal, "recipe": with_recipe_defaults(record)}

    if isinstance(meal.get("recipe"), dict):
        return {**meal, "recipe": with_recipe_defaults(meal["recipe"])}
    return meal


def enrich_meal_plan(plan: Dict[str, Any], recipe_store: RecipeStore) -> Dict[str, Any]:
    """Return a copy of `plan` whose meals carry full recipe records."""
    meals = plan.get("meals")
    if not isinstance(meals, list):
        return plan
    enriched = [enrich_meal(meal, recipe_store) for meal in meals]
    return {**plan, "meals": enriched}
