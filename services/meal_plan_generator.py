"""Meal plan generation.

Fills every (day, mealNumber) slot of a new plan with a recipe drawn from
the recipe store. Meal types follow a fixed pattern per `mealsPerDay`; the
recipe for each slot is narrowed by meal type and a calorie band around the
per-meal target, then picked at random. With an ingredient budget, picks
favour recipes that reuse ingredients already on the shopping list.

Every narrowing step falls back to the wider set when it would leave
nothing; the only fatal condition is an empty recipe catalog.
"""

import math
import random
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set, Union

from core.exceptions import NoRecipesAvailableError
from core.logger import get_logger
from core.numbers import round_half_up
from schemas.meal_plan_schema import MealPlan, MealPlanGenerationRequest, MealSlot, RecipeSnapshot
from schemas.recipe_schema import Recipe, RecipeFilter
from services.meal_prep import generate_meal_prep_plan
from services.recipe_store import RecipeStore

logger = get_logger("services.meal_plan_generator")

CANDIDATE_LIMIT = 100
CALORIE_BAND = 0.2
TOP_SHARE = 0.3
REUSE_WEIGHT = 2
OVER_BUDGET_PENALTY = 10
MEAL_TYPE_CYCLE = ["breakfast", "lunch", "dinner", "snack"]
PLACEHOLDER_IMAGE_URL = "https://images.unsplash.com/photo-1546069901-ba9599a7e63c?w=400&h=250&fit=crop"


def assign_meal_type(meal_number: int, meals_per_day: int, requested: Optional[str] = None) -> str:
    """Return the meal type of slot `meal_number` (1-based) of a day."""
    if meals_per_day == 1:
        return requested or "lunch"
    if meals_per_day == 2:
        return ["breakfast", "dinner"][meal_number - 1]
    if meals_per_day == 3:
        return ["breakfast", "lunch", "dinner"][meal_number - 1]
    return MEAL_TYPE_CYCLE[(meal_number - 1) % len(MEAL_TYPE_CYCLE)]


def _ingredient_names(recipe: Recipe) -> List[str]:
    return [item.name.lower() for item in recipe.ingredients_json]


def score_recipe(recipe: Recipe, used: Set[str], remaining_slots: int) -> int:
    """Score a candidate for ingredient reuse under a budget."""
    names = _ingredient_names(recipe)
    reused = sum(1 for name in names if name in used)
    new = len(names) - reused
    penalty = OVER_BUDGET_PENALTY * max(0, new - remaining_slots)
    return REUSE_WEIGHT * reused - new - penalty


def _new_ingredient_count(recipe: Recipe, used: Set[str]) -> int:
    return sum(1 for name in _ingredient_names(recipe) if name not in used)


class MealPlanGenerator:
    """Builds meal plans from a recipe store.

    Args:
        recipe_store: Source of candidate recipes.
        rng: Random source for recipe picks; pass a seeded `random.Random`
            for reproducible plans.
    """

    def __init__(self, recipe_store: RecipeStore, rng: Optional[random.Random] = None):
        self.recipe_store = recipe_store
        self.rng = rng or random.Random()

    def generate_meal_plan(
        self,
        params: Union[MealPlanGenerationRequest, Dict[str, Any]],
        requester_id: str,
    ) -> MealPlan:
        """Generate a complete meal plan.

        Args:
            params: Generation parameters (model or camelCase dict).
            requester_id: Id of the trainer requesting the plan.

        Returns:
            The generated plan, with a start-of-week meal prep plan attached
            unless `generateMealPrep` is false.

        Raises:
            NoRecipesAvailableError: If the store has no approved recipes.
        """
        if not isinstance(params, MealPlanGenerationRequest):
            params = MealPlanGenerationRequest.model_validate(params)

        pool = self._candidate_pool(params)
        calories_per_meal = round_half_up(params.daily_calorie_target / params.meals_per_day)

        meals: List[MealSlot] = []
        used_ingredients: Set[str] = set()
        for day in range(1, params.days + 1):
            for meal_number in range(1, params.meals_per_day + 1):
                meal_type = assign_meal_type(meal_number, params.meals_per_day, params.meal_type)
                recipe = self._select_recipe(pool, meal_type, calories_per_meal, meals, used_ingredients, params)
                used_ingredients.update(_ingredient_names(recipe))
                meals.append(MealSlot(
                    day=day,
                    meal_number=meal_number,
                    meal_type=meal_type,
                    recipe=build_recipe_snapshot(recipe, meal_type),
                ))

        plan = MealPlan(
            id=str(uuid.uuid4()),
            plan_name=params.plan_name,
            fitness_goal=params.fitness_goal,
            description=params.description or f"{params.plan_name} - {params.fitness_goal} focused meal plan",
            daily_calorie_target=params.daily_calorie_target,
            client_name=params.client_name,
            days=params.days,
            meals_per_day=params.meals_per_day,
            generated_by=requester_id,
            created_at=datetime.now(timezone.utc),
            meals=meals,
        )

        if params.generate_meal_prep is not False:
            plan.start_of_week_meal_prep = generate_meal_prep_plan(plan)

        logger.info(
            "Generated meal plan %s for %s: %s days x %s meals",
            plan.id, requester_id, plan.days, plan.meals_per_day,
        )
        return plan

    def _candidate_pool(self, params: MealPlanGenerationRequest) -> List[Recipe]:
        recipe_filter = RecipeFilter(
            approved=True,
            limit=CANDIDATE_LIMIT,
            page=1,
            meal_type=params.meal_type,
            dietary_tag=params.dietary_tag,
            max_prep_time=params.max_prep_time,
            min_calories=params.min_calories,
            max_calories=params.max_calories,
        )
        logger.info("Searching for recipes with filter: %s", recipe_filter.model_dump(exclude_none=True))
        recipes = self.recipe_store.search_recipes(recipe_filter).recipes
        logger.info("Found %s recipes with filters", len(recipes))

        if not recipes:
            logger.info("No recipes found with filters, trying fallback...")
            fallback = RecipeFilter(approved=True, limit=CANDIDATE_LIMIT, page=1)
            recipes = self.recipe_store.search_recipes(fallback).recipes
            logger.info("Found %s recipes with fallback filter", len(recipes))

        if not recipes:
            logger.error("No recipes found in database")
            raise NoRecipesAvailableError()

        logger.info("Found %s approved recipes for meal plan generation", len(recipes))
        return recipes

    def _select_recipe(
        self,
        pool: List[Recipe],
        meal_type: str,
        calories_per_meal: int,
        meals: List[MealSlot],
        used_ingredients: Set[str],
        params: MealPlanGenerationRequest,
    ) -> Recipe:
        candidates = pool
        if not params.meal_type:
            by_type = [r for r in pool if meal_type in r.meal_types]
            candidates = by_type or pool

        variance = round_half_up(calories_per_meal * CALORIE_BAND)
        in_band = [
            r for r in candidates
            if calories_per_meal - variance <= r.calories_kcal <= calories_per_meal + variance
        ]
        candidates = in_band or candidates

        if params.max_ingredients:
            return self.select_recipe_with_ingredient_limit(candidates, used_ingredients, params.max_ingredients)

        recent_count = min(2 * params.meals_per_day, len(meals))
        recent_ids = {m.recipe.id for m in meals[len(meals) - recent_count:]}
        fresh = [r for r in candidates if r.id not in recent_ids]
        return self.rng.choice(fresh or candidates)

    def select_recipe_with_ingredient_limit(
        self,
        candidates: List[Recipe],
        used: Set[str],
        max_ingredients: int,
    ) -> Recipe:
        """Pick among the best-scoring candidates for ingredient reuse.

        `used` holds the lowercased ingredient names already in the plan.
        """
        remaining_slots = max_ingredients - len(used)

        feasible = [r for r in candidates if _new_ingredient_count(r, used) <= remaining_slots]
        if not feasible:
            logger.debug("No recipe fits the remaining %s ingredient slots", remaining_slots)
        pool = feasible or candidates

        ranked = sorted(pool, key=lambda r: score_recipe(r, used, remaining_slots), reverse=True)
        top = ranked[:max(1, math.ceil(len(ranked) * TOP_SHARE))]
        return self.rng.choice(top)


def build_recipe_snapshot(recipe: Recipe, meal_type: str) -> RecipeSnapshot:
    """Copy `recipe` into a meal slot, defaulting missing display fields."""
    return RecipeSnapshot(
        id=recipe.id,
        name=recipe.name,
        description=recipe.description or f"Delicious {meal_type} meal",
        calories_kcal=recipe.calories_kcal,
        protein_grams=recipe.protein_grams or "0",
        carbs_grams=recipe.carbs_grams or "0",
        fat_grams=recipe.fat_grams or "0",
        prep_time_minutes=recipe.prep_time_minutes,
        cook_time_minutes=recipe.cook_time_minutes or 0,
        servings=recipe.servings,
        meal_types=recipe.meal_types or [meal_type],
        dietary_tags=recipe.dietary_tags,
        main_ingredient_tags=recipe.main_ingredient_tags,
        ingredients_json=recipe.ingredients_json,
        instructions_text=recipe.instructions_text,
        image_url=recipe.image_url or PLACEHOLDER_IMAGE_URL,
    )
