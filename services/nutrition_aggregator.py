"""Per-day and whole-plan nutrition totals for a meal plan."""

from typing import Union

from core.logger import get_logger
from core.numbers import parse_grams, round_half_up
from schemas.meal_plan_schema import DailyNutrition, MealPlan, NutritionSummary, NutritionTotals
from schemas.validation_schema import ValidatedMealPlan

logger = get_logger("services.nutrition_aggregator")

MACROS = ("protein", "carbs", "fat")


def calculate_meal_plan_nutrition(plan: Union[MealPlan, ValidatedMealPlan]) -> NutritionSummary:
    """Sum calories and macros per day and over the whole plan.

    Days without meals count as zero, so `averageDaily` is the plain mean
    over all `plan.days` calendar days, rounded to whole numbers.
    """
    daily = []
    for day in range(1, plan.days + 1):
        day_meals = [meal for meal in plan.meals if meal.day == day]
        totals = {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}
        for meal in day_meals:
            recipe = meal.recipe
            totals["calories"] += recipe.calories_kcal or 0
            totals["protein"] += parse_grams(recipe.protein_grams)
            totals["carbs"] += parse_grams(recipe.carbs_grams)
            totals["fat"] += parse_grams(recipe.fat_grams)
        daily.append(DailyNutrition(day=day, **{k: round(v, 2) for k, v in totals.items()}))

    total = NutritionTotals(
        calories=sum(d.calories for d in daily),
        **{m: round(sum(getattr(d, m) for d in daily), 2) for m in MACROS},
    )
    average_daily = NutritionTotals(**{
        field: round_half_up(getattr(total, field) / plan.days)
        for field in ("calories", *MACROS)
    })

    logger.debug("Aggregated nutrition over %s days: %s kcal total", plan.days, total.calories)
    return NutritionSummary(total=total, daily=daily, average_daily=average_daily)
