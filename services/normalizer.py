"""Meal plan input normalization.

Callers hand us meal plans in several historical shapes. This module turns
any of them into the canonical camelCase dict consumed by the enricher and
the validator:

- the plan may be wrapped in a `mealPlanData` key;
- frontend plans carry `name` instead of `planName` and may omit the
  calorie target, duration and meals per day, which are then derived;
- `meals` may be a canonical list, a legacy list without positions, or an
  object keyed by weekday and then by meal type.
"""

from enum import Enum
from typing import Any, Callable, Dict, List

from core.logger import get_logger
from core.numbers import parse_float_prefix, round_half_up

logger = get_logger("services.normalizer")

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
LEGACY_MEALS_PER_DAY = 3

DEFAULT_PLAN_ID = "generated-plan"
DEFAULT_FITNESS_GOAL = "General Fitness"
DEFAULT_DAILY_CALORIES = 2000
DEFAULT_DAYS = 7
MIN_DERIVED_MEALS_PER_DAY = 3
FALLBACK_MEAL_CALORIES = 400


class MealsShape(str, Enum):
    """Recognized layouts of the `meals` field."""

    CANONICAL_LIST = "canonical_list"   # [{day, mealNumber, mealType, recipe}, ...]
    INDEXED_LIST = "indexed_list"       # [{recipe...}, ...] positions inferred from index
    DAY_KEYED = "day_keyed"             # {"Monday": {"breakfast": {...}}, ...}
    ABSENT = "absent"


def detect_meals_shape(meals: Any) -> MealsShape:
    """Classify `meals` by its discriminating structure."""
    if isinstance(meals, list):
        if meals and isinstance(meals[0], dict) and meals[0].get("day") and meals[0].get("mealNumber"):
            return MealsShape.CANONICAL_LIST
        return MealsShape.INDEXED_LIST
    if isinstance(meals, dict):
        return MealsShape.DAY_KEYED
    return MealsShape.ABSENT


def _from_canonical_list(meals: List[dict]) -> List[dict]:
    return meals


def _from_indexed_list(meals: List[Any]) -> List[dict]:
    out = []
    for index, meal in enumerate(meals):
        if not isinstance(meal, dict):
            logger.warning("Skipping non-object meal entry at index %s", index)
            continue
        out.append({
            "day": meal.get("day") or index // LEGACY_MEALS_PER_DAY + 1,
            "mealNumber": meal.get("mealNumber") or index % LEGACY_MEALS_PER_DAY + 1,
            "mealType": meal.get("mealType") or "meal",
            "recipe": meal.get("recipe") or meal,
        })
    return out


def _recipe_from_day_entry(meal_type: str, entry: dict) -> dict:
    return {
        "id": str(entry["recipeId"]),
        "name": entry.get("name") or f"{meal_type} recipe",
        "description": entry.get("description") or "",
        "caloriesKcal": entry.get("calories") or FALLBACK_MEAL_CALORIES,
        "proteinGrams": str(entry.get("protein") or 20),
        "carbsGrams": str(entry.get("carbs") or 40),
        "fatGrams": str(entry.get("fat") or 15),
        "prepTimeMinutes": entry.get("prepTime") or 15,
        "cookTimeMinutes": entry.get("cookTime") or 20,
        "servings": entry.get("portions") or 1,
        "mealTypes": [meal_type],
        "dietaryTags": entry.get("tags") or [],
        "mainIngredientTags": [],
        "ingredientsJson": entry.get("ingredients") or [],
        "instructionsText": entry.get("instructions") or "No instructions provided.",
        "imageUrl": entry.get("imageUrl"),
    }


def _from_day_keyed(meals: Dict[str, Any]) -> List[dict]:
    out = []
    for day_name, day_meals in meals.items():
        if day_name not in DAY_NAMES:
            logger.warning("Skipping meals for unrecognized day name '%s'", day_name)
            continue
        if not isinstance(day_meals, dict):
            logger.warning("Skipping %s: expected an object keyed by meal type", day_name)
            continue
        day_number = DAY_NAMES.index(day_name) + 1
        for meal_index, (meal_type, entry) in enumerate(day_meals.items()):
            if not isinstance(entry, dict) or not entry.get("recipeId"):
                logger.warning("Skipping %s %s: no recipe id", day_name, meal_type)
                continue
            out.append({
                "day": day_number,
                "mealNumber": meal_index + 1,
                "mealType": meal_type,
                "recipe": _recipe_from_day_entry(meal_type, entry),
            })
    return out


def _absent(meals: Any) -> List[dict]:
    return []


_CONVERTERS: Dict[MealsShape, Callable[[Any], List[dict]]] = {
    MealsShape.CANONICAL_LIST: _from_canonical_list,
    MealsShape.INDEXED_LIST: _from_indexed_list,
    MealsShape.DAY_KEYED: _from_day_keyed,
    MealsShape.ABSENT: _absent,
}


def normalize_meals(meals: Any) -> List[dict]:
    """Convert any supported `meals` layout into the canonical list."""
    shape = detect_meals_shape(meals)
    logger.debug("Detected meals shape: %s", shape.value)
    return _CONVERTERS[shape](meals)


def _meal_calories(meal: dict) -> float:
    recipe = meal.get("recipe")
    if not isinstance(recipe, dict):
        recipe = {}
    raw = recipe.get("caloriesKcal") or meal.get("caloriesKcal") or meal.get("calories")
    calories = parse_float_prefix(raw)
    return calories if calories is not None else FALLBACK_MEAL_CALORIES


def derive_daily_calorie_target(meals: List[dict]) -> int:
    if not meals:
        return DEFAULT_DAILY_CALORIES
    total = sum(_meal_calories(m) for m in meals)
    unique_days = len({m.get("day") or 1 for m in meals})
    return round_half_up(total / max(unique_days, 1))


def derive_days(meals: List[dict]) -> int:
    if not meals:
        return DEFAULT_DAYS
    return max(len({m.get("day") or 1 for m in meals}), 1)


def derive_meals_per_day(meals: List[dict]) -> int:
    counts: Dict[Any, int] = {}
    for meal in meals:
        day = meal.get("day") or 1
        counts[day] = counts.get(day, 0) + 1
    return max([*counts.values(), MIN_DERIVED_MEALS_PER_DAY])


def normalize_meal_plan_input(raw: Any) -> Dict[str, Any]:
    """Return the canonical meal plan dict for any supported input shape.

    Args:
        raw: Parsed JSON of a meal plan (possibly wrapped in `mealPlanData`).

    Returns:
        A new dict; `raw` is never modified.
    """
    if not isinstance(raw, dict):
        logger.warning("Meal plan input is %s, not an object", type(raw).__name__)
        raw = {}

    data = raw["mealPlanData"] if isinstance(raw.get("mealPlanData"), dict) else raw
    plan = dict(data)

    if "meals" in data:
        plan["meals"] = normalize_meals(data["meals"])
    else:
        plan["meals"] = []

    if data.get("name") and not data.get("planName"):
        # Frontend-shaped plan
        meals = plan["meals"]
        plan["planName"] = data["name"]
        plan["fitnessGoal"] = data.get("fitnessGoal") or data.get("description") or DEFAULT_FITNESS_GOAL
        plan["dailyCalorieTarget"] = data.get("dailyCalorieTarget") or derive_daily_calorie_target(meals)
        plan["days"] = data.get("days") or derive_days(meals)
        plan["mealsPerDay"] = data.get("mealsPerDay") or derive_meals_per_day(meals)

    plan["id"] = plan.get("id") or DEFAULT_PLAN_ID
    plan["description"] = plan.get("description") or ""
    return plan
