"""Start-of-week meal prep plans.

Consolidates every ingredient of a plan into a shopping list, then derives
ordered prep steps and storage advice from a keyword categorization of the
ingredient names.
"""

from enum import Enum
from typing import Dict, List, Union

from core.logger import get_logger
from core.numbers import parse_float_prefix
from schemas.meal_plan_schema import (
    MealPlan,
    MealPrepPlan,
    PrepStep,
    ShoppingListItem,
    StorageInstruction,
)
from schemas.validation_schema import ValidatedMealPlan

logger = get_logger("services.meal_prep")


class IngredientCategory(str, Enum):
    """Prep categories, declared in matching priority order."""

    VEGETABLE = "vegetable"
    PROTEIN = "protein"
    GRAIN = "grain"
    DAIRY = "dairy"
    OTHER = "other"


CATEGORY_KEYWORDS: Dict[IngredientCategory, List[str]] = {
    IngredientCategory.VEGETABLE: [
        "tomato", "onion", "garlic", "carrot", "celery", "bell pepper", "broccoli",
        "spinach", "lettuce", "cucumber", "zucchini", "asparagus", "mushroom",
        "kale", "cabbage", "cauliflower",
    ],
    IngredientCategory.PROTEIN: [
        "chicken", "beef", "pork", "fish", "salmon", "tuna", "turkey", "tofu",
        "tempeh", "eggs", "beans", "lentils", "chickpeas",
    ],
    IngredientCategory.GRAIN: ["rice", "quinoa", "oats", "pasta", "bread", "barley", "bulgur", "farro"],
    IngredientCategory.DAIRY: ["milk", "cheese", "yogurt", "butter", "cream"],
}

STORAGE_ADVICE: Dict[IngredientCategory, tuple] = {
    IngredientCategory.VEGETABLE: ("Refrigerate in airtight containers", "3-5 days"),
    IngredientCategory.PROTEIN: (
        "Refrigerate (cooked) or freeze (raw portions)",
        "3-4 days refrigerated, 3 months frozen",
    ),
    IngredientCategory.GRAIN: ("Refrigerate in sealed containers", "5-7 days"),
    IngredientCategory.DAIRY: ("Refrigerate", "Use by expiration date"),
    IngredientCategory.OTHER: ("Store in pantry or refrigerate as appropriate", "Follow package instructions"),
}

# (category, instruction template, minimum minutes, minutes per ingredient)
PREP_STEPS = [
    (
        IngredientCategory.VEGETABLE,
        "Wash and prep vegetables: {}. Chop, dice, or slice as needed for recipes.",
        15, 5,
    ),
    (
        IngredientCategory.PROTEIN,
        "Prepare proteins: {}. Trim, portion, and marinate if needed.",
        20, 8,
    ),
    (
        IngredientCategory.GRAIN,
        "Cook grains and legumes: {}. Cook according to package directions and store in portions.",
        25, 10,
    ),
]
FINAL_STEP = (
    "Label and store all prepped ingredients according to storage instructions. "
    "Clean prep area and wash containers."
)
FINAL_STEP_MINUTES = 10


def categorize_ingredient(name: str) -> IngredientCategory:
    """Return the first category whose keyword occurs in `name`."""
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return IngredientCategory.OTHER


def _format_total(total: float) -> str:
    if total <= 0:
        return "1"
    if float(total).is_integer():
        return str(int(total))
    return f"{total:.2f}".rstrip("0").rstrip(".")


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def build_shopping_list(plan: Union[MealPlan, ValidatedMealPlan]) -> List[ShoppingListItem]:
    """Consolidate the plan's ingredients by lowercased name."""
    consolidated: Dict[str, dict] = {}
    for meal in plan.meals:
        for ingredient in meal.recipe.ingredients_json or []:
            key = ingredient.name.lower()
            amount = parse_float_prefix(ingredient.amount) or 0.0
            entry = consolidated.get(key)
            if entry is None:
                consolidated[key] = {
                    "total": amount,
                    "unit": ingredient.unit or "",
                    "recipes": [meal.recipe.name],
                }
                continue
            entry["total"] += amount
            if meal.recipe.name not in entry["recipes"]:
                entry["recipes"].append(meal.recipe.name)

    return [
        ShoppingListItem(
            ingredient=_capitalize_first(name),
            total_amount=_format_total(data["total"]),
            unit=data["unit"],
            used_in_recipes=data["recipes"],
        )
        for name, data in consolidated.items()
    ]


def build_prep_steps(shopping_list: List[ShoppingListItem]) -> List[PrepStep]:
    steps = []
    for category, template, min_minutes, per_item in PREP_STEPS:
        names = [item.ingredient for item in shopping_list if categorize_ingredient(item.ingredient) is category]
        if not names:
            continue
        steps.append(PrepStep(
            step=len(steps) + 1,
            instruction=template.format(", ".join(names)),
            estimated_time=max(min_minutes, per_item * len(names)),
            ingredients=names,
        ))
    steps.append(PrepStep(
        step=len(steps) + 1,
        instruction=FINAL_STEP,
        estimated_time=FINAL_STEP_MINUTES,
        ingredients=[],
    ))
    return steps


def build_storage_instructions(shopping_list: List[ShoppingListItem]) -> List[StorageInstruction]:
    instructions = []
    for item in shopping_list:
        method, duration = STORAGE_ADVICE[categorize_ingredient(item.ingredient)]
        instructions.append(StorageInstruction(ingredient=item.ingredient, method=method, duration=duration))
    return instructions


def generate_meal_prep_plan(plan: Union[MealPlan, ValidatedMealPlan]) -> MealPrepPlan:
    """Build the start-of-week meal prep plan for `plan`."""
    shopping_list = build_shopping_list(plan)
    prep_steps = build_prep_steps(shopping_list)
    prep_plan = MealPrepPlan(
        total_prep_time=sum(step.estimated_time for step in prep_steps),
        shopping_list=shopping_list,
        prep_instructions=prep_steps,
        storage_instructions=build_storage_instructions(shopping_list),
    )
    logger.debug(
        "Meal prep plan: %s ingredients, %s steps, %s minutes",
        len(shopping_list), len(prep_steps), prep_plan.total_prep_time,
    )
    return prep_plan
