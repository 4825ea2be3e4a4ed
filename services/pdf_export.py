"""Printable meal plan export.

Text filters and amount formatting used by the PDF path, and
`build_export_data`, which turns a validated plan into the context a
printable template renders (grouped meals, totals, shopping list, table of
contents). Rendering HTML or PDF is left to the caller.
"""

import re
from collections import defaultdict
from datetime import datetime, timezone
from typing import List, Optional

from core.logger import get_logger
from core.numbers import parse_float_prefix, round_half_up, to_fixed
from schemas.export_schema import (
    DayMeals,
    ExportOptions,
    ExportShoppingItem,
    MacroSplit,
    MealPlanExportData,
    PlanNutritionTotals,
    TableOfContentsEntry,
)
from schemas.validation_schema import ValidatedMeal, ValidatedMealPlan

logger = get_logger("services.pdf_export")

MAX_TEXT_LENGTH = 500
DEFAULT_CUSTOMER_NAME = "Valued Client"
DEFAULT_GENERATED_BY = "Trainer"

VOLUME_UNITS = ["cup", "cups", "ml", "l", "tsp", "tbsp", "fl oz"]
WEIGHT_UNITS = ["g", "kg", "oz", "lb", "lbs"]
COOKING_FRACTIONS = [
    (0.125, "1/8"),
    (0.25, "1/4"),
    (0.333, "1/3"),
    (0.5, "1/2"),
    (0.667, "2/3"),
    (0.75, "3/4"),
]
FRACTION_TOLERANCE = 0.05

_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s\-.,!?():;\"'/]")
_WHITESPACE = re.compile(r"\s+")
_HTML_STRIP_PATTERNS = [
    re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE),
    re.compile(r"<iframe[^>]*>.*?</iframe>", re.IGNORECASE),
    re.compile(r"on\w+=\"[^\"]*\"", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
]


def sanitize_text(text: Optional[str]) -> str:
    """Keep word characters and basic punctuation, collapse whitespace, cap at 500 chars."""
    if not text:
        return ""
    cleaned = _DISALLOWED_CHARS.sub("", text)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return cleaned[:MAX_TEXT_LENGTH]


def sanitize_html(html: Optional[str]) -> str:
    """Strip script/iframe elements, inline event handlers and `javascript:` URLs."""
    if not html:
        return ""
    for pattern in _HTML_STRIP_PATTERNS:
        html = pattern.sub("", html)
    return html.strip()


def _format_fraction(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    whole = int(value // 1)
    fractional = value - whole
    closest, label = min(COOKING_FRACTIONS, key=lambda item: abs(item[0] - fractional))
    if abs(closest - fractional) < FRACTION_TOLERANCE:
        return f"{whole} {label}" if whole > 0 else label
    return to_fixed(value, 2)


def format_ingredient_amount(amount: str, unit: str) -> str:
    """Format an ingredient amount for display.

    Volume units snap to common cooking fractions, weight units show one
    decimal, anything else two. Non-numeric amounts ("pinch") pass through.

    >>> format_ingredient_amount("0.5", "cup")
    '1/2'
    >>> format_ingredient_amount("1.5", "kg")
    '1.5'
    """
    value = parse_float_prefix(amount)
    if value is None:
        return amount

    unit = (unit or "").lower()
    if unit in VOLUME_UNITS:
        return _format_fraction(value)
    if value.is_integer():
        return str(int(value))
    if unit in WEIGHT_UNITS:
        return to_fixed(value, 1)
    return to_fixed(value, 2)


def _format_total(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return to_fixed(amount, 2).rstrip("0").rstrip(".")


def group_meals_by_day(meals: List[ValidatedMeal]) -> List[DayMeals]:
    by_day = defaultdict(list)
    for meal in meals:
        by_day[meal.day].append(meal)
    return [
        DayMeals(day=day, meals=sorted(day_meals, key=lambda m: m.meal_number))
        for day, day_meals in sorted(by_day.items())
    ]


def calculate_nutrition_totals(meals: List[ValidatedMeal]) -> PlanNutritionTotals:
    """Sum macros over all meals and average them over the days that have meals."""
    totals = PlanNutritionTotals()
    for meal in meals:
        recipe = meal.recipe
        totals.total_calories += recipe.calories_kcal
        totals.total_protein += parse_float_prefix(recipe.protein_grams) or 0
        totals.total_carbs += parse_float_prefix(recipe.carbs_grams) or 0
        totals.total_fat += parse_float_prefix(recipe.fat_grams) or 0

    num_days = len({meal.day for meal in meals})
    if num_days:
        totals.avg_calories_per_day = totals.total_calories / num_days
        totals.avg_protein_per_day = totals.total_protein / num_days
        totals.avg_carbs_per_day = totals.total_carbs / num_days
        totals.avg_fat_per_day = totals.total_fat / num_days
    return totals


def build_macro_chart(totals: PlanNutritionTotals) -> MacroSplit:
    """Percent of daily macro calories from protein, carbs and fat."""
    protein = totals.avg_protein_per_day * 4
    carbs = totals.avg_carbs_per_day * 4
    fat = totals.avg_fat_per_day * 9
    energy = protein + carbs + fat
    if energy == 0:
        return MacroSplit()
    return MacroSplit(
        protein=round_half_up(protein / energy * 100),
        carbs=round_half_up(carbs / energy * 100),
        fat=round_half_up(fat / energy * 100),
    )


def build_export_shopping_list(meals: List[ValidatedMeal]) -> List[ExportShoppingItem]:
    """Consolidate ingredients by (name, unit), sorted by name."""
    consolidated = {}
    for meal in meals:
        for ingredient in meal.recipe.ingredients_json:
            key = (ingredient.name.lower(), ingredient.unit.lower())
            amount = parse_float_prefix(ingredient.amount) or 0
            if key in consolidated:
                consolidated[key]["amount"] += amount
            else:
                consolidated[key] = {"name": ingredient.name, "amount": amount, "unit": ingredient.unit}

    items = sorted(consolidated.values(), key=lambda item: item["name"].lower())
    return [ExportShoppingItem(**item, formatted_amount=_format_total(item["amount"])) for item in items]


def build_table_of_contents(plan: ValidatedMealPlan) -> List[TableOfContentsEntry]:
    contents = [
        TableOfContentsEntry(title="Overview", page=2),
        TableOfContentsEntry(title="Weekly Meal Schedule", page=3),
    ]
    page = 4
    for day in range(1, plan.days + 1):
        contents.append(TableOfContentsEntry(title=f"Day {day} Meals", page=page))
        page += 1
    contents.append(TableOfContentsEntry(title="Recipe Details", page=page))
    page += len(plan.meals)
    contents.append(TableOfContentsEntry(title="Shopping List", page=page))
    page += 1
    contents.append(TableOfContentsEntry(title="Nutrition Summary", page=page))
    return contents


def sanitize_meal_plan(plan: ValidatedMealPlan) -> ValidatedMealPlan:
    """Return a copy of `plan` with its free text filtered for printing."""
    meals = []
    for meal in plan.meals:
        recipe = meal.recipe.model_copy(update={
            "name": sanitize_text(meal.recipe.name),
            "description": sanitize_text(meal.recipe.description),
            "instructions_text": sanitize_html(meal.recipe.instructions_text),
        })
        meals.append(meal.model_copy(update={"recipe": recipe}))
    return plan.model_copy(update={
        "plan_name": sanitize_text(plan.plan_name),
        "fitness_goal": sanitize_text(plan.fitness_goal),
        "description": sanitize_text(plan.description),
        "client_name": sanitize_text(plan.client_name) or None,
        "meals": meals,
    })


def build_export_data(
    plan: ValidatedMealPlan,
    customer_name: Optional[str] = None,
    options: Optional[ExportOptions] = None,
    generated_by: Optional[str] = None,
) -> MealPlanExportData:
    """Assemble the printable template context for a validated plan."""
    options = options or ExportOptions()
    plan = sanitize_meal_plan(plan)
    totals = calculate_nutrition_totals(plan.meals)

    export = MealPlanExportData(
        meal_plan=plan,
        customer_name=sanitize_text(customer_name) or DEFAULT_CUSTOMER_NAME,
        generated_date=datetime.now(timezone.utc).isoformat(),
        generated_by=generated_by or DEFAULT_GENERATED_BY,
        options=options,
        meals_by_day=group_meals_by_day(plan.meals),
        nutrition_totals=totals,
        macro_chart=build_macro_chart(totals) if options.include_macro_summary else None,
        shopping_list=build_export_shopping_list(plan.meals) if options.include_shopping_list else None,
        table_of_contents=build_table_of_contents(plan),
    )
    logger.info("Prepared export data for plan '%s' (%s meals)", plan.plan_name, len(plan.meals))
    return export
