"""Meal plans API router.

Generation, validation, nutrition summaries and printable export data for
meal plans. Generation requires an identified requester; the other
endpoints work on caller-supplied plan JSON in any supported shape.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header

from api.deps import get_meal_plan_generator, get_recipe_store, get_requester_id
from core.exceptions import ValidationError
from core.logger import get_logger
from schemas import GenerateMealPlanResponse, MealPlanGenerationRequest, NutritionSummary, ValidatedMealPlan
from schemas.export_schema import MealPlanExportData, MealPlanExportRequest
from services.meal_plan_generator import MealPlanGenerator
from services.meal_plan_validator import validate_meal_plan_data
from services.nutrition_aggregator import calculate_meal_plan_nutrition
from services.pdf_export import build_export_data
from services.recipe_store import RecipeStore

logger = get_logger("api.meal_plans")
router = APIRouter(prefix="/api/meal-plans", tags=["meal-plans"])


@router.post("/generate", response_model=GenerateMealPlanResponse)
def generate_meal_plan(
    request: MealPlanGenerationRequest,
    requester_id: str = Depends(get_requester_id),
    generator: MealPlanGenerator = Depends(get_meal_plan_generator),
):
    """Generate a meal plan and its nutrition summary.

    Raises:
        NoRecipesAvailableError: If the catalog has no approved recipes.
    """
    logger.info("Meal plan generation requested by %s: %s", requester_id, request.plan_name)
    plan = generator.generate_meal_plan(request, requester_id)
    nutrition = calculate_meal_plan_nutrition(plan)
    return GenerateMealPlanResponse(
        meal_plan=plan,
        nutrition=nutrition,
        message="Meal plan generated successfully",
        completed=True,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/validate", response_model=ValidatedMealPlan)
def validate_meal_plan(
    raw: Any = Body(...),
    store: RecipeStore = Depends(get_recipe_store),
):
    """Normalize, enrich and validate a meal plan (400 on failure)."""
    return validate_meal_plan_data(raw, store)


@router.post("/nutrition", response_model=NutritionSummary)
def meal_plan_nutrition(
    raw: Any = Body(...),
    store: RecipeStore = Depends(get_recipe_store),
):
    """Return per-day, total and average daily nutrition for a meal plan."""
    plan = validate_meal_plan_data(raw, store)
    return calculate_meal_plan_nutrition(plan)


@router.post("/export", response_model=MealPlanExportData)
def export_meal_plan(
    request: MealPlanExportRequest,
    store: RecipeStore = Depends(get_recipe_store),
    x_user_id: Optional[str] = Header(None),
):
    """Build the printable template context for a meal plan."""
    if not request.meal_plan_data:
        raise ValidationError("Meal plan data is required", field="mealPlanData")

    plan = validate_meal_plan_data(request.meal_plan_data, store)
    return build_export_data(
        plan,
        customer_name=request.customer_name,
        options=request.options,
        generated_by=x_user_id,
    )
