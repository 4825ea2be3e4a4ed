"""Pydantic schema package for request and response models."""

from .recipe_schema import IngredientItem, Recipe, RecipeFilter, RecipeSearchResult
from .meal_plan_schema import (
    MealPlanGenerationRequest,
    RecipeSnapshot,
    MealSlot,
    MealPlan,
    MealPrepPlan,
    NutritionSummary,
    GenerateMealPlanResponse,
)
from .validation_schema import ValidatedMealPlan
from .export_schema import MealPlanExportRequest, MealPlanExportData

__all__ = [
    "IngredientItem",
    "Recipe",
    "RecipeFilter",
    "RecipeSearchResult",
    "MealPlanGenerationRequest",
    "RecipeSnapshot",
    "MealSlot",
    "MealPlan",
    "MealPrepPlan",
    "NutritionSummary",
    "GenerateMealPlanResponse",
    "ValidatedMealPlan",
    "MealPlanExportRequest",
    "MealPlanExportData",
]
