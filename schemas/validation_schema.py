"""Validation schema for caller-supplied meal plans.

One schema serves both validation passes. The strict pass runs it with
pydantic strict mode; the lenient pass runs it in lax mode with the
`lenient` context flag, which additionally turns numbers into strings for
the fields that are stored as strings (ids, macro grams, ingredient amounts).
"""

import math
from datetime import datetime
from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError
from typing import Any, List, Optional

from core.numbers import parse_float_prefix
from .recipe_schema import CamelModel
from .meal_plan_schema import MealPrepPlan

LENIENT_CONTEXT = {"lenient": True}


def _stringify_number(value: Any, info: ValidationInfo) -> Any:
    """Turn ints/floats into strings when validating leniently."""
    lenient = bool(info.context and info.context.get("lenient"))
    if lenient and isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    return value


def _check_grams(value: str, label: str) -> str:
    parsed = parse_float_prefix(value)
    if parsed is None or math.isinf(parsed):
        raise PydanticCustomError("invalid_grams", "Invalid {label} value", {"label": label})
    if parsed < 0:
        raise PydanticCustomError("negative_grams", "{label} must not be negative", {"label": label.capitalize()})
    return value


class ValidatedIngredient(CamelModel):
    name: str = Field(..., min_length=1)
    amount: str = Field(..., min_length=1)
    unit: str = ""

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_to_str(cls, value, info: ValidationInfo):
        return _stringify_number(value, info)


class ValidatedRecipe(CamelModel):
    id: str
    name: str = Field(..., min_length=1)
    description: str = ""
    calories_kcal: int = Field(..., ge=0, le=5000)
    protein_grams: str
    carbs_grams: str
    fat_grams: str
    prep_time_minutes: int = Field(..., ge=0, le=480)
    cook_time_minutes: int = Field(0, ge=0)
    servings: int = Field(..., ge=1, le=20)
    meal_types: List[str] = []
    dietary_tags: List[str] = []
    ingredients_json: List[ValidatedIngredient] = []
    instructions_text: str = ""
    image_url: Optional[str] = None

    @field_validator("id", "protein_grams", "carbs_grams", "fat_grams", mode="before")
    @classmethod
    def _numbers_to_str(cls, value, info: ValidationInfo):
        return _stringify_number(value, info)

    @field_validator("protein_grams")
    @classmethod
    def _protein_is_number(cls, value: str) -> str:
        return _check_grams(value, "protein")

    @field_validator("carbs_grams")
    @classmethod
    def _carbs_is_number(cls, value: str) -> str:
        return _check_grams(value, "carbs")

    @field_validator("fat_grams")
    @classmethod
    def _fat_is_number(cls, value: str) -> str:
        return _check_grams(value, "fat")


class ValidatedMeal(CamelModel):
    day: int = Field(..., ge=1, le=365)
    meal_number: int = Field(..., ge=1, le=10)
    meal_type: str = Field(..., min_length=1)
    recipe: ValidatedRecipe


class ValidatedMealPlan(CamelModel):
    """Meal plan that passed structural validation."""

    id: str = "generated-plan"
    plan_name: str = Field(..., min_length=1, max_length=100)
    fitness_goal: str = Field(..., min_length=1)
    description: str = ""
    daily_calorie_target: int = Field(..., ge=500, le=10000)
    client_name: Optional[str] = None
    days: int = Field(..., ge=1, le=365)
    meals_per_day: int = Field(..., ge=1, le=10)
    generated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    meals: List[ValidatedMeal] = Field(default_factory=list, validate_default=True)
    start_of_week_meal_prep: Optional[MealPrepPlan] = None

    @field_validator("id", "client_name", "generated_by", mode="before")
    @classmethod
    def _ids_to_str(cls, value, info: ValidationInfo):
        return _stringify_number(value, info)

    @field_validator("meals")
    @classmethod
    def _at_least_one_meal(cls, value: List[ValidatedMeal]) -> List[ValidatedMeal]:
        if not value:
            raise PydanticCustomError("meals_required", "At least one meal is required")
        return value
