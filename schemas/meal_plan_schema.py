"""Schemas for meal plan generation, meal prep and nutrition summaries."""

from datetime import datetime
from pydantic import Field
from typing import List, Optional

from .recipe_schema import CamelModel, IngredientItem


class MealPlanGenerationRequest(CamelModel):
    """Parameters accepted by the meal plan generator."""

    plan_name: str = Field(..., min_length=1, max_length=100, examples=["Lean Summer Cut"])
    fitness_goal: str = Field(..., min_length=1, examples=["weight_loss"])
    description: Optional[str] = None
    daily_calorie_target: int = Field(..., ge=500, le=10000, examples=[2000])
    days: int = Field(..., ge=1, le=365, examples=[7])
    meals_per_day: int = Field(3, ge=1, le=10, examples=[3])
    client_name: Optional[str] = Field(None, examples=["Jane Client"])
    max_ingredients: Optional[int] = Field(None, ge=1, description="Cap on distinct ingredients across the whole plan")
    generate_meal_prep: bool = True

    # Recipe filtering constraints forwarded to the recipe store
    meal_type: Optional[str] = Field(None, examples=["lunch"])
    dietary_tag: Optional[str] = Field(None, examples=["vegetarian"])
    max_prep_time: Optional[int] = Field(None, ge=0)
    min_calories: Optional[int] = Field(None, ge=0)
    max_calories: Optional[int] = Field(None, ge=0)


class RecipeSnapshot(CamelModel):
    """Copy of a recipe embedded in a meal slot at generation time."""

    id: str
    name: str
    description: str = ""
    calories_kcal: int = 0
    protein_grams: str = "0"
    carbs_grams: str = "0"
    fat_grams: str = "0"
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    servings: int = 1
    meal_types: List[str] = []
    dietary_tags: List[str] = []
    main_ingredient_tags: List[str] = []
    ingredients_json: List[IngredientItem] = []
    instructions_text: str = ""
    image_url: Optional[str] = None


class MealSlot(CamelModel):
    """One (day, mealNumber) position of a plan filled with a recipe."""

    day: int = Field(..., ge=1)
    meal_number: int = Field(..., ge=1)
    meal_type: str
    recipe: RecipeSnapshot


class ShoppingListItem(CamelModel):
    ingredient: str
    total_amount: str
    unit: str
    used_in_recipes: List[str]


class PrepStep(CamelModel):
    step: int
    instruction: str
    estimated_time: int
    ingredients: List[str]


class StorageInstruction(CamelModel):
    ingredient: str
    method: str
    duration: str


class MealPrepPlan(CamelModel):
    """Start-of-week prep plan derived from a meal plan's recipes."""

    total_prep_time: int
    shopping_list: List[ShoppingListItem]
    prep_instructions: List[PrepStep]
    storage_instructions: List[StorageInstruction]


class MealPlan(CamelModel):
    """Generated meal plan."""

    id: str
    plan_name: str
    fitness_goal: str
    description: str = ""
    daily_calorie_target: int
    client_name: Optional[str] = None
    days: int
    meals_per_day: int
    generated_by: str
    created_at: datetime
    meals: List[MealSlot] = []
    start_of_week_meal_prep: Optional[MealPrepPlan] = None


class NutritionTotals(CamelModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class DailyNutrition(NutritionTotals):
    day: int


class NutritionSummary(CamelModel):
    """Totals, per-day sums and average daily values for a plan."""

    total: NutritionTotals
    daily: List[DailyNutrition]
    average_daily: NutritionTotals


class GenerateMealPlanResponse(CamelModel):
    """Payload returned by the generation endpoint."""

    meal_plan: MealPlan
    nutrition: NutritionSummary
    message: str
    completed: bool
    timestamp: str
