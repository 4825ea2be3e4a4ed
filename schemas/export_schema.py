"""Schemas for the printable (PDF) meal plan export payload."""

from pydantic import Field
from typing import Any, List, Literal, Optional

from .recipe_schema import CamelModel
from .validation_schema import ValidatedMeal, ValidatedMealPlan


class ExportOptions(CamelModel):
    include_shopping_list: bool = True
    include_macro_summary: bool = True
    include_recipe_photos: bool = False
    orientation: Literal["portrait", "landscape"] = "portrait"
    page_size: Literal["A4", "Letter"] = "A4"


class MealPlanExportRequest(CamelModel):
    """Body of the export endpoint; `mealPlanData` may be any supported shape."""

    meal_plan_data: Optional[Any] = Field(None, description="Meal plan in any supported input shape")
    customer_name: Optional[str] = Field(None, examples=["Jane Client"])
    options: ExportOptions = ExportOptions()


class DayMeals(CamelModel):
    day: int
    meals: List[ValidatedMeal]


class PlanNutritionTotals(CamelModel):
    total_calories: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fat: float = 0
    avg_calories_per_day: float = 0
    avg_protein_per_day: float = 0
    avg_carbs_per_day: float = 0
    avg_fat_per_day: float = 0


class ExportShoppingItem(CamelModel):
    name: str
    amount: float
    unit: str
    formatted_amount: str


class TableOfContentsEntry(CamelModel):
    title: str
    page: int


class MacroSplit(CamelModel):
    protein: int = 0
    carbs: int = 0
    fat: int = 0


class MealPlanExportData(CamelModel):
    """Everything a printable template needs, already sanitized."""

    meal_plan: ValidatedMealPlan
    customer_name: str
    generated_date: str
    generated_by: str
    options: ExportOptions
    meals_by_day: List[DayMeals]
    nutrition_totals: PlanNutritionTotals
    macro_chart: Optional[MacroSplit] = None
    shopping_list: Optional[List[ExportShoppingItem]] = None
    table_of_contents: List[TableOfContentsEntry]
