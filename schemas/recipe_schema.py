"""Schemas for recipes and recipe search filters.

Recipes travel as camelCase JSON (`caloriesKcal`, `ingredientsJson`, ...);
attributes are snake_case and populated from either spelling.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IngredientItem(CamelModel):
    """One ingredient line of a recipe."""

    name: str
    amount: str = ""
    unit: str = ""


class Recipe(CamelModel):
    """Recipe record as supplied by the recipe store."""

    id: str
    name: str
    description: str = ""
    calories_kcal: int = Field(0, ge=0)
    protein_grams: str = "0"
    carbs_grams: str = "0"
    fat_grams: str = "0"
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    servings: int = Field(1, ge=1)
    meal_types: List[str] = []
    dietary_tags: List[str] = []
    main_ingredient_tags: List[str] = []
    ingredients_json: List[IngredientItem] = []
    instructions_text: str = ""
    image_url: Optional[str] = None
    source_reference: Optional[str] = None
    is_approved: bool = False


class RecipeFilter(CamelModel):
    """Search constraints understood by every recipe store."""

    approved: Optional[bool] = Field(None, description="Filter by approval status")
    limit: int = Field(12, ge=1, le=100)
    page: int = Field(1, ge=1)
    search: Optional[str] = Field(None, description="Matches recipe name and description")
    meal_type: Optional[str] = Field(None, examples=["breakfast"])
    dietary_tag: Optional[str] = Field(None, examples=["vegan"])
    max_prep_time: Optional[int] = Field(None, ge=0, examples=[30])
    min_calories: Optional[int] = Field(None, ge=0)
    max_calories: Optional[int] = Field(None, ge=0)
    include_ingredients: Optional[List[str]] = None
    exclude_ingredients: Optional[List[str]] = None


class RecipeSearchResult(CamelModel):
    """Page of recipes plus the total number of matches."""

    recipes: List[Recipe]
    total: int
