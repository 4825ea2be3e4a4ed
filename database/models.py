"""SQLAlchemy ORM models for the meal plan service.

The recipe catalog is the only table this service owns. List-valued fields
(meal types, tags, ingredients) are stored as JSON-encoded text, and macro
grams as fixed-point decimals that are handed to callers as strings.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, Numeric
from sqlalchemy.orm import declarative_base
from datetime import datetime
import json
import uuid

Base = declarative_base()


def _new_recipe_id() -> str:
    return str(uuid.uuid4())


def _load_list(raw):
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        return list(raw)
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []


def _grams(value) -> str:
    if value is None:
        return "0"
    return str(value)


class Recipe(Base):
    """ORM model representing a recipe in the catalog."""

    __tablename__ = "recipes"
    id = Column(String(36), primary_key=True, default=_new_recipe_id)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    meal_types = Column(Text, nullable=True, default="[]")
    dietary_tags = Column(Text, nullable=True, default="[]")
    main_ingredient_tags = Column(Text, nullable=True, default="[]")
    ingredients_json = Column(Text, nullable=False, default="[]")
    instructions_text = Column(Text, nullable=False, default="")
    prep_time_minutes = Column(Integer, nullable=False, default=0)
    cook_time_minutes = Column(Integer, nullable=False, default=0)
    servings = Column(Integer, nullable=False, default=1)
    calories_kcal = Column(Integer, nullable=False)
    protein_grams = Column(Numeric(5, 2), nullable=False)
    carbs_grams = Column(Numeric(5, 2), nullable=False)
    fat_grams = Column(Numeric(5, 2), nullable=False)
    image_url = Column(String(500), nullable=True)
    source_reference = Column(String(255), nullable=True)
    is_approved = Column(Boolean, default=False, index=True)
    creation_timestamp = Column(DateTime, default=datetime.utcnow)
    last_updated_timestamp = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self) -> dict:
        """Return the camelCase recipe record consumed by the services."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description or "",
            "caloriesKcal": self.calories_kcal,
            "proteinGrams": _grams(self.protein_grams),
            "carbsGrams": _grams(self.carbs_grams),
            "fatGrams": _grams(self.fat_grams),
            "prepTimeMinutes": self.prep_time_minutes,
            "cookTimeMinutes": self.cook_time_minutes or 0,
            "servings": self.servings,
            "mealTypes": _load_list(self.meal_types),
            "dietaryTags": _load_list(self.dietary_tags),
            "mainIngredientTags": _load_list(self.main_ingredient_tags),
            "ingredientsJson": _load_list(self.ingredients_json),
            "instructionsText": self.instructions_text or "",
            "imageUrl": self.image_url,
            "sourceReference": self.source_reference,
            "isApproved": bool(self.is_approved),
        }

    @classmethod
    def from_dict(cls, item: dict) -> "Recipe":
        """Build an ORM recipe from a snake_case seed/ingest record."""
        return cls(
            name=item["name"],
            description=item.get("description", ""),
            meal_types=json.dumps(item.get("meal_types", [])),
            dietary_tags=json.dumps(item.get("dietary_tags", [])),
            main_ingredient_tags=json.dumps(item.get("main_ingredient_tags", [])),
            ingredients_json=json.dumps(item.get("ingredients", [])),
            instructions_text=item.get("instructions", ""),
            prep_time_minutes=item.get("prep_time", 0),
            cook_time_minutes=item.get("cook_time", 0),
            servings=item.get("servings", 1),
            calories_kcal=item["calories"],
            protein_grams=item.get("protein", 0),
            carbs_grams=item.get("carbs", 0),
            fat_grams=item.get("fat", 0),
            image_url=item.get("image_url"),
            is_approved=item.get("approved", True),
        )
