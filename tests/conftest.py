"""Shared pytest fixtures.

The database URL and log directory are read once when `core.config` is
imported, so they are pointed at a throwaway directory before any
application module loads.
"""
import os
import random
import tempfile

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="mealplans-tests-")
os.environ.setdefault("WRITE_DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_DIR", os.path.join(_TMP_DIR, "logs"))

from data.recipes_dataset import RECIPES_DATA  # noqa: E402
from services.recipe_store import InMemoryRecipeStore  # noqa: E402


@pytest.fixture
def seed_store():
    return InMemoryRecipeStore.from_seed_data(RECIPES_DATA)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def canonical_plan():
    """A two-day, two-meals-a-day plan in canonical camelCase form."""
    def meal(day, number, meal_type, calories, name):
        return {
            "day": day,
            "mealNumber": number,
            "mealType": meal_type,
            "recipe": {
                "id": f"r-{day}-{number}",
                "name": name,
                "description": "",
                "caloriesKcal": calories,
                "proteinGrams": "30",
                "carbsGrams": "60",
                "fatGrams": "20",
                "prepTimeMinutes": 10,
                "cookTimeMinutes": 20,
                "servings": 1,
                "mealTypes": [meal_type],
                "dietaryTags": [],
                "ingredientsJson": [
                    {"name": "Chicken breast", "amount": "200", "unit": "g"},
                    {"name": "Rice", "amount": "0.5", "unit": "cup"},
                ],
                "instructionsText": "Cook it.",
            },
        }

    return {
        "id": "plan-1",
        "planName": "Cutting Week",
        "fitnessGoal": "weight_loss",
        "description": "",
        "dailyCalorieTarget": 1500,
        "days": 2,
        "mealsPerDay": 2,
        "meals": [
            meal(1, 1, "breakfast", 500, "Egg Bowl"),
            meal(1, 2, "dinner", 700, "Chicken Rice"),
            meal(2, 1, "breakfast", 800, "Big Oats"),
            meal(2, 2, "dinner", 1000, "Steak Plate"),
        ],
    }
