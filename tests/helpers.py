"""Builders and fake recipe stores shared by the test modules."""
from schemas.recipe_schema import Recipe, RecipeSearchResult
from services.recipe_store import paginate, recipe_matches_filter


def make_recipe(recipe_id, name, calories=500, meal_types=("lunch",), ingredients=(), **extra):
    """Build an approved `Recipe` with `(name, amount, unit)` ingredient tuples."""
    return Recipe(
        id=recipe_id,
        name=name,
        calories_kcal=calories,
        protein_grams=extra.pop("protein", "30"),
        carbs_grams=extra.pop("carbs", "50"),
        fat_grams=extra.pop("fat", "15"),
        prep_time_minutes=extra.pop("prep_time", 10),
        servings=extra.pop("servings", 1),
        meal_types=list(meal_types),
        ingredients_json=[{"name": n, "amount": a, "unit": u} for n, a, u in ingredients],
        is_approved=extra.pop("approved", True),
        **extra,
    )


class ListRecipeStore:
    """Recipe store over a list; records every search filter and lookup."""

    def __init__(self, recipes=()):
        self.recipes = list(recipes)
        self.filters = []
        self.lookups = []

    def search_recipes(self, recipe_filter):
        self.filters.append(recipe_filter)
        matches = [r for r in self.recipes if recipe_matches_filter(r, recipe_filter)]
        return paginate(matches, recipe_filter)

    def get_recipe(self, recipe_id):
        self.lookups.append(recipe_id)
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None


class EmptyRecipeStore(ListRecipeStore):
    """Store with no recipes at all."""

    def search_recipes(self, recipe_filter):
        self.filters.append(recipe_filter)
        return RecipeSearchResult(recipes=[], total=0)


class FailingRecipeStore(ListRecipeStore):
    """Store whose lookups always raise."""

    def get_recipe(self, recipe_id):
        raise ConnectionError("catalog unavailable")
