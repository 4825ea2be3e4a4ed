"""Recipe store collaborators.

The meal plan services only depend on the `RecipeStore` protocol: a paged
search over recipes and a lookup by id. Two implementations are provided,
one over the SQL catalog and one over static in-memory data.
"""

from typing import Iterable, List, Optional, Protocol

from sqlalchemy.orm import Session

from core.logger import get_logger
from core.repository import RecipeRepository
from schemas.recipe_schema import Recipe, RecipeFilter, RecipeSearchResult

logger = get_logger("services.recipe_store")


class RecipeStore(Protocol):
    """Interface the meal plan services use to read recipes."""

    def search_recipes(self, recipe_filter: RecipeFilter) -> RecipeSearchResult:
        ...

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        ...


def _lowered(values: Iterable[str]) -> List[str]:
    return [str(v).lower() for v in values or []]


def recipe_matches_filter(recipe: Recipe, recipe_filter: RecipeFilter) -> bool:
    """Return True when `recipe` satisfies every constraint in the filter."""
    f = recipe_filter
    if f.approved is not None and recipe.is_approved != f.approved:
        return False
    if f.meal_type and f.meal_type.lower() not in _lowered(recipe.meal_types):
        return False
    if f.dietary_tag and f.dietary_tag.lower() not in _lowered(recipe.dietary_tags):
        return False
    if f.max_prep_time is not None and recipe.prep_time_minutes > f.max_prep_time:
        return False
    if f.min_calories is not None and recipe.calories_kcal < f.min_calories:
        return False
    if f.max_calories is not None and recipe.calories_kcal > f.max_calories:
        return False
    if f.search:
        needle = f.search.lower()
        if needle not in recipe.name.lower() and needle not in (recipe.description or "").lower():
            return False

    ingredient_names = [i.name.lower() for i in recipe.ingredients_json]
    if f.include_ingredients:
        for wanted in f.include_ingredients:
            if not any(wanted.lower() in name for name in ingredient_names):
                return False
    if f.exclude_ingredients:
        for unwanted in f.exclude_ingredients:
            if any(unwanted.lower() in name for name in ingredient_names):
                return False
    return True


def paginate(recipes: List[Recipe], recipe_filter: RecipeFilter) -> RecipeSearchResult:
    start = (recipe_filter.page - 1) * recipe_filter.limit
    return RecipeSearchResult(recipes=recipes[start:start + recipe_filter.limit], total=len(recipes))


class InMemoryRecipeStore:
    """Recipe store over a fixed list of recipes (static configuration)."""

    def __init__(self, recipes: Iterable):
        self._recipes: List[Recipe] = [
            r if isinstance(r, Recipe) else Recipe.model_validate(r) for r in recipes
        ]

    @classmethod
    def from_seed_data(cls, items: Iterable[dict]) -> "InMemoryRecipeStore":
        """Build a store from snake_case seed records (see `data.recipes_dataset`)."""
        recipes = []
        for index, item in enumerate(items, start=1):
            recipes.append(Recipe(
                id=item.get("id", f"seed-{index}"),
                name=item["name"],
                description=item.get("description", ""),
                calories_kcal=item["calories"],
                protein_grams=str(item.get("protein", 0)),
                carbs_grams=str(item.get("carbs", 0)),
                fat_grams=str(item.get("fat", 0)),
                prep_time_minutes=item.get("prep_time", 0),
                cook_time_minutes=item.get("cook_time", 0),
                servings=item.get("servings", 1),
                meal_types=item.get("meal_types", []),
                dietary_tags=item.get("dietary_tags", []),
                ingredients_json=item.get("ingredients", []),
                instructions_text=item.get("instructions", ""),
                image_url=item.get("image_url"),
                is_approved=item.get("approved", True),
            ))
        return cls(recipes)

    def search_recipes(self, recipe_filter: RecipeFilter) -> RecipeSearchResult:
        matches = [r for r in self._recipes if recipe_matches_filter(r, recipe_filter)]
        logger.debug("In-memory search matched %s of %s recipes", len(matches), len(self._recipes))
        return paginate(matches, recipe_filter)

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self._recipes:
            if recipe.id == str(recipe_id):
                return recipe
        return None


class SqlRecipeStore:
    """Recipe store backed by the SQLAlchemy recipe catalog."""

    def __init__(self, session: Session):
        self.repository = RecipeRepository(session)

    def search_recipes(self, recipe_filter: RecipeFilter) -> RecipeSearchResult:
        rows = self.repository.list_candidates(
            approved=recipe_filter.approved,
            max_prep_time=recipe_filter.max_prep_time,
            min_calories=recipe_filter.min_calories,
            max_calories=recipe_filter.max_calories,
        )
        recipes = [Recipe.model_validate(row.to_dict()) for row in rows]
        matches = [r for r in recipes if recipe_matches_filter(r, recipe_filter)]
        logger.debug("SQL search matched %s of %s candidate recipes", len(matches), len(rows))
        return paginate(matches, recipe_filter)

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        row = self.repository.get_by_id(str(recipe_id))
        if row is None:
            return None
        return Recipe.model_validate(row.to_dict())
