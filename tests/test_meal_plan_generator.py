"""Tests for meal plan generation."""
import random

import pytest

from core.exceptions import NoRecipesAvailableError
from services.meal_plan_generator import (
    PLACEHOLDER_IMAGE_URL,
    MealPlanGenerator,
    assign_meal_type,
    score_recipe,
)
from tests.helpers import EmptyRecipeStore, ListRecipeStore, make_recipe

ALL_TYPES = ("breakfast", "lunch", "dinner", "snack")


def _params(**overrides):
    params = {
        "planName": "Test Plan",
        "fitnessGoal": "weight_loss",
        "dailyCalorieTarget": 1800,
        "days": 3,
        "mealsPerDay": 3,
    }
    params.update(overrides)
    return params


def _mixed_pool():
    return [
        make_recipe("b1", "Oats", calories=600, meal_types=("breakfast",), ingredients=[("Oats", "1", "cup")]),
        make_recipe("b2", "Eggs", calories=600, meal_types=("breakfast",), ingredients=[("Eggs", "2", "whole")]),
        make_recipe("l1", "Wrap", calories=600, meal_types=("lunch",), ingredients=[("Tortilla", "1", "whole")]),
        make_recipe("l2", "Salad", calories=600, meal_types=("lunch",), ingredients=[("Lettuce", "2", "cup")]),
        make_recipe("d1", "Salmon", calories=600, meal_types=("dinner",), ingredients=[("Salmon", "200", "g")]),
        make_recipe("d2", "Stir Fry", calories=600, meal_types=("dinner",), ingredients=[("Beef", "200", "g")]),
    ]


@pytest.mark.parametrize("meals_per_day, expected", [
    (1, ["lunch"]),
    (2, ["breakfast", "dinner"]),
    (3, ["breakfast", "lunch", "dinner"]),
    (5, ["breakfast", "lunch", "dinner", "snack", "breakfast"]),
])
def test_assign_meal_type_patterns(meals_per_day, expected):
    assert [assign_meal_type(n, meals_per_day) for n in range(1, meals_per_day + 1)] == expected


def test_single_meal_uses_requested_type():
    assert assign_meal_type(1, 1, "dinner") == "dinner"


@pytest.mark.parametrize("seed", [0, 1, 2, 99])
def test_three_meals_follow_fixed_pattern(seed):
    generator = MealPlanGenerator(ListRecipeStore(_mixed_pool()), rng=random.Random(seed))
    plan = generator.generate_meal_plan(_params(), "trainer-1")
    assert len(plan.meals) == 9
    for day in range(1, 4):
        day_meals = [m for m in plan.meals if m.day == day]
        assert [m.meal_type for m in day_meals] == ["breakfast", "lunch", "dinner"]
        assert [m.meal_number for m in day_meals] == [1, 2, 3]
    for meal in plan.meals:
        assert meal.recipe.id[0] == meal.meal_type[0]


def test_slots_are_unique_and_complete():
    generator = MealPlanGenerator(ListRecipeStore(_mixed_pool()), rng=random.Random(3))
    plan = generator.generate_meal_plan(_params(days=4, mealsPerDay=5), "trainer-1")
    slots = [(m.day, m.meal_number) for m in plan.meals]
    assert len(slots) == len(set(slots)) == 20


def test_plan_metadata():
    generator = MealPlanGenerator(ListRecipeStore(_mixed_pool()), rng=random.Random(1))
    plan = generator.generate_meal_plan(_params(clientName="Jane"), "trainer-7")
    assert plan.generated_by == "trainer-7"
    assert plan.client_name == "Jane"
    assert plan.description == "Test Plan - weight_loss focused meal plan"
    assert plan.created_at.tzinfo is not None
    assert len(plan.id) == 36


def test_same_seed_gives_same_plan():
    pool = _mixed_pool()
    first = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(11)).generate_meal_plan(_params(), "t")
    second = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(11)).generate_meal_plan(_params(), "t")
    assert [m.recipe.id for m in first.meals] == [m.recipe.id for m in second.meals]


def test_recent_recipes_are_not_repeated():
    pool = [make_recipe(f"r{i}", f"Lunch {i}", calories=2000) for i in range(3)]
    generator = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(5))
    plan = generator.generate_meal_plan(_params(days=9, mealsPerDay=1, dailyCalorieTarget=2000), "t")
    ids = [m.recipe.id for m in plan.meals]
    for i in range(2, len(ids)):
        assert ids[i] not in (ids[i - 1], ids[i - 2])


def test_calorie_band_is_preferred():
    pool = [
        make_recipe("fit", "On Target", calories=650, meal_types=ALL_TYPES),
        make_recipe("big", "Feast", calories=1500, meal_types=ALL_TYPES),
    ]
    generator = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(2))
    plan = generator.generate_meal_plan(_params(), "t")
    assert {m.recipe.id for m in plan.meals} == {"fit"}


def test_unmatched_meal_type_falls_back_to_whole_pool():
    pool = [make_recipe("x", "Anything", calories=600, meal_types=("brunch",))]
    plan = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(0)).generate_meal_plan(_params(days=1), "t")
    assert [m.recipe.id for m in plan.meals] == ["x", "x", "x"]


def test_requested_filters_are_forwarded():
    store = ListRecipeStore(_mixed_pool())
    generator = MealPlanGenerator(store, rng=random.Random(0))
    plan = generator.generate_meal_plan(
        _params(days=2, mealsPerDay=1, mealType="dinner", maxPrepTime=30, dailyCalorieTarget=600), "t"
    )
    first_filter = store.filters[0]
    assert first_filter.approved is True
    assert first_filter.limit == 100
    assert first_filter.meal_type == "dinner"
    assert first_filter.max_prep_time == 30
    assert all(m.meal_type == "dinner" for m in plan.meals)
    assert {m.recipe.id for m in plan.meals} <= {"d1", "d2"}


def test_falls_back_to_approved_only_query():
    store = ListRecipeStore(_mixed_pool())
    generator = MealPlanGenerator(store, rng=random.Random(0))
    plan = generator.generate_meal_plan(_params(days=1, dietaryTag="paleo"), "t")
    assert len(store.filters) == 2
    assert store.filters[1].dietary_tag is None
    assert store.filters[1].approved is True
    assert len(plan.meals) == 3


def test_unapproved_recipes_are_never_used():
    pool = _mixed_pool() + [make_recipe("bad", "Draft", calories=600, meal_types=ALL_TYPES, approved=False)]
    plan = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(4)).generate_meal_plan(_params(days=7), "t")
    assert "bad" not in {m.recipe.id for m in plan.meals}


def test_empty_catalog_is_fatal():
    store = EmptyRecipeStore()
    generator = MealPlanGenerator(store, rng=random.Random(0))
    with pytest.raises(NoRecipesAvailableError) as exc_info:
        generator.generate_meal_plan(_params(), "t")
    assert "No approved recipes available" in exc_info.value.message
    assert exc_info.value.status_code == 500
    assert len(store.filters) == 2


def test_snapshot_defaults():
    pool = [make_recipe("plain", "Plain", calories=600, meal_types=(), description="", protein="")]
    plan = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(0)).generate_meal_plan(
        _params(days=1, mealsPerDay=1, dailyCalorieTarget=600), "t"
    )
    recipe = plan.meals[0].recipe
    assert recipe.description == "Delicious lunch meal"
    assert recipe.meal_types == ["lunch"]
    assert recipe.protein_grams == "0"
    assert recipe.image_url == PLACEHOLDER_IMAGE_URL


def test_meal_prep_attached_unless_disabled():
    store = ListRecipeStore(_mixed_pool())
    with_prep = MealPlanGenerator(store, rng=random.Random(0)).generate_meal_plan(_params(days=1), "t")
    assert with_prep.start_of_week_meal_prep is not None
    assert with_prep.start_of_week_meal_prep.shopping_list

    without = MealPlanGenerator(store, rng=random.Random(0)).generate_meal_plan(
        _params(days=1, generateMealPrep=False), "t"
    )
    assert without.start_of_week_meal_prep is None


def test_score_rewards_reuse_and_penalizes_overflow():
    recipe = make_recipe("r", "R", ingredients=[("Chicken", "1", "g"), ("Rice", "1", "cup"), ("Kale", "1", "cup")])
    assert score_recipe(recipe, {"chicken", "rice"}, remaining_slots=5) == 2 * 2 - 1
    assert score_recipe(recipe, set(), remaining_slots=1) == -3 - 10 * 2


def _budget_pool():
    return [
        make_recipe("a", "Chicken Rice", calories=600, meal_types=ALL_TYPES,
                    ingredients=[("Chicken", "200", "g"), ("Rice", "1", "cup")]),
        make_recipe("b", "Chicken Broccoli", calories=600, meal_types=ALL_TYPES,
                    ingredients=[("chicken", "200", "g"), ("Broccoli", "1", "cup")]),
        make_recipe("c", "Beef Potato", calories=600, meal_types=ALL_TYPES,
                    ingredients=[("Beef", "200", "g"), ("Potato", "2", "whole")]),
        make_recipe("d", "Salmon Asparagus", calories=600, meal_types=ALL_TYPES,
                    ingredients=[("Salmon", "200", "g"), ("Asparagus", "1", "bunch")]),
        make_recipe("e", "Tofu Kale Quinoa", calories=600, meal_types=ALL_TYPES,
                    ingredients=[("Tofu", "150", "g"), ("Kale", "1", "cup"), ("Quinoa", "1", "cup")]),
    ]


def test_ingredient_budget_is_respected():
    pool = _budget_pool()
    for seed in range(10):
        generator = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(seed))
        plan = generator.generate_meal_plan(_params(days=7, maxIngredients=3), "t")
        distinct = {i.name.lower() for m in plan.meals for i in m.recipe.ingredients_json}
        assert len(distinct) <= 3


@pytest.mark.parametrize("seed", [0, 7, 21])
def test_budget_picks_match_rescan_of_previous_meals(seed):
    pool = _budget_pool()
    plan = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(seed)).generate_meal_plan(
        _params(days=5, maxIngredients=6), "t",
    )

    # Replay each slot with the used set rebuilt from every earlier meal
    replay = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(seed))
    for index, meal in enumerate(plan.meals):
        used = {i.name.lower() for m in plan.meals[:index] for i in m.recipe.ingredients_json}
        expected = replay.select_recipe_with_ingredient_limit(pool, used, 6)
        assert meal.recipe.id == expected.id


def test_budget_generation_scales_to_long_plans():
    pool = [
        make_recipe(f"r{n}", f"Recipe {n}", calories=600, meal_types=ALL_TYPES,
                    ingredients=[(f"Item {n % 40}", "1", "cup"), (f"Item {(n * 7) % 40}", "1", "cup")])
        for n in range(100)
    ]
    generator = MealPlanGenerator(ListRecipeStore(pool), rng=random.Random(3))
    plan = generator.generate_meal_plan(
        _params(days=365, mealsPerDay=10, dailyCalorieTarget=6000, maxIngredients=20, generateMealPrep=False), "t",
    )
    assert len(plan.meals) == 3650
    distinct = {i.name.lower() for m in plan.meals for i in m.recipe.ingredients_json}
    assert len(distinct) <= 20


def test_accepts_request_model_with_snake_case_fields():
    from schemas.meal_plan_schema import MealPlanGenerationRequest

    request = MealPlanGenerationRequest(
        plan_name="Model Plan", fitness_goal="maintenance", daily_calorie_target=1800, days=1,
    )
    plan = MealPlanGenerator(ListRecipeStore(_mixed_pool()), rng=random.Random(0)).generate_meal_plan(request, "t")
    assert plan.plan_name == "Model Plan"
    assert plan.meals_per_day == 3
