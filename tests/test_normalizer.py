"""Tests for meal plan input normalization."""
import copy
import logging

from services.normalizer import (
    MealsShape,
    derive_meals_per_day,
    detect_meals_shape,
    normalize_meal_plan_input,
    normalize_meals,
)


def test_detects_each_meals_shape():
    assert detect_meals_shape([{"day": 1, "mealNumber": 1}]) is MealsShape.CANONICAL_LIST
    assert detect_meals_shape([{"name": "Oats"}]) is MealsShape.INDEXED_LIST
    assert detect_meals_shape([]) is MealsShape.INDEXED_LIST
    assert detect_meals_shape({"Monday": {}}) is MealsShape.DAY_KEYED
    assert detect_meals_shape(None) is MealsShape.ABSENT


def test_canonical_plan_is_unchanged(canonical_plan):
    original = copy.deepcopy(canonical_plan)
    normalized = normalize_meal_plan_input(canonical_plan)
    assert normalized == original
    assert canonical_plan == original


def test_normalization_is_idempotent(canonical_plan):
    once = normalize_meal_plan_input(canonical_plan)
    assert normalize_meal_plan_input(once) == once


def test_unwraps_meal_plan_data(canonical_plan):
    normalized = normalize_meal_plan_input({"mealPlanData": canonical_plan})
    assert normalized["planName"] == "Cutting Week"
    assert len(normalized["meals"]) == 4


def test_fills_id_and_description_defaults():
    normalized = normalize_meal_plan_input({"planName": "P", "meals": []})
    assert normalized["id"] == "generated-plan"
    assert normalized["description"] == ""
    assert normalized["meals"] == []


def test_missing_meals_becomes_empty_list():
    assert normalize_meal_plan_input({"planName": "P"})["meals"] == []


def test_day_keyed_meal_becomes_single_slot():
    raw = {
        "planName": "Week",
        "meals": {"Monday": {"breakfast": {"recipeId": "r1", "name": "Oats", "calories": 350}}},
    }
    meals = normalize_meal_plan_input(raw)["meals"]
    assert len(meals) == 1
    slot = meals[0]
    assert slot["day"] == 1
    assert slot["mealNumber"] == 1
    assert slot["mealType"] == "breakfast"
    assert slot["recipe"]["id"] == "r1"
    assert slot["recipe"]["caloriesKcal"] == 350


def test_day_keyed_entries_get_recipe_defaults():
    meals = normalize_meals({"Wednesday": {"lunch": {"recipeId": 7}, "dinner": {"recipeId": "r9"}}})
    assert [m["day"] for m in meals] == [3, 3]
    assert [m["mealNumber"] for m in meals] == [1, 2]
    recipe = meals[0]["recipe"]
    assert recipe["id"] == "7"
    assert recipe["name"] == "lunch recipe"
    assert recipe["caloriesKcal"] == 400
    assert (recipe["proteinGrams"], recipe["carbsGrams"], recipe["fatGrams"]) == ("20", "40", "15")
    assert recipe["prepTimeMinutes"] == 15
    assert recipe["cookTimeMinutes"] == 20
    assert recipe["servings"] == 1
    assert recipe["instructionsText"] == "No instructions provided."


def test_unknown_day_names_are_dropped_with_warning(caplog):
    raw = {
        "meals": {
            "NotADay": {"breakfast": {"recipeId": "x"}},
            "Tuesday": {"dinner": {"recipeId": "r2"}},
        }
    }
    with caplog.at_level(logging.WARNING):
        meals = normalize_meal_plan_input(raw)["meals"]
    assert len(meals) == 1
    assert meals[0]["day"] == 2
    assert "NotADay" in caplog.text


def test_entries_without_recipe_id_are_skipped():
    meals = normalize_meals({"Friday": {"breakfast": {"name": "Mystery"}, "lunch": {"recipeId": "r5"}}})
    assert len(meals) == 1
    assert meals[0]["mealType"] == "lunch"
    assert meals[0]["mealNumber"] == 2


def test_indexed_list_infers_positions():
    meals = normalize_meals([{"name": f"Recipe {i}"} for i in range(5)])
    positions = [(m["day"], m["mealNumber"]) for m in meals]
    assert positions == [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2)]
    assert meals[0]["mealType"] == "meal"
    assert meals[0]["recipe"] == {"name": "Recipe 0"}


def test_indexed_list_keeps_embedded_recipe():
    meals = normalize_meals([{"mealType": "snack", "recipe": {"id": "r1", "name": "Nuts"}}])
    assert meals[0]["mealType"] == "snack"
    assert meals[0]["recipe"]["name"] == "Nuts"


def test_frontend_plan_derives_missing_fields():
    raw = {
        "name": "Client Plan",
        "description": "muscle_gain",
        "meals": {
            "Monday": {
                "breakfast": {"recipeId": "a", "calories": 600},
                "lunch": {"recipeId": "b", "calories": 800},
            },
            "Tuesday": {"breakfast": {"recipeId": "c", "calories": 1000}},
        },
    }
    plan = normalize_meal_plan_input(raw)
    assert plan["planName"] == "Client Plan"
    assert plan["fitnessGoal"] == "muscle_gain"
    assert plan["days"] == 2
    assert plan["dailyCalorieTarget"] == 1200
    assert plan["mealsPerDay"] == 3


def test_frontend_plan_derives_target_from_string_calories():
    raw = {
        "name": "Client Plan",
        "meals": [
            {"day": 1, "mealNumber": 1, "mealType": "breakfast", "recipe": {"caloriesKcal": "500"}},
            {"day": 1, "mealNumber": 2, "mealType": "lunch", "recipe": {"caloriesKcal": "700 kcal"}},
            {"day": 1, "mealNumber": 3, "mealType": "dinner", "recipe": {"caloriesKcal": "unknown"}},
        ],
    }
    plan = normalize_meal_plan_input(raw)
    assert plan["dailyCalorieTarget"] == 1600
    assert plan["meals"][0]["recipe"]["caloriesKcal"] == "500"


def test_frontend_plan_keeps_supplied_values():
    raw = {"name": "Plan", "fitnessGoal": "endurance", "days": 5, "mealsPerDay": 4, "dailyCalorieTarget": 2500}
    plan = normalize_meal_plan_input(raw)
    assert plan["fitnessGoal"] == "endurance"
    assert (plan["days"], plan["mealsPerDay"], plan["dailyCalorieTarget"]) == (5, 4, 2500)


def test_frontend_plan_without_meals_uses_defaults():
    plan = normalize_meal_plan_input({"name": "Empty"})
    assert plan["fitnessGoal"] == "General Fitness"
    assert plan["dailyCalorieTarget"] == 2000
    assert plan["days"] == 7
    assert plan["mealsPerDay"] == 3


def test_meals_per_day_derivation_has_floor_of_three():
    meals = [{"day": 1}, {"day": 1}, {"day": 1}, {"day": 1}, {"day": 2}]
    assert derive_meals_per_day(meals) == 4
    assert derive_meals_per_day([{"day": 1}]) == 3
