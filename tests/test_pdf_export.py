"""Tests for the printable export helpers."""
import copy

import pytest

from schemas.export_schema import ExportOptions
from services.meal_plan_validator import validate_structure
from services.pdf_export import (
    build_export_data,
    format_ingredient_amount,
    sanitize_html,
    sanitize_text,
)


@pytest.mark.parametrize("amount, unit, expected", [
    ("0.5", "cup", "1/2"),
    ("1.5", "kg", "1.5"),
    ("2", "cup", "2"),
    ("1.25", "cups", "1 1/4"),
    ("0.33", "tbsp", "1/3"),
    ("0.4", "cup", "0.40"),
    ("200", "g", "200"),
    ("1.25", "lb", "1.3"),
    ("2.5", "whole", "2.50"),
    ("3", "clove", "3"),
    ("pinch", "", "pinch"),
    ("0.5", "CUP", "1/2"),
])
def test_format_ingredient_amount(amount, unit, expected):
    assert format_ingredient_amount(amount, unit) == expected


def test_sanitize_text_strips_disallowed_characters():
    assert sanitize_text("Chicken & <Rice>  bowl!") == "Chicken Rice bowl!"
    assert sanitize_text("Line one\n\n\tline two") == "Line one line two"
    assert sanitize_text("Café") == "Caf"
    assert sanitize_text("Keep: (these) - marks, \"quoted\"; it's a/b?") == "Keep: (these) - marks, \"quoted\"; it's a/b?"


def test_sanitize_text_collapses_unicode_spaces():
    assert sanitize_text("a\u00a0b") == "a b"
    assert sanitize_text("x\u2003y") == "x y"
    assert sanitize_text("\u00a0 padded \u2003") == "padded"
    assert sanitize_text("caf\u00e9\u00a0latte") == "caf latte"


def test_sanitize_text_caps_length_and_handles_empty():
    assert len(sanitize_text("a" * 600)) == 500
    assert sanitize_text("") == ""
    assert sanitize_text(None) == ""


def test_sanitize_html_removes_active_content():
    html = '<p onclick="steal()">Hi</p><script type="x">alert(1)</script><a href="javascript:evil()">x</a>'
    assert sanitize_html(html) == '<p >Hi</p><a href="evil()">x</a>'
    assert sanitize_html('<IFRAME src="x"></IFRAME> ok ') == "ok"
    assert sanitize_html(None) == ""


def _plan(canonical_plan):
    outcome = validate_structure(canonical_plan)
    assert outcome.ok, outcome.errors
    return outcome.plan


def test_export_groups_meals_by_day(canonical_plan):
    plan_data = copy.deepcopy(canonical_plan)
    plan_data["meals"].reverse()
    export = build_export_data(_plan(plan_data), customer_name="Jane Client")

    assert [group.day for group in export.meals_by_day] == [1, 2]
    assert [m.meal_number for m in export.meals_by_day[0].meals] == [1, 2]
    assert export.customer_name == "Jane Client"
    assert export.generated_by == "Trainer"


def test_export_nutrition_totals_and_macro_chart(canonical_plan):
    export = build_export_data(_plan(canonical_plan))
    totals = export.nutrition_totals
    assert totals.total_calories == 3000
    assert totals.avg_calories_per_day == 1500
    assert totals.avg_protein_per_day == 60
    # 60g protein * 4 = 240, 120g carbs * 4 = 480, 40g fat * 9 = 360
    assert export.macro_chart.protein == 22
    assert export.macro_chart.carbs == 44
    assert export.macro_chart.fat == 33


def test_export_shopping_list_is_sorted_and_formatted(canonical_plan):
    export = build_export_data(_plan(canonical_plan))
    assert [item.name for item in export.shopping_list] == ["Chicken breast", "Rice"]
    assert export.shopping_list[0].formatted_amount == "800"
    assert export.shopping_list[1].formatted_amount == "2"


def test_export_table_of_contents(canonical_plan):
    toc = build_export_data(_plan(canonical_plan)).table_of_contents
    assert [(e.title, e.page) for e in toc] == [
        ("Overview", 2),
        ("Weekly Meal Schedule", 3),
        ("Day 1 Meals", 4),
        ("Day 2 Meals", 5),
        ("Recipe Details", 6),
        ("Shopping List", 10),
        ("Nutrition Summary", 11),
    ]


def test_export_respects_options(canonical_plan):
    options = ExportOptions(include_shopping_list=False, include_macro_summary=False)
    export = build_export_data(_plan(canonical_plan), options=options, generated_by="coach@example.com")
    assert export.shopping_list is None
    assert export.macro_chart is None
    assert export.generated_by == "coach@example.com"
    assert export.customer_name == "Valued Client"


def test_export_sanitizes_free_text(canonical_plan):
    plan_data = copy.deepcopy(canonical_plan)
    plan_data["planName"] = "Cut <b>Week</b>"
    plan_data["meals"][0]["recipe"]["instructionsText"] = "Mix.<script>alert(1)</script>"
    export = build_export_data(_plan(plan_data))
    assert export.meal_plan.plan_name == "Cut bWeek/b"
    assert export.meal_plan.meals[0].recipe.instructions_text == "Mix."
