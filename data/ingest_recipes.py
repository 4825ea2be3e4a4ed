"""Utilities to ingest recipe CSV files into the recipe catalog.

This module provides:
- parse_recipes_csv(csv_path): returns a list of snake_case recipe dicts
- seed_recipes_from_csv(csv_path, session): idempotently seeds the recipes table

Expected columns: `name`, `description`, `meal_types`, `dietary_tags`,
`ingredients`, `calories`, `protein`, `carbs`, `fat`, `prep_time`,
`cook_time`, `servings`, `approved`. Only `name` and `calories` are required.
List cells may hold JSON arrays or `;`/`,` separated text. Ingredient cells
may hold a JSON array of `{name, amount, unit}` objects or `;` separated
`"amount unit name"` entries (e.g. `200 g chicken breast; pinch salt`).
"""
from __future__ import annotations

from typing import Dict, List, Optional
import json
import math
import re

import pandas as pd

from core.logger import get_logger
from core.repository import RecipeRepository
from database.database import WriteSessionLocal
from database.models import Recipe

logger = get_logger("data.ingest_recipes")

_AMOUNT_FIRST = re.compile(r"^\s*(\d+(?:[./]\d+)?)\s+(\S+)\s+(.+?)\s*$")


def _is_blank(val) -> bool:
    if val is None:
        return True
    if isinstance(val, float) and math.isnan(val):
        return True
    return str(val).strip() == ""


def _truthy(val, default: bool = True) -> bool:
    """Return True for common truthy CSV cell values; blank cells use `default`."""
    if _is_blank(val):
        return default
    if isinstance(val, (bool, int, float)):
        return float(val) >= 0.5
    v = str(val).strip().lower()
    if v in ("1", "true", "yes", "y"):
        return True
    if v in ("0", "false", "no", "n"):
        return False
    try:
        return float(v) >= 0.5
    except ValueError:
        return default


def _number(val, default: float = 0.0) -> float:
    if _is_blank(val):
        return default
    try:
        return float(val)
    except (TypeError, ValueError):
        logger.debug("Unparseable numeric cell %r, using %s", val, default)
        return default


def parse_list_cell(val) -> List[str]:
    """Parse a JSON array or `;`/`,` separated cell into a list of strings."""
    if _is_blank(val):
        return []
    raw = str(val).strip()
    if raw.startswith("["):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return [str(v).strip() for v in parsed if str(v).strip()]
    separator = ";" if ";" in raw else ","
    return [part.strip() for part in raw.split(separator) if part.strip()]


def parse_ingredient(text: str) -> Dict[str, str]:
    """Split `"200 g chicken breast"` into name/amount/unit.

    Entries without a leading amount keep the first word as a non-numeric
    amount when there are several words (`"pinch salt"`), else amount "1".
    """
    text = text.strip()
    match = _AMOUNT_FIRST.match(text)
    if match:
        amount, unit, name = match.groups()
        return {"name": name, "amount": amount, "unit": unit}
    words = text.split(None, 1)
    if len(words) == 2:
        return {"name": words[1], "amount": words[0], "unit": ""}
    return {"name": text, "amount": "1", "unit": ""}


def parse_ingredients_cell(val) -> List[Dict[str, str]]:
    if _is_blank(val):
        return []
    raw = str(val).strip()
    if raw.startswith("["):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            items = []
            for entry in parsed:
                if isinstance(entry, dict) and entry.get("name"):
                    items.append({
                        "name": str(entry["name"]),
                        "amount": str(entry.get("amount", "1")),
                        "unit": str(entry.get("unit", "") or ""),
                    })
                elif isinstance(entry, str) and entry.strip():
                    items.append(parse_ingredient(entry))
            return items
    return [parse_ingredient(part) for part in raw.split(";") if part.strip()]


def parse_recipes_csv(csv_path: str) -> List[Dict]:
    """Parse the CSV and return a list of recipe dictionaries.

    Args:
        csv_path: Path to the recipes CSV file.

    Returns:
        List of recipe dictionaries in the seed-data format accepted by
        `database.models.Recipe.from_dict`.
    """
    logger.info("Parsing recipes CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8", engine="python")
    df = df.rename(columns=lambda s: s.strip().lower())

    recipes = []
    for index, row in df.iterrows():
        name = row.get("name")
        if _is_blank(name):
            logger.warning("Skipping row %s: missing recipe name", index)
            continue
        if _is_blank(row.get("calories")):
            logger.warning("Skipping recipe '%s': missing calories", name)
            continue

        recipes.append({
            "name": str(name).strip(),
            "description": "" if _is_blank(row.get("description")) else str(row.get("description")).strip(),
            "meal_types": [t.lower() for t in parse_list_cell(row.get("meal_types"))],
            "dietary_tags": [t.lower() for t in parse_list_cell(row.get("dietary_tags"))],
            "ingredients": parse_ingredients_cell(row.get("ingredients")),
            "instructions": "" if _is_blank(row.get("instructions")) else str(row.get("instructions")),
            "calories": int(round(_number(row.get("calories")))),
            "protein": round(_number(row.get("protein")), 2),
            "carbs": round(_number(row.get("carbs")), 2),
            "fat": round(_number(row.get("fat")), 2),
            "prep_time": int(_number(row.get("prep_time"))),
            "cook_time": int(_number(row.get("cook_time"))),
            "servings": max(1, int(_number(row.get("servings"), 1))),
            "approved": _truthy(row.get("approved")),
        })

    logger.info("Parsed %s recipes from CSV", len(recipes))
    return recipes


def seed_recipes_from_csv(csv_path: str, session=None) -> int:
    """Idempotently seed the recipes table from the CSV file.

    If `session` is not supplied, a `WriteSessionLocal` session is used.
    Existing recipes are matched by name and skipped to avoid duplicates.

    Args:
        csv_path: Path to the recipes CSV file.
        session: Optional SQLAlchemy session. If None, creates a new one.

    Returns:
        Number of recipes added.
    """
    close_session = False
    if session is None:
        session = WriteSessionLocal()
        close_session = True
    try:
        repository = RecipeRepository(session)
        new_recipes: List[Recipe] = []
        seen: set = set()
        for item in parse_recipes_csv(csv_path):
            if item["name"] in seen or repository.find_by_name(item["name"]):
                continue
            seen.add(item["name"])
            new_recipes.append(Recipe.from_dict(item))
        if new_recipes:
            repository.create_many(new_recipes)
        logger.info("Seeded %s new recipes into DB", len(new_recipes))
        return len(new_recipes)
    finally:
        if close_session:
            session.close()


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    p = argparse.ArgumentParser("Seed recipes from CSV into the DB")
    p.add_argument("csv_path")
    args = p.parse_args(argv)
    added = seed_recipes_from_csv(args.csv_path)
    print(f"Done: {added} recipes added")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
