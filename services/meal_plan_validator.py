"""Meal plan validation pipeline.

`validate_meal_plan_data` takes raw caller JSON through normalization,
recipe enrichment, structural validation and business rules, and either
returns a `ValidatedMealPlan` or raises a single `ValidationError` naming
every offending field.

Structural validation runs the schema twice at most: first strictly (no
type coercion), then leniently. The result is a tagged `ValidationOutcome`
so each pass can be checked on its own.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from core.logger import get_logger
from schemas.validation_schema import LENIENT_CONTEXT, ValidatedMealPlan
from services.normalizer import normalize_meal_plan_input
from services.recipe_enricher import enrich_meal_plan
from services.recipe_store import RecipeStore

logger = get_logger("services.meal_plan_validator")

VALID_MEAL_TYPES = {
    "breakfast", "lunch", "dinner", "snack", "pre-workout", "post-workout",
    "brunch", "supper", "dessert", "appetizer",
}
MIN_REASONABLE_DAY_CALORIES = 800
MAX_REASONABLE_DAY_CALORIES = 6000

ERROR_PREFIX = "Meal plan validation failed"


class ValidationStatus(str, Enum):
    STRICT_OK = "strict_ok"
    LENIENT_OK = "lenient_ok"
    FAILED = "failed"


@dataclass
class ValidationOutcome:
    """Result of structural validation."""

    status: ValidationStatus
    plan: Optional[ValidatedMealPlan] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is not ValidationStatus.FAILED


def _field_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]


def format_errors(errors: List[Dict[str, str]]) -> str:
    """Join errors as `field: message; field: message`."""
    return "; ".join(
        f"{e['field']}: {e['message']}" if e.get("field") else e["message"] for e in errors
    )


def validate_strict(plan: Dict[str, Any]) -> ValidationOutcome:
    try:
        validated = ValidatedMealPlan.model_validate(plan, strict=True)
    except PydanticValidationError as exc:
        return ValidationOutcome(ValidationStatus.FAILED, errors=_field_errors(exc))
    return ValidationOutcome(ValidationStatus.STRICT_OK, plan=validated)


def validate_lenient(plan: Dict[str, Any]) -> ValidationOutcome:
    try:
        validated = ValidatedMealPlan.model_validate(plan, context=LENIENT_CONTEXT)
    except PydanticValidationError as exc:
        return ValidationOutcome(ValidationStatus.FAILED, errors=_field_errors(exc))
    return ValidationOutcome(ValidationStatus.LENIENT_OK, plan=validated)


def validate_structure(plan: Dict[str, Any]) -> ValidationOutcome:
    """Validate a canonical plan dict, trying strict before lenient.

    When both passes fail, the lenient pass's errors are reported since they
    describe real constraint violations rather than mere type mismatches.
    """
    strict = validate_strict(plan)
    if strict.ok:
        return strict
    logger.debug("Strict validation failed (%s errors), retrying leniently", len(strict.errors))
    return validate_lenient(plan)


def check_business_rules(plan: ValidatedMealPlan) -> None:
    """Apply semantic checks that the schema cannot express.

    Raises:
        ValidationError: If any meal falls on a day beyond the plan duration.
    """
    beyond = [meal.day for meal in plan.meals if meal.day > plan.days]
    if beyond:
        message = "Meals found for days beyond plan duration: " + ", ".join(str(d) for d in beyond)
        raise ValidationError(message, field="meals", errors=[{"field": "meals", "message": message}])

    day_calories: Dict[int, int] = defaultdict(int)
    for meal in plan.meals:
        day_calories[meal.day] += meal.recipe.calories_kcal
    for day, calories in day_calories.items():
        if calories < MIN_REASONABLE_DAY_CALORIES or calories > MAX_REASONABLE_DAY_CALORIES:
            logger.warning("Day %s has extreme calorie count: %s", day, calories)

    unusual = [meal.meal_type for meal in plan.meals if meal.meal_type.lower() not in VALID_MEAL_TYPES]
    if unusual:
        logger.warning("Unusual meal types found: %s", ", ".join(unusual))

    seen = set()
    for meal in plan.meals:
        slot = (meal.day, meal.meal_number)
        if slot in seen:
            logger.warning("Duplicate meal slot: day %s meal %s", meal.day, meal.meal_number)
        seen.add(slot)


def validate_meal_plan_data(raw: Any, recipe_store: RecipeStore) -> ValidatedMealPlan:
    """Normalize, enrich and validate caller-supplied meal plan data.

    Args:
        raw: Meal plan JSON in any supported shape.
        recipe_store: Source for recipes referenced only by id.

    Returns:
        The validated meal plan.

    Raises:
        ValidationError: With message `Meal plan validation failed: ...`
            and every offending field in `errors`.
    """
    try:
        normalized = normalize_meal_plan_input(raw)
        enriched = enrich_meal_plan(normalized, recipe_store)
        outcome = validate_structure(enriched)
        if not outcome.ok:
            raise ValidationError(f"{ERROR_PREFIX}: {format_errors(outcome.errors)}", errors=outcome.errors)
        check_business_rules(outcome.plan)
    except ValidationError as exc:
        if exc.message.startswith(ERROR_PREFIX):
            raise
        raise ValidationError(f"{ERROR_PREFIX}: {exc.message}", errors=exc.errors) from exc
    except Exception as exc:
        logger.exception("Unexpected error while validating meal plan")
        raise ValidationError(f"{ERROR_PREFIX}: {exc}") from exc

    logger.info(
        "Validated meal plan '%s' (%s meals, %s pass)",
        outcome.plan.plan_name,
        len(outcome.plan.meals),
        outcome.status.value,
    )
    return outcome.plan
