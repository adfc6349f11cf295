"""
Food Helper Functions

Contains utility functions shared by the logging and progress services:
- Exact decimal handling for stored quantities
- Portion scaling of per-100g nutrient rates
- Serialization of models into response dictionaries
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Mapping, Optional

from app.models.daily_goals import DailyGoals
from app.models.daily_summary import DailySummary
from app.models.fluid_log import FluidLog
from app.models.food_item import FoodItem
from app.models.food_log import FoodLog
from app.models.user import User
from app.utils.errors import ValidationFailed

NUTRIENTS = ("calories", "protein", "carbs", "fats", "fluid")

TWO_PLACES = Decimal("0.01")
MAX_QUANTITY = Decimal("999999.99")  # Numeric(8, 2)


def to_decimal(value: Any) -> Decimal:
    """Convert numbers and numeric strings to Decimal without float drift."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal("0")
    try:
        # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValidationFailed("VALIDATION_ERROR", f"not a number: {value!r}")
    if not result.is_finite():
        raise ValidationFailed("VALIDATION_ERROR", f"not a finite number: {value!r}")
    return result


def quantize(value: Any) -> Decimal:
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def validated_quantity(field: str, value: Any) -> Decimal:
    """Positive amount that fits a Numeric(8, 2) column."""
    if value is None:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} is required")
    amount = to_decimal(value)
    if amount <= 0:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} must be positive")
    amount = quantize(amount)
    if amount < TWO_PLACES:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} must be at least {TWO_PLACES}")
    if amount > MAX_QUANTITY:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} must not exceed {MAX_QUANTITY}")
    return amount


def as_number(value: Optional[Decimal]) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def _iso(value: Optional[Any]) -> Optional[str]:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def empty_deltas() -> Dict[str, Decimal]:
    return {n: Decimal("0") for n in NUTRIENTS}


def negate(deltas: Mapping[str, Decimal]) -> Dict[str, Decimal]:
    return {n: -to_decimal(deltas.get(n)) for n in NUTRIENTS}


def portion_nutrition(food_item: FoodItem, portion_size: Any) -> Dict[str, Decimal]:
    """
    Calculate the nutrient contribution of a portion of a food item.

    Args:
        food_item: Catalog entry with per-100g rates
        portion_size: Portion in grams

    Returns:
        Deltas for all five nutrients; fluid is always zero. Each value is
        rounded to two places so logging and deletion apply identical amounts.
    """
    factor = to_decimal(portion_size) / Decimal("100")
    deltas = empty_deltas()
    deltas["calories"] = quantize(to_decimal(food_item.calories_per_100g) * factor)
    deltas["protein"] = quantize(to_decimal(food_item.protein_per_100g) * factor)
    deltas["carbs"] = quantize(to_decimal(food_item.carbs_per_100g) * factor)
    deltas["fats"] = quantize(to_decimal(food_item.fats_per_100g) * factor)
    return deltas


def fluid_nutrition(volume: Any) -> Dict[str, Decimal]:
    """Fluid is logged verbatim in ml, no scaling."""
    deltas = empty_deltas()
    deltas["fluid"] = quantize(volume)
    return deltas


# ============================================================================
# Serializers
# ============================================================================

def serialize_user(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "created_at": _iso(user.created_at),
    }


def serialize_goals(goals: DailyGoals) -> Dict[str, Any]:
    return {
        "id": goals.id,
        "user_id": goals.user_id,
        "daily_calories": as_number(goals.daily_calories),
        "daily_protein": as_number(goals.daily_protein),
        "daily_carbs": as_number(goals.daily_carbs),
        "daily_fats": as_number(goals.daily_fats),
        "daily_fluid": as_number(goals.daily_fluid),
        "created_at": _iso(goals.created_at),
        "updated_at": _iso(goals.updated_at),
    }


def serialize_food_item(item: FoodItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "calories_per_100g": as_number(item.calories_per_100g),
        "protein_per_100g": as_number(item.protein_per_100g),
        "carbs_per_100g": as_number(item.carbs_per_100g),
        "fats_per_100g": as_number(item.fats_per_100g),
        "created_at": _iso(item.created_at),
    }


def serialize_food_log(log: FoodLog) -> Dict[str, Any]:
    return {
        "id": log.id,
        "user_id": log.user_id,
        "food_item_id": log.food_item_id,
        "portion_size": as_number(log.portion_size),
        "consumed_at": _iso(log.consumed_at),
        "created_at": _iso(log.created_at),
    }


def serialize_fluid_log(log: FluidLog) -> Dict[str, Any]:
    return {
        "id": log.id,
        "user_id": log.user_id,
        "fluid_type": log.fluid_type,
        "volume": as_number(log.volume),
        "consumed_at": _iso(log.consumed_at),
        "created_at": _iso(log.created_at),
    }


def serialize_summary(summary: DailySummary) -> Dict[str, Any]:
    return {
        "id": summary.id,
        "user_id": summary.user_id,
        "summary_date": _iso(summary.summary_date),
        "total_calories": as_number(summary.total_calories),
        "total_protein": as_number(summary.total_protein),
        "total_carbs": as_number(summary.total_carbs),
        "total_fats": as_number(summary.total_fats),
        "total_fluid": as_number(summary.total_fluid),
        "created_at": _iso(summary.created_at),
        "updated_at": _iso(summary.updated_at),
    }
