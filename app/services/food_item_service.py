"""
Food Item Service

Master catalog of foods with per-100g nutrient rates.
"""

from typing import Any, Dict, List

from app.extensions import db
from app.models.food_item import FoodItem
from app.services.food_helpers import MAX_QUANTITY, quantize, serialize_food_item, to_decimal
from app.utils.errors import ValidationFailed

RATE_FIELDS = ("calories_per_100g", "protein_per_100g", "carbs_per_100g", "fats_per_100g")


def create_food_item(
    name: str,
    calories_per_100g: Any,
    protein_per_100g: Any,
    carbs_per_100g: Any,
    fats_per_100g: Any,
) -> Dict[str, Any]:
    name = (name or "").strip()
    if not name:
        raise ValidationFailed("VALIDATION_ERROR", "name is required")

    rates = {
        "calories_per_100g": calories_per_100g,
        "protein_per_100g": protein_per_100g,
        "carbs_per_100g": carbs_per_100g,
        "fats_per_100g": fats_per_100g,
    }
    for field, value in rates.items():
        if value is None or not 0 <= to_decimal(value) <= MAX_QUANTITY:
            raise ValidationFailed("VALIDATION_ERROR", f"{field} must be between 0 and {MAX_QUANTITY}")

    item = FoodItem(name=name, **{field: quantize(value) for field, value in rates.items()})
    db.session.add(item)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return serialize_food_item(item)


def search_food_items(query: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring match on the name."""
    term = (query or "").strip()
    if not term:
        raise ValidationFailed("VALIDATION_ERROR", "query is required")

    # Escape LIKE wildcards so user input is matched literally
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    items = (
        FoodItem.query
        .filter(FoodItem.name.ilike(f"%{escaped}%", escape="\\"))
        .order_by(FoodItem.name)
        .all()
    )
    return [serialize_food_item(item) for item in items]


def list_food_items() -> List[Dict[str, Any]]:
    items = FoodItem.query.order_by(FoodItem.name).all()
    return [serialize_food_item(item) for item in items]
