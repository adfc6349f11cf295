"""
Daily Goals Service

Goal history is retained: setup inserts a new row, editing mutates a row in
place. The user's current goals are the row with the latest `updated_at`.
"""

from typing import Any, Dict, Optional

from app.extensions import db
from app.models.daily_goals import DailyGoals
from app.services.food_helpers import MAX_QUANTITY, quantize, serialize_goals, to_decimal
from app.services.user_service import require_user
from app.utils.dates import utcnow
from app.utils.errors import NotFoundError, ValidationFailed

GOAL_FIELDS = ("daily_calories", "daily_protein", "daily_carbs", "daily_fats", "daily_fluid")


def _validated(field: str, value: Any):
    if value is None:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} is required")
    amount = to_decimal(value)
    if field == "daily_calories" and amount <= 0:
        raise ValidationFailed("VALIDATION_ERROR", "daily_calories must be positive")
    if amount < 0:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} must not be negative")
    if amount > MAX_QUANTITY:
        raise ValidationFailed("VALIDATION_ERROR", f"{field} must not exceed {MAX_QUANTITY}")
    return quantize(amount)


def create_daily_goals(
    user_id: int,
    daily_calories: Any,
    daily_protein: Any,
    daily_carbs: Any,
    daily_fats: Any,
    daily_fluid: Any,
) -> Dict[str, Any]:
    values = {
        "daily_calories": _validated("daily_calories", daily_calories),
        "daily_protein": _validated("daily_protein", daily_protein),
        "daily_carbs": _validated("daily_carbs", daily_carbs),
        "daily_fats": _validated("daily_fats", daily_fats),
        "daily_fluid": _validated("daily_fluid", daily_fluid),
    }
    require_user(user_id)

    now = utcnow()
    goals = DailyGoals(user_id=user_id, created_at=now, updated_at=now, **values)
    db.session.add(goals)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return serialize_goals(goals)


def update_daily_goals(goals_id: int, **changes: Any) -> Dict[str, Any]:
    """Update only the provided targets and bump `updated_at`."""
    unknown = set(changes) - set(GOAL_FIELDS)
    if unknown:
        raise ValidationFailed("VALIDATION_ERROR", f"unknown field(s): {', '.join(sorted(unknown))}")
    updates = {
        field: _validated(field, value)
        for field, value in changes.items()
        if value is not None
    }

    goals = db.session.get(DailyGoals, goals_id)
    if not goals:
        raise NotFoundError("GOALS_NOT_FOUND", f"daily goals {goals_id} do not exist")

    for field, value in updates.items():
        setattr(goals, field, value)
    goals.updated_at = utcnow()
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return serialize_goals(goals)


def current_goals(user_id: int) -> Optional[DailyGoals]:
    return (
        DailyGoals.query
        .filter_by(user_id=user_id)
        .order_by(DailyGoals.updated_at.desc(), DailyGoals.id.desc())
        .first()
    )


def get_current_goals(user_id: int) -> Optional[Dict[str, Any]]:
    goals = current_goals(user_id)
    return serialize_goals(goals) if goals else None
