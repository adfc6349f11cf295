"""
Food Log Service

Handles food consumption logging. Every write keeps the matching daily
summary in step within the same transaction.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import delete

from app.extensions import db
from app.models.food_item import FoodItem
from app.models.food_log import FoodLog
from app.services import summary_service
from app.services.food_helpers import negate, portion_nutrition, serialize_food_log, validated_quantity
from app.services.user_service import require_user
from app.utils.dates import day_bounds, parse_day, to_utc, utcnow
from app.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


def log_food(
    user_id: int,
    food_item_id: int,
    portion_size: Any,
    consumed_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Log a portion of a catalog food for a user.

    Args:
        user_id: User ID
        food_item_id: Food item ID
        portion_size: Grams eaten, must be positive
        consumed_at: When it was eaten (defaults to now, stored as UTC)

    Returns:
        The persisted food log

    Raises:
        ValidationFailed: If portion_size is not positive
        NotFoundError: If the user or food item does not exist
    """
    portion = validated_quantity("portion_size", portion_size)
    require_user(user_id)
    food_item = db.session.get(FoodItem, food_item_id)
    if not food_item:
        raise NotFoundError("FOOD_ITEM_NOT_FOUND", f"food item {food_item_id} does not exist")

    consumed_at = to_utc(consumed_at) if consumed_at else utcnow()
    log = FoodLog(
        user_id=user_id,
        food_item_id=food_item.id,
        portion_size=portion,
        consumed_at=consumed_at,
    )

    try:
        db.session.add(log)
        db.session.flush()
        summary_service.apply_delta(
            user_id,
            summary_service.summary_date_of(consumed_at),
            portion_nutrition(food_item, portion),
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return serialize_food_log(log)


def delete_food_log(log_id: int, user_id: int) -> bool:
    """
    Delete a user's food log and reverse its contribution.

    Returns False when no log with that id belongs to the user.
    """
    log = FoodLog.query.filter_by(id=log_id, user_id=user_id).first()
    if not log:
        return False

    deltas = negate(portion_nutrition(log.food_item, log.portion_size))
    summary_date = summary_service.summary_date_of(log.consumed_at)

    try:
        result = db.session.execute(
            delete(FoodLog).where(FoodLog.id == log_id, FoodLog.user_id == user_id)
        )
        # a concurrent delete already reversed this log
        if result.rowcount == 0:
            db.session.rollback()
            logger.info("Food log id=%s was already deleted", log_id)
            return False
        summary_service.apply_delta(user_id, summary_date, deltas)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Deleted food log id=%s user=%s", log_id, user_id)
    return True


def food_logs_query(user_id: int, day: Optional[Union[str, date]] = None):
    query = FoodLog.query.filter(FoodLog.user_id == user_id)
    if day is not None:
        start, end = day_bounds(parse_day(day))
        query = query.filter(FoodLog.consumed_at >= start, FoodLog.consumed_at < end)
    return query.order_by(FoodLog.consumed_at.desc(), FoodLog.id.desc())


def list_food_logs(user_id: int, day: Optional[Union[str, date]] = None) -> List[Dict[str, Any]]:
    """A user's food logs, newest first, optionally limited to one UTC day."""
    return [serialize_food_log(log) for log in food_logs_query(user_id, day).all()]
