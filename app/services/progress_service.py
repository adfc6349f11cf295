"""
Progress Service

Read-only composition of a user's day: current goals, the day's summary,
the day's logs, and percentage of goal reached per nutrient.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional, Union

from app.models.daily_goals import DailyGoals
from app.models.daily_summary import DailySummary
from app.services import summary_service
from app.services.fluid_log_service import list_fluid_logs
from app.services.food_helpers import NUTRIENTS, serialize_goals, serialize_summary, to_decimal
from app.services.food_log_service import list_food_logs
from app.services.goals_service import current_goals
from app.utils.dates import parse_day

GOAL_COLUMNS = {n: f"daily_{n}" for n in NUTRIENTS}


def percentage_of_goal(total: Any, target: Any) -> int:
    """
    round(total / target * 100), half-up on the exact decimal quotient.

    A zero target has no meaningful percentage and yields 0.
    """
    target = to_decimal(target)
    if target <= 0:
        return 0
    ratio = to_decimal(total) * Decimal("100") / target
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def progress_percentages(goals: Optional[DailyGoals], summary: Optional[DailySummary]) -> Dict[str, int]:
    if goals is None or summary is None:
        return {n: 0 for n in NUTRIENTS}
    return {
        n: percentage_of_goal(
            getattr(summary, summary_service.TOTAL_COLUMNS[n]),
            getattr(goals, GOAL_COLUMNS[n]),
        )
        for n in NUTRIENTS
    }


def get_daily_progress(user_id: int, day: Union[str, date]) -> Dict[str, Any]:
    """
    Args:
        user_id: User ID
        day: Calendar day as a date or YYYY-MM-DD

    Returns:
        {date, goals, summary, food_logs, fluid_logs, progress_percentages};
        missing goals/summary are None and empty days have empty log lists.
    """
    day = parse_day(day)

    goals = current_goals(user_id)
    summary = summary_service.get_summary(user_id, day)

    return {
        "date": day.isoformat(),
        "goals": serialize_goals(goals) if goals else None,
        "summary": serialize_summary(summary) if summary else None,
        "food_logs": list_food_logs(user_id, day),
        "fluid_logs": list_fluid_logs(user_id, day),
        "progress_percentages": progress_percentages(goals, summary),
    }
