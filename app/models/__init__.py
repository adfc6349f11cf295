from app.models.user import User
from app.models.daily_goals import DailyGoals
from app.models.food_item import FoodItem
from app.models.food_log import FoodLog
from app.models.fluid_log import FluidLog
from app.models.daily_summary import DailySummary

__all__ = ["User", "DailyGoals", "FoodItem", "FoodLog", "FluidLog", "DailySummary"]
