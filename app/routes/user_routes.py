from flask import Blueprint
from app.controllers.user_controller import (
    create_user_handler,
    get_user_handler,
    get_user_goals_handler,
    get_daily_progress_handler,
    list_food_logs_handler,
    list_fluid_logs_handler,
)

user_bp = Blueprint("user", __name__, url_prefix="/api/users")

@user_bp.post("")
def create_user():
    return create_user_handler()


@user_bp.get("/<int:user_id>")
def get_user(user_id):
    return get_user_handler(user_id)


@user_bp.get("/<int:user_id>/goals")
def get_goals(user_id):
    return get_user_goals_handler(user_id)


@user_bp.get("/<int:user_id>/progress")
def get_progress(user_id):
    return get_daily_progress_handler(user_id)


@user_bp.get("/<int:user_id>/food-logs")
def list_food_logs(user_id):
    return list_food_logs_handler(user_id)


@user_bp.get("/<int:user_id>/fluid-logs")
def list_fluid_logs(user_id):
    return list_fluid_logs_handler(user_id)
