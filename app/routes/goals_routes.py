from flask import Blueprint
from app.controllers.goals_controller import create_goals_handler, update_goals_handler

goals_bp = Blueprint("goals", __name__, url_prefix="/api/goals")

@goals_bp.post("")
def create_goals():
    return create_goals_handler()


@goals_bp.put("/<int:goals_id>")
def update_goals(goals_id):
    return update_goals_handler(goals_id)
