from flask import Blueprint
from app.controllers.fluid_controller import log_fluid_handler, delete_fluid_log_handler

fluid_bp = Blueprint("fluid", __name__, url_prefix="/api")

@fluid_bp.post("/fluid-logs")
def log_fluid():
    return log_fluid_handler()


@fluid_bp.delete("/fluid-logs/<int:log_id>")
def delete_fluid_log(log_id):
    return delete_fluid_log_handler(log_id)
