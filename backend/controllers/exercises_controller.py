from flask import Blueprint, current_app, jsonify

from controllers.helpers import query_arg, request_payload
from services import exercises_service

exercises_bp = Blueprint("exercises", __name__, url_prefix="/api/users")


@exercises_bp.post("/<user_id>/exercises")
def add_exercise(user_id):
    return jsonify(exercises_service.add_exercise(user_id, request_payload()))


@exercises_bp.get("/<user_id>/logs")
def get_logs(user_id):
    result = exercises_service.get_logs(
        user_id,
        from_date=query_arg("from"),
        to_date=query_arg("to"),
        limit=query_arg("limit"),
        mode=current_app.config["LOG_QUERY_VALIDATION"],
    )
    return jsonify(result)
