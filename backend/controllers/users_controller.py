from flask import Blueprint, jsonify

from controllers.helpers import request_payload
from services import users_service

users_bp = Blueprint("users", __name__, url_prefix="/api/users")


@users_bp.get("")
def list_users():
    return jsonify(users_service.list_users())


@users_bp.post("")
def create_user():
    return jsonify(users_service.create_user(request_payload()))
