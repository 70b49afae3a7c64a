"""
Users service.

Lists and creates users and resolves user identifiers for the exercise
endpoints. No Flask request/response objects are handled here.
"""

from typing import Any, Dict, List

import structlog
from sqlalchemy.exc import SQLAlchemyError

from errors import InvalidIdentifier, StoreFailure, UserNotFound, UsernameTaken
from models import is_object_id
from repositories import users_repo
from validation import validate_user_payload

logger = structlog.get_logger("exercise_tracker.users")


def serialize_user(row: Dict[str, Any]) -> Dict[str, str]:
    return {"username": row["username"], "_id": row["id"]}


def list_users() -> List[Dict[str, str]]:
    return [serialize_user(row) for row in users_repo.list_all_users()]


def create_user(payload: Dict[str, Any]) -> Dict[str, str]:
    """Create a user unless the username is already taken.

    The existence check and the insert are not atomic; two concurrent
    requests for the same username can both succeed.
    """
    data = validate_user_payload(payload)
    username = data["username"]

    try:
        if users_repo.username_exists(username):
            logger.info("users.username_taken", username=username)
            raise UsernameTaken()
        row = users_repo.create_user(username)
    except SQLAlchemyError as exc:
        logger.error("users.create_failed", username=username, error=str(exc))
        raise StoreFailure()

    logger.info("users.created", user_id=row["id"], username=username)
    return serialize_user(row)


def resolve_user(user_id: str, *, not_found_status: int = 404) -> Dict[str, Any]:
    """Return the user row for ``user_id``.

    Raises InvalidIdentifier for ids that are not 24 hex characters and
    UserNotFound (with ``not_found_status``) when no such user exists.
    """
    if not is_object_id(user_id):
        raise InvalidIdentifier(f"Invalid user ID: {user_id}")

    user = users_repo.get_user_by_id(user_id.lower())
    if user is None:
        raise UserNotFound(f"User not found with ID: {user_id}", status=not_found_status)
    return user
