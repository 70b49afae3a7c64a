"""
Exercises service.

Records exercises for existing users and answers filtered log queries,
shaping both into the public response payloads.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional

import structlog

from repositories import exercises_repo
from services import log_query
from services.users_service import resolve_user
from validation import validate_exercise_payload

logger = structlog.get_logger("exercise_tracker.exercises")

STRICT = "strict"
LEGACY = "legacy"

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _today() -> date:
    return date.today()


def format_calendar_date(value: Any) -> str:
    """Render a date as e.g. ``Mon Jan 01 2024``, independent of the process locale."""
    if isinstance(value, str):
        value = date.fromisoformat(value)
    elif isinstance(value, datetime):
        value = value.date()
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def build_exercise_response(username: str, exercise: Dict[str, Any]) -> Dict[str, Any]:
    # _id is the owner's id, not the exercise's.
    return {
        "username": username,
        "description": exercise["description"],
        "duration": exercise["duration"],
        "date": format_calendar_date(exercise["date"]),
        "_id": exercise["user_id"],
    }


def build_logs_response(
    user: Dict[str, Any], count: int, exercises: Iterable[Dict[str, Any]]
) -> Dict[str, Any]:
    return {
        "username": user["username"],
        "count": count,
        "_id": user["id"],
        "log": [
            {
                "description": exercise["description"],
                "duration": exercise["duration"],
                "date": format_calendar_date(exercise["date"]),
            }
            for exercise in exercises
        ],
    }


def add_exercise(user_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    user = resolve_user(user_id, not_found_status=400)
    data = validate_exercise_payload(payload)
    exercise_date = data["date"] or _today().isoformat()

    exercise = exercises_repo.insert_exercise(
        user["id"], data["description"], data["duration"], exercise_date
    )
    logger.info(
        "exercises.created",
        user_id=user["id"],
        exercise_id=exercise["id"],
        duration=exercise["duration"],
        date=exercise_date,
    )
    return build_exercise_response(user["username"], exercise)


def get_logs(
    user_id: str,
    *,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    limit: Optional[str] = None,
    mode: str = STRICT,
) -> Dict[str, Any]:
    """Return the user's exercise log filtered by date range and limit.

    In strict mode the query parameters are validated before the user id;
    in legacy mode malformed parameters are ignored instead of rejected.
    """
    if mode == STRICT:
        log_query.validate_log_parameters(from_date, to_date, limit)

    user = resolve_user(user_id)
    query = log_query.build_log_query(user["id"], from_date, to_date, limit)
    logger.info(
        "logs.query",
        user_id=query.user_id,
        date_from=query.date_from.isoformat() if query.date_from else None,
        date_to=query.date_to.isoformat() if query.date_to else None,
        limit=query.limit,
        mode=mode,
    )

    count = exercises_repo.count_exercises(query)
    exercises = exercises_repo.find_exercises(query)
    return build_logs_response(user, count, exercises)
