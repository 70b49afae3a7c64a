from typing import Any, Dict, Mapping

from pydantic import ValidationError as PydanticValidationError

from errors import InvalidPayload
from schemas import ExerciseCreatePayload, UserCreatePayload


def _extract_error_message(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    missing_fields = [
        ".".join(str(part) for part in err.get("loc", []))
        for err in errors
        if err.get("type") == "missing"
    ]
    if missing_fields:
        return f"Missing required field(s): {', '.join(missing_fields)}"
    if errors:
        message = errors[0].get("msg") or ""
        if message.startswith("Value error, "):
            message = message.split(", ", 1)[1]
        if message:
            return message
    return str(exc)


def _ensure_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise InvalidPayload("Invalid request payload")
    return payload


def validate_user_payload(payload: Any) -> Dict[str, Any]:
    data = _ensure_mapping(payload)
    try:
        parsed = UserCreatePayload.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise InvalidPayload(_extract_error_message(exc))
    return parsed.model_dump()


def validate_exercise_payload(payload: Any) -> Dict[str, Any]:
    data = _ensure_mapping(payload)
    try:
        parsed = ExerciseCreatePayload.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise InvalidPayload(_extract_error_message(exc))
    return parsed.model_dump()
