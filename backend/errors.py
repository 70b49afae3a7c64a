from typing import Optional

from flask import jsonify


class ApiError(Exception):
    """Error surfaced to the caller as ``{"error": message}`` with ``status``."""

    code = "bad_request"
    status = 400

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status is not None:
            self.status = status


class InvalidIdentifier(ApiError):
    code = "invalid_identifier"


class UserNotFound(ApiError):
    code = "user_not_found"
    status = 404


class InvalidDate(ApiError):
    code = "invalid_date"


class InvalidLimit(ApiError):
    code = "invalid_limit"


class InvalidRange(ApiError):
    code = "invalid_range"


class InvalidPayload(ApiError):
    code = "invalid_payload"


class UsernameTaken(ApiError):
    code = "username_taken"
    status = 409

    def __init__(self, message: str = "Username already taken", **kwargs):
        super().__init__(message, **kwargs)


class StoreFailure(ApiError):
    code = "store_failure"
    status = 500

    def __init__(self, message: str = "Internal Server Error", **kwargs):
        super().__init__(message, **kwargs)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status
