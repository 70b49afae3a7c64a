from typing import Any, Dict

from flask import request


def request_payload() -> Dict[str, Any]:
    """Return the request body from JSON or form data, whichever was sent."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def query_arg(name: str):
    value = request.args.get(name)
    return value if value != "" else None
