import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).resolve().parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

DEFAULT_DATABASE_URI = "sqlite:///exercise_tracker.db"
DEFAULT_PORT = 3000
VALIDATION_MODES = ("strict", "legacy")


def _resolve_database_uri() -> str:
    direct_uri = os.environ.get("DATABASE_URL")
    if direct_uri:
        return direct_uri
    return DEFAULT_DATABASE_URI


def _resolve_cors_origins() -> Union[str, List[str]]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "")
    if raw.strip() and raw.strip() != "*":
        parsed = [origin.strip() for origin in raw.split(",") if origin.strip()]
        if parsed:
            return parsed
    return "*"


def _validate_mode(raw: Any) -> str:
    mode = str(raw or "strict").strip().lower()
    if mode not in VALIDATION_MODES:
        raise ValueError(
            f"LOG_QUERY_VALIDATION must be one of {', '.join(VALIDATION_MODES)}, got {mode!r}"
        )
    return mode


def _validate_port(raw: Any) -> int:
    if raw is None or raw == "":
        return DEFAULT_PORT
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {raw!r}")


def load_config(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Build the Flask config mapping from environment variables.

    ``overrides`` are merged before validation, so an overridden key is never
    read from the environment.
    """
    config = {
        "SQLALCHEMY_DATABASE_URI": _resolve_database_uri(),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "CORS_ALLOW_ORIGINS": _resolve_cors_origins(),
        "LOG_QUERY_VALIDATION": os.environ.get("LOG_QUERY_VALIDATION"),
        "LOG_LEVEL": (os.environ.get("LOG_LEVEL") or "INFO").upper(),
        "HOST": os.environ.get("HOST", "0.0.0.0"),
        "PORT": os.environ.get("PORT"),
    }
    if overrides:
        config.update(overrides)
    config["LOG_QUERY_VALIDATION"] = _validate_mode(config["LOG_QUERY_VALIDATION"])
    config["PORT"] = _validate_port(config["PORT"])
    return config
