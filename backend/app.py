import logging
import sys
import time
from pathlib import Path
from typing import Any, Mapping, Optional

import click
import structlog
from flask import Flask, Response, g, request, send_from_directory
from flask.cli import with_appcontext
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import models  # noqa: F401 - ensure models registered
from config import load_config
from controllers import register_controllers
from errors import ApiError, error_response
from extensions import db

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"

logger = structlog.get_logger("exercise_tracker.backend")


def configure_logging(level_name: str = "INFO") -> None:
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    structlog.configure(
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


class ExerciseTrackerFlask(Flask):
    def run(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        debug: Optional[bool] = None,
        load_dotenv: bool = True,
        **options,
    ) -> None:
        if host is None:
            host = self.config["HOST"]
        if port is None:
            port = self.config["PORT"]
        logger.info("server.listening", host=host, port=port)
        super().run(host=host, port=port, debug=debug, load_dotenv=load_dotenv, **options)


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_request_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response):
        started = getattr(g, "request_started", None)
        duration_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.bind(
            method=request.method,
            path=request.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        ).info("request.completed")
        return response


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError):
        log_method = logger.error if error.status >= 500 else logger.warning
        log_method(
            "request.api_error",
            status_code=error.status,
            error_code=error.code,
            message=error.message,
        )
        return error_response(error.message, error.status)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        status = exc.code or 500
        message = exc.description or exc.name or "HTTP error"
        logger.warning("request.http_exception", status_code=status, description=message)
        return error_response(message, status)

    @app.errorhandler(Exception)
    def handle_unexpected_exception(exc: Exception):
        logger.bind(status_code=400).exception("request.unhandled_exception", error=str(exc))
        return error_response(str(exc) or "An error occurred", 400)


def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    config = load_config(config_overrides)
    configure_logging(config["LOG_LEVEL"])

    app = ExerciseTrackerFlask(
        __name__,
        static_folder=str(PUBLIC_DIR),
        static_url_path="",
    )
    app.config.update(config)
    app.json.sort_keys = False

    CORS(app, origins=app.config["CORS_ALLOW_ORIGINS"])

    db.init_app(app)
    with app.app_context():
        db.create_all()

    @app.get("/")
    def home():
        return send_from_directory(VIEWS_DIR, "index.html")

    @app.cli.command("init-db")
    @with_appcontext
    def init_db_command():
        """Create the users and exercises tables if they are missing."""
        db.create_all()
        click.echo(f"Initialized database at {app.config['SQLALCHEMY_DATABASE_URI']}")

    _register_request_logging(app)
    _register_error_handlers(app)
    register_controllers(app)
    return app


if __name__ == "__main__":
    create_app().run()
