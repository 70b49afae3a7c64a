import os

import pytest
from app import create_app
from extensions import db


def _build_app(tmp_path, **overrides):
    database_url = os.environ.get("TEST_DATABASE_URL") or f"sqlite:///{tmp_path / 'test.db'}"
    config = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": database_url,
        "LOG_QUERY_VALIDATION": "strict",
        "CORS_ALLOW_ORIGINS": "*",
    }
    config.update(overrides)
    return create_app(config)


def _reset(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def app(tmp_path):
    app = _build_app(tmp_path)
    yield app
    _reset(app)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def legacy_client(tmp_path):
    app = _build_app(tmp_path, LOG_QUERY_VALIDATION="legacy")
    with app.test_client() as client:
        yield client
    _reset(app)
