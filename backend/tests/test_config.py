import pytest
from app import create_app
from config import load_config
from extensions import db


def test_load_config_defaults(monkeypatch):
    for name in ("LOG_QUERY_VALIDATION", "PORT", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()
    assert config["LOG_QUERY_VALIDATION"] == "strict"
    assert config["PORT"] == 3000


def test_load_config_rejects_invalid_environment(monkeypatch):
    monkeypatch.setenv("LOG_QUERY_VALIDATION", "lenient")
    with pytest.raises(ValueError):
        load_config()

    monkeypatch.delenv("LOG_QUERY_VALIDATION")
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValueError):
        load_config()


def test_overrides_replace_invalid_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_QUERY_VALIDATION", "lenient")
    monkeypatch.setenv("PORT", "not-a-port")

    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'config.db'}",
            "LOG_QUERY_VALIDATION": "LEGACY",
            "PORT": "8080",
        }
    )

    assert app.config["LOG_QUERY_VALIDATION"] == "legacy"
    assert app.config["PORT"] == 8080
    with app.app_context():
        db.engine.dispose()
