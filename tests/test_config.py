import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("dev", "config.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_production_reads_database_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_HOST", "db.campus")
    monkeypatch.setenv("DATABASE_USER", "campus")
    monkeypatch.setenv("DATABASE_PASSWORD", "s3cret")

    import config.production as production

    production = importlib.reload(production)

    assert production.DB_CONFIG["host"] == "db.campus"
    assert production.DB_CONFIG["user"] == "campus"
    assert production.DB_CONFIG["password"] == "s3cret"
    assert production.DEBUG is False
