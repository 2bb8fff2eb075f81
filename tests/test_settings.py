"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from objects_api.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("DATABASE_URL", "PORT", "HOST", "DEBUG", "CORS_ORIGINS", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


def test_database_url_is_required():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_database_url_is_rejected(monkeypatch: pytest.MonkeyPatch, value: str):
    monkeypatch.setenv("DATABASE_URL", value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/objects")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.health_timeout == 2.0
    assert settings.query_timeout == 5.0
    assert settings.startup_ping_timeout == 5.0
    assert settings.cors_origins == []


def test_port_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/objects")
    monkeypatch.setenv("PORT", "9090")

    assert Settings(_env_file=None).port == 9090


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=postgresql://db.internal/objects\nPORT=7000\n")

    settings = Settings(_env_file=env_file)

    assert settings.database_url == "postgresql://db.internal/objects"
    assert settings.port == 7000


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgresql://u:p@h:5432/db", "postgresql+asyncpg://u:p@h:5432/db"),
        ("postgres://u:p@h:5432/db", "postgresql+asyncpg://u:p@h:5432/db"),
        ("postgresql+asyncpg://u:p@h:5432/db", "postgresql+asyncpg://u:p@h:5432/db"),
    ],
)
def test_async_database_url(url: str, expected: str):
    assert Settings(database_url=url, _env_file=None).async_database_url == expected


def test_cors_origins_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/objects")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.com, http://localhost:3000,")

    assert Settings(_env_file=None).cors_origins == ["https://a.com", "http://localhost:3000"]
