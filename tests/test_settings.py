"""
Configuration tests
"""

import importlib

import pytest

from users_api.config import settings

ENV_VARS = [
    "MONGODB_URI", "MONGODB_TIMEOUT_MS", "USER_REPOSITORY",
    "HOST", "PORT", "LOG_LEVEL", "ALLOWED_ORIGINS",
]


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload the settings module under a patched environment, restoring it afterwards"""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    yield lambda: importlib.reload(settings)

    monkeypatch.undo()
    importlib.reload(settings)


def test_defaults(reload_settings):
    config = reload_settings()

    assert config.MONGODB_URI == "mongodb://localhost:27017/users_api"
    assert config.PORT == 5000
    assert config.USER_REPOSITORY == "mongodb"
    assert config.ALLOWED_ORIGINS == []


def test_environment_overrides(reload_settings, monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017/people")
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("USER_REPOSITORY", "InMemory")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com,")

    config = reload_settings()

    assert config.MONGODB_URI == "mongodb://db.internal:27017/people"
    assert config.PORT == 8081
    assert config.USER_REPOSITORY == "inmemory"
    assert config.ALLOWED_ORIGINS == ["https://a.example.com", "https://b.example.com"]


def test_invalid_repository_backend(reload_settings, monkeypatch):
    monkeypatch.setenv("USER_REPOSITORY", "redis")

    with pytest.raises(ValueError, match="Invalid USER_REPOSITORY"):
        reload_settings()
