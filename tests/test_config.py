"""
Notes API — Settings Tests
============================
"""

import pytest
from pydantic import ValidationError

from notes_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8000
    assert settings.cors_origins_list == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("log_level", "debug")
    settings = Settings(_env_file=None)
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError, match="Invalid log_level"):
        Settings(_env_file=None)


def test_port_range(monkeypatch):
    monkeypatch.setenv("PORT", "80")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_list():
    settings = Settings(
        _env_file=None,
        cors_origins="http://localhost:3000, https://notes.example.com,",
    )
    assert settings.cors_origins_list == [
        "http://localhost:3000",
        "https://notes.example.com",
    ]
