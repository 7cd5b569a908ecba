"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from utils.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("TIMEZONE", "PARTITION_KEYS_LOWERCASE", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.TIMEZONE == "Asia/Tokyo"
    assert settings.PARTITION_KEYS_LOWERCASE is False
    assert settings.LOG_FORMAT == "json"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TIMEZONE", " +09:00 ")
    monkeypatch.setenv("PARTITION_KEYS_LOWERCASE", "true")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")

    settings = Settings(_env_file=None)

    assert settings.TIMEZONE == "+09:00"
    assert settings.PARTITION_KEYS_LOWERCASE is True
    assert settings.LOG_FORMAT == "text"


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TIMEZONE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("TIMEZONE=Europe/Madrid\n", encoding="utf-8")

    assert Settings(_env_file=env_file).TIMEZONE == "Europe/Madrid"


@pytest.mark.parametrize("name, value", [("TIMEZONE", "  "), ("LOG_FORMAT", "xml")])
def test_rejects_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
