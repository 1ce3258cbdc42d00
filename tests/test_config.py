"""Tests for environment-driven settings."""

from api.config import DEFAULT_HOST, DEFAULT_PORT, Settings


def test_defaults(monkeypatch):
    for name in ("CONTACTBOOK_HOST", "CONTACTBOOK_PORT", "CONTACTBOOK_SEED", "CONTACTBOOK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings == Settings(host=DEFAULT_HOST, port=DEFAULT_PORT, seed=True, log_level="INFO")


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("CONTACTBOOK_HOST", "0.0.0.0")
    monkeypatch.setenv("CONTACTBOOK_PORT", "9000")
    monkeypatch.setenv("CONTACTBOOK_SEED", "no")
    monkeypatch.setenv("CONTACTBOOK_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.seed is False
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("CONTACTBOOK_LOG_LEVEL", "chatty")
    assert Settings.from_env().log_level == "INFO"
    monkeypatch.setenv("CONTACTBOOK_LOG_LEVEL", "warning")
    assert Settings.from_env().log_level == "WARNING"
