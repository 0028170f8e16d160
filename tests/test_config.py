import pytest

from bunkmeter.core.config import AppSettings, ConfigurationError, load_app_settings


def test_defaults(monkeypatch):
    for key in ("HOST", "PORT", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(key, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8000
    assert settings.LOG_LEVEL == "INFO"
    assert settings.DEBUG is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "10000")
    monkeypatch.setenv("DEBUG", "true")

    settings = load_app_settings()

    assert settings.PORT == 10000
    assert settings.DEBUG is True


def test_bad_value_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(ConfigurationError):
        load_app_settings()
