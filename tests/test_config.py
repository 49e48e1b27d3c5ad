from dataclasses import fields

from opensky.config import DEFAULT_BASE_URL, Settings


def test_settings_defaults(monkeypatch):
    for name in (
        "OPENSKY_BASE_URL",
        "OPENSKY_TIMEOUT",
        "OPENSKY_USERNAME",
        "OPENSKY_PASSWORD",
        "OPENSKY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 300.0
    assert settings.username is None
    assert settings.password is None
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("OPENSKY_BASE_URL", "http://localhost:8080/api")
    monkeypatch.setenv("OPENSKY_TIMEOUT", "12.5")
    monkeypatch.setenv("OPENSKY_USERNAME", "user")
    monkeypatch.setenv("OPENSKY_PASSWORD", "secret")

    settings = Settings()

    assert settings.base_url == "http://localhost:8080/api"
    assert settings.timeout == 12.5
    assert settings.username == "user"
    assert settings.password == "secret"


def test_settings_ignore_empty_and_invalid_values(monkeypatch):
    monkeypatch.setenv("OPENSKY_USERNAME", "")
    monkeypatch.setenv("OPENSKY_TIMEOUT", "soon")

    settings = Settings()

    assert settings.username is None
    assert settings.timeout == 300.0


def test_settings_fields():
    assert [f.name for f in fields(Settings)] == [
        "base_url",
        "timeout",
        "username",
        "password",
        "log_level",
    ]
    assert not hasattr(Settings(), "has_credentials")
