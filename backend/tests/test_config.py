"""
Notes API: Settings Tests
===========================

What:  Environment parsing and validation for Settings.
"""

import pytest
from pydantic import ValidationError

from notes_api.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "CORS_ORIGINS", "VALIDATION_STRATEGY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.validation_strategy == "manual"
    assert settings.cors_origins_list == ["*"]


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("VALIDATION_STRATEGY", "Schema")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.validation_strategy == "schema"
    assert settings.log_level == "DEBUG"


def test_cors_origins_split():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"port": 0},
        {"port": 70000},
        {"log_level": "LOUD"},
        {"validation_strategy": "zod"},
    ],
)
def test_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
