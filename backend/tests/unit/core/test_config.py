"""Tests for environment-driven configuration selection."""

from __future__ import annotations

import pytest

from todolist.core.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    env_list,
    get_config,
)


@pytest.mark.parametrize(
    "value, expected",
    [("production", ProductionConfig), ("TESTING", TestingConfig), ("weird", DevelopmentConfig)],
)
def test_get_config_reads_app_env(monkeypatch, value, expected) -> None:
    monkeypatch.setenv("APP_ENV", value)
    assert get_config() is expected


def test_env_helpers(monkeypatch) -> None:
    monkeypatch.setenv("FLAG", "yes")
    monkeypatch.setenv("LOCALES", "en, fr ,,de")
    assert env_bool("FLAG") is True
    assert env_bool("MISSING_FLAG", default=True) is True
    assert env_list("LOCALES", "en") == ("en", "fr", "de")


def test_testing_config_is_isolated() -> None:
    assert TestingConfig.SQLALCHEMY_DATABASE_URI.startswith("sqlite")
    assert TestingConfig.USE_PROXYFIX is False
    assert ProductionConfig.SESSION_COOKIE_SECURE is True
