"""Tests for runtime settings loading and validation."""

from __future__ import annotations

import pytest

from vessel_ledger.config import AppSettings, SettingsLoadError, config_load_database_url, config_load_settings


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load settings from environment variables with normalization.

    Returns:
        None: Assertions validate loaded values.

    Raises:
        AssertionError: Raised when environment values are ignored.
    """

    monkeypatch.setenv("ENVIRONMENT_NAME", " staging ")
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://book:secret@db:5432/book")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("INCLUDE_ROLLED_VESSELS", "true")

    settings = config_load_settings()

    assert settings.environment_name == "staging"
    assert settings.database_url == "postgresql+psycopg://book:secret@db:5432/book"
    assert settings.log_level == "DEBUG"
    assert settings.include_rolled_vessels is True
    assert settings.database_echo_sql is False


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for invalid configuration.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when invalid settings load.
    """

    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_settings_reject_blank_database_url() -> None:
    """Reject blank database URLs at construction.

    Returns:
        None: Assertions validate field validation.

    Raises:
        AssertionError: Raised when a blank URL is accepted.
    """

    with pytest.raises(ValueError):
        AppSettings(database_url="   ")


def test_config_load_database_url_rejects_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail migration URL loading for a blank DATABASE_URL.

    Returns:
        None: Assertions validate migration URL loading.

    Raises:
        AssertionError: Raised when a blank URL is returned.
    """

    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://book@db/book")
    assert config_load_database_url() == "postgresql+psycopg://book@db/book"

    monkeypatch.setenv("DATABASE_URL", " ")
    with pytest.raises(SettingsLoadError):
        config_load_database_url()
