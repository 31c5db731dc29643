"""Unit tests for Settings configuration."""

import pytest
from pydantic import ValidationError

from monad.shared.config import Settings, get_settings


class TestSettingsDefaults:
    """Test default values for Settings."""

    def test_default_logging_config(self) -> None:
        """Test default logging configuration."""
        settings = Settings()
        assert settings.log_level == "INFO"

    def test_default_deferred_error_policy(self) -> None:
        """Test deferred action errors are re-raised by default."""
        settings = Settings()
        assert settings.deferred_error_policy == "raise"


class TestSettingsValidation:
    """Test validation rules for Settings."""

    def test_deferred_error_policy_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test policy accepts only 'raise' and 'log'."""
        monkeypatch.setenv("MONAD_DEFERRED_ERROR_POLICY", "log")
        assert Settings().deferred_error_policy == "log"

        monkeypatch.setenv("MONAD_DEFERRED_ERROR_POLICY", "raise")
        assert Settings().deferred_error_policy == "raise"

        monkeypatch.setenv("MONAD_DEFERRED_ERROR_POLICY", "ignore")
        with pytest.raises(ValidationError):
            Settings()


class TestSettingsEnvironmentLoading:
    """Test loading settings from environment."""

    def test_override_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test overriding log level from environment."""
        monkeypatch.setenv("MONAD_LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_unprefixed_env_vars_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test variables without the MONAD_ prefix have no effect."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        assert Settings().log_level == "INFO"

    def test_case_insensitive_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables are case insensitive."""
        monkeypatch.setenv("monad_log_level", "WARNING")
        assert Settings().log_level == "WARNING"

    def test_extra_env_vars_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test extra environment variables are ignored."""
        monkeypatch.setenv("MONAD_UNKNOWN_SETTING", "value")
        Settings()  # Should not raise


class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_same_instance(self) -> None:
        """Test get_settings is cached."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test clearing the cache picks up new environment values."""
        before = get_settings()
        monkeypatch.setenv("MONAD_DEFERRED_ERROR_POLICY", "log")
        get_settings.cache_clear()
        after = get_settings()
        assert after is not before
        assert after.deferred_error_policy == "log"
