"""Unit tests for Settings model validation and behavior."""

import os
import tempfile

import pytest
from pydantic import ValidationError

from todolists.models.settings import Settings


class TestSettingsDefaults:
    """Test Settings model default values."""

    def test_settings_has_sensible_defaults(self):
        settings = Settings()

        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.session_lifetime_days == 31
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.sentry_dsn is None

    def test_secret_key_is_generated(self):
        """Test that each Settings gets its own random secret key."""
        first = Settings()
        second = Settings()

        assert len(first.secret_key) == 64
        assert first.secret_key != second.secret_key


class TestSettingsValidation:
    """Test field validation."""

    def test_short_secret_key_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(secret_key="short")

        assert "at least 16 characters" in str(exc_info.value)

    def test_log_level_is_case_insensitive(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_port_must_be_in_range(self):
        with pytest.raises(ValidationError):
            Settings(port=0)

    def test_session_lifetime_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(session_lifetime_days=0)


class TestSettingsEnvFile:
    """Test loading settings from a .env file."""

    def test_missing_file_without_validation_gives_defaults(self):
        settings = Settings.from_env_file("/nonexistent/.env", validate=False)
        assert settings.port == 8080

    def test_missing_file_with_validation_raises(self):
        with pytest.raises(FileNotFoundError):
            Settings.from_env_file("/nonexistent/.env")

    def test_values_are_converted(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            env_file = os.path.join(tmpdir, ".env")
            with open(env_file, "w") as f:
                f.write("PORT=9000\n")
                f.write("DEBUG=yes\n")
                f.write("SECRET_KEY=a-long-enough-secret-key\n")

            settings = Settings.from_env_file(env_file)

        assert settings.port == 9000
        assert settings.debug is True
        assert settings.secret_key == "a-long-enough-secret-key"

    def test_to_env_dict_skips_none_values(self):
        env_dict = Settings(port=9000).to_env_dict()

        assert env_dict["PORT"] == "9000"
        assert "SECRET_KEY" in env_dict
        assert "SENTRY_DSN" not in env_dict
