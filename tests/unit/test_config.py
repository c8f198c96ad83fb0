"""Unit tests for config loading behavior."""

import os
import tempfile
from datetime import timedelta
from unittest.mock import patch

from todolists.config import Config
from todolists.config import env_bool
from todolists.config import save_settings_to_env
from todolists.models.settings import Settings


class TestConfigDefaults:
    """Test Config class default values."""

    def test_config_has_required_fields(self):
        required_fields = [
            "DEBUG",
            "LOG_LEVEL",
            "SECRET_KEY",
            "HOST",
            "PORT",
            "PERMANENT_SESSION_LIFETIME",
            "WTF_CSRF_ENABLED",
        ]

        for field in required_fields:
            assert hasattr(Config, field), f"Config missing required field: {field}"

    def test_config_wtf_settings(self):
        assert Config.WTF_CSRF_ENABLED is True
        assert Config.WTF_CSRF_TIME_LIMIT is None

    def test_session_cookie_secure_follows_debug(self):
        assert Config.SESSION_COOKIE_SECURE == (not Config.DEBUG)

    def test_session_lifetime_is_a_timedelta(self):
        assert isinstance(Config.PERMANENT_SESSION_LIFETIME, timedelta)

    def test_secret_key_is_set(self):
        assert Config.SECRET_KEY


class TestEnvBool:
    """Test the env_bool helper."""

    def test_env_bool_parses_boolean_values(self):
        test_cases = [
            ("true", True),
            ("True", True),
            ("1", True),
            ("yes", True),
            ("on", True),
            ("false", False),
            ("0", False),
            ("no", False),
            ("", False),
        ]

        for value, expected in test_cases:
            with patch.dict(os.environ, {"TEST_BOOL": value}):
                assert env_bool("TEST_BOOL") == expected, f"Failed for value: {value}"

    def test_env_bool_uses_default_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert env_bool("TEST_BOOL", True) is True
            assert env_bool("TEST_BOOL") is False


class TestSaveSettingsToEnv:
    """Test save_settings_to_env() function."""

    def test_writes_env_format(self):
        settings = Settings(port=9000, secret_key="a-long-enough-secret-key")

        with tempfile.TemporaryDirectory() as tmpdir:
            env_path = os.path.join(tmpdir, ".env")
            save_settings_to_env(settings, env_path=env_path)

            with open(env_path, "r") as f:
                content = f.read()

        assert "PORT=9000" in content
        assert "SECRET_KEY=a-long-enough-secret-key" in content
        assert "SENTRY_DSN" not in content

    def test_defaults_to_working_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            original_cwd = os.getcwd()
            try:
                os.chdir(tmpdir)

                save_settings_to_env(Settings())

                assert os.path.exists(os.path.join(tmpdir, ".env"))
            finally:
                os.chdir(original_cwd)

    def test_saved_file_loads_back(self):
        settings = Settings(port=9000, session_lifetime_days=7)

        with tempfile.TemporaryDirectory() as tmpdir:
            env_path = os.path.join(tmpdir, ".env")
            save_settings_to_env(settings, env_path=env_path)
            loaded = Settings.from_env_file(env_path)

        assert loaded.port == 9000
        assert loaded.session_lifetime_days == 7
        assert loaded.secret_key == settings.secret_key
