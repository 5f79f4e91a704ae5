"""Tests for envspec.config.settings"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from envspec.config import DEFAULT_ENV_FILE, LoaderSettings


class TestLoaderSettings:
    """Tests for LoaderSettings dataclass"""

    def test_default_values(self):
        """Test default loader settings"""
        settings = LoaderSettings()
        assert settings.env == "DEV"
        assert settings.env_file == Path(DEFAULT_ENV_FILE)
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.log_json is False
        assert settings.is_dev
        assert settings.should_load_env_file

    def test_from_env_default_prefix(self):
        """Test loading from environment with default prefix"""
        with patch.dict(os.environ, {
            "ENVSPEC_ENV": "prod",
            "ENVSPEC_ENV_FILE": "/etc/app/app.env",
            "ENVSPEC_LOG_LEVEL": "debug",
            "ENVSPEC_LOG_FILE": "/var/log/app.log",
            "ENVSPEC_LOG_JSON": "TRUE",
        }, clear=False):
            settings = LoaderSettings.from_env()
            assert settings.env == "PROD"
            assert settings.env_file == Path("/etc/app/app.env")
            assert settings.log_level == "DEBUG"
            assert settings.log_file == "/var/log/app.log"
            assert settings.log_json is True

    def test_from_env_custom_prefix(self):
        """Test loading from environment with custom prefix"""
        with patch.dict(os.environ, {
            "MYAPP_ENV": "TEST",
            "MYAPP_ENV_FILE": ".env.test",
        }, clear=False):
            settings = LoaderSettings.from_env(prefix="MYAPP")
            assert settings.is_test
            assert settings.env_file == Path(".env.test")
            assert settings.prefix == "MYAPP"

    def test_empty_env_file_uses_default(self):
        """Test an empty ENV_FILE variable falls back to .env"""
        with patch.dict(os.environ, {"ENVSPEC_ENV_FILE": ""}, clear=False):
            settings = LoaderSettings.from_env()
            assert settings.env_file == Path(".env")

    def test_string_env_file_converted(self):
        settings = LoaderSettings(env_file="conf/.env")  # type: ignore[arg-type]
        assert settings.env_file == Path("conf/.env")

    def test_prod_skips_env_file(self):
        settings = LoaderSettings(env="PROD")
        assert settings.is_prod
        assert not settings.should_load_env_file

    def test_test_mode_loads_env_file(self):
        assert LoaderSettings(env="test").should_load_env_file

    def test_invalid_env(self):
        with pytest.raises(ValueError, match="Invalid environment"):
            LoaderSettings(env="staging")

    def test_log_json_only_true_enables(self):
        """Test LOG_JSON uses the same literal the logger factory accepts"""
        with patch.dict(os.environ, {"ENVSPEC_LOG_JSON": "1", "ENVSPEC_LOG_FILE": ""}, clear=False):
            settings = LoaderSettings.from_env()
            assert settings.log_json is False
            assert settings.log_file is None

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoaderSettings(log_level="verbose")
