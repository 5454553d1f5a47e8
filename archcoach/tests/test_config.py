"""
Tests for configuration settings.
"""

import pytest
from pathlib import Path
from unittest.mock import patch
import os

from archcoach.config import Settings, get_settings, DEFAULT_ARCHITECTURE_DEFS_PATH


class TestSettings:
    """Tests for Settings class."""

    def test_default_settings(self):
        """Test default settings values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_name == "Architecture Interview Coach"
        assert settings.debug is False
        assert settings.anthropic_api_key == ""
        assert settings.persistence_enabled is True
        assert settings.database_url == ""
        assert settings.frontend_origin == "http://localhost:5173"

    def test_settings_from_env(self):
        """Test settings loaded from environment variables."""
        with patch.dict(os.environ, {
            "ANTHROPIC_API_KEY": "sk-test",
            "PERSISTENCE_ENABLED": "false",
            "FRONTEND_ORIGIN": "https://coach.example.com",
            "MODEL_MAX_TOKENS": "512",
        }):
            settings = Settings(_env_file=None)
            assert settings.anthropic_api_key == "sk-test"
            assert settings.persistence_enabled is False
            assert settings.frontend_origin == "https://coach.example.com"
            assert settings.model_max_tokens == 512

    def test_rate_limit_defaults(self):
        """Test rate limit default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.rate_limit_enabled is True
        assert settings.rate_limit_chat_per_minute == 30
        assert settings.rate_limit_evaluate_per_hour == 30

    def test_architecture_defs_path_defaults_to_packaged_catalog(self):
        """Without an override the packaged whitelist is used."""
        settings = Settings(_env_file=None, architecture_defs_path="")

        assert settings.resolve_architecture_defs_path() == DEFAULT_ARCHITECTURE_DEFS_PATH
        assert DEFAULT_ARCHITECTURE_DEFS_PATH.exists()

    def test_architecture_defs_path_override(self):
        """An explicit path wins over the packaged catalog."""
        settings = Settings(_env_file=None, architecture_defs_path="/etc/coach/defs.json")

        assert settings.resolve_architecture_defs_path() == Path("/etc/coach/defs.json")

    def test_get_settings_cached(self):
        """Test that get_settings returns cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        # Should return same cached instance
        assert settings1 is settings2
