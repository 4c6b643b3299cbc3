"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

import pytest

from src.core import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, clean_environment):
        """Test that default values are set correctly."""
        settings = Settings()

        assert settings.app_name == "LessonDeck"
        assert settings.host == "0.0.0.0"
        assert settings.port == 7004
        assert settings.debug is False
        assert settings.webhook_url is None
        assert settings.webhook_timeout == 300

    def test_port_validation(self):
        """Test that port validation works."""
        with pytest.raises(ValueError):
            Settings(port=0)  # Below minimum

        with pytest.raises(ValueError):
            Settings(port=70000)  # Above maximum

        settings = Settings(port=8080)
        assert settings.port == 8080

    def test_webhook_timeout_validation(self):
        """Test webhook timeout bounds."""
        with pytest.raises(ValueError):
            Settings(webhook_timeout=0)

        with pytest.raises(ValueError):
            Settings(webhook_timeout=601)

        assert Settings(webhook_timeout=60).webhook_timeout == 60

    def test_log_level_normalized(self):
        """Test that log level names are upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValueError):
            Settings(log_level="chatty")

    @patch.dict(os.environ, {
        "WEBHOOK_URL": "https://automation.example.com/webhook/lesson",
        "WEBHOOK_TIMEOUT": "120",
    })
    def test_has_webhook(self):
        """Test webhook detection from the environment."""
        settings = Settings()

        assert settings.has_webhook is True
        assert settings.webhook_timeout == 120
        assert settings.generation_provider == "webhook"

    def test_no_webhook(self):
        """Test when no webhook is configured."""
        settings = Settings(webhook_url=None)

        assert settings.has_webhook is False
        assert settings.generation_provider == "sample"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_cached_instance(self):
        """Test that get_settings returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
